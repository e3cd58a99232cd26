import json
import os

import pytest

from studio.core.errors import StorageFailure, ValidationError
from studio.site_config import DEFAULT_SITE_CONFIG, FileOverrideBackend, SiteConfigStore, StoreState


def _store(path, defaults=None):
    return SiteConfigStore(FileOverrideBackend(str(path)), defaults or DEFAULT_SITE_CONFIG)


def test_missing_file_loads_empty_overrides(overrides_path):
    store = _store(overrides_path)
    assert store.state == StoreState.UNINITIALIZED

    store.load()

    assert store.state == StoreState.READY
    assert store.overrides == {}
    assert store.get() == DEFAULT_SITE_CONFIG


def test_corrupt_file_still_ends_ready_with_defaults(overrides_path):
    overrides_path.parent.mkdir(parents=True)
    overrides_path.write_text("{not json", encoding="utf-8")

    store = _store(overrides_path).load()

    assert store.state == StoreState.READY
    assert store.overrides == {}
    assert store.get()["contact"]["business"]["name"] == DEFAULT_SITE_CONFIG["contact"]["business"]["name"]


def test_bulk_update_persists_merged_overrides(site_config, overrides_path):
    site_config.apply_bulk_update({"contact": {"business": {"name": "Lens & Light"}}})
    site_config.apply_bulk_update({"contact": {"business": {"phone": "+27 21 000 0000"}}})

    on_disk = json.loads(overrides_path.read_text(encoding="utf-8"))
    assert on_disk == {"contact": {"business": {"name": "Lens & Light", "phone": "+27 21 000 0000"}}}

    effective = site_config.get()
    assert effective["contact"]["business"]["name"] == "Lens & Light"
    assert effective["contact"]["business"]["email"] == DEFAULT_SITE_CONFIG["contact"]["business"]["email"]


def test_overrides_survive_restart(site_config, overrides_path):
    site_config.apply_bulk_update({"portfolio": {"featured": {"imageCount": 12}}})

    restarted = _store(overrides_path).load()

    assert restarted.get()["portfolio"]["featured"]["imageCount"] == 12
    assert restarted.get()["portfolio"]["featured"]["layoutStyle"] == "square"


def test_override_file_is_human_diffable(site_config, overrides_path):
    site_config.apply_bulk_update({"home": {"hero": {"interval": 4000}}})

    text = overrides_path.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert '\n  "home": {' in text


def test_crash_before_rename_leaves_file_and_memory_untouched(site_config, overrides_path, monkeypatch):
    site_config.apply_bulk_update({"contact": {"business": {"name": "Before"}}})
    before_bytes = overrides_path.read_bytes()

    def crash(src, dst):
        raise OSError("simulated crash before rename")

    monkeypatch.setattr(os, "replace", crash)

    with pytest.raises(StorageFailure):
        site_config.apply_bulk_update({"contact": {"business": {"name": "After"}}})

    monkeypatch.undo()
    assert overrides_path.read_bytes() == before_bytes
    assert site_config.get()["contact"]["business"]["name"] == "Before"
    assert _store(overrides_path).load().get()["contact"]["business"]["name"] == "Before"
    # The temp file was cleaned up
    assert sorted(p.name for p in overrides_path.parent.iterdir()) == [overrides_path.name]


def test_failed_write_rejects_whole_update(overrides_path):
    class BrokenBackend(FileOverrideBackend):
        def write(self, document):
            raise PermissionError("read-only volume")

    store = SiteConfigStore(BrokenBackend(str(overrides_path)), DEFAULT_SITE_CONFIG).load()

    with pytest.raises(StorageFailure):
        store.apply_bulk_update({"home": {"hero": {"slides": []}}})

    assert store.overrides == {}
    assert store.get()["home"]["hero"]["slides"] == DEFAULT_SITE_CONFIG["home"]["hero"]["slides"]


def test_get_returns_independent_copy(site_config):
    document = site_config.get()
    document["contact"]["business"]["name"] = "Mutated by caller"
    document["home"]["hero"]["slides"].clear()

    fresh = site_config.get()
    assert fresh["contact"]["business"]["name"] == DEFAULT_SITE_CONFIG["contact"]["business"]["name"]
    assert len(fresh["home"]["hero"]["slides"]) == len(DEFAULT_SITE_CONFIG["home"]["hero"]["slides"])


def test_path_update(site_config):
    site_config.apply_path_update("contact.hours.note", "Closed on public holidays.")
    assert site_config.get()["contact"]["hours"]["note"] == "Closed on public holidays."
    assert site_config.overrides == {"contact": {"hours": {"note": "Closed on public holidays."}}}


def test_non_object_update_is_rejected(site_config):
    with pytest.raises(ValidationError):
        site_config.apply_bulk_update(["not", "an", "object"])
