"""
Site Configuration Store

Holds the editable site-content document. The effective document is always
``deep_merge(defaults, overrides)``; only the overrides are persisted, as one
human-diffable JSON file.

The store is built once at startup (see ``studio.main``) and handed to the
request handlers through ``studio.api.deps.get_site_config_store``.
"""
import copy
import json
import logging
import os
import tempfile
import threading
from enum import Enum
from typing import Any, Dict, Optional

from studio.core.errors import StorageFailure, ValidationError

logger = logging.getLogger(__name__)


def deep_merge(target: Optional[Dict[str, Any]], source: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Merge ``source`` over ``target`` and return a new dict.

    Plain objects merge key by key, recursively. Everything else in ``source``
    (lists, scalars, None) replaces the value in ``target`` wholesale. Lists
    are never merged element-wise: editors always send the complete list.
    Keys only present in ``target`` are kept. Neither argument is mutated.
    """
    result = dict(target or {})
    for key, value in (source or {}).items():
        if isinstance(value, dict):
            existing = result.get(key)
            result[key] = deep_merge(existing if isinstance(existing, dict) else {}, value)
        else:
            result[key] = value
    return result


def expand_path(path: str, value: Any) -> Dict[str, Any]:
    """``expand_path("contact.business.name", "X")`` -> ``{"contact": {"business": {"name": "X"}}}``"""
    keys = path.split(".")
    if not path or any(not key.strip() for key in keys):
        raise ValidationError(f"Invalid config path '{path}'", field="path")
    partial: Any = value
    for key in reversed(keys):
        partial = {key: partial}
    return partial


class StoreState(str, Enum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"


class FileOverrideBackend:
    """
    Durable storage for the override document: one JSON file.

    Writes go to a temp file in the same directory, are fsynced, then
    ``os.replace``-d over the real file, so readers only ever see the old or
    the new complete document.
    """

    def __init__(self, path: str):
        self.path = path

    def read(self) -> Dict[str, Any]:
        """Return the stored overrides, ``{}`` when the file does not exist yet."""
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except FileNotFoundError:
            logger.info("No site config overrides at %s, starting with empty overrides", self.path)
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not contain a JSON object")
        return data

    def write(self, document: Dict[str, Any]) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            prefix=os.path.basename(self.path) + ".", suffix=".tmp", dir=directory
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(document, fh, indent=2, ensure_ascii=False)
                fh.write("\n")
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_path, self.path)
        except BaseException:
            # Leave the previous file untouched and clean up after ourselves
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise


class SiteConfigStore:
    """
    Process-wide site configuration.

    Lifecycle: ``UNINITIALIZED -> LOADING -> READY``. A load failure still
    ends in ``READY`` with empty overrides so the site keeps serving the
    defaults. Only ``apply_bulk_update`` mutates the in-memory overrides, and
    only after the durable write succeeded.
    """

    def __init__(self, backend: FileOverrideBackend, defaults: Dict[str, Any]):
        self.backend = backend
        self.defaults = copy.deepcopy(defaults)
        self.state = StoreState.UNINITIALIZED
        self._overrides: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def load(self) -> "SiteConfigStore":
        self.state = StoreState.LOADING
        try:
            self._overrides = self.backend.read()
            logger.info("Loaded site config overrides: %s", sorted(self._overrides))
        except Exception:
            logger.exception("Failed to load site config overrides, serving defaults only")
            self._overrides = {}
        self.state = StoreState.READY
        return self

    @property
    def overrides(self) -> Dict[str, Any]:
        return copy.deepcopy(self._overrides)

    def get(self) -> Dict[str, Any]:
        """The effective document. Callers get their own copy."""
        return copy.deepcopy(deep_merge(self.defaults, self._overrides))

    def apply_bulk_update(self, partial: Dict[str, Any]) -> Dict[str, Any]:
        """
        Deep-merge ``partial`` into the overrides and persist the result.

        Returns the new overrides. On a storage error the in-memory overrides
        are unchanged and ``StorageFailure`` is raised.
        """
        if not isinstance(partial, dict):
            raise ValidationError("Update body must be a JSON object", field="body")

        with self._lock:
            merged = deep_merge(self._overrides, partial)
            try:
                self.backend.write(merged)
            except Exception as exc:
                logger.exception("Failed to persist site config overrides to %s", self.backend.path)
                raise StorageFailure(f"Could not write site config overrides: {exc}") from exc
            self._overrides = merged

        logger.info("Site config overrides updated: %s", sorted(partial))
        return copy.deepcopy(merged)

    def apply_path_update(self, path: str, value: Any) -> Dict[str, Any]:
        return self.apply_bulk_update(expand_path(path, value))
