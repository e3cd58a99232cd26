from .defaults import DEFAULT_SITE_CONFIG
from .store import FileOverrideBackend, SiteConfigStore, StoreState, deep_merge, expand_path

__all__ = [
    "DEFAULT_SITE_CONFIG",
    "FileOverrideBackend", "SiteConfigStore", "StoreState",
    "deep_merge", "expand_path",
]
