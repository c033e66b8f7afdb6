from __future__ import annotations

from .disk_store import DiskJsonDocumentStore
from .errors import CorruptStoreError, InitializationError, StoreError, WriteFailure
from .preferences_service import PreferencesReadResult, PreferencesService, create_preferences_service
from .preferences_state import DEFAULT_PREFERENCES, Preferences, PreferencesDocument, PreferencesMetadata
from .repositories import AsyncDiskJsonDocumentStore

__all__ = [
    "DiskJsonDocumentStore",
    "AsyncDiskJsonDocumentStore",
    "StoreError",
    "CorruptStoreError",
    "WriteFailure",
    "InitializationError",
    "PreferencesService",
    "PreferencesReadResult",
    "create_preferences_service",
    "DEFAULT_PREFERENCES",
    "Preferences",
    "PreferencesDocument",
    "PreferencesMetadata",
]
