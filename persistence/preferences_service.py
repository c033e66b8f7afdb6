from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from .disk_store import DiskJsonDocumentStore
from .errors import InitializationError
from .paths import config_dir, ensure_dir, preferences_path
from .preferences_state import DEFAULT_PREFERENCES, Preferences, PreferencesDocument, default_document
from .repositories import AsyncDiskJsonDocumentStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreferencesReadResult:
    """
    Outcome of a best-effort read. `recovered` is True when the stored document
    could not be used and the defaults were substituted; `error` holds the cause.
    """

    preferences: Preferences
    recovered: bool = False
    error: Exception | None = None


class PreferencesService:
    """
    Preferences on top of a single JSON document store.

    Reads are best effort (defaults on any failure); updates and initialization
    propagate their errors so callers never assume an unsaved change was kept.
    """

    def __init__(self, config_base_dir: Path | str | None = None) -> None:
        self._initialized = False
        self._initialize_paths(config_base_dir)

    def _initialize_paths(self, config_base_dir: Path | str | None) -> None:
        self._config_dir = config_dir(config_base_dir)
        self._db_path = preferences_path(self._config_dir)
        self._store: AsyncDiskJsonDocumentStore[PreferencesDocument] = AsyncDiskJsonDocumentStore(
            DiskJsonDocumentStore(self._db_path, PreferencesDocument, default_document)
        )

    @property
    def config_dir(self) -> Path:
        return self._config_dir

    @property
    def db_path(self) -> Path:
        return self._db_path

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def reinitialize_paths(self, config_base_dir: Path | str | None = None) -> None:
        """Point the service at a different base directory (tests, embedding)."""
        self._initialized = False
        self._initialize_paths(config_base_dir)

    async def initialize(self) -> None:
        if self._initialized:
            return
        try:
            ensure_dir(self._config_dir)
            await self._store.read()
        except Exception as e:
            logger.exception("Failed to initialize preferences at %s", self._db_path)
            raise InitializationError(
                f"Preferences initialization failed: {e!r}", path=self._db_path
            ) from e
        self._initialized = True
        logger.info("Preferences initialized at %s", self._db_path)

    async def read_preferences(self) -> PreferencesReadResult:
        try:
            await self.initialize()
            doc = await self._store.read()
        except Exception as e:
            logger.error("Failed to get preferences, using defaults: %r", e)
            return PreferencesReadResult(
                preferences=DEFAULT_PREFERENCES.model_copy(deep=True), recovered=True, error=e
            )
        return PreferencesReadResult(preferences=doc.preferences)

    async def get_preferences(self) -> Preferences:
        result = await self.read_preferences()
        return result.preferences

    async def update_preferences(self, updates: Mapping[str, Any]) -> Preferences:
        # No initialize() here: the store creates the directory on write.
        doc = await self._store.update(lambda current: current.with_preferences(updates))
        logger.debug("Updated preferences keys=%s", sorted(updates))
        return doc.preferences

    async def get_document(self) -> PreferencesDocument:
        """Full document including metadata. Unlike get_preferences(), errors propagate."""
        return await self._store.read()


def create_preferences_service(config_base_dir: Path | str | None = None) -> PreferencesService:
    return PreferencesService(config_base_dir)
