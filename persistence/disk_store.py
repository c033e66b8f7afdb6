from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from pydantic import ValidationError

from json_store import atomic_write_json, read_json

from .errors import CorruptStoreError, WriteFailure
from .interfaces import D, DocumentStore
from .locks import GLOBAL_PATH_SLOTS

logger = logging.getLogger(__name__)


class DiskJsonDocumentStore(DocumentStore[D]):
    """
    Stores a single typed JSON document on disk at a fixed path.

    - Missing file: read() returns the default document (kept in memory, not written).
    - Invalid file: raises CorruptStoreError, never a partial document.
    - Writes atomically (temp file + replace); the cache only changes after a successful write.
    - All instances bound to one resolved path share a lock and the cached document,
      so an update through one instance is seen by the others.
    """

    def __init__(self, path: Path, model: type[D], default_factory: Callable[[], D]):
        self._path = path
        self._model = model
        self._default_factory = default_factory
        self._slot = GLOBAL_PATH_SLOTS.slot_for(path)

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> D:
        with self._slot.lock:
            return self._current().model_copy(deep=True)

    def update(self, mutator: Callable[[D], D]) -> D:
        with self._slot.lock:
            current = self._current()
            updated = mutator(current.model_copy(deep=True))
            if not isinstance(updated, self._model):
                raise TypeError(
                    f"mutator must return {self._model.__name__}, got {type(updated).__name__}"
                )
            self._persist(updated)
            return updated.model_copy(deep=True)

    # Callers must hold the path lock.
    def _current(self) -> D:
        cached = self._slot.cached
        # Another instance on this path may have cached a different model type.
        if not isinstance(cached, self._model):
            cached = self._slot.cached = self._load()
        return cached

    def _load(self) -> D:
        try:
            raw = read_json(self._path)
        except ValueError as e:
            logger.warning("Corrupt JSON document at %s: %r", self._path, e)
            raise CorruptStoreError(f"{self._path} is not valid JSON", path=self._path) from e

        if raw is None:
            logger.debug("No document at %s; using defaults", self._path)
            return self._default_factory()

        if not isinstance(raw, dict):
            raise CorruptStoreError(
                f"{self._path} must contain a JSON object, got {type(raw).__name__}",
                path=self._path,
            )

        try:
            return self._model.model_validate(raw)
        except ValidationError as e:
            logger.warning("Invalid %s document at %s: %s", self._model.__name__, self._path, e)
            raise CorruptStoreError(
                f"{self._path} does not match the {self._model.__name__} schema",
                path=self._path,
            ) from e

    def _persist(self, doc: D) -> None:
        try:
            atomic_write_json(self._path, doc.model_dump(mode="json"))
        except OSError as e:
            logger.error("Failed to write %s: %r", self._path, e)
            raise WriteFailure(f"failed to write {self._path}: {e}", path=self._path) from e
        self._slot.cached = doc.model_copy(deep=True)
        logger.debug("Wrote %s", self._path)
