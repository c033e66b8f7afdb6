from __future__ import annotations

from pathlib import Path


class StoreError(Exception):
    """Base class for failures raised by the JSON document stores."""

    def __init__(self, message: str, *, path: Path | None = None):
        super().__init__(message)
        self.path = path


class CorruptStoreError(StoreError):
    """The file exists but is not a valid document of the expected shape."""


class WriteFailure(StoreError):
    """Persisting a document (temp write or replace) failed."""


class InitializationError(StoreError):
    """Directory creation or the warm-up read failed during initialize()."""
