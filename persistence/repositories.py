from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Callable

from .disk_store import DiskJsonDocumentStore
from .interfaces import AsyncDocumentStore, D


class AsyncDiskJsonDocumentStore(AsyncDocumentStore[D]):
    """
    Async wrapper around the disk-backed document store.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O.

    The whole read-modify-write of update() runs in one worker thread while it
    holds the path lock, so concurrent coroutines are serialized there.
    """

    def __init__(self, store: DiskJsonDocumentStore[D]) -> None:
        self._store = store

    @property
    def path(self) -> Path:
        return self._store.path

    async def read(self) -> D:
        return await asyncio.to_thread(self._store.read)

    async def update(self, mutator: Callable[[D], D]) -> D:
        return await asyncio.to_thread(self._store.update, mutator)
