from __future__ import annotations

from typing import Callable, Protocol, TypeVar

from pydantic import BaseModel

D = TypeVar("D", bound=BaseModel)


class DocumentStore(Protocol[D]):
    """
    Minimal DB-friendly interface: a single typed JSON document persisted under a key.
    """

    def read(self) -> D:
        """Return the current document (default when nothing is persisted yet)."""
        ...

    def update(self, mutator: Callable[[D], D]) -> D:
        """Atomically load, transform and persist the document; return the new value."""
        ...


class AsyncDocumentStore(Protocol[D]):
    async def read(self) -> D: ...
    async def update(self, mutator: Callable[[D], D]) -> D: ...
