from __future__ import annotations

import threading
import weakref
from pathlib import Path
from typing import Any


class PathSlot:
    """
    Per-file state shared by every store bound to the same resolved path:
    the lock that serializes load -> mutate -> persist, and the cached document.
    """

    __slots__ = ("lock", "cached", "__weakref__")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.cached: Any | None = None


class PathSlotRegistry:
    """
    Hands out one PathSlot per resolved path. Slots are held weakly: a slot
    lives as long as some store references it, then drops out of the registry.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._slots: weakref.WeakValueDictionary[str, PathSlot] = weakref.WeakValueDictionary()

    @staticmethod
    def _key(path: Path) -> str:
        return str(path.resolve())

    def slot_for(self, path: Path) -> PathSlot:
        key = self._key(path)
        with self._guard:
            slot = self._slots.get(key)
            if slot is None:
                slot = PathSlot()
                self._slots[key] = slot
            return slot

    def __contains__(self, path: Path) -> bool:
        key = self._key(path)
        with self._guard:
            return key in self._slots

    def __len__(self) -> int:
        with self._guard:
            return len(self._slots)


GLOBAL_PATH_SLOTS = PathSlotRegistry()
