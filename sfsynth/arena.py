"""A generational arena and a range check helper."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class TypedIndex(Generic[T]):
    """Handle to an arena slot; stale once the slot's value is removed."""

    slot: int
    generation: int

    def __str__(self) -> str:
        return f"Index(slot={self.slot}, generation={self.generation})"


@dataclass
class _Entry(Generic[T]):
    generation: int
    value: Any
    occupied: bool


class TypedArena(Generic[T]):
    """Stores values under generational indices; freed slots are reused."""

    def __init__(self) -> None:
        self._entries: list[_Entry[T]] = []
        self._free: list[int] = []
        self._len = 0

    def insert(self, value: T) -> TypedIndex[T]:
        if self._free:
            slot = self._free.pop()
            entry = self._entries[slot]
            entry.value = value
            entry.occupied = True
        else:
            slot = len(self._entries)
            entry = _Entry(generation=0, value=value, occupied=True)
            self._entries.append(entry)
        self._len += 1
        return TypedIndex(slot, entry.generation)

    def _entry(self, index: TypedIndex[T]) -> Optional[_Entry[T]]:
        if not 0 <= index.slot < len(self._entries):
            return None
        entry = self._entries[index.slot]
        if not entry.occupied or entry.generation != index.generation:
            return None
        return entry

    def get(self, index: TypedIndex[T]) -> Optional[T]:
        """Return the value at ``index``, or None if it was removed."""
        entry = self._entry(index)
        return entry.value if entry is not None else None

    def remove(self, index: TypedIndex[T]) -> Optional[T]:
        """Remove and return the value at ``index``, or None if absent."""
        entry = self._entry(index)
        if entry is None:
            return None
        value = entry.value
        entry.value = None
        entry.occupied = False
        entry.generation += 1
        self._free.append(index.slot)
        self._len -= 1
        return value

    def __len__(self) -> int:
        return self._len

    def __contains__(self, index: object) -> bool:
        return isinstance(index, TypedIndex) and self._entry(index) is not None

    def __iter__(self) -> Iterator[tuple[TypedIndex[T], T]]:
        for slot, entry in enumerate(self._entries):
            if entry.occupied:
                yield TypedIndex(slot, entry.generation), entry.value


def check_range(bounds: Any, value: Any, error: BaseException | type[BaseException]) -> None:
    """Raise ``error`` unless ``value`` lies within ``bounds``.

    ``bounds`` is a ``range`` or a ``(low, high)`` pair with both ends
    inclusive, where ``None`` leaves that end open.
    """
    if isinstance(bounds, range):
        inside = value in bounds
    else:
        low, high = bounds
        inside = (low is None or low <= value) and (high is None or value <= high)
    if not inside:
        raise error