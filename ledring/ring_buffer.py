"""A fixed-capacity first-in, first-out ring buffer."""

from __future__ import annotations

from collections import deque
from typing import Any


class RingBuffer:
    """A bounded FIFO queue that refuses new items once it is full."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"ring buffer size must not be negative, got {size}")
        self.size = size
        self._items: deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"RingBuffer(size={self.size}, items={list(self._items)!r})"

    def is_empty(self) -> bool:
        """Return True when the buffer holds no items."""
        return not self._items

    def is_full(self) -> bool:
        """Return True when no more items can be put."""
        return len(self._items) >= self.size

    def put(self, item: Any) -> None:
        """Append an item; raise OverflowError if the buffer is full."""
        if self.is_full():
            raise OverflowError(f"ring buffer is full ({self.size} items)")
        self._items.append(item)

    def get(self) -> Any:
        """Remove and return the oldest item; raise IndexError if empty."""
        if not self._items:
            raise IndexError("get from an empty ring buffer")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the oldest item without removing it; raise IndexError if empty."""
        if not self._items:
            raise IndexError("peek into an empty ring buffer")
        return self._items[0]