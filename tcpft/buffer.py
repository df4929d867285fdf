"""Bounded thread-safe FIFO buffers used to stage file data in chunks."""

from __future__ import annotations

import threading
from collections import deque
from typing import Callable, Generic, Iterator, TypeVar

T = TypeVar("T")

CHUNK_SIZE = 1024
POOL_SIZE = 1024


class Buffer(Generic[T]):
    """A bounded FIFO; pushing onto a full buffer discards the oldest element."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[T] = deque()
        self._cond = threading.Condition()

    def push(self, value: T) -> None:
        """Append ``value``, dropping the oldest element if the buffer is full."""
        with self._cond:
            if len(self._items) == self.capacity:
                self._items.popleft()
            self._items.append(value)
            self._cond.notify_all()

    def front(self) -> T:
        """Return the oldest element without removing it."""
        with self._cond:
            if not self._items:
                raise IndexError("front of empty buffer")
            return self._items[0]

    def back(self) -> T:
        """Return the newest element without removing it."""
        with self._cond:
            if not self._items:
                raise IndexError("back of empty buffer")
            return self._items[-1]

    def pop(self) -> T:
        """Remove and return the oldest element."""
        with self._cond:
            if not self._items:
                raise IndexError("pop from empty buffer")
            item = self._items.popleft()
            self._cond.notify_all()
            return item

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)

    def __iter__(self) -> Iterator[T]:
        with self._cond:
            snapshot = list(self._items)
        return iter(snapshot)

    def copy(self) -> "Buffer[T]":
        """Return an independent buffer of the same type holding the same elements."""
        cls = type(self)
        clone = cls.__new__(cls)
        Buffer.__init__(clone, self.capacity)
        with self._cond:
            clone._items.extend(self._items)
        return clone

    def is_empty(self) -> bool:
        with self._cond:
            return not self._items

    def is_full(self) -> bool:
        with self._cond:
            return len(self._items) == self.capacity

    def is_half(self) -> bool:
        with self._cond:
            return len(self._items) == self.capacity // 2

    def is_above_half(self) -> bool:
        with self._cond:
            return len(self._items) > self.capacity // 2

    def is_below_half(self) -> bool:
        with self._cond:
            return len(self._items) < self.capacity // 2

    def _wait(self, predicate: Callable[[], bool], timeout: float | None) -> bool:
        with self._cond:
            return self._cond.wait_for(predicate, timeout)

    def wait_for_full(self, timeout: float | None = None) -> bool:
        """Block until full; return False if ``timeout`` expired first."""
        return self._wait(lambda: len(self._items) == self.capacity, timeout)

    def wait_for_empty(self, timeout: float | None = None) -> bool:
        """Block until empty; return False if ``timeout`` expired first."""
        return self._wait(lambda: not self._items, timeout)

    def wait_for_not_full(self, timeout: float | None = None) -> bool:
        """Block until there is room; return False if ``timeout`` expired first."""
        return self._wait(lambda: len(self._items) < self.capacity, timeout)

    def wait_for_not_empty(self, timeout: float | None = None) -> bool:
        """Block until an element is present; return False on timeout."""
        return self._wait(lambda: bool(self._items), timeout)

    def wait_for_half(self, timeout: float | None = None) -> bool:
        """Block until exactly half full; return False on timeout."""
        return self._wait(lambda: len(self._items) == self.capacity // 2, timeout)

    def wait_for_above_half(self, timeout: float | None = None) -> bool:
        """Block until more than half full; return False on timeout."""
        return self._wait(lambda: len(self._items) > self.capacity // 2, timeout)

    def wait_for_below_half(self, timeout: float | None = None) -> bool:
        """Block until less than half full; return False on timeout."""
        return self._wait(lambda: len(self._items) < self.capacity // 2, timeout)


class Chunk(Buffer[int]):
    """A buffer of up to 1024 byte values."""

    def __init__(self) -> None:
        super().__init__(CHUNK_SIZE)

    def to_bytes(self) -> bytes:
        """Return the chunk's content as bytes, oldest first."""
        return bytes(self)


class Pool(Buffer[Chunk]):
    """A buffer of up to 1024 chunks."""

    def __init__(self) -> None:
        super().__init__(POOL_SIZE)

    def fit(self, data: bytes) -> None:
        """Split ``data`` into chunk-sized pieces and push each as a Chunk."""
        for start in range(0, len(data), CHUNK_SIZE):
            chunk = Chunk()
            for byte in data[start:start + CHUNK_SIZE]:
                chunk.push(byte)
            self.push(chunk)