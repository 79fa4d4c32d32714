"""A min-queue over a fixed range of ids that holds every id at most once."""

from __future__ import annotations

from roadgraph.constants import INVALID_ID

_ROOT = 1


class IDSetMinQueue:
    """Set of ids in range(n) that hands out its smallest member first.

    The ids are the leaves of an implicit binary tree whose nodes are
    numbered from 1. An inner node is marked when any leaf below it is
    marked, which lets the next smallest id be found by walking the tree.
    """

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError("n must not be negative")
        offset = 1
        while offset < n:
            offset <<= 1
        self._id_count = n
        self._min_id = INVALID_ID
        # Number of the first leaf; an odd n gets one padding leaf that stays unmarked.
        self._offset = offset
        self._data = bytearray(n + offset + (n & 1))

    @property
    def id_count(self) -> int:
        return self._id_count

    def _check_id(self, id_: int) -> None:
        if not 0 <= id_ < self._id_count:
            raise IndexError(f"id {id_} out of range for id_count {self._id_count}")

    def __bool__(self) -> bool:
        return self._min_id != INVALID_ID

    def __contains__(self, id_: int) -> bool:
        self._check_id(id_)
        return bool(self._data[self._offset + id_])

    def push(self, id_: int) -> None:
        """Add id_; nothing happens if it is already queued."""
        self._check_id(id_)
        if self._min_id == INVALID_ID or id_ < self._min_id:
            self._min_id = id_
        data = self._data
        x = id_ + self._offset
        if data[x]:
            return
        while True:
            data[x] = 1
            if x == _ROOT:
                return
            x >>= 1
            if data[x]:
                return

    def peek(self) -> int:
        """Return the smallest id, or INVALID_ID if the queue is empty."""
        return self._min_id

    def pop(self) -> int:
        """Remove and return the smallest id."""
        if self._min_id == INVALID_ID:
            raise IndexError("pop from an empty queue")
        result = self._min_id
        data = self._data
        x = result + self._offset
        while True:
            data[x] = 0
            if x == _ROOT:
                self._min_id = INVALID_ID
                return result
            if not x & 1 and data[x ^ 1]:
                break
            x >>= 1
        x ^= 1
        while x < self._offset:
            x <<= 1
            if not data[x]:
                x ^= 1
        self._min_id = x - self._offset
        return result

    def clear(self) -> None:
        """Remove every id."""
        while self:
            self.pop()