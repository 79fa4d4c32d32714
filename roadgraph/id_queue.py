"""A 4-ary min-heap over integer ids with changeable keys."""

from __future__ import annotations

from dataclasses import dataclass

_TREE_ARITY = 4


@dataclass(frozen=True)
class IDKeyPair:
    """An id together with its priority key."""

    id: int
    key: int


class MinIDQueue:
    """Priority queue of ids in range(id_count), smallest key first."""

    def __init__(self, id_count: int = 0) -> None:
        if id_count < 0:
            raise ValueError("id_count must not be negative")
        self._id_pos: list[int | None] = [None] * id_count
        self._ids: list[int] = []
        self._keys: list[int] = []

    @property
    def id_count(self) -> int:
        return len(self._id_pos)

    def __len__(self) -> int:
        return len(self._ids)

    def __bool__(self) -> bool:
        return bool(self._ids)

    def _check_id(self, id_: int) -> None:
        if not 0 <= id_ < len(self._id_pos):
            raise IndexError(f"id {id_} out of range for id_count {len(self._id_pos)}")

    def _position(self, id_: int) -> int:
        self._check_id(id_)
        pos = self._id_pos[id_]
        if pos is None:
            raise KeyError(id_)
        return pos

    def contains_id(self, id_: int) -> bool:
        """Return whether id_ is in the queue."""
        self._check_id(id_)
        return self._id_pos[id_] is not None

    def clear(self) -> None:
        """Remove every element."""
        for id_ in self._ids:
            self._id_pos[id_] = None
        self._ids.clear()
        self._keys.clear()

    def get_key(self, id_: int) -> int:
        """Return the current key of id_; KeyError if it is not queued."""
        return self._keys[self._position(id_)]

    def peek(self) -> IDKeyPair:
        """Return the smallest pair without removing it."""
        if not self._ids:
            raise IndexError("peek from an empty queue")
        return IDKeyPair(self._ids[0], self._keys[0])

    def pop(self) -> IDKeyPair:
        """Remove and return the smallest pair."""
        if not self._ids:
            raise IndexError("pop from an empty queue")
        last = len(self._ids) - 1
        self._swap(0, last)
        id_ = self._ids.pop()
        key = self._keys.pop()
        self._id_pos[id_] = None
        if self._ids:
            self._move_down(0)
        return IDKeyPair(id_, key)

    def push(self, pair: IDKeyPair) -> None:
        """Insert a pair; the id must not be queued already."""
        self._check_id(pair.id)
        if self._id_pos[pair.id] is not None:
            raise ValueError(f"id {pair.id} is already in the queue")
        pos = len(self._ids)
        self._ids.append(pair.id)
        self._keys.append(pair.key)
        self._id_pos[pair.id] = pos
        self._move_up(pos)

    def decrease_key(self, pair: IDKeyPair) -> bool:
        """Lower the key of a queued id; return whether it changed."""
        pos = self._position(pair.id)
        if self._keys[pos] > pair.key:
            self._keys[pos] = pair.key
            self._move_up(pos)
            return True
        return False

    def increase_key(self, pair: IDKeyPair) -> bool:
        """Raise the key of a queued id; return whether it changed."""
        pos = self._position(pair.id)
        if self._keys[pos] < pair.key:
            self._keys[pos] = pair.key
            self._move_down(pos)
            return True
        return False

    def _swap(self, a: int, b: int) -> None:
        ids, keys = self._ids, self._keys
        ids[a], ids[b] = ids[b], ids[a]
        keys[a], keys[b] = keys[b], keys[a]
        self._id_pos[ids[a]] = a
        self._id_pos[ids[b]] = b

    def _move_up(self, pos: int) -> None:
        keys = self._keys
        while pos != 0:
            parent = (pos - 1) // _TREE_ARITY
            if keys[parent] <= keys[pos]:
                return
            self._swap(pos, parent)
            pos = parent

    def _move_down(self, pos: int) -> None:
        keys = self._keys
        size = len(keys)
        while True:
            first_child = _TREE_ARITY * pos + 1
            if first_child >= size:
                return
            end = min(first_child + _TREE_ARITY, size)
            smallest = min(range(first_child, end), key=keys.__getitem__)
            if keys[smallest] >= keys[pos]:
                return
            self._swap(pos, smallest)
            pos = smallest