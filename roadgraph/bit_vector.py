"""A fixed-size vector of bits and filters that select list elements by bit."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, TypeVar

_WORD_MASK = (1 << 64) - 1

T = TypeVar("T")


class BitVector:
    """A resizable sequence of bits stored in a single integer."""

    __slots__ = ("_size", "_bits")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, size: int = 0, init_value: bool = False) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._bits = self._mask() if init_value else 0

    def _mask(self) -> int:
        return (1 << self._size) - 1

    def _check(self, x: int) -> None:
        if not 0 <= x < self._size:
            raise IndexError(f"bit {x} out of bounds for size {self._size}")

    def _require_same_size(self, other: BitVector) -> None:
        if self._size != other._size:
            raise ValueError("bit vectors must have the same size")

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[bool]:
        bits = self._bits
        for x in range(self._size):
            yield bool((bits >> x) & 1)

    def __repr__(self) -> str:
        body = "".join("1" if b else "0" for b in self)
        return f"BitVector({self._size}, '{body}')"

    def copy(self) -> BitVector:
        result = BitVector(self._size)
        result._bits = self._bits
        return result

    def resize(self, size: int, init_value: bool = False) -> None:
        """Change the size; new bits take init_value."""
        if size < 0:
            raise ValueError("size must not be negative")
        old = self._size
        self._size = size
        if size > old:
            if init_value:
                self._bits |= ((1 << size) - 1) ^ ((1 << old) - 1)
        else:
            self._bits &= self._mask()

    def make_large_enough_for(self, x: int, init_value: bool = False) -> None:
        """Grow so that bit x exists."""
        if x >= self._size:
            self.resize(x + 1, init_value)

    def is_set(self, x: int) -> bool:
        self._check(x)
        return bool((self._bits >> x) & 1)

    def set(self, x: int, value: bool = True) -> None:
        self._check(x)
        if value:
            self._bits |= 1 << x
        else:
            self._bits &= ~(1 << x)

    def set_if(self, x: int, value: bool) -> None:
        """Set bit x if value is true; leave it unchanged otherwise."""
        self._check(x)
        if value:
            self._bits |= 1 << x

    def reset(self, x: int) -> None:
        self._check(x)
        self._bits &= ~(1 << x)

    def toggle(self, x: int) -> None:
        self._check(x)
        self._bits ^= 1 << x

    def set_all(self, value: bool = True) -> None:
        self._bits = self._mask() if value else 0

    def reset_all(self) -> None:
        self._bits = 0

    def are_all_set(self) -> bool:
        return self._bits == self._mask()

    def is_any_set(self) -> bool:
        return self._bits != 0

    def population_count(self) -> int:
        return self._bits.bit_count()

    def count_true(self) -> int:
        return self.population_count()

    def count_false(self) -> int:
        return self._size - self.population_count()

    def inplace_not(self) -> None:
        self._bits ^= self._mask()

    def __invert__(self) -> BitVector:
        result = self.copy()
        result.inplace_not()
        return result

    def _binary(self, other: Any, op: Callable[[int, int], int]) -> BitVector:
        self._require_same_size(other)
        result = BitVector(self._size)
        result._bits = op(self._bits, other._bits)
        return result

    def __or__(self, other: Any) -> BitVector:
        if not isinstance(other, BitVector):
            return NotImplemented
        return self._binary(other, lambda a, b: a | b)

    def __and__(self, other: Any) -> BitVector:
        if not isinstance(other, BitVector):
            return NotImplemented
        return self._binary(other, lambda a, b: a & b)

    def __xor__(self, other: Any) -> BitVector:
        if not isinstance(other, BitVector):
            return NotImplemented
        return self._binary(other, lambda a, b: a ^ b)

    def __ior__(self, other: Any) -> BitVector:
        if not isinstance(other, BitVector):
            return NotImplemented
        self._require_same_size(other)
        self._bits |= other._bits
        return self

    def __iand__(self, other: Any) -> BitVector:
        if not isinstance(other, BitVector):
            return NotImplemented
        self._require_same_size(other)
        self._bits &= other._bits
        return self

    def __ixor__(self, other: Any) -> BitVector:
        if not isinstance(other, BitVector):
            return NotImplemented
        self._require_same_size(other)
        self._bits ^= other._bits
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented
        return self._size == other._size and self._bits == other._bits

    def __lt__(self, other: Any) -> bool:
        """Order by size, then by the storage words from first to last."""
        if not isinstance(other, BitVector):
            return NotImplemented
        if self._size != other._size:
            return self._size < other._size
        return self.to_words() < other.to_words()

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented
        return not other < self

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented
        return other < self

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented
        return not self < other

    def uint512_count(self) -> int:
        """Number of 512-bit blocks needed to store the bits."""
        return (self._size + 511) // 512

    def to_words(self) -> list[int]:
        """Return the bits as 64-bit words, padded to whole 512-bit blocks."""
        bits = self._bits
        return [(bits >> (64 * i)) & _WORD_MASK for i in range(self.uint512_count() * 8)]

    @classmethod
    def from_words(cls, size: int, words: Iterable[int]) -> BitVector:
        """Build a vector of the given size from 64-bit words; padding bits are dropped."""
        result = cls(size)
        bits = 0
        for i, word in enumerate(words):
            bits |= (word & _WORD_MASK) << (64 * i)
        result._bits = bits & result._mask()
        return result


def make_bit_vector(size: int, f: Callable[[int], Any]) -> BitVector:
    """Build a vector whose bit x is bool(f(x))."""
    result = BitVector(size)
    for x in range(size):
        if f(x):
            result.set(x)
    return result


def _check_filter(bit_filter: BitVector, values: list[Any]) -> None:
    if len(bit_filter) != len(values):
        raise ValueError("filter and vector must have the same length")


def keep_element_of_vector_if(keep_filter: BitVector, values: Iterable[T]) -> list[T]:
    """Return the elements whose bit is set."""
    items = list(values)
    _check_filter(keep_filter, items)
    return [v for v, keep in zip(items, keep_filter) if keep]


def remove_element_from_vector_if(remove_filter: BitVector, values: Iterable[T]) -> list[T]:
    """Return the elements whose bit is not set."""
    items = list(values)
    _check_filter(remove_filter, items)
    return [v for v, remove in zip(items, remove_filter) if not remove]