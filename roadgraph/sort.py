"""Sort permutations and sorting by comparator, by integer key or by <.

A sort permutation p of a list v orders it: v[p[0]] <= v[p[1]] <= ...
Applying p (``[v[i] for i in p]``) gives the sorted list. The inverse sort
permutation q maps every position of v to its position in the sorted list.

Comparator functions take ``is_less(a, b)`` and return whether a orders
strictly before b. Key functions take ``(key_count, get_key)`` where
``get_key`` maps every element onto an integer in ``range(key_count)``.
Every function here sorts stably; the non-stable names are kept because
callers use them where stability is not required.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from functools import cmp_to_key
from itertools import accumulate, pairwise
from typing import Any, TypeVar

T = TypeVar("T")

Comparator = Callable[[Any, Any], bool]
KeyFunction = Callable[[Any], int]

# Bucket sort is used unless there are far fewer elements than keys.
_BUCKET_SORT_MIN_KEY_TO_ELEMENT_RATIO = 16


def _invert_permutation(p: Sequence[int]) -> list[int]:
    inverse = [0] * len(p)
    for i, x in enumerate(p):
        inverse[x] = i
    return inverse


def _three_way(is_less: Comparator) -> Callable[[Any, Any], int]:
    def compare(left: Any, right: Any) -> int:
        if is_less(left, right):
            return -1
        if is_less(right, left):
            return 1
        return 0

    return compare


def _less(left: Any, right: Any) -> bool:
    return left < right


# ---- comparator based -------------------------------------------------------


def compute_stable_sort_permutation_using_comparator(
    values: Sequence[T], is_less: Comparator
) -> list[int]:
    """Return a stable sort permutation of values under is_less."""
    compare = _three_way(is_less)
    return sorted(
        range(len(values)),
        key=cmp_to_key(lambda l, r: compare(values[l], values[r])),
    )


def compute_sort_permutation_using_comparator(
    values: Sequence[T], is_less: Comparator
) -> list[int]:
    """Return a sort permutation of values under is_less."""
    return compute_stable_sort_permutation_using_comparator(values, is_less)


def compute_inverse_sort_permutation_using_comparator(
    values: Sequence[T], is_less: Comparator
) -> list[int]:
    """Return the inverse of a sort permutation of values under is_less."""
    return _invert_permutation(compute_sort_permutation_using_comparator(values, is_less))


def compute_inverse_stable_sort_permutation_using_comparator(
    values: Sequence[T], is_less: Comparator
) -> list[int]:
    """Return the inverse of a stable sort permutation of values under is_less."""
    return _invert_permutation(compute_stable_sort_permutation_using_comparator(values, is_less))


def stable_sort_using_comparator(values: Sequence[T], is_less: Comparator) -> list[T]:
    """Return a stably sorted copy of values."""
    return sorted(values, key=cmp_to_key(_three_way(is_less)))


def sort_using_comparator(values: Sequence[T], is_less: Comparator) -> list[T]:
    """Return a sorted copy of values."""
    return stable_sort_using_comparator(values, is_less)


def is_sorted_using_comparator(values: Sequence[T], is_less: Comparator) -> bool:
    """Return whether no element orders strictly before its predecessor."""
    return not any(is_less(b, a) for a, b in pairwise(values))


# ---- key based --------------------------------------------------------------


def _keys_of(values: Sequence[T], key_count: int, get_key: KeyFunction) -> list[int]:
    keys = []
    for v in values:
        k = get_key(v)
        if not 0 <= k < key_count:
            raise ValueError(f"key {k} is out of range for key_count {key_count}")
        keys.append(k)
    return keys


def _uses_bucket_sort(element_count: int, key_count: int) -> bool:
    return element_count >= key_count // _BUCKET_SORT_MIN_KEY_TO_ELEMENT_RATIO


def _bucket_starts(keys: Sequence[int], key_count: int) -> list[int]:
    counts = [0] * key_count
    for k in keys:
        counts[k] += 1
    return list(accumulate(counts, initial=0))[:-1]


def compute_stable_sort_permutation_using_key(
    values: Sequence[T], key_count: int, get_key: KeyFunction
) -> list[int]:
    """Return a stable sort permutation of values ordered by their keys."""
    keys = _keys_of(values, key_count, get_key)
    if _uses_bucket_sort(len(keys), key_count):
        next_pos = _bucket_starts(keys, key_count)
        p = [0] * len(keys)
        for i, k in enumerate(keys):
            p[next_pos[k]] = i
            next_pos[k] += 1
        return p
    return sorted(range(len(keys)), key=keys.__getitem__)


def compute_sort_permutation_using_key(
    values: Sequence[T], key_count: int, get_key: KeyFunction
) -> list[int]:
    """Return a sort permutation of values ordered by their keys."""
    return compute_stable_sort_permutation_using_key(values, key_count, get_key)


def compute_inverse_stable_sort_permutation_using_key(
    values: Sequence[T], key_count: int, get_key: KeyFunction
) -> list[int]:
    """Return the inverse of a stable sort permutation by key."""
    keys = _keys_of(values, key_count, get_key)
    if _uses_bucket_sort(len(keys), key_count):
        next_pos = _bucket_starts(keys, key_count)
        q = [0] * len(keys)
        for i, k in enumerate(keys):
            q[i] = next_pos[k]
            next_pos[k] += 1
        return q
    return _invert_permutation(sorted(range(len(keys)), key=keys.__getitem__))


def compute_inverse_sort_permutation_using_key(
    values: Sequence[T], key_count: int, get_key: KeyFunction
) -> list[int]:
    """Return the inverse of a sort permutation by key."""
    return compute_inverse_stable_sort_permutation_using_key(values, key_count, get_key)


def stable_sort_using_key(values: Sequence[T], key_count: int, get_key: KeyFunction) -> list[T]:
    """Return a copy of values stably sorted by key."""
    p = compute_stable_sort_permutation_using_key(values, key_count, get_key)
    return [values[i] for i in p]


def sort_using_key(values: Sequence[T], key_count: int, get_key: KeyFunction) -> list[T]:
    """Return a copy of values sorted by key."""
    return stable_sort_using_key(values, key_count, get_key)


def is_sorted_using_key(values: Sequence[T], key_count: int, get_key: KeyFunction) -> bool:
    """Return whether the keys of values never decrease."""
    return not any(get_key(b) < get_key(a) for a, b in pairwise(values))


# ---- ordered by < -----------------------------------------------------------


def compute_sort_permutation_using_less(values: Sequence[T]) -> list[int]:
    """Return a sort permutation of values under <."""
    return compute_sort_permutation_using_comparator(values, _less)


def compute_stable_sort_permutation_using_less(values: Sequence[T]) -> list[int]:
    """Return a stable sort permutation of values under <."""
    return compute_stable_sort_permutation_using_comparator(values, _less)


def compute_inverse_sort_permutation_using_less(values: Sequence[T]) -> list[int]:
    """Return the inverse of a sort permutation under <."""
    return _invert_permutation(compute_sort_permutation_using_less(values))


def compute_inverse_stable_sort_permutation_using_less(values: Sequence[T]) -> list[int]:
    """Return the inverse of a stable sort permutation under <."""
    return _invert_permutation(compute_stable_sort_permutation_using_less(values))


def stable_sort_using_less(values: Sequence[T]) -> list[T]:
    """Return a stably sorted copy of values."""
    return stable_sort_using_comparator(values, _less)


def sort_using_less(values: Sequence[T]) -> list[T]:
    """Return a sorted copy of values."""
    return sort_using_comparator(values, _less)


def is_sorted_using_less(values: Sequence[T]) -> bool:
    """Return whether values are in non-decreasing order."""
    return is_sorted_using_comparator(values, _less)