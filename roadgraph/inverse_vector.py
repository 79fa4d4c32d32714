"""Conversions between sorted id lists and their offset (first_out) form.

For a sorted list v, its inverse p has the property that
v[p[i]:p[i+1]] holds exactly the elements of v equal to i.
"""

from bisect import bisect_left
from collections.abc import Sequence


def invert_vector(values: Sequence[int], element_count: int) -> list[int]:
    """Return the offsets p of a sorted list of ids in range(element_count)."""
    if len(values) == 0:
        return [0] * (element_count + 1)
    if any(values[i] < values[i - 1] for i in range(1, len(values))):
        raise ValueError("values must be sorted")
    if max(values) >= element_count:
        raise ValueError("values must be smaller than element_count")
    index = [bisect_left(values, i) for i in range(element_count)]
    index.append(len(values))
    return index


def invert_inverse_vector(sorted_index: Sequence[int]) -> list[int]:
    """Expand offsets back into the sorted id list they describe."""
    if len(sorted_index) == 0:
        raise ValueError("sorted_index must not be empty")
    result: list[int] = []
    for i, (begin, end) in enumerate(zip(sorted_index, sorted_index[1:])):
        result.extend([i] * (end - begin))
    if len(result) != sorted_index[-1]:
        raise ValueError("sorted_index must start at 0 and be non-decreasing")
    return result