"""Shared sentinel values and helpers for locating extreme elements."""

from collections.abc import Sequence
from typing import Any

INVALID_ID = 4294967295
"""Marks a missing node, arc or other identifier."""

INF_WEIGHT = 2147483647
"""Weight used for unreachable targets; twice its value still fits in 32 bits."""


def _require_non_empty(values: Sequence[Any]) -> None:
    if len(values) == 0:
        raise ValueError("sequence must not be empty")


def first_min_element_position_of(values: Sequence[Any]) -> int:
    """Return the index of the first smallest element."""
    _require_non_empty(values)
    best = 0
    for pos, value in enumerate(values):
        if value < values[best]:
            best = pos
    return best


def first_max_element_position_of(values: Sequence[Any]) -> int:
    """Return the index of the first largest element."""
    _require_non_empty(values)
    best = 0
    for pos, value in enumerate(values):
        if value > values[best]:
            best = pos
    return best


def min_element_of(values: Sequence[Any]) -> Any:
    """Return the first smallest element."""
    return values[first_min_element_position_of(values)]


def max_element_of(values: Sequence[Any]) -> Any:
    """Return the first largest element."""
    return values[first_max_element_position_of(values)]