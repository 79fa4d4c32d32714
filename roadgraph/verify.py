"""Consistency checks for graphs, time-dependent arc data and query sets."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


class GraphValidationError(ValueError):
    """Raised when input data violates the expected structure."""


def _is_sorted(values: Sequence[int]) -> bool:
    return all(a <= b for a, b in pairwise(values))


def check_if_graph_is_valid(first_out: Sequence[int], head: Sequence[int]) -> None:
    """Check that first_out and head describe a graph in forward-star form."""
    if len(first_out) == 0 or first_out[0] != 0:
        raise GraphValidationError("first_out[0] must be 0")
    if first_out[-1] != len(head):
        raise GraphValidationError("first_out.back() must be head.size()")
    node_count = len(first_out) - 1
    if not _is_sorted(first_out):
        raise GraphValidationError("first_out must be sorted")
    if any(x >= node_count for x in head):
        raise GraphValidationError("all heads must be at most node_count")


def check_if_arc_ipp_are_valid(
    period: int,
    first_ipp_of_arc: Sequence[int],
    ipp_departure_time: Sequence[int],
    ipp_travel_time: Sequence[int],
) -> None:
    """Check the interpolation points of every arc of a time-dependent graph."""
    if len(first_ipp_of_arc) == 0 or first_ipp_of_arc[0] != 0:
        raise GraphValidationError("first_ipp_of_arc[0] must be 0")
    if first_ipp_of_arc[-1] != len(ipp_departure_time):
        raise GraphValidationError("first_ipp_of_arc.back() must be ipp_departure_time.size()")
    if not _is_sorted(first_ipp_of_arc):
        raise GraphValidationError("first_ipp_of_arc must be sorted")
    if any(a == b for a, b in pairwise(first_ipp_of_arc)):
        raise GraphValidationError("every arc must have at least one ipp")
    if len(ipp_travel_time) != len(ipp_departure_time):
        raise GraphValidationError("ipp_travel_time.size() must be ipp_departure_time.size()")
    for begin, end in pairwise(first_ipp_of_arc):
        if not _is_sorted(ipp_departure_time[begin:end]):
            raise GraphValidationError("ipp_departure_time of every arc must be sorted")
    if any(x >= period for x in ipp_departure_time):
        raise GraphValidationError("ipp_departure_time must be smaller than the period")


def check_if_td_graph_is_valid(
    period: int,
    first_out: Sequence[int],
    head: Sequence[int],
    first_ipp_of_arc: Sequence[int],
    ipp_departure_time: Sequence[int],
    ipp_travel_time: Sequence[int],
) -> None:
    """Check a time-dependent graph: its structure and its arc interpolation points."""
    check_if_graph_is_valid(first_out, head)
    if len(head) != len(first_ipp_of_arc) - 1:
        raise GraphValidationError("head.size() must be first_ipp_of_arc.size()-1")
    check_if_arc_ipp_are_valid(period, first_ipp_of_arc, ipp_departure_time, ipp_travel_time)


def check_if_sst_queries_are_valid(
    period: int,
    node_count: int,
    source: Sequence[int],
    source_time: Sequence[int],
    target: Sequence[int],
    rank: Sequence[int],
) -> None:
    """Check a set of source, source time and target queries."""
    if any(x >= node_count for x in source):
        raise GraphValidationError("source node is out of range")
    if any(x >= node_count for x in target):
        raise GraphValidationError("target node is out of range")
    if any(x >= period for x in source_time):
        raise GraphValidationError("source time is out of range")
    if len(source_time) != len(source):
        raise GraphValidationError("source_time has not the same size as source")
    if len(target) != len(source):
        raise GraphValidationError("target has not the same size as source")
    if len(rank) != len(source):
        raise GraphValidationError("rank has not the same size as source")