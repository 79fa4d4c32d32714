"""Dijkstra's algorithm on a graph given in forward-star (first_out) form."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from roadgraph.constants import INF_WEIGHT, INVALID_ID
from roadgraph.id_queue import IDKeyPair, MinIDQueue

WeightFunction = Callable[[int, int], int]


@dataclass(frozen=True)
class SettleResult:
    """The node that was settled and its final distance."""

    node: int
    distance: int


def scalar_weight(weight: Sequence[int]) -> WeightFunction:
    """Return a weight function that ignores the departure time."""

    def get_weight(arc: int, departure_time: int) -> int:
        return weight[arc]

    return get_weight


class Dijkstra:
    """Step-wise shortest path search that can be stopped at any settled node."""

    def __init__(self, first_out: Sequence[int], tail: Sequence[int], head: Sequence[int]) -> None:
        if len(first_out) == 0:
            raise ValueError("first_out must not be empty")
        if first_out[0] != 0:
            raise ValueError("first_out[0] must be 0")
        if first_out[-1] != len(tail) or first_out[-1] != len(head):
            raise ValueError("first_out[-1] must equal the number of arcs in tail and head")
        self._first_out = first_out
        self._tail = tail
        self._head = head
        node_count = len(first_out) - 1
        self._tentative_distance = [0] * node_count
        self._predecessor_arc = [INVALID_ID] * node_count
        self._was_popped = bytearray(node_count)
        self._queue = MinIDQueue(node_count)

    @property
    def node_count(self) -> int:
        return len(self._first_out) - 1

    def _check_node(self, node: int) -> None:
        if not 0 <= node < self.node_count:
            raise IndexError(f"node {node} out of range for node count {self.node_count}")

    def reset(self) -> Dijkstra:
        """Forget all sources and settled nodes."""
        self._queue.clear()
        self._was_popped = bytearray(self.node_count)
        return self

    def add_source(self, node: int, departure_time: int = 0) -> Dijkstra:
        """Start the search at node with the given initial distance."""
        self._check_node(node)
        self._tentative_distance[node] = departure_time
        self._predecessor_arc[node] = INVALID_ID
        self._queue.push(IDKeyPair(node, departure_time))
        return self

    def is_finished(self) -> bool:
        return len(self._queue) == 0

    def was_node_reached(self, node: int) -> bool:
        """Return whether node has been settled."""
        self._check_node(node)
        return bool(self._was_popped[node])

    def settle(self, get_weight: WeightFunction) -> SettleResult:
        """Settle the next closest node and relax its outgoing arcs."""
        if self.is_finished():
            raise IndexError("the search is finished")
        p = self._queue.pop()
        self._tentative_distance[p.id] = p.key
        self._was_popped[p.id] = 1
        head = self._head
        queue = self._queue
        for a in range(self._first_out[p.id], self._first_out[p.id + 1]):
            y = head[a]
            if self._was_popped[y]:
                continue
            w = get_weight(a, p.key)
            if w >= INF_WEIGHT:
                continue
            if queue.contains_id(y):
                if queue.decrease_key(IDKeyPair(y, p.key + w)):
                    self._predecessor_arc[y] = a
            else:
                queue.push(IDKeyPair(y, p.key + w))
                self._predecessor_arc[y] = a
        return SettleResult(p.id, p.key)

    def get_distance_to(self, node: int) -> int:
        """Return the distance of a settled node, INF_WEIGHT otherwise."""
        if self.was_node_reached(node):
            return self._tentative_distance[node]
        return INF_WEIGHT

    def get_node_path_to(self, node: int) -> list[int]:
        """Return the nodes from a source to node; empty if node is not settled."""
        if not self.was_node_reached(node):
            return []
        path = [node]
        while (a := self._predecessor_arc[node]) != INVALID_ID:
            node = self._tail[a]
            path.append(node)
        path.reverse()
        return path

    def get_arc_path_to(self, node: int) -> list[int]:
        """Return the arcs from a source to node; empty if node is not settled."""
        if not self.was_node_reached(node):
            return []
        path = []
        while (a := self._predecessor_arc[node]) != INVALID_ID:
            path.append(a)
            node = self._tail[a]
        path.reverse()
        return path