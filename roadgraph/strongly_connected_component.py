"""Strongly connected components of a graph in forward-star form."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class StronglyConnectedComponents:
    """Component id of every node and the number of components.

    Ids are assigned in the order the components are completed, so an arc
    between two components always leads to one with a smaller id.
    """

    component_of: list[int]
    component_count: int


def compute_strongly_connected_components(
    first_out: Sequence[int], head: Sequence[int]
) -> StronglyConnectedComponents:
    """Find the strongly connected components with an iterative Tarjan search."""
    node_count = len(first_out) - 1
    next_out = list(first_out)
    dfs_pos: list[int | None] = [None] * node_count
    low_link = [0] * node_count
    in_scc_stack = [False] * node_count
    in_component = [False] * node_count
    scc_stack: list[int] = []
    next_preorder_id = 0

    result = StronglyConnectedComponents([0] * node_count, 0)

    for root in range(node_count):
        if in_component[root]:
            continue
        dfs_stack = [root]
        while dfs_stack:
            x = dfs_stack.pop()

            if dfs_pos[x] is None:
                dfs_pos[x] = next_preorder_id
                low_link[x] = next_preorder_id
                next_preorder_id += 1
                in_scc_stack[x] = True
                scc_stack.append(x)

            x_end = first_out[x + 1]
            while next_out[x] != x_end and dfs_pos[head[next_out[x]]] is not None:
                y = head[next_out[x]]
                if in_scc_stack[y]:
                    low_link[x] = min(low_link[x], low_link[y])
                next_out[x] += 1

            if next_out[x] == x_end:
                if dfs_pos[x] == low_link[x]:
                    component_id = result.component_count
                    result.component_count += 1
                    while True:
                        z = scc_stack.pop()
                        in_scc_stack[z] = False
                        result.component_of[z] = component_id
                        in_component[z] = True
                        if z == x:
                            break
            else:
                dfs_stack.append(x)
                dfs_stack.append(head[next_out[x]])

    return result


def compute_largest_strongly_connected_component(
    first_out: Sequence[int], head: Sequence[int]
) -> list[bool]:
    """Mark the nodes of the largest component; ties go to the lowest component id."""
    node_count = len(first_out) - 1
    if node_count <= 0:
        return []
    scc = compute_strongly_connected_components(first_out, head)
    component_size = [0] * scc.component_count
    for c in scc.component_of:
        component_size[c] += 1
    largest = 0
    for i, size in enumerate(component_size):
        if component_size[largest] < size:
            largest = i
    return [c == largest for c in scc.component_of]