# roadgraph

Small, dependency-free building blocks for routing on road networks.

Graphs are stored in the compact "first out / head" form. For a graph with
`n` nodes, `first_out` has `n + 1` entries, and the arcs leaving node `x` are
`first_out[x]` up to but not including `first_out[x + 1]`. The list `head`
holds the target node of each arc.

## Installation

```
pip install .
```

## Contents

- `roadgraph.constants`: the sentinels `INVALID_ID` and `INF_WEIGHT`, and
  `min_element_of`, `max_element_of`, `first_min_element_position_of` and
  `first_max_element_position_of`. All four raise `ValueError` on an empty
  sequence.
- `roadgraph.bit_vector`: `BitVector`, a resizable bit sequence. It supports
  `set`, `reset`, `toggle`, `set_all`, `population_count`, the `| & ^ ~`
  operators and conversion to and from 64-bit words with `to_words` and
  `BitVector.from_words`. The module also has `make_bit_vector`,
  `keep_element_of_vector_if` and `remove_element_from_vector_if`.
- `roadgraph.vector_io`: `save_bit_vector` and `load_bit_vector`, which use
  an 8-byte little-endian size header followed by 512-bit blocks.
  `save_string_vector` and `load_string_vector` handle zero-terminated UTF-8
  strings.
- `roadgraph.protobuf`: `decode_varint`, `zigzag_decode`,
  `iter_protobuf_fields` and `decode_protobuf_message` for the protobuf wire
  format. They raise `ProtobufError` on corrupt input or an unknown wire
  type.
- `roadgraph.geo_dist`: `geo_dist(lat_a, lon_a, lat_b, lon_b)` returns the
  great-circle distance in meters between two points given in degrees.
- `roadgraph.inverse_vector`: `invert_vector` and `invert_inverse_vector`
  convert between a sorted tail list and `first_out`.
- `roadgraph.sort`: sort permutations, inverse sort permutations and sorted
  copies. Elements can be ordered by a comparator (`is_less`), by `<`, or by
  an integer key in `range(key_count)`; key sorting uses bucket sort. All of
  these sort stably.
- `roadgraph.id_queue`: `MinIDQueue`, an indexed 4-ary min-heap of
  `IDKeyPair(id, key)` values with `decrease_key` and `increase_key`.
- `roadgraph.id_set_queue`: `IDSetMinQueue`, a min-queue that holds each ID
  from `range(n)` at most once.
- `roadgraph.dijkstra`: `Dijkstra`, a step-wise search with `settle`,
  `get_distance_to`, `get_node_path_to` and `get_arc_path_to`. It also has
  `scalar_weight`, which turns a list of arc weights into a weight function,
  and `SettleResult`.
- `roadgraph.strongly_connected_component`:
  `compute_strongly_connected_components` returns a
  `StronglyConnectedComponents` value.
  `compute_largest_strongly_connected_component` returns one boolean per
  node, marking the nodes of the largest component.
- `roadgraph.verify`: `check_if_graph_is_valid`,
  `check_if_arc_ipp_are_valid`, `check_if_td_graph_is_valid` and
  `check_if_sst_queries_are_valid`. Each raises `GraphValidationError` on bad
  input.

## Example

```python
from roadgraph.dijkstra import Dijkstra, scalar_weight
from roadgraph.inverse_vector import invert_inverse_vector
from roadgraph.verify import check_if_graph_is_valid

first_out = [0, 2, 3, 3]
head = [1, 2, 2]
weight = [4, 10, 3]

check_if_graph_is_valid(first_out, head)
tail = invert_inverse_vector(first_out)

dij = Dijkstra(first_out, tail, head)
dij.reset().add_source(0)
while not dij.is_finished():
    dij.settle(scalar_weight(weight))

print(dij.get_distance_to(2))      # 7
print(dij.get_node_path_to(2))     # [0, 1, 2]
```

## What this package does not do

- It provides no command-line tools. Everything is used as a library.
- It does not read OpenStreetMap files or build routing graphs from them.
  `roadgraph.protobuf` only decodes the raw wire format.
- It has no contraction hierarchies, nested dissection or nearest-neighbour
  lookup. `Dijkstra` is the only shortest-path search.
- `roadgraph.vector_io` stores only bit vectors and string lists. It has no
  file format for plain integer or float vectors.

## Running the tests

```
pip install ".[test]"
pytest
```