"""Building blocks for road network routing: bit vectors, sorting, ID queues, Dijkstra, SCCs and graph checks."""

__version__ = "0.1.0"