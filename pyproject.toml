[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roadgraph"
version = "0.1.0"
description = "Building blocks for road network routing: bit vectors, sorting by key, indexed priority queues, Dijkstra, strongly connected components and graph validation."
requires-python = ">=3.10"
dependencies = []
keywords = ["routing", "graph", "dijkstra", "shortest-path", "road-network", "priority-queue", "protobuf"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["roadgraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
