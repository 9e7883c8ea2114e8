[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vertexkit"
version = "0.1.0"
description = "Small undirected and directed graph toolkit: adjacency, degrees, neighbours, DFS/BFS traversal and topological ranking."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "adjacency matrix",
    "edge list",
    "degree",
    "handshake",
    "depth-first search",
    "breadth-first search",
    "topological ranking",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vertexkit-handshake = "vertexkit.handshake:main"
vertexkit-edges = "vertexkit.edge_list:main"
vertexkit-matrix = "vertexkit.adjacency_matrix:main"
vertexkit-traverse = "vertexkit.traversal:main"
vertexkit-rank = "vertexkit.ranking:main"

[tool.hatch.build.targets.wheel]
packages = ["vertexkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
