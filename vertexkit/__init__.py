"""Simple graph representations, DFS/BFS traversal, handshake counts and topological ranking."""

__version__ = "0.1.0"