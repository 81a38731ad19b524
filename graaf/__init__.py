"""Directed and undirected graphs with classic graph algorithms."""

__version__ = "0.1.0"