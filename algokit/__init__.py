"""Data structures and algorithm solutions: trees, lists, graphs, grids, strings and more."""

__version__ = "0.1.0"