"""k-nearest-neighbour classification for the zoo animal dataset, with a menu-driven command."""

__version__ = "1.0.0"
__all__ = ["knn", "cli"]