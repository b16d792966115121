"""Solutions to classic string, array, number, grid and linked-structure exercises."""

__version__ = "0.1.0"
__all__ = ["strings", "lines", "arrays", "numbers", "grids", "nodes"]