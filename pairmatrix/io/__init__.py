"""Matrix file I/O."""

from .matrix_writer import read_matrix, write_matrix

__all__ = ["read_matrix", "write_matrix"]
