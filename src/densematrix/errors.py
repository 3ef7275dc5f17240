"""Failure kinds raised by :class:`densematrix.Matrix` operations."""

from __future__ import annotations


class MatrixError(Exception):
    """Base class for every failure the matrix core reports."""


class DimensionMismatchError(MatrixError, ValueError):
    """Raised when operand shapes are incompatible for the requested operation."""


class NotSquareError(MatrixError, ValueError):
    """Raised when a square matrix is required but the operand is not square."""


class MatrixIndexError(MatrixError, IndexError):
    """Raised when a row or column index falls outside ``[0, count)``."""


def describe_shape(rows: int, cols: int) -> str:
    """Return ``"<rows>x<cols>"`` for use in error messages.

    >>> describe_shape(2, 3)
    '2x3'
    """

    return f"{rows}x{cols}"
