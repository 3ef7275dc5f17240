"""Command-line front end for the densematrix package."""

from .config import DEFAULT_DTYPE, MENU, Operation
from .operations import evaluate

__all__ = [
    "DEFAULT_DTYPE",
    "MENU",
    "Operation",
    "evaluate",
]
