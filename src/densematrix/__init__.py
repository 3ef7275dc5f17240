"""Dense numeric matrices with the standard linear-algebra operator set."""

from importlib import metadata

from .errors import DimensionMismatchError, MatrixError, MatrixIndexError, NotSquareError
from .matrix import Matrix
from .result import Err, Ok, Outcome, attempt

__all__ = [
    "__version__",
    "DimensionMismatchError",
    "Err",
    "Matrix",
    "MatrixError",
    "MatrixIndexError",
    "NotSquareError",
    "Ok",
    "Outcome",
    "attempt",
]


def __getattr__(name: str):
    if name == "__version__":
        try:
            return metadata.version("densematrix")
        except metadata.PackageNotFoundError:  # pragma: no cover - best effort
            return "0"
    raise AttributeError(name)
