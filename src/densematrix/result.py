"""Explicit result-or-error values for matrix operations.

The matrix methods raise the exceptions from :mod:`densematrix.errors`.
Call sites that must handle both outcomes without ``try`` blocks use
:func:`attempt`, which turns a call into an :class:`Ok` or :class:`Err`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, NoReturn, TypeVar, Union

from .errors import MatrixError

T = TypeVar("T")
D = TypeVar("D")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome carrying the operation's return value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: D) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err:
    """Failed outcome carrying the :class:`MatrixError` that was raised."""

    error: MatrixError

    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise self.error

    def unwrap_or(self, default: D) -> D:
        return default

    @property
    def kind(self) -> str:
        """Name of the failure kind, e.g. ``"NotSquareError"``."""

        return type(self.error).__name__

    @property
    def message(self) -> str:
        return str(self.error)


Outcome = Union[Ok[T], Err]


def attempt(func: Callable[..., T], *args: Any, **kwargs: Any) -> Outcome[T]:
    """Call ``func`` and wrap its return value or :class:`MatrixError`.

    Exceptions that are not matrix failures propagate unchanged.
    """

    try:
        return Ok(func(*args, **kwargs))
    except MatrixError as exc:
        return Err(exc)
