"""Dispatch of menu operations onto :class:`densematrix.Matrix`."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Sequence

from densematrix import Err, Matrix, Outcome, attempt

from .config import Operation

LOGGER = logging.getLogger(__name__)


def _mutated(target: Matrix, method: Callable[..., None], *args: Any) -> Matrix:
    method(*args)
    return target


def evaluate(
    operation: Operation,
    a: Matrix,
    b: Optional[Matrix] = None,
    *,
    scalar: Any = None,
    row: Optional[int] = None,
    col: Optional[int] = None,
    values: Optional[Sequence[Any]] = None,
) -> Outcome[Any]:
    """Evaluate ``operation`` with ``a`` as the primary operand.

    Structural operations mutate ``a`` in place and return it. Matrix
    failures come back as :class:`densematrix.Err`; a missing argument is a
    programming error and raises :class:`ValueError`.
    """

    required = {
        Operation.ADD: b,
        Operation.SUBTRACT: b,
        Operation.MULTIPLY: b,
        Operation.SCALAR: scalar,
        Operation.ADD_ROW: values,
        Operation.ADD_COLUMN: values,
        Operation.REMOVE_ROW: row,
        Operation.ROW: row,
        Operation.REMOVE_COLUMN: col,
        Operation.COLUMN: col,
    }
    if operation in required and required[operation] is None:
        raise ValueError(f"operation '{operation.value}' is missing an argument")
    if operation is Operation.CELL and (row is None or col is None):
        raise ValueError("operation 'cell' requires both a row and a column index")

    handlers: Dict[Operation, Callable[[], Any]] = {
        Operation.ADD: lambda: a.add(b),
        Operation.SUBTRACT: lambda: a.subtract(b),
        Operation.MULTIPLY: lambda: a.multiply(b),
        Operation.TRANSPOSE: a.transpose,
        Operation.SCALAR: lambda: a.scalar_multiply(scalar),
        Operation.DETERMINANT: a.determinant,
        Operation.ADD_ROW: lambda: _mutated(a, a.add_row, values),
        Operation.ADD_COLUMN: lambda: _mutated(a, a.add_column, values),
        Operation.REMOVE_ROW: lambda: _mutated(a, a.remove_row, row),
        Operation.REMOVE_COLUMN: lambda: _mutated(a, a.remove_column, col),
        Operation.ROW: lambda: a.get_row(row),
        Operation.COLUMN: lambda: a.get_column(col),
        Operation.CELL: lambda: a.get_cell(row, col),
    }
    LOGGER.debug("Evaluating %s on a %dx%d matrix", operation.value, *a.shape)
    outcome = attempt(handlers[operation])
    if isinstance(outcome, Err):
        LOGGER.info("Operation %s failed with %s: %s", operation.value, outcome.kind, outcome.message)
    return outcome
