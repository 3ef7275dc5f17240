"""Configuration helpers for the densematrix command line.

The module centralises defaults, the operation menu and matrix literal parsing
so the interactive session, the one-shot command and the tests agree.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import Any, Callable, Dict, List, Tuple

from densematrix import Matrix

DEFAULT_DTYPE = "float"
DEFAULT_LOG_LEVEL = "WARNING"
DTYPE_ENVVAR = "DENSEMATRIX_DTYPE"
LOG_LEVEL_ENVVAR = "DENSEMATRIX_LOG_LEVEL"
QUIT_CODE = 0

ELEMENT_TYPES: Dict[str, Callable[[Any], Any]] = {
    "float": float,
    "int": int,
    "fraction": Fraction,
}

_ROW_SEPARATOR = ";"
_ELEMENT_SEPARATOR = re.compile(r"[\s,]+")


class Operation(str, Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    TRANSPOSE = "transpose"
    SCALAR = "scalar"
    DETERMINANT = "determinant"
    ADD_ROW = "add-row"
    ADD_COLUMN = "add-column"
    REMOVE_ROW = "remove-row"
    REMOVE_COLUMN = "remove-column"
    ROW = "row"
    COLUMN = "column"
    CELL = "cell"


@dataclass(frozen=True, slots=True)
class MenuEntry:
    """One line of the interactive menu.

    Parameters
    ----------
    code:
        Number typed by the user to select the entry.
    operation:
        Operation evaluated when the entry is selected.
    label:
        Text shown in the menu and used as the title of the result.
    arguments:
        Names of the extra inputs the operation needs besides matrix ``A``.
        ``"b"`` is the second matrix; ``"scalar"``, ``"row"``, ``"col"`` and
        ``"values"`` are prompted for (or passed as options).
    """

    code: int
    operation: Operation
    label: str
    arguments: Tuple[str, ...] = ()

    @property
    def mutates(self) -> bool:
        return self.operation in {
            Operation.ADD_ROW,
            Operation.ADD_COLUMN,
            Operation.REMOVE_ROW,
            Operation.REMOVE_COLUMN,
        }


MENU: Tuple[MenuEntry, ...] = (
    MenuEntry(1, Operation.ADD, "Addition", ("b",)),
    MenuEntry(2, Operation.SUBTRACT, "Subtraction", ("b",)),
    MenuEntry(3, Operation.MULTIPLY, "Multiplication", ("b",)),
    MenuEntry(4, Operation.TRANSPOSE, "Transposition"),
    MenuEntry(5, Operation.SCALAR, "Scalar multiplication", ("scalar",)),
    MenuEntry(6, Operation.DETERMINANT, "Determinant"),
    MenuEntry(7, Operation.ADD_ROW, "Row addition", ("values",)),
    MenuEntry(8, Operation.ADD_COLUMN, "Col addition", ("values",)),
    MenuEntry(9, Operation.REMOVE_ROW, "Deleting a row", ("row",)),
    MenuEntry(10, Operation.REMOVE_COLUMN, "Deleting a col", ("col",)),
    MenuEntry(11, Operation.ROW, "Reading a row", ("row",)),
    MenuEntry(12, Operation.COLUMN, "Reading a col", ("col",)),
    MenuEntry(13, Operation.CELL, "Reading a cell", ("row", "col")),
)

MENU_BY_CODE: Dict[int, MenuEntry] = {entry.code: entry for entry in MENU}
MENU_BY_OPERATION: Dict[Operation, MenuEntry] = {entry.operation: entry for entry in MENU}


def resolve_element_type(name: str) -> Callable[[Any], Any]:
    """Return the element constructor registered under ``name``.

    >>> resolve_element_type("int")("7")
    7
    """

    try:
        return ELEMENT_TYPES[name.strip().lower()]
    except KeyError:
        choices = ", ".join(sorted(ELEMENT_TYPES))
        raise ValueError(f"unknown element type '{name}' (expected one of: {choices})") from None


def parse_vector(text: str, element_type: Callable[[Any], Any]) -> List[Any]:
    """Parse whitespace or comma separated elements.

    >>> parse_vector("1, 2 3", int)
    [1, 2, 3]
    """

    tokens = [token for token in _ELEMENT_SEPARATOR.split(text.strip()) if token]
    return [element_type(token) for token in tokens]


def parse_matrix(text: str, element_type: Callable[[Any], Any]) -> Matrix:
    """Parse a matrix literal such as ``"1 2; 3 4"``.

    Rows are separated by ``;``. Empty rows are ignored, so an empty string
    yields a ``0x0`` matrix. Ragged literals raise
    :class:`densematrix.DimensionMismatchError`.
    """

    rows = []
    for chunk in text.split(_ROW_SEPARATOR):
        values = parse_vector(chunk, element_type)
        if values:
            rows.append(values)
    return Matrix.from_rows(rows, zero=element_type(0))
