from __future__ import annotations

from fractions import Fraction

import pytest

from densematrix import DimensionMismatchError, Matrix
from densematrix_cli.config import (
    MENU,
    MENU_BY_CODE,
    MENU_BY_OPERATION,
    Operation,
    parse_matrix,
    parse_vector,
    resolve_element_type,
)


def test_parse_vector_accepts_spaces_and_commas() -> None:
    assert parse_vector("1, 2 3", int) == [1, 2, 3]
    assert parse_vector("  ", int) == []


def test_parse_matrix() -> None:
    assert parse_matrix("1 2; 3 4", float) == Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
    assert parse_matrix("1 2;", int).shape == (1, 2)
    assert parse_matrix("", int).shape == (0, 0)


def test_parse_matrix_uses_the_element_type() -> None:
    matrix = parse_matrix("1/2 1; 0 2", Fraction)
    assert matrix.get_cell(0, 0) == Fraction(1, 2)
    assert isinstance(matrix.zero, Fraction)


def test_parse_matrix_rejects_bad_input() -> None:
    with pytest.raises(DimensionMismatchError):
        parse_matrix("1 2; 3", int)
    with pytest.raises(ValueError):
        parse_matrix("1 x", int)


def test_resolve_element_type() -> None:
    assert resolve_element_type("FLOAT") is float
    assert resolve_element_type("fraction") is Fraction
    with pytest.raises(ValueError, match="unknown element type"):
        resolve_element_type("complex")


def test_menu_covers_every_operation() -> None:
    assert [entry.code for entry in MENU] == list(range(1, 14))
    assert set(MENU_BY_OPERATION) == set(Operation)
    assert MENU_BY_CODE[6].operation is Operation.DETERMINANT
    assert MENU_BY_CODE[7].mutates
    assert not MENU_BY_CODE[11].mutates
