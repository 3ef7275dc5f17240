from __future__ import annotations

from fractions import Fraction

import numpy as np
import pytest

from densematrix import DimensionMismatchError, Matrix, MatrixIndexError


def test_create_fills_with_zero() -> None:
    matrix = Matrix(2, 3)
    assert matrix.shape == (2, 3)
    assert matrix.row_count == 2
    assert matrix.col_count == 3
    assert matrix.to_list() == [[0, 0, 0], [0, 0, 0]]


def test_create_uses_the_given_zero() -> None:
    matrix = Matrix(1, 2, zero=Fraction(0))
    assert all(isinstance(value, Fraction) for value in matrix.get_row(0))


def test_empty_dimensions_are_allowed() -> None:
    assert Matrix().shape == (0, 0)
    assert Matrix(0, 3).shape == (0, 3)
    assert Matrix(2, 0).to_list() == [[], []]


def test_negative_dimensions_are_rejected() -> None:
    with pytest.raises(ValueError):
        Matrix(-1, 2)


def test_from_rows_copies_its_input() -> None:
    values = [[1, 2], [3, 4]]
    matrix = Matrix.from_rows(values)
    values[0][0] = 99
    assert matrix.get_cell(0, 0) == 1
    assert Matrix.from_rows([]).shape == (0, 0)


def test_from_rows_rejects_ragged_input() -> None:
    with pytest.raises(DimensionMismatchError):
        Matrix.from_rows([[1, 2], [3]])
    with pytest.raises(ValueError):
        Matrix.from_rows([[1], [2, 3]])


def test_unchecked_row_access_is_live(a: Matrix[int]) -> None:
    a[0][1] = 20
    assert a.get_cell(0, 1) == 20
    snapshot = a.row(1)
    assert snapshot == (4, 5, 6)
    assert isinstance(snapshot, tuple)


def test_checked_reads_return_copies(a: Matrix[int]) -> None:
    row = a.get_row(0)
    row[0] = 100
    assert a.get_cell(0, 0) == 1
    assert a.get_column(2) == [3, 6]
    assert a.get_cell(1, 2) == 6


@pytest.mark.parametrize(
    "call",
    [
        lambda m: m.get_cell(2, 0),
        lambda m: m.get_cell(0, 3),
        lambda m: m.get_cell(-1, 0),
        lambda m: m.get_row(2),
        lambda m: m.get_column(3),
        lambda m: m.get_column(-1),
        lambda m: m.remove_row(2),
        lambda m: m.remove_column(3),
    ],
)
def test_checked_access_rejects_out_of_range(a: Matrix[int], call) -> None:
    with pytest.raises(MatrixIndexError):
        call(a)
    assert a.to_list() == [[1, 2, 3], [4, 5, 6]]


def test_bounds_are_enforced_on_empty_matrices() -> None:
    empty = Matrix(0, 0)
    for call in (lambda: empty.get_row(0), lambda: empty.get_column(0), lambda: empty.get_cell(0, 0)):
        with pytest.raises(IndexError):
            call()


def test_add_and_subtract(a: Matrix[int], b: Matrix[int]) -> None:
    assert (a + b).to_list() == [[8, 10, 12], [14, 16, 18]]
    assert b.subtract(a).to_list() == [[6, 6, 6], [6, 6, 6]]
    assert a + b == b + a
    assert a + Matrix(2, 3) == a
    assert a.to_list() == [[1, 2, 3], [4, 5, 6]]


def test_add_requires_equal_shapes(a: Matrix[int]) -> None:
    with pytest.raises(DimensionMismatchError):
        a.add(Matrix(3, 2))
    with pytest.raises(DimensionMismatchError):
        a - Matrix(2, 2)
    with pytest.raises(TypeError):
        a + 1  # noqa: B018


def test_multiply_small(a: Matrix[int]) -> None:
    product = a @ a.transpose()
    assert product.to_list() == [[14, 32], [32, 77]]
    assert (a * a.transpose()) == product


def test_multiply_matches_numpy(random_int_matrix) -> None:
    left = random_int_matrix(4, 3, seed=1)
    right = random_int_matrix(3, 5, seed=2)
    product = left.multiply(right)
    assert product.shape == (4, 5)
    expected = np.array(left.to_list()) @ np.array(right.to_list())
    np.testing.assert_array_equal(np.array(product.to_list()), expected)


def test_multiply_requires_aligned_dimensions(a: Matrix[int], b: Matrix[int]) -> None:
    with pytest.raises(DimensionMismatchError):
        a.multiply(b)


def test_multiply_accumulates_left_to_right() -> None:
    left = Matrix.from_rows([[0.1, 0.2, 0.3]])
    right = Matrix.from_rows([[1.0], [1.0], [1.0]])
    expected = 0.0
    for value in (0.1, 0.2, 0.3):
        expected += value * 1.0
    assert left.multiply(right).get_cell(0, 0) == expected


def test_scalar_multiplication(a: Matrix[int]) -> None:
    assert a.scalar_multiply(0) == Matrix(2, 3)
    assert a * 1 == a
    assert 2 * a == a * 2 == Matrix.from_rows([[2, 4, 6], [8, 10, 12]])
    half = a.scalar_multiply(Fraction(1, 2))
    assert half.get_cell(0, 0) == Fraction(1, 2)


def test_transpose_is_an_involution(a: Matrix[int]) -> None:
    transposed = a.transpose()
    assert transposed.shape == (3, 2)
    assert transposed.to_list() == [[1, 4], [2, 5], [3, 6]]
    assert transposed.transpose() == a
    assert Matrix(0, 3).transpose().shape == (3, 0)


def test_negate(a: Matrix[int]) -> None:
    assert -a + a == Matrix(2, 3)


def test_identity_is_neutral_for_products(square: Matrix[int]) -> None:
    eye = Matrix.identity(3)
    assert eye @ square == square
    assert square @ eye == square


def test_equality_and_hashing(a: Matrix[int]) -> None:
    assert Matrix.from_rows([[1]]) != [[1]]
    assert Matrix(0, 2) != Matrix(0, 3)
    with pytest.raises(TypeError):
        hash(a)


def test_rendering(a: Matrix[int]) -> None:
    assert list(a) == [(1, 2, 3), (4, 5, 6)]
    assert list(a.rows()) == list(a)
    assert str(a) == "1 2 3\n4 5 6"
    assert repr(a) == "Matrix.from_rows([[1, 2, 3], [4, 5, 6]])"
    assert repr(Matrix(0, 3)) == "Matrix(0, 3)"


def test_generic_subscription() -> None:
    matrix = Matrix[float](1, 1, zero=0.0)
    assert matrix.to_list() == [[0.0]]


def test_elementwise_results_are_independent_and_keep_shape(a: Matrix[int]) -> None:
    scaled = a.scalar_multiply(3)
    scaled[0][0] = 100
    assert a.get_cell(0, 0) == 1
    assert Matrix(2, 0).scalar_multiply(5).shape == (2, 0)
    assert (-Matrix(0, 4)).shape == (0, 4)
    negated = Matrix(1, 1, zero=Fraction(0)).negate()
    assert isinstance(negated.zero, Fraction)
