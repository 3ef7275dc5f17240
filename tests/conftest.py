from __future__ import annotations

from random import Random
from typing import Callable

import pytest

from densematrix import Matrix


def _random_int_matrix(rows: int, cols: int, seed: int, low: int = -5, high: int = 5) -> Matrix[int]:
    rng = Random(seed)
    return Matrix.from_rows([[rng.randint(low, high) for _ in range(cols)] for _ in range(rows)])


@pytest.fixture()
def random_int_matrix() -> Callable[..., Matrix[int]]:
    return _random_int_matrix


@pytest.fixture()
def a() -> Matrix[int]:
    return Matrix.from_rows([[1, 2, 3], [4, 5, 6]])


@pytest.fixture()
def b() -> Matrix[int]:
    return Matrix.from_rows([[7, 8, 9], [10, 11, 12]])


@pytest.fixture()
def square() -> Matrix[int]:
    return Matrix.from_rows(
        [
            [2, -1, 0],
            [1, 3, 2],
            [0, 1, 4],
        ]
    )
