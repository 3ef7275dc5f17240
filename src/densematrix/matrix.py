"""Dense, resizable row-major matrix over any numeric element type."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, List, Protocol, Sequence, Tuple, TypeVar

from .errors import DimensionMismatchError, MatrixIndexError, NotSquareError, describe_shape


class SupportsArithmetic(Protocol):
    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...


T = TypeVar("T", bound=SupportsArithmetic)


class Matrix(Generic[T]):
    """Rectangular matrix stored as a list of rows.

    Parameters
    ----------
    rows, cols:
        Dimensions of the matrix. Either may be zero, which yields an empty
        matrix.
    zero:
        Additive identity of the element type. Used to fill new matrices and
        to seed the accumulators of :meth:`multiply` and :meth:`determinant`.

    Rows returned by ``matrix[i]`` are the live storage of the matrix. They
    must not be kept across :meth:`add_row`, :meth:`add_column`,
    :meth:`remove_row` or :meth:`remove_column`.
    """

    __slots__ = ("_rows", "_row_count", "_col_count", "zero")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int = 0, cols: int = 0, *, zero: Any = 0) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must be non-negative")
        self.zero = zero
        self._row_count = rows
        self._col_count = cols
        self._rows: List[List[T]] = [[zero for _ in range(cols)] for _ in range(rows)]

    @classmethod
    def from_rows(cls, values: Iterable[Sequence[T]], *, zero: Any = 0) -> Matrix[T]:
        """Build a matrix from a rectangular sequence of rows.

        The input is copied. Every row must have the length of the first one,
        otherwise :class:`DimensionMismatchError` is raised.

        >>> Matrix.from_rows([[1, 2], [3, 4]]).shape
        (2, 2)
        """

        rows = [list(row) for row in values]
        cols = len(rows[0]) if rows else 0
        for index, row in enumerate(rows):
            if len(row) != cols:
                raise DimensionMismatchError(
                    f"row {index} has {len(row)} elements, expected {cols}"
                )
        return cls._wrap(rows, len(rows), cols, zero)

    @classmethod
    def identity(cls, size: int, *, one: Any = 1, zero: Any = 0) -> Matrix[T]:
        eye: Matrix[T] = cls(size, size, zero=zero)
        for i in range(size):
            eye._rows[i][i] = one
        return eye

    @classmethod
    def _wrap(cls, rows: List[List[T]], row_count: int, col_count: int, zero: Any) -> Matrix[T]:
        instance = cls.__new__(cls)
        instance.zero = zero
        instance._rows = rows
        instance._row_count = row_count
        instance._col_count = col_count
        return instance

    def _blank(self, rows: int, cols: int) -> Matrix[T]:
        return type(self)(rows, cols, zero=self.zero)

    # ------------------------------------------------------------------
    # Dimensions and access
    # ------------------------------------------------------------------
    @property
    def row_count(self) -> int:
        return self._row_count

    @property
    def col_count(self) -> int:
        return self._col_count

    @property
    def shape(self) -> Tuple[int, int]:
        return self._row_count, self._col_count

    @property
    def is_square(self) -> bool:
        return self._row_count == self._col_count

    def __getitem__(self, index: int) -> List[T]:
        """Unchecked access to the live row at ``index``."""

        return self._rows[index]

    def row(self, index: int) -> Tuple[T, ...]:
        """Unchecked read-only snapshot of the row at ``index``."""

        return tuple(self._rows[index])

    def _check_row_index(self, index: int) -> None:
        if not 0 <= index < self._row_count:
            raise MatrixIndexError(
                f"row index {index} out of range for "
                f"{describe_shape(self._row_count, self._col_count)} matrix"
            )

    def _check_col_index(self, index: int) -> None:
        if not 0 <= index < self._col_count:
            raise MatrixIndexError(
                f"column index {index} out of range for "
                f"{describe_shape(self._row_count, self._col_count)} matrix"
            )

    def get_cell(self, row: int, col: int) -> T:
        self._check_row_index(row)
        self._check_col_index(col)
        return self._rows[row][col]

    def get_row(self, index: int) -> List[T]:
        """Return a copy of row ``index``."""

        self._check_row_index(index)
        return list(self._rows[index])

    def get_column(self, index: int) -> List[T]:
        """Return a copy of column ``index``."""

        self._check_col_index(index)
        return [row[index] for row in self._rows]

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def _require_same_shape(self, other: Matrix[T], operation: str) -> None:
        if self.shape != other.shape:
            raise DimensionMismatchError(
                f"cannot {operation} matrices of shape "
                f"{describe_shape(*self.shape)} and {describe_shape(*other.shape)}"
            )

    def add(self, other: Matrix[T]) -> Matrix[T]:
        self._require_same_shape(other, "add")
        out = self._blank(self._row_count, self._col_count)
        for i, (l_row, r_row) in enumerate(zip(self._rows, other._rows)):
            out_row = out._rows[i]
            for j, (l_val, r_val) in enumerate(zip(l_row, r_row)):
                out_row[j] = l_val + r_val
        return out

    def subtract(self, other: Matrix[T]) -> Matrix[T]:
        self._require_same_shape(other, "subtract")
        out = self._blank(self._row_count, self._col_count)
        for i, (l_row, r_row) in enumerate(zip(self._rows, other._rows)):
            out_row = out._rows[i]
            for j, (l_val, r_val) in enumerate(zip(l_row, r_row)):
                out_row[j] = l_val - r_val
        return out

    def multiply(self, other: Matrix[T]) -> Matrix[T]:
        """Matrix product ``self @ other``.

        Each cell is accumulated from ``zero`` over the shared index in
        ascending order, so floating point results are reproducible.
        """

        if self._col_count != other._row_count:
            raise DimensionMismatchError(
                "the number of columns of the left matrix must equal the number of rows "
                f"of the right matrix ({describe_shape(*self.shape)} @ {describe_shape(*other.shape)})"
            )
        out = self._blank(self._row_count, other._col_count)
        right = other._rows
        for i, left_row in enumerate(self._rows):
            out_row = out._rows[i]
            for j in range(other._col_count):
                total = self.zero
                for k, left_value in enumerate(left_row):
                    total += left_value * right[k][j]
                out_row[j] = total
        return out

    def scalar_multiply(self, scalar: Any) -> Matrix[T]:
        values = [[value * scalar for value in row] for row in self._rows]
        return self._wrap(values, self._row_count, self._col_count, self.zero)

    def negate(self) -> Matrix[T]:
        values = [[self.zero - value for value in row] for row in self._rows]
        return self._wrap(values, self._row_count, self._col_count, self.zero)

    def transpose(self) -> Matrix[T]:
        out = self._blank(self._col_count, self._row_count)
        for i, row in enumerate(self._rows):
            for j, value in enumerate(row):
                out._rows[j][i] = value
        return out

    def minor(self, row: int, col: int) -> Matrix[T]:
        """Submatrix without ``row`` and ``col``, remaining order preserved."""

        self._check_row_index(row)
        self._check_col_index(col)
        values = [
            [value for j, value in enumerate(current) if j != col]
            for i, current in enumerate(self._rows)
            if i != row
        ]
        return self._wrap(values, self._row_count - 1, self._col_count - 1, self.zero)

    def determinant(self) -> T:
        """Determinant by cofactor expansion along the first row.

        The expansion recurses into ``n`` minors per level, so the cost grows
        factorially with the size of the matrix. No pivoting is performed.
        An empty ``0x0`` matrix yields ``zero``.
        """

        if not self.is_square:
            raise NotSquareError(
                "the determinant can only be calculated for a square matrix, got "
                f"{describe_shape(*self.shape)}"
            )
        a = self._rows
        if self._row_count == 1:
            return a[0][0]
        if self._row_count == 2:
            return a[0][0] * a[1][1] - a[0][1] * a[1][0]
        det = self.zero
        for col in range(self._col_count):
            sign = 1 if col % 2 == 0 else -1
            det += sign * a[0][col] * self.minor(0, col).determinant()
        return det

    # ------------------------------------------------------------------
    # Structural mutation
    # ------------------------------------------------------------------
    def add_row(self, row: Iterable[T]) -> None:
        values = list(row)
        if len(values) != self._col_count:
            raise DimensionMismatchError(
                f"row length {len(values)} does not match number of columns {self._col_count}"
            )
        self._rows.append(values)
        self._row_count += 1

    def add_column(self, column: Iterable[T]) -> None:
        values = list(column)
        if len(values) != self._row_count:
            raise DimensionMismatchError(
                f"column length {len(values)} does not match number of rows {self._row_count}"
            )
        for row, value in zip(self._rows, values):
            row.append(value)
        self._col_count += 1

    def remove_row(self, index: int) -> None:
        self._check_row_index(index)
        del self._rows[index]
        self._row_count -= 1

    def remove_column(self, index: int) -> None:
        self._check_col_index(index)
        for row in self._rows:
            del row[index]
        self._col_count -= 1

    # ------------------------------------------------------------------
    # Rendering and protocol support
    # ------------------------------------------------------------------
    def rows(self) -> Iterator[Tuple[T, ...]]:
        """Yield rows top to bottom, each as a tuple in column order."""

        for row in self._rows:
            yield tuple(row)

    def __iter__(self) -> Iterator[Tuple[T, ...]]:
        return self.rows()

    def to_list(self) -> List[List[T]]:
        return [list(row) for row in self._rows]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._rows == other._rows

    def __add__(self, other: object) -> Matrix[T]:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Matrix[T]:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Any) -> Matrix[T]:
        if isinstance(other, Matrix):
            return self.multiply(other)
        return self.scalar_multiply(other)

    def __rmul__(self, other: Any) -> Matrix[T]:
        return self.scalar_multiply(other)

    def __matmul__(self, other: object) -> Matrix[T]:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __neg__(self) -> Matrix[T]:
        return self.negate()

    def __str__(self) -> str:
        return "\n".join(" ".join(str(value) for value in row) for row in self._rows)

    def __repr__(self) -> str:
        name = type(self).__name__
        if self._row_count == 0:
            return f"{name}(0, {self._col_count})"
        return f"{name}.from_rows({self._rows!r})"
