"""
Matrix: a two-dimensional container over flat row-major storage.

A Matrix owns one Vector holding rows * columns elements, plus its row and
column counts. Element-wise arithmetic comes from the generic primitives
(through ArithmeticOperators); the matrix adds 2D indexing, row and column
extraction, transpose, the matrix product and row reduction.

Invariants:
    - rows * columns == len(storage) at all times
    - m[r, c] is storage[r * columns + c]
    - shape changes only through whole-matrix reassignment (assign) or by
      returning a new matrix
"""

from __future__ import annotations

from itertools import islice
from typing import Any, Iterable

from numpy.typing import ArrayLike, NDArray

from pylinear.core.arithmetic import ArithmeticOperators
from pylinear.core.exceptions import DimensionError
from pylinear.core.tolerances import ToleranceTier
from pylinear.core.validation import check_2d, check_array, check_non_negative_int
from pylinear.matrix._rref import pivot_rank, row_reduce
from pylinear.vector import Vector, dot

# Width every element is right-justified to when a matrix is rendered
FIELD_WIDTH = 10


class Matrix(ArithmeticOperators):
    """
    Dense matrix of numeric elements.

    Construction:
        Matrix([[1, 2], [3, 4]])          # nested rows
        Matrix.zeros(2, 3)                # 2 x 3 of zeros
        Matrix.identity(3)
        Matrix.from_flat([1, 2, 3, 4], 2, 2)
        Matrix.from_array(ndarray)        # 2D numeric numpy array
        m.copy()

    Indexing uses a (row, column) pair: m[r, c] and m[r, c] = x. There is
    no bounds checking beyond the IndexError of the flat storage.

    Operators:
        A + B, A - B     element-wise, shapes must match
        A * s, s * A     scale, A / s divide
        A * B, A @ B     matrix product, A.columns must equal B.rows
    """

    def __init__(self, grid: Iterable[Iterable[Any]] = ()):
        rows = [list(row) for row in grid]
        n_columns = len(rows[0]) if rows else 0

        for i, row in enumerate(rows):
            if len(row) != n_columns:
                raise DimensionError(
                    f"Matrix rows must all have the same length: row 0 has "
                    f"{n_columns} elements, row {i} has {len(row)}",
                    expected=n_columns,
                    actual=len(row),
                )

        self._data = Vector(value for row in rows for value in row)
        self._rows = len(rows)
        self._columns = n_columns

    @classmethod
    def _from_storage(cls, data: Vector, rows: int, columns: int) -> Matrix:
        """Wrap existing storage; the caller guarantees rows * columns == len(data)."""
        matrix = cls.__new__(cls)
        matrix._data = data
        matrix._rows = rows
        matrix._columns = columns
        return matrix

    @classmethod
    def zeros(cls, rows: int, columns: int, element_type: type = int) -> Matrix:
        """Zero-filled rows x columns matrix."""
        rows = check_non_negative_int(rows, 'rows')
        columns = check_non_negative_int(columns, 'columns')
        return cls._from_storage(Vector.zeros(rows * columns, element_type), rows, columns)

    @classmethod
    def identity(cls, size: int, element_type: type = int) -> Matrix:
        """size x size identity matrix."""
        matrix = cls.zeros(size, size, element_type)
        for i in range(size):
            matrix[i, i] = element_type(1)
        return matrix

    @classmethod
    def from_flat(cls, values: Iterable[Any], rows: int, columns: int) -> Matrix:
        """
        Fill a rows x columns matrix from a flat row-major sequence.

        Values beyond rows * columns are ignored. If fewer are given, the
        remaining entries are zero.
        """
        rows = check_non_negative_int(rows, 'rows')
        columns = check_non_negative_int(columns, 'columns')
        size = rows * columns

        data = Vector(islice(values, size))
        data.resize(size)
        return cls._from_storage(data, rows, columns)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Build a Matrix from a 2D numeric array.

        Integer arrays produce Python ints, so exact row reduction applies.

        Raises:
            ValidationError: If array is not numeric
            DimensionError: If array is not 2D
        """
        arr = check_array(array, 'array')
        check_2d(arr, 'array')
        n_rows, n_columns = arr.shape
        return cls.from_flat(arr.ravel().tolist(), n_rows, n_columns)

    # === NumericContainer protocol ===

    @property
    def storage(self) -> Vector:
        return self._data

    def copy(self) -> Matrix:
        return Matrix._from_storage(self._data.copy(), self._rows, self._columns)

    def check_compatible(self, other: Any) -> None:
        """
        Require an equally shaped Matrix.

        Element-wise arithmetic on flat storage would otherwise break the
        rows * columns invariant.
        """
        if not isinstance(other, Matrix) or other.shape != self.shape:
            actual = other.shape if isinstance(other, Matrix) else type(other).__name__
            raise DimensionError(
                f"Element-wise operation needs matrices of the same shape: "
                f"{self.shape} and {actual}",
                expected=self.shape,
                actual=actual,
            )

    # === Shape ===

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._columns)

    def length(self) -> int:
        """Number of elements (rows * columns)."""
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    # === Element access ===

    def __getitem__(self, key: tuple[int, int]) -> Any:
        r, c = key
        return self._data[r * self._columns + c]

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        r, c = key
        self._data[r * self._columns + c] = value

    def at(self, r: int, c: int) -> Any:
        """Element at row r, column c."""
        return self._data[r * self._columns + c]

    def get_row(self, r: int) -> Vector:
        """Copy of row r."""
        start = r * self._columns
        return Vector(self._data[start + c] for c in range(self._columns))

    def get_column(self, c: int) -> Vector:
        """Copy of column c."""
        return Vector(self._data[r * self._columns + c] for r in range(self._rows))

    def tolist(self) -> list[list[Any]]:
        """Rows as nested lists."""
        return [self.get_row(r).tolist() for r in range(self._rows)]

    def to_numpy(self, dtype: Any = None) -> NDArray[Any]:
        """Elements as a 2D numpy array."""
        return self._data.to_numpy(dtype=dtype).reshape(self._rows, self._columns)

    # === Algebra ===

    def transpose(self) -> Matrix:
        """New matrix with rows and columns swapped."""
        result = Matrix.zeros(self._columns, self._rows)
        for c in range(self._columns):
            for r in range(self._rows):
                result[c, r] = self[r, c]
        return result

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return matmul(self, other)
        return super().__mul__(other)

    def __imul__(self, other):
        if isinstance(other, Matrix):
            return self.assign(matmul(self, other))
        return super().__imul__(other)

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return matmul(self, other)

    def rref(self) -> Matrix:
        """
        Reduced row echelon form, as a new matrix.

        See pylinear.matrix.row_reduce for the algorithm. The free function
        pylinear.matrix.rref reduces a matrix in place instead.
        """
        return row_reduce(self, stacklevel=3).matrix

    def rank(self) -> int:
        """Number of nonzero rows in the reduced row echelon form."""
        return pivot_rank(self)

    def _swap_rows(self, r1: int, r2: int) -> None:
        for c in range(self._columns):
            self[r1, c], self[r2, c] = self[r2, c], self[r1, c]

    # === In-place assignment ===

    def assign(self, other: Matrix) -> Matrix:
        """Replace this matrix's shape and elements with other's; return self."""
        self._data = other._data.copy()
        self._rows = other._rows
        self._columns = other._columns
        return self

    # === Comparison ===

    def __bool__(self) -> bool:
        """False iff every element equals zero."""
        return bool(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    __hash__ = None  # mutable

    def allclose(self, other: Matrix, tolerance: ToleranceTier | None = None) -> bool:
        """Element-wise comparison within a tolerance tier; shapes must match."""
        if self.shape != other.shape:
            return False
        return self._data.allclose(other._data, tolerance)

    # === Rendering ===

    def __str__(self) -> str:
        lines = []
        for r in range(self._rows):
            lines.append(' '.join(f"{str(value):>{FIELD_WIDTH}}" for value in self.get_row(r)))
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"Matrix({self.tolist()!r})"


def matmul(lhs: Matrix, rhs: Matrix) -> Matrix:
    """
    Matrix product.

    Entry (r, c) of the result is the dot product of row r of lhs and
    column c of rhs.

    Args:
        lhs: Left factor (m x n)
        rhs: Right factor (n x p)

    Returns:
        New m x p matrix

    Raises:
        DimensionError: If lhs.columns != rhs.rows
    """
    if lhs.columns != rhs.rows:
        raise DimensionError(
            f"Cannot multiply matrices of incompatible dimensions: "
            f"{lhs.shape} x {rhs.shape}",
            expected=lhs.columns,
            actual=rhs.rows,
        )

    product = Matrix.zeros(lhs.rows, rhs.columns)
    for r in range(lhs.rows):
        row = lhs.get_row(r)
        for c in range(rhs.columns):
            product[r, c] = dot(row, rhs.get_column(c))
    return product


def append(lhs: Matrix, rhs: Matrix) -> Matrix:
    """
    Horizontal concatenation [lhs | rhs].

    Typically used to build an augmented matrix before row reduction.

    Raises:
        DimensionError: If the row counts differ
    """
    if lhs.rows != rhs.rows:
        raise DimensionError(
            f"Cannot append matrices with different row counts: "
            f"{lhs.rows} and {rhs.rows}",
            expected=lhs.rows,
            actual=rhs.rows,
        )

    values = []
    for r in range(lhs.rows):
        values.extend(lhs.get_row(r))
        values.extend(rhs.get_row(r))
    return Matrix.from_flat(values, lhs.rows, lhs.columns + rhs.columns)


def rref(matrix: Matrix) -> None:
    """Reduce matrix to reduced row echelon form in place."""
    matrix.assign(row_reduce(matrix, stacklevel=3).matrix)
