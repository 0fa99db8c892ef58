"""
Tests for reduced row echelon form.

Validates:
    - Known reductions, including the fraction-free integer path
    - Column-major pivot search
    - Idempotence and rank against numpy
    - No mutation of the input by Matrix.rref()
    - In-place reduction through pylinear.matrix.rref()
    - PrecisionWarning when integers cannot be normalized exactly
    - numpy, Decimal and complex elements
"""

import math
import warnings
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from pylinear.core.exceptions import PrecisionWarning
from pylinear.matrix import Matrix, RREFResult, row_reduce, rref


# ═══════════════════════════════════════════════════════════════════════
# Known reductions
# ═══════════════════════════════════════════════════════════════════════


class TestKnownReductions:

    def test_invertible_integer_matrix(self):
        result = Matrix([[2, 4], [1, 3]]).rref()
        assert result == Matrix.identity(2)
        assert all(type(x) is int for x in result.storage)

    def test_singular(self, singular_matrix):
        assert singular_matrix.rref() == Matrix([[1, 2], [0, 0]])

    def test_augmented_system(self):
        # x + y = 3, x - y = 1  ->  x = 2, y = 1
        reduced = Matrix([[1, 1, 3], [1, -1, 1]]).rref()
        assert reduced == Matrix([[1, 0, 2], [0, 1, 1]])

    def test_zero_matrix(self):
        zero = Matrix.zeros(2, 3)
        assert zero.rref() == zero
        assert zero.rank() == 0

    def test_empty_matrix(self):
        assert Matrix().rref() == Matrix()

    def test_float_matrix(self):
        assert Matrix([[2.0, 1.0], [4.0, 3.0]]).rref().allclose(Matrix.identity(2, float))

    def test_fraction_matrix_exact(self):
        m = Matrix([[Fraction(1, 2), 1], [1, 1]])
        with warnings.catch_warnings():
            warnings.simplefilter("error", PrecisionWarning)
            result = m.rref()
        assert result == Matrix.identity(2)

    def test_no_negative_zero(self):
        result = Matrix([[-1.0, 0.0]]).rref()
        assert result[0, 0] == 1.0
        assert math.copysign(1.0, result[0, 1]) == 1.0


# ═══════════════════════════════════════════════════════════════════════
# Element types
# ═══════════════════════════════════════════════════════════════════════


class TestElementTypes:

    @pytest.mark.parametrize("grid,result_type", [
        (np.array([[2, 4], [1, 3]], dtype=np.int64), int),
        (np.array([[2.0, 1.0], [4.0, 3.0]]), np.float64),
        ([[Decimal(2), Decimal(4)], [Decimal(1), Decimal(3)]], Decimal),
        ([[1j, complex(1)], [complex(1), 1j]], complex),
    ])
    def test_invertible_reduces_to_identity(self, grid, result_type):
        result = Matrix(grid).rref()
        assert result.allclose(Matrix.identity(2, result_type))
        assert all(type(x) is result_type for x in result.storage)

    def test_numpy_int_grid_does_not_overflow(self):
        grid = np.array([
            [3, 7, 2, 9, 4],
            [5, 1, 8, 2, 6],
            [7, 3, 1, 5, 9],
            [2, 9, 4, 7, 1],
            [8, 2, 6, 3, 5],
        ])
        result = Matrix(grid).rref()
        assert result == Matrix.from_array(grid).rref()
        assert result == Matrix.identity(5)
        assert all(type(x) is int for x in result.storage)

    def test_numpy_int_grid_input_untouched(self):
        m = Matrix(np.array([[2, 4], [1, 3]]))
        m.rref()
        assert isinstance(m[0, 0], np.integer)


# ═══════════════════════════════════════════════════════════════════════
# Pivot selection
# ═══════════════════════════════════════════════════════════════════════


class TestPivots:

    def test_leftmost_column_first(self):
        """A nonzero entry further left in a lower row wins over the current row."""
        result = row_reduce(Matrix([[0, 1], [1, 0]]))
        assert result.matrix == Matrix.identity(2)
        assert result.pivot_columns == (0, 1)

    def test_skips_zero_column(self):
        result = row_reduce(Matrix([[0, 1], [0, 2]]))
        assert result.matrix == Matrix([[0, 1], [0, 0]])
        assert result.pivot_columns == (1,)
        assert result.rank == 1

    def test_result_type(self, singular_matrix):
        result = row_reduce(singular_matrix)
        assert isinstance(result, RREFResult)
        assert result.rank == singular_matrix.rank() == 1

    def test_result_is_frozen(self, singular_matrix):
        result = row_reduce(singular_matrix)
        with pytest.raises(AttributeError):
            result.rank = 2


# ═══════════════════════════════════════════════════════════════════════
# Mutation
# ═══════════════════════════════════════════════════════════════════════


class TestMutation:

    def test_method_leaves_input(self):
        m = Matrix([[2, 4], [1, 3]])
        m.rref()
        assert m == Matrix([[2, 4], [1, 3]])

    def test_free_function_reduces_in_place(self):
        m = Matrix([[2, 4], [1, 3]])
        assert rref(m) is None
        assert m == Matrix.identity(2)

    def test_free_function_keeps_shape(self):
        m = Matrix([[1, 2, 3], [2, 4, 6]])
        rref(m)
        assert m.shape == (2, 3)
        assert m == Matrix([[1, 2, 3], [0, 0, 0]])


# ═══════════════════════════════════════════════════════════════════════
# Precision
# ═══════════════════════════════════════════════════════════════════════


class TestPrecision:

    def test_inexact_integer_normalization_warns(self):
        with pytest.warns(PrecisionWarning):
            result = Matrix([[2, 1]]).rref()
        assert result[0, 0] == 1
        assert result[0, 1] == 0.5

    def test_exact_integer_normalization_silent(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error", PrecisionWarning)
            Matrix([[2, 4], [1, 3]]).rref()

    @pytest.mark.parametrize("reduce", [
        lambda m: m.rref(),
        lambda m: row_reduce(m),
        lambda m: rref(m),
    ])
    def test_warning_points_at_caller(self, reduce):
        with pytest.warns(PrecisionWarning) as record:
            reduce(Matrix([[2, 1]]))
        assert record[0].filename == __file__

    def test_rank_does_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error", PrecisionWarning)
            assert Matrix([[2, 1], [4, 3]]).rank() == 2

    def test_fraction_input_avoids_warning(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error", PrecisionWarning)
            result = Matrix([[Fraction(2), 1]]).rref()
        assert result[0, 1] == Fraction(1, 2)


# ═══════════════════════════════════════════════════════════════════════
# Properties over random matrices
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.filterwarnings("ignore::pylinear.core.exceptions.PrecisionWarning")
class TestProperties:

    SHAPES = [(1, 1), (2, 2), (3, 3), (2, 4), (4, 2), (3, 5)]

    def test_idempotent(self, random_int_matrix):
        for rows, columns in self.SHAPES:
            reduced = random_int_matrix(rows, columns).rref()
            assert reduced.rref() == reduced

    def test_rank_matches_numpy(self, random_int_matrix):
        for rows, columns in self.SHAPES:
            m = random_int_matrix(rows, columns, low=-3, high=4)
            assert m.rank() == np.linalg.matrix_rank(m.to_numpy())

    def test_rank_bounded_by_shape(self, random_int_matrix):
        for rows, columns in self.SHAPES:
            assert random_int_matrix(rows, columns).rank() <= min(rows, columns)

    def test_leading_entries_are_one(self, random_int_matrix):
        for rows, columns in self.SHAPES:
            result = row_reduce(random_int_matrix(rows, columns))
            for r, c in enumerate(result.pivot_columns):
                assert result.matrix[r, c] == 1
                for other in range(rows):
                    if other != r:
                        assert result.matrix[other, c] == 0

    def test_zero_rows_at_bottom(self, random_int_matrix):
        m = random_int_matrix(4, 2)
        result = row_reduce(m)
        for r in range(result.rank, 4):
            assert not result.matrix.get_row(r)
