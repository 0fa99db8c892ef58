"""
Tests for Matrix construction, indexing, transpose and rendering.
"""

import numpy as np
import pytest

from pylinear.core.exceptions import DimensionError, ValidationError
from pylinear.matrix import FIELD_WIDTH, Matrix, append
from pylinear.vector import Vector


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_from_grid(self):
        m = Matrix([[1, 2, 3], [4, 5, 6]])
        assert m.shape == (2, 3)
        assert m.rows == 2
        assert m.columns == 3
        assert len(m) == 6

    def test_ragged_grid_rejected(self):
        with pytest.raises(DimensionError, match="same length"):
            Matrix([[1, 2], [3]])

    def test_empty(self):
        m = Matrix()
        assert m.shape == (0, 0)
        assert len(m) == 0

    def test_zeros(self):
        m = Matrix.zeros(2, 3)
        assert m.shape == (2, 3)
        assert not m

    def test_zeros_negative(self):
        with pytest.raises(ValidationError):
            Matrix.zeros(-1, 2)

    def test_identity(self):
        assert Matrix.identity(2) == Matrix([[1, 0], [0, 1]])

    def test_from_flat(self):
        assert Matrix.from_flat([1, 2, 3, 4], 2, 2) == Matrix([[1, 2], [3, 4]])

    def test_from_flat_drops_extra(self):
        assert Matrix.from_flat(range(10), 1, 2) == Matrix([[0, 1]])

    def test_from_flat_pads_missing(self):
        assert Matrix.from_flat([5], 2, 2) == Matrix([[5, 0], [0, 0]])

    def test_from_array(self):
        m = Matrix.from_array(np.array([[1, 2], [3, 4]]))
        assert m == Matrix([[1, 2], [3, 4]])
        assert type(m[0, 0]) is int

    def test_from_array_keeps_empty_dimension(self):
        assert Matrix.from_array(np.zeros((0, 3))).shape == (0, 3)

    def test_from_array_rejects_1d(self):
        with pytest.raises(DimensionError):
            Matrix.from_array([1, 2, 3])

    def test_invariant_rows_times_columns(self, random_int_matrix):
        for rows, columns in [(1, 1), (2, 5), (4, 3)]:
            m = random_int_matrix(rows, columns)
            assert m.rows * m.columns == len(m) == len(m.storage)


# ═══════════════════════════════════════════════════════════════════════
# Indexing
# ═══════════════════════════════════════════════════════════════════════


class TestIndexing:

    def test_row_major_mapping(self):
        m = Matrix([[1, 2, 3], [4, 5, 6]])
        for r in range(2):
            for c in range(3):
                assert m[r, c] == m.storage[r * 3 + c]

    def test_at(self):
        assert Matrix([[1, 2], [3, 4]]).at(1, 0) == 3

    def test_set(self):
        m = Matrix.zeros(2, 2)
        m[1, 1] = 7
        assert m.tolist() == [[0, 0], [0, 7]]

    def test_get_row_is_copy(self):
        m = Matrix([[1, 2], [3, 4]])
        row = m.get_row(1)
        assert row == Vector([3, 4])
        row[0] = 99
        assert m[1, 0] == 3

    def test_get_column(self):
        assert Matrix([[1, 2], [3, 4]]).get_column(1) == Vector([2, 4])

    def test_to_numpy(self):
        np.testing.assert_array_equal(
            Matrix([[1, 2], [3, 4]]).to_numpy(), np.array([[1, 2], [3, 4]])
        )


# ═══════════════════════════════════════════════════════════════════════
# Transpose
# ═══════════════════════════════════════════════════════════════════════


class TestTranspose:

    def test_swaps_dimensions(self):
        m = Matrix([[1, 2, 3], [4, 5, 6]])
        t = m.transpose()
        assert t.shape == (3, 2)
        assert t == Matrix([[1, 4], [2, 5], [3, 6]])

    def test_entries(self, random_int_matrix):
        m = random_int_matrix(3, 5)
        t = m.transpose()
        for r in range(3):
            for c in range(5):
                assert t[c, r] == m[r, c]

    def test_involutive(self, random_int_matrix):
        for rows, columns in [(1, 4), (3, 3), (5, 2)]:
            m = random_int_matrix(rows, columns)
            assert m.transpose().transpose() == m

    def test_does_not_mutate(self):
        m = Matrix([[1, 2]])
        m.transpose()
        assert m.shape == (1, 2)


# ═══════════════════════════════════════════════════════════════════════
# Element-wise arithmetic and assignment
# ═══════════════════════════════════════════════════════════════════════


class TestElementWise:

    def test_add(self):
        assert Matrix([[1, 2], [3, 4]]) + Matrix([[1, 1], [1, 1]]) == Matrix([[2, 3], [4, 5]])

    def test_subtract_shape_mismatch(self):
        with pytest.raises(DimensionError) as exc_info:
            Matrix([[1, 2]]) - Matrix([[1, 2, 3]])
        assert exc_info.value.expected == (1, 2)
        assert exc_info.value.actual == (1, 3)

    def test_same_length_different_shape_refused(self):
        with pytest.raises(DimensionError):
            Matrix([[1, 2, 3, 4]]) + Matrix([[1, 2], [3, 4]])

    def test_scale(self):
        assert Matrix([[1, 2]]) * 3 == Matrix([[3, 6]])

    def test_divide(self):
        assert Matrix([[2.0, 4.0]]) / 2 == Matrix([[1.0, 2.0]])

    def test_assign_replaces_shape(self):
        m = Matrix([[1, 2, 3]])
        result = m.assign(Matrix([[1], [2]]))
        assert result is m
        assert m.shape == (2, 1)
        assert m == Matrix([[1], [2]])

    def test_assign_copies_storage(self):
        source = Matrix([[1]])
        target = Matrix.zeros(1, 1)
        target.assign(source)
        source[0, 0] = 5
        assert target[0, 0] == 1

    def test_allclose(self):
        assert Matrix([[0.1 + 0.2]]).allclose(Matrix([[0.3]]))
        assert not Matrix([[1.0, 2.0]]).allclose(Matrix([[1.0], [2.0]]))


# ═══════════════════════════════════════════════════════════════════════
# append
# ═══════════════════════════════════════════════════════════════════════


class TestAppend:

    def test_augmented(self):
        result = append(Matrix([[1, 2], [3, 4]]), Matrix([[5], [6]]))
        assert result == Matrix([[1, 2, 5], [3, 4, 6]])

    def test_row_mismatch(self):
        with pytest.raises(DimensionError):
            append(Matrix([[1]]), Matrix([[1], [2]]))

    def test_zero_rows_keep_columns(self):
        result = append(Matrix.zeros(0, 2), Matrix.zeros(0, 3))
        assert result.shape == (0, 5)


# ═══════════════════════════════════════════════════════════════════════
# Rendering
# ═══════════════════════════════════════════════════════════════════════


class TestRendering:

    def test_right_justified_grid(self):
        text = str(Matrix([[1, 22], [333, 4]]))
        lines = text.split('\n')
        assert len(lines) == 2
        assert lines[0] == f"{'1':>{FIELD_WIDTH}} {'22':>{FIELD_WIDTH}}"
        assert lines[1] == f"{'333':>{FIELD_WIDTH}} {'4':>{FIELD_WIDTH}}"

    def test_fixed_field_width(self):
        for line in str(Matrix([[1, 2, 3], [4, 5, 6]])).split('\n'):
            assert len(line) == 3 * FIELD_WIDTH + 2

    def test_repr(self):
        assert repr(Matrix([[1, 2]])) == "Matrix([[1, 2]])"
