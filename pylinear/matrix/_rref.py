"""
Reduced row echelon form.

Row reduction works on a private copy and keeps no state between calls.

For integral entries the elimination is fraction-free: both rows are scaled
so their pivot-column entries match, subtracted, and the pivot row is then
divided back to what it was. Every intermediate value stays an integer.
Continuous entries (float, Fraction, Decimal, complex) use the same steps
with a unit multiplier. A final pass divides each row by its leading entry.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pylinear.core.exceptions import PrecisionWarning
from pylinear.core.precision import (
    divides_exactly,
    exact_divide,
    integral_gcd,
    is_integral,
    is_zero,
    normalize_zero,
    widen_integral,
)

if TYPE_CHECKING:
    from pylinear.matrix.matrix import Matrix


@dataclass(frozen=True)
class RREFResult:
    """
    Result of row reduction.

    Attributes:
        matrix: The reduced matrix (a new Matrix, the input is untouched)
        pivot_columns: Column of each leading 1, top row first
        rank: Number of pivot rows
    """
    matrix: 'Matrix'
    pivot_columns: tuple[int, ...]
    rank: int


def row_reduce(matrix: 'Matrix', stacklevel: int = 2) -> RREFResult:
    """
    Compute the reduced row echelon form of a matrix.

    For each row r1 from the top, the pivot is the leftmost column holding a
    nonzero entry at or below r1; the first row with that entry is swapped
    up into r1 and the pivot column is cleared from every other row. Once
    no nonzero entry remains below, elimination stops and the rest of the
    matrix is zero.

    Fixed-width integers (numpy.int64 and friends) are widened to Python
    ints first, so integral results come back as Python ints.

    Args:
        matrix: Matrix to reduce (not modified)
        stacklevel: Passed to warnings.warn; wrappers add one per frame
            so the warning points at their caller

    Returns:
        RREFResult with the reduced matrix, pivot columns and rank

    Warns:
        PrecisionWarning: If an integral row could not be normalized
            without leaving the integers
    """
    work, pivot_columns = _echelon(matrix)

    if _normalize(work):
        warnings.warn(
            "Row reduction of an integral matrix needed inexact divisions; "
            "affected entries were computed with true division",
            PrecisionWarning,
            stacklevel=stacklevel,
        )

    return RREFResult(
        matrix=work,
        pivot_columns=pivot_columns,
        rank=len(pivot_columns),
    )


def pivot_rank(matrix: 'Matrix') -> int:
    """
    Number of pivots found by elimination.

    Skips the normalization pass, so it never warns.
    """
    _, pivot_columns = _echelon(matrix)
    return len(pivot_columns)


def _echelon(matrix: 'Matrix') -> tuple['Matrix', tuple[int, ...]]:
    """Eliminate on a widened copy; return it with its pivot columns."""
    work = matrix.copy()
    values = work.storage
    for i in range(len(values)):
        values[i] = widen_integral(values[i])

    n_rows = work.rows
    pivot_columns: list[int] = []

    for r1 in range(n_rows):
        found = _find_pivot(work, r1)
        if found is None:
            break

        r2, p = found
        if r2 > r1:
            work._swap_rows(r1, r2)

        for other in range(n_rows):
            if other != r1:
                _eliminate(work, r1, other, p)

        pivot_columns.append(p)

    return work, tuple(pivot_columns)


def _find_pivot(work: 'Matrix', start: int) -> tuple[int, int] | None:
    """First (row, column) of the leftmost nonzero column at or below start."""
    n_rows, n_columns = work.shape
    for c in range(n_columns):
        for r in range(start, n_rows):
            if not is_zero(work[r, c]):
                return r, c
    return None


def _eliminate(work: 'Matrix', r1: int, r2: int, p: int) -> None:
    """Clear column p of row r2 using pivot row r1."""
    pivot = work[r1, p]
    other = work[r2, p]
    if is_zero(other):
        return

    if is_integral(pivot) and is_integral(other):
        mult = integral_gcd(pivot, other)
    else:
        mult = 1

    mult1 = mult * other
    mult2 = mult * pivot
    n_columns = work.columns

    for c in range(n_columns):
        work[r1, c] = work[r1, c] * mult1
        work[r2, c] = work[r2, c] * mult2

    for c in range(n_columns):
        work[r2, c] = work[r2, c] - work[r1, c]
        work[r1, c] = exact_divide(work[r1, c], mult1)


def _normalize(work: 'Matrix') -> bool:
    """
    Divide every nonzero row by its leading entry, in place.

    Returns:
        True if some integral entry did not divide evenly
    """
    n_rows, n_columns = work.shape
    inexact = False

    for r in range(n_rows):
        lead = next((c for c in range(n_columns) if not is_zero(work[r, c])), None)
        if lead is None:
            continue

        pivot = work[r, lead]
        for c in range(n_columns):
            value = work[r, c]
            if is_integral(value) and is_integral(pivot) and not divides_exactly(value, pivot):
                inexact = True
            work[r, c] = normalize_zero(exact_divide(value, pivot))

    return inexact
