"""
Human-readable rendering of polynomial coefficients.
"""

from __future__ import annotations

from typing import Any, Sequence

from pylinear.core.precision import is_zero


def format_polynomial(coefficients: Sequence[Any]) -> str:
    """
    Render coefficients (low to high degree) in descending-degree form.

    Rules:
        - zero coefficients are skipped; all-zero renders as '0'
        - a coefficient of 1 or -1 is elided except on the constant term
        - degree 1 renders as 'x', higher degrees as 'x^k'
        - terms are joined by ' + ' or ' - ' from the sign of the next term
        - the leading term carries its own sign

    Examples:
        [1, 2, 3]   -> '3x^2 + 2x + 1'
        [1, 0, -1]  -> '-x^2 + 1'
        [0, -1]     -> '-x'
    """
    terms = [
        (degree, coefficient)
        for degree, coefficient in enumerate(coefficients)
        if not is_zero(coefficient)
    ]
    if not terms:
        return '0'
    terms.reverse()

    parts = []
    for k, (degree, coefficient) in enumerate(terms):
        leading = k == 0
        if k > 0:
            parts.append(' + ' if coefficient > 0 else ' - ')

        magnitude = coefficient if leading else abs(coefficient)
        if degree == 0:
            parts.append(str(magnitude))
            continue

        variable = 'x' if degree == 1 else f'x^{degree}'
        if abs(coefficient) == 1:
            sign = '-' if leading and coefficient < 0 else ''
            parts.append(sign + variable)
        else:
            parts.append(f'{magnitude}{variable}')

    return ''.join(parts)
