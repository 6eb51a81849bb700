"""Human-readable rendering of matrices for debugging."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .matrix import Matrix


def _format_real(value: float) -> str:
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _format_imag(value: float) -> str:
    if value == 1:
        return "i"
    if value == -1:
        return "-i"
    return f"{_format_real(value)}i"


def format_complex(value: complex) -> str:
    """
    Render a single complex number.

    Purely real values print as the real part, purely imaginary values as
    ``i``, ``-i`` or ``{im}i``, and mixed values as ``(re+{imag})``.
    """
    re, im = value.real, value.imag
    if im != 0 and re != 0:
        return f"({_format_real(re)}+{_format_imag(im)})"
    if im == 0:
        return _format_real(re)
    return _format_imag(im)


def format_matrix(matrix: "Matrix") -> str:
    """
    Render a matrix one row per line.

    Example:
        >>> format_matrix(Matrix([[0, 1], [1, 0]]))
        '[0, 1, \n 1, 0]'
    """
    values = matrix.data.tolist()
    rows, cols = matrix.rows, matrix.cols

    out = "["
    for r, row in enumerate(values):
        for c, value in enumerate(row):
            out += format_complex(complex(value))
            if c != cols - 1 or r != rows - 1:
                out += ", "
        if r != rows - 1:
            out += "\n "
    out += "]"
    return out
