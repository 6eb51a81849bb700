"""Tests for matrix pretty-printing."""

import pytest

from qkron.linalg import Matrix, format_complex, format_matrix


@pytest.mark.parametrize(
    "rows, expected",
    [
        ([[0, 1], [1, 0]], "[0, 1, \n 1, 0]"),
        ([[0, -1j], [1j, 0]], "[0, -i, \n i, 0]"),
        (
            [[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 0, 1], [0, 0, 1, 0]],
            "[1, 0, 0, 0, \n 0, 1, 0, 0, \n 0, 0, 0, 1, \n 0, 0, 1, 0]",
        ),
        (
            [[1.9 + 3.2j, 3.1 + 1.01j], [4 + 5j, 2.3 - 6j]],
            "[(1.9+3.2i), (3.1+1.01i), \n (4+5i), (2.3+-6i)]",
        ),
        ([[0.5], [2.5j]], "[0.5, \n 2.5i]"),
    ],
)
def test_format_matrix(rows, expected) -> None:
    assert format_matrix(Matrix(rows)) == expected


def test_str_uses_format_matrix() -> None:
    m = Matrix([[1, 0], [0, -1]])
    assert str(m) == "[1, 0, \n 0, -1]"


def test_format_complex_unit_imaginary_with_real_part() -> None:
    assert format_complex(2 + 1j) == "(2+i)"
    assert format_complex(2 - 1j) == "(2+-i)"


def test_format_single_row() -> None:
    assert format_matrix(Matrix([[1, 2, 3]])) == "[1, 2, 3]"
