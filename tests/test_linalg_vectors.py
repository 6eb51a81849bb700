"""Tests for ket/bra and vector coercions."""

import math

import pytest

from qkron.errors import DimensionMismatch
from qkron.gates import H_MINUS_KET, H_PLUS_KET, ONE_KET, ZERO_KET
from qkron.linalg import (
    Matrix,
    as_bra,
    as_column_vector,
    as_ket,
    as_row_vector,
    dotp,
    is_bra,
    is_ket,
    kron_kets,
)


def test_as_column_vector_flattens_row_major() -> None:
    col = as_column_vector(Matrix([[1, 2], [3, 4]]))
    assert col.shape == (4, 1)
    assert col.equals(Matrix([[1], [2], [3], [4]]))


def test_as_row_vector_flattens_row_major() -> None:
    row = as_row_vector(Matrix([[1, 2], [3, 4]]))
    assert row.shape == (1, 4)
    assert row.equals(Matrix([[1, 2, 3, 4]]))


def test_as_ket_truncates_extra_elements() -> None:
    ket = as_ket(Matrix([[1, 2, 3, 4]]))
    assert is_ket(ket)
    assert ket.equals(Matrix([[1], [2]]))


def test_as_ket_pads_missing_elements() -> None:
    ket = as_ket(Matrix([[7]]))
    assert ket.equals(Matrix([[7], [0]]))


def test_as_bra() -> None:
    bra = as_bra(ONE_KET)
    assert is_bra(bra)
    assert bra.equals(Matrix([[0, 1]]))


def test_as_bra_needs_two_elements() -> None:
    with pytest.raises(DimensionMismatch):
        as_bra(Matrix([[1]]))


def test_is_ket_and_is_bra() -> None:
    assert is_ket(ZERO_KET)
    assert not is_bra(ZERO_KET)
    assert not is_ket(Matrix([[1], [0], [0]]))


def test_kron_kets_basis_index() -> None:
    vec = kron_kets([ONE_KET, ZERO_KET])  # |10>
    assert vec.shape == (4, 1)
    assert vec.equals(Matrix([[0], [0], [1], [0]]))


def test_kron_kets_empty_is_scalar_one() -> None:
    assert kron_kets([]).equals(Matrix([[1]]))


def test_kron_kets_superposition() -> None:
    vec = kron_kets([H_PLUS_KET, H_PLUS_KET])
    assert vec.equals(Matrix([[0.5], [0.5], [0.5], [0.5]]), 1e-12)


def test_dotp_conjugates_second_argument() -> None:
    a = Matrix([[1j], [0]])
    b = Matrix([[1j], [0]])
    assert dotp(a, b) == pytest.approx(1.0)
    assert dotp(Matrix([[1], [0]]), b) == pytest.approx(-1j)


def test_dotp_orthogonal_states() -> None:
    assert abs(dotp(H_PLUS_KET, H_MINUS_KET)) < 1e-12
    assert dotp(H_PLUS_KET, ZERO_KET) == pytest.approx(1 / math.sqrt(2))


def test_dotp_size_mismatch() -> None:
    with pytest.raises(DimensionMismatch):
        dotp(ZERO_KET, kron_kets([ZERO_KET, ZERO_KET]))
