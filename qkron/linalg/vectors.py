"""Vector views over :class:`Matrix`.

Kets, bras, column and row vectors are all plain matrices with a
particular shape. The functions here build those shapes from arbitrary
matrices and check them.
"""

from __future__ import annotations

from typing import Sequence

import torch

from ..errors import DimensionMismatch
from .matrix import Matrix


def as_column_vector(mat: Matrix) -> Matrix:
    """Reinterpret all elements of ``mat`` (row-major) as a ``(n, 1)`` column."""
    return Matrix._wrap(mat.data.reshape(-1, 1))


def as_row_vector(mat: Matrix) -> Matrix:
    """Reinterpret all elements of ``mat`` (row-major) as a ``(1, n)`` row."""
    return Matrix._wrap(mat.data.reshape(1, -1))


def as_ket(mat: Matrix) -> Matrix:
    """
    Build a single-qubit ket ``(2, 1)`` from the first two elements of ``mat``.

    Missing elements are zero; elements past the second are dropped.
    """
    flat = mat.data.reshape(-1)[:2]
    ket = torch.zeros(2, dtype=mat.dtype, device=mat.data.device)
    ket[: flat.numel()] = flat
    return Matrix._wrap(ket.reshape(2, 1))


def as_bra(mat: Matrix) -> Matrix:
    """
    Build a single-qubit bra ``(1, 2)`` from the first two elements of ``mat``.

    Raises:
        DimensionMismatch: If ``mat`` holds fewer than two elements.
    """
    flat = mat.data.reshape(-1)
    if flat.numel() < 2:
        raise DimensionMismatch(
            f"A bra needs at least two elements, got {flat.numel()}"
        )
    return Matrix._wrap(flat[:2].reshape(1, 2).clone())


def is_ket(mat: Matrix) -> bool:
    return mat.rows == 2 and mat.cols == 1


def is_bra(mat: Matrix) -> bool:
    return mat.rows == 1 and mat.cols == 2


def kron_kets(kets: Sequence[Matrix]) -> Matrix:
    """
    Kronecker product of ``kets`` in order, as a column vector.

    ``kets[0]`` is the most-significant factor, so for computational basis
    kets the single non-zero entry sits at the index whose binary digits
    read ``kets[0] kets[1] ...``. An empty sequence gives ``[[1]]``.
    """
    vec = Matrix.identity(1)
    for ket in kets:
        vec = vec.kron(ket)
    return as_column_vector(vec)


def dotp(a: Matrix, b: Matrix) -> complex:
    """
    Inner product ``sum(a[i] * conj(b[i]))`` over all elements.

    Linear in ``a`` and conjugate-linear in ``b``.

    Raises:
        DimensionMismatch: If the element counts differ.
    """
    va = a.data.reshape(-1)
    vb = b.data.reshape(-1)
    if va.numel() != vb.numel():
        raise DimensionMismatch(
            f"Cannot take inner product of vectors of size {va.numel()} and {vb.numel()}"
        )
    dtype = torch.promote_types(va.dtype, vb.dtype)
    va = va.to(dtype=dtype)
    vb = vb.to(dtype=dtype, device=va.device)
    return complex(torch.sum(va * vb.conj()).item())
