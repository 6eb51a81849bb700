"""Numerical sanity checks for state vectors and gate matrices."""

from __future__ import annotations

import torch


def state_norm(state: torch.Tensor) -> torch.Tensor:
    """
    Compute the L2 norm of a state vector.

    The state may be flat ``(dim,)`` or a column ``(dim, 1)``; all
    entries contribute.

    Parameters
    ----------
    state:
        Complex tensor holding the amplitudes.

    Returns
    -------
    torch.Tensor
        Real 0-d tensor with the norm.
    """
    if state.dim() < 1:
        raise ValueError("state_norm expects a tensor with at least 1 dimension.")

    norm_sq = (state.conj() * state).sum().real
    return torch.sqrt(norm_sq)


def assert_norm_preserved(
    before: torch.Tensor,
    after: torch.Tensor,
    atol: float = 1e-6,
) -> None:
    """
    Assert that evolving ``before`` into ``after`` kept the state norm.

    Raises
    ------
    ValueError
        If the norms differ by more than ``atol``.
    """
    norm_before = state_norm(before).item()
    norm_after = state_norm(after).item()
    if abs(norm_before - norm_after) > atol:
        raise ValueError(
            f"State norm changed from {norm_before} to {norm_after} "
            f"(tolerance {atol})."
        )


def is_unitary(matrix: torch.Tensor, atol: float = 1e-6) -> bool:
    """
    Check whether a square matrix is unitary, i.e. U†U = I within ``atol``.
    """
    if matrix.dim() != 2 or matrix.shape[0] != matrix.shape[1]:
        return False

    product = matrix.conj().transpose(-1, -2) @ matrix
    identity = torch.eye(matrix.shape[0], dtype=matrix.dtype, device=matrix.device)
    return bool(torch.all(torch.abs(product - identity) <= atol).item())


def assert_unitary(matrix: torch.Tensor, atol: float = 1e-6) -> None:
    """
    Raise ValueError if ``matrix`` is not unitary within ``atol``.
    """
    if not is_unitary(matrix, atol=atol):
        raise ValueError(f"Matrix of shape {tuple(matrix.shape)} is not unitary within {atol}.")
