"""Gate matrices and full-register gate construction."""

from .factory import (
    Gate,
    GateKind,
    combine,
    create_controlled_x,
    create_hadamard,
    create_pauli_x,
    create_wire,
)
from .standard import (
    H,
    H_MINUS_KET,
    H_PLUS_KET,
    I,
    ONE_BRA,
    ONE_KET,
    P0,
    P1,
    X,
    ZERO_BRA,
    ZERO_KET,
)

__all__ = [
    "Gate",
    "GateKind",
    "combine",
    "create_wire",
    "create_hadamard",
    "create_pauli_x",
    "create_controlled_x",
    "I",
    "H",
    "X",
    "P0",
    "P1",
    "ZERO_KET",
    "ONE_KET",
    "H_PLUS_KET",
    "H_MINUS_KET",
    "ZERO_BRA",
    "ONE_BRA",
]
