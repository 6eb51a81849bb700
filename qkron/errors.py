"""Exceptions raised by the qkron simulator.

Every error here signals a caller bug (mismatched sizes, too many qubits)
and aborts the current operation. They derive from ``ValueError`` so
callers that already guard argument errors keep working.
"""

from __future__ import annotations

__all__ = [
    "QuantumSimulationError",
    "TooManyQubits",
    "QubitCountMismatch",
    "DimensionMismatch",
    "BasisSizeMismatch",
]


class QuantumSimulationError(ValueError):
    """Base class for qkron simulation errors."""


class TooManyQubits(QuantumSimulationError):
    """More gate target indices were given than the circuit has qubits."""


class QubitCountMismatch(QuantumSimulationError):
    """A register or sub-circuit does not match the circuit's qubit count."""


class DimensionMismatch(QuantumSimulationError):
    """Two matrices have incompatible shapes for the requested operation."""


class BasisSizeMismatch(QuantumSimulationError):
    """A measurement basis has the wrong number of kets for the output state."""
