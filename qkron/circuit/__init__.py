"""Circuit construction, compilation and execution."""

from .core import QuantumCircuit
from .execution import QuantumCircuitExecution, basis_kets

__all__ = ["QuantumCircuit", "QuantumCircuitExecution", "basis_kets"]
