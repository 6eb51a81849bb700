"""qkron - dense state-vector simulation of small quantum circuits.

States are complex column vectors and gates are full-register unitaries
built from single-qubit pieces by Kronecker products.
"""

__version__ = "0.1.0"

# Algorithms
from .algorithms import (
    balanced_oracle,
    constant_oracle,
    deutsch_jozsa_circuit,
    run_deutsch_jozsa,
)

# Circuit
from .circuit import QuantumCircuit, QuantumCircuitExecution
from .core import Device, default_device, device

# Diagnostics
from .diagnostics import (
    debug_context,
    is_debug_enabled,
    is_unitary,
    set_debug_enabled,
    state_norm,
)

# Errors
from .errors import (
    BasisSizeMismatch,
    DimensionMismatch,
    QuantumSimulationError,
    QubitCountMismatch,
    TooManyQubits,
)

# Gates
from .gates import (
    H_MINUS_KET,
    H_PLUS_KET,
    ONE_BRA,
    ONE_KET,
    ZERO_BRA,
    ZERO_KET,
    Gate,
    GateKind,
    combine,
    create_controlled_x,
    create_hadamard,
    create_pauli_x,
    create_wire,
)

# Linear algebra
from .linalg import (
    Matrix,
    as_bra,
    as_column_vector,
    as_ket,
    as_row_vector,
    dotp,
    format_matrix,
    kron_kets,
    kronecker,
)
from .logging import configure_logging, get_logger, set_log_level


def new_quantum_circuit(n_qubits: int) -> QuantumCircuit:
    """Return an empty circuit on ``n_qubits`` qubits."""
    return QuantumCircuit(n_qubits)


__all__ = [
    "__version__",
    # Linear algebra
    "Matrix",
    "kronecker",
    "format_matrix",
    "as_column_vector",
    "as_row_vector",
    "as_ket",
    "as_bra",
    "kron_kets",
    "dotp",
    # Gates
    "Gate",
    "GateKind",
    "combine",
    "create_wire",
    "create_hadamard",
    "create_pauli_x",
    "create_controlled_x",
    "ZERO_KET",
    "ONE_KET",
    "H_PLUS_KET",
    "H_MINUS_KET",
    "ZERO_BRA",
    "ONE_BRA",
    # Circuit
    "QuantumCircuit",
    "QuantumCircuitExecution",
    "new_quantum_circuit",
    # Algorithms
    "constant_oracle",
    "balanced_oracle",
    "deutsch_jozsa_circuit",
    "run_deutsch_jozsa",
    # Errors
    "QuantumSimulationError",
    "TooManyQubits",
    "QubitCountMismatch",
    "DimensionMismatch",
    "BasisSizeMismatch",
    # Config, diagnostics, logging
    "Device",
    "device",
    "default_device",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "state_norm",
    "is_unitary",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
