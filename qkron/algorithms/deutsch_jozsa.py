"""
Deutsch-Jozsa oracles and circuit assembly.

The register holds ``n - 1`` input qubits followed by one output qubit.
Oracles are ordinary circuits that are appended to the algorithm circuit
as a single compiled gate.

Reference: D. Deutsch and R. Jozsa, "Rapid solution of problems by quantum
computation", Proc. R. Soc. Lond. A 439 (1992).
"""

from __future__ import annotations

from ..circuit import QuantumCircuit
from ..gates.standard import ONE_KET

CONSTANT = "constant"
BALANCED = "balanced"


def _check_register(n_qubits: int) -> None:
    if n_qubits < 2:
        raise ValueError(
            f"Deutsch-Jozsa needs at least one input and one output qubit, got {n_qubits}."
        )


def constant_oracle(n_qubits: int, output: int = 1) -> QuantumCircuit:
    """
    Oracle for ``f(x) = output``.

    ``output == 1`` flips the output qubit; ``output == 0`` is the empty
    circuit.
    """
    _check_register(n_qubits)
    if output not in (0, 1):
        raise ValueError(f"output must be 0 or 1, got {output}")

    oracle = QuantumCircuit(n_qubits)
    if output == 1:
        oracle.x(n_qubits - 1)
    return oracle


def balanced_oracle(n_qubits: int) -> QuantumCircuit:
    """Oracle for the parity of the inputs: a CX from each input to the output qubit."""
    _check_register(n_qubits)
    oracle = QuantumCircuit(n_qubits)
    for control in range(n_qubits - 1):
        oracle.cx(control, n_qubits - 1)
    return oracle


def deutsch_jozsa_circuit(oracle: QuantumCircuit) -> QuantumCircuit:
    """
    Wrap ``oracle`` in the Deutsch-Jozsa Hadamard layers.

    Hadamard on every qubit, then the oracle, then Hadamard on the input
    qubits only.
    """
    n_qubits = oracle.n_qubits
    _check_register(n_qubits)

    circuit = QuantumCircuit(n_qubits)
    circuit.h(range(n_qubits))
    circuit.add_circuit(oracle)
    circuit.h(range(n_qubits - 1))
    return circuit


def run_deutsch_jozsa(oracle: QuantumCircuit, atol: float = 1e-6) -> str:
    """
    Decide whether ``oracle`` is constant or balanced in one execution.

    The circuit runs on ``|1...1>``. For a constant oracle the first input
    qubit reads 1 with certainty.

    Returns
    -------
    str
        ``"constant"`` or ``"balanced"``.
    """
    circuit = deutsch_jozsa_circuit(oracle)
    execution = circuit.exec([ONE_KET] * circuit.n_qubits)
    if abs(execution.measure_probability_on(0) - 1.0) < atol:
        return CONSTANT
    return BALANCED
