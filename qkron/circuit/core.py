"""Quantum circuit: an ordered list of full-register gates."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from ..diagnostics import assert_norm_preserved, assert_unitary, is_debug_enabled
from ..errors import QubitCountMismatch, TooManyQubits
from ..gates.factory import (
    Gate,
    combine,
    create_controlled_x,
    create_hadamard,
    create_pauli_x,
    create_wire,
)
from ..linalg.matrix import Matrix
from ..linalg.vectors import is_ket, kron_kets
from ..logging import get_logger
from .execution import QuantumCircuitExecution

logger = get_logger(__name__)


class QuantumCircuit:
    """
    Ordered gates over a fixed number of qubits.

    Gates are stored already expanded to the full register, in application
    order (index 0 acts first). ``compile()`` fuses them into a single
    unitary; the result is cached until the next gate is appended.

    Qubit 0 is the most-significant qubit: it contributes the outermost
    Kronecker factor of states and gates.
    """

    def __init__(self, n_qubits: int) -> None:
        """Initialize an empty QuantumCircuit."""
        if n_qubits <= 0:
            raise ValueError("QuantumCircuit requires n_qubits >= 1.")

        self._n_qubits = int(n_qubits)
        self._gates: List[Gate] = []
        self._compiled: Optional[Gate] = None
        self._compile_valid = False

    @property
    def n_qubits(self) -> int:
        """Return the number of qubits in this circuit."""
        return self._n_qubits

    @property
    def gates(self) -> Tuple[Gate, ...]:
        """Return a read-only tuple of the appended gates."""
        return tuple(self._gates)

    @property
    def compiled(self) -> Optional[Gate]:
        """The last compiled gate, or None if never compiled."""
        return self._compiled

    @property
    def compile_valid(self) -> bool:
        """Whether ``compiled`` reflects every appended gate."""
        return self._compile_valid

    def _add_gate(self, gate: Gate) -> None:
        self._compile_valid = False
        self._gates.append(gate)

    def h(self, qubits: Sequence[int]) -> None:
        """
        Append a Hadamard acting on each qubit in ``qubits``.

        Raises
        ------
        TooManyQubits
            If more indices are given than the circuit has qubits.
        """
        qubits = list(qubits)
        if len(qubits) > self._n_qubits:
            raise TooManyQubits(
                f"Too many qubits provided for H gate: {len(qubits)} "
                f"on a {self._n_qubits}-qubit circuit."
            )
        self._add_gate(create_hadamard(qubits, self._n_qubits))

    def x(self, qubit: int) -> None:
        """Append a Pauli-X on ``qubit``."""
        self._add_gate(create_pauli_x(qubit, self._n_qubits))

    def cx(self, control: int, target: int) -> None:
        """Append a controlled-X with the given control and target qubits."""
        self._add_gate(create_controlled_x(control, target, self._n_qubits))

    def add_gate(self, name: str, qubits: Sequence[int]) -> None:
        """
        Append a gate by name.

        Parameters
        ----------
        name:
            "H", "X", or "CX"/"CNOT" (case-insensitive).
        qubits:
            For H, the target qubits. For X, a single qubit. For CX,
            ``[control, target]``.
        """
        n = name.upper()
        qubits = list(qubits)
        if n == "H":
            self.h(qubits)
        elif n == "X":
            if len(qubits) != 1:
                raise ValueError(f"Gate X acts on exactly one qubit, got {qubits}.")
            self.x(qubits[0])
        elif n in ("CX", "CNOT"):
            if len(qubits) != 2:
                raise ValueError(
                    f"Gate {n} needs [control, target], got {qubits}."
                )
            self.cx(qubits[0], qubits[1])
        else:
            raise ValueError(
                f"Unsupported gate name {name!r}. Supported gates: H, X, CX, CNOT."
            )

    def add_circuit(self, other: "QuantumCircuit") -> None:
        """
        Append a whole circuit as one gate.

        ``other`` is compiled if its cache is stale, and its compiled unitary
        is appended as a single black-box gate.

        Raises
        ------
        QubitCountMismatch
            If ``other`` has a different number of qubits.
        """
        if other.n_qubits != self._n_qubits:
            raise QubitCountMismatch(
                f"Cannot add a {other.n_qubits}-qubit circuit to a "
                f"{self._n_qubits}-qubit circuit."
            )

        if not other.compile_valid:
            other.compile()
        self._add_gate(other.compiled)

    def compile(self) -> Gate:
        """
        Fuse all gates into one unitary and cache it.

        An empty circuit compiles to the identity ("wire") gate.

        Returns
        -------
        Gate
            The compiled gate.
        """
        if not self._gates:
            compiled = create_wire(self._n_qubits)
        else:
            compiled = combine(self._gates)

        if is_debug_enabled():
            assert_unitary(compiled.matrix.data)

        logger.debug(
            "Compiled %d gate(s) on %d qubit(s)", len(self._gates), self._n_qubits
        )
        self._compiled = compiled
        self._compile_valid = True
        return compiled

    def exec(self, qubit_states: Sequence[Matrix]) -> QuantumCircuitExecution:
        """
        Run the circuit on a product input state.

        Parameters
        ----------
        qubit_states:
            One ket per qubit, qubit 0 first.

        Returns
        -------
        QuantumCircuitExecution
            Input kets, the combined input vector and the output vector.

        Raises
        ------
        QubitCountMismatch
            If the number of kets differs from the number of qubits.
        ValueError
            If an input is not a 2x1 ket.
        """
        qubit_states = list(qubit_states)
        if len(qubit_states) != self._n_qubits:
            raise QubitCountMismatch(
                f"Cannot execute {len(qubit_states)} qubit state(s) on a circuit "
                f"with {self._n_qubits} qubits."
            )
        for i, state in enumerate(qubit_states):
            if not is_ket(state):
                raise ValueError(
                    f"Qubit state {i} must be a 2x1 ket, got {state.rows}x{state.cols}."
                )

        if not self._compile_valid:
            self.compile()

        register = kron_kets(qubit_states)
        output = self._compiled.matrix @ register

        if is_debug_enabled():
            assert_norm_preserved(register.data, output.data)

        logger.debug("Executed circuit on %d qubit(s)", self._n_qubits)
        return QuantumCircuitExecution(qubit_states, register, output)

    def copy(self) -> "QuantumCircuit":
        """Return a copy of this circuit, including its compiled cache."""
        new = QuantumCircuit(self._n_qubits)
        new._gates.extend(self._gates)
        new._compiled = self._compiled
        new._compile_valid = self._compile_valid
        return new

    def __len__(self) -> int:
        """Return the number of gates in this circuit."""
        return len(self._gates)

    def num_gates(self) -> int:
        """Return the number of gates in this circuit."""
        return len(self._gates)

    def gate_counts(self) -> Dict[str, int]:
        """Return a dictionary mapping gate display names to their counts."""
        counts: Dict[str, int] = {}
        for gate in self._gates:
            counts[gate.name] = counts.get(gate.name, 0) + 1
        return counts

    def __repr__(self) -> str:
        return (
            f"QuantumCircuit(n_qubits={self._n_qubits}, gates={len(self._gates)}, "
            f"compiled={self._compile_valid})"
        )
