"""Full-register gate construction.

Each factory returns a :class:`Gate` whose matrix acts on all ``n_qubits``
of a circuit. Single-qubit operators are lifted to the full register by a
Kronecker chain over qubit positions ``0 .. n_qubits - 1``, with qubit 0
as the most-significant factor and the identity on untouched qubits.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence, Union

from ..linalg.matrix import DEFAULT_EPSILON, Matrix
from ..logging import get_logger
from . import standard

logger = get_logger(__name__)


class GateKind(enum.Enum):
    """Kind tag of a gate. The value is its display name."""

    HADAMARD = "Hadamard"
    WIRE = "Identity"
    PAULI_X = "Pauli-X"
    CONTROLLED_X = "C-X"
    COMBINED = "Combined"


@dataclass(frozen=True, eq=False)
class Gate:
    """
    A unitary acting on a whole register.

    Attributes
    ----------
    matrix:
        Square ``2**n_qubits`` matrix.
    kind:
        What built the gate.
    """

    matrix: Matrix
    kind: GateKind

    @property
    def name(self) -> str:
        """Display name, e.g. ``"Hadamard"`` or ``"C-X"``."""
        return self.kind.value

    @property
    def n_qubits(self) -> int:
        """Number of qubits the gate acts on."""
        return self.matrix.rows.bit_length() - 1

    def equals(
        self,
        other: "Gate",
        epsilon: Union[float, complex] = DEFAULT_EPSILON,
        epsilon_imag: Union[float, None] = None,
    ) -> bool:
        """
        True when both gates have the same kind and their matrices are equal
        within tolerance (see :meth:`Matrix.equals`).
        """
        if self.kind != other.kind:
            return False
        return self.matrix.equals(other.matrix, epsilon, epsilon_imag)


def _check_n_qubits(n_qubits: int) -> None:
    if n_qubits < 1:
        raise ValueError(f"n_qubits must be >= 1, got {n_qubits}")


def _check_qubit(qubit: int, n_qubits: int) -> None:
    if qubit < 0 or qubit >= n_qubits:
        raise ValueError(
            f"Qubit index {qubit} is out of range for {n_qubits} qubits."
        )


def _kron_chain(n_qubits: int, factor: Callable[[int], Matrix]) -> Matrix:
    """Kronecker product of ``factor(0) ⊗ factor(1) ⊗ ... ⊗ factor(n-1)``."""
    mat = Matrix.identity(1)
    for position in range(n_qubits):
        mat = mat.kron(factor(position))
    return mat


def create_wire(n_qubits: int) -> Gate:
    """
    Identity gate on ``n_qubits``.

    Args:
        n_qubits: Register size.

    Returns:
        A ``WIRE`` gate with the ``2**n_qubits`` identity matrix.
    """
    _check_n_qubits(n_qubits)
    return Gate(Matrix.identity(2**n_qubits), GateKind.WIRE)


def create_hadamard(qubits: Iterable[int], n_qubits: int) -> Gate:
    """
    Hadamard gate applied to every qubit in ``qubits`` at once.

    Args:
        qubits: Target qubit indices, in any order. May be empty, in which
            case the result is the identity.
        n_qubits: Register size.

    Returns:
        A ``HADAMARD`` gate.

    Raises:
        ValueError: If an index is out of range.
    """
    _check_n_qubits(n_qubits)
    targets = sorted(int(q) for q in qubits)
    for q in targets:
        _check_qubit(q, n_qubits)

    logger.debug("Creating Hadamard on qubits %s of %d", targets, n_qubits)
    mat = _kron_chain(
        n_qubits,
        lambda position: standard.H if position in targets else standard.I,
    )
    return Gate(mat, GateKind.HADAMARD)


def create_pauli_x(qubit: int, n_qubits: int) -> Gate:
    """
    Pauli-X (bit flip) on a single qubit.

    Args:
        qubit: Target qubit index.
        n_qubits: Register size.

    Returns:
        A ``PAULI_X`` gate.
    """
    _check_n_qubits(n_qubits)
    qubit = int(qubit)
    _check_qubit(qubit, n_qubits)

    logger.debug("Creating Pauli-X on qubit %d of %d", qubit, n_qubits)
    mat = _kron_chain(
        n_qubits,
        lambda position: standard.X if position == qubit else standard.I,
    )
    return Gate(mat, GateKind.PAULI_X)


def create_controlled_x(control: int, target: int, n_qubits: int) -> Gate:
    """
    Controlled-X (CNOT): flip ``target`` when ``control`` is |1>.

    Built as the sum of two Kronecker chains,
    ``|0><0|_control ⊗ I_rest + |1><1|_control ⊗ X_target ⊗ I_rest``,
    which holds for either ordering of ``control`` and ``target``.

    Args:
        control: Control qubit index.
        target: Target qubit index.
        n_qubits: Register size.

    Returns:
        A ``CONTROLLED_X`` gate.

    Raises:
        ValueError: If an index is out of range or ``control == target``.
    """
    _check_n_qubits(n_qubits)
    control, target = int(control), int(target)
    _check_qubit(control, n_qubits)
    _check_qubit(target, n_qubits)
    if control == target:
        raise ValueError(f"Control and target must differ, both are {control}.")

    logger.debug(
        "Creating C-X with control %d, target %d of %d", control, target, n_qubits
    )

    def control_off(position: int) -> Matrix:
        return standard.P0 if position == control else standard.I

    def control_on(position: int) -> Matrix:
        if position == control:
            return standard.P1
        if position == target:
            return standard.X
        return standard.I

    mat = _kron_chain(n_qubits, control_off).add(_kron_chain(n_qubits, control_on))
    return Gate(mat, GateKind.CONTROLLED_X)


def combine(gates: Sequence[Gate], kind: GateKind = GateKind.COMBINED) -> Gate:
    """
    Fuse gates given in application order into one gate.

    For ``[g0, g1, ..., gk]`` the result is ``gk @ ... @ g1 @ g0``: the first
    gate acts on a state first.

    Args:
        gates: Gates in application order, all of the same size.
        kind: Kind tag of the fused gate.

    Returns:
        The combined gate.

    Raises:
        ValueError: If ``gates`` is empty.
        DimensionMismatch: If the gates have different sizes.
    """
    gates = list(gates)
    if not gates:
        raise ValueError("combine() requires at least one gate.")

    out = gates[-1].matrix
    for gate in reversed(gates[:-1]):
        out = out @ gate.matrix
    return Gate(out, kind)
