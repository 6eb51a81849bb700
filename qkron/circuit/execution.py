"""Result of running a circuit, and measurement in the computational basis."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from ..errors import BasisSizeMismatch
from ..gates.standard import ONE_KET, ZERO_KET
from ..linalg.matrix import Matrix
from ..linalg.vectors import as_column_vector, dotp, kron_kets


def basis_kets(index: int, n_qubits: int) -> List[Matrix]:
    """
    Computational basis kets for ``index`` written as an ``n_qubits``-bit
    string, most-significant bit first (qubit 0).

    >>> [k is ONE_KET for k in basis_kets(2, 2)]
    [True, False]
    """
    bits = format(index, f"0{n_qubits}b")
    return [ONE_KET if bit == "1" else ZERO_KET for bit in bits]


class QuantumCircuitExecution:
    """
    Immutable record of one circuit execution.

    Parameters
    ----------
    inputs:
        Per-qubit input kets, qubit 0 first.
    register_state:
        Kronecker product of ``inputs`` as a column vector.
    output_state:
        Compiled circuit matrix applied to ``register_state``.
    """

    def __init__(
        self,
        inputs: Sequence[Matrix],
        register_state: Matrix,
        output_state: Matrix,
    ) -> None:
        size = output_state.rows * output_state.cols
        n_qubits = size.bit_length() - 1
        if size < 2 or (1 << n_qubits) != size:
            raise ValueError(
                f"Output state size must be a power of two >= 2, got {size}."
            )

        self._inputs: Tuple[Matrix, ...] = tuple(inputs)
        self._register = as_column_vector(register_state)
        self._output = as_column_vector(output_state)
        self._n_qubits = n_qubits

    @property
    def inputs(self) -> Tuple[Matrix, ...]:
        return self._inputs

    @property
    def register_state(self) -> Matrix:
        return self._register

    @property
    def output_state(self) -> Matrix:
        return self._output

    @property
    def n_qubits(self) -> int:
        return self._n_qubits

    def measure_probability(self, basis: Sequence[Matrix]) -> float:
        """
        Probability of observing the product state ``basis``.

        The basis kets are combined in qubit order, and the output state is
        projected onto the result:
        ``m = <basis|out> / <basis|basis>``, probability ``|m|**2``.

        Parameters
        ----------
        basis:
            One ket per qubit, qubit 0 first.

        Raises
        ------
        BasisSizeMismatch
            If ``len(basis)`` differs from the number of qubits.
        ValueError
            If the basis vector is zero.
        """
        basis = list(basis)
        if len(basis) != self._n_qubits:
            raise BasisSizeMismatch(
                f"Measurement basis needs {self._n_qubits} kets, got {len(basis)}."
            )

        basis_vec = kron_kets(basis)
        norm_sq = dotp(basis_vec, basis_vec)
        if norm_sq == 0:
            raise ValueError("Measurement basis vector has zero norm.")

        magnitude = dotp(self._output, basis_vec) / norm_sq
        return magnitude.real * magnitude.real + magnitude.imag * magnitude.imag

    def measure_probabilities(self) -> List[float]:
        """
        Probabilities of every computational basis outcome.

        Entry ``i`` is the probability of the bitstring of ``i`` with qubit 0
        as the most-significant bit, so entry 0 is ``|00...0>``.
        """
        return [
            self.measure_probability(basis_kets(i, self._n_qubits))
            for i in range(1 << self._n_qubits)
        ]

    def measure_probability_on(self, qubit: int) -> float:
        """
        Marginal probability that ``qubit`` reads 1.

        Raises
        ------
        ValueError
            If ``qubit`` is out of range.
        """
        if qubit < 0 or qubit >= self._n_qubits:
            raise ValueError(
                f"Qubit index {qubit} is out of range for {self._n_qubits} qubits."
            )

        shift = self._n_qubits - 1 - qubit
        total = 0.0
        for i in range(1 << self._n_qubits):
            if (i >> shift) & 1:
                total += self.measure_probability(basis_kets(i, self._n_qubits))
        return total

    def __repr__(self) -> str:
        return f"QuantumCircuitExecution(n_qubits={self._n_qubits})"
