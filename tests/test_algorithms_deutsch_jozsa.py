"""End-to-end Deutsch-Jozsa tests."""

from __future__ import annotations

import pytest

from qkron.algorithms import (
    BALANCED,
    CONSTANT,
    balanced_oracle,
    constant_oracle,
    deutsch_jozsa_circuit,
    run_deutsch_jozsa,
)
from qkron.circuit import QuantumCircuit
from qkron.gates import ONE_KET


def _two_qubit_probabilities(oracle: str) -> list:
    circuit = QuantumCircuit(n_qubits=2)
    circuit.h([0, 1])
    if oracle == "balanced":
        circuit.cx(0, 1)
    elif oracle == "constant_one":
        circuit.x(1)
    circuit.h([0])
    return circuit.exec([ONE_KET, ONE_KET]).measure_probabilities()


@pytest.mark.parametrize("oracle", ["constant_zero", "constant_one"])
def test_two_qubit_constant_oracle(oracle: str) -> None:
    assert _two_qubit_probabilities(oracle) == pytest.approx([0, 0, 0.5, 0.5])


def test_two_qubit_balanced_oracle() -> None:
    assert _two_qubit_probabilities("balanced") == pytest.approx([0.5, 0.5, 0, 0])


@pytest.mark.parametrize("n_qubits", [2, 3, 4])
@pytest.mark.parametrize("output", [0, 1])
def test_constant_oracle_detected(n_qubits: int, output: int) -> None:
    assert run_deutsch_jozsa(constant_oracle(n_qubits, output)) == CONSTANT


@pytest.mark.parametrize("n_qubits", [2, 3, 4])
def test_balanced_oracle_detected(n_qubits: int) -> None:
    assert run_deutsch_jozsa(balanced_oracle(n_qubits)) == BALANCED


def test_four_qubit_probability_on_first_qubit() -> None:
    constant = deutsch_jozsa_circuit(constant_oracle(4))
    balanced = deutsch_jozsa_circuit(balanced_oracle(4))
    inputs = [ONE_KET] * 4
    assert constant.exec(inputs).measure_probability_on(0) == pytest.approx(1.0)
    assert balanced.exec(inputs).measure_probability_on(0) == pytest.approx(0.0)


def test_circuit_layout() -> None:
    circuit = deutsch_jozsa_circuit(balanced_oracle(3))
    assert [g.name for g in circuit.gates] == ["Hadamard", "Combined", "Hadamard"]


def test_oracle_shapes() -> None:
    assert len(constant_oracle(3, 0)) == 0
    assert constant_oracle(3, 1).gate_counts() == {"Pauli-X": 1}
    assert balanced_oracle(4).gate_counts() == {"C-X": 3}


def test_register_too_small() -> None:
    with pytest.raises(ValueError, match="at least one input"):
        balanced_oracle(1)


def test_invalid_constant_output() -> None:
    with pytest.raises(ValueError, match="0 or 1"):
        constant_oracle(2, 2)
