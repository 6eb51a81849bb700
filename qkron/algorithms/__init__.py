"""Textbook algorithms built on QuantumCircuit."""

from .deutsch_jozsa import (
    BALANCED,
    CONSTANT,
    balanced_oracle,
    constant_oracle,
    deutsch_jozsa_circuit,
    run_deutsch_jozsa,
)

__all__ = [
    "CONSTANT",
    "BALANCED",
    "constant_oracle",
    "balanced_oracle",
    "deutsch_jozsa_circuit",
    "run_deutsch_jozsa",
]
