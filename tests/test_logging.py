"""Tests for logging utilities."""

import logging
from io import StringIO

from qkron.circuit import QuantumCircuit
from qkron.gates import ZERO_KET
from qkron.logging import (
    configure_logging,
    get_logger,
    set_log_level,
)


def test_get_logger_returns_logger():
    """Test that get_logger returns a namespaced logger."""
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "qkron.test_module"


def test_get_logger_keeps_package_names():
    """Test that module names already under qkron are not prefixed twice."""
    assert get_logger("qkron.circuit.core").name == "qkron.circuit.core"
    assert get_logger().name == "qkron"


def test_get_logger_caching():
    """Test that get_logger caches loggers."""
    logger1 = get_logger("test_module")
    logger2 = get_logger("test_module")
    assert logger1 is logger2


def test_get_logger_different_modules():
    """Test that different modules get different loggers."""
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_set_log_level():
    """Test that set_log_level updates logger levels."""
    logger = get_logger("test_module")

    set_log_level(logging.INFO)
    assert logger.level == logging.INFO

    set_log_level(logging.WARNING)
    assert logger.level == logging.WARNING


def test_set_log_level_string():
    """Test that set_log_level accepts string levels."""
    logger = get_logger("test_module")

    try:
        set_log_level("DEBUG")
        assert logger.level == logging.DEBUG

        set_log_level("ERROR")
        assert logger.level == logging.ERROR
    finally:
        set_log_level(logging.WARNING)


def test_configure_logging():
    """Test configure_logging redirects output to the given stream."""
    logger = get_logger("test_module")
    stream = StringIO()
    try:
        configure_logging(level=logging.DEBUG, stream=stream)
        logger.debug("Debug message")
        assert "[DEBUG] qkron.test_module: Debug message" in stream.getvalue()
    finally:
        configure_logging(level=logging.WARNING)


def test_circuit_emits_debug_records():
    """Test that compile and exec log at DEBUG level."""
    stream = StringIO()
    try:
        configure_logging(level=logging.DEBUG, stream=stream)
        circuit = QuantumCircuit(n_qubits=1)
        circuit.x(0)
        circuit.exec([ZERO_KET])
        output = stream.getvalue()
        assert "Compiled 1 gate(s) on 1 qubit(s)" in output
        assert "Executed circuit on 1 qubit(s)" in output
    finally:
        configure_logging(level=logging.WARNING)


def test_logger_does_not_propagate():
    """Test that loggers don't propagate to root logger."""
    logger = get_logger("test_module")
    assert logger.propagate is False
