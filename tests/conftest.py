"""Pytest configuration and shared fixtures for qkron tests.

This module provides:
- A deterministic numpy RNG for random test matrices
- An autouse fixture that restores the global debug mode after each test
- The tolerance used when comparing matrices in tests
"""

import os
from typing import Iterator

import numpy as np
import pytest

from qkron.diagnostics import is_debug_enabled, set_debug_enabled

EPSILON = 1e-9


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode() -> Iterator[None]:
    """Run each test with debug mode off and restore the previous setting."""
    original = is_debug_enabled()
    set_debug_enabled(False)
    try:
        yield
    finally:
        set_debug_enabled(original)


@pytest.fixture
def epsilon() -> float:
    """Tolerance for tolerance-based matrix equality in tests."""
    return EPSILON
