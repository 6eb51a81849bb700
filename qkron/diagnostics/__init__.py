"""Diagnostics and debugging utilities for qkron."""

from .core import (
    assert_norm_preserved,
    assert_unitary,
    is_unitary,
    state_norm,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "state_norm",
    "assert_norm_preserved",
    "is_unitary",
    "assert_unitary",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
