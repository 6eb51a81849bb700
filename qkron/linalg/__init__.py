"""Dense complex linear algebra used by the simulator."""

from .format import format_complex, format_matrix
from .matrix import DEFAULT_EPSILON, Matrix, kronecker
from .vectors import (
    as_bra,
    as_column_vector,
    as_ket,
    as_row_vector,
    dotp,
    is_bra,
    is_ket,
    kron_kets,
)

__all__ = [
    "Matrix",
    "DEFAULT_EPSILON",
    "kronecker",
    "format_matrix",
    "format_complex",
    "as_column_vector",
    "as_row_vector",
    "as_ket",
    "as_bra",
    "is_ket",
    "is_bra",
    "kron_kets",
    "dotp",
]
