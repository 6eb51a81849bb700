"""Standard single-qubit matrices, kets and bras.

These are module-level constants built once at import time on the default
device. Matrices are immutable, so they can be shared freely.
"""

from __future__ import annotations

import math

from ..linalg.matrix import Matrix

_SQRT2_INV = 1.0 / math.sqrt(2.0)

# Kets and bras
ZERO_KET = Matrix([[1.0], [0.0]])  # |0>
ONE_KET = Matrix([[0.0], [1.0]])  # |1>
H_PLUS_KET = Matrix([[_SQRT2_INV], [_SQRT2_INV]])  # |+>
H_MINUS_KET = Matrix([[_SQRT2_INV], [-_SQRT2_INV]])  # |->

ZERO_BRA = Matrix([[1.0, 0.0]])  # <0|
ONE_BRA = Matrix([[0.0, 1.0]])  # <1|

# Single-qubit operators
I = Matrix([[1.0, 0.0], [0.0, 1.0]])

H = Matrix([[_SQRT2_INV, _SQRT2_INV], [_SQRT2_INV, -_SQRT2_INV]])

X = Matrix([[0.0, 1.0], [1.0, 0.0]])

# Projectors |0><0| and |1><1|
P0 = ZERO_KET @ ZERO_BRA
P1 = ONE_KET @ ONE_BRA
