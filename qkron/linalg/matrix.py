"""Dense complex matrix primitive.

Every state vector and gate in qkron is a :class:`Matrix`: a row-major,
two-dimensional complex tensor that is never modified after construction.
Operations return new matrices.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple, Union

import numpy as np
import torch

from ..core.device import Device, default_device
from ..errors import DimensionMismatch
from .format import format_matrix

MatrixLike = Union["Matrix", torch.Tensor, np.ndarray, Any]

DEFAULT_EPSILON = 1e-9


class Matrix:
    """
    Immutable dense complex matrix.

    The data is a 2-D tensor stored row-major with ``stride == cols``.

    Args:
        data: A Matrix, torch tensor, numpy array or nested sequence of
            numbers with exactly two dimensions.
        device: Device that holds the data. Defaults to ``default_device()``.
        dtype: Complex dtype. Defaults to the device's complex dtype.

    Raises:
        ValueError: If ``data`` is not two-dimensional.
    """

    __slots__ = ("_data",)

    def __init__(
        self,
        data: MatrixLike,
        device: Optional[Device] = None,
        dtype: Optional[torch.dtype] = None,
    ) -> None:
        if isinstance(data, Matrix):
            data = data._data

        qdevice = device if device is not None else default_device()
        if dtype is None:
            dtype = qdevice.complex_dtype
        if not dtype.is_complex:
            raise ValueError(f"Matrix dtype must be a complex dtype, got {dtype}")

        tensor = torch.as_tensor(data, dtype=dtype, device=qdevice.as_torch_device())
        if tensor.dim() != 2:
            raise ValueError(
                f"Matrix data must be two-dimensional, got shape {tuple(tensor.shape)}"
            )

        self._data = tensor.clone().contiguous()

    @classmethod
    def _wrap(cls, tensor: torch.Tensor) -> "Matrix":
        # Takes ownership of a freshly computed tensor without copying.
        out = cls.__new__(cls)
        out._data = tensor.contiguous()
        return out

    @classmethod
    def identity(cls, size: int, device: Optional[Device] = None) -> "Matrix":
        """Return the ``size x size`` identity matrix."""
        if size < 0:
            raise ValueError(f"Identity size must be >= 0, got {size}")
        qdevice = device if device is not None else default_device()
        return cls._wrap(
            torch.eye(
                size,
                dtype=qdevice.complex_dtype,
                device=qdevice.as_torch_device(),
            )
        )

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def stride(self) -> int:
        """Distance between the starts of consecutive rows. Always ``cols``."""
        return self._data.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def data(self) -> torch.Tensor:
        """The backing ``(rows, cols)`` tensor. Must not be modified in place."""
        return self._data

    @property
    def dtype(self) -> torch.dtype:
        return self._data.dtype

    @property
    def size(self) -> int:
        """Number of stored elements, ``rows * stride``."""
        return self._data.numel()

    def __getitem__(self, index: Tuple[int, int]) -> complex:
        row, col = index
        return complex(self._data[row, col].item())

    def numpy(self) -> np.ndarray:
        """Return a copy of the data as a numpy array."""
        return self._data.detach().cpu().numpy().copy()

    def tolist(self) -> list:
        return self._data.tolist()

    def is_square(self) -> bool:
        return self.rows == self.cols

    def is_column_vector(self) -> bool:
        return self.cols == 1

    def is_row_vector(self) -> bool:
        return self.rows == 1

    def kron(self, other: "Matrix") -> "Matrix":
        """
        Kronecker (tensor) product ``self ⊗ other``.

        Element ``[ra, ca]`` of ``self`` scales the block of ``other``
        placed at rows ``ra*other.rows ...`` and columns ``ca*other.cols ...``,
        so ``self`` is the most-significant factor.

        Args:
            other: Right-hand factor.

        Returns:
            A ``(self.rows*other.rows, self.cols*other.cols)`` matrix.
        """
        a, b = _common(self._data, other._data)
        ar, ac = a.shape
        br, bc = b.shape
        out = torch.einsum("ij,kl->ikjl", a, b).reshape(ar * br, ac * bc)
        return Matrix._wrap(out)

    def mul(self, other: "Matrix") -> "Matrix":
        """
        Matrix product ``self @ other``.

        Raises:
            DimensionMismatch: If ``self.cols != other.rows``.
        """
        if self.cols != other.rows:
            raise DimensionMismatch(
                f"Cannot multiply {self.rows}x{self.cols} matrix by "
                f"{other.rows}x{other.cols} matrix"
            )
        a, b = _common(self._data, other._data)
        return Matrix._wrap(torch.matmul(a, b))

    def add(self, other: "Matrix") -> "Matrix":
        """
        Element-wise sum.

        Raises:
            DimensionMismatch: If rows, cols or stride differ.
        """
        if (
            self.rows != other.rows
            or self.cols != other.cols
            or self.stride != other.stride
        ):
            raise DimensionMismatch(
                f"Cannot add matrices of differing dimensions: "
                f"{self.rows}x{self.cols} and {other.rows}x{other.cols}"
            )
        a, b = _common(self._data, other._data)
        return Matrix._wrap(a + b)

    def equals(
        self,
        other: "Matrix",
        epsilon: Union[float, complex] = DEFAULT_EPSILON,
        epsilon_imag: Optional[float] = None,
    ) -> bool:
        """
        Tolerance-based equality.

        Two matrices are equal when their dimensions match exactly and, for
        every element pair, the real parts differ by at most ``epsilon`` and
        the imaginary parts by at most ``epsilon_imag``.

        Args:
            other: Matrix to compare against.
            epsilon: Real-part tolerance, or a complex number whose real and
                imaginary parts give both tolerances.
            epsilon_imag: Imaginary-part tolerance. Defaults to the real-part
                tolerance (or ``epsilon.imag`` for a complex ``epsilon``).

        Returns:
            True if the matrices are equal within tolerance.
        """
        if isinstance(epsilon, complex):
            eps_real = epsilon.real
            eps_imag = epsilon.imag if epsilon_imag is None else epsilon_imag
        else:
            eps_real = float(epsilon)
            eps_imag = eps_real if epsilon_imag is None else float(epsilon_imag)

        if (
            self.rows != other.rows
            or self.cols != other.cols
            or self.stride != other.stride
        ):
            return False

        a, b = _common(self._data, other._data)
        diff = a - b
        real_ok = torch.all(torch.abs(diff.real) <= eps_real)
        imag_ok = torch.all(torch.abs(diff.imag) <= eps_imag)
        return bool(real_ok.item() and imag_ok.item())

    def __matmul__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.mul(other)

    def __add__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols}, dtype={self.dtype})"

    def __str__(self) -> str:
        return format_matrix(self)


def kronecker(a: Matrix, b: Matrix) -> Matrix:
    """Kronecker product of ``a`` and ``b``; see :meth:`Matrix.kron`."""
    return a.kron(b)


def _common(a: torch.Tensor, b: torch.Tensor) -> Tuple[torch.Tensor, torch.Tensor]:
    """Bring two tensors to a shared dtype and the device of ``a``."""
    dtype = torch.promote_types(a.dtype, b.dtype)
    return a.to(dtype=dtype), b.to(dtype=dtype, device=a.device)
