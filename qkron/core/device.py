"""Device abstraction for matrix storage."""

from __future__ import annotations

import torch


class Device:
    """
    A logical simulation device: the PyTorch device that holds matrix data
    and the complex dtype used for amplitudes.

    Instances should be treated as immutable after construction.
    """

    def __init__(
        self,
        name: str,
        torch_device: torch.device,
        complex_dtype: torch.dtype = torch.complex128,
    ) -> None:
        """
        Initialize a Device.

        Args:
            name: Logical device name (e.g., "sv_cpu", "sv_cuda").
            torch_device: Underlying PyTorch device.
            complex_dtype: Complex dtype for matrix entries.
        """
        if not complex_dtype.is_complex:
            raise ValueError(f"complex_dtype must be a complex dtype, got {complex_dtype}")
        self.name = name
        self.torch_device = torch_device
        self.complex_dtype = complex_dtype

    def __repr__(self) -> str:
        return (
            f"Device(name={self.name!r}, torch_device={self.torch_device}, "
            f"complex_dtype={self.complex_dtype})"
        )

    def as_torch_device(self) -> torch.device:
        """Return the underlying PyTorch device."""
        return self.torch_device


def device(name: str, complex_dtype: torch.dtype = torch.complex128) -> Device:
    """
    Create a Device instance from a device name.

    Supported device names:
        - "sv_cpu": CPU storage
        - "sv_cuda": CUDA storage (only if CUDA is available)

    Args:
        name: Device name string.
        complex_dtype: Complex dtype for matrix entries. Defaults to
            double precision.

    Returns:
        A Device instance.

    Raises:
        RuntimeError: If "sv_cuda" is requested but CUDA is not available.
        ValueError: If the device name is not supported.
    """
    if name == "sv_cpu":
        return Device("sv_cpu", torch.device("cpu"), complex_dtype)
    elif name == "sv_cuda":
        if not torch.cuda.is_available():
            raise RuntimeError(
                "CUDA device requested but torch.cuda.is_available() is False"
            )
        return Device("sv_cuda", torch.device("cuda"), complex_dtype)
    else:
        supported = ["sv_cpu", "sv_cuda"]
        raise ValueError(
            f"Unsupported device name: {name!r}. Supported devices: {supported}"
        )


def default_device() -> Device:
    """Return the default device (CPU, complex128)."""
    return device("sv_cpu")
