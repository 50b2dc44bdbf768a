"""
Core module for DualQuat.

Contains:
- Constants: Centralized default values and layout sizes
- Types: Type aliases for quaternion and vector tensors
"""

from .constants import (
    DEFAULT_ATOL,
    DEFAULT_EPS_NORM,
    QUATERNION_DIM,
    DUAL_QUATERNION_DIM,
    DEFAULT_DTYPE,
    DEFAULT_DEVICE,
    SUPPORTED_DTYPES,
)

from .types import (
    QuaternionTensor,
    Vector3Tensor,
    Scalar,
)

__all__ = [
    # Constants
    "DEFAULT_ATOL",
    "DEFAULT_EPS_NORM",
    "QUATERNION_DIM",
    "DUAL_QUATERNION_DIM",
    "DEFAULT_DTYPE",
    "DEFAULT_DEVICE",
    "SUPPORTED_DTYPES",
    # Types
    "QuaternionTensor",
    "Vector3Tensor",
    "Scalar",
]
