"""
DualQuat: dual-quaternion algebra for rigid body transforms

A small PyTorch library encoding a 3D rotation and translation in a single
8-scalar value, for robotics, skeletal animation and physics code.

Key Features:
- Construction from rotation quaternion + translation vector
- Composition, conjugation, first-order normalization
- Rotation and translation extraction
- Batched, differentiable, float32 and float64

API Design:
- DualQuaternion is an immutable (real, dual) pair of (..., 4) tensors
- Quaternions follow the [w, x, y, z] convention
- mul(a, b) applies b first, then a

Example:
    >>> import torch
    >>> from dualquat import dq
    >>> from dualquat.utils import quaternion_from_euler_angles
    >>> r = quaternion_from_euler_angles(0.0, 0.0, torch.pi / 2)
    >>> q = dq.from_rotation_and_translation(r, torch.tensor([1.0, 2.0, 3.0]))
    >>> t = dq.get_translation(q)  # [1, 2, 3] up to rounding
"""

__version__ = "0.1.0"
__author__ = "DualQuat Contributors"

from . import core
from . import dq
from . import utils

from .dq import DualQuaternion

__all__ = [
    "core",
    "dq",
    "utils",
    "DualQuaternion",
]
