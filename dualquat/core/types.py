"""
Type aliases and shape conventions for DualQuat.

Shape Conventions:
==================

    - Quaternion: (..., 4) as [w, x, y, z], w is the scalar part
    - Vector3:    (..., 3) as [x, y, z]
    - Flattened dual-quaternion: (..., 8) as [real | dual]

The scalar type of the algebra is the tensor dtype. float32 and float64
tensors go through the same code paths.
"""

from typing import Union
import torch


# =============================================================================
# Basic Type Aliases
# =============================================================================

# Quaternion tensor: (..., 4) as [w, x, y, z]
QuaternionTensor = torch.Tensor

# 3-vector tensor: (..., 3)
Vector3Tensor = torch.Tensor

# Scalar factor: Python number or tensor broadcastable to the batch shape
Scalar = Union[float, torch.Tensor]
