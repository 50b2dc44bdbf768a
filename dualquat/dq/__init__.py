"""
Dual-quaternion module.

Implements the algebra of dual-quaternions (real, dual) as rigid body
transformations (rotation + translation).
"""

from .dual_quaternion import (
    DualQuaternion,
    identity,
    from_rotation_and_translation,
    add,
    mul,
    scale,
    conj,
    dot,
    normalize,
    get_rotation,
    get_translation,
    transform_point,
    to_tensor,
    from_tensor,
    is_rigid_transform,
    validate_rigid_transform,
)

__all__ = [
    # Type
    "DualQuaternion",
    # Algebra
    "identity",
    "from_rotation_and_translation",
    "add",
    "mul",
    "scale",
    "conj",
    "dot",
    "normalize",
    # Extraction
    "get_rotation",
    "get_translation",
    "transform_point",
    # Layout
    "to_tensor",
    "from_tensor",
    # Checks
    "is_rigid_transform",
    "validate_rigid_transform",
]
