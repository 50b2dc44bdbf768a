"""
Dual-quaternion algebra.

A dual-quaternion is a pair of quaternions (real, dual) encoding a rigid
body motion (rotation + translation):

    real = R
    dual = 0.5 * t * R

where R is a unit rotation quaternion and t = (0, tx, ty, tz) is the
translation embedded as a pure quaternion.

For the pair to be a valid rigid transform:
    dot(real, real) == 1    (unit rotation)
    dot(real, dual) == 0    (orthogonality)

None of the operations below enforce this. add and scale can break it,
normalize restores it to first order. Use is_rigid_transform or
validate_rigid_transform when checking is wanted.

Composition convention:
    mul(a, b) applies b first, then a:

        transform_point(mul(a, b), p) == transform_point(a, transform_point(b, p))

    This matches the Hamilton product used by quaternion_multiply.

All operations are pure, support batched inputs with shape (..., 4) per
part, and work for float32 and float64 tensors alike.
"""

from __future__ import annotations
import logging
from typing import NamedTuple, Optional
import torch

from ..core.constants import DEFAULT_ATOL, DUAL_QUATERNION_DIM, QUATERNION_DIM
from ..core.types import QuaternionTensor, Vector3Tensor, Scalar
from ..utils.quaternion import (
    quaternion_multiply,
    quaternion_conjugate,
    quaternion_dot,
    pure_quaternion,
    rotate_vector,
)

logger = logging.getLogger(__name__)


class DualQuaternion(NamedTuple):
    """
    Immutable pair of quaternions (real, dual).

    Attributes:
        real: Rotation part of shape (..., 4) as [w, x, y, z]
        dual: Translation part of shape (..., 4), entangled with rotation
    """

    real: QuaternionTensor
    dual: QuaternionTensor


def identity(
    batch_size: Optional[int] = None,
    device: torch.device = None,
    dtype: torch.dtype = None
) -> DualQuaternion:
    """
    Create identity dual-quaternion (no rotation, no translation).

    Args:
        batch_size: Number of identities, or None for unbatched (4,) parts
        device: Torch device
        dtype: Torch dtype

    Returns:
        DualQuaternion ((1, [0, 0, 0]), (0, [0, 0, 0]))
    """
    shape = (QUATERNION_DIM,) if batch_size is None else (batch_size, QUATERNION_DIM)
    real = torch.zeros(shape, device=device, dtype=dtype)
    real[..., 0] = 1.0
    dual = torch.zeros(shape, device=device, dtype=dtype)
    return DualQuaternion(real, dual)


def from_rotation_and_translation(
    rotation: QuaternionTensor,
    translation: Vector3Tensor
) -> DualQuaternion:
    """
    Construct a dual-quaternion from a rotation and a translation.

    dual = 0.5 * (0, translation) * rotation

    The rotation is used as given; pass a unit quaternion for a valid
    rigid transform.

    Args:
        rotation: Rotation quaternion of shape (..., 4)
        translation: Translation vector of shape (..., 3)

    Returns:
        DualQuaternion encoding "rotate, then translate"
    """
    dual = quaternion_multiply(pure_quaternion(translation), rotation) * 0.5
    real, dual = torch.broadcast_tensors(rotation, dual)
    return DualQuaternion(real, dual)


def add(a: DualQuaternion, b: DualQuaternion) -> DualQuaternion:
    """
    Component-wise sum of two dual-quaternions.

    The sum of two rigid transforms is generally not a rigid transform;
    normalize the result before extracting rotation or translation.
    """
    return DualQuaternion(a.real + b.real, a.dual + b.dual)


def mul(a: DualQuaternion, b: DualQuaternion) -> DualQuaternion:
    """
    Compose two dual-quaternions: a * b.

        real = a.real * b.real
        dual = a.real * b.dual + a.dual * b.real

    The result applies b first, then a.

    Args:
        a: Outer (later) transform
        b: Inner (earlier) transform

    Returns:
        Composed dual-quaternion
    """
    real = quaternion_multiply(a.real, b.real)
    dual = quaternion_multiply(a.real, b.dual) + quaternion_multiply(a.dual, b.real)
    return DualQuaternion(real, dual)


def scale(q: DualQuaternion, t: Scalar) -> DualQuaternion:
    """
    Multiply every component of both parts by a scalar.

    Args:
        q: Dual-quaternion
        t: Python number or tensor of shape (...) matching the batch

    Returns:
        Scaled dual-quaternion
    """
    if isinstance(t, torch.Tensor) and t.dim() > 0:
        t = t.unsqueeze(-1)
    return DualQuaternion(q.real * t, q.dual * t)


def conj(q: DualQuaternion) -> DualQuaternion:
    """
    Quaternion conjugate of both parts.

    For a unit real part this is the inverse rigid transform.
    """
    return DualQuaternion(quaternion_conjugate(q.real), quaternion_conjugate(q.dual))


def dot(a: DualQuaternion, b: DualQuaternion) -> torch.Tensor:
    """
    Dot product of the real parts only.

    The dual parts do not contribute: dot(a, b) == quaternion_dot(a.real, b.real).
    dot(q, q) is therefore the squared length of the rotation part.

    Returns:
        Tensor of shape (...)
    """
    return quaternion_dot(a.real, b.real)


def normalize(q: DualQuaternion) -> DualQuaternion:
    """
    First-order normalization of a dual-quaternion.

        k     = 1 / sqrt(dot(q, q))
        real' = real * k
        dual' = dual * k - real * dot(real, dual)

    The real part is rescaled to unit length and the first-order component
    of dual along real is removed. The dual part is not renormalized beyond
    that.

    The real part must not be zero: a zero-length real part yields
    non-finite values, and nothing is checked here.
    """
    k = torch.rsqrt(dot(q, q)).unsqueeze(-1)
    d = quaternion_dot(q.real, q.dual).unsqueeze(-1)
    return DualQuaternion(q.real * k, q.dual * k - q.real * d)


def get_rotation(q: DualQuaternion) -> QuaternionTensor:
    """Rotation part (the real quaternion), valid when it has unit length."""
    return q.real


def get_translation(q: DualQuaternion) -> Vector3Tensor:
    """
    Extract the translation vector.

    t = 2 * dual * conj(real), vector part. Exact when real has unit length.

    Returns:
        Translation of shape (..., 3)
    """
    t = quaternion_multiply(q.dual * 2.0, quaternion_conjugate(q.real))
    return t[..., 1:]


def transform_point(q: DualQuaternion, points: Vector3Tensor) -> Vector3Tensor:
    """
    Apply the rigid transform to points: rotate, then translate.

    Args:
        q: Dual-quaternion with unit real part
        points: Points of shape (..., 3) broadcastable against q

    Returns:
        Transformed points of shape (..., 3)
    """
    return rotate_vector(points, q.real) + get_translation(q)


def to_tensor(q: DualQuaternion) -> torch.Tensor:
    """
    Flatten to an (..., 8) tensor laid out as [real | dual].
    """
    real, dual = torch.broadcast_tensors(q.real, q.dual)
    return torch.cat([real, dual], dim=-1)


def from_tensor(t: torch.Tensor) -> DualQuaternion:
    """
    Build a dual-quaternion from an (..., 8) tensor laid out as [real | dual].

    Raises:
        ValueError: If the last dimension is not 8
    """
    if t.shape[-1] != DUAL_QUATERNION_DIM:
        raise ValueError(
            f"Expected last dimension {DUAL_QUATERNION_DIM} [real | dual], "
            f"got shape {tuple(t.shape)}"
        )
    real, dual = torch.split(t, [QUATERNION_DIM, QUATERNION_DIM], dim=-1)
    return DualQuaternion(real, dual)


def is_rigid_transform(q: DualQuaternion, atol: float = DEFAULT_ATOL) -> torch.Tensor:
    """
    Check the rigid-transform invariants per batch element.

        |dot(real, real) - 1| <= atol
        |dot(real, dual)|     <= atol

    Returns:
        Boolean tensor of shape (...)
    """
    unit = (quaternion_dot(q.real, q.real) - 1.0).abs() <= atol
    orthogonal = quaternion_dot(q.real, q.dual).abs() <= atol
    return unit & orthogonal


def validate_rigid_transform(
    q: DualQuaternion,
    atol: float = DEFAULT_ATOL,
    name: str = "dual quaternion"
) -> None:
    """
    Assert that a dual-quaternion represents a rigid transform.

    Debug helper; none of the algebra operations call it.

    Args:
        q: Dual-quaternion to check
        atol: Absolute tolerance for both invariants
        name: Name for error messages

    Raises:
        ValueError: If any batch element violates the invariants
    """
    valid = is_rigid_transform(q, atol)
    if bool(valid.all()):
        return

    norm_err = (quaternion_dot(q.real, q.real) - 1.0).abs().max().item()
    ortho_err = quaternion_dot(q.real, q.dual).abs().max().item()
    num_bad = int((~valid).sum().item())
    logger.warning(
        f"{name}: {num_bad} element(s) not rigid "
        f"(unit error {norm_err:.3e}, orthogonality error {ortho_err:.3e})"
    )
    raise ValueError(
        f"{name} is not a rigid transform: |real|^2 deviates from 1 by "
        f"{norm_err:.3e}, dot(real, dual) is {ortho_err:.3e} (atol={atol})"
    )
