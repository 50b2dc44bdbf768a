"""
Quaternion operations backing the dual-quaternion algebra.

Quaternions are represented as (w, x, y, z) where w is the scalar part
and (x, y, z) is the vector part. This follows the convention:
    q = w + xi + yj + zk

All operations support batched inputs with shape (..., 4). Addition and
scaling are plain tensor arithmetic (q1 + q2, q * s).
"""

from typing import Union
import torch
import torch.nn.functional as F

from ..core.constants import DEFAULT_EPS_NORM


def normalize_quaternion(q: torch.Tensor, eps: float = DEFAULT_EPS_NORM) -> torch.Tensor:
    """
    Normalize quaternion to unit length.

    Args:
        q: Quaternion tensor of shape (..., 4) as [w, x, y, z]
        eps: Small constant for numerical stability

    Returns:
        Normalized quaternion of shape (..., 4)
    """
    return F.normalize(q, p=2, dim=-1, eps=eps)


def quaternion_conjugate(q: torch.Tensor) -> torch.Tensor:
    """
    Compute quaternion conjugate: q* = w - xi - yj - zk

    Args:
        q: Quaternion tensor of shape (..., 4) as [w, x, y, z]

    Returns:
        Conjugate quaternion of shape (..., 4)
    """
    # Negate the vector part
    conj = q.clone()
    conj[..., 1:] = -conj[..., 1:]
    return conj


def quaternion_multiply(q1: torch.Tensor, q2: torch.Tensor) -> torch.Tensor:
    """
    Compute quaternion product: q1 * q2

    Uses the Hamilton product formula:
        (a1 + b1i + c1j + d1k)(a2 + b2i + c2j + d2k)

    Rotating by the product applies q2 first, then q1.

    Args:
        q1: First quaternion of shape (..., 4) as [w, x, y, z]
        q2: Second quaternion of shape (..., 4) as [w, x, y, z]

    Returns:
        Product quaternion of shape (..., 4)
    """
    w1, x1, y1, z1 = q1.unbind(dim=-1)
    w2, x2, y2, z2 = q2.unbind(dim=-1)

    w = w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2
    x = w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2
    y = w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2
    z = w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2

    return torch.stack([w, x, y, z], dim=-1)


def quaternion_dot(q1: torch.Tensor, q2: torch.Tensor) -> torch.Tensor:
    """
    Four-dimensional dot product of two quaternions.

    Args:
        q1: First quaternion of shape (..., 4)
        q2: Second quaternion of shape (..., 4)

    Returns:
        Dot product of shape (...)
    """
    return (q1 * q2).sum(dim=-1)


def pure_quaternion(v: torch.Tensor) -> torch.Tensor:
    """
    Embed a 3-vector as a pure quaternion (0, v).

    Args:
        v: Vector(s) of shape (..., 3)

    Returns:
        Quaternion(s) of shape (..., 4) with zero scalar part
    """
    w = torch.zeros_like(v[..., :1])
    return torch.cat([w, v], dim=-1)


def quaternion_from_axis_angle(
    axis: torch.Tensor,
    angle: torch.Tensor
) -> torch.Tensor:
    """
    Create quaternion from axis-angle representation.

    q = cos(θ/2) + sin(θ/2) * (ax*i + ay*j + az*k)

    Args:
        axis: Rotation axis of shape (..., 3), will be normalized
        angle: Rotation angle in radians of shape (...) or (..., 1)

    Returns:
        Unit quaternion of shape (..., 4) as [w, x, y, z]
    """
    axis = F.normalize(axis, p=2, dim=-1)
    angle = torch.as_tensor(angle, device=axis.device, dtype=axis.dtype)

    # Handle angle shape
    if angle.dim() == axis.dim() and angle.shape[-1] == 1:
        angle = angle.squeeze(-1)

    half_angle = (angle / 2).unsqueeze(-1)
    w = torch.cos(half_angle)
    xyz = axis * torch.sin(half_angle)

    return torch.cat([w.expand(*xyz.shape[:-1], 1), xyz], dim=-1)


def quaternion_from_euler_angles(
    x: Union[float, torch.Tensor],
    y: Union[float, torch.Tensor],
    z: Union[float, torch.Tensor],
    device: torch.device = None,
    dtype: torch.dtype = None
) -> torch.Tensor:
    """
    Create quaternion from Euler angles about the X, Y and Z axes.

    The result equals Rz * Ry * Rx, so a single non-zero angle gives the
    plain rotation about that axis.

    Args:
        x: Rotation about X in radians, scalar or tensor of shape (...)
        y: Rotation about Y in radians, scalar or tensor of shape (...)
        z: Rotation about Z in radians, scalar or tensor of shape (...)
        device: Torch device for Python scalar inputs
        dtype: Torch dtype for Python scalar inputs

    Returns:
        Unit quaternion of shape (..., 4) as [w, x, y, z]
    """
    x, y, z = torch.broadcast_tensors(
        *(torch.as_tensor(a, device=device, dtype=dtype) for a in (x, y, z))
    )

    sx, cx = torch.sin(x / 2), torch.cos(x / 2)
    sy, cy = torch.sin(y / 2), torch.cos(y / 2)
    sz, cz = torch.sin(z / 2), torch.cos(z / 2)

    w = cx * cy * cz + sx * sy * sz
    qx = sx * cy * cz - cx * sy * sz
    qy = cx * sy * cz + sx * cy * sz
    qz = cx * cy * sz - sx * sy * cz

    return torch.stack([w, qx, qy, qz], dim=-1)


def identity_quaternion(
    batch_size: int = 1,
    device: torch.device = None,
    dtype: torch.dtype = None
) -> torch.Tensor:
    """
    Create identity quaternion (no rotation).

    Args:
        batch_size: Number of identity quaternions to create
        device: Torch device
        dtype: Torch dtype

    Returns:
        Identity quaternions of shape (batch_size, 4)
    """
    q = torch.zeros(batch_size, 4, device=device, dtype=dtype)
    q[:, 0] = 1.0  # w = 1, x = y = z = 0
    return q


def rotate_vector(v: torch.Tensor, q: torch.Tensor) -> torch.Tensor:
    """
    Rotate a 3D vector by a quaternion.

    v' = q * v * q^{-1} (quaternion sandwich product)

    Args:
        v: Vector(s) of shape (..., 3)
        q: Unit quaternion(s) of shape (..., 4)

    Returns:
        Rotated vector(s) of shape (..., 3)
    """
    v_quat = pure_quaternion(v)

    # Compute q * v * q^{-1}
    q_inv = quaternion_conjugate(q)  # For unit quaternions
    result = quaternion_multiply(quaternion_multiply(q, v_quat), q_inv)

    return result[..., 1:]  # Extract vector part
