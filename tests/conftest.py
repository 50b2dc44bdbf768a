"""
Pytest configuration and fixtures for DualQuat tests.
"""

import math

import pytest
import torch

from dualquat.utils.quaternion import (
    normalize_quaternion,
    quaternion_from_euler_angles,
)


@pytest.fixture
def cpu_device():
    """Force CPU device for consistent testing."""
    return torch.device('cpu')


@pytest.fixture
def batch_size():
    """Default batch size for tests."""
    return 8


@pytest.fixture
def identity_quaternion():
    """Identity quaternion [w, x, y, z]."""
    return torch.tensor([1.0, 0.0, 0.0, 0.0])


@pytest.fixture
def euler_pi_rotation():
    """Rotation by pi about each of X, Y and Z."""
    return quaternion_from_euler_angles(math.pi, math.pi, math.pi)


@pytest.fixture
def random_rotations(batch_size):
    """Seeded random unit quaternions of shape (B, 4)."""
    generator = torch.Generator().manual_seed(0)
    return normalize_quaternion(torch.randn(batch_size, 4, generator=generator))


@pytest.fixture
def random_translations(batch_size):
    """Seeded random translations of shape (B, 3)."""
    generator = torch.Generator().manual_seed(1)
    return torch.randn(batch_size, 3, generator=generator) * 5
