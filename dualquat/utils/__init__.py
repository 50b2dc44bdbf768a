"""
Utility functions for DualQuat.

Includes quaternion operations and configuration management.
"""

from .quaternion import (
    quaternion_multiply,
    quaternion_conjugate,
    quaternion_dot,
    quaternion_from_axis_angle,
    quaternion_from_euler_angles,
    identity_quaternion,
    normalize_quaternion,
    pure_quaternion,
    rotate_vector,
)
from .config import Config, load_config, save_config

__all__ = [
    # Quaternion operations
    "quaternion_multiply",
    "quaternion_conjugate",
    "quaternion_dot",
    "quaternion_from_axis_angle",
    "quaternion_from_euler_angles",
    "identity_quaternion",
    "normalize_quaternion",
    "pure_quaternion",
    "rotate_vector",
    # Config
    "Config",
    "load_config",
    "save_config",
]
