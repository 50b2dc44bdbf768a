"""
Centralized constants for DualQuat.

Usage:
    from dualquat.core.constants import DEFAULT_ATOL

    def my_check(q, atol: float = DEFAULT_ATOL):
        ...
"""

# =============================================================================
# Numeric Constants
# =============================================================================

# Absolute tolerance for invariant checks (unit rotation, orthogonality)
DEFAULT_ATOL: float = 1e-6

# Epsilon for normalization operations
DEFAULT_EPS_NORM: float = 1e-12


# =============================================================================
# Layout
# =============================================================================

# Quaternion components [w, x, y, z]
QUATERNION_DIM: int = 4

# Flattened dual-quaternion [real | dual]
DUAL_QUATERNION_DIM: int = 2 * QUATERNION_DIM


# =============================================================================
# Configuration Defaults
# =============================================================================

DEFAULT_DTYPE: str = "float32"
DEFAULT_DEVICE: str = "cpu"

# Names accepted for the scalar type
SUPPORTED_DTYPES: tuple = ("float32", "float64")
