"""
Configuration management for DualQuat.

Holds the scalar type, device and tolerance used when creating and checking
dual-quaternions.
"""

import json
import logging
from dataclasses import dataclass, field, asdict
from typing import Dict, Any
from pathlib import Path

import torch

from ..core.constants import (
    DEFAULT_ATOL,
    DEFAULT_DTYPE,
    DEFAULT_DEVICE,
    SUPPORTED_DTYPES,
)

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """
    Configuration for dual-quaternion creation and checks.

    Attributes:
        dtype: Scalar type name ('float32' or 'float64')
        device: Device to place new tensors on ('cpu', 'cuda', 'mps')
        atol: Absolute tolerance for rigid-transform invariant checks
    """

    dtype: str = DEFAULT_DTYPE
    device: str = DEFAULT_DEVICE
    atol: float = DEFAULT_ATOL

    # Additional fields
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.dtype not in SUPPORTED_DTYPES:
            raise ValueError(
                f"Unsupported dtype: {self.dtype}. "
                f"Supported: {', '.join(SUPPORTED_DTYPES)}"
            )

    @property
    def torch_dtype(self) -> torch.dtype:
        return getattr(torch, self.dtype)

    def tensor_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for tensor factory functions."""
        return {'device': torch.device(self.device), 'dtype': self.torch_dtype}

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        # Extract known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        known_kwargs = {k: v for k, v in config_dict.items() if k in known_fields}
        extra_kwargs = {k: v for k, v in config_dict.items() if k not in known_fields}

        config = cls(**known_kwargs)
        config.extra.update(extra_kwargs)
        return config

    def update(self, **kwargs) -> 'Config':
        """Return a new config with updated values."""
        config_dict = self.to_dict()
        config_dict.update(kwargs)
        return Config.from_dict(config_dict)


def load_config(filepath: str) -> Config:
    """
    Load configuration from JSON file.

    Args:
        filepath: Path to JSON config file

    Returns:
        Config object
    """
    filepath = Path(filepath)
    with open(filepath, 'r') as f:
        config_dict = json.load(f)
    logger.info(f"Loaded config from {filepath}")
    return Config.from_dict(config_dict)


def save_config(config: Config, filepath: str) -> None:
    """
    Save configuration to JSON file.

    Args:
        config: Config object to save
        filepath: Output file path
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)
    logger.info(f"Saved config to {filepath}")
