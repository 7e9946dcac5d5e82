# numint/utils/config.py
"""
Global package configuration.

Centralizes the settings shared across steppers and drivers: scratch buffer
dtype, precondition checks, adaptive step-size constants, and diagnostics.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict, replace
from typing import Dict, Any
import warnings

from .jax_utils import JAX_AVAILABLE, get_jax_version

ERROR_NORMS = ("absolute", "relative", "mixed")
"""
Truncation error policies of the adaptive controller, per component ``s``
(half steps) and ``y`` (full step):

- "absolute": ``|s - y|``
- "relative": ``|(s - y) / s|``
- "mixed":    the smaller of the two
"""


@dataclass
class PackageConfig:
    """
    Global configuration for numint.

    The adaptive controller reads its constants from here at construction,
    so changing them affects controllers created afterwards only.
    """
    # Scratch buffers
    dtype: str = "float64"              # 'float32' | 'float64'
    check_sizes: bool = True            # Raise on buffer/state length mismatch

    # Adaptive step-size control
    default_tolerance: float = 1e-4
    default_error_norm: str = "absolute"    # 'absolute' | 'relative' | 'mixed'
    initial_time_step: float = 1e-12
    error_floor: float = 1e-15
    safety_factor: float = 0.9
    min_step_factor: float = 0.3
    max_step_factor: float = 1.5

    # Functional systems
    use_jax_jit: bool = False           # Opt in for jax.numpy right-hand sides

    # Progress and monitoring
    show_progress: bool = False
    verbose: bool = False

    def __post_init__(self):
        self._validate_config()

    def _validate_config(self):
        """Validate configuration settings."""
        if self.dtype not in ["float32", "float64"]:
            raise ValueError(f"dtype must be 'float32' or 'float64', got '{self.dtype}'")

        if self.default_error_norm not in ERROR_NORMS:
            raise ValueError(
                f"default_error_norm must be one of {ERROR_NORMS}, got '{self.default_error_norm}'"
            )

        for name in ("default_tolerance", "initial_time_step", "error_floor", "safety_factor"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")

        if not 0 < self.min_step_factor <= self.max_step_factor:
            raise ValueError("Step factors must satisfy 0 < min_step_factor <= max_step_factor")

    def get_system_info(self) -> Dict[str, Any]:
        """Get configuration and environment information."""
        return {
            "jax_available": JAX_AVAILABLE,
            "jax_version": get_jax_version(),
            "current_config": asdict(self),
        }


# Global configuration instance
_global_config = PackageConfig()


def get_config() -> PackageConfig:
    """Get global package configuration."""
    return _global_config


def configure(**kwargs) -> None:
    """
    Configure package settings.

    Parameters
    ----------
    **kwargs : dict
        Configuration parameters to update

    Raises
    ------
    ValueError
        If the updated settings are invalid. The current configuration is
        left unchanged.
    """
    global _global_config

    updates = {}
    for key, value in kwargs.items():
        if hasattr(_global_config, key):
            updates[key] = value
        else:
            warnings.warn(f"Unknown configuration parameter: {key}")

    # replace() runs __post_init__, so the candidate is validated before it is installed
    _global_config = replace(_global_config, **updates)


def reset_config() -> None:
    """Reset configuration to defaults."""
    global _global_config
    _global_config = PackageConfig()
