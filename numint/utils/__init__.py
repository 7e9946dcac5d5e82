# numint/utils/__init__.py
"""
Utilities for numint.

Contains:
- jax_utils: JAX guards and jit helper
- config: global package configuration
- logging: timers, memory monitoring, progress tracking
"""

from .jax_utils import (
    JAX_AVAILABLE,
    get_jax_version,
    to_numpy,
    maybe_jit,
)

from .config import (
    PackageConfig,
    get_config,
    configure,
    reset_config,
)

from .logging import (
    Timer,
    timeit,
    memory_info,
    create_progress_callback,
    ProgressCallback,
)

__all__ = [
    # jax_utils
    "JAX_AVAILABLE",
    "get_jax_version",
    "to_numpy",
    "maybe_jit",
    # config
    "PackageConfig",
    "get_config",
    "configure",
    "reset_config",
    # logging
    "Timer",
    "timeit",
    "memory_info",
    "create_progress_callback",
    "ProgressCallback",
]
