# numint/utils/jax_utils.py
from __future__ import annotations
from typing import Any, Callable, Optional, Sequence

try:
    import jax
    from jax import jit as _jit
    JAX_AVAILABLE = True
except Exception:
    JAX_AVAILABLE = False
    jax = None  # type: ignore

import numpy as np

def get_jax_version() -> Optional[str]:
    """Return the JAX version string if available, else None."""
    return getattr(jax, "__version__", None) if JAX_AVAILABLE else None

def to_numpy(x: Any) -> np.ndarray:
    """Convert JAX arrays, NumPy arrays and sequences to a NumPy array."""
    return np.asarray(x)

def maybe_jit(fn: Callable, enable: bool = True, static_argnums: Optional[Sequence[int]] = None):
    """
    JIT-wrap `fn` with JAX when available and enabled; otherwise return `fn` unchanged.
    """
    if JAX_AVAILABLE and enable:
        return _jit(fn, static_argnums=static_argnums)
    return fn
