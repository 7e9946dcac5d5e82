# numint/systems.py
"""
Adapters from functional right-hand sides to in-place system callbacks.
"""

from __future__ import annotations
from typing import Any, Callable, Optional
import warnings

import numpy as np

from .algebra import assign
from .steppers.base import SystemFn
from .utils.config import get_config
from .utils.jax_utils import JAX_AVAILABLE, maybe_jit, to_numpy


def functional_system(fn: Callable[[Any, float], Any], jit: Optional[bool] = None) -> SystemFn:
    """
    Wrap ``fn(x, t) -> dxdt`` as a ``system(state, dxdt, t)`` callback.

    Parameters
    ----------
    fn : callable
        Pure right-hand side returning the derivative. Any NumPy code works
        when ``jit`` is off. With ``jit`` on, ``fn`` is traced by JAX and must
        be written with jax.numpy.
    jit : bool, optional
        JIT-compile ``fn`` with JAX. Defaults to ``get_config().use_jax_jit``,
        which is off unless enabled with ``configure(use_jax_jit=True)``.
        Ignored when JAX is not installed.

    Returns
    -------
    callable
        System callback that writes ``fn``'s result into ``dxdt`` without
        resizing it.

    Notes
    -----
    JAX computes in float32 unless ``jax_enable_x64`` is set, which limits
    the attainable accuracy of a JIT-compiled right-hand side.
    """
    if jit is None:
        jit = get_config().use_jax_jit
    elif jit and not JAX_AVAILABLE:
        warnings.warn("JAX not available; functional_system will not be JIT-compiled")

    compiled = maybe_jit(fn, enable=jit)

    def system(state, dxdt, t):
        assign(dxdt, to_numpy(compiled(np.asarray(state), t)))

    system.__wrapped__ = fn
    system.jit_compiled = bool(jit and JAX_AVAILABLE)
    return system
