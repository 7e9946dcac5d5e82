"""
numint: generic numerical integration of ordinary differential equations.

Steppers advance a caller-owned state vector in place, using a user-supplied
system callback ``system(state, dxdt, t)``:
- Fixed-step methods: Euler, Trapezoidal, RK4
- Adaptive step-size control from an embedded RK4 pair
- Observers for per-step output with decimation
- Works on NumPy arrays, lists, or any indexable container

Core workflow:
1. Write the system callback (or wrap a pure function → functional_system)
2. Pick a stepper → RK4Stepper / AdaptiveRK4
3. Run → integrate_const / integrate_adaptive, observing with PrintObserver
"""

from __future__ import annotations

# Version info
__version__ = "0.1.0"
__author__ = "numint Contributors"

from .utils.jax_utils import JAX_AVAILABLE
from .utils.config import PackageConfig, get_config, configure, reset_config

from .algebra import (
    accumulate_operation,
    accumulate_abs,
    additive,
    assign,
    has_resize,
)

from .steppers import (
    StepperProtocol,
    PreconditionError,
    EulerStepper,
    TrapezoidalStepper,
    RK4Stepper,
    AdaptiveRK4,
    ERROR_NORMS,
)

from .observers import Observer, DecimatingObserver, PrintObserver
from .integrate import integrate_n_steps, integrate_const, integrate_adaptive
from .systems import functional_system

__all__ = [
    # Version
    "__version__",
    # Utilities
    "JAX_AVAILABLE",
    "PackageConfig",
    "get_config",
    "configure",
    "reset_config",
    # Algebra
    "accumulate_operation",
    "accumulate_abs",
    "additive",
    "assign",
    "has_resize",
    # Steppers
    "StepperProtocol",
    "PreconditionError",
    "EulerStepper",
    "TrapezoidalStepper",
    "RK4Stepper",
    "AdaptiveRK4",
    "ERROR_NORMS",
    # Observers
    "Observer",
    "DecimatingObserver",
    "PrintObserver",
    # Drivers
    "integrate_n_steps",
    "integrate_const",
    "integrate_adaptive",
    "functional_system",
]
