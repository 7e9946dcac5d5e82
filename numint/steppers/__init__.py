"""
numint steppers

Every stepper follows the signature:

    stepper.do_step(system, state, t, dt)

where:
- system: callable (state, dxdt, t) -> None filling dxdt in place
- state: state vector, advanced in place
- t: current time
- dt: step size

The adaptive controller additionally supports ``do_step(system)`` on its own
internal state after ``initialize``.
"""

from .base import FixedStepper, PreconditionError, StepperProtocol, SystemFn
from .euler import EulerStepper
from .trapezoidal import TrapezoidalStepper
from .rk4 import RK4Stepper
from .adaptive import AdaptiveRK4, ERROR_NORMS, truncation_error

__all__ = [
    "SystemFn",
    "StepperProtocol",
    "FixedStepper",
    "PreconditionError",
    "EulerStepper",
    "TrapezoidalStepper",
    "RK4Stepper",
    "AdaptiveRK4",
    "ERROR_NORMS",
    "truncation_error",
]
