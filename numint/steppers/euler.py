# numint/steppers/euler.py
"""
Forward Euler stepper.

    x(t + dt) = x(t) + dt * f(x, t)
"""

from __future__ import annotations
from typing import Any

from ..algebra import accumulate_operation, additive
from .base import FixedStepper, SystemFn


class EulerStepper(FixedStepper):
    """Explicit Euler method, order 1."""

    _buffer_names = ("dxdt",)

    def order_step(self) -> int:
        return 1

    def do_step(self, system: SystemFn, state: Any, t: float, dt: float) -> None:
        """
        Perform a single Euler step.

        Parameters
        ----------
        system : callable
            ``system(state, dxdt, t)`` filling ``dxdt`` in place
        state : sequence
            Current state, updated in place
        t : float
            Current time
        dt : float
            Step size
        """
        (dxdt,) = self._prepare(state)

        system(state, dxdt, t)
        accumulate_operation(state, additive, dt, dxdt)

        self._steps += 1
