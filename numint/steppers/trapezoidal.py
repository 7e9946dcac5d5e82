# numint/steppers/trapezoidal.py
"""
Trapezoidal stepper.

Averages the derivative at both ends of the interval. The end derivative is
taken at the *unmodified* state, not at a predicted next state, so this is an
explicit simplification of the implicit trapezoidal rule. Existing results
depend on it; do not replace it with a predictor-corrector.
"""

from __future__ import annotations
from typing import Any

from ..algebra import accumulate_operation, additive
from .base import FixedStepper, SystemFn


class TrapezoidalStepper(FixedStepper):
    """Trapezoidal method with end derivative at the start state, order 1."""

    _buffer_names = ("dxdt_start", "dxdt_end")

    def order_step(self) -> int:
        return 1

    def do_step(self, system: SystemFn, state: Any, t: float, dt: float) -> None:
        """
        Perform a single trapezoidal step.

        Computes ``x(t + dt) = x(t) + 0.5*dt*f(x, t) + 0.5*dt*f(x, t + dt)``.
        """
        dxdt_start, dxdt_end = self._prepare(state)

        system(state, dxdt_start, t)
        system(state, dxdt_end, t + dt)

        accumulate_operation(state, additive, 0.5 * dt, dxdt_start, 0.5 * dt, dxdt_end)

        self._steps += 1
