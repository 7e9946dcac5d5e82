# numint/steppers/rk4.py

from __future__ import annotations
from typing import Any

from ..algebra import accumulate_operation, additive, assign
from .base import FixedStepper, SystemFn


class RK4Stepper(FixedStepper):
    """
    Classic fourth-order Runge-Kutta method.

    Formula:
        k1 = f(x, t)
        k2 = f(x + dt/2 * k1, t + dt/2)
        k3 = f(x + dt/2 * k2, t + dt/2)
        k4 = f(x + dt * k3, t + dt)
        x(t + dt) = x + dt/6 * (k1 + 2*k2 + 2*k3 + k4)
    """

    _buffer_names = ("k1", "k2", "k3", "k4", "x_tmp")

    def order_step(self) -> int:
        return 4

    def do_step(self, system: SystemFn, state: Any, t: float, dt: float) -> None:
        k1, k2, k3, k4, x_tmp = self._prepare(state)
        dt_half = 0.5 * dt
        t_half = t + dt_half

        system(state, k1, t)

        assign(x_tmp, state)
        accumulate_operation(x_tmp, additive, dt_half, k1)
        system(x_tmp, k2, t_half)

        assign(x_tmp, state)
        accumulate_operation(x_tmp, additive, dt_half, k2)
        system(x_tmp, k3, t_half)

        assign(x_tmp, state)
        accumulate_operation(x_tmp, additive, dt, k3)
        system(x_tmp, k4, t + dt)

        accumulate_operation(
            state, additive, dt / 6.0, k1, dt / 3.0, k2, dt / 3.0, k3, dt / 6.0, k4
        )

        self._steps += 1
