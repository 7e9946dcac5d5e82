# numint/steppers/adaptive.py
"""
Adaptive step-size control from an embedded pair of RK4 steppers.

Each adaptive step advances the state once with a full step and once with two
half steps, keeps the half-step result, and rescales ``dt`` for the next call
from the difference between the two. Steps are never rejected.
"""

from __future__ import annotations
from typing import Any, Optional
import sys

import numpy as np

from ..algebra import clone
from ..utils.config import ERROR_NORMS, get_config
from .base import SystemFn
from .rk4 import RK4Stepper


def truncation_error(estimate: Any, baseline: Any, error_norm: str = "absolute") -> float:
    """
    Largest componentwise difference between two state estimates.

    Components where the relative error is undefined (0/0) are skipped; a
    zero component with a non-zero difference yields an infinite relative
    error, which the "mixed" policy replaces with the absolute one.
    """
    if error_norm not in ERROR_NORMS:
        raise ValueError(f"error_norm must be one of {ERROR_NORMS}, got '{error_norm}'")

    s = np.asarray(estimate).ravel()
    y = np.asarray(baseline).ravel()
    if s.size == 0:
        return 0.0

    abs_err = np.abs(s - y)
    if error_norm == "absolute":
        err = abs_err
    else:
        with np.errstate(divide="ignore", invalid="ignore"):
            rel_err = np.abs((s - y) / s)
        err = rel_err if error_norm == "relative" else np.fmin(rel_err, abs_err)

    if np.all(np.isnan(err)):
        return 0.0
    return float(np.nanmax(err))


class AdaptiveRK4:
    """
    Heuristic adaptive controller built on two RK4 steppers.

    Parameters
    ----------
    tolerance : float, optional
        Target local error, defaults to ``get_config().default_tolerance``
    error_norm : str, optional
        One of ``ERROR_NORMS``, defaults to ``get_config().default_error_norm``

    Notes
    -----
    Each step's error is the largest component of the selected norm; the next
    step size is::

        dt <- safety * dt * clamp((tolerance / (2 * error)) ** 0.2, min_factor, max_factor)

    The exponent reflects the 4th/5th order relation of embedded Runge-Kutta
    pairs. The constants come from the package configuration at construction.
    """

    is_adaptive_stepper = True

    def __init__(self, tolerance: Optional[float] = None, error_norm: Optional[str] = None):
        cfg = get_config()
        tolerance = cfg.default_tolerance if tolerance is None else tolerance
        error_norm = cfg.default_error_norm if error_norm is None else error_norm

        if not tolerance > 0:
            raise ValueError(f"tolerance must be positive, got {tolerance}")
        if error_norm not in ERROR_NORMS:
            raise ValueError(f"error_norm must be one of {ERROR_NORMS}, got '{error_norm}'")

        self._tolerance = tolerance
        self._error_norm = error_norm
        self._safety = cfg.safety_factor
        self._min_factor = cfg.min_step_factor
        self._max_factor = cfg.max_step_factor
        self._error_floor = cfg.error_floor

        # Two distinct steppers: each owns its own buffers and counter.
        self._stepper1 = RK4Stepper()
        self._stepper2 = RK4Stepper()

        self._state: Any = None
        self._time = 0.0
        self._time_delta = cfg.initial_time_step
        self._steps = 0
        self._last_error: Optional[float] = None

    def __copy__(self):
        raise TypeError("AdaptiveRK4 owns its embedded steppers and cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("AdaptiveRK4 owns its embedded steppers and cannot be copied")

    def __repr__(self) -> str:
        return (
            f"AdaptiveRK4(tolerance={self._tolerance}, error_norm='{self._error_norm}', "
            f"t={self._time}, dt={self._time_delta})"
        )

    @property
    def tolerance(self) -> float:
        return self._tolerance

    @property
    def error_norm(self) -> str:
        return self._error_norm

    @property
    def last_error(self) -> Optional[float]:
        """Error estimate of the most recent adaptive step, after flooring."""
        return self._last_error

    def order_step(self) -> int:
        """0: the order is not fixed."""
        return 0

    def steps(self) -> int:
        """Adaptive steps taken since the last ``initialize``."""
        return self._steps

    def adjust_size(self, reference: Any) -> None:
        self._stepper1.adjust_size(reference)
        self._stepper2.adjust_size(reference)

    def initialize(self, state: Any, time: float, time_delta: float) -> None:
        """Start a new run from ``state`` at ``time`` with step ``time_delta``."""
        if not time_delta > 0:
            raise ValueError(f"time_delta must be positive, got {time_delta}")

        self._state = clone(state)
        self._time = time
        self._time_delta = time_delta
        self._steps = 0
        self._last_error = None
        self.adjust_size(self._state)

    def current_state(self) -> Any:
        """Copy of the controller's state."""
        return clone(self._state) if self._state is not None else None

    def current_time(self) -> float:
        return self._time

    def current_time_step(self) -> float:
        return self._time_delta

    def do_step(
        self,
        system: SystemFn,
        state: Any = None,
        t: Optional[float] = None,
        dt: Optional[float] = None,
    ) -> None:
        """
        Perform one adaptive step, or one fixed RK4 step on ``state``.

        Called as ``do_step(system)`` it advances the controller's own state
        by the current step size and updates the step size for the next
        call. Called as ``do_step(system, state, t, dt)`` it delegates a
        single fixed step to the first embedded stepper and leaves the
        adaptive run untouched.
        """
        if state is not None:
            if t is None or dt is None:
                raise ValueError("do_step(system, state, t, dt) requires both t and dt")
            self._stepper1.do_step(system, state, t, dt)
            return

        if self._state is None:
            raise RuntimeError("initialize() must be called before the first adaptive step")

        dt = self._time_delta
        dt_half = dt * 0.5

        # One full step from a copy of the current state.
        y0 = clone(self._state)
        self._stepper1.do_step(system, y0, self._time, dt)

        # Two half steps on the state itself.
        self._stepper2.do_step(system, self._state, self._time, dt_half)
        self._stepper2.do_step(system, self._state, self._time + dt_half, dt_half)

        self._time += dt

        error = truncation_error(self._state, y0, self._error_norm)
        if error == 0.0:
            error = self._error_floor
        self._last_error = error

        factor = min(max((self._tolerance / (2.0 * error)) ** 0.2, self._min_factor), self._max_factor)
        new_dt = self._safety * dt * factor
        # Underflow after a long run of shrinking steps.
        self._time_delta = new_dt if new_dt > 0 else sys.float_info.min

        self._steps += 1
