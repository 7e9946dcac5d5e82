# numint/integrate.py
"""
Integration drivers.

Loops that repeatedly call a stepper's ``do_step`` and hand every sample to
an observer:

- integrate_n_steps: a fixed number of equal steps
- integrate_const: equal steps over [t0, t1]
- integrate_adaptive: adaptive steps from an ``AdaptiveRK4`` over [t0, t1]

With ``configure(show_progress=True)`` the drivers print a single-line
progress report; with ``configure(verbose=True)`` they print their run time.
"""

from __future__ import annotations
from contextlib import nullcontext
from typing import Any, Optional
import math

from .algebra import assign
from .observers import Observer
from .steppers.adaptive import AdaptiveRK4
from .steppers.base import StepperProtocol, SystemFn
from .utils.config import get_config
from .utils.logging import Timer, create_progress_callback

# Fraction of dt by which t1 may fall short of the last fixed step.
_STEP_EPSILON = 1e-9


def _check_interval(t0: float, t1: float, dt: float) -> None:
    if not dt > 0:
        raise ValueError(f"dt must be positive, got {dt}")
    if t1 < t0:
        raise ValueError(f"t1 ({t1}) must not precede t0 ({t0})")


def _make_reporting(name: str):
    """Return (timer_context, progress_callback_or_None) per the global config."""
    cfg = get_config()
    timer = Timer(name) if cfg.verbose else nullcontext()
    progress = create_progress_callback(name) if cfg.show_progress else None
    return timer, progress


def _run_fixed(
    stepper: StepperProtocol,
    system: SystemFn,
    state: Any,
    t0: float,
    dt: float,
    n_steps: int,
    observer: Observer,
    name: str,
) -> float:
    timer, progress = _make_reporting(name)
    t = t0
    with timer:
        observer(state, t)
        for i in range(1, n_steps + 1):
            stepper.do_step(system, state, t, dt)
            # Recompute from t0 so rounding does not accumulate.
            t = t0 + i * dt
            observer(state, t)
            if progress is not None:
                progress(i, n_steps)
    return t


def integrate_n_steps(
    stepper: StepperProtocol,
    system: SystemFn,
    state: Any,
    t0: float,
    dt: float,
    n_steps: int,
    observer: Optional[Observer] = None,
) -> float:
    """
    Advance ``state`` in place by ``n_steps`` steps of size ``dt``.

    Parameters
    ----------
    stepper : StepperProtocol
        Any stepper; an ``AdaptiveRK4`` performs fixed RK4 steps here
    system : callable
        ``system(state, dxdt, t)``
    state : sequence
        Initial state, advanced in place
    t0 : float
        Initial time
    dt : float
        Step size, positive
    n_steps : int
        Number of steps, non-negative
    observer : Observer, optional
        Called with (state, t) for the initial state and after every step

    Returns
    -------
    float
        Final time ``t0 + n_steps * dt``
    """
    if not dt > 0:
        raise ValueError(f"dt must be positive, got {dt}")
    if n_steps < 0:
        raise ValueError(f"n_steps must be non-negative, got {n_steps}")

    observer = observer if observer is not None else Observer()
    return _run_fixed(stepper, system, state, t0, dt, n_steps, observer, "integrate_n_steps")


def integrate_const(
    stepper: StepperProtocol,
    system: SystemFn,
    state: Any,
    t0: float,
    t1: float,
    dt: float,
    observer: Optional[Observer] = None,
) -> int:
    """
    Advance ``state`` in place with equal steps of ``dt`` from ``t0`` towards ``t1``.

    Takes every step that ends at or before ``t1``; a remainder shorter than
    ``dt`` is not integrated.

    Returns
    -------
    int
        Number of steps taken
    """
    _check_interval(t0, t1, dt)

    n_steps = int(math.floor((t1 - t0) / dt + _STEP_EPSILON))
    observer = observer if observer is not None else Observer()
    _run_fixed(stepper, system, state, t0, dt, n_steps, observer, "integrate_const")
    return n_steps


def integrate_adaptive(
    controller: AdaptiveRK4,
    system: SystemFn,
    state: Any,
    t0: float,
    t1: float,
    dt: float,
    observer: Optional[Observer] = None,
    max_steps: Optional[int] = None,
) -> int:
    """
    Advance ``state`` in place with adaptive steps from ``t0`` until ``t1``.

    The controller is (re)initialized from ``state``, ``t0`` and ``dt``. It
    never truncates a step, so the final time ``controller.current_time()``
    may exceed ``t1`` by less than one step.

    Parameters
    ----------
    max_steps : int, optional
        Raise RuntimeError instead of taking more steps than this

    Returns
    -------
    int
        Number of adaptive steps taken
    """
    _check_interval(t0, t1, dt)

    observer = observer if observer is not None else Observer()
    timer, progress = _make_reporting("integrate_adaptive")

    controller.initialize(state, t0, dt)
    n_steps = 0
    with timer:
        observer(state, t0)
        while controller.current_time() < t1:
            if max_steps is not None and n_steps >= max_steps:
                raise RuntimeError(
                    f"integrate_adaptive exceeded max_steps={max_steps} at "
                    f"t={controller.current_time()} (dt={controller.current_time_step()})"
                )
            controller.do_step(system)
            n_steps += 1

            assign(state, controller.current_state())
            observer(state, controller.current_time())
            if progress is not None:
                progress(n_steps, 0, t=f"{controller.current_time():.6g}")

        if progress is not None and n_steps > 0:
            progress(n_steps, n_steps)

    return n_steps
