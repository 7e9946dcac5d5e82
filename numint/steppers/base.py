# numint/steppers/base.py

from __future__ import annotations
from typing import Any, Callable, Dict, Protocol, Tuple, runtime_checkable

import numpy as np

from ..algebra import has_resize, same_layout, size_of, zeros_like
from ..utils.config import get_config

# System function signature: fills dxdt in place from (state, time)
SystemFn = Callable[[Any, Any, float], None]
"""
System function protocol.

Parameters
----------
state : sequence
    Current state vector (read only)
dxdt : sequence
    Output buffer, same length as state; must be filled, never resized
time : float
    Time at which the derivative is evaluated
"""


class PreconditionError(ValueError):
    """Scratch buffers do not match the state handed to ``do_step``."""


def _layout(seq: Any):
    return seq.shape if isinstance(seq, np.ndarray) else size_of(seq)


@runtime_checkable
class StepperProtocol(Protocol):
    """
    Protocol for steppers.

    Any object exposing these methods can be driven by the functions in
    ``numint.integrate``.
    """

    is_adaptive_stepper: bool

    def order_step(self) -> int:
        """Order of the local truncation error."""
        ...

    def adjust_size(self, reference: Any) -> None:
        """Match scratch buffers to the length of ``reference``."""
        ...

    def steps(self) -> int:
        """Number of completed steps."""
        ...

    def do_step(self, system: SystemFn, state: Any, t: float, dt: float) -> None:
        """Advance ``state`` in place from ``t`` to ``t + dt``."""
        ...


class FixedStepper:
    """
    Base class for fixed-step methods.

    Subclasses list the scratch buffers they need in ``_buffer_names`` and
    implement ``order_step`` and ``do_step``. Buffers are allocated from the
    first state seen, either explicitly through ``adjust_size`` or lazily on
    the first ``do_step``; they belong to this instance alone, so steppers
    refuse to be copied.
    """

    is_adaptive_stepper = False
    _buffer_names: Tuple[str, ...] = ()

    def __init__(self, reference: Any = None):
        self._buffers: Dict[str, Any] = {}
        self._steps = 0
        if reference is not None:
            self.adjust_size(reference)

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} owns its scratch buffers and cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} owns its scratch buffers and cannot be copied")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(order={self.order_step()}, steps={self._steps})"

    def order_step(self) -> int:
        raise NotImplementedError

    def steps(self) -> int:
        """Number of integration steps executed so far."""
        return self._steps

    def adjust_size(self, reference: Any) -> None:
        """
        Resize the scratch buffers to match ``reference``.

        Does nothing for containers without resize capability once the
        buffers exist, or when the shapes already agree.
        """
        if self._buffers:
            if not has_resize(reference):
                return
            if all(same_layout(buf, reference) for buf in self._buffers.values()):
                return

        dtype = get_config().dtype
        self._buffers = {name: zeros_like(reference, dtype) for name in self._buffer_names}

    def _prepare(self, state: Any) -> Tuple[Any, ...]:
        """Return the scratch buffers for ``state``, allocating them on first use."""
        if not self._buffers:
            self.adjust_size(state)
        elif get_config().check_sizes:
            for name, buf in self._buffers.items():
                if not same_layout(buf, state):
                    raise PreconditionError(
                        f"{type(self).__name__}: buffer '{name}' has layout {_layout(buf)} "
                        f"but state has {_layout(state)}; call adjust_size() after resizing the state"
                    )
        return tuple(self._buffers[name] for name in self._buffer_names)

    def do_step(self, system: SystemFn, state: Any, t: float, dt: float) -> None:
        raise NotImplementedError
