# numint/observers.py
"""
Observers invoked by the integration drivers after every step.

The set is closed: a no-op ``Observer``, a ``DecimatingObserver`` that only
fires on every Nth call, and a ``PrintObserver`` that writes the decimated
samples as ``"<time> <state>"`` lines.
"""

from __future__ import annotations
from typing import Any, Optional, TextIO
import sys


class Observer:
    """Observer that does nothing."""

    def __call__(self, state: Any, time: float) -> None:
        pass


class DecimatingObserver(Observer):
    """
    Observer that only fires on every ``decimation``-th invocation.

    Parameters
    ----------
    decimation : int
        Fire on invocations N, 2N, 3N, ...; 0 fires on every invocation.
    """

    def __init__(self, decimation: int = 1):
        if decimation < 0:
            raise ValueError(f"decimation must be non-negative, got {decimation}")
        self.decimation = decimation
        self._count = 0

    def observe(self) -> bool:
        """Advance the decimation counter; True when this invocation fires."""
        if self.decimation == 0:
            return True
        self._count += 1
        if self._count == self.decimation:
            self._count = 0
            return True
        return False

    def __call__(self, state: Any, time: float) -> None:
        self.observe()


class PrintObserver(DecimatingObserver):
    """
    Observer that prints ``"<time> <state>"`` lines.

    Parameters
    ----------
    decimation : int
        See ``DecimatingObserver``; defaults to printing every invocation.
    stream : TextIO, optional
        Output sink, defaults to sys.stdout at call time.
    """

    def __init__(self, decimation: int = 0, stream: Optional[TextIO] = None):
        super().__init__(decimation)
        self.stream = stream

    def __call__(self, state: Any, time: float) -> None:
        if self.observe():
            out = self.stream if self.stream is not None else sys.stdout
            out.write(f"{time} {state}\n")
