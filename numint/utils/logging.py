# numint/utils/logging.py
"""
Logging utilities: timers, memory monitoring, and progress tracking.

Diagnostics are printed rather than routed through a logging framework;
they are only emitted when the integration drivers run with ``verbose`` or
``show_progress`` enabled.
"""

from __future__ import annotations
from typing import Optional, Dict, Any, Protocol, TextIO
import time
import sys
from contextlib import contextmanager

try:
    import psutil
    PSUTIL_AVAILABLE = True
except Exception:
    PSUTIL_AVAILABLE = False


class ProgressCallback(Protocol):
    """Protocol for progress callbacks used during long integrations."""
    def __call__(self, step: int, total: int, **kwargs: Any) -> None:
        """Called periodically to report progress."""
        ...


class Timer:
    """
    Simple timer for performance monitoring.

    Can be used as a context manager or manually started/stopped.
    Tracks wall time and, optionally, resident memory.
    """

    def __init__(self, name: str = "Timer", track_memory: bool = False, stream: Optional[TextIO] = None):
        self.name = name
        self.track_memory = track_memory
        self.stream = stream
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None
        self.start_memory: Optional[Dict[str, Any]] = None
        self.end_memory: Optional[Dict[str, Any]] = None

    def start(self) -> None:
        """Start the timer."""
        self.start_time = time.perf_counter()
        if self.track_memory:
            self.start_memory = memory_info()

    def stop(self) -> float:
        """Stop the timer and return elapsed time in seconds."""
        if self.start_time is None:
            raise RuntimeError("Timer not started")
        self.end_time = time.perf_counter()
        if self.track_memory:
            self.end_memory = memory_info()
        return self.elapsed

    @property
    def elapsed(self) -> float:
        """Get elapsed time in seconds."""
        if self.start_time is None:
            return 0.0
        end = self.end_time if self.end_time is not None else time.perf_counter()
        return end - self.start_time

    @property
    def memory_delta(self) -> Optional[Dict[str, Any]]:
        """Get memory usage delta (if tracking enabled)."""
        if not self.track_memory or self.start_memory is None or self.end_memory is None:
            return None

        delta = {}
        for key in self.start_memory:
            if key in self.end_memory and isinstance(self.start_memory[key], (int, float)):
                delta[key] = self.end_memory[key] - self.start_memory[key]
        return delta

    def __enter__(self) -> 'Timer':
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()
        self.report()

    def report(self) -> None:
        """Print a timing report."""
        out = self.stream if self.stream is not None else sys.stdout
        print(f"{self.name}: {self.elapsed:.6f}s", file=out)
        if self.track_memory and self.memory_delta is not None:
            delta = self.memory_delta
            if "rss_mb" in delta:
                print(f"  Memory delta: {delta['rss_mb']:.1f} MB", file=out)


@contextmanager
def timeit(name: str = "Operation", track_memory: bool = False, stream: Optional[TextIO] = None):
    """
    Context manager for timing operations.

    Example
    -------
    >>> with timeit("RK4 run"):
    ...     integrate_const(RK4Stepper(), system, x, 0.0, 1.0, 0.01)
    """
    timer = Timer(name, track_memory=track_memory, stream=stream)
    with timer:
        yield timer


def memory_info() -> Dict[str, Any]:
    """
    Get current process memory usage.

    Returns
    -------
    dict
        Keys 'rss_mb', 'vms_mb', 'available_mb', 'percent_used' when psutil
        is installed, otherwise {'rss_mb': 0.0}.
    """
    info: Dict[str, Any] = {}

    if PSUTIL_AVAILABLE:
        process = psutil.Process()
        mem = process.memory_info()
        info["rss_mb"] = mem.rss / 1024 / 1024
        info["vms_mb"] = mem.vms / 1024 / 1024

        vm = psutil.virtual_memory()
        info["available_mb"] = vm.available / 1024 / 1024
        info["percent_used"] = vm.percent
    else:
        info["rss_mb"] = 0.0

    return info


def create_progress_callback(
    name: str = "Progress",
    update_every: int = 100,
    show_rate: bool = True,
    stream: Optional[TextIO] = None,
) -> ProgressCallback:
    """
    Create a progress callback for long-running integrations.

    Parameters
    ----------
    name : str
        Name to show in progress messages
    update_every : int
        Update frequency (every N steps)
    show_rate : bool
        Whether to show processing rate
    stream : TextIO, optional
        Destination, defaults to sys.stdout

    Returns
    -------
    ProgressCallback
        Function that can be called with (step, total, **kwargs). ``total``
        may be 0 when the number of steps is not known in advance.
    """
    start_time = time.perf_counter()

    def callback(step: int, total: int, **kwargs: Any) -> None:
        if step % update_every != 0 and step != total:
            return

        out = stream if stream is not None else sys.stdout
        elapsed = time.perf_counter() - start_time

        if total > 0:
            percent = 100.0 * step / total
            msg = f"{name}: {step}/{total} ({percent:.1f}%)"
        else:
            msg = f"{name}: {step}"

        if show_rate and elapsed > 0:
            msg += f", {step / elapsed:.1f} steps/s"

        if kwargs:
            extra = ", ".join(f"{k}={v}" for k, v in kwargs.items())
            msg += f", {extra}"

        out.write(f"\r{msg}")
        out.flush()

        if step == total:
            out.write("\n")
            out.flush()

    return callback
