"""
Cumulative elapsed-time stopwatch.

The basic operations are those of a hand-held stopwatch: start, stop and
reset.  Elapsed time accumulates across every start/stop interval since the
last reset, so the time spent *between* a ``stop()`` and the next
``start()`` is excluded from the total::

    sw = Stopwatch()
    sw.start()
    block_1()
    sw.stop()
    block_2()          # not measured
    sw.start()
    block_3()
    sw.stop()
    total_ms = sw.elapsed_millis()

Times are kept as integer nanoseconds read from :func:`time.perf_counter_ns`.
"""

from __future__ import annotations

import time
from typing import Callable, Optional

NANOS_PER_MILLI = 1_000_000
NANOS_PER_SECOND = 1_000_000_000


class Stopwatch:
    """Accumulates elapsed wall-clock time over several start/stop intervals.

    Parameters
    ----------
    clock : callable, optional
        Zero-argument callable returning a monotonic timestamp in integer
        nanoseconds.  Defaults to :func:`time.perf_counter_ns`.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        self._clock = clock if clock is not None else time.perf_counter_ns
        self._stopped = True
        self._start = 0
        self._elapsed = 0

    @property
    def is_stopped(self) -> bool:
        """True if and only if the stopwatch is not currently running."""
        return self._stopped

    def start(self) -> None:
        """Start timing a new interval.  No effect if already running."""
        if self._stopped:
            self._start = self._clock()
            self._stopped = False

    def stop(self) -> None:
        """Close the current interval and add it to the total.

        No effect if already stopped.
        """
        if not self._stopped:
            self._elapsed += self._clock() - self._start
            self._stopped = True

    def reset(self) -> None:
        """Stop the stopwatch and zero the accumulated time."""
        self.stop()
        self._elapsed = 0

    def elapsed_nanos(self) -> int:
        """Total elapsed time in nanoseconds.

        While running, the in-flight interval is included but not committed.
        """
        if self._stopped:
            return self._elapsed
        return self._clock() - self._start + self._elapsed

    def elapsed_millis(self) -> int:
        return self.elapsed_nanos() // NANOS_PER_MILLI

    def elapsed_seconds(self) -> float:
        return self.elapsed_nanos() / NANOS_PER_SECOND

    # -- context manager ---------------------------------------------------

    def __enter__(self) -> "Stopwatch":
        self.start()
        return self

    def __exit__(self, *args) -> None:
        self.stop()

    def __repr__(self) -> str:
        state = "stopped" if self._stopped else "running"
        return f"Stopwatch({state}, elapsed_ns={self.elapsed_nanos()})"
