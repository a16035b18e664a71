"""
timing.py - Running-time measurements for primitive operations

Sweeps an array size from ``STEP`` to ``MAX`` and, at each size, measures the
wall-clock cost of one category of primitive operation:

    1. Array construction - allocating a zero-filled array
    2. Array access       - reading elements at random indices
    3. Arithmetic         - element-wise addition of two arrays
    4. Logic              - element-wise minimum via an explicit comparison

Each category writes one CSV file with a header row and one row per size.
Only the operation itself sits inside the stopwatch; operand generation and
bookkeeping happen outside the timed region.  The stopwatch is reset between
sizes so every row reflects a single size.

Measurements are raw: there is no warm-up, no repetition and no outlier
rejection.  Loops run element by element in Python over numpy ``int32``
arrays so that the per-element cost is what gets recorded.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, Optional, Sequence, Tuple

import numpy as np

from primitive_timing.core.csv_writer import CSVWriter
from primitive_timing.core.stopwatch import Stopwatch

logger = logging.getLogger(__name__)

# step size between tested sizes of arrays
STEP = 10_000
# maximum array size to consider
MAX = 1_000_000
# random reads per size in the access routine
NUM_ACCESSES = 100

INT32_MIN = int(np.iinfo(np.int32).min)
INT32_MAX = int(np.iinfo(np.int32).max)

Row = Tuple[int, ...]


def sizes(step: int = STEP, max_size: int = MAX) -> Iterator[int]:
    """Yield ``step, 2*step, ...`` up to and including ``max_size``."""
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    if max_size < step:
        raise ValueError(f"max_size ({max_size}) is smaller than step ({step})")
    yield from range(step, max_size + 1, step)


# ---------------------------------------------------------------------------
# Per-size measurements
# ---------------------------------------------------------------------------

def measure_array_construction(size: int, stopwatch: Stopwatch) -> Row:
    """Time the allocation of one zero-filled array.

    Returns ``(size, elapsed_ns)``.
    """
    stopwatch.start()
    arr = np.zeros(size, dtype=np.int32)
    stopwatch.stop()
    del arr

    row = (size, stopwatch.elapsed_nanos())
    stopwatch.reset()
    return row


def measure_array_access(size: int, rng: np.random.Generator, stopwatch: Stopwatch) -> Row:
    """Time ``NUM_ACCESSES`` reads at random indices of a fresh array.

    Index generation is outside the timed region.  Returns
    ``(size, last_index, elapsed_ns // NUM_ACCESSES)``; only the final
    sampled index is reported.
    """
    arr = np.zeros(size, dtype=np.int32)
    index = 0

    for _ in range(NUM_ACCESSES):
        index = int(rng.integers(size))

        stopwatch.start()
        arr[index]
        stopwatch.stop()

    row = (size, index, stopwatch.elapsed_nanos() // NUM_ACCESSES)
    stopwatch.reset()
    return row


def measure_arithmetic(size: int, rng: np.random.Generator, stopwatch: Stopwatch) -> Row:
    """Time the element-wise sum of two arrays of random digits.

    The first operand array is drawn before the second.  Returns
    ``(size, total_ns, total_ns // size, sums[0])``.
    """
    arr = rng.integers(0, 10, size=size, dtype=np.int32)
    arr1 = rng.integers(0, 10, size=size, dtype=np.int32)
    arr_sum = np.empty(size, dtype=np.int32)

    stopwatch.start()
    for i in range(size):
        arr_sum[i] = arr[i] + arr1[i]
    stopwatch.stop()

    total = stopwatch.elapsed_nanos()
    row = (size, total, total // size, int(arr_sum[0]))
    stopwatch.reset()
    return row


def measure_logic(size: int, rng: np.random.Generator, stopwatch: Stopwatch) -> Row:
    """Time the element-wise minimum of two arrays of random 32-bit integers.

    The minimum is an explicit ``if``/``else`` rather than ``min`` or
    ``np.minimum``.  Returns ``(size, total_ns, total_ns // size, mins[0])``.
    """
    arr = rng.integers(INT32_MIN, INT32_MAX, size=size, dtype=np.int32, endpoint=True)
    arr1 = rng.integers(INT32_MIN, INT32_MAX, size=size, dtype=np.int32, endpoint=True)
    arr_min = np.empty(size, dtype=np.int32)

    stopwatch.start()
    for i in range(size):
        if arr[i] < arr1[i]:
            arr_min[i] = arr[i]
        else:
            arr_min[i] = arr1[i]
    stopwatch.stop()

    total = stopwatch.elapsed_nanos()
    row = (size, total, total // size, int(arr_min[0]))
    stopwatch.reset()
    return row


# ---------------------------------------------------------------------------
# Routine registry
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Routine:
    """One timing routine: where it writes and how it measures a size."""
    name: str
    filename: str
    header: Tuple[str, ...]
    measure: Callable[..., Row]
    randomized: bool = True


ROUTINES: Dict[str, Routine] = {
    "construction": Routine(
        name="construction",
        filename="array-building-times.csv",
        header=("size", "time (ns)"),
        measure=measure_array_construction,
        randomized=False,
    ),
    "access": Routine(
        name="access",
        filename="array-access-times.csv",
        header=("array size", "index value", "time per access"),
        measure=measure_array_access,
    ),
    "arithmetic": Routine(
        name="arithmetic",
        filename="arithmetic-times.csv",
        header=("size", "time in total (ns)", "average time (ns)", "total for first value"),
        measure=measure_arithmetic,
    ),
    "logic": Routine(
        name="logic",
        filename="logic-times.csv",
        header=("size", "time in total (ns)", "average time (ns)", "min for first value"),
        measure=measure_logic,
    ),
}


def run_routine(
    routine: Routine,
    output_dir: str = ".",
    *,
    rng: Optional[np.random.Generator] = None,
    step: int = STEP,
    max_size: int = MAX,
) -> str:
    """Sweep all sizes for *routine* and write its CSV file.

    Returns the path of the written file.  The file is closed on every exit
    path; an ``OSError`` while creating, writing or closing it propagates.
    """
    if rng is None and routine.randomized:
        rng = np.random.default_rng()
    size_range = list(sizes(step, max_size))
    path = os.path.join(output_dir, routine.filename)
    stopwatch = Stopwatch()

    logger.info("Timing %s over %d sizes -> %s", routine.name, len(size_range), path)
    with CSVWriter(path) as csv:
        csv.add_row(*routine.header)
        for size in size_range:
            if routine.randomized:
                row = routine.measure(size, rng, stopwatch)
            else:
                row = routine.measure(size, stopwatch)
            logger.debug("%s size=%d row=%s", routine.name, size, row)
            csv.add_row(*row)
    return path


def time_array_construction(output_dir: str = ".", *, step: int = STEP, max_size: int = MAX) -> str:
    """Record array allocation times to ``array-building-times.csv``."""
    return run_routine(ROUTINES["construction"], output_dir, step=step, max_size=max_size)


def time_array_access(
    output_dir: str = ".",
    *,
    rng: Optional[np.random.Generator] = None,
    step: int = STEP,
    max_size: int = MAX,
) -> str:
    """Record average random-access times to ``array-access-times.csv``."""
    return run_routine(ROUTINES["access"], output_dir, rng=rng, step=step, max_size=max_size)


def time_arithmetic(
    output_dir: str = ".",
    *,
    rng: Optional[np.random.Generator] = None,
    step: int = STEP,
    max_size: int = MAX,
) -> str:
    """Record element-wise addition times to ``arithmetic-times.csv``."""
    return run_routine(ROUTINES["arithmetic"], output_dir, rng=rng, step=step, max_size=max_size)


def time_logic(
    output_dir: str = ".",
    *,
    rng: Optional[np.random.Generator] = None,
    step: int = STEP,
    max_size: int = MAX,
) -> str:
    """Record element-wise minimum times to ``logic-times.csv``."""
    return run_routine(ROUTINES["logic"], output_dir, rng=rng, step=step, max_size=max_size)


# ---------------------------------------------------------------------------
# Orchestration
# ---------------------------------------------------------------------------

def run_all(
    output_dir: str = ".",
    seed: Optional[int] = None,
    routines: Optional[Sequence[str]] = None,
    *,
    step: int = STEP,
    max_size: int = MAX,
) -> Dict[str, str]:
    """Run the selected routines in registry order.

    Each routine gets its own generator spawned from *seed* so that a seeded
    run is reproducible routine by routine.

    Returns
    -------
    dict
        Routine name -> path of the CSV file it wrote.
    """
    selected = list(ROUTINES) if routines is None else list(routines)
    unknown = [name for name in selected if name not in ROUTINES]
    if unknown:
        raise ValueError(f"unknown routine(s): {', '.join(unknown)}")

    os.makedirs(output_dir, exist_ok=True)
    children = np.random.SeedSequence(seed).spawn(len(ROUTINES))
    generators = {
        name: np.random.default_rng(child) for name, child in zip(ROUTINES, children)
    }

    written: Dict[str, str] = {}
    for name, routine in ROUTINES.items():
        if name not in selected:
            continue
        rng = generators[name] if routine.randomized else None
        written[name] = run_routine(routine, output_dir, rng=rng, step=step, max_size=max_size)
    return written
