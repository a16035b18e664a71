"""
===============================================================================
PRIMITIVE TIMING - Core Utilities
===============================================================================
Small reusable building blocks shared by the timing routines.

Modules:
    stopwatch   : Stopwatch accumulating elapsed nanoseconds over intervals
    csv_writer  : CSVWriter writing one comma-separated row at a time
===============================================================================
"""

from primitive_timing.core.csv_writer import CSVWriter
from primitive_timing.core.stopwatch import Stopwatch

__all__ = ["CSVWriter", "Stopwatch"]
