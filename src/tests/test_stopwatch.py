"""
===============================================================================
PRIMITIVE TIMING - Stopwatch Test Suite
===============================================================================
Tests for the cumulative Stopwatch: interval accumulation, idempotent
start/stop, reset, unit conversions and context-manager use.  A fake clock
drives every test so the expected totals are exact.
===============================================================================
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import time

import pytest

from primitive_timing.core.stopwatch import Stopwatch


class FakeClock:
    """Manually advanced nanosecond clock."""

    def __init__(self, now: int = 1_000):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ns: int) -> None:
        self.now += ns


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sw(clock):
    return Stopwatch(clock=clock)


# =============================================================================
# Accumulation
# =============================================================================

class TestAccumulation:

    def test_new_stopwatch_is_stopped_at_zero(self, sw):
        assert sw.is_stopped
        assert sw.elapsed_nanos() == 0

    def test_single_interval(self, sw, clock):
        sw.start()
        clock.advance(250)
        sw.stop()
        assert sw.elapsed_nanos() == 250

    def test_gaps_between_intervals_are_excluded(self, sw, clock):
        sw.start()
        clock.advance(100)
        sw.stop()
        clock.advance(10_000)
        sw.start()
        clock.advance(30)
        sw.stop()
        assert sw.elapsed_nanos() == 130

    @pytest.mark.parametrize("intervals", [[1], [5, 7, 11], [0, 0, 3], [10**9, 1]])
    def test_total_is_sum_of_completed_intervals(self, sw, clock, intervals):
        for length in intervals:
            sw.start()
            clock.advance(length)
            sw.stop()
            clock.advance(17)
        assert sw.elapsed_nanos() == sum(intervals)

    def test_running_query_includes_in_flight_interval(self, sw, clock):
        sw.start()
        clock.advance(40)
        sw.stop()
        sw.start()
        clock.advance(15)
        assert sw.elapsed_nanos() == 55
        assert not sw.is_stopped

    def test_running_query_does_not_commit(self, sw, clock):
        sw.start()
        clock.advance(15)
        sw.elapsed_nanos()
        clock.advance(5)
        sw.stop()
        assert sw.elapsed_nanos() == 20


# =============================================================================
# Idempotence and reset
# =============================================================================

class TestStateTransitions:

    def test_double_start_keeps_first_start_time(self, sw, clock):
        sw.start()
        clock.advance(10)
        sw.start()
        clock.advance(10)
        sw.stop()
        assert sw.elapsed_nanos() == 20

    def test_double_stop_is_noop(self, sw, clock):
        sw.start()
        clock.advance(10)
        sw.stop()
        clock.advance(99)
        sw.stop()
        assert sw.elapsed_nanos() == 10

    def test_stop_without_start_is_noop(self, sw):
        sw.stop()
        assert sw.elapsed_nanos() == 0
        assert sw.is_stopped

    def test_reset_when_stopped(self, sw, clock):
        sw.start()
        clock.advance(10)
        sw.stop()
        sw.reset()
        assert sw.elapsed_nanos() == 0

    def test_reset_while_running_stops(self, sw, clock):
        sw.start()
        clock.advance(10)
        sw.reset()
        assert sw.is_stopped
        clock.advance(10)
        assert sw.elapsed_nanos() == 0

    def test_accumulates_again_after_reset(self, sw, clock):
        sw.start()
        clock.advance(10)
        sw.reset()
        sw.start()
        clock.advance(3)
        sw.stop()
        assert sw.elapsed_nanos() == 3


# =============================================================================
# Units and context manager
# =============================================================================

class TestUnits:

    def test_millis_is_integer_division(self, sw, clock):
        sw.start()
        clock.advance(2_999_999)
        sw.stop()
        assert sw.elapsed_millis() == 2
        assert isinstance(sw.elapsed_millis(), int)

    def test_seconds_is_float_division(self, sw, clock):
        sw.start()
        clock.advance(1_500_000_000)
        sw.stop()
        assert sw.elapsed_seconds() == pytest.approx(1.5)

    def test_context_manager_times_block(self, sw, clock):
        with sw:
            clock.advance(42)
        assert sw.is_stopped
        assert sw.elapsed_nanos() == 42

    def test_context_manager_stops_on_exception(self, sw, clock):
        with pytest.raises(RuntimeError):
            with sw:
                clock.advance(8)
                raise RuntimeError("boom")
        assert sw.is_stopped
        assert sw.elapsed_nanos() == 8

    def test_default_clock_is_monotonic(self):
        sw = Stopwatch()
        sw.start()
        time.sleep(0.001)
        sw.stop()
        assert sw.elapsed_nanos() > 0
