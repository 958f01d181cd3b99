# Busy-wait timing and the shared simulation clock
import time
from typing import Tuple

USECS_PER_SEC = 1_000_000

Timestamp = Tuple[int, int]


def timestamp() -> Timestamp:
    """Current wall-clock time as (seconds, microseconds)."""
    now = time.time()
    secs = int(now)
    return secs, int((now - secs) * USECS_PER_SEC)


def time_difference(start: Timestamp, end: Timestamp) -> Timestamp:
    secs = end[0] - start[0]
    usecs = end[1] - start[1]
    if usecs < 0:
        usecs += USECS_PER_SEC
        secs -= 1
    if usecs >= USECS_PER_SEC:
        usecs -= USECS_PER_SEC
        secs += 1
    return secs, usecs


def wait_time(start: Timestamp) -> int:
    """Microseconds elapsed since start."""
    secs, usecs = time_difference(start, timestamp())
    return secs * USECS_PER_SEC + usecs


def elapse(cost: float, ms_per_cycle: float = 1.0) -> float:
    """Spin for cost * ms_per_cycle milliseconds and return the measured seconds.

    Polls the wall clock instead of sleeping. Holds no state, so I/O tasks can
    call it from their own thread.
    """
    interval = cost * ms_per_cycle * 1000
    start = timestamp()
    while wait_time(start) < interval:
        pass
    secs, usecs = time_difference(start, timestamp())
    return max(0.0, secs + usecs / USECS_PER_SEC)


class Timer:
    """Simulated delay: scales every requested wait by `scale`.

    scale=0 skips the wait entirely; the returned delta is still measured.
    """

    def __init__(self, scale: float = 1.0):
        if scale < 0:
            raise ValueError(f"timer scale must be non-negative, got {scale}")
        self.scale = scale

    def elapse(self, cost: float, ms_per_cycle: float) -> float:
        return elapse(cost, ms_per_cycle * self.scale)


class SimulationClock:
    def __init__(self):
        self.elapsed = 0.0

    def advance(self, delta: float) -> float:
        if delta < 0:
            raise ValueError(f"clock cannot move backwards (delta={delta})")
        self.elapsed += delta
        return self.elapsed

    def stamp(self) -> str:
        return f"{self.elapsed:.6f}"

    def __repr__(self):
        return f"SimulationClock({self.stamp()})"
