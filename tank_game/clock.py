"""
Millisecond clocks for the simulation

Every timer in the game (spawn intervals, power-up expiry, invulnerability,
enemy cooldowns) is a timestamp comparison against one of these.
"""

from __future__ import annotations
import time


class MonotonicClock:
    """Wall clock backed by time.perf_counter, in milliseconds"""

    def __init__(self):
        self._origin = time.perf_counter()

    def now(self) -> float:
        return (time.perf_counter() - self._origin) * 1000.0


class ManualClock:
    """Clock that only moves when told to; used by tests and the headless env"""

    def __init__(self, start: float = 0.0):
        self._now = float(start)

    def now(self) -> float:
        return self._now

    def advance(self, ms: float) -> float:
        if ms < 0:
            raise ValueError("clock cannot run backwards")
        self._now += ms
        return self._now

    def set(self, ms: float) -> None:
        if ms < self._now:
            raise ValueError("clock cannot run backwards")
        self._now = float(ms)
