# MIT License (see LICENSE)
"""
Frame timing instrumentation.

Measures how long each part of a frame (scene render, particle step)
takes and how often it exceeds the frame budget.

Example:
    profiler = FrameProfiler()
    with profiler.section("render"):
        render_frame(surface, size, t, mode, charges)
    print(profiler.stats.summary())
"""
from __future__ import annotations
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

from .constants import NOMINAL_FRAME_MS


@dataclass
class FrameStats:
    """
    Timing samples per named section.

    Attributes:
        budget_ms: Frame budget used for the over-budget count.
        samples: Raw durations in seconds, by section name.
    """
    budget_ms: float = NOMINAL_FRAME_MS
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        """Record a duration (seconds) for a section."""
        self.samples.setdefault(name, []).append(dt)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per-section statistics.

        Returns:
            Dict mapping section name to:
            - 'n': sample count
            - 'mean_ms': average time in milliseconds
            - 'max_ms': maximum time in milliseconds
            - 'over_budget': samples slower than budget_ms
        """
        out = {}
        for name, times in self.samples.items():
            ms = [1e3 * t for t in times]
            out[name] = {
                "n": len(ms),
                "mean_ms": sum(ms) / len(ms),
                "max_ms": max(ms),
                "over_budget": sum(1 for t in ms if t > self.budget_ms),
            }
        return out

    def clear(self) -> None:
        self.samples.clear()


class FrameProfiler:
    """Context-manager based timer feeding a FrameStats."""

    def __init__(self, budget_ms: float = NOMINAL_FRAME_MS) -> None:
        self.stats = FrameStats(budget_ms=budget_ms)

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block under `name`."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)
