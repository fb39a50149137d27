# MIT License (see LICENSE)
"""
Frame delta clamping.

The particle integrator takes one fixed step per frame, scaled by a frame
delta measured in nominal frame periods. The delta is clamped to
[MIN_FRAME_DELTA, MAX_FRAME_DELTA] so a long stall (hidden tab, debugger)
cannot produce a huge single-step displacement. This is a clamp, not a
variable-step scheme.
"""
from __future__ import annotations
from dataclasses import dataclass

from ..constants import MAX_FRAME_DELTA, MIN_FRAME_DELTA, NOMINAL_FRAME_MS
from ..util import clamp


def clamp_frame_delta(
    now_ms: float,
    prev_ms: float | None,
    nominal_ms: float = NOMINAL_FRAME_MS,
    lo: float = MIN_FRAME_DELTA,
    hi: float = MAX_FRAME_DELTA,
) -> float:
    """
    Convert elapsed wall time to a clamped frame delta.

    The first frame (no previous timestamp) counts as exactly one nominal
    frame.
    """
    if prev_ms is None:
        raw = 1.0
    else:
        raw = (now_ms - prev_ms) / nominal_ms
    return clamp(raw, lo, hi)


@dataclass
class FrameClock:
    """Remembers the previous frame timestamp and yields clamped deltas."""
    nominal_ms: float = NOMINAL_FRAME_MS
    min_delta: float = MIN_FRAME_DELTA
    max_delta: float = MAX_FRAME_DELTA
    prev_ms: float | None = None

    def tick(self, now_ms: float) -> float:
        dt = clamp_frame_delta(now_ms, self.prev_ms, self.nominal_ms, self.min_delta, self.max_delta)
        self.prev_ms = now_ms
        return dt

    def reset(self) -> None:
        self.prev_ms = None
