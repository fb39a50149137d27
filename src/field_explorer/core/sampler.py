# MIT License (see LICENSE)
"""
Vector field sampling for arrow glyphs.

The field is sampled on a regular grid (VECTOR_GRID_SPACING) covering the
canvas. Arrow length follows a logarithmic compression law,

    length = min(VECTOR_MAX_LENGTH, log10(|E| + 1) * VECTOR_LOG_SCALE)

so near-field and far-field arrows stay visually comparable. Colour
intensity is nudged by a slowly cycling phase derived from the animation
clock; the vectors themselves do not depend on time.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..constants import (
    ARROW_HEAD_LENGTH,
    NEAR_ZERO_FIELD,
    VECTOR_GRID_SPACING,
    VECTOR_LOG_SCALE,
    VECTOR_MAX_LENGTH,
)
from ..types import Charge
from .field import field_grid


def arrow_length(magnitude: float) -> float:
    """Glyph length for a field magnitude (log-compressed, capped)."""
    return min(VECTOR_MAX_LENGTH, math.log10(magnitude + 1.0) * VECTOR_LOG_SCALE)


def flow_phase(time_ms: float, anim_speed: float) -> float:
    """Animation phase in [0, 1) that modulates arrow colour."""
    return (time_ms * 0.001 * anim_speed) % 1.0


def grid_coords(width: float, height: float, spacing: float = VECTOR_GRID_SPACING) -> tuple[np.ndarray, np.ndarray]:
    """Grid axes: spacing, 2*spacing, ... strictly below width/height."""
    xs = np.arange(spacing, width, spacing, dtype=np.float64)
    ys = np.arange(spacing, height, spacing, dtype=np.float64)
    return xs, ys


@dataclass(frozen=True)
class Arrow:
    """
    A single vector glyph centred on a grid point.

    Attributes:
        x, y: Grid point.
        dx, dy: Full arrow extent (unit field direction times length).
        magnitude: Field magnitude at the grid point.
        intensity: Colour intensity in [0, 255].
    """
    x: float
    y: float
    dx: float
    dy: float
    magnitude: float
    intensity: float

    @property
    def length(self) -> float:
        return math.hypot(self.dx, self.dy)

    @property
    def tail(self) -> tuple[float, float]:
        return (self.x - self.dx * 0.5, self.y - self.dy * 0.5)

    @property
    def tip(self) -> tuple[float, float]:
        return (self.x + self.dx * 0.5, self.y + self.dy * 0.5)

    @property
    def head(self) -> tuple[tuple[float, float], ...]:
        """Arrowhead triangle: tip plus two barbs at ±30° behind it."""
        tx, ty = self.tip
        a = math.atan2(self.dy, self.dx)
        h = ARROW_HEAD_LENGTH
        return (
            (tx, ty),
            (tx - h * math.cos(a - math.pi / 6), ty - h * math.sin(a - math.pi / 6)),
            (tx - h * math.cos(a + math.pi / 6), ty - h * math.sin(a + math.pi / 6)),
        )

    @property
    def color(self) -> str:
        i = self.intensity
        return f"rgba({100 + i:.0f}, {150 + i * 0.5:.0f}, 255, 0.6)"


def sample_vector_field(
    charges: Sequence[Charge],
    width: float,
    height: float,
    time_ms: float = 0.0,
    anim_speed: float = 1.0,
    spacing: float = VECTOR_GRID_SPACING,
) -> list[Arrow]:
    """
    Sample the field on the glyph grid.

    Grid points with |E| below NEAR_ZERO_FIELD are skipped.

    Args:
        charges: Charge snapshot.
        width, height: Canvas size.
        time_ms: Animation clock in milliseconds.
        anim_speed: User animation speed multiplier.
        spacing: Grid spacing.

    Returns:
        Arrows in column-major order (x outer, y inner).
    """
    xs, ys = grid_coords(width, height, spacing)
    if xs.size == 0 or ys.size == 0:
        return []
    gx, gy = np.meshgrid(xs, ys, indexing="ij")
    ex, ey, mag = field_grid(charges, gx, gy)
    flow = flow_phase(time_ms, anim_speed)

    arrows = []
    for i in range(gx.shape[0]):
        for j in range(gx.shape[1]):
            m = float(mag[i, j])
            if m < NEAR_ZERO_FIELD:
                continue
            s = arrow_length(m)
            arrows.append(Arrow(
                x=float(gx[i, j]),
                y=float(gy[i, j]),
                dx=float(ex[i, j]) / m * s,
                dy=float(ey[i, j]) / m * s,
                magnitude=m,
                intensity=min(255.0, m / 1e8 + flow * 20.0),
            ))
    return arrows
