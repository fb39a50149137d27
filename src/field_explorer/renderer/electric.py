# MIT License (see LICENSE)
"""
Electric overlays: field lines, vector glyphs and charge glyphs.
"""
from __future__ import annotations
import math
from typing import Sequence

from ..core.sampler import sample_vector_field
from ..core.tracer import trace_field_lines
from ..types import Charge
from .surface import RadialGradient, StrokeStyle, Surface

FIELD_LINE_STYLE = StrokeStyle("rgba(147, 197, 253, 0.6)", width=1.5)
SELECTION_STYLE = StrokeStyle("#fbbf24", width=3.0, dash=(5.0, 5.0))

# (glow colour, core gradient stops) by polarity
_POSITIVE = ("239, 68, 68", ("#fca5a5", "#ef4444", "#b91c1c"))
_NEGATIVE = ("59, 130, 246", ("#93c5fd", "#3b82f6", "#1d4ed8"))


def draw_field_lines(
    surface: Surface,
    width: float,
    height: float,
    charges: Sequence[Charge],
    density: int,
) -> int:
    """Trace and stroke the field line pattern. Returns the number of lines."""
    lines = trace_field_lines(charges, width, height, density)
    for line in lines:
        surface.polyline(line.points, FIELD_LINE_STYLE)
    return len(lines)


def draw_vector_field(
    surface: Surface,
    width: float,
    height: float,
    charges: Sequence[Charge],
    time_ms: float,
    anim_speed: float,
) -> int:
    """Draw arrow glyphs on the sampling grid. Returns the number of arrows."""
    arrows = sample_vector_field(charges, width, height, time_ms, anim_speed)
    for a in arrows:
        color = a.color
        surface.polyline((a.tail, a.tip), StrokeStyle(color, width=1.0))
        surface.polygon(a.head, color)
    return len(arrows)


def pulse_factor(charge: Charge, time_ms: float, anim_speed: float) -> float:
    return math.sin(time_ms * 0.003 * anim_speed + charge.pulse_phase) * 0.2 + 1.0


def draw_charge(
    surface: Surface,
    charge: Charge,
    selected: bool,
    time_ms: float,
    anim_speed: float,
) -> None:
    """
    Draw one charge: pulsing glow, shaded core, sign label and, when
    selected, a dashed ring.
    """
    glow_rgb, core_stops = _POSITIVE if charge.polarity > 0 else _NEGATIVE
    center = (charge.x, charge.y)
    glow_r = charge.radius * 3 * pulse_factor(charge, time_ms, anim_speed)

    glow = RadialGradient(
        inner_center=center,
        inner_radius=0.0,
        outer_center=center,
        outer_radius=glow_r,
        stops=(
            (0.0, f"rgba({glow_rgb}, 0.8)"),
            (0.5, f"rgba({glow_rgb}, 0.3)"),
            (1.0, f"rgba({glow_rgb}, 0)"),
        ),
    )
    surface.circle(center, glow_r, fill=glow)

    core = RadialGradient(
        inner_center=(charge.x - 5, charge.y - 5),
        inner_radius=0.0,
        outer_center=center,
        outer_radius=charge.radius,
        stops=tuple(zip((0.0, 0.5, 1.0), core_stops)),
    )
    surface.circle(center, charge.radius, fill=core)
    surface.text(center, "+" if charge.polarity > 0 else "-", "#fff", font="bold 24px Orbitron", align="center")

    if selected:
        surface.circle(center, charge.radius + 10, stroke=SELECTION_STYLE)
