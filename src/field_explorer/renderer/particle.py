# MIT License (see LICENSE)
"""
Test particle drawing.

advance_particle() is the per-frame entry point for hosts that keep the
particle state themselves: it steps the integrator and draws the trail
and the particle on top of the already rendered frame.
"""
from __future__ import annotations
from typing import Sequence

from ..constants import PARTICLE_RADIUS
from ..core.integrator import step_particle
from ..types import Charge, TestParticleState
from .surface import StrokeStyle, Surface

TRAIL_STYLE = StrokeStyle("rgba(251, 191, 36, 0.65)", width=1.2)
PARTICLE_COLOR = "#fbbf24"


def draw_particle(surface: Surface, state: TestParticleState) -> None:
    """Draw the trail as a polyline and the particle as a filled dot."""
    if state.trail:
        surface.polyline(state.trail_array(), TRAIL_STYLE)
    surface.circle((state.x, state.y), PARTICLE_RADIUS, fill=PARTICLE_COLOR)


def advance_particle(
    surface: Surface,
    size: tuple[float, float],
    charges: Sequence[Charge],
    state: TestParticleState,
    dt: float,
) -> TestParticleState:
    """
    Step the particle one frame and draw it.

    Args:
        surface: Drawing target.
        size: Canvas (width, height).
        charges: Charge snapshot.
        state: Particle state from the previous frame.
        dt: Clamped frame delta.

    Returns:
        The updated state, to be handed back on the next frame.
    """
    width, height = size
    new_state = step_particle(state, charges, width, height, dt)
    draw_particle(surface, new_state)
    return new_state
