# MIT License (see LICENSE)
"""
Test particle integration.

The test particle is a probe mass pushed around by the electrostatic field.
Each frame it takes one semi-implicit Euler step with velocity damping:

    a      = E(x) · PARTICLE_ACCEL_SCALE
    v(t+1) = (v(t) + a·dt) · PARTICLE_DAMPING
    x(t+1) = x(t) + v(t+1)·dt

dt is the clamped frame delta from the frame clock (≈1 for a nominal
frame). The step is fixed-size on purpose; there is no error control.

Boundary: a particle whose new position falls outside the canvas inset by
PARTICLE_MARGIN is moved back to the canvas centre. Velocity is kept and
the trail is not cleared, so the trail draws one segment across the
canvas at each respawn.

State is an immutable TestParticleState passed in and returned, so the
caller owns it between frames.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field as dc_field
from enum import Enum
from typing import Sequence

from ..constants import (
    PARTICLE_ACCEL_SCALE,
    PARTICLE_DAMPING,
    PARTICLE_MARGIN,
    PARTICLE_SPAWN_OFFSET,
    PARTICLE_TRAIL_CAPACITY,
)
from ..types import Charge, SimulationMode, TestParticleState
from .field import FieldFunction, field

logger = logging.getLogger(__name__)


def out_of_bounds(x: float, y: float, width: float, height: float, margin: float = PARTICLE_MARGIN) -> bool:
    """True if (x, y) lies outside the canvas inset by margin."""
    return x < margin or x > width - margin or y < margin or y > height - margin


def step_particle(
    state: TestParticleState,
    charges: Sequence[Charge],
    width: float,
    height: float,
    dt: float,
    field_fn: FieldFunction = field,
    accel_scale: float = PARTICLE_ACCEL_SCALE,
    damping: float = PARTICLE_DAMPING,
    trail_capacity: int = PARTICLE_TRAIL_CAPACITY,
) -> TestParticleState:
    """
    Advance the particle by one frame.

    Args:
        state: Current particle state (not modified).
        charges: Charge snapshot.
        width, height: Canvas size.
        dt: Clamped frame delta.
        field_fn: Field evaluator.
        accel_scale: Field-to-acceleration factor.
        damping: Per-step velocity multiplier (< 1).
        trail_capacity: Maximum trail length.

    Returns:
        The new state with the new position appended to the trail.
    """
    f = field_fn(charges, state.x, state.y)
    ax = f.ex * accel_scale
    ay = f.ey * accel_scale
    vx = (state.vx + ax * dt) * damping
    vy = (state.vy + ay * dt) * damping
    x = state.x + vx * dt
    y = state.y + vy * dt

    if out_of_bounds(x, y, width, height):
        logger.debug("particle left bounds at (%.1f, %.1f); respawning at centre", x, y)
        x = width * 0.5
        y = height * 0.5

    trail = (state.trail + ((x, y),))[-trail_capacity:]
    return TestParticleState(x=x, y=y, vx=vx, vy=vy, trail=trail)


class ParticlePhase(Enum):
    """Lifecycle phase of the managed particle."""
    INACTIVE = "inactive"
    ACTIVE = "active"


@dataclass
class ParticleIntegrator:
    """
    Owns the test particle across frames and applies the activation rules.

    The particle runs only when the feature is enabled, the mode shows the
    electric field and at least one charge exists. A fresh activation
    (empty trail) places it at an offset from the canvas centre. Leaving
    the eligible set parks it at the centre at rest with an empty trail.

    Attributes:
        state: The current opaque particle state.
        phase: INACTIVE or ACTIVE.
        spawn_offset: Offset from the canvas centre used on activation.
        field_fn: Field evaluator used for stepping.
    """
    state: TestParticleState = dc_field(default_factory=lambda: TestParticleState.at(100.0, 100.0))
    phase: ParticlePhase = ParticlePhase.INACTIVE
    spawn_offset: tuple[float, float] = PARTICLE_SPAWN_OFFSET
    field_fn: FieldFunction = field

    @staticmethod
    def eligible(enabled: bool, mode: SimulationMode, charges: Sequence[Charge]) -> bool:
        return enabled and mode.shows_electric and len(charges) > 0

    def reset(self, width: float, height: float) -> None:
        """Park the particle at the canvas centre: zero velocity, no trail."""
        self.state = TestParticleState.at(width * 0.5, height * 0.5)
        self.phase = ParticlePhase.INACTIVE

    def update(
        self,
        enabled: bool,
        mode: SimulationMode,
        charges: Sequence[Charge],
        width: float,
        height: float,
        dt: float,
    ) -> TestParticleState | None:
        """
        Apply the activation rules and, when active, advance one frame.

        Returns:
            The advanced state when active, otherwise None.
        """
        if not self.eligible(enabled, mode, charges):
            if self.state.trail:
                logger.info("test particle deactivated")
                self.reset(width, height)
            self.phase = ParticlePhase.INACTIVE
            return None

        if not self.state.trail:
            # fresh activation
            ox, oy = self.spawn_offset
            self.state = TestParticleState.at(width * 0.5 + ox, height * 0.5 + oy)
            logger.info("test particle activated at (%.1f, %.1f)", self.state.x, self.state.y)

        self.phase = ParticlePhase.ACTIVE
        self.state = step_particle(self.state, charges, width, height, dt, field_fn=self.field_fn)
        return self.state
