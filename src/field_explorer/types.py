# MIT License (see LICENSE)
"""
Core type definitions for the field engine.

Defines the entities the engine reads every frame:
- Charge: a point source with position, polarity and magnitude.
- MagnetState / WaveState: parameters of the procedural overlays.
- TestParticleState: the probe mass advanced by the particle integrator.
- FieldSample / ProbeSample: transient results of field queries.
- SimulationMode: which overlays a frame draws.

Snapshots are frozen. The engine never mutates its inputs; hosts build
new values (``with_position``, ``with_magnitude_micro``) when the user
drags a charge or moves a slider.
"""
from __future__ import annotations
import math
import uuid
from dataclasses import dataclass, field, replace
from enum import Enum

import numpy as np

from .constants import (
    DEFAULT_CHARGE_MAGNITUDE,
    DEFAULT_CHARGE_RADIUS,
    DIPOLE_SPACING,
    MAX_CHARGE_MICRO,
    MIN_CHARGE_MICRO,
)
from .util import clamp, f64


# =============================================================================
# Simulation mode
# =============================================================================

class SimulationMode(Enum):
    """
    Closed set of visualization modes.

    ``combined`` overlays the electric and magnetic renderings; the wave
    is only ever drawn on its own.
    """
    ELECTRIC = "electric"
    MAGNETIC = "magnetic"
    EM_WAVE = "em-wave"
    COMBINED = "combined"

    @property
    def shows_electric(self) -> bool:
        return self in (SimulationMode.ELECTRIC, SimulationMode.COMBINED)

    @property
    def shows_magnetic(self) -> bool:
        return self in (SimulationMode.MAGNETIC, SimulationMode.COMBINED)


# =============================================================================
# Sources
# =============================================================================

@dataclass(frozen=True)
class Charge:
    """
    A point charge.

    Attributes:
        id: Stable identifier assigned by the host.
        x, y: Center position in scene units.
        polarity: +1 or -1.
        magnitude: Charge magnitude in coulombs (> 0).
        radius: Visual radius, also the hit-test radius (> 0).
        pulse_phase: Phase offset (radians) of the glow animation.
    """
    id: str
    x: float
    y: float
    polarity: int = 1
    magnitude: float = DEFAULT_CHARGE_MAGNITUDE
    radius: float = DEFAULT_CHARGE_RADIUS
    pulse_phase: float = 0.0

    @property
    def q(self) -> float:
        """Signed charge in coulombs."""
        return self.polarity * self.magnitude

    @property
    def position(self) -> np.ndarray:
        return f64((self.x, self.y))

    @classmethod
    def create(
        cls,
        x: float,
        y: float,
        polarity: int = 1,
        magnitude: float = DEFAULT_CHARGE_MAGNITUDE,
        rng: np.random.Generator | None = None,
    ) -> "Charge":
        """
        Build a new charge with a fresh id and a random pulse phase.

        Args:
            x, y: Placement position.
            polarity: +1 or -1.
            magnitude: Coulombs.
            rng: Optional generator for a reproducible pulse phase.
        """
        rng = rng or np.random.default_rng()
        return cls(
            id=str(uuid.uuid4()),
            x=float(x),
            y=float(y),
            polarity=polarity,
            magnitude=magnitude,
            radius=DEFAULT_CHARGE_RADIUS,
            pulse_phase=float(rng.uniform(0.0, 2.0 * math.pi)),
        )

    def with_position(self, x: float, y: float) -> "Charge":
        return replace(self, x=float(x), y=float(y))

    def with_magnitude_micro(self, micro_coulombs: float) -> "Charge":
        """Return a copy with magnitude set in µC, clamped to the slider range."""
        uc = clamp(micro_coulombs, MIN_CHARGE_MICRO, MAX_CHARGE_MICRO)
        return replace(self, magnitude=uc * 1e-6)


def make_dipole(
    x: float,
    y: float,
    spacing: float = DIPOLE_SPACING,
    rng: np.random.Generator | None = None,
) -> tuple[Charge, Charge]:
    """Create a +/- pair centered on (x, y) along the x axis."""
    pos = Charge.create(x - spacing / 2, y, polarity=1, rng=rng)
    neg = Charge.create(x + spacing / 2, y, polarity=-1, rng=rng)
    return pos, neg


@dataclass(frozen=True)
class MagnetState:
    """
    Bar magnet drawn by the magnetic renderer.

    Attributes:
        x, y: Center position.
        strength: Field strength scalar (controls ring spacing and width).
        angle_deg: Orientation of the N pole, degrees.
    """
    x: float = 480.0
    y: float = 320.0
    strength: float = 4.0
    angle_deg: float = 0.0

    @property
    def angle(self) -> float:
        return math.radians(self.angle_deg)


@dataclass(frozen=True)
class WaveState:
    """Transverse wave parameters (scene units)."""
    amplitude: float = 80.0
    wavelength: float = 200.0


# =============================================================================
# Query results
# =============================================================================

@dataclass(frozen=True)
class FieldSample:
    """Electric field at a point: components and magnitude."""
    ex: float
    ey: float
    magnitude: float

    @property
    def direction_deg(self) -> float:
        return math.degrees(math.atan2(self.ey, self.ex))

    @property
    def vector(self) -> np.ndarray:
        return f64((self.ex, self.ey))


@dataclass(frozen=True)
class ProbeSample:
    """
    Hover readout for the field probe.

    ``screen_x``/``screen_y`` anchor the readout panel next to the pointer.
    """
    x: float
    y: float
    field_magnitude: float
    direction_deg: float
    screen_x: float
    screen_y: float
    visible: bool = True


# =============================================================================
# Test particle
# =============================================================================

@dataclass(frozen=True)
class TestParticleState:
    """
    Kinematic state of the test particle plus its recent positions.

    Attributes:
        x, y: Position.
        vx, vy: Velocity (scene units per nominal frame).
        trail: Recent positions, oldest first.
    """
    __test__ = False  # keep pytest from collecting this as a test class

    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    trail: tuple[tuple[float, float], ...] = field(default_factory=tuple)

    @classmethod
    def at(cls, x: float, y: float) -> "TestParticleState":
        """A particle at rest at (x, y) with no trail."""
        return cls(x=float(x), y=float(y))

    @property
    def speed(self) -> float:
        return math.hypot(self.vx, self.vy)

    def trail_array(self) -> np.ndarray:
        """Trail as a float64 array of shape (n, 2)."""
        if not self.trail:
            return np.zeros((0, 2), dtype=np.float64)
        return f64(self.trail)
