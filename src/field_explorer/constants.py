# MIT License (see LICENSE)
"""
Constants used throughout the field engine.

Units are illustrative "scene units" (canvas pixels) for distances and
milliseconds for the animation clock. Only the charge magnitudes are in
SI (coulombs); the Coulomb constant is fixed at a rounded value so the
readouts stay stable rather than precise.
"""
from __future__ import annotations

# Coulomb's constant k = 1/(4πε₀), rounded for display purposes.
K_COULOMB: float = 8.99e9

# A charge closer than this to the query point contributes nothing to the
# field or potential. Prevents blow-up near and inside a charge body.
EXCLUSION_RADIUS: float = 10.0

# Field magnitudes below this are treated as a null region.
NEAR_ZERO_FIELD: float = 1e-10

# -----------------------------------------------------------------------------
# Field line tracing
# -----------------------------------------------------------------------------
LINE_SEED_RADIUS: float = 30.0           # ring around positive charges
LINE_SEED_RADIUS_INWARD: float = 200.0   # ring used when no positive charge exists
LINE_STEP: float = 5.0
LINE_MAX_STEPS: int = 500
DEFAULT_LINE_DENSITY: int = 12

# -----------------------------------------------------------------------------
# Vector field glyphs
# -----------------------------------------------------------------------------
VECTOR_GRID_SPACING: float = 60.0
VECTOR_MAX_LENGTH: float = 15.0
VECTOR_LOG_SCALE: float = 3.0
ARROW_HEAD_LENGTH: float = 5.0

# -----------------------------------------------------------------------------
# Test particle
# -----------------------------------------------------------------------------
PARTICLE_ACCEL_SCALE: float = 8e-10   # field units -> visual acceleration
PARTICLE_DAMPING: float = 0.994
PARTICLE_MARGIN: float = 10.0
PARTICLE_TRAIL_CAPACITY: int = 120
PARTICLE_SPAWN_OFFSET: tuple[float, float] = (80.0, -40.0)
PARTICLE_RADIUS: float = 5.0

# -----------------------------------------------------------------------------
# Frame clock
# -----------------------------------------------------------------------------
NOMINAL_FRAME_MS: float = 16.67
MIN_FRAME_DELTA: float = 0.4
MAX_FRAME_DELTA: float = 1.8

# -----------------------------------------------------------------------------
# Charges (defaults used by the host when placing new charges)
# -----------------------------------------------------------------------------
DEFAULT_CHARGE_MAGNITUDE: float = 1e-6
DEFAULT_CHARGE_RADIUS: float = 25.0
MIN_CHARGE_MICRO: float = 0.2
MAX_CHARGE_MICRO: float = 5.0
DIPOLE_SPACING: float = 42.0
MAGNET_PICK_RADIUS: float = 70.0
