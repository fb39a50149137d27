# MIT License (see LICENSE)
"""
field_explorer - A 2D electromagnetism visualization engine.

This package turns point charges, a bar magnet and a wave source into
drawable field structure: field lines, vector glyphs, potentials, a
procedural magnetic pattern, a transverse EM wave and a test particle
moving under the electrostatic force.

Main entry points:
    - field / potential: Coulomb superposition queries.
    - render_frame: Draw one animation frame for the active mode.
    - advance_particle: Step and draw the test particle.
    - AnimationDriver: Reference per-frame loop.
    - Charge, MagnetState, WaveState, TestParticleState: Input state.

Submodules:
    - core: Field model, tracing, sampling, particle integration.
    - renderer: Drawing surfaces and per-layer renderers.
    - formatting: Readout strings.

Example:
    from field_explorer import Charge, RecordingSurface, render_frame, field

    charges = [Charge("a", 300, 320, polarity=1), Charge("b", 660, 320, polarity=-1)]
    print(field(charges, 480, 320))
    render_frame(RecordingSurface(), (960, 640), 0.0, "electric", charges)
"""
from .types import (
    Charge,
    FieldSample,
    MagnetState,
    ProbeSample,
    SimulationMode,
    TestParticleState,
    WaveState,
    make_dipole,
)
from .core import field, potential, probe, net_charge_micro_coulombs, contains_point
from .formatting import format_field_strength, format_potential, format_net_charge
from .renderer import (
    Surface,
    NullSurface,
    RecordingSurface,
    DebugSurface,
    render_frame,
    advance_particle,
)
from .driver import AnimationDriver, FrameSnapshot

__all__ = [
    # State
    "Charge",
    "FieldSample",
    "MagnetState",
    "ProbeSample",
    "SimulationMode",
    "TestParticleState",
    "WaveState",
    "make_dipole",
    # Queries
    "field",
    "potential",
    "probe",
    "net_charge_micro_coulombs",
    "contains_point",
    # Formatting
    "format_field_strength",
    "format_potential",
    "format_net_charge",
    # Rendering
    "Surface",
    "NullSurface",
    "RecordingSurface",
    "DebugSurface",
    "render_frame",
    "advance_particle",
    # Loop
    "AnimationDriver",
    "FrameSnapshot",
]
