# MIT License (see LICENSE)
"""
Numeric core of the field engine.

This subpackage provides:
    - Field model: Coulomb superposition for field and potential.
    - Geometry: point-in-charge hit testing.
    - Tracer: field line integration.
    - Sampler: vector glyph grid sampling.
    - Integrator: test particle stepping and lifecycle.
    - Clock: clamped frame deltas.

Typical usage:
    from field_explorer.core import field, trace_field_lines

    sample = field(charges, 120.0, 80.0)
    lines = trace_field_lines(charges, width=960, height=640, density=12)
"""
from .field import field, potential, field_grid, probe, net_charge_micro_coulombs
from .geometry import contains_point, charge_at, magnet_contains
from .tracer import FieldLine, Termination, plan_seeds, trace_line, trace_field_lines
from .sampler import Arrow, arrow_length, sample_vector_field
from .integrator import ParticleIntegrator, ParticlePhase, step_particle
from .clock import FrameClock, clamp_frame_delta

__all__ = [
    # Field model
    "field",
    "potential",
    "field_grid",
    "probe",
    "net_charge_micro_coulombs",
    # Geometry
    "contains_point",
    "charge_at",
    "magnet_contains",
    # Field lines
    "FieldLine",
    "Termination",
    "plan_seeds",
    "trace_line",
    "trace_field_lines",
    # Vector glyphs
    "Arrow",
    "arrow_length",
    "sample_vector_field",
    # Particle
    "ParticleIntegrator",
    "ParticlePhase",
    "step_particle",
    # Clock
    "FrameClock",
    "clamp_frame_delta",
]
