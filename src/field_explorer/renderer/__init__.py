# MIT License (see LICENSE)
"""
Rendering for the field engine.

This subpackage provides:
    - Surface: Abstract drawing backend (polylines, shapes, gradients, text).
    - NullSurface / RecordingSurface / DebugSurface: Built-in backends.
    - render_frame: Per-frame scene composition for the active mode.
    - advance_particle: Step and draw the test particle.

The matplotlib backend lives in ``field_explorer.renderer.mpl`` and is only
imported on demand (``plot`` extra).

Typical usage:
    from field_explorer.renderer import DebugSurface, render_frame

    surface = DebugSurface()
    render_frame(surface, (960, 640), 0.0, "electric", charges)
    surface.flush()
"""
from .surface import (
    Surface,
    NullSurface,
    RecordingSurface,
    DebugSurface,
    DrawCommand,
    LinearGradient,
    RadialGradient,
    StrokeStyle,
)
from .scene import render_frame, layers_for_mode, Layer
from .particle import advance_particle, draw_particle

__all__ = [
    # Surfaces
    "Surface",
    "NullSurface",
    "RecordingSurface",
    "DebugSurface",
    "DrawCommand",
    # Paints
    "LinearGradient",
    "RadialGradient",
    "StrokeStyle",
    # Composition
    "render_frame",
    "layers_for_mode",
    "Layer",
    "advance_particle",
    "draw_particle",
]
