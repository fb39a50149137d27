# MIT License (see LICENSE)
"""
Procedural magnetic field rendering for a single bar magnet.

This is a stylised picture, not a field computation: concentric loops
around the magnet, spaced more tightly for stronger magnets and slowly
rotating with the animation clock plus the magnet's orientation. No
FieldModel queries happen here.
"""
from __future__ import annotations
import math

import numpy as np

from ..types import MagnetState
from .surface import LinearGradient, StrokeStyle, Surface

FIRST_RING_RADIUS = 50.0
MIN_RING_SPACING = 35.0
POLE_LABEL_OFFSET = 52.0
BAR_SIZE = (80.0, 30.0)
LOOP_ANGLE_STEP = 0.1
LOOP_COLOR = "rgba(168, 85, 247, 0.5)"


def ring_spacing(strength: float) -> float:
    """Distance between loops; shrinks with strength down to a floor."""
    return max(MIN_RING_SPACING, 80.0 - strength * 10.0)


def ring_radii(magnet: MagnetState, width: float, height: float) -> np.ndarray:
    """Loop radii from FIRST_RING_RADIUS up to (excluding) max(width, height)."""
    return np.arange(FIRST_RING_RADIUS, max(width, height), ring_spacing(magnet.strength), dtype=np.float64)


def rotation_offset(magnet: MagnetState, time_ms: float, anim_speed: float) -> float:
    """Current loop rotation: clock-driven spin plus static orientation."""
    return (time_ms * 0.001 * anim_speed) % (2 * math.pi) + magnet.angle


def magnet_loops(
    magnet: MagnetState,
    width: float,
    height: float,
    time_ms: float,
    anim_speed: float,
) -> list[np.ndarray]:
    """
    Sample the loop polylines.

    Returns:
        One [N, 2] array per loop; loops are closed by the renderer.
    """
    off = rotation_offset(magnet, time_ms, anim_speed)
    angles = np.arange(0.0, 2 * math.pi, LOOP_ANGLE_STEP) + off
    cos_a, sin_a = np.cos(angles), np.sin(angles)
    return [
        np.column_stack((magnet.x + cos_a * r, magnet.y + sin_a * r))
        for r in ring_radii(magnet, width, height)
    ]


def pole_positions(magnet: MagnetState) -> tuple[tuple[float, float], tuple[float, float]]:
    """(north, south) label positions along the orientation vector."""
    nx, ny = math.cos(magnet.angle), math.sin(magnet.angle)
    d = POLE_LABEL_OFFSET
    return (magnet.x + nx * d, magnet.y + ny * d), (magnet.x - nx * d, magnet.y - ny * d)


def draw_magnetic_field(
    surface: Surface,
    width: float,
    height: float,
    time_ms: float,
    anim_speed: float,
    magnet: MagnetState,
) -> None:
    """Draw the loops, pole labels and the bar glyph."""
    style = StrokeStyle(LOOP_COLOR, width=max(1.4, magnet.strength * 0.9))
    for loop in magnet_loops(magnet, width, height, time_ms, anim_speed):
        surface.polyline(loop, style, closed=True)

    north, south = pole_positions(magnet)
    surface.text(north, "N", "#a855f7", font="bold 20px Orbitron", align="center")
    surface.text(south, "S", "#a855f7", font="bold 20px Orbitron", align="center")

    nx, ny = math.cos(magnet.angle), math.sin(magnet.angle)
    half = BAR_SIZE[0] / 2
    gradient = LinearGradient(
        start=(magnet.x - nx * half, magnet.y - ny * half),
        end=(magnet.x + nx * half, magnet.y + ny * half),
        stops=((0.0, "#ef4444"), (0.5, "#6b7280"), (1.0, "#3b82f6")),
    )
    surface.rect(
        (magnet.x, magnet.y), BAR_SIZE[0], BAR_SIZE[1], angle=magnet.angle,
        fill=gradient, stroke=StrokeStyle("#fff", width=1.0),
    )
