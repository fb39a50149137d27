# MIT License (see LICENSE)
"""
Transverse electromagnetic wave rendering.

Two sinusoids share the wavelength and a clock-driven phase:

    E: y = cy + A · sin(2πx/λ + φ)
    B: y = cy + 0.3A · cos(2πx/λ + φ)

with φ = time_ms · 0.002 · anim_speed. B is drawn at reduced amplitude
and a quarter period out of phase so both curves stay readable. Stateless.
"""
from __future__ import annotations
import math

import numpy as np

from ..types import WaveState
from .surface import StrokeStyle, Surface

SAMPLE_STEP = 2.0
B_AMPLITUDE_RATIO = 0.3

E_STYLE = StrokeStyle("#ef4444", width=3.0)
B_STYLE = StrokeStyle("#3b82f6", width=3.0, dash=(10.0, 5.0))
PROPAGATION_STYLE = StrokeStyle("#fbbf24", width=2.0)


def wave_phase(time_ms: float, anim_speed: float) -> float:
    return time_ms * 0.002 * anim_speed


def wave_curves(
    wave: WaveState,
    width: float,
    height: float,
    time_ms: float,
    anim_speed: float,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Sample the E and B curves at x = 0, 2, 4, ... < width.

    Returns:
        (e_points, b_points), each of shape [N, 2].
    """
    cy = height / 2
    xs = np.arange(0.0, width, SAMPLE_STEP)
    theta = xs / wave.wavelength * 2 * math.pi + wave_phase(time_ms, anim_speed)
    e = np.column_stack((xs, cy + np.sin(theta) * wave.amplitude))
    b = np.column_stack((xs, cy + np.cos(theta) * wave.amplitude * B_AMPLITUDE_RATIO))
    return e, b


def draw_em_wave(
    surface: Surface,
    width: float,
    height: float,
    time_ms: float,
    anim_speed: float,
    wave: WaveState,
) -> None:
    """Draw both curves, their labels and the propagation arrow."""
    cy = height / 2
    amp = wave.amplitude
    e, b = wave_curves(wave, width, height, time_ms, anim_speed)
    surface.polyline(e, E_STYLE)
    surface.polyline(b, B_STYLE)

    surface.text((20, cy - amp - 20), "E (Electric)", "#ef4444", font="16px Exo 2")
    surface.text((20, cy + amp + 30), "B (Magnetic)", "#3b82f6", font="16px Exo 2")

    surface.text((width - 170, cy - 18), "Propagation", "#fbbf24", font="bold 16px Orbitron")
    surface.polyline(((width - 165, cy), (width - 85, cy)), PROPAGATION_STYLE)
    surface.polyline(((width - 95, cy - 7), (width - 85, cy), (width - 95, cy + 7)), PROPAGATION_STYLE)
