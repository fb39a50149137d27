# MIT License (see LICENSE)
"""
Per-frame scene composition.

render_frame() clears the surface and draws the overlays for the active
mode in a fixed order:

    1. field lines
    2. vector glyphs (if enabled)
    3. charge glyphs
    4. magnetic loops
    5. wave

``combined`` draws the electric layers (1-3) and then the magnetic layer
(4). The wave (5) is exclusive to ``em-wave``. The composer does no
numeric work of its own.
"""
from __future__ import annotations
import logging
from enum import Enum
from typing import Sequence

from ..constants import DEFAULT_LINE_DENSITY
from ..types import Charge, MagnetState, SimulationMode, WaveState
from .electric import draw_charge, draw_field_lines, draw_vector_field
from .magnetic import draw_magnetic_field
from .surface import Surface
from .wave import draw_em_wave

logger = logging.getLogger(__name__)


class Layer(Enum):
    ELECTRIC = "electric"
    MAGNETIC = "magnetic"
    WAVE = "wave"


def layers_for_mode(mode: SimulationMode | str) -> tuple[Layer, ...]:
    """
    Overlays drawn for a mode, in draw order.

    Raises:
        ValueError: If mode is not a known SimulationMode.
    """
    mode = SimulationMode(mode)
    if mode is SimulationMode.ELECTRIC:
        return (Layer.ELECTRIC,)
    elif mode is SimulationMode.MAGNETIC:
        return (Layer.MAGNETIC,)
    elif mode is SimulationMode.COMBINED:
        return (Layer.ELECTRIC, Layer.MAGNETIC)
    elif mode is SimulationMode.EM_WAVE:
        return (Layer.WAVE,)
    raise ValueError(f"Unknown simulation mode: {mode}")


def render_frame(
    surface: Surface,
    size: tuple[float, float],
    time: float,
    mode: SimulationMode | str,
    charges: Sequence[Charge],
    selection: str | None = None,
    density: int = DEFAULT_LINE_DENSITY,
    anim_speed: float = 1.0,
    show_vectors: bool = True,
    magnet: MagnetState | None = None,
    wave: WaveState | None = None,
) -> None:
    """
    Draw one animation frame.

    Args:
        surface: Drawing target.
        size: Canvas (width, height).
        time: Animation clock in milliseconds.
        mode: Active simulation mode.
        charges: Charge snapshot.
        selection: Id of the selected charge, if any.
        density: Field lines per seed charge.
        anim_speed: Animation speed multiplier.
        show_vectors: Draw the vector glyph grid.
        magnet: Magnet parameters (defaults to MagnetState()).
        wave: Wave parameters (defaults to WaveState()).
    """
    width, height = size
    layers = layers_for_mode(mode)
    surface.clear(width, height)

    for layer in layers:
        if layer is Layer.ELECTRIC:
            n_lines = draw_field_lines(surface, width, height, charges, density) if charges else 0
            n_arrows = 0
            if show_vectors:
                n_arrows = draw_vector_field(surface, width, height, charges, time, anim_speed)
            for c in charges:
                draw_charge(surface, c, c.id == selection, time, anim_speed)
            logger.debug("electric layer: %d lines, %d arrows, %d charges", n_lines, n_arrows, len(charges))
        elif layer is Layer.MAGNETIC:
            draw_magnetic_field(surface, width, height, time, anim_speed, magnet or MagnetState())
        elif layer is Layer.WAVE:
            draw_em_wave(surface, width, height, time, anim_speed, wave or WaveState())
