# MIT License (see LICENSE)
"""
Reference animation loop.

AnimationDriver plays the host's role around the engine: it owns the frame
clock and the test particle, and once per tick

    1. converts the timestamp into a clamped frame delta,
    2. renders the scene for the current snapshot,
    3. advances and draws the test particle when it is eligible.

Everything runs synchronously on the caller's thread. cancel() stops a
running run() loop before its next tick; there is no partial-frame
cancellation.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .constants import DEFAULT_LINE_DENSITY
from .core.clock import FrameClock
from .core.integrator import ParticleIntegrator
from .profiler import FrameProfiler
from .renderer.particle import draw_particle
from .renderer.scene import render_frame
from .renderer.surface import Surface
from .types import Charge, MagnetState, SimulationMode, TestParticleState, WaveState
from .util import env_flag

logger = logging.getLogger(__name__)

PROFILE_ENV_VAR = "FIELD_EXPLORER_PROFILE"


@dataclass(frozen=True)
class FrameSnapshot:
    """
    Read-only inputs for one frame.

    Attributes:
        mode: Active simulation mode.
        charges: Charge snapshot.
        selection: Selected charge id.
        density: Field lines per seed charge.
        anim_speed: Animation speed multiplier.
        show_vectors: Draw the vector glyph grid.
        particle_enabled: Test particle toggle.
        magnet: Magnet parameters.
        wave: Wave parameters.
    """
    mode: SimulationMode = SimulationMode.ELECTRIC
    charges: tuple[Charge, ...] = ()
    selection: str | None = None
    density: int = DEFAULT_LINE_DENSITY
    anim_speed: float = 1.0
    show_vectors: bool = True
    particle_enabled: bool = False
    magnet: MagnetState = field(default_factory=MagnetState)
    wave: WaveState = field(default_factory=WaveState)


@dataclass
class AnimationDriver:
    """
    Drives render_frame and the particle integrator once per tick.

    Attributes:
        surface: Drawing target.
        size: Canvas (width, height).
        clock: Frame delta clamp.
        particle: Test particle owner.
        profiler: Optional frame profiler; enabled by default when
            FIELD_EXPLORER_PROFILE=1.
    """
    surface: Surface
    size: tuple[float, float] = (960.0, 640.0)
    clock: FrameClock = field(default_factory=FrameClock)
    particle: ParticleIntegrator = field(default_factory=ParticleIntegrator)
    profiler: FrameProfiler | None = field(
        default_factory=lambda: FrameProfiler() if env_flag(PROFILE_ENV_VAR) else None
    )
    frames: int = 0

    def __post_init__(self) -> None:
        self._cancelled = False

    @property
    def particle_state(self) -> TestParticleState:
        return self.particle.state

    def resize(self, width: float, height: float) -> None:
        self.size = (float(width), float(height))

    def cancel(self) -> None:
        """Stop run() before its next tick."""
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def _render(self, now_ms: float, snap: FrameSnapshot) -> None:
        render_frame(
            self.surface, self.size, now_ms, snap.mode, snap.charges,
            selection=snap.selection,
            density=snap.density,
            anim_speed=snap.anim_speed,
            show_vectors=snap.show_vectors,
            magnet=snap.magnet,
            wave=snap.wave,
        )

    def _advance(self, dt: float, snap: FrameSnapshot) -> None:
        width, height = self.size
        state = self.particle.update(snap.particle_enabled, snap.mode, snap.charges, width, height, dt)
        if state is not None:
            draw_particle(self.surface, state)

    def tick(self, now_ms: float, snapshot: FrameSnapshot) -> float:
        """
        Render one frame.

        Args:
            now_ms: Monotonic timestamp in milliseconds.
            snapshot: Inputs for this frame.

        Returns:
            The clamped frame delta handed to the integrator.
        """
        dt = self.clock.tick(now_ms)
        prof = self.profiler
        if prof:
            with prof.section("render"):
                self._render(now_ms, snapshot)
            with prof.section("particle"):
                self._advance(dt, snapshot)
        else:
            self._render(now_ms, snapshot)
            self._advance(dt, snapshot)
        self.surface.flush()
        self.frames += 1
        return dt

    def run(self, times_ms: Iterable[float], snapshot: FrameSnapshot) -> int:
        """
        Tick for each timestamp until exhausted or cancelled.

        Returns:
            Number of frames rendered by this call.
        """
        self._cancelled = False
        logger.info("animation started (mode=%s, %d charges)", snapshot.mode.value, len(snapshot.charges))
        n = 0
        for t in times_ms:
            if self._cancelled:
                break
            self.tick(t, snapshot)
            n += 1
        logger.info("animation stopped after %d frames", n)
        return n

    def stop(self) -> None:
        """Cancel and reset clock and particle, as when the view is torn down."""
        self.cancel()
        self.clock.reset()
        self.particle.reset(*self.size)


def frame_times(n: int, period_ms: float = 16.67, start_ms: float = 0.0) -> Sequence[float]:
    """Evenly spaced timestamps, handy for offline runs."""
    return [start_ms + i * period_ms for i in range(n)]
