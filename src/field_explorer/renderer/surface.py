# MIT License (see LICENSE)
"""
Drawing surface abstraction.

The engine draws through a small vector API (polylines, polygons, circles,
rectangles, text) with colour strings or gradients as paints. Hosts plug
in a backend by subclassing Surface. The numeric core has no drawing
dependency; these surfaces are only used by the renderers.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Sequence, TextIO, Union
import sys

import numpy as np

Point = tuple[float, float]


# =============================================================================
# Paints
# =============================================================================

@dataclass(frozen=True)
class LinearGradient:
    """
    Colour ramp between two points.

    Attributes:
        start, end: Gradient axis end points.
        stops: (offset in [0, 1], CSS colour) pairs.
    """
    start: Point
    end: Point
    stops: tuple[tuple[float, str], ...]


@dataclass(frozen=True)
class RadialGradient:
    """Colour ramp between an inner and an outer circle."""
    inner_center: Point
    inner_radius: float
    outer_center: Point
    outer_radius: float
    stops: tuple[tuple[float, str], ...]


Paint = Union[str, LinearGradient, RadialGradient]


@dataclass(frozen=True)
class StrokeStyle:
    """Line colour, width and dash pattern (empty dash = solid)."""
    color: str
    width: float = 1.0
    dash: tuple[float, ...] = ()


def _as_points(points) -> list[Point]:
    arr = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    return [(float(p[0]), float(p[1])) for p in arr]


# =============================================================================
# Surface interface
# =============================================================================

class Surface(ABC):
    """
    Abstract base class for drawing backends.

    Coordinates are canvas coordinates: origin top-left, y pointing down.

    Usage:
        surface = MySurface()
        render_frame(surface, (width, height), time_ms, mode, charges, ...)
        surface.flush()
    """

    @abstractmethod
    def clear(self, width: float, height: float) -> None:
        """Start a new frame by clearing the whole canvas."""
        ...

    @abstractmethod
    def polyline(self, points: Sequence[Point], stroke: StrokeStyle, closed: bool = False) -> None:
        """Stroke a connected line through points."""
        ...

    @abstractmethod
    def polygon(self, points: Sequence[Point], fill: Paint) -> None:
        """Fill a closed polygon."""
        ...

    @abstractmethod
    def circle(
        self,
        center: Point,
        radius: float,
        fill: Paint | None = None,
        stroke: StrokeStyle | None = None,
    ) -> None:
        """Fill and/or stroke a circle."""
        ...

    @abstractmethod
    def rect(
        self,
        center: Point,
        width: float,
        height: float,
        angle: float = 0.0,
        fill: Paint | None = None,
        stroke: StrokeStyle | None = None,
    ) -> None:
        """Fill and/or stroke a rectangle rotated by angle (radians) about its centre."""
        ...

    @abstractmethod
    def text(
        self,
        position: Point,
        text: str,
        color: str,
        font: str = "16px sans-serif",
        align: str = "left",
    ) -> None:
        """Draw a text label anchored at position."""
        ...

    def flush(self) -> None:
        """Present the frame. Backends that draw immediately need not override."""


class NullSurface(Surface):
    """
    Surface that draws nothing.

    Useful for benchmarking the engine without backend overhead.
    """

    def clear(self, width: float, height: float) -> None:
        pass

    def polyline(self, points, stroke, closed=False) -> None:
        pass

    def polygon(self, points, fill) -> None:
        pass

    def circle(self, center, radius, fill=None, stroke=None) -> None:
        pass

    def rect(self, center, width, height, angle=0.0, fill=None, stroke=None) -> None:
        pass

    def text(self, position, text, color, font="16px sans-serif", align="left") -> None:
        pass


# =============================================================================
# Recording surface
# =============================================================================

@dataclass
class DrawCommand:
    """One recorded drawing call: its kind and its arguments."""
    kind: str
    params: dict = field(default_factory=dict)


class RecordingSurface(Surface):
    """
    Surface that buffers draw calls per frame.

    Each clear() starts a new frame. Useful for tests and for replaying a
    session into another backend.

    Example:
        surface = RecordingSurface()
        render_frame(surface, (800, 600), 0.0, SimulationMode.ELECTRIC, charges)
        kinds = [c.kind for c in surface.commands]
    """

    def __init__(self) -> None:
        self.frames: list[list[DrawCommand]] = []

    @property
    def commands(self) -> list[DrawCommand]:
        """Commands of the current (latest) frame."""
        if not self.frames:
            return []
        return self.frames[-1]

    def of_kind(self, kind: str) -> list[DrawCommand]:
        return [c for c in self.commands if c.kind == kind]

    def _record(self, kind: str, **params) -> None:
        if not self.frames:
            self.frames.append([])
        self.frames[-1].append(DrawCommand(kind, params))

    def clear(self, width: float, height: float) -> None:
        self.frames.append([])
        self._record("clear", width=width, height=height)

    def polyline(self, points, stroke, closed=False) -> None:
        self._record("polyline", points=_as_points(points), stroke=stroke, closed=closed)

    def polygon(self, points, fill) -> None:
        self._record("polygon", points=_as_points(points), fill=fill)

    def circle(self, center, radius, fill=None, stroke=None) -> None:
        self._record("circle", center=tuple(center), radius=radius, fill=fill, stroke=stroke)

    def rect(self, center, width, height, angle=0.0, fill=None, stroke=None) -> None:
        self._record(
            "rect", center=tuple(center), width=width, height=height,
            angle=angle, fill=fill, stroke=stroke,
        )

    def text(self, position, text, color, font="16px sans-serif", align="left") -> None:
        self._record("text", position=tuple(position), text=text, color=color, font=font, align=align)

    def reset(self) -> None:
        """Drop all recorded frames."""
        self.frames.clear()


# =============================================================================
# Debug surface
# =============================================================================

class DebugSurface(Surface):
    """
    Console/text surface for development.

    Writes one line per draw call to a stream (stdout by default).

    Output:
        === Frame 960x640 ===
        polyline n=87 color=rgba(147, 197, 253, 0.6) w=1.5
        circle (300.00, 320.00) r=25.00 fill=RadialGradient
        text "+" @ (300.00, 320.00)
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = False):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, also print polyline vertices.
        """
        self.output = output or sys.stdout
        self.verbose = verbose

    @staticmethod
    def _paint(paint: Paint | None) -> str:
        if paint is None or isinstance(paint, str):
            return str(paint)
        return type(paint).__name__

    def clear(self, width: float, height: float) -> None:
        self.output.write(f"=== Frame {width:g}x{height:g} ===\n")

    def polyline(self, points, stroke, closed=False) -> None:
        pts = _as_points(points)
        line = f"polyline n={len(pts)} color={stroke.color} w={stroke.width:g}"
        if closed:
            line += " closed"
        if self.verbose:
            line += " " + " ".join(f"({x:.1f},{y:.1f})" for x, y in pts)
        self.output.write(line + "\n")

    def polygon(self, points, fill) -> None:
        self.output.write(f"polygon n={len(_as_points(points))} fill={self._paint(fill)}\n")

    def circle(self, center, radius, fill=None, stroke=None) -> None:
        self.output.write(
            f"circle ({center[0]:.2f}, {center[1]:.2f}) r={radius:.2f} fill={self._paint(fill)}\n"
        )

    def rect(self, center, width, height, angle=0.0, fill=None, stroke=None) -> None:
        self.output.write(
            f"rect ({center[0]:.2f}, {center[1]:.2f}) {width:g}x{height:g} "
            f"θ={angle:.2f} fill={self._paint(fill)}\n"
        )

    def text(self, position, text, color, font="16px sans-serif", align="left") -> None:
        self.output.write(f"text \"{text}\" @ ({position[0]:.2f}, {position[1]:.2f})\n")

    def flush(self) -> None:
        self.output.write("\n")
        self.output.flush()
