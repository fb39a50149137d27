# MIT License (see LICENSE)
"""
Matplotlib drawing surface.

Draws frames onto a matplotlib Axes, e.g. for still images, notebooks or
a FuncAnimation loop. The y axis is inverted so canvas coordinates
(origin top-left, y down) map directly.

Gradients have no cheap matplotlib equivalent for arbitrary patches; they
are rendered flat using the stop nearest the middle of the ramp.

Requires the ``plot`` extra (matplotlib).
"""
from __future__ import annotations
import math
import re

from matplotlib.axes import Axes
from matplotlib.colors import to_rgba
from matplotlib.patches import Circle, Polygon, Rectangle

from .surface import LinearGradient, Paint, RadialGradient, StrokeStyle, Surface, _as_points

_RGBA_RE = re.compile(r"rgba?\(\s*([\d.]+)\s*,\s*([\d.]+)\s*,\s*([\d.]+)\s*(?:,\s*([\d.]+)\s*)?\)")
_FONT_SIZE_RE = re.compile(r"(\d+(?:\.\d+)?)px")


def css_to_rgba(color: str) -> tuple[float, float, float, float]:
    """
    Convert a CSS colour string to an RGBA tuple in [0, 1].

    Accepts ``rgb(...)``/``rgba(...)`` and anything matplotlib understands
    (hex codes, named colours).

    Raises:
        ValueError: If the colour cannot be parsed.
    """
    m = _RGBA_RE.fullmatch(color.strip())
    if m:
        r, g, b = (min(255.0, float(v)) / 255.0 for v in m.groups()[:3])
        a = float(m.group(4)) if m.group(4) is not None else 1.0
        return (r, g, b, a)
    return to_rgba(color)


def paint_to_rgba(paint: Paint | None) -> tuple[float, float, float, float] | str:
    """Flatten a paint to a single colour ("none" for no fill)."""
    if paint is None:
        return "none"
    if isinstance(paint, (LinearGradient, RadialGradient)):
        _, color = min(paint.stops, key=lambda s: abs(s[0] - 0.5))
        return css_to_rgba(color)
    return css_to_rgba(paint)


def parse_font(font: str) -> dict:
    """Map a CSS font shorthand ("bold 24px Orbitron") to text kwargs."""
    m = _FONT_SIZE_RE.search(font)
    return {
        "fontsize": float(m.group(1)) if m else 12.0,
        "fontweight": "bold" if "bold" in font.split() else "normal",
    }


def _linestyle(stroke: StrokeStyle):
    return (0, stroke.dash) if stroke.dash else "solid"


class MatplotlibSurface(Surface):
    """
    Surface that renders into a matplotlib Axes.

    Example:
        fig, ax = plt.subplots(figsize=(9.6, 6.4))
        surface = MatplotlibSurface(ax)
        render_frame(surface, (960, 640), 0.0, "electric", charges)
        fig.savefig("frame.png")
    """

    def __init__(self, ax: Axes, background: str = "#0f172a"):
        """
        Args:
            ax: Target axes; it is cleared on every frame.
            background: Canvas background colour.
        """
        self.ax = ax
        self.background = background

    def clear(self, width: float, height: float) -> None:
        ax = self.ax
        ax.clear()
        ax.set_xlim(0, width)
        ax.set_ylim(height, 0)
        ax.set_aspect("equal")
        ax.set_facecolor(css_to_rgba(self.background))
        ax.set_xticks([])
        ax.set_yticks([])

    def polyline(self, points, stroke, closed=False) -> None:
        pts = _as_points(points)
        if not pts:
            return
        if closed:
            pts.append(pts[0])
        xs, ys = zip(*pts)
        self.ax.plot(
            xs, ys,
            color=css_to_rgba(stroke.color),
            linewidth=stroke.width,
            linestyle=_linestyle(stroke),
        )

    def polygon(self, points, fill) -> None:
        self.ax.add_patch(Polygon(_as_points(points), closed=True, facecolor=paint_to_rgba(fill), edgecolor="none"))

    def circle(self, center, radius, fill=None, stroke=None) -> None:
        self.ax.add_patch(Circle(
            tuple(center), radius,
            facecolor=paint_to_rgba(fill),
            edgecolor=css_to_rgba(stroke.color) if stroke else "none",
            linewidth=stroke.width if stroke else 0.0,
            linestyle=_linestyle(stroke) if stroke else "solid",
        ))

    def rect(self, center, width, height, angle=0.0, fill=None, stroke=None) -> None:
        self.ax.add_patch(Rectangle(
            (center[0] - width / 2, center[1] - height / 2), width, height,
            angle=math.degrees(angle),
            rotation_point="center",
            facecolor=paint_to_rgba(fill),
            edgecolor=css_to_rgba(stroke.color) if stroke else "none",
            linewidth=stroke.width if stroke else 0.0,
        ))

    def text(self, position, text, color, font="16px sans-serif", align="left") -> None:
        self.ax.text(
            position[0], position[1], text,
            color=css_to_rgba(color),
            ha=align,
            va="center",
            **parse_font(font),
        )

    def flush(self) -> None:
        self.ax.figure.canvas.draw_idle()
