import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
from field_explorer.renderer.mpl import MatplotlibSurface, css_to_rgba, paint_to_rgba, parse_font  # noqa: E402
from field_explorer.renderer.scene import render_frame  # noqa: E402
from field_explorer.renderer.surface import RadialGradient  # noqa: E402
from field_explorer.types import Charge  # noqa: E402


def test_css_to_rgba():
    assert css_to_rgba("rgba(255, 0, 51, 0.6)") == pytest.approx((1.0, 0.0, 0.2, 0.6))
    assert css_to_rgba("rgb(0, 255, 0)") == pytest.approx((0.0, 1.0, 0.0, 1.0))
    # channels above 255 from saturated glyph colours are clipped
    assert css_to_rgba("rgba(355, 278, 255, 0.6)") == pytest.approx((1.0, 1.0, 1.0, 0.6))
    assert css_to_rgba("#fff") == pytest.approx((1.0, 1.0, 1.0, 1.0))
    with pytest.raises(ValueError):
        css_to_rgba("not-a-colour")


def test_paint_to_rgba():
    g = RadialGradient((0, 0), 0, (0, 0), 10, ((0.0, "#000"), (0.5, "#ff0000"), (1.0, "#fff")))
    assert paint_to_rgba(g) == pytest.approx((1.0, 0.0, 0.0, 1.0))
    assert paint_to_rgba(None) == "none"


def test_parse_font():
    assert parse_font("bold 24px Orbitron") == {"fontsize": 24.0, "fontweight": "bold"}
    assert parse_font("serif") == {"fontsize": 12.0, "fontweight": "normal"}


def test_render_frame_to_axes():
    fig, ax = plt.subplots(figsize=(4.8, 3.2))
    try:
        surface = MatplotlibSurface(ax)
        charges = [Charge("p", 150.0, 160.0), Charge("n", 330.0, 160.0, polarity=-1)]
        for mode in ("electric", "combined", "em-wave"):
            render_frame(surface, (480.0, 320.0), 0.0, mode, charges, selection="p", density=4)
            surface.flush()
        assert ax.get_xlim() == (0.0, 480.0)
        assert ax.get_ylim() == (320.0, 0.0)
        assert len(ax.lines) > 0
    finally:
        plt.close(fig)
