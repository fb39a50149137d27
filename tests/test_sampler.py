import math

import pytest
from field_explorer.core.field import field
from field_explorer.core.sampler import Arrow, arrow_length, flow_phase, grid_coords, sample_vector_field
from field_explorer.types import Charge


@pytest.mark.parametrize("magnitude", [0.0, 1.0, 9.0, 99.0, 1e3, 1e4, 1e5, 1e9])
def test_arrow_length_law(magnitude):
    assert arrow_length(magnitude) == pytest.approx(min(15.0, math.log10(magnitude + 1) * 3))


def test_arrow_length_saturates():
    """log10(|E|+1)*3 reaches the 15 cap at |E| = 1e5 - 1."""
    assert arrow_length(99999.0) == pytest.approx(15.0)
    assert arrow_length(1e7) == 15.0
    assert arrow_length(999.0) == pytest.approx(9.0)


def test_grid_excludes_edges():
    xs, ys = grid_coords(300.0, 180.0)
    assert xs.tolist() == [60.0, 120.0, 180.0, 240.0]
    assert ys.tolist() == [60.0, 120.0]


def test_empty_field_has_no_arrows():
    assert sample_vector_field([], 960.0, 640.0) == []


def test_arrows_follow_field_direction():
    c = Charge("p", 400.0, 300.0)
    arrows = sample_vector_field([c], 960.0, 640.0, time_ms=0.0)
    assert len(arrows) == 15 * 10
    for a in arrows:
        f = field([c], a.x, a.y)
        assert a.magnitude == pytest.approx(f.magnitude)
        assert a.length == pytest.approx(arrow_length(f.magnitude))
        cos_sim = (a.dx * f.ex + a.dy * f.ey) / (a.length * f.magnitude)
        assert cos_sim == pytest.approx(1.0)


def test_arrow_centred_on_grid_point():
    a = Arrow(x=120.0, y=60.0, dx=10.0, dy=0.0, magnitude=1.0, intensity=0.0)
    assert a.tail == (115.0, 60.0)
    assert a.tip == (125.0, 60.0)
    head = a.head
    assert head[0] == a.tip
    # barbs trail the tip symmetrically
    assert head[1][0] == pytest.approx(125.0 - 5 * math.cos(math.pi / 6))
    assert head[1][1] == pytest.approx(-head[2][1] + 120.0)


def test_flow_modulates_colour_not_vectors():
    c = Charge("p", 400.0, 300.0, magnitude=5e-6)
    a0 = sample_vector_field([c], 600.0, 400.0, time_ms=0.0, anim_speed=1.0)
    a1 = sample_vector_field([c], 600.0, 400.0, time_ms=500.0, anim_speed=1.0)
    assert [(a.dx, a.dy) for a in a0] == [(a.dx, a.dy) for a in a1]
    assert all(b.intensity == pytest.approx(a.intensity + 10.0) for a, b in zip(a0, a1))
    assert flow_phase(1500.0, 1.0) == pytest.approx(0.5)
    assert flow_phase(500.0, 2.0) == pytest.approx(0.0)


def test_intensity_capped():
    """|E| / 1e8 far above 255 still yields intensity 255."""
    c = Charge("p", 60.0, 60.0, magnitude=1e6)
    arrows = sample_vector_field([c], 200.0, 200.0)
    assert all(a.intensity == 255.0 for a in arrows)
    assert arrows[0].color == "rgba(355, 278, 255, 0.6)"


def test_grid_point_inside_exclusion_is_skipped():
    c = Charge("p", 60.0, 60.0)
    arrows = sample_vector_field([c], 200.0, 200.0)
    assert (60.0, 60.0) not in [(a.x, a.y) for a in arrows]
    assert len(arrows) == 8
