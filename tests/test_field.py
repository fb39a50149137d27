import math

import numpy as np
import pytest
from field_explorer.constants import K_COULOMB
from field_explorer.core.field import field, potential, field_grid, probe, net_charge_micro_coulombs
from field_explorer.types import Charge


def _charge(cid, x, y, polarity=1, magnitude=1e-6):
    return Charge(cid, x, y, polarity=polarity, magnitude=magnitude)


def test_empty_set_is_zero():
    f = field([], 123.0, -45.0)
    assert (f.ex, f.ey, f.magnitude) == (0.0, 0.0, 0.0)
    assert potential([], 123.0, -45.0) == 0.0


def test_single_charge_magnitude():
    """
    Point charge at origin, query at r = 100:
      |E| = k q / r^2
    """
    q = _charge("a", 0.0, 0.0, magnitude=1e-6)
    f = field([q], 100.0, 0.0)
    expected = 8.99e9 * 1e-6 / 100**2
    assert f.magnitude == pytest.approx(expected, rel=1e-12)
    assert f.ex == pytest.approx(expected)
    assert f.ey == pytest.approx(0.0, abs=1e-12)
    assert potential([q], 100.0, 0.0) == pytest.approx(K_COULOMB * 1e-6 / 100.0)


@pytest.mark.parametrize("polarity", [1, -1])
def test_radial_direction(polarity):
    """Positive charges point outward, negative inward, at every test angle."""
    c = _charge("a", 50.0, -20.0, polarity=polarity)
    for angle in np.linspace(0, 2 * math.pi, 16, endpoint=False):
        for r in (10.5, 37.5, 250.0):
            x = c.x + r * math.cos(angle)
            y = c.y + r * math.sin(angle)
            f = field([c], x, y)
            radial = np.array([x - c.x, y - c.y]) / r
            cos_sim = np.dot(f.vector, radial) / f.magnitude
            assert cos_sim == pytest.approx(polarity, abs=1e-9)


def test_doubling_magnitude_doubles_field():
    single = _charge("a", 10.0, 10.0, magnitude=1.3e-6)
    double = _charge("a", 10.0, 10.0, magnitude=2.6e-6)
    for x, y in [(200.0, 15.0), (-40.0, 90.0), (10.0, 21.0)]:
        assert field([double], x, y).magnitude == pytest.approx(2 * field([single], x, y).magnitude)


def test_superposition_random_configurations():
    """Field of a pair equals the vector sum of each charge alone."""
    rng = np.random.default_rng(12345)
    for _ in range(200):
        a = _charge("a", *rng.uniform(0, 800, 2), polarity=int(rng.choice([-1, 1])),
                    magnitude=float(rng.uniform(0.2e-6, 5e-6)))
        b = _charge("b", *rng.uniform(0, 800, 2), polarity=int(rng.choice([-1, 1])),
                    magnitude=float(rng.uniform(0.2e-6, 5e-6)))
        x, y = rng.uniform(0, 800, 2)
        both = field([a, b], x, y)
        fa = field([a], x, y)
        fb = field([b], x, y)
        assert both.ex == pytest.approx(fa.ex + fb.ex, rel=1e-9, abs=1e-9)
        assert both.ey == pytest.approx(fa.ey + fb.ey, rel=1e-9, abs=1e-9)
        assert potential([a, b], x, y) == pytest.approx(
            potential([a], x, y) + potential([b], x, y), rel=1e-9, abs=1e-9
        )


def test_exclusion_radius_drops_near_charge():
    """A point 5 units from `near` only sees `far`."""
    near = _charge("near", 100.0, 100.0, magnitude=5e-6)
    far = _charge("far", 400.0, 100.0, polarity=-1)
    x, y = 105.0, 100.0
    both = field([near, far], x, y)
    only_far = field([far], x, y)
    assert both.ex == only_far.ex
    assert both.ey == only_far.ey
    assert potential([near, far], x, y) == potential([far], x, y)


def test_exclusion_boundary_contributes():
    c = _charge("a", 0.0, 0.0)
    assert field([c], 10.0, 0.0).magnitude > 0.0
    assert field([c], 9.999, 0.0).magnitude == 0.0


def test_dipole_midpoint():
    """Symmetric +/- pair: V = 0 at the midpoint, E points from + to -."""
    cx, cy, d = 480.0, 320.0, 200.0
    pos = _charge("p", cx - d / 2, cy, polarity=1)
    neg = _charge("n", cx + d / 2, cy, polarity=-1)
    assert potential([pos, neg], cx, cy) == pytest.approx(0.0, abs=1e-6)
    f = field([pos, neg], cx, cy)
    assert f.ex > 0
    assert f.ey == pytest.approx(0.0, abs=1e-9)
    assert f.direction_deg == pytest.approx(0.0, abs=1e-9)


def test_field_grid_matches_pointwise():
    charges = [_charge("a", 100.0, 80.0), _charge("b", 300.0, 260.0, polarity=-1, magnitude=3e-6)]
    xs, ys = np.meshgrid(np.arange(0.0, 400.0, 35.0), np.arange(0.0, 300.0, 35.0))
    # include a point inside the exclusion radius of charge a
    xs[0, 0], ys[0, 0] = 104.0, 80.0
    ex, ey, mag = field_grid(charges, xs, ys)
    for idx in np.ndindex(xs.shape):
        f = field(charges, xs[idx], ys[idx])
        assert ex[idx] == pytest.approx(f.ex, rel=1e-12, abs=1e-12)
        assert ey[idx] == pytest.approx(f.ey, rel=1e-12, abs=1e-12)
        assert mag[idx] == pytest.approx(f.magnitude, rel=1e-12, abs=1e-12)


def test_probe_readout():
    c = _charge("a", 0.0, 0.0)
    p = probe([c], 0.0, 100.0)
    assert p.visible
    assert p.direction_deg == pytest.approx(90.0)
    assert p.field_magnitude == pytest.approx(field([c], 0.0, 100.0).magnitude)
    assert (p.screen_x, p.screen_y) == (20.0, 120.0)


def test_net_charge():
    charges = [_charge("a", 0, 0, magnitude=2e-6), _charge("b", 0, 0, polarity=-1, magnitude=0.5e-6)]
    assert net_charge_micro_coulombs(charges) == pytest.approx(1.5)
    assert net_charge_micro_coulombs([]) == 0.0
