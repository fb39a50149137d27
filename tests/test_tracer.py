import numpy as np
import pytest
from field_explorer.constants import LINE_MAX_STEPS, LINE_SEED_RADIUS, LINE_SEED_RADIUS_INWARD
from field_explorer.core.tracer import Termination, plan_seeds, trace_line, trace_field_lines
from field_explorer.types import Charge

W, H = 960.0, 640.0


def test_single_positive_charge_terminates():
    c = Charge("p", 480.0, 320.0, polarity=1)
    lines = trace_field_lines([c], W, H, density=12)
    assert len(lines) == 12
    for line in lines:
        assert line.direction == 1
        assert line.steps <= LINE_MAX_STEPS
        assert line.termination is Termination.OUT_OF_BOUNDS
        # seed point sits on the ring
        r0 = np.hypot(*(line.points[0] - c.position))
        assert r0 == pytest.approx(LINE_SEED_RADIUS)
        # every vertex stays on the canvas
        assert np.all(line.points[:, 0] >= 0) and np.all(line.points[:, 0] <= W)
        assert np.all(line.points[:, 1] >= 0) and np.all(line.points[:, 1] <= H)


def test_lines_move_away_from_positive_charge():
    c = Charge("p", 480.0, 320.0)
    for line in trace_field_lines([c], W, H, density=8):
        r = np.hypot(line.points[:, 0] - c.x, line.points[:, 1] - c.y)
        assert np.all(np.diff(r) > 0)


def test_all_negative_seeds_inward_from_every_charge():
    charges = [Charge("a", 300.0, 320.0, polarity=-1), Charge("b", 660.0, 320.0, polarity=-1)]
    plan = plan_seeds(charges)
    assert plan.direction == -1
    assert plan.radius == LINE_SEED_RADIUS_INWARD
    assert plan.seeds == tuple(charges)

    lines = trace_field_lines(charges, W, H, density=6)
    assert len(lines) == 12
    for line in lines:
        assert line.direction == -1
        assert line.steps <= LINE_MAX_STEPS


def test_single_positive_switches_whole_set_to_outward():
    """One positive charge among negatives: only it is seeded."""
    neg1 = Charge("n1", 200.0, 200.0, polarity=-1)
    pos = Charge("p", 480.0, 320.0, polarity=1)
    neg2 = Charge("n2", 700.0, 400.0, polarity=-1)
    plan = plan_seeds([neg1, pos, neg2])
    assert plan.seeds == (pos,)
    assert plan.direction == 1
    assert len(trace_field_lines([neg1, pos, neg2], W, H, density=10)) == 10


def test_dipole_axis_line_hits_negative_charge():
    pos = Charge("p", 300.0, 320.0, polarity=1)
    neg = Charge("n", 500.0, 320.0, polarity=-1)
    lines = trace_field_lines([pos, neg], W, H, density=12)
    # angle 0 points straight at the negative charge
    first = lines[0]
    assert first.termination is Termination.HIT_CHARGE
    assert first.points[-1][0] < neg.x - neg.radius + 5.0 + 1e-9
    assert np.allclose(first.points[:, 1], 320.0)


def test_null_field_stops_immediately():
    """Midpoint of two equal positive charges has exactly zero field."""
    a = Charge("a", 100.0, 100.0)
    b = Charge("b", 300.0, 100.0)
    line = trace_line([a, b], (200.0, 100.0), 1, W, H)
    assert line.termination is Termination.NULL_FIELD
    assert len(line) == 1
    assert line.steps == 1


def test_step_ceiling_on_huge_canvas():
    """With nothing to stop it, a line ends after exactly LINE_MAX_STEPS steps."""
    size = 1e6
    c = Charge("p", size / 2, size / 2)
    lines = trace_field_lines([c], size, size, density=4)
    for line in lines:
        assert line.termination is Termination.MAX_STEPS
        assert line.steps == LINE_MAX_STEPS
        assert len(line) == LINE_MAX_STEPS + 1


def test_deterministic():
    charges = [Charge("p", 250.0, 300.0), Charge("n", 610.0, 350.0, polarity=-1, magnitude=2e-6)]
    first = trace_field_lines(charges, W, H, density=12)
    second = trace_field_lines(charges, W, H, density=12)
    assert len(first) == len(second)
    for a, b in zip(first, second):
        assert np.array_equal(a.points, b.points)
        assert a.termination is b.termination


def test_empty_and_invalid_density():
    assert trace_field_lines([], W, H, density=12) == []
    with pytest.raises(ValueError):
        trace_field_lines([Charge("p", 0, 0)], W, H, density=0)
