import numpy as np
import pytest
from field_explorer.constants import PARTICLE_DAMPING, PARTICLE_TRAIL_CAPACITY
from field_explorer.core.field import field
from field_explorer.core.integrator import ParticleIntegrator, ParticlePhase, out_of_bounds, step_particle
from field_explorer.types import Charge, SimulationMode, TestParticleState

W, H = 960.0, 640.0


def test_pure_damping_decays_speed():
    """No charges: speed shrinks by the damping factor every step."""
    state = TestParticleState(x=480.0, y=320.0, vx=0.3, vy=-0.2)
    speeds = [state.speed]
    for _ in range(50):
        state = step_particle(state, [], W, H, dt=1.0)
        speeds.append(state.speed)
    assert np.all(np.diff(speeds) < 0)
    assert speeds[1] == pytest.approx(speeds[0] * PARTICLE_DAMPING)


def test_semi_implicit_euler_update():
    """v' = (v + a dt) * damping, x' = x + v' dt with a = E * scale."""
    c = Charge("p", 300.0, 320.0)
    state = TestParticleState(x=400.0, y=320.0, vx=0.1, vy=0.0)
    dt = 1.3
    f = field([c], state.x, state.y)
    new = step_particle(state, [c], W, H, dt)
    vx = (0.1 + f.ex * 8e-10 * dt) * 0.994
    assert new.vx == pytest.approx(vx)
    assert new.x == pytest.approx(400.0 + vx * dt)
    assert new.y == pytest.approx(320.0)
    assert new.trail == ((new.x, new.y),)
    # input is untouched
    assert state.trail == ()


def test_respawn_at_centre_keeps_trail():
    """Leaving the inset margin teleports to the centre; the trail carries on."""
    state = TestParticleState(x=12.0, y=320.0, vx=-5.0, vy=0.0, trail=((14.0, 320.0), (12.0, 320.0)))
    new = step_particle(state, [], W, H, dt=1.0)
    assert (new.x, new.y) == (W / 2, H / 2)
    assert new.vx == pytest.approx(-5.0 * PARTICLE_DAMPING)
    assert new.trail == ((14.0, 320.0), (12.0, 320.0), (W / 2, H / 2))


@pytest.mark.parametrize("x, y, out", [
    (10.0, 320.0, False), (9.99, 320.0, True), (950.0, 320.0, False), (950.01, 320.0, True),
    (480.0, 10.0, False), (480.0, 630.01, True),
])
def test_out_of_bounds_margin(x, y, out):
    assert out_of_bounds(x, y, W, H) is out


def test_trail_capacity():
    state = TestParticleState.at(480.0, 320.0)
    for i in range(PARTICLE_TRAIL_CAPACITY + 30):
        state = step_particle(state, [], W, H, dt=1.0)
    assert len(state.trail) == PARTICLE_TRAIL_CAPACITY
    assert state.trail[-1] == (state.x, state.y)


def test_particle_is_repelled_by_positive_charge():
    c = Charge("p", 480.0, 320.0, magnitude=5e-6)
    state = TestParticleState.at(560.0, 320.0)
    for _ in range(20):
        state = step_particle(state, [c], W, H, dt=1.0)
    assert state.x > 560.0
    assert state.vx > 0.0


def test_integrator_activation_places_particle():
    integrator = ParticleIntegrator()
    charges = [Charge("p", 300.0, 300.0)]
    state = integrator.update(True, SimulationMode.ELECTRIC, charges, W, H, dt=1.0)
    assert integrator.phase is ParticlePhase.ACTIVE
    assert state is integrator.state
    assert len(state.trail) == 1
    # spawned at centre + (80, -40), then moved one small step
    assert state.x == pytest.approx(W / 2 + 80, abs=1.0)
    assert state.y == pytest.approx(H / 2 - 40, abs=1.0)


@pytest.mark.parametrize("enabled, mode, n_charges", [
    (False, SimulationMode.ELECTRIC, 1),
    (True, SimulationMode.MAGNETIC, 1),
    (True, SimulationMode.EM_WAVE, 1),
    (True, SimulationMode.ELECTRIC, 0),
])
def test_integrator_ineligible_stays_inactive(enabled, mode, n_charges):
    integrator = ParticleIntegrator()
    charges = [Charge("p", 300.0, 300.0)][:n_charges]
    assert integrator.update(enabled, mode, charges, W, H, dt=1.0) is None
    assert integrator.phase is ParticlePhase.INACTIVE


def test_integrator_deactivation_resets():
    integrator = ParticleIntegrator()
    charges = [Charge("p", 300.0, 300.0)]
    for _ in range(5):
        integrator.update(True, SimulationMode.COMBINED, charges, W, H, dt=1.0)
    assert len(integrator.state.trail) == 5

    assert integrator.update(True, SimulationMode.MAGNETIC, charges, W, H, dt=1.0) is None
    s = integrator.state
    assert (s.x, s.y, s.vx, s.vy, s.trail) == (W / 2, H / 2, 0.0, 0.0, ())
    assert integrator.phase is ParticlePhase.INACTIVE

    # re-enabling places it at the spawn offset again
    state = integrator.update(True, SimulationMode.ELECTRIC, charges, W, H, dt=1.0)
    assert len(state.trail) == 1
    assert state.x == pytest.approx(W / 2 + 80, abs=1.0)
