import pytest

from dotsim.data_models import Bounds, SimulationParameters
from dotsim.entity_store import DotStore
from dotsim.motion import MotionIntegrator, reflect_axis


def test_position_advances_by_velocity_speed_and_dt(store, integrator):
    dot = store.insert((0.0, 0.0), (10.0, -20.0))
    params = SimulationParameters(speed_multiplier=2.0)

    integrator.integrate(store, params, 0.5)

    assert dot.position == pytest.approx((10.0, -20.0))
    assert dot.velocity == (10.0, -20.0)


def test_reflects_at_upper_bound(store, integrator):
    dot = store.insert((100.0, 0.0), (10.0, 0.0))

    integrator.integrate(store, SimulationParameters(speed_multiplier=1.0), 0.1)

    assert dot.position == (100.0, 0.0)
    assert dot.velocity == (-10.0, 0.0)


def test_reflects_at_lower_bound(store, integrator):
    dot = store.insert((0.0, -50.0), (0.0, -30.0))

    integrator.integrate(store, SimulationParameters(), 0.1)

    assert dot.position == (0.0, -50.0)
    assert dot.velocity == (0.0, 30.0)


def test_axes_reflect_independently(store, integrator):
    dot = store.insert((99.0, 49.0), (100.0, 100.0))

    integrator.integrate(store, SimulationParameters(), 0.1)

    assert dot.position == (100.0, 50.0)
    assert dot.velocity == (-100.0, -100.0)


def test_reflection_flips_stored_velocity_under_reversed_direction(store, integrator):
    # Stored velocity points in, but the reversed direction moves the dot out.
    dot = store.insert((100.0, 0.0), (-10.0, 0.0))
    params = SimulationParameters(direction_sign=-1)

    integrator.integrate(store, params, 0.1)

    assert dot.position == (100.0, 0.0)
    assert dot.velocity == (10.0, 0.0)

    # After the flip the dot heads back into the canvas
    integrator.integrate(store, params, 0.1)
    assert dot.position[0] == pytest.approx(99.0)


def test_dot_outside_heading_inward_is_clamped_without_flip(store, integrator):
    dot = store.insert((150.0, 0.0), (-10.0, 0.0))

    integrator.integrate(store, SimulationParameters(), 0.1)

    assert dot.position == (100.0, 0.0)
    assert dot.velocity == (-10.0, 0.0)


def test_reflect_axis_inside_is_untouched():
    assert reflect_axis(5.0, 3.0, 3.0, -10.0, 10.0) == (5.0, 3.0)


def test_speed_scaling_is_monotonic(integrator):
    displacements = []
    for speed in (0.0, 0.25, 0.5, 1.0, 2.0):
        store = DotStore()
        dot = store.insert((0.0, 0.0), (20.0, 10.0))
        integrator.integrate(store, SimulationParameters(speed_multiplier=speed), 0.5)
        displacements.append(abs(dot.position[0]) + abs(dot.position[1]))

    assert displacements == sorted(displacements)
    assert displacements[0] == 0.0


def test_direction_reversal_returns_dots_to_start(store, integrator):
    starts = [(10.3, -4.7), (-20.0, 12.5), (0.0, 0.0)]
    for i, pos in enumerate(starts):
        store.insert(pos, (30.0 + i, -25.0 + 7 * i))
    params = SimulationParameters(speed_multiplier=1.3)

    integrator.integrate(store, params, 0.2)
    assert store.positions() != starts

    params.direction_sign = -1
    integrator.integrate(store, params, 0.2)

    for got, want in zip(store.positions(), starts):
        assert got == pytest.approx(want)


def test_paused_parameters_suppress_motion(store, integrator):
    dot = store.insert((1.0, 1.0), (50.0, 50.0))

    integrator.integrate(store, SimulationParameters(paused=True), 1.0)

    assert dot.position == (1.0, 1.0)


@pytest.mark.parametrize("elapsed", [0.0, -1.0])
def test_non_positive_elapsed_is_a_no_op(store, integrator, elapsed):
    dot = store.insert((1.0, 1.0), (50.0, 50.0))

    integrator.integrate(store, SimulationParameters(), elapsed)

    assert dot.position == (1.0, 1.0)


def test_integration_is_deterministic(bounds):
    results = []
    for _ in range(2):
        store = DotStore()
        store.insert((0.0, 0.0), (333.0, -271.0))
        store.insert((-90.0, 40.0), (-123.0, 456.0))
        integrator = MotionIntegrator(bounds)
        params = SimulationParameters()
        for _ in range(50):
            integrator.integrate(store, params, 1 / 60)
        results.append(store.positions())

    assert results[0] == results[1]


def test_positions_stay_in_bounds(bounds):
    store = DotStore()
    for i in range(20):
        store.insert((0.0, 0.0), (200.0 * (i - 10), 97.0 * (i - 7)))
    integrator = MotionIntegrator(bounds)
    params = SimulationParameters(speed_multiplier=3.0)

    for _ in range(200):
        integrator.integrate(store, params, 1 / 30)
        assert all(bounds.contains(p) for p in store.positions())


def test_set_bounds_pulls_dots_in(store):
    integrator = MotionIntegrator(Bounds.centered(400, 400))
    dot = store.insert((180.0, 0.0), (10.0, 0.0))

    integrator.set_bounds(Bounds.centered(200, 200))
    integrator.integrate(store, SimulationParameters(), 0.01)

    assert dot.position[0] == 100.0
    assert dot.velocity == (-10.0, 0.0)
