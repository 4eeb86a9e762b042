import random

import pytest

from dotsim.controls import ParameterController
from dotsim.data_models import Bounds, SimulationParameters
from dotsim.entity_store import DotStore
from dotsim.motion import MotionIntegrator


@pytest.fixture
def store():
    return DotStore()


@pytest.fixture
def params():
    return SimulationParameters()


@pytest.fixture
def controller(params, store):
    return ParameterController(params, store, rng=random.Random(1234))


@pytest.fixture
def bounds():
    return Bounds(-100.0, 100.0, -50.0, 50.0)


@pytest.fixture
def integrator(bounds):
    return MotionIntegrator(bounds)
