import json
import logging

import pytest

from dotsim.constants import CONNECT_FORCE, MAX_FRAME_DT, MAX_VEL, MIN_VEL, VIEW_WIDTH
from dotsim.settings import SimulationSettings, load_settings, settings_from_dict
from dotsim.simulation import SimulationController


def write_json(tmp_path, data, name="settings.json"):
    path = tmp_path / name
    path.write_text(json.dumps(data) if not isinstance(data, str) else data, encoding="utf-8")
    return str(path)


def test_no_path_gives_defaults():
    assert load_settings(None) == SimulationSettings()


def test_overrides_known_keys(tmp_path):
    path = write_json(tmp_path, {
        "connect_force": 120,
        "speed": 0.5,
        "view_width": 640.0,
        "edge_builder": "Grid",
        "default_velocity": [1, -2],
    })

    settings = load_settings(path)

    assert settings.connect_force == 120.0
    assert settings.speed == 0.5
    assert settings.view_width == 640
    assert isinstance(settings.view_width, int)
    assert settings.edge_builder == "grid"
    assert settings.default_velocity == (1.0, -2.0)
    assert settings.min_velocity == MIN_VEL


def test_unknown_and_invalid_keys_fall_back(tmp_path, caplog):
    path = write_json(tmp_path, {
        "connect_force": -3,
        "view_width": 0,
        "speed": "quick",
        "edge_builder": "octree",
        "default_velocity": [1],
        "dot_size": True,
        "colour": "red",
    })

    with caplog.at_level(logging.WARNING, logger="dotsim.settings"):
        settings = load_settings(path)

    assert settings == SimulationSettings()
    assert "unknown setting 'colour'" in caplog.text
    assert "invalid value for connect_force" in caplog.text


def test_missing_file_gives_defaults(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="dotsim.settings"):
        settings = load_settings(str(tmp_path / "nope.json"))

    assert settings == SimulationSettings()
    assert "not found" in caplog.text


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]", "null"])
def test_malformed_file_gives_defaults(tmp_path, content):
    path = write_json(tmp_path, content)
    assert load_settings(path) == SimulationSettings()


def test_velocity_range_is_ordered():
    settings = settings_from_dict({"min_velocity": 10, "max_velocity": -10})
    assert (settings.min_velocity, settings.max_velocity) == (-10.0, 10.0)


def test_null_default_velocity_keeps_random_spawn():
    settings = settings_from_dict({"default_velocity": None})
    assert settings.default_velocity is None


def test_defaults_match_constants():
    s = SimulationSettings()
    assert s.connect_force == CONNECT_FORCE
    assert (s.min_velocity, s.max_velocity) == (MIN_VEL, MAX_VEL)
    assert s.view_width == VIEW_WIDTH


def test_zero_frame_cap_falls_back_to_default(caplog):
    with caplog.at_level(logging.WARNING, logger="dotsim.settings"):
        settings = settings_from_dict({"max_frame_dt": 0})

    assert settings.max_frame_dt == MAX_FRAME_DT
    assert "invalid value for max_frame_dt" in caplog.text


def test_dots_move_with_loaded_frame_cap():
    settings = settings_from_dict({"max_frame_dt": 0, "default_velocity": [100, 0]})
    sim = SimulationController(settings)
    sim.spawn_dot_at((0.0, 0.0))

    for _ in range(10):
        frame = sim.tick(1 / 60)

    assert frame.dots[0][0] > 0.0


@pytest.mark.parametrize("key", ["view_width", "view_height", "target_fps"])
def test_fractional_positive_int_below_one_falls_back(key):
    settings = settings_from_dict({key: 0.5})
    assert getattr(settings, key) == getattr(SimulationSettings(), key)


def test_fractional_int_setting_is_truncated():
    assert settings_from_dict({"view_width": 640.9}).view_width == 640
