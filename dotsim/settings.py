#!/usr/bin/env python3
"""
Startup settings and their JSON loader.

Defaults live in constants.py. A settings file may override any of them:

{
  "connect_force": 300.0,
  "connect_force_step": 2.0,
  "speed": 1.0,
  "speed_step": 0.04,
  "min_velocity": -600.0,
  "max_velocity": 600.0,
  "default_velocity": [0.0, 0.0],    # optional; fixed spawn velocity instead of random
  "dot_size": 6.0,
  "view_width": 1100,
  "view_height": 800,
  "max_frame_dt": 0.25,
  "target_fps": 60,
  "drag_spawn_interval_ms": 70,
  "diagnostics_interval": 1.0,
  "edge_builder": "auto",             # "pairwise" | "grid" | "auto"
  "auto_grid_threshold": 48
}

Loading never fails: a missing or unreadable file, a non-object document or a
bad value falls back to the default for that key and logs a warning.
"""
import json
import logging
import os
from dataclasses import dataclass, fields
from typing import Optional, Tuple

from .constants import (
    AUTO_GRID_THRESHOLD,
    CONNECT_FORCE,
    CONNECT_FORCE_STEP,
    DIAGNOSTICS_INTERVAL,
    DOT_SIZE,
    DRAG_SPAWN_INTERVAL_MS,
    EDGE_BUILDER,
    MAX_FRAME_DT,
    MAX_VEL,
    MIN_VEL,
    SPEED,
    SPEED_STEP,
    TARGET_FPS,
    VIEW_HEIGHT,
    VIEW_WIDTH,
)
from .proximity import BUILDERS
from .utils import try_float

logger = logging.getLogger(__name__)


@dataclass
class SimulationSettings:
    """Startup configuration for one simulator run."""
    connect_force: float = CONNECT_FORCE
    connect_force_step: float = CONNECT_FORCE_STEP
    speed: float = SPEED
    speed_step: float = SPEED_STEP
    min_velocity: float = MIN_VEL
    max_velocity: float = MAX_VEL
    default_velocity: Optional[Tuple[float, float]] = None
    dot_size: float = DOT_SIZE
    view_width: int = VIEW_WIDTH
    view_height: int = VIEW_HEIGHT
    max_frame_dt: float = MAX_FRAME_DT
    target_fps: int = TARGET_FPS
    drag_spawn_interval_ms: int = DRAG_SPAWN_INTERVAL_MS
    diagnostics_interval: float = DIAGNOSTICS_INTERVAL
    edge_builder: str = EDGE_BUILDER
    auto_grid_threshold: int = AUTO_GRID_THRESHOLD


# Keys whose values must not go below zero
_NON_NEGATIVE = {
    "connect_force", "connect_force_step", "speed", "speed_step", "dot_size",
    "drag_spawn_interval_ms", "diagnostics_interval", "auto_grid_threshold",
}
# Keys that must be strictly positive
_POSITIVE = {"view_width", "view_height", "target_fps", "max_frame_dt"}
_INT_KEYS = {"view_width", "view_height", "target_fps", "drag_spawn_interval_ms", "auto_grid_threshold"}


def _read_json(path: str) -> Optional[dict]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("Could not read settings file %s: %s", path, exc)
        return None


def _coerce_velocity(v) -> Optional[Tuple[float, float]]:
    if not isinstance(v, (list, tuple)) or len(v) != 2:
        return None
    vx, vy = try_float(v[0]), try_float(v[1])
    if vx is None or vy is None:
        return None
    return (vx, vy)


def _coerce(key: str, raw):
    """Return the validated value for key, or None when raw is unusable."""
    if key == "edge_builder":
        name = str(raw).strip().lower()
        return name if name in BUILDERS else None
    if key == "default_velocity":
        return _coerce_velocity(raw)
    if isinstance(raw, bool):
        return None
    val = try_float(raw)
    if val is None:
        return None
    if key in _INT_KEYS:
        val = int(val)
    if key in _NON_NEGATIVE and val < 0:
        return None
    if key in _POSITIVE and val <= 0:
        return None
    return val


def settings_from_dict(data: dict) -> SimulationSettings:
    """Build settings from a mapping, keeping defaults for missing or bad keys."""
    settings = SimulationSettings()
    known = {f.name for f in fields(SimulationSettings)}
    for key, raw in data.items():
        if key not in known:
            logger.warning("Ignoring unknown setting %r", key)
            continue
        if key == "default_velocity" and raw is None:
            continue
        val = _coerce(key, raw)
        if val is None:
            logger.warning("Ignoring invalid value for %s: %r", key, raw)
            continue
        setattr(settings, key, val)

    if settings.min_velocity > settings.max_velocity:
        logger.warning(
            "min_velocity %s exceeds max_velocity %s; swapping",
            settings.min_velocity, settings.max_velocity,
        )
        settings.min_velocity, settings.max_velocity = settings.max_velocity, settings.min_velocity
    return settings


def load_settings(path: Optional[str] = None) -> SimulationSettings:
    """
    Load settings from a JSON file.

    Returns the defaults when path is None or the file cannot be used.
    """
    if path is None:
        return SimulationSettings()
    if not os.path.isfile(path):
        logger.warning("Settings file %s not found; using defaults", path)
        return SimulationSettings()
    data = _read_json(path)
    if not isinstance(data, dict):
        if data is not None:
            logger.warning("Settings file %s must contain a JSON object; using defaults", path)
        return SimulationSettings()
    settings = settings_from_dict(data)
    logger.info("Loaded settings from %s", path)
    return settings
