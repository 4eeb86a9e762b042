#!/usr/bin/env python3
"""
Parameter controller: the only writer of SimulationParameters.

Every recognised input event maps to one method here. Adjustments clamp
instead of failing, so all methods are total.

Spawn velocity
- By default each axis is drawn uniformly between min_velocity and max_velocity,
  so dots leave the pointer in a random direction with a random speed.
- A fixed default_velocity replaces the draw when configured.
"""
import logging
import random
from typing import Optional

from .constants import CONNECT_FORCE_STEP, MAX_VEL, MIN_VEL, SPEED_STEP
from .data_models import Dot, SimulationParameters
from .entity_store import DotStore
from .errors import DegenerateInputError
from .utils import try_float
from .vector_utils import Vec2

logger = logging.getLogger(__name__)


class ParameterController:
    """Bounded setters for the global parameters plus spawn/clear delegation."""

    def __init__(
        self,
        params: SimulationParameters,
        store: DotStore,
        connect_force_step: float = CONNECT_FORCE_STEP,
        speed_step: float = SPEED_STEP,
        min_velocity: float = MIN_VEL,
        max_velocity: float = MAX_VEL,
        default_velocity: Optional[Vec2] = None,
        rng: Optional[random.Random] = None,
    ):
        self.params = params
        self.store = store
        self.connect_force_step = abs(float(connect_force_step))
        self.speed_step = abs(float(speed_step))
        self.min_velocity = float(min_velocity)
        self.max_velocity = float(max_velocity)
        self.default_velocity = default_velocity
        self.rng = rng if rng is not None else random.Random()

    # -----------------------
    # Connect force
    # -----------------------

    def increase_connect_force(self) -> float:
        return self.set_connect_force(self.params.connect_force + self.connect_force_step)

    def decrease_connect_force(self) -> float:
        return self.set_connect_force(self.params.connect_force - self.connect_force_step)

    def set_connect_force(self, value) -> float:
        """Set the threshold, floored at 0. Non-numeric values are ignored."""
        val = try_float(value)
        if val is not None:
            self.params.connect_force = max(0.0, val)
        return self.params.connect_force

    # -----------------------
    # Speed and direction
    # -----------------------

    def increase_speed(self) -> float:
        return self.set_speed(self.params.speed_multiplier + self.speed_step)

    def decrease_speed(self) -> float:
        return self.set_speed(self.params.speed_multiplier - self.speed_step)

    def set_speed(self, value) -> float:
        """Set the speed multiplier, floored at 0. Non-numeric values are ignored."""
        val = try_float(value)
        if val is not None:
            self.params.speed_multiplier = max(0.0, val)
        return self.params.speed_multiplier

    def reverse_direction(self) -> int:
        self.params.direction_sign = -1 if self.params.direction_sign > 0 else 1
        logger.debug("Direction sign now %+d", self.params.direction_sign)
        return self.params.direction_sign

    def toggle_pause(self) -> bool:
        self.params.paused = not self.params.paused
        logger.debug("Paused" if self.params.paused else "Resumed")
        return self.params.paused

    # -----------------------
    # Dots
    # -----------------------

    def spawn_velocity(self) -> Vec2:
        if self.default_velocity is not None:
            return (float(self.default_velocity[0]), float(self.default_velocity[1]))
        lo, hi = self.min_velocity, self.max_velocity
        return (self.rng.uniform(lo, hi), self.rng.uniform(lo, hi))

    def spawn_dot_at(self, position: Vec2) -> Optional[Dot]:
        """
        Insert a dot at position with a spawn velocity.

        Returns the new dot, or None when position is not a finite pair
        (the store is left untouched).
        """
        try:
            return self.store.insert(position, self.spawn_velocity())
        except DegenerateInputError as exc:
            logger.warning("Rejected spawn: %s", exc)
            return None

    def clear_all(self) -> None:
        self.store.clear()
