#!/usr/bin/env python3
"""
Motion integrator for Dot Connect Simulator.

Responsibilities
- Advance every dot with explicit Euler steps:
  position += velocity * speed_multiplier * direction_sign * dt
- Reflect dots at the canvas bounds.

Reflection rules
- Each axis is handled independently.
- A coordinate strictly beyond a bound is clamped onto it.
- The stored velocity component is negated (not the effective one), so the
  reflection persists when the direction sign is later flipped. It is negated
  only when the effective motion on that axis points out of the canvas; a dot
  left outside by a window shrink that is already heading back in keeps going.

Numerical notes
- Motion is free (no forces), so Euler is exact between reflections and
  running forward then backward for the same time returns every dot to where
  it started, as long as no reflection happened in between.
"""
import logging
from typing import Optional

from .constants import VIEW_HEIGHT, VIEW_WIDTH
from .data_models import Bounds, SimulationParameters
from .entity_store import DotStore

logger = logging.getLogger(__name__)


def reflect_axis(pos: float, vel: float, eff: float, low: float, high: float):
    """
    Apply the boundary rule to one axis.

    Args:
        pos: Coordinate after the integration step
        vel: Stored velocity component
        eff: Effective velocity component used for the step
        low, high: Canvas bounds on this axis

    Returns:
        (pos, vel) after clamping and reflection
    """
    if pos > high:
        pos = high
        if eff > 0:
            vel = -vel
    elif pos < low:
        pos = low
        if eff < 0:
            vel = -vel
    return pos, vel


class MotionIntegrator:
    """
    Moves dots in a rectangular canvas with reflecting walls.
    """

    def __init__(self, bounds: Optional[Bounds] = None):
        self.bounds = bounds if bounds is not None else Bounds.centered(VIEW_WIDTH, VIEW_HEIGHT)

    def set_bounds(self, bounds: Bounds) -> None:
        """Follow a canvas resize. Dots outside are pulled in on the next step."""
        self.bounds = bounds
        logger.debug("Canvas bounds set to %s", bounds)

    def integrate(self, store: DotStore, params: SimulationParameters, elapsed: float) -> None:
        """
        Advance all dots by one step.

        Args:
            store: Dots to move (modified in place)
            params: Speed multiplier, direction sign and pause flag
            elapsed: Step length in seconds; nothing moves for elapsed <= 0
        """
        if params.paused or elapsed <= 0:
            return

        scale = params.speed_multiplier * params.direction_sign
        b = self.bounds
        for dot in store.iterate():
            vx, vy = dot.velocity
            ex = vx * scale
            ey = vy * scale
            x = dot.position[0] + ex * elapsed
            y = dot.position[1] + ey * elapsed

            x, vx = reflect_axis(x, vx, ex, b.min_x, b.max_x)
            y, vy = reflect_axis(y, vy, ey, b.min_y, b.max_y)

            dot.position = (x, y)
            dot.velocity = (vx, vy)
