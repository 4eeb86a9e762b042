#!/usr/bin/env python3
"""
Data models for Dot Connect Simulator.

This module defines the records shared between the store, the integrator, the
proximity builder and the host renderer.

Units and usage
- position is in canvas units, velocity in canvas units per second before the
  global speed multiplier and direction sign are applied.
- Dot instances are owned by DotStore; other components only read or mutate them
  for the duration of one frame.
- Edge and RenderInstructions are rebuilt every frame and never updated in place.
"""
from dataclasses import dataclass, field
from typing import List, Tuple

from .constants import CONNECT_FORCE, SPEED
from .vector_utils import Vec2


@dataclass
class Dot:
    """
    A single moving point.

    Fields:
    - id: Identity within its store, assigned in insertion order
    - position: 2D position (x, y) in canvas units
    - velocity: 2D velocity (vx, vy) in canvas units/second
    """
    id: int
    position: Vec2
    velocity: Vec2


@dataclass
class SimulationParameters:
    """Process-wide tunables. Mutate through ParameterController only."""
    connect_force: float = CONNECT_FORCE
    speed_multiplier: float = SPEED
    direction_sign: int = 1
    paused: bool = False

    @property
    def signed_speed(self) -> float:
        return self.speed_multiplier * self.direction_sign


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned canvas rectangle."""
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @classmethod
    def centered(cls, width: float, height: float) -> "Bounds":
        """Canvas of the given size centred on the origin."""
        hw = width / 2.0
        hh = height / 2.0
        return cls(-hw, hw, -hh, hh)

    def contains(self, pos: Vec2) -> bool:
        return self.min_x <= pos[0] <= self.max_x and self.min_y <= pos[1] <= self.max_y


@dataclass(frozen=True)
class Edge:
    """
    An unordered pair of dots closer than the connect force.

    a < b always holds, so (a, b) identifies the pair regardless of which dot
    was visited first.
    """
    a: int
    b: int
    start: Vec2
    end: Vec2
    distance: float
    strength: float  # 1 at distance 0, fading linearly to 0 at the threshold

    @property
    def pair(self) -> Tuple[int, int]:
        return (self.a, self.b)


@dataclass
class RenderInstructions:
    """Everything the host needs to draw one frame."""
    dots: List[Vec2] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)
    paused: bool = False

    @property
    def dot_count(self) -> int:
        return len(self.dots)

    @property
    def edge_count(self) -> int:
        return len(self.edges)
