#!/usr/bin/env python3
"""
Vector helper functions for 2D operations.

Positions and velocities are plain (x, y) tuples throughout the app.
"""
from typing import Tuple

Vec2 = Tuple[float, float]


def clamp(x: float, a: float, b: float) -> float:
    """Clamp x to the inclusive range [a, b]."""
    return max(a, min(b, x))
