#!/usr/bin/env python3
"""
Authoritative collection of dots.

The store hands out ids in insertion order and keeps dots in that order, so
every pass over it is deterministic. It enforces no upper bound on the number
of dots: the per-frame proximity pass grows with the square of the count when
the pairwise builder is used, and that slowdown is the accepted cost of an
unbounded canvas.
"""
import logging
from typing import Iterator, List

from .data_models import Dot
from .errors import DegenerateInputError
from .utils import try_float
from .vector_utils import Vec2

logger = logging.getLogger(__name__)


def _finite_vec(what: str, value) -> Vec2:
    try:
        x, y = value
    except (TypeError, ValueError):
        raise DegenerateInputError(what, value) from None
    fx, fy = try_float(x), try_float(y)
    if fx is None or fy is None:
        raise DegenerateInputError(what, value)
    return (fx, fy)


class DotStore:
    """Insert, clear and iterate dots. Single-threaded by contract."""

    def __init__(self):
        self._dots: List[Dot] = []
        self._next_id = 0

    def __len__(self) -> int:
        return len(self._dots)

    def __iter__(self) -> Iterator[Dot]:
        return self.iterate()

    def insert(self, position: Vec2, velocity: Vec2) -> Dot:
        """
        Append a new dot.

        Raises:
            DegenerateInputError: if any component of position or velocity is
                NaN, infinite or not a number at all.
        """
        position = _finite_vec("position", position)
        velocity = _finite_vec("velocity", velocity)

        dot = Dot(id=self._next_id, position=position, velocity=velocity)
        self._next_id += 1
        self._dots.append(dot)
        return dot

    def clear(self) -> None:
        count = len(self._dots)
        self._dots = []
        self._next_id = 0
        logger.debug("Cleared %d dots", count)

    def iterate(self) -> Iterator[Dot]:
        """Lazy pass over the dots in insertion order; call again for a fresh pass."""
        return iter(self._dots)

    def positions(self) -> List[Vec2]:
        """Snapshot of every position, in insertion order."""
        return [d.position for d in self._dots]
