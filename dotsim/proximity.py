#!/usr/bin/env python3
"""
Proximity graph builders.

Every frame the simulator needs the set of dot pairs whose distance is
strictly below the connect force. Three builders share one interface,
``build_edges(dots, connect_force) -> List[Edge]``:

- PairwiseEdgeBuilder: exhaustive O(N^2) comparison. Fine for tens to low
  hundreds of dots.
- GridEdgeBuilder: buckets dots into a uniform grid with cells about as wide as the
  connect force, then only compares dots in the same or adjacent cells. Any pair
  closer than one cell width must sit in neighbouring cells, so the result is the
  same edge set as the pairwise builder.
- AutoEdgeBuilder: pairwise below a dot count, grid above.

All builders run the exact same distance test (``_edge_between``), which is
what keeps their outputs identical, including at the threshold itself.
Builders only read dots; they never mutate them.
"""
import math
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .constants import AUTO_GRID_THRESHOLD
from .data_models import Dot, Edge
from .utils import try_float


def _edge_between(a: Dot, b: Dot, connect_force: float) -> Optional[Edge]:
    """Return the edge between a and b if they are closer than connect_force."""
    dx = b.position[0] - a.position[0]
    dy = b.position[1] - a.position[1]
    dist = math.hypot(dx, dy)
    if not dist < connect_force:
        return None
    if a.id > b.id:
        a, b = b, a
    return Edge(
        a=a.id,
        b=b.id,
        start=a.position,
        end=b.position,
        distance=dist,
        strength=1.0 - dist / connect_force,
    )


class EdgeBuilder:
    """Interface: produce the edge set for a set of dots and a threshold."""

    name = "base"

    def build_edges(self, dots: Iterable[Dot], connect_force: float) -> List[Edge]:
        raise NotImplementedError


class PairwiseEdgeBuilder(EdgeBuilder):
    """Check every unordered pair once."""

    name = "pairwise"

    def build_edges(self, dots: Iterable[Dot], connect_force: float) -> List[Edge]:
        pts: Sequence[Dot] = list(dots)
        edges: List[Edge] = []
        if connect_force <= 0:
            return edges

        n = len(pts)
        for i in range(n):
            di = pts[i]
            for j in range(i + 1, n):
                e = _edge_between(di, pts[j], connect_force)
                if e is not None:
                    edges.append(e)
        return edges


class GridEdgeBuilder(EdgeBuilder):
    """
    Spatial hash with cells just wider than connect_force.

    Each occupied cell is compared with itself and with the four neighbours
    that come "after" it (E, NE, N, NW), so every pair of adjacent cells is
    visited exactly once and no pair is emitted twice.
    """

    name = "grid"

    # Half of the 8-neighbourhood; the other half is covered from the other side.
    _FORWARD_NEIGHBOURS = ((1, 0), (1, 1), (0, 1), (-1, 1))

    def build_edges(self, dots: Iterable[Dot], connect_force: float) -> List[Edge]:
        pts: Sequence[Dot] = list(dots)
        edges: List[Edge] = []
        if connect_force <= 0 or len(pts) < 2:
            return edges

        # Slightly wider than the threshold so rounding in the cell index can
        # never put a qualifying pair two cells apart.
        cell = connect_force * 1.001
        grid: Dict[Tuple[int, int], List[Dot]] = {}
        try:
            for d in pts:
                key = (int(math.floor(d.position[0] / cell)), int(math.floor(d.position[1] / cell)))
                grid.setdefault(key, []).append(d)
        except OverflowError:
            # Threshold too small to index the canvas; nothing to prune.
            return PairwiseEdgeBuilder().build_edges(pts, connect_force)

        for (cx, cy), bucket in grid.items():
            # Same cell
            n = len(bucket)
            for i in range(n):
                for j in range(i + 1, n):
                    e = _edge_between(bucket[i], bucket[j], connect_force)
                    if e is not None:
                        edges.append(e)
            # Forward neighbours
            for ox, oy in self._FORWARD_NEIGHBOURS:
                other = grid.get((cx + ox, cy + oy))
                if not other:
                    continue
                for a in bucket:
                    for b in other:
                        e = _edge_between(a, b, connect_force)
                        if e is not None:
                            edges.append(e)
        return edges


class AutoEdgeBuilder(EdgeBuilder):
    """Pairwise for small dot counts, grid once the count reaches a threshold."""

    name = "auto"

    def __init__(self, threshold: int = AUTO_GRID_THRESHOLD):
        self.threshold = max(0, int(threshold))
        self.pairwise = PairwiseEdgeBuilder()
        self.grid = GridEdgeBuilder()

    def build_edges(self, dots: Iterable[Dot], connect_force: float) -> List[Edge]:
        pts = list(dots)
        if len(pts) >= self.threshold:
            return self.grid.build_edges(pts, connect_force)
        return self.pairwise.build_edges(pts, connect_force)


BUILDERS = {
    PairwiseEdgeBuilder.name: PairwiseEdgeBuilder,
    GridEdgeBuilder.name: GridEdgeBuilder,
    AutoEdgeBuilder.name: AutoEdgeBuilder,
}


def make_edge_builder(name: str, auto_threshold: int = AUTO_GRID_THRESHOLD) -> EdgeBuilder:
    """
    Instantiate a builder by name ("pairwise", "grid" or "auto").

    Raises:
        ValueError: for an unknown name.
    """
    key = str(name or "").strip().lower()
    if key not in BUILDERS:
        raise ValueError(f"unknown edge builder {name!r}; expected one of {sorted(BUILDERS)}")
    if key == AutoEdgeBuilder.name:
        return AutoEdgeBuilder(auto_threshold)
    return BUILDERS[key]()


def build_edges(dots: Iterable[Dot], connect_force, builder: Optional[EdgeBuilder] = None) -> List[Edge]:
    """Edge set for dots under connect_force, using the pairwise builder by default."""
    cf = try_float(connect_force)
    if cf is None:
        return []
    return (builder or PairwiseEdgeBuilder()).build_edges(dots, cf)
