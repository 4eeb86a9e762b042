#!/usr/bin/env python3
"""
Frame orchestrator: one tick = integrate (unless paused), connect, report.

States
- RUNNING: dots move every tick.
- PAUSED: positions are frozen, edges are still rebuilt so threshold changes
  show up immediately.
The state is read from SimulationParameters.paused, so a pause toggled through
the ParameterController and one toggled here are the same pause.
"""
import enum
import logging
from typing import Optional

from .constants import MAX_FRAME_DT
from .data_models import RenderInstructions, SimulationParameters
from .entity_store import DotStore
from .motion import MotionIntegrator
from .proximity import EdgeBuilder, PairwiseEdgeBuilder
from .utils import try_float
from .vector_utils import clamp

logger = logging.getLogger(__name__)


class FrameState(enum.Enum):
    RUNNING = "running"
    PAUSED = "paused"


class FrameOrchestrator:
    """Runs the per-frame pipeline and hands back what to draw."""

    def __init__(
        self,
        store: DotStore,
        params: SimulationParameters,
        integrator: Optional[MotionIntegrator] = None,
        edge_builder: Optional[EdgeBuilder] = None,
        max_frame_dt: float = MAX_FRAME_DT,
    ):
        self.store = store
        self.params = params
        self.integrator = integrator if integrator is not None else MotionIntegrator()
        self.edge_builder = edge_builder if edge_builder is not None else PairwiseEdgeBuilder()
        self.max_frame_dt = max(0.0, float(max_frame_dt))
        self.frame_count = 0

    @property
    def state(self) -> FrameState:
        return FrameState.PAUSED if self.params.paused else FrameState.RUNNING

    def toggle_pause(self) -> FrameState:
        self.params.paused = not self.params.paused
        logger.debug("Frame state now %s", self.state.value)
        return self.state

    def tick(self, elapsed: float) -> RenderInstructions:
        """
        Advance one frame.

        Args:
            elapsed: Wall-clock seconds since the previous tick. Clamped to
                [0, max_frame_dt]; non-finite values count as 0.
        """
        dt = try_float(elapsed)
        dt = clamp(dt, 0.0, self.max_frame_dt) if dt is not None else 0.0
        if self.state is FrameState.RUNNING:
            self.integrator.integrate(self.store, self.params, dt)

        edges = self.edge_builder.build_edges(self.store.iterate(), self.params.connect_force)
        self.frame_count += 1
        return RenderInstructions(
            dots=self.store.positions(),
            edges=edges,
            paused=self.params.paused,
        )
