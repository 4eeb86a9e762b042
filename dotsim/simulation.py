#!/usr/bin/env python3
"""
Simulation controller: the single object a host talks to.

Owns one DotStore, one SimulationParameters, the ParameterController that
mutates them and the FrameOrchestrator that advances them. Hosts feed it input
events between ticks and draw whatever tick() returns.

Threading
- Everything runs on the host's loop thread. Input events are applied
  synchronously, before the next tick, in the order they are handled.
"""
import logging
import random
from typing import Optional, Union

from .controls import ParameterController
from .data_models import Bounds, Dot, RenderInstructions, SimulationParameters
from .entity_store import DotStore
from .frame import FrameOrchestrator, FrameState
from .input_events import InputEvent, PointerClick
from .motion import MotionIntegrator
from .proximity import make_edge_builder
from .settings import SimulationSettings

logger = logging.getLogger(__name__)


class SimulationController:
    """
    Facade over store, parameters, controls and frame pipeline.
    """

    def __init__(self, settings: Optional[SimulationSettings] = None, rng: Optional[random.Random] = None):
        self.settings = settings if settings is not None else SimulationSettings()
        s = self.settings

        self.store = DotStore()
        self.params = SimulationParameters(connect_force=s.connect_force, speed_multiplier=s.speed)
        self.controls = ParameterController(
            self.params,
            self.store,
            connect_force_step=s.connect_force_step,
            speed_step=s.speed_step,
            min_velocity=s.min_velocity,
            max_velocity=s.max_velocity,
            default_velocity=s.default_velocity,
            rng=rng,
        )
        self.integrator = MotionIntegrator(Bounds.centered(s.view_width, s.view_height))
        self.frame = FrameOrchestrator(
            self.store,
            self.params,
            integrator=self.integrator,
            edge_builder=make_edge_builder(s.edge_builder, s.auto_grid_threshold),
            max_frame_dt=s.max_frame_dt,
        )
        self.last_frame: Optional[RenderInstructions] = None

        self._handlers = {
            InputEvent.INCREASE_CONNECT_FORCE: self.controls.increase_connect_force,
            InputEvent.DECREASE_CONNECT_FORCE: self.controls.decrease_connect_force,
            InputEvent.INCREASE_SPEED: self.controls.increase_speed,
            InputEvent.DECREASE_SPEED: self.controls.decrease_speed,
            InputEvent.TOGGLE_PAUSE: self.controls.toggle_pause,
            InputEvent.REVERSE_DIRECTION: self.controls.reverse_direction,
            InputEvent.CLEAR_ALL: self.controls.clear_all,
        }
        logger.info(
            "Simulation ready: connect force %.1f, speed %.2f, edge builder %s, canvas %dx%d",
            self.params.connect_force, self.params.speed_multiplier,
            self.frame.edge_builder.name, s.view_width, s.view_height,
        )

    @property
    def state(self) -> FrameState:
        return self.frame.state

    def handle(self, event: Union[InputEvent, PointerClick]) -> bool:
        """
        Apply one input event.

        Returns False when the event asks the host to quit, True otherwise.
        """
        if isinstance(event, PointerClick):
            self.spawn_dot_at(event.position)
            return True
        if event is InputEvent.QUIT:
            logger.info("Quit requested")
            return False
        handler = self._handlers.get(event)
        if handler is None:
            logger.warning("Unhandled input event %r", event)
            return True
        handler()
        return True

    def spawn_dot_at(self, position) -> Optional[Dot]:
        return self.controls.spawn_dot_at(position)

    def resize(self, width: float, height: float) -> None:
        """Follow the host canvas size; the canvas stays centred on the origin."""
        if width <= 0 or height <= 0:
            return
        self.integrator.set_bounds(Bounds.centered(width, height))

    def tick(self, elapsed: float) -> RenderInstructions:
        self.last_frame = self.frame.tick(elapsed)
        return self.last_frame

    def info_text(self) -> str:
        """HUD line with the live counters and the keys that drive them."""
        text = (
            f"Dot (Click/Space): {len(self.store)} | "
            f"Connect Force (I/K) : {self.params.connect_force:g} | "
            f"Speed (U/J): {self.params.signed_speed:g}"
        )
        if self.params.paused:
            text += " [Paused]"
        return text
