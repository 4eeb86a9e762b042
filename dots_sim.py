#!/usr/bin/env python3
"""
Dot Connect Simulator application entry point: window, drawing and controls.

What this module does
- Opens a Pygame viewport that shows the dots and the edges between every pair
  closer than the connect force.
- Opens a Dear PyGui controls panel with sliders for the connect force and the
  speed, and buttons for pause, reverse time and clear.
- Translates keyboard and mouse input into dotsim input events and feeds them
  to a SimulationController, then draws what its tick() returns.

Threading model
- A single loop runs everything: Pygame events, one simulation tick, the Pygame
  draw, then one Dear PyGui frame. The panel runs with manual callback
  management, so its callbacks execute inside that same loop iteration and the
  simulation core needs no locks.

Controls
- Left click (hold to keep spawning): add dots
- Space: clear all dots
- I/K: connect force up/down, U/J: speed up/down (hold to repeat)
- R: reverse time, P: pause/play, Esc: quit

Running
1) Install dependencies: `pip install -e .`
2) Run this module: `python dots_sim.py` (or the `dots-sim` script)
"""

import argparse
import logging
import random
import sys
import time
from typing import List, Optional

import pygame
import dearpygui.dearpygui as dpg

from dotsim.camera import Camera2D
from dotsim.constants import (
    BACKGROUND_COLOR,
    DOT_COLOR,
    EDGE_COLOR,
    INFO_TEXT_COLOR,
    INFO_TEXT_PADDING,
    INFO_TEXT_SIZE,
    SAFE_COORD_LIMIT,
)
from dotsim.data_models import RenderInstructions
from dotsim.diagnostics import FrameDiagnostics
from dotsim.input_events import (
    KEY_BINDINGS,
    REPEATING_EVENTS,
    InputEvent,
    PointerClick,
    SpawnThrottle,
    event_for_key,
)
from dotsim.logging_config import setup_logging
from dotsim.settings import load_settings
from dotsim.simulation import SimulationController

logger = logging.getLogger("dotsim.app")

# ============================================================
# Drawing helpers
# ============================================================

_cached_font = None


def draw_text(surface, text, x, y, color):
    global _cached_font
    if not pygame.font.get_init():
        pygame.font.init()
    if _cached_font is None:
        try:
            _cached_font = pygame.font.SysFont("consolas", INFO_TEXT_SIZE)
        except (pygame.error, OSError):
            _cached_font = pygame.font.Font(None, INFO_TEXT_SIZE)
    img = _cached_font.render(text, True, color)
    surface.blit(img, (x, y))


def _safe_point(pt):
    try:
        x, y = int(pt[0]), int(pt[1])
    except (TypeError, ValueError, OverflowError):
        return None
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None


def blend(color, background, alpha):
    """Mix color over background; alpha in [0, 1]."""
    a = max(0.0, min(1.0, alpha))
    return tuple(int(bg + (c - bg) * a) for c, bg in zip(color, background))


# ============================================================
# Pygame viewport
# ============================================================

class PygameRenderer:
    """
    Pygame loop: input decoding, one simulation tick, drawing.
    """
    def __init__(self, sim: SimulationController, panel: Optional["ControlsPanel"] = None):
        self.sim = sim
        self.panel = panel
        self.camera = Camera2D()
        self.diagnostics = FrameDiagnostics(sim.settings.diagnostics_interval)
        self.spawn_throttle = SpawnThrottle(sim.settings.drag_spawn_interval_ms)
        self.surface = None
        self.clock = None
        self.pointer_down = False
        self.running = True
        # Key codes of the repeating bindings, resolved once pygame is up
        self._held_keys = {}

    def run(self):
        s = self.sim.settings
        pygame.init()
        pygame.display.set_caption("Dot Connect Simulator")
        self.surface = pygame.display.set_mode((s.view_width, s.view_height), pygame.RESIZABLE)
        self._set_viewport(s.view_width, s.view_height)
        self.clock = pygame.time.Clock()
        self._held_keys = {
            pygame.key.key_code(name): event
            for name, event in KEY_BINDINGS.items()
            if event in REPEATING_EVENTS
        }

        last_time = time.perf_counter()
        try:
            while self.running:
                now = time.perf_counter()
                real_dt = now - last_time
                last_time = now

                self.handle_events(real_dt)
                if not self.running:
                    break

                frame = self.sim.tick(real_dt)
                self.draw(frame)
                self.diagnostics.record(real_dt, frame.dot_count, frame.edge_count)

                if self.panel is not None and not self.panel.render_frame(frame, self.diagnostics):
                    self.running = False

                self.clock.tick(s.target_fps)
        finally:
            pygame.quit()

    def _set_viewport(self, w, h):
        self.camera.set_viewport_size(w, h)
        cw, ch = self.camera.canvas_size()
        self.sim.resize(cw, ch)

    def _dispatch(self, event) -> None:
        if not self.sim.handle(event):
            self.running = False

    def handle_events(self, real_dt):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._dispatch(InputEvent.QUIT)

            elif event.type == pygame.VIDEORESIZE:
                self.surface = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                self._set_viewport(event.w, event.h)

            elif event.type == pygame.KEYDOWN:
                bound = event_for_key(pygame.key.name(event.key))
                # Repeating bindings are polled below so a press is not counted twice
                if bound is not None and bound not in REPEATING_EVENTS:
                    self._dispatch(bound)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.pointer_down = True
                self.spawn_throttle.press()

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self.pointer_down = False
                self.spawn_throttle.release()

        keys = pygame.key.get_pressed()
        for code, bound in self._held_keys.items():
            if keys[code]:
                self._dispatch(bound)

        if self.pointer_down and self.spawn_throttle.ready(real_dt):
            world = self.camera.screen_to_world(pygame.mouse.get_pos())
            self._dispatch(PointerClick(world))

    def draw(self, frame: RenderInstructions):
        surf = self.surface
        surf.fill(BACKGROUND_COLOR)

        for edge in frame.edges:
            start = _safe_point(self.camera.world_to_screen(edge.start))
            end = _safe_point(self.camera.world_to_screen(edge.end))
            if start and end:
                pygame.draw.aaline(surf, blend(EDGE_COLOR, BACKGROUND_COLOR, edge.strength), start, end)

        radius = max(1, int(round(self.sim.settings.dot_size / self.camera.upp)))
        for pos in frame.dots:
            p = _safe_point(self.camera.world_to_screen(pos))
            if p:
                pygame.draw.circle(surf, DOT_COLOR, p, radius)

        draw_text(surf, self.sim.info_text(), INFO_TEXT_PADDING, INFO_TEXT_PADDING, INFO_TEXT_COLOR)
        pygame.display.flip()


# ============================================================
# Dear PyGui controls panel
# ============================================================

class ControlsPanel:
    """
    Dear PyGui window mirroring the keyboard controls.

    Widgets write through the SimulationController so every change goes through
    the same bounded setters as the keyboard.
    """
    SYNC_EVERY_FRAMES = 6

    def __init__(self, sim: SimulationController):
        self.sim = sim
        self._frame = 0
        self._build_ui()

    def _build_ui(self):
        dpg.create_context()
        dpg.configure_app(manual_callback_management=True)
        dpg.create_viewport(title="Dot Connect Simulator - Controls", width=420, height=320)

        with dpg.window(label="Controls", width=400, height=300, pos=(10, 10), tag="main_window"):
            dpg.add_text("", tag="info_text")
            dpg.add_separator()
            dpg.add_slider_float(
                label="Connect force",
                tag="connect_force_slider",
                default_value=self.sim.params.connect_force,
                min_value=0.0,
                max_value=1000.0,
                callback=lambda s, a, u: self.sim.controls.set_connect_force(a),
            )
            dpg.add_slider_float(
                label="Speed",
                tag="speed_slider",
                default_value=self.sim.params.speed_multiplier,
                min_value=0.0,
                max_value=5.0,
                callback=lambda s, a, u: self.sim.controls.set_speed(a),
            )
            with dpg.group(horizontal=True):
                dpg.add_button(label="Pause/Play", callback=lambda: self.sim.handle(InputEvent.TOGGLE_PAUSE))
                dpg.add_button(label="Reverse time", callback=lambda: self.sim.handle(InputEvent.REVERSE_DIRECTION))
                dpg.add_button(label="Clear dots", callback=lambda: self.sim.handle(InputEvent.CLEAR_ALL))
            dpg.add_separator()
            dpg.add_text("", tag="stats_text")

        dpg.setup_dearpygui()
        dpg.show_viewport()

    def render_frame(self, frame: RenderInstructions, diagnostics: FrameDiagnostics) -> bool:
        """Run pending callbacks and draw one panel frame. False once the panel is closed."""
        if not dpg.is_dearpygui_running():
            return False
        dpg.run_callbacks(dpg.get_callback_queue())

        self._frame += 1
        if self._frame % self.SYNC_EVERY_FRAMES == 0:
            self._sync(frame, diagnostics)

        dpg.render_dearpygui_frame()
        return True

    def _sync(self, frame: RenderInstructions, diagnostics: FrameDiagnostics):
        dpg.set_value("info_text", self.sim.info_text())
        dpg.set_value("connect_force_slider", self.sim.params.connect_force)
        dpg.set_value("speed_slider", self.sim.params.speed_multiplier)
        report = diagnostics.last_report
        fps = f"{report.fps:.0f}" if report is not None else "-"
        dpg.set_value("stats_text", f"Dots: {frame.dot_count}  Edges: {frame.edge_count}  FPS: {fps}")

    def close(self):
        dpg.destroy_context()


# ============================================================
# Application Entry
# ============================================================

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive dot connect simulator")
    parser.add_argument("--config", help="JSON settings file overriding the defaults")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", help="also write logs to this file")
    parser.add_argument("--seed", type=int, help="seed for spawn velocities")
    parser.add_argument("--no-panel", action="store_true", help="run without the controls panel")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    settings = load_settings(args.config)
    rng = random.Random(args.seed) if args.seed is not None else None
    sim = SimulationController(settings, rng=rng)

    panel = None if args.no_panel else ControlsPanel(sim)
    renderer = PygameRenderer(sim, panel)
    try:
        renderer.run()
    finally:
        if panel is not None:
            panel.close()
    logger.info("Exited")
    return 0


if __name__ == "__main__":
    sys.exit(main())
