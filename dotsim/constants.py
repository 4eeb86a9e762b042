#!/usr/bin/env python3
"""
Shared constants for Dot Connect Simulator (canvas units unless stated otherwise).

Canvas units are screen pixels at a 1:1 camera; the canvas origin is the
centre of the window with y pointing up.
"""

# Simulation defaults
CONNECT_FORCE = 300.0  # distance below which two dots are joined
CONNECT_FORCE_STEP = 2.0
SPEED = 1.0  # global speed multiplier
SPEED_STEP = 0.04
MIN_VEL = -600.0  # units/s, per-axis spawn velocity range
MAX_VEL = 600.0

# Frame controls
MAX_FRAME_DT = 0.25  # s; longest step a single tick may integrate
TARGET_FPS = 60
DRAG_SPAWN_INTERVAL_MS = 70  # while the pointer button is held
DIAGNOSTICS_INTERVAL = 1.0  # s between frame diagnostics log lines

# Proximity
EDGE_BUILDER = "auto"  # "pairwise" | "grid" | "auto"
AUTO_GRID_THRESHOLD = 48  # dot count at which "auto" switches to the grid

# Rendering (viewport)
VIEW_WIDTH = 1100
VIEW_HEIGHT = 800
DOT_SIZE = 6.0  # px radius
BACKGROUND_COLOR = (10, 12, 18)
DOT_COLOR = (238, 130, 238)
EDGE_COLOR = (237, 130, 237)
INFO_TEXT_COLOR = (250, 235, 215)
INFO_TEXT_SIZE = 16
INFO_TEXT_PADDING = 6

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000
