#!/usr/bin/env python3
"""
Shared constants for Kepler (simulation units: one tick is one unit of time).

Keeping constants in one place helps ensure values are consistent across the
codebase and makes tuning easier.
"""

# Physics
GRAVITATIONAL_CONSTANT = 10.0  # tunable, not the SI value
DENSITY = 3.0  # every body is a sphere of this density

# Timers
REFRESH_RATE = 50  # simulation ticks per second
UPDATE_INTERVAL_MS = 1000 // REFRESH_RATE
RENDER_INTERVAL_MS = 40

# Trails
MARK_INTERVAL = REFRESH_RATE // 10  # ticks between two trail samples
TRAIL_HISTORY = 250  # a mark is dropped once its age reaches this

# View
VIEW_WIDTH = 1024
VIEW_HEIGHT = 768
ZOOM_BASE = 1.1
MIN_ZOOM_LEVEL = -40
MAX_ZOOM_LEVEL = 40
VECTOR_MAGNIFICATION = 25.0
PAN_STEP = 20.0  # pixels per arrow key press

# Colours
BACKGROUND_COLOR = (13, 13, 13)
BODY_COLOR = (255, 255, 255)
HIGHLIGHT_COLOR = (255, 255, 0)
VELOCITY_VECTOR_COLOR = (0, 0, 255)
FORCE_VECTOR_COLOR = (255, 0, 0)
MARK_COLOR = (160, 160, 160)
TEXT_COLOR = (255, 255, 255)

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000
