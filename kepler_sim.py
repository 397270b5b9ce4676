#!/usr/bin/env python3
"""
Kepler application entry point and renderer/timer coordination.

What this module does
- Builds a Situation from one of the built-in scenes.
- Starts a fixed-rate timer thread that calls Situation.update() every UPDATE_INTERVAL_MS.
- Runs a Pygame loop on the main thread that turns input into Situation mutators and draws
  a snapshot of the state every RENDER_INTERVAL_MS.

Threading model
- SimulationTimer runs in a background thread. Situation.update() holds the situation lock
  for the whole tick.
- The renderer only reads through Situation.snapshot(), which copies under the same lock, so
  a frame never shows a half-updated body list.

Controls
- Space: pause/resume | +/-: zoom | 0: reset view | T: track next body | F: fullscreen
- Arrows or left-drag: pan | Wheel: zoom | Esc/Q: quit

Running
1) Install dependencies: `pip install -e .`
2) Run this module: `python kepler_sim.py --scene kepler`
"""

import argparse
import logging
import math
import threading
import time
from datetime import datetime

import pygame

from kepler.constants import (
    BACKGROUND_COLOR,
    FORCE_VECTOR_COLOR,
    HIGHLIGHT_COLOR,
    MARK_COLOR,
    PAN_STEP,
    RENDER_INTERVAL_MS,
    SAFE_COORD_LIMIT,
    TEXT_COLOR,
    TRAIL_HISTORY,
    UPDATE_INTERVAL_MS,
    VECTOR_MAGNIFICATION,
    VELOCITY_VECTOR_COLOR,
    VIEW_HEIGHT,
    VIEW_WIDTH,
)
from kepler.maths import Coordinate, EuclideanVector
from kepler.presets import build_situation, list_templates
from kepler.situation import Situation, SituationSnapshot

logger = logging.getLogger("kepler_sim")


class SimulationTimer(threading.Thread):
    """Calls Situation.update() at a fixed rate until stopped."""

    def __init__(self, situation: Situation, interval_ms: int = UPDATE_INTERVAL_MS):
        super().__init__(daemon=True, name="simulation-timer")
        self.situation = situation
        self.interval = interval_ms / 1000.0
        self._stop_event = threading.Event()

    def stop(self):
        self._stop_event.set()

    def run(self):
        next_tick = time.perf_counter()
        while not self._stop_event.is_set():
            self.situation.update()
            next_tick += self.interval
            delay = next_tick - time.perf_counter()
            if delay < 0:
                # Fell behind; do not try to catch up with a burst of ticks
                next_tick = time.perf_counter()
                delay = 0
            self._stop_event.wait(delay)


class PygameRenderer:
    """
    Pygame loop: draws bodies, vectors, trail marks and the debug overlay.
    Handles keyboard and mouse input by calling Situation mutators.
    """
    def __init__(self, situation: Situation):
        self.situation = situation
        self.surface = None
        self.clock = None
        self.running = True
        self._fullscreen = False

    def _set_mode(self, fullscreen: bool):
        if fullscreen:
            self.surface = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.surface = pygame.display.set_mode((VIEW_WIDTH, VIEW_HEIGHT), pygame.RESIZABLE)
        self._fullscreen = fullscreen

    def run(self):
        pygame.init()
        pygame.display.set_caption("kepler")
        self._set_mode(self.situation.fullscreen)
        self.clock = pygame.time.Clock()

        while self.running:
            self.handle_events()
            snapshot = self.situation.snapshot()
            if snapshot.fullscreen != self._fullscreen:
                self._set_mode(snapshot.fullscreen)
            self.draw(snapshot)
            self.clock.tick(1000 // RENDER_INTERVAL_MS)

        pygame.quit()

    def handle_events(self):
        sim = self.situation
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE and not self._fullscreen:
                self.surface = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)

            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_q):
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    sim.toggle_pause()
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    sim.zoom_in()
                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    sim.zoom_out()
                elif event.key in (pygame.K_0, pygame.K_KP0):
                    sim.zoom_reset()
                elif event.key == pygame.K_t:
                    sim.track_next()
                elif event.key == pygame.K_f:
                    sim.toggle_fullscreen()
                elif event.key == pygame.K_LEFT:
                    sim.pan(EuclideanVector(PAN_STEP, 0.0))
                elif event.key == pygame.K_RIGHT:
                    sim.pan(EuclideanVector(-PAN_STEP, 0.0))
                elif event.key == pygame.K_UP:
                    sim.pan(EuclideanVector(0.0, PAN_STEP))
                elif event.key == pygame.K_DOWN:
                    sim.pan(EuclideanVector(0.0, -PAN_STEP))

            elif event.type == pygame.MOUSEWHEEL:
                if event.y > 0:
                    sim.zoom_in()
                elif event.y < 0:
                    sim.zoom_out()

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                sim.drag_started(Coordinate.from_tuple(event.pos))

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                sim.drag_ended()

            elif event.type == pygame.MOUSEMOTION and event.buttons[0]:
                sim.dragging_to(Coordinate.from_tuple(event.pos))

    def world_to_screen(self, snapshot: SituationSnapshot, position: Coordinate):
        w, h = self.surface.get_size()
        shifted = EuclideanVector.towards(position) + snapshot.center_translation
        return (w / 2 + shifted.dx * snapshot.zoom, h / 2 + shifted.dy * snapshot.zoom)

    def draw(self, snapshot: SituationSnapshot):
        surf = self.surface
        surf.fill(BACKGROUND_COLOR)

        # Trail marks fade out with age
        for mark in snapshot.marks:
            p = _safe_point(self.world_to_screen(snapshot, mark.position))
            if p:
                fade = max(0.0, 1.0 - mark.age / TRAIL_HISTORY)
                color = tuple(int(c * fade) for c in MARK_COLOR)
                surf.set_at(p, color)

        for b in snapshot.bodies:
            center = _safe_point(self.world_to_screen(snapshot, b.position))
            if center is None:
                continue
            vis_r = max(1, int(b.radius * snapshot.zoom))
            pygame.draw.circle(surf, b.color, center, vis_r, 1)
            if b.highlighted:
                pygame.draw.circle(surf, HIGHLIGHT_COLOR, center, vis_r + 4, 1)

            draw_vector(surf, center, b.velocity, VELOCITY_VECTOR_COLOR)
            for force in b.forces:
                draw_vector(surf, center, force, FORCE_VECTOR_COLOR)

        draw_debug(surf, snapshot)
        pygame.display.flip()


_cached_font = None

def draw_text(surface, text, x, y, color):
    global _cached_font
    if _cached_font is None:
        _cached_font = pygame.font.Font(None, 18)
    img = _cached_font.render(text, True, color)
    surface.blit(img, (x, y))


def draw_debug(surface, snapshot: SituationSnapshot):
    tracked = "-" if snapshot.tracked is None else snapshot.bodies[snapshot.tracked].name
    lines = [
        datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        f"bodies: {len(snapshot.bodies)}",
        f"forces: {snapshot.force_count}",
        f"ticks: {snapshot.updates}",
        f"zoom: {snapshot.zoom:.3f}",
        f"tracking: {tracked}",
    ]
    if snapshot.paused:
        lines.append("PAUSED")
    for i, line in enumerate(lines):
        draw_text(surface, line, 10, 10 + 14 * i, TEXT_COLOR)


def _safe_point(pt):
    try:
        x, y = int(pt[0]), int(pt[1])
    except (OverflowError, ValueError):
        # Infinite or NaN coordinates
        return None
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None


def draw_vector(surface, origin, vector: EuclideanVector, color):
    if vector == 0.0:
        return
    tip = _safe_point((origin[0] + vector.dx * VECTOR_MAGNIFICATION,
                       origin[1] + vector.dy * VECTOR_MAGNIFICATION))
    if tip is None:
        return
    pygame.draw.line(surface, color, origin, tip, 1)
    draw_arrow_head(surface, tip, origin, color)


def draw_arrow_head(surface, tip, tail, color):
    dx = tip[0] - tail[0]
    dy = tip[1] - tail[1]
    if dx == 0 and dy == 0:
        return
    ang = math.atan2(dy, dx)
    size = 6
    left = (tip[0] - size * math.cos(ang - math.pi / 6), tip[1] - size * math.sin(ang - math.pi / 6))
    right = (tip[0] - size * math.cos(ang + math.pi / 6), tip[1] - size * math.sin(ang + math.pi / 6))
    left_s = _safe_point(left)
    right_s = _safe_point(right)
    if left_s and right_s:
        pygame.draw.polygon(surface, color, [tip, left_s, right_s])


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Point masses under mutual gravity.")
    parser.add_argument("--scene", default="kepler", choices=list_templates(), help="built-in scene to load")
    parser.add_argument("--paused", action="store_true", help="start with the simulation paused")
    parser.add_argument("--fullscreen", action="store_true", help="start in fullscreen")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="logging verbosity")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    situation = build_situation(args.scene)
    if args.paused:
        situation.toggle_pause()
    if args.fullscreen:
        situation.toggle_fullscreen()
    logger.info("Loaded scene %r with %d bodies", args.scene, len(situation.bodies))

    timer = SimulationTimer(situation)
    timer.start()

    renderer = PygameRenderer(situation)
    try:
        renderer.run()
    finally:
        timer.stop()
        timer.join(timeout=2.0)
        logger.info("Stopped after %d ticks", situation.updates)


if __name__ == "__main__":
    main()
