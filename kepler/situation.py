#!/usr/bin/env python3
"""
The simulated system: bodies, trail marks and view state, advanced one tick at a time.

Tick algorithm (Situation.update)
1) Every body moves with the velocity it had and integrates the forces it stored on the
   previous tick.
2) A read-only pass computes, from the positions reached in step 1, the pull of every
   other body on each body; each body's force list is then replaced by its own buffer.
3) Trail marks are aged and pruned, new marks are sampled every MARK_INTERVAL ticks,
   and the tick counter increments.

While paused, update() does nothing at all.

Threading model
- The tick timer and the renderer run on different threads. Every mutator and update()
  hold self.lock; readers should take the lock too or use snapshot(), which copies the
  state under the lock.
"""
import logging
import threading
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .camera import Camera
from .constants import MARK_INTERVAL, REFRESH_RATE, TRAIL_HISTORY
from .data_models import Body, Mark
from .maths import Coordinate, EuclideanVector
from .physics import advance, compute_pulls

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BodySnapshot:
    name: str
    position: Coordinate
    mass: float
    radius: float
    velocity: EuclideanVector
    forces: Tuple[EuclideanVector, ...]
    highlighted: bool
    color: Tuple[int, int, int]


@dataclass(frozen=True)
class SituationSnapshot:
    """Read-only copy of everything the renderer draws."""
    bodies: Tuple[BodySnapshot, ...]
    marks: Tuple[Mark, ...]
    updates: int
    zoom: float
    paused: bool
    fullscreen: bool
    tracked: Optional[int]
    center_translation: EuclideanVector

    @property
    def force_count(self) -> int:
        return sum(len(b.forces) for b in self.bodies)


class Situation:
    def __init__(self):
        self.lock = threading.RLock()
        self.bodies: List[Body] = []
        self.marks: List[Mark] = []
        self.updates = 0
        self.paused = False
        self.camera = Camera()

    def with_body(self, body: Body) -> "Situation":
        self.add(body)
        return self

    def add(self, body: Body) -> None:
        """Append a body; its mass must already be positive (see Body.with_mass)."""
        if not body.mass > 0:
            raise ValueError(f"body {body.name!r} has non-positive mass {body.mass!r}")
        with self.lock:
            self.bodies.append(body)
        logger.info("Added body %r (mass=%s) at %s", body.name, body.mass, body.position.as_tuple())

    def update(self) -> None:
        """Advance exactly one tick, unless paused."""
        with self.lock:
            if self.paused:
                return

            advance(self.bodies)
            pulls = compute_pulls(self.bodies)
            for body, forces in zip(self.bodies, pulls):
                body.forces = forces

            self._update_marks()
            self.updates += 1

            if self.updates % REFRESH_RATE == 0:
                logger.debug("tick=%d bodies=%d forces=%d marks=%d",
                             self.updates, len(self.bodies), self.count_forces(), len(self.marks))

    def _update_marks(self) -> None:
        for mark in self.marks:
            mark.age += 1
        self.marks = [m for m in self.marks if m.age < TRAIL_HISTORY]

        if self.updates % MARK_INTERVAL == 0:
            self.marks.extend(Mark(position=b.position) for b in self.bodies)

    def count_forces(self) -> int:
        with self.lock:
            return sum(len(body.forces) for body in self.bodies)

    # View state

    @property
    def zoom(self) -> float:
        return self.camera.zoom

    @property
    def fullscreen(self) -> bool:
        return self.camera.fullscreen

    @property
    def tracked(self) -> Optional[int]:
        return self.camera.tracked

    def toggle_pause(self) -> None:
        with self.lock:
            self.paused = not self.paused
            logger.debug("Simulation %s at tick %d", "paused" if self.paused else "resumed", self.updates)

    def toggle_fullscreen(self) -> None:
        with self.lock:
            self.camera.toggle_fullscreen()

    def zoom_in(self) -> None:
        with self.lock:
            self.camera.zoom_in()

    def zoom_out(self) -> None:
        with self.lock:
            self.camera.zoom_out()

    def zoom_reset(self) -> None:
        with self.lock:
            self.camera.zoom_reset()

    def pan(self, delta: EuclideanVector) -> None:
        with self.lock:
            self.camera.pan(delta)

    def drag_started(self, at: Coordinate) -> None:
        with self.lock:
            self.camera.drag_started(at)

    def dragging_to(self, at: Coordinate) -> None:
        with self.lock:
            self.camera.dragging_to(at)

    def drag_ended(self) -> None:
        with self.lock:
            self.camera.drag_ended()

    def track_next(self) -> Optional[int]:
        with self.lock:
            tracked = self.camera.track_next(len(self.bodies))
            for i, body in enumerate(self.bodies):
                body.highlighted = i == tracked
            logger.debug("Tracking %s", "nothing" if tracked is None else self.bodies[tracked].name or tracked)
            return tracked

    def center_translation(self) -> EuclideanVector:
        with self.lock:
            return self.camera.center_translation(self.bodies)

    def snapshot(self) -> SituationSnapshot:
        with self.lock:
            bodies = tuple(
                BodySnapshot(
                    name=b.name,
                    position=b.position,
                    mass=b.mass,
                    radius=b.radius,
                    velocity=b.velocity,
                    forces=tuple(b.forces),
                    highlighted=b.highlighted,
                    color=b.color,
                )
                for b in self.bodies
            )
            return SituationSnapshot(
                bodies=bodies,
                marks=tuple(Mark(m.position, m.age) for m in self.marks),
                updates=self.updates,
                zoom=self.camera.zoom,
                paused=self.paused,
                fullscreen=self.camera.fullscreen,
                tracked=self.camera.tracked,
                center_translation=self.camera.center_translation(self.bodies),
            )
