#!/usr/bin/env python3
"""
View state for the 2D viewport: zoom, pan, drag, fullscreen and body tracking.

None of this affects physics; the renderer reads it to place bodies on screen.
"""
from typing import Optional, Sequence

from .constants import MAX_ZOOM_LEVEL, MIN_ZOOM_LEVEL, ZOOM_BASE
from .data_models import Body
from .maths import Coordinate, EuclideanVector, clamp


class Camera:
    """
    Zoom is stored as an integer exponent of ZOOM_BASE; the translation is kept in
    world units so that panning feels the same at every zoom level.
    """

    def __init__(self):
        self.zoom_level = 0
        self.translation = EuclideanVector()
        self.drag_anchor: Optional[Coordinate] = None
        self.fullscreen = False
        self.tracked: Optional[int] = None

    @property
    def zoom(self) -> float:
        return ZOOM_BASE ** self.zoom_level

    def zoom_in(self) -> None:
        self.zoom_level = int(clamp(self.zoom_level + 1, MIN_ZOOM_LEVEL, MAX_ZOOM_LEVEL))

    def zoom_out(self) -> None:
        self.zoom_level = int(clamp(self.zoom_level - 1, MIN_ZOOM_LEVEL, MAX_ZOOM_LEVEL))

    def zoom_reset(self) -> None:
        self.zoom_level = 0
        self.translation = EuclideanVector()

    def pan(self, delta: EuclideanVector) -> None:
        """Shift the view by a screen-space delta."""
        self.translation = self.translation + delta / self.zoom

    def drag_started(self, at: Coordinate) -> None:
        self.drag_anchor = at

    def dragging_to(self, at: Coordinate) -> None:
        if self.drag_anchor is None:
            self.drag_anchor = at
            return
        self.pan(at - self.drag_anchor)
        self.drag_anchor = at

    def drag_ended(self) -> None:
        self.drag_anchor = None

    def toggle_fullscreen(self) -> None:
        self.fullscreen = not self.fullscreen

    def track_next(self, body_count: int) -> Optional[int]:
        """Cycle the tracked index through 0..body_count-1, then back to None."""
        if self.tracked is None:
            nxt = 0
        else:
            nxt = self.tracked + 1
        self.tracked = nxt if nxt < body_count else None
        return self.tracked

    def center_translation(self, bodies: Sequence[Body]) -> EuclideanVector:
        """Pan vector to apply before drawing; follows the tracked body if any."""
        if self.tracked is not None and self.tracked < len(bodies):
            return -EuclideanVector.towards(bodies[self.tracked].position)
        return self.translation
