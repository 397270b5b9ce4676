import pytest

from kepler.camera import Camera
from kepler.constants import MAX_ZOOM_LEVEL, MIN_ZOOM_LEVEL, ZOOM_BASE
from kepler.data_models import Body
from kepler.maths import Coordinate, EuclideanVector


def test_zoom_is_power_of_zoom_base():
    camera = Camera()
    assert camera.zoom == 1.0
    camera.zoom_in()
    camera.zoom_in()
    assert camera.zoom == pytest.approx(ZOOM_BASE ** 2)
    camera.zoom_out()
    camera.zoom_out()
    camera.zoom_out()
    assert camera.zoom == pytest.approx(ZOOM_BASE ** -1)


def test_zoom_level_is_bounded():
    camera = Camera()
    for _ in range(MAX_ZOOM_LEVEL + 5):
        camera.zoom_in()
    assert camera.zoom_level == MAX_ZOOM_LEVEL
    for _ in range(MAX_ZOOM_LEVEL - MIN_ZOOM_LEVEL + 5):
        camera.zoom_out()
    assert camera.zoom_level == MIN_ZOOM_LEVEL


def test_zoom_reset_restores_defaults():
    camera = Camera()
    camera.zoom_in()
    camera.pan(EuclideanVector(10.0, 0.0))
    camera.zoom_reset()
    assert camera.zoom_level == 0
    assert camera.translation == EuclideanVector(0.0, 0.0)


def test_pan_is_scaled_by_zoom():
    camera = Camera()
    camera.zoom_level = 1
    camera.pan(EuclideanVector(ZOOM_BASE * 10.0, 0.0))
    assert camera.translation.dx == pytest.approx(10.0)
    assert camera.translation.dy == 0.0


def test_dragging_accumulates_from_anchor():
    camera = Camera()
    camera.drag_started(Coordinate(100.0, 100.0))
    camera.dragging_to(Coordinate(110.0, 95.0))
    camera.dragging_to(Coordinate(120.0, 90.0))
    assert camera.translation == EuclideanVector(20.0, -10.0)
    assert camera.drag_anchor == Coordinate(120.0, 90.0)
    camera.drag_ended()
    assert camera.drag_anchor is None


def test_dragging_without_anchor_only_sets_anchor():
    camera = Camera()
    camera.dragging_to(Coordinate(5.0, 5.0))
    assert camera.translation == EuclideanVector(0.0, 0.0)
    assert camera.drag_anchor == Coordinate(5.0, 5.0)


def test_toggle_fullscreen():
    camera = Camera()
    camera.toggle_fullscreen()
    assert camera.fullscreen
    camera.toggle_fullscreen()
    assert not camera.fullscreen


def test_track_next_ring():
    camera = Camera()
    assert [camera.track_next(3) for _ in range(7)] == [0, 1, 2, None, 0, 1, 2]
    assert Camera().track_next(0) is None


def test_center_translation_uses_pan_when_not_tracking():
    camera = Camera()
    camera.pan(EuclideanVector(1.0, 2.0))
    assert camera.center_translation([]) == EuclideanVector(1.0, 2.0)


def test_center_translation_negates_tracked_position():
    camera = Camera()
    bodies = [Body().at(Coordinate(7.0, -3.0)).with_mass(1.0)]
    camera.track_next(len(bodies))
    assert camera.center_translation(bodies) == EuclideanVector(-7.0, 3.0)
