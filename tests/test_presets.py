import pytest

from kepler.physics import circular_orbit_velocity
from kepler.presets import TEMPLATES, build_situation, list_templates, template_binary


def test_list_templates_is_sorted():
    assert list_templates() == sorted(TEMPLATES)
    assert "kepler" in list_templates()


@pytest.mark.parametrize("name", sorted(TEMPLATES))
def test_every_template_builds_a_runnable_situation(name):
    situation = build_situation(name)
    assert len(situation.bodies) >= 2
    assert all(b.mass > 0 for b in situation.bodies)
    situation.update()
    for body in situation.bodies:
        assert len(body.forces) == len(situation.bodies) - 1


def test_templates_return_fresh_bodies():
    first = TEMPLATES["kepler"]()
    second = TEMPLATES["kepler"]()
    assert all(a is not b for a, b in zip(first, second))


def test_binary_has_zero_total_momentum():
    a, b = template_binary()
    assert a.velocity.dy * a.mass + b.velocity.dy * b.mass == pytest.approx(0.0)


def test_unknown_scene_raises():
    with pytest.raises(KeyError, match="unknown scene"):
        build_situation("nope")


def test_circular_orbit_velocity():
    assert circular_orbit_velocity(40.0, 100.0) == pytest.approx(2.0)
    assert circular_orbit_velocity(40.0, 0.0) == 0.0
