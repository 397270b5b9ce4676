#!/usr/bin/env python3
"""
Built-in scenes.

Each template returns a fresh list of bodies; build_situation wraps one into a Situation.
Screen y grows downwards, so a positive dy moves a body towards the bottom of the window.
"""
import math
from typing import Callable, Dict, List

from .data_models import Body
from .maths import Coordinate, EuclideanVector
from .physics import circular_orbit_velocity
from .situation import Situation


def template_kepler() -> List[Body]:
    """A heavy central body with two light satellites."""
    return [
        Body().named("Sun").with_mass(70.0).at(Coordinate(0.0, 0.0)).moving(EuclideanVector(0.0, 0.0))
        .colored((255, 204, 0)),
        Body().named("Inner").with_mass(1.0).at(Coordinate(150.0, 0.0)).moving(EuclideanVector(0.0, 2.0))
        .colored((100, 149, 237)),
        Body().named("Outer").with_mass(1.0).at(Coordinate(-400.0, 0.0)).moving(EuclideanVector(0.0, 1.0))
        .colored((188, 39, 50)),
    ]


def template_binary() -> List[Body]:
    """
    Two equal masses in mutual circular orbit around their centre of mass.
    Each one orbits at radius d/2 under a pull G*m^2/d^2, so v = sqrt(G*m / (2*d)).
    """
    m = 20.0
    d = 200.0
    v = circular_orbit_velocity(m, 2.0 * d)
    return [
        Body().named("A").with_mass(m).at(Coordinate(-d / 2, 0.0)).moving(EuclideanVector(0.0, -v))
        .colored((255, 120, 120)),
        Body().named("B").with_mass(m).at(Coordinate(d / 2, 0.0)).moving(EuclideanVector(0.0, v))
        .colored((120, 120, 255)),
    ]


def template_system() -> List[Body]:
    """A central mass with light bodies on circular orbits at increasing radii."""
    central_mass = 100.0
    bodies = [Body().named("Star").with_mass(central_mass).colored((255, 204, 0))]
    for k, radius in enumerate((120.0, 200.0, 300.0, 420.0)):
        # Spread the starting angles so the bodies do not line up
        angle = k * math.pi / 2.0
        v = circular_orbit_velocity(central_mass, radius)
        position = Coordinate(radius * math.cos(angle), radius * math.sin(angle))
        velocity = EuclideanVector(-v * math.sin(angle), v * math.cos(angle))
        bodies.append(Body().named(f"P{k + 1}").with_mass(0.5).at(position).moving(velocity))
    return bodies


TEMPLATES: Dict[str, Callable[[], List[Body]]] = {
    "kepler": template_kepler,
    "binary": template_binary,
    "system": template_system,
}


def list_templates() -> List[str]:
    return sorted(TEMPLATES)


def build_situation(name: str) -> Situation:
    """Return a new Situation holding the named scene; unknown names raise KeyError."""
    try:
        template = TEMPLATES[name]
    except KeyError:
        raise KeyError(f"unknown scene {name!r}; known scenes: {', '.join(list_templates())}") from None

    situation = Situation()
    for body in template():
        situation.add(body)
    return situation
