#!/usr/bin/env python3
"""
Data models for Kepler.

This module defines the Body and Mark types shared between physics, rendering, and UI.

Units and usage
- position and velocity are in simulation units; one tick is one unit of time, so a
  force divided by mass is added straight onto the velocity.
- forces holds one pull per other body in the Situation, rebuilt every tick.
- Bodies are built fluently: Body().at(...).moving(...).with_mass(...).named(...)
- Access to Body instances is coordinated by Situation using a lock.
"""
import logging
import math
from dataclasses import dataclass, field
from typing import List, Tuple

from .constants import BODY_COLOR, DENSITY, GRAVITATIONAL_CONSTANT
from .maths import Coordinate, EuclideanVector

logger = logging.getLogger(__name__)


def radius_for_mass(mass: float) -> float:
    """Radius of a sphere of the given mass at the fixed DENSITY."""
    volume = mass / DENSITY
    return ((3.0 / (4.0 * math.pi)) * volume) ** (1.0 / 3.0)


@dataclass(eq=False)
class Body:
    """
    A point mass taking part in the simulation.

    Fields:
    - name: Identifier for display; plays no part in physics
    - position: Current Coordinate
    - mass: Must be > 0 before the body is pulled or updated; set through with_mass
    - radius: Derived from mass, used for rendering only
    - velocity: EuclideanVector moved per tick
    - forces: Pulls experienced during the last tick, one per other body
    - highlighted: Set by the Situation for the tracked body
    - color: RGB tuple used for rendering

    Bodies compare by identity: two bodies are never equal just because their
    values are.
    """
    name: str = ""
    position: Coordinate = field(default_factory=Coordinate)
    mass: float = 0.0
    radius: float = 0.0
    velocity: EuclideanVector = field(default_factory=EuclideanVector)
    forces: List[EuclideanVector] = field(default_factory=list)
    highlighted: bool = False
    color: Tuple[int, int, int] = BODY_COLOR

    def at(self, position: Coordinate) -> "Body":
        self.position = position
        return self

    def moving(self, velocity: EuclideanVector) -> "Body":
        self.velocity = velocity
        return self

    def named(self, name: str) -> "Body":
        self.name = str(name)
        return self

    def colored(self, color: Tuple[int, int, int]) -> "Body":
        self.color = color
        return self

    def with_mass(self, mass: float) -> "Body":
        """Set the mass and recompute the radius; mass must be positive."""
        mass = float(mass)
        if not mass > 0:
            raise ValueError(f"mass must be positive, got {mass!r}")
        self.mass = mass
        self.radius = radius_for_mass(mass)
        return self

    def update(self) -> None:
        """
        Advance one tick.

        The position moves by the velocity held before this call, then every
        stored force is integrated into the velocity (tick duration is 1).
        """
        self.position = self.position + self.velocity

        for force in self.forces:
            acceleration = force / self.mass
            self.velocity = self.velocity + acceleration

    def pull_from(self, other: "Body") -> EuclideanVector:
        """
        Gravitational force exerted on this body by other.

        Magnitude is G * m_self * m_other / distance^2, directed from this body
        towards other. Bodies whose squared distance underflows to 0 are treated
        as coincident and exert no force on each other.
        """
        joining_vector = EuclideanVector.between(self.position, other.position)
        dist2 = joining_vector.dx * joining_vector.dx + joining_vector.dy * joining_vector.dy
        if dist2 == 0:
            logger.warning("Bodies %r and %r coincide at %s; pull ignored",
                           self.name, other.name, self.position.as_tuple())
            return EuclideanVector()

        return joining_vector.versor() * ((self.mass * other.mass) / dist2) * GRAVITATIONAL_CONSTANT

    def add_pull_from(self, other: "Body") -> None:
        self.forces.append(self.pull_from(other))


@dataclass
class Mark:
    """A trail sample: where a body was, and how many ticks ago."""
    position: Coordinate
    age: int = 0
