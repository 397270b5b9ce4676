#!/usr/bin/env python3
"""
Core Physics Engine for Kepler

Responsibilities
- Compute the pull every body experiences from every other body (direct summation).
- Advance body states with the engine's first-order stepping: position moves with the
  previous velocity, then the velocity takes the stored forces (tick duration 1).
- Provide small helpers for common orbital computations and diagnostics.

Numerical notes
- Complexity: pull computation is O(N^2) per tick over all ordered pairs (i, j), i != j.
  Each body stores its own pull, so a pair is evaluated twice.
- Aliasing: compute_pulls only reads bodies and returns a fresh buffer, so the caller can
  mutate body i afterwards without any other body observing a half-updated state.
- Energy is not conserved exactly; the stepping is deliberately first order.

Threading
- This module is pure compute and stateless. It is used by Situation, which guards
  shared data with a lock.
"""

import math
from typing import List, Sequence

from .constants import GRAVITATIONAL_CONSTANT
from .data_models import Body
from .maths import EuclideanVector


def compute_pulls(bodies: Sequence[Body]) -> List[List[EuclideanVector]]:
    """
    Compute the pulls acting on every body.

    Args:
        bodies: Bodies in simulation order (read only).

    Returns:
        One list per body, in the same order as inputs, holding the pull of every
        other body in index order (len(bodies) - 1 entries each).
    """
    pulls: List[List[EuclideanVector]] = []
    for i, body in enumerate(bodies):
        pulls.append([body.pull_from(other) for j, other in enumerate(bodies) if j != i])
    return pulls


def advance(bodies: Sequence[Body]) -> None:
    """Move every body one tick using the forces it stored last tick."""
    for body in bodies:
        body.update()


def total_momentum(bodies: Sequence[Body]) -> EuclideanVector:
    """Sum of mass * velocity over all bodies."""
    total = EuclideanVector()
    for body in bodies:
        total = total + body.velocity * body.mass
    return total


def circular_orbit_velocity(central_mass: float, orbital_radius: float) -> float:
    """
    Calculate the speed needed for a circular orbit.

    The pull G * M * m / r^2 has to provide the centripetal force m * v^2 / r,
    therefore v = sqrt(G * M / r).

    Args:
        central_mass: Mass of the central body
        orbital_radius: Distance from the central body

    Returns:
        Orbital speed in simulation units per tick
    """
    if orbital_radius <= 0:
        return 0.0

    return math.sqrt(GRAVITATIONAL_CONSTANT * central_mass / orbital_radius)
