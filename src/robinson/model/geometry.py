"""Planar helpers shared by the triangle model and the substitution engine.

Angles follow the mathematical convention (counter-clockwise from the
positive x axis) while points live in screen coordinates, where y grows
downward.  :func:`polar_point` and :func:`direction` are exact inverses
of each other and are the only places where that reflection is applied.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from robinson._constants import TAU

#: A 2-D point as an ``(x, y)`` tuple in screen coordinates.
Point = tuple[float, float]


def normalise_angle(theta: float) -> float:
    """Wrap an angle into ``[0, 2*pi)``.

    Angles are cyclic, so values outside the range are wrapped by whole
    turns rather than clamped.

    Raises:
        ValueError: If *theta* is NaN or infinite.
    """
    if not math.isfinite(theta):
        raise ValueError(f"angle must be finite, got {theta}")
    wrapped = theta % TAU
    # A tiny negative angle wraps to exactly TAU in floating point.
    if wrapped >= TAU:
        wrapped = 0.0
    return wrapped


def polar_point(origin: Point, length: float, theta: float) -> Point:
    """Return the point *length* away from *origin* in direction *theta*.

    The y component is subtracted because screen y grows downward.
    """
    return (
        origin[0] + length * math.cos(theta),
        origin[1] - length * math.sin(theta),
    )


def direction(origin: Point, target: Point) -> float:
    """Return the direction angle from *origin* to *target*.

    This inverts :func:`polar_point`: for any ``length > 0``,
    ``direction(o, polar_point(o, length, theta))`` equals
    ``normalise_angle(theta)`` up to rounding.
    """
    return normalise_angle(
        math.atan2(origin[1] - target[1], target[0] - origin[0])
    )


def distance(p: Point, q: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(q[0] - p[0], q[1] - p[1])


def lerp(p: Point, q: Point, t: float) -> Point:
    """Return the point a fraction *t* of the way from *p* to *q*."""
    return (p[0] + (q[0] - p[0]) * t, p[1] + (q[1] - p[1]) * t)


def midpoint(p: Point, q: Point) -> Point:
    return lerp(p, q, 0.5)


def shoelace_area(points: Sequence[Point]) -> float:
    """Unsigned area of a simple polygon given its vertices in order."""
    n = len(points)
    twice_area = 0.0
    for i in range(n):
        x0, y0 = points[i]
        x1, y1 = points[(i + 1) % n]
        twice_area += x0 * y1 - x1 * y0
    return abs(twice_area) / 2.0
