"""Ready-made starting configurations for :func:`generate`."""

from __future__ import annotations

import math

from robinson._constants import THICK_VERTEX_ANGLE, THIN_VERTEX_ANGLE
from robinson.model.geometry import Point, polar_point
from robinson.model.triangle import Triangle
from robinson.model.triangle_type import TriangleType


def default_seed() -> Triangle:
    """The single thin triangle used by the demo host program."""
    return Triangle(
        TriangleType.THIN_LEFT,
        apex=(300.0, 350.0),
        leg_length=100.0,
        rotation=math.pi / 4.0,
    )


def sun(
    centre: Point,
    radius: float,
    *,
    rotation: float = 0.0,
) -> list[Triangle]:
    """Ten thin triangles arranged around a common apex.

    Consecutive triangles share a leg and alternate in chirality, so
    the wheel is mirror-symmetric across every spoke and covers a
    regular decagon of circumradius *radius*.

    Args:
        centre: The shared apex.
        radius: Leg length of every triangle.
        rotation: Altitude direction of the first triangle, in radians.
    """
    triangles = []
    for i in range(10):
        kind = TriangleType.THIN_LEFT if i % 2 == 0 else TriangleType.THIN_RIGHT
        triangles.append(
            Triangle(
                kind,
                apex=centre,
                leg_length=radius,
                rotation=rotation + i * THIN_VERTEX_ANGLE,
            )
        )
    return triangles


def rhombus(
    thin: bool,
    apex: Point,
    leg_length: float,
    rotation: float,
) -> list[Triangle]:
    """Two mirror-image triangles sharing their base.

    Together they cover a Penrose rhombus: thin triangles give the
    36/144 degree rhombus, thick triangles the 72/108 degree one.  The
    first triangle is Left with its apex at *apex*; the second is its
    reflection across the shared base, tagged Right.

    Args:
        thin: Build thin triangles if ``True``, thick ones otherwise.
        apex: Apex of the first triangle, a corner of the rhombus.
        leg_length: Side length of the rhombus.
        rotation: Direction of the diagonal through *apex*, in radians.
    """
    if thin:
        left, right = TriangleType.THIN_LEFT, TriangleType.THIN_RIGHT
        angle = THIN_VERTEX_ANGLE
    else:
        left, right = TriangleType.THICK_LEFT, TriangleType.THICK_RIGHT
        angle = THICK_VERTEX_ANGLE
    altitude = leg_length * math.cos(angle / 2.0)
    opposite = polar_point(apex, 2.0 * altitude, rotation)
    return [
        Triangle(left, apex, leg_length, rotation),
        Triangle(right, opposite, leg_length, rotation + math.pi),
    ]
