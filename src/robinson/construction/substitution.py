"""Robinson triangle substitution: one parent into two children.

Each parent is cut along a single segment into a thin and a thick
triangle.  The cut starts at the parent's *pivot* base vertex (the
first base point for Left types, the second for Right types) and ends
at a golden-ratio split point:

- A thin parent is cut from the pivot to the point ``1/phi`` of the
  way along the opposite leg, measured from the apex.  The pivot
  becomes the apex of the thin child and the split point the apex of
  the thick child.
- A thick parent is cut from the apex to the point ``1/phi`` of the
  way along the base, measured from the pivot.  The pivot becomes the
  apex of the thin child and the split point the apex of the thick
  child.

Child leg lengths are measured from the constructed points and child
rotations are the directions from each child's apex to the midpoint of
its own base, so children are rebuilt from geometry rather than from
fixed offsets against the parent.
"""

from __future__ import annotations

import math
from types import MappingProxyType

from robinson._constants import PHI
from robinson.model.geometry import Point, direction, distance, lerp, midpoint
from robinson.model.triangle import DegenerateTriangleError, Triangle
from robinson.model.triangle_type import TriangleType

SUBSTITUTION_RULES: MappingProxyType[
    TriangleType, tuple[TriangleType, TriangleType]
] = MappingProxyType({
    TriangleType.THIN_LEFT: (TriangleType.THICK_RIGHT, TriangleType.THIN_LEFT),
    TriangleType.THIN_RIGHT: (TriangleType.THICK_LEFT, TriangleType.THIN_RIGHT),
    TriangleType.THICK_LEFT: (TriangleType.THIN_RIGHT, TriangleType.THICK_LEFT),
    TriangleType.THICK_RIGHT: (TriangleType.THIN_LEFT, TriangleType.THICK_RIGHT),
})
"""Child types ``(child_a, child_b)`` keyed by parent type."""


class SubstitutionError(ValueError):
    """Raised when a triangle cannot be decomposed into valid children.

    Geometry is deterministic, so the same input always fails the same
    way.  The offending parent is kept on :attr:`triangle`.

    Attributes:
        triangle: The parent triangle whose decomposition failed.
    """

    def __init__(self, triangle: Triangle, reason: str) -> None:
        super().__init__(f"cannot decompose {triangle.describe()}: {reason}")
        self.triangle = triangle


def _pivot_and_other(triangle: Triangle) -> tuple[Point, Point]:
    p1, p2 = triangle.base_points()
    if triangle.type.is_left:
        return p1, p2
    return p2, p1


def split_point(triangle: Triangle) -> Point:
    """Return the golden-ratio point where *triangle* is cut.

    For thin types this lies on the leg from the apex to the non-pivot
    base vertex, ``leg_length / phi`` from the apex.  For thick types
    it lies on the base, ``leg_length`` from the pivot.
    """
    pivot, other = _pivot_and_other(triangle)
    if triangle.type.is_thin:
        return lerp(triangle.apex, other, 1.0 / PHI)
    return lerp(pivot, other, 1.0 / PHI)


def _child(
    triangle_type: TriangleType,
    apex: Point,
    base: tuple[Point, Point],
    leg_length: float,
) -> Triangle:
    rotation = direction(apex, midpoint(*base))
    return Triangle(triangle_type, apex, leg_length, rotation)


def decompose(triangle: Triangle) -> tuple[Triangle, Triangle]:
    """Split *triangle* into its two Robinson children.

    The children's types follow :data:`SUBSTITUTION_RULES`.  Their
    union covers the parent exactly and the two children share one
    full edge: the segment from the split point to the pivot for thin
    parents, and from the split point to the parent apex for thick
    parents.

    Args:
        triangle: The parent triangle.

    Returns:
        ``(child_a, child_b)`` where *child_a* is the child of the
        other shape and *child_b* the child of the parent's shape.

    Raises:
        SubstitutionError: If a child would have a non-finite or
            non-positive leg length, or a non-finite position or
            rotation.
    """
    type_a, type_b = SUBSTITUTION_RULES[triangle.type]
    apex = triangle.apex
    pivot, other = _pivot_and_other(triangle)
    split = split_point(triangle)

    if not all(math.isfinite(c) for c in (*split, *pivot, *other)):
        raise SubstitutionError(triangle, "non-finite vertex coordinates")

    try:
        if triangle.type.is_thin:
            # Thick child fills the apex corner, thin child the base.
            child_a = _child(
                type_a, split, (apex, pivot), distance(split, apex),
            )
            child_b = _child(
                type_b, pivot, (other, split), distance(pivot, split),
            )
        else:
            # Thin child keeps the parent's leg length.
            child_a = _child(
                type_a, pivot, (apex, split), distance(pivot, apex),
            )
            child_b = _child(
                type_b, split, (apex, other), distance(split, other),
            )
    except DegenerateTriangleError as exc:
        raise SubstitutionError(triangle, str(exc)) from exc

    return child_a, child_b
