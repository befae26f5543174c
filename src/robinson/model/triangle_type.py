from __future__ import annotations

from enum import StrEnum

from robinson._constants import (
    THICK_BASE_ANGLE,
    THICK_VERTEX_ANGLE,
    THIN_BASE_ANGLE,
    THIN_VERTEX_ANGLE,
)


class TriangleType(StrEnum):
    """Shape and chirality of a Robinson triangle.

    Thin triangles have a 36 degree apex and pair across their base
    into the thin (36/144 degree) rhombus; thick triangles have a 108
    degree apex and pair into the thick (72/108 degree) rhombus.

    The Left/Right tag selects the *pivot*: the base vertex that is
    reused unchanged as the apex of the thin child when the triangle
    is decomposed.  Left triangles pivot on the first base point
    returned by :meth:`~robinson.model.Triangle.base_points`, Right
    triangles on the second.

    Attributes:
        THIN_LEFT: Thin triangle pivoting on its first base point.
        THIN_RIGHT: Thin triangle pivoting on its second base point.
        THICK_LEFT: Thick triangle pivoting on its first base point.
        THICK_RIGHT: Thick triangle pivoting on its second base point.
    """

    THIN_LEFT = "thin_left"
    THIN_RIGHT = "thin_right"
    THICK_LEFT = "thick_left"
    THICK_RIGHT = "thick_right"

    @property
    def is_thin(self) -> bool:
        return self in (TriangleType.THIN_LEFT, TriangleType.THIN_RIGHT)

    @property
    def is_thick(self) -> bool:
        return not self.is_thin

    @property
    def is_left(self) -> bool:
        return self in (TriangleType.THIN_LEFT, TriangleType.THICK_LEFT)

    def mirror(self) -> TriangleType:
        """Return the type with the same shape and opposite chirality."""
        match self:
            case TriangleType.THIN_LEFT:
                return TriangleType.THIN_RIGHT
            case TriangleType.THIN_RIGHT:
                return TriangleType.THIN_LEFT
            case TriangleType.THICK_LEFT:
                return TriangleType.THICK_RIGHT
            case TriangleType.THICK_RIGHT:
                return TriangleType.THICK_LEFT


def vertex_angle(triangle_type: TriangleType) -> float:
    """Interior angle at the apex, in radians."""
    match triangle_type:
        case TriangleType.THIN_LEFT | TriangleType.THIN_RIGHT:
            return THIN_VERTEX_ANGLE
        case TriangleType.THICK_LEFT | TriangleType.THICK_RIGHT:
            return THICK_VERTEX_ANGLE
    raise ValueError(f"unknown triangle type: {triangle_type!r}")


def base_angle(triangle_type: TriangleType) -> float:
    """Interior angle at either base vertex, in radians."""
    match triangle_type:
        case TriangleType.THIN_LEFT | TriangleType.THIN_RIGHT:
            return THIN_BASE_ANGLE
        case TriangleType.THICK_LEFT | TriangleType.THICK_RIGHT:
            return THICK_BASE_ANGLE
    raise ValueError(f"unknown triangle type: {triangle_type!r}")
