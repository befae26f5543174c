from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from robinson.model.geometry import (
    Point,
    normalise_angle,
    polar_point,
    shoelace_area,
)
from robinson.model.triangle_type import TriangleType, base_angle, vertex_angle


class DegenerateTriangleError(ValueError):
    """Raised when a triangle is built from unusable geometry.

    Non-positive or non-finite leg lengths and non-finite coordinates
    or rotations are rejected rather than clamped.
    """


@dataclass(frozen=True)
class Triangle:
    """An isosceles Robinson triangle described from its apex.

    Only the apex, the common leg length and the direction of the
    altitude are stored; the two base vertices are derived on demand
    by :meth:`base_points`.  Instances are immutable values:
    decomposition creates new triangles rather than changing this one.

    Attributes:
        type: Shape and chirality tag.  Strings such as
            ``"thin_left"`` are accepted and converted.
        apex: The vertex where the two equal legs meet, as an
            ``(x, y)`` tuple in screen coordinates (y grows downward).
        leg_length: Length of both legs.  Must be positive and finite.
        rotation: Direction of the altitude from the apex to the base
            midpoint, in radians counter-clockwise from the positive x
            axis.  Wrapped into ``[0, 2*pi)`` on construction.

    Raises:
        DegenerateTriangleError: If *leg_length* is not a positive
            finite number, if *apex* is not a pair of numbers, or if
            *rotation* or an apex coordinate is not finite.
    """

    type: TriangleType
    apex: Point
    leg_length: float
    rotation: float

    def __post_init__(self) -> None:
        try:
            kind = TriangleType(self.type)
        except ValueError:
            raise DegenerateTriangleError(
                f"unknown triangle type: {self.type!r}"
            ) from None
        object.__setattr__(self, "type", kind)

        try:
            if len(self.apex) != 2:
                raise ValueError
            apex = (float(self.apex[0]), float(self.apex[1]))
        except (TypeError, ValueError):
            raise DegenerateTriangleError(
                f"apex must have two coordinates, got {self.apex!r}"
            ) from None
        if not all(math.isfinite(c) for c in apex):
            raise DegenerateTriangleError(f"apex must be finite, got {apex}")
        object.__setattr__(self, "apex", apex)

        try:
            leg_length = float(self.leg_length)
        except (TypeError, ValueError):
            raise DegenerateTriangleError(
                f"leg_length must be a number, got {self.leg_length!r}"
            ) from None
        if not math.isfinite(leg_length) or leg_length <= 0:
            raise DegenerateTriangleError(
                f"leg_length must be positive and finite, got {leg_length}"
            )
        object.__setattr__(self, "leg_length", leg_length)

        try:
            rotation = float(self.rotation)
        except (TypeError, ValueError):
            raise DegenerateTriangleError(
                f"rotation must be a number, got {self.rotation!r}"
            ) from None
        if not math.isfinite(rotation):
            raise DegenerateTriangleError(
                f"rotation must be finite, got {rotation}"
            )
        object.__setattr__(self, "rotation", normalise_angle(rotation))

    @property
    def vertex_angle(self) -> float:
        """Interior angle at the apex, in radians."""
        return vertex_angle(self.type)

    @property
    def base_angle(self) -> float:
        """Interior angle at each base vertex, in radians."""
        return base_angle(self.type)

    def base_points(self) -> tuple[Point, Point]:
        """Return the two vertices opposite the apex.

        The first point lies half the apex angle counter-clockwise of
        the altitude, the second half the apex angle clockwise of it.
        Both are exactly ``leg_length`` from the apex.
        """
        half = self.vertex_angle / 2.0
        theta_one = normalise_angle(self.rotation + half)
        theta_two = normalise_angle(self.rotation - half)
        return (
            polar_point(self.apex, self.leg_length, theta_one),
            polar_point(self.apex, self.leg_length, theta_two),
        )

    def vertices(self) -> tuple[Point, Point, Point]:
        """Return ``(apex, first_base_point, second_base_point)``."""
        p1, p2 = self.base_points()
        return (self.apex, p1, p2)

    def vertex_array(self) -> np.ndarray:
        """Vertices as a float array of shape ``(3, 2)``."""
        return np.array(self.vertices(), dtype=float)

    def base_length(self) -> float:
        """Length of the side opposite the apex."""
        return 2.0 * self.leg_length * math.sin(self.vertex_angle / 2.0)

    def area(self) -> float:
        """Area computed with the shoelace formula on the vertices."""
        return shoelace_area(self.vertices())

    def describe(self) -> str:
        """Short human-readable summary, used in error messages."""
        return (
            f"{self.type.value} triangle at apex "
            f"({self.apex[0]:.6g}, {self.apex[1]:.6g}) with "
            f"leg_length={self.leg_length:.6g}, "
            f"rotation={self.rotation:.6g}"
        )

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary."""
        return {
            "type": self.type.value,
            "apex": list(self.apex),
            "leg_length": self.leg_length,
            "rotation": self.rotation,
        }

    @classmethod
    def from_dict(cls, d: dict) -> Triangle:
        """Deserialise from a dictionary produced by :meth:`to_dict`.

        Raises:
            ValueError: If a required key is missing or a value is
                unusable.
        """
        missing = {"type", "apex", "leg_length", "rotation"} - set(d)
        if missing:
            raise ValueError(f"triangle is missing keys: {sorted(missing)}")
        return cls(
            type=d["type"],
            apex=d["apex"],
            leg_length=d["leg_length"],
            rotation=d["rotation"],
        )
