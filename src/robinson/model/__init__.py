"""Core data model for robinson: triangle types, triangles and styles.

Everything is re-exported here so that ``from robinson.model import
Triangle`` works without knowing the module layout.
"""

from robinson.model.colour import Colour, normalise_colour
from robinson.model.geometry import Point, normalise_angle
from robinson.model.tiling_style import TilingStyle
from robinson.model.triangle import DegenerateTriangleError, Triangle
from robinson.model.triangle_type import TriangleType, base_angle, vertex_angle

__all__ = [
    "Colour",
    "DegenerateTriangleError",
    "Point",
    "TilingStyle",
    "Triangle",
    "TriangleType",
    "base_angle",
    "normalise_angle",
    "normalise_colour",
    "vertex_angle",
]
