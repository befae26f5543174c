"""Shared constants used across the model and construction layers."""

import math

PHI: float = (1.0 + math.sqrt(5.0)) / 2.0
"""The golden ratio, the length ratio between parent and child legs."""

TAU: float = 2.0 * math.pi
"""One full turn in radians.  Rotations are kept in ``[0, TAU)``."""

THIN_VERTEX_ANGLE: float = math.pi / 5.0
"""Apex angle of a thin Robinson triangle (36 degrees)."""

THICK_VERTEX_ANGLE: float = 3.0 * math.pi / 5.0
"""Apex angle of a thick Robinson triangle (108 degrees)."""

THIN_BASE_ANGLE: float = (math.pi - THIN_VERTEX_ANGLE) / 2.0
"""Base angle of a thin Robinson triangle (72 degrees)."""

THICK_BASE_ANGLE: float = (math.pi - THICK_VERTEX_ANGLE) / 2.0
"""Base angle of a thick Robinson triangle (36 degrees)."""
