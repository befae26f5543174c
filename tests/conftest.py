"""Shared test fixtures for robinson."""

import math

import pytest

from robinson.model import Triangle, TriangleType


@pytest.fixture
def seed_triangle():
    """The thin-left seed at (300, 350) used by the demo host."""
    return Triangle(TriangleType.THIN_LEFT, (300.0, 350.0), 100.0, math.pi / 4)


@pytest.fixture(params=list(TriangleType), ids=lambda t: t.value)
def any_triangle(request):
    """One representative triangle of each type, off-axis and rotated."""
    return Triangle(request.param, (12.5, -40.0), 80.0, 2.3)
