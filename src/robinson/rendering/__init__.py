"""Rendering backends for robinson tilings."""

from robinson.rendering.static import render_mpl

__all__ = [
    "render_mpl",
]
