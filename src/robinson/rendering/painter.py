"""Drawing triangles onto matplotlib axes."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np
from matplotlib.axes import Axes
from matplotlib.collections import PolyCollection

from robinson.model import TilingStyle, Triangle, normalise_colour

logger = logging.getLogger(__name__)


def _triangle_outlines(triangles: Sequence[Triangle]) -> np.ndarray:
    """Closed outlines apex -> p1 -> p2 -> apex, shape ``(n, 4, 2)``."""
    if not triangles:
        return np.zeros((0, 4, 2), dtype=float)
    verts = np.array([t.vertices() for t in triangles], dtype=float)
    return np.concatenate([verts, verts[:, :1, :]], axis=1)


def _face_colours(
    triangles: Sequence[Triangle], style: TilingStyle,
) -> np.ndarray:
    """Per-triangle RGBA fill colours, shape ``(n, 4)``."""
    thin = (*normalise_colour(style.thin_colour), style.alpha)
    thick = (*normalise_colour(style.thick_colour), style.alpha)
    return np.array(
        [thin if t.type.is_thin else thick for t in triangles],
        dtype=float,
    ).reshape(len(triangles), 4)


def _draw_tiling(
    ax: Axes,
    triangles: Sequence[Triangle],
    style: TilingStyle,
) -> PolyCollection:
    """Add the triangles to *ax* as a single collection.

    The y axis is inverted so that screen coordinates (y growing
    downward) appear the right way up, and the aspect ratio is fixed
    so angles are not distorted.
    """
    outlines = _triangle_outlines(triangles)
    if style.fill:
        facecolors: np.ndarray | str = _face_colours(triangles, style)
    else:
        facecolors = "none"
    collection = PolyCollection(
        outlines,
        closed=True,
        facecolors=facecolors,
        edgecolors=[normalise_colour(style.edge_colour)],
        linewidths=style.edge_width,
    )
    ax.add_collection(collection)

    if len(outlines):
        pts = outlines.reshape(-1, 2)
        lo = pts.min(axis=0)
        hi = pts.max(axis=0)
        pad = 0.02 * float(max(hi - lo))
        ax.set_xlim(lo[0] - pad, hi[0] + pad)
        ax.set_ylim(hi[1] + pad, lo[1] - pad)
    else:
        ax.invert_yaxis()
    ax.set_aspect("equal")
    ax.set_axis_off()
    logger.debug("drew %d triangles", len(outlines))
    return collection
