"""Robinson: Penrose P3 tilings by recursive triangle substitution.

A tiling starts from one or more seed :class:`Triangle` values and is
refined by repeatedly replacing every triangle with its two Robinson
children.  Static images are produced via matplotlib.

Example usage::

    from robinson import generate, render_mpl, sun

    tiles = generate(sun((0.0, 0.0), 100.0), 6)
    render_mpl(tiles, "tiling.svg")
"""

from robinson._constants import PHI
from robinson.construction import (
    SUBSTITUTION_RULES,
    SubstitutionError,
    TilingConfig,
    count_types,
    decompose,
    default_seed,
    generate,
    iter_generations,
    load_config,
    rhombus,
    save_config,
    split_point,
    sun,
)
from robinson.model import (
    Colour,
    DegenerateTriangleError,
    Point,
    TilingStyle,
    Triangle,
    TriangleType,
    base_angle,
    normalise_angle,
    normalise_colour,
    vertex_angle,
)
from robinson.rendering import render_mpl

__all__ = [
    "Colour",
    "DegenerateTriangleError",
    "PHI",
    "Point",
    "SUBSTITUTION_RULES",
    "SubstitutionError",
    "TilingConfig",
    "TilingStyle",
    "Triangle",
    "TriangleType",
    "base_angle",
    "count_types",
    "decompose",
    "default_seed",
    "generate",
    "iter_generations",
    "load_config",
    "normalise_angle",
    "normalise_colour",
    "render_mpl",
    "rhombus",
    "save_config",
    "split_point",
    "sun",
    "vertex_angle",
]
