"""Static matplotlib renderer: :func:`render_mpl` entry point."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import fields, replace
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from robinson.model import Colour, TilingStyle, Triangle, normalise_colour
from robinson.rendering.painter import _draw_tiling

_STYLE_FIELDS = frozenset(f.name for f in fields(TilingStyle))
_DEFAULT_TILING_STYLE = TilingStyle()


def _resolve_style(
    style: TilingStyle | None,
    **kwargs: Any,
) -> TilingStyle:
    """Build a :class:`TilingStyle` from an optional base plus overrides.

    Any kwarg whose name matches a ``TilingStyle`` field replaces that
    field's value.  Passing ``None`` is treated as "not provided" and
    preserves the base value.

    Raises:
        TypeError: If a kwarg name does not match any ``TilingStyle``
            field.
    """
    unknown = kwargs.keys() - _STYLE_FIELDS
    if unknown:
        raise TypeError(
            f"Unknown style keyword argument(s): {', '.join(sorted(unknown))}"
        )

    s = style if style is not None else _DEFAULT_TILING_STYLE
    overrides = {k: v for k, v in kwargs.items() if v is not None}
    if overrides:
        s = replace(s, **overrides)
    return s


def render_mpl(
    triangles: Iterable[Triangle],
    output: str | Path | None = None,
    *,
    ax: Axes | None = None,
    style: TilingStyle | None = None,
    figsize: tuple[float, float] = (6.0, 6.0),
    dpi: int = 150,
    background: Colour = "white",
    show: bool | None = None,
    **style_kwargs: object,
) -> Figure:
    """Render triangles as a static matplotlib figure.

    Every triangle is drawn as the closed outline apex, first base
    point, second base point, filled by shape.

    Example usage::

        from robinson import generate, render_mpl, sun

        tiles = generate(sun((0.0, 0.0), 100.0), 5)

        # Save to file (no interactive window):
        render_mpl(tiles, "sun.png")

        # Outlines only:
        render_mpl(tiles, "sun.svg", fill=False, edge_width=0.3)

    Args:
        triangles: The triangles to draw.
        output: Optional file path to save the figure.  The format is
            inferred from the extension.  Ignored when *ax* is
            provided.
        ax: Optional matplotlib :class:`~matplotlib.axes.Axes` to draw
            into.  The caller then owns the figure; *output*,
            *figsize*, *dpi*, *background* and *show* are ignored.
        style: A :class:`TilingStyle`.  If ``None``, defaults are used.
            Any :class:`TilingStyle` field name may also be passed as a
            keyword argument to override individual fields.
        figsize: Figure size in inches ``(width, height)``.
        dpi: Resolution for raster output formats.
        background: Background colour.
        show: Whether to call ``plt.show()``.  Defaults to ``True`` when
            *output* is ``None``, ``False`` when saving to a file.
        **style_kwargs: Any :class:`TilingStyle` field name as a
            keyword argument.  Unknown names raise :class:`TypeError`.

    Returns:
        The matplotlib :class:`~matplotlib.figure.Figure` object.
    """
    resolved = _resolve_style(style, **style_kwargs)
    triangles = list(triangles)

    if ax is not None:
        fig = ax.get_figure()
        if not isinstance(fig, Figure):
            raise ValueError("ax is not attached to a Figure")
        _draw_tiling(ax, triangles, resolved)
        return fig

    bg_rgb = normalise_colour(background)
    fig, ax = plt.subplots(1, 1, figsize=figsize, dpi=dpi)
    fig.set_facecolor(bg_rgb)

    _draw_tiling(ax, triangles, resolved)

    fig.tight_layout()

    if output is not None:
        fig.savefig(str(output), dpi=dpi, bbox_inches="tight")

    if show is None:
        show = output is None

    if show:
        plt.show()
    else:
        plt.close(fig)

    return fig
