from __future__ import annotations

#: A colour specification accepted throughout robinson.
#:
#: Can be any of:
#:
#: - A CSS colour name or hex string (e.g. ``"gold"``, ``"#1f77b4"``).
#: - A single float for grey (``0.0`` = black, ``1.0`` = white).
#: - An RGB tuple or list with values in ``[0, 1]``.
Colour = str | float | tuple[float, float, float] | list[float]


def normalise_colour(colour: Colour) -> tuple[float, float, float]:
    """Convert a colour specification to an ``(r, g, b)`` tuple.

    Raises:
        ValueError: If the colour cannot be interpreted.
    """
    from matplotlib.colors import to_rgb

    if isinstance(colour, bool):
        raise ValueError(f"Cannot interpret colour: {colour!r}")
    if isinstance(colour, (int, float)):
        grey = float(colour)
        if not 0.0 <= grey <= 1.0:
            raise ValueError(f"Grey value must be in [0, 1], got {grey}")
        return (grey, grey, grey)
    if isinstance(colour, (tuple, list)) and len(colour) != 3:
        raise ValueError(
            f"RGB sequence must have 3 elements, got {len(colour)}"
        )
    try:
        return tuple(float(c) for c in to_rgb(colour))  # type: ignore[return-value]
    except (ValueError, TypeError):
        raise ValueError(f"Cannot interpret colour: {colour!r}") from None
