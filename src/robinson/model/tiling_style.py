from __future__ import annotations

from dataclasses import dataclass, fields

from robinson.model.colour import Colour, normalise_colour

_COLOUR_FIELDS = frozenset({"thin_colour", "thick_colour", "edge_colour"})


@dataclass(frozen=True)
class TilingStyle:
    """Visual style for drawing a tiling.

    Attributes:
        thin_colour: Fill colour for thin triangles.
        thick_colour: Fill colour for thick triangles.
        edge_colour: Colour of the triangle outlines.
        edge_width: Outline width in points.  ``0`` hides outlines.
        alpha: Fill opacity (0 = transparent, 1 = opaque).
        fill: Whether triangles are filled at all.  When ``False``
            only the closed outlines are drawn.
    """

    thin_colour: Colour = (0.93, 0.55, 0.25)
    thick_colour: Colour = (0.25, 0.45, 0.75)
    edge_colour: Colour = (0.15, 0.15, 0.15)
    edge_width: float = 0.5
    alpha: float = 1.0
    fill: bool = True

    def __post_init__(self) -> None:
        for name in sorted(_COLOUR_FIELDS):
            try:
                normalise_colour(getattr(self, name))
            except ValueError as exc:
                raise ValueError(f"{name}: {exc}") from None
        if self.edge_width < 0:
            raise ValueError(
                f"edge_width must be non-negative, got {self.edge_width}"
            )
        if not 0.0 <= self.alpha <= 1.0:
            raise ValueError(
                f"alpha must be between 0.0 and 1.0, got {self.alpha}"
            )

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Fields at their default values are omitted.  Colours are
        normalised to ``[r, g, b]`` lists.
        """
        d: dict = {}
        for f in fields(self):
            val = getattr(self, f.name)
            if f.name in _COLOUR_FIELDS:
                rgb = normalise_colour(val)
                if rgb != normalise_colour(f.default):
                    d[f.name] = list(rgb)
            elif val != f.default:
                d[f.name] = val
        return d

    @classmethod
    def from_dict(cls, d: dict) -> TilingStyle:
        """Deserialise from a dictionary.

        Raises:
            ValueError: If *d* contains keys that are not style fields.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(d) - known
        if unknown:
            raise ValueError(f"unknown style keys: {sorted(unknown)}")
        kwargs = {
            k: tuple(v) if isinstance(v, list) else v for k, v in d.items()
        }
        return cls(**kwargs)
