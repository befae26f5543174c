"""Tiling configuration save/load for JSON files."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from robinson.construction.seeds import default_seed
from robinson.model import TilingStyle, Triangle

_VALID_SECTIONS = frozenset({"seeds", "generations", "style"})


@dataclass
class TilingConfig:
    """Everything a host needs to reproduce a tiling image.

    Attributes:
        seeds: Starting triangles.
        generations: Number of substitution rounds to apply.
        style: Optional drawing style.  ``None`` means renderer
            defaults.
    """

    seeds: list[Triangle] = field(default_factory=lambda: [default_seed()])
    generations: int = 0
    style: TilingStyle | None = None

    def __post_init__(self) -> None:
        if isinstance(self.generations, bool) or not isinstance(
            self.generations, int
        ):
            raise ValueError(
                f"generations must be an integer, got {self.generations!r}"
            )
        if self.generations < 0:
            raise ValueError(
                f"generations must be non-negative, got {self.generations}"
            )


def save_config(path: str | Path, config: TilingConfig) -> None:
    """Save a tiling configuration to a JSON file.

    The ``style`` section is only written when a style is set.  The
    file is human-readable with two-space indentation.
    """
    data: dict = {
        "seeds": [t.to_dict() for t in config.seeds],
        "generations": config.generations,
    }
    if config.style is not None:
        data["style"] = config.style.to_dict()

    Path(path).write_text(json.dumps(data, indent=2) + "\n")


def load_config(path: str | Path) -> TilingConfig:
    """Load a tiling configuration from a JSON file.

    All sections are optional: missing ``seeds`` gives the default
    seed, missing ``generations`` gives ``0`` and missing ``style``
    gives ``None``.

    Raises:
        ValueError: If the file contains unknown top-level keys, or a
            section holds invalid values.
    """
    data = json.loads(Path(path).read_text())

    unknown = set(data) - _VALID_SECTIONS
    if unknown:
        raise ValueError(
            f"unknown top-level keys in tiling config: {sorted(unknown)}"
        )

    kwargs: dict = {}
    if "seeds" in data:
        kwargs["seeds"] = [Triangle.from_dict(d) for d in data["seeds"]]
    if "generations" in data:
        kwargs["generations"] = data["generations"]
    if "style" in data:
        kwargs["style"] = TilingStyle.from_dict(data["style"])
    return TilingConfig(**kwargs)
