"""Tiling construction: substitution, generation, seeds and configs."""

from robinson.construction.config import TilingConfig, load_config, save_config
from robinson.construction.generator import (
    count_types,
    generate,
    iter_generations,
)
from robinson.construction.seeds import default_seed, rhombus, sun
from robinson.construction.substitution import (
    SUBSTITUTION_RULES,
    SubstitutionError,
    decompose,
    split_point,
)

__all__ = [
    "SUBSTITUTION_RULES",
    "SubstitutionError",
    "TilingConfig",
    "count_types",
    "decompose",
    "default_seed",
    "generate",
    "iter_generations",
    "load_config",
    "rhombus",
    "save_config",
    "split_point",
    "sun",
]
