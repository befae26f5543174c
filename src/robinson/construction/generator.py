"""Repeated substitution over a working set of triangles."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor

from robinson.construction.substitution import decompose
from robinson.model.triangle import Triangle
from robinson.model.triangle_type import TriangleType

logger = logging.getLogger(__name__)


def _check_generations(generations: int) -> None:
    if isinstance(generations, bool) or not isinstance(generations, int):
        raise ValueError(
            f"generations must be an integer, got {generations!r}"
        )
    if generations < 0:
        raise ValueError(
            f"generations must be non-negative, got {generations}"
        )


def _substitute(
    triangles: list[Triangle],
    executor: ThreadPoolExecutor | None,
) -> list[Triangle]:
    """Replace every triangle by its two children, preserving order."""
    if executor is None:
        pairs: Iterable[tuple[Triangle, Triangle]] = map(decompose, triangles)
    else:
        pairs = executor.map(decompose, triangles)
    result: list[Triangle] = []
    for child_a, child_b in pairs:
        result.append(child_a)
        result.append(child_b)
    return result


def iter_generations(
    seeds: Iterable[Triangle],
    generations: int,
    *,
    max_workers: int | None = None,
) -> Iterator[list[Triangle]]:
    """Yield the working set after each generation.

    The first item is the seed list itself (generation 0) and the last
    is the result of *generations* rounds of substitution, so
    ``generations + 1`` lists are produced in total.

    Args:
        seeds: Starting triangles.
        generations: Number of substitution rounds.
        max_workers: If given, decompose each generation on a thread
            pool of this size.  Output order is identical to the
            serial path.

    Raises:
        ValueError: If *generations* is not a non-negative integer.
        SubstitutionError: If any triangle fails to decompose.  The
            iteration stops at the failing generation.
    """
    _check_generations(generations)
    current = list(seeds)
    yield current

    executor = (
        ThreadPoolExecutor(max_workers=max_workers)
        if max_workers is not None else None
    )
    try:
        for generation in range(1, generations + 1):
            current = _substitute(current, executor)
            logger.debug(
                "generation %d: %d triangles", generation, len(current),
            )
            yield current
    finally:
        if executor is not None:
            executor.shutdown()


def generate(
    seeds: Iterable[Triangle],
    generations: int,
    *,
    max_workers: int | None = None,
) -> list[Triangle]:
    """Apply *generations* rounds of substitution to *seeds*.

    Each round replaces every triangle with its two children from
    :func:`~robinson.construction.substitution.decompose`, in order, so
    the result has exactly ``len(seeds) * 2**generations`` triangles.
    Children are never merged, even where two parents produce
    coincident triangles.

    Example usage::

        from robinson import default_seed, generate

        tiles = generate([default_seed()], 6)
        assert len(tiles) == 64

    Args:
        seeds: Starting triangles.
        generations: Number of substitution rounds.  ``0`` returns the
            seeds unchanged (as a new list).
        max_workers: Optional thread-pool size for fanning out each
            generation.

    Returns:
        The final working set.

    Raises:
        ValueError: If *generations* is not a non-negative integer.
        SubstitutionError: If any triangle fails to decompose.  No
            partial result is returned.
    """
    result: list[Triangle] = []
    for result in iter_generations(
        seeds, generations, max_workers=max_workers,
    ):
        pass
    return result


def count_types(triangles: Iterable[Triangle]) -> Counter[TriangleType]:
    """Count triangles by type."""
    return Counter(t.type for t in triangles)
