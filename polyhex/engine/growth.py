"""Grow every free polyhex of size n from the free polyhexes of size n-1.

Each parent is extended by one cell at every free neighbor of every cell it
holds. Any connected shape of size n loses a boundary cell and stays
connected, so this reaches every size-n shape at least once; keying the
results by free-canonical form leaves each exactly once.
"""

from __future__ import annotations

import itertools
import logging
import time
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional

from polyhex.config import settings
from polyhex.engine.errors import GenerationError, InvalidSizeError
from polyhex.engine.models import EnumerationResult, Generation, GenerationStats
from polyhex.geometry.canonical import (
    canonicalize_fixed,
    canonicalize_free,
    is_connected,
)
from polyhex.geometry.types import Shape, SymmetryGroup, hex_neighbors

logger = logging.getLogger(__name__)

# Called once per finished size; may return the path of the written artifact.
Exporter = Callable[[int, Generation], Optional[Path]]

SEED_SHAPE: Shape = ((0, 0),)


def seed_generation() -> Generation:
    """The single monohex, fixed by all 12 symmetries."""
    return {SEED_SHAPE: SymmetryGroup.ALL}


def expand_shape(shape: Shape) -> Iterator[tuple[Shape, SymmetryGroup]]:
    """Yield the free-canonical form of *shape* plus each free neighbor cell."""
    occupied = set(shape)
    for q, r in shape:
        for neighbor in hex_neighbors(q, r):
            if neighbor in occupied:
                continue
            yield canonicalize_free(shape + (neighbor,))


def grow_generation(previous: Iterable[Shape]) -> Generation:
    """Build the next generation from the bare shapes of the previous one."""
    current: Generation = {}
    for shape in previous:
        for candidate, group in expand_shape(shape):
            # Same key always carries the same label
            current[candidate] = group
    return dict(sorted(current.items()))


def iter_generations(max_size: int) -> Iterator[tuple[int, Generation]]:
    """Yield ``(n, generation)`` for n = 2 .. max_size.

    Only the bare shapes of the last generation are kept between rounds.
    """
    if max_size < 1:
        raise InvalidSizeError(max_size)

    previous: list[Shape] = list(seed_generation())
    for n in range(2, max_size + 1):
        current = grow_generation(previous)
        yield n, current
        previous = list(current)


def verify_generation(generation: Generation, size: int) -> None:
    """Audit a finished generation, raising GenerationError on the first defect.

    A key equal to its own free-canonical form is the only representative of
    its congruence class, so this also rules out duplicate shapes.
    """
    for shape, group in generation.items():
        if len(shape) != size or len(set(shape)) != size:
            raise GenerationError(f"Shape {shape} does not have {size} distinct cells", size)
        if not is_connected(shape):
            raise GenerationError(f"Shape {shape} is not connected", size)
        if canonicalize_fixed(shape) != shape:
            raise GenerationError(f"Shape {shape} is not in fixed-canonical form", size)
        free, free_group = canonicalize_free(shape)
        if free != shape:
            raise GenerationError(f"Shape {shape} is not in free-canonical form", size)
        if free_group != group:
            raise GenerationError(
                f"Shape {shape} is labelled {group.value}, expected {free_group.value}",
                size,
            )

    keys = list(generation)
    for a, b in itertools.pairwise(keys):
        if not a < b:
            raise GenerationError(f"Generation keys out of order at {a} / {b}", size)


def enumerate_polyhexes(
    max_size: int,
    exporter: Exporter | None = None,
    verify: bool | None = None,
) -> EnumerationResult:
    """Enumerate free polyhexes of sizes 2 .. *max_size*.

    Parameters
    ----------
    max_size:
        Largest size to build. Size 1 only seeds the growth.
    exporter:
        Called with ``(n, generation)`` once per size, before the next size
        is grown. Failures propagate and end the run.
    verify:
        Audit each generation with verify_generation(). Defaults to
        ``settings.verify_generations``.
    """
    if verify is None:
        verify = settings.verify_generations

    result = EnumerationResult(max_size=max_size)
    t0 = time.monotonic()
    for n, generation in iter_generations(max_size):
        elapsed_ms = (time.monotonic() - t0) * 1000
        if verify:
            verify_generation(generation, n)

        artifact = exporter(n, generation) if exporter is not None else None
        stats = GenerationStats.from_generation(
            n, generation, elapsed_ms=elapsed_ms, artifact=artifact,
        )
        result.generations.append(stats)
        logger.info(f"Size {n}: {stats.shape_count} free polyhexes ({elapsed_ms:.1f}ms)")
        t0 = time.monotonic()

    return result
