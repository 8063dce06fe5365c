"""Lattice symmetries acting on single cells and on whole shapes.

Rotation turns a cell 60 degrees about the origin:  (q, r) -> (q - r, q)
Reflection mirrors a cell within its row:           (q, r) -> (r - 1 - q, r)

Together they generate the 12-element dihedral group of the hex lattice.
Shape transforms return new tuples and do not re-normalize position.
"""

from __future__ import annotations

from polyhex.geometry.types import Coord, Shape


def rotate(coord: Coord) -> Coord:
    """Rotate a cell one 60-degree step. Six steps are the identity."""
    q, r = coord
    return q - r, q


def reflect(coord: Coord) -> Coord:
    """Mirror a cell across the lattice axis. Applying it twice is the identity."""
    q, r = coord
    return r - 1 - q, r


def rotate_shape(shape: Shape, steps: int = 1) -> Shape:
    """Rotate every cell of *shape* by ``60 * steps`` degrees."""
    cells = shape
    for _ in range(steps % 6):
        cells = tuple(rotate(c) for c in cells)
    return tuple(cells)


def reflect_shape(shape: Shape) -> Shape:
    return tuple(reflect(c) for c in shape)
