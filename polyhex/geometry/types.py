"""Core value types for polyhex geometry."""

from __future__ import annotations

from enum import Enum

# A cell address (q, r) in the axial system used throughout the package.
Coord = tuple[int, int]

# An ordered, duplicate-free sequence of cells.
Shape = tuple[Coord, ...]


class SymmetryGroup(str, Enum):
    """Subgroup of the order-12 dihedral group that maps a shape onto itself.

    Values are the names written to exported catalogs.
    """

    NONE = "None"
    MIRROR_0 = "Mirror0"
    MIRROR_30 = "Mirror30"
    ROTATION_2_FOLD = "Rotation2Fold"
    ROTATION_2_FOLD_MIRROR_ALL = "Rotation2FoldMirrorAll"
    ROTATION_3_FOLD = "Rotation3Fold"
    ROTATION_3_FOLD_MIRROR_0 = "Rotation3FoldMirror0"
    ROTATION_3_FOLD_MIRROR_30 = "Rotation3FoldMirror30"
    ROTATION_6_FOLD = "Rotation6Fold"
    ALL = "All"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def stabilizer_order(self) -> int:
        """Number of the 12 symmetry operations that fix a shape with this label."""
        return _STABILIZER_ORDERS[self]


_DESCRIPTIONS: dict[SymmetryGroup, str] = {
    SymmetryGroup.NONE: "no symmetry",
    SymmetryGroup.MIRROR_0: "0° mirror only",
    SymmetryGroup.MIRROR_30: "30° mirror only",
    SymmetryGroup.ROTATION_2_FOLD: "2-fold only",
    SymmetryGroup.ROTATION_2_FOLD_MIRROR_ALL: "2-fold + all mirrors",
    SymmetryGroup.ROTATION_3_FOLD: "3-fold rotation only",
    SymmetryGroup.ROTATION_3_FOLD_MIRROR_0: "3-fold + 0° mirrors",
    SymmetryGroup.ROTATION_3_FOLD_MIRROR_30: "3-fold + 30° mirrors",
    SymmetryGroup.ROTATION_6_FOLD: "6-fold rotation only",
    SymmetryGroup.ALL: "All symmetry",
}

_STABILIZER_ORDERS: dict[SymmetryGroup, int] = {
    SymmetryGroup.NONE: 1,
    SymmetryGroup.MIRROR_0: 2,
    SymmetryGroup.MIRROR_30: 2,
    SymmetryGroup.ROTATION_2_FOLD: 2,
    SymmetryGroup.ROTATION_2_FOLD_MIRROR_ALL: 4,
    SymmetryGroup.ROTATION_3_FOLD: 3,
    SymmetryGroup.ROTATION_3_FOLD_MIRROR_0: 6,
    SymmetryGroup.ROTATION_3_FOLD_MIRROR_30: 6,
    SymmetryGroup.ROTATION_6_FOLD: 6,
    SymmetryGroup.ALL: 12,
}


# Axial neighbor offsets: the 6 cells sharing an edge with (q, r)
HEX_DIRECTIONS: list[Coord] = [
    (1, 0), (0, 1), (1, 1), (-1, -1), (0, -1), (-1, 0),
]


def hex_neighbors(q: int, r: int) -> list[Coord]:
    """Return the 6 axial-coordinate neighbors of hex (q, r)."""
    return [(q + dq, r + dr) for dq, dr in HEX_DIRECTIONS]


def coord_to_key(coord: Coord) -> str:
    q, r = coord
    return f"{q},{r}"
