"""JSON catalogs of one generation each.

An artifact ``<n>.json`` maps every shape key (``"q,r,q,r,..."``) to the
name of its symmetry group, one tab-indented entry per line in sorted shape
order::

    {
        "0,0,0,1,0,2": "Rotation2FoldMirrorAll",
        "0,0,0,1,1,0": "Mirror0",
        "0,0,0,1,1,1": "Rotation3FoldMirror30"
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from polyhex.engine.models import Generation
from polyhex.geometry.canonical import key_to_shape, shape_to_key
from polyhex.geometry.types import SymmetryGroup

logger = logging.getLogger(__name__)


def catalog_path(output_dir: Path, n: int) -> Path:
    return Path(output_dir) / f"{n}.json"


def render_catalog(generation: Generation) -> str:
    """Serialize a generation; identical input always gives identical text."""
    entries = {
        shape_to_key(shape): group.value
        for shape, group in sorted(generation.items())
    }
    return json.dumps(entries, indent="\t", ensure_ascii=False) + "\n"


def export_generation(n: int, generation: Generation, output_dir: Path) -> Path:
    """Write the size-*n* catalog, replacing any existing file. Returns its path."""
    path = catalog_path(output_dir, n)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_catalog(generation), encoding="utf-8")
    logger.debug(f"Wrote {len(generation)} shapes to {path}")
    return path


def load_catalog(path: Path) -> Generation:
    """Read an exported catalog back into a generation."""
    with open(path, encoding="utf-8") as f:
        entries = json.load(f)
    generation = {key_to_shape(key): SymmetryGroup(name) for key, name in entries.items()}
    return dict(sorted(generation.items()))


class CatalogExporter:
    """Exporter bound to one output directory, for use with enumerate_polyhexes()."""

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)
        self.written: list[Path] = []

    def __call__(self, n: int, generation: Generation) -> Path:
        path = export_generation(n, generation, self.output_dir)
        self.written.append(path)
        return path
