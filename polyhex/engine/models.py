from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, Field

from polyhex.geometry.types import Shape, SymmetryGroup

# --- Generation ---
# Every free polyhex of one size, keyed by free-canonical shape, in sorted order.
Generation = dict[Shape, SymmetryGroup]


# --- Per-size statistics ---
class GenerationStats(BaseModel):
    size: int
    shape_count: int
    symmetry_counts: dict[str, int] = Field(default_factory=dict)  # label name -> count
    elapsed_ms: float = 0.0
    artifact: Path | None = None

    @classmethod
    def from_generation(
        cls,
        size: int,
        generation: Generation,
        elapsed_ms: float = 0.0,
        artifact: Path | None = None,
    ) -> GenerationStats:
        counts = {group.value: 0 for group in SymmetryGroup}
        for group in generation.values():
            counts[group.value] += 1
        return cls(
            size=size,
            shape_count=len(generation),
            symmetry_counts=counts,
            elapsed_ms=elapsed_ms,
            artifact=artifact,
        )


# --- Run result ---
@dataclass
class EnumerationResult:
    """Aggregated statistics from one enumeration run."""

    max_size: int
    generations: list[GenerationStats] = field(default_factory=list)

    def total_shapes(self) -> int:
        return sum(g.shape_count for g in self.generations)

    def counts(self) -> dict[int, int]:
        return {g.size: g.shape_count for g in self.generations}

    def summary(self) -> str:
        lines = [f"Free polyhexes up to size {self.max_size}"]
        lines.append("=" * 60)
        for stats in self.generations:
            symmetric = stats.shape_count - stats.symmetry_counts.get(
                SymmetryGroup.NONE.value, 0
            )
            lines.append(
                f"  n={stats.size:>3d}: {stats.shape_count:8d} shapes  "
                f"({symmetric} symmetric)  {stats.elapsed_ms:8.1f}ms"
            )
        if self.generations:
            total_s = sum(g.elapsed_ms for g in self.generations) / 1000
            lines.append(f"  Total: {self.total_shapes()} shapes in {total_s:.1f}s")

            largest = self.generations[-1]
            lines.append(f"  Symmetry at n={largest.size}:")
            for group in SymmetryGroup:
                count = largest.symmetry_counts.get(group.value, 0)
                if count:
                    lines.append(f"    {group.description:>22s}: {count}")
        return "\n".join(lines)
