from __future__ import annotations

from polyhex.geometry.types import Shape


class PolyhexError(Exception):
    """Base class for enumeration errors."""
    pass


class InvalidSizeError(PolyhexError):
    """Requested maximum size is not a positive integer."""

    def __init__(self, size: int):
        self.size = size
        super().__init__(f"Maximum size must be a positive integer, got {size!r}")


class SymmetryClassificationError(PolyhexError):
    """A symmetry label disagrees with the shape's stabilizer order."""

    def __init__(self, message: str, shape: Shape, stabilizer_order: int):
        self.message = message
        self.shape = shape
        self.stabilizer_order = stabilizer_order
        super().__init__(message)


class GenerationError(PolyhexError):
    """A generation failed its completeness or uniqueness audit."""

    def __init__(self, message: str, size: int):
        self.message = message
        self.size = size
        super().__init__(message)
