"""Exceptions raised by shapemath2d.

Geometric degeneracies never raise; they return sentinel values instead.
These exceptions cover programming errors only.
"""


class ShapeMathError(Exception):
    """Base class for shapemath2d errors."""


class UnrecognizedShapeKindError(ShapeMathError, TypeError):
    """Raised when intersection dispatch meets an unknown pair of shape kinds."""


class BufferTooSmallError(ShapeMathError, IndexError):
    """Raised when a caller-supplied output buffer cannot hold the result."""

    def __init__(self, required: int, capacity: int):
        super().__init__(
            f"Output buffer holds {capacity} entries, {required} required"
        )
        self.required = required
        self.capacity = capacity
