"""
Grid sizing and wraparound indexing for diamond-square heightmaps.

A heightmap is stored as a flat, row-major NumPy array of ``side * side``
values where ``side = 2**factor + 1``. Coordinates passed to the accessor may
fall up to one full side outside the grid; they wrap around on both axes so
that edge cells always have four neighbours.
"""

import operator

import numpy as np
import structlog

logger = structlog.get_logger()

MIN_FACTOR = 2
MAX_FACTOR = 12


def clamp_factor(factor: int) -> int:
    """Clamp a detail factor into [MIN_FACTOR, MAX_FACTOR]."""
    factor = operator.index(factor)
    clamped = min(max(factor, MIN_FACTOR), MAX_FACTOR)
    if clamped != factor:
        logger.debug("Detail factor clamped", requested=factor, factor=clamped)
    return clamped


def compute_side(factor: int) -> int:
    """
    Convert a detail factor into a grid side length.

    Out-of-range factors are clamped silently rather than rejected.

    Args:
        factor: Requested detail level

    Returns:
        Side length ``2**factor + 1`` of the clamped factor
    """
    return 2 ** clamp_factor(factor) + 1


def wrap_index(x: int, y: int, side: int) -> int:
    """Map a possibly out-of-range (x, y) onto a linear index into the grid."""
    return ((y + side) % side) * side + ((x + side) % side)


class WraparoundGrid:
    """
    Toroidal 2D view over a flat heightmap buffer.

    The buffer is shared, not copied: writes through ``set`` land directly in
    the array handed to the constructor.
    """

    def __init__(self, buffer: np.ndarray, side: int):
        if buffer.shape != (side * side,):
            raise ValueError(
                f"Buffer of shape {buffer.shape} does not match side {side}"
            )
        self.buffer = buffer
        self.side = side

    def index(self, x: int, y: int) -> int:
        return wrap_index(x, y, self.side)

    def get(self, x: int, y: int):
        return self.buffer[wrap_index(x, y, self.side)]

    def set(self, x: int, y: int, value) -> None:
        self.buffer[wrap_index(x, y, self.side)] = value
