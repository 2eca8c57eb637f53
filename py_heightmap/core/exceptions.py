"""
Exception types raised by the heightmap generator.
"""


class HeightmapError(Exception):
    """Base class for all heightmap errors."""


class DomainError(HeightmapError, ValueError):
    """Raised when a generation parameter is outside its valid domain."""


class IndexOutOfRange(HeightmapError, IndexError):
    """Raised when a map position lies outside the grid buffer."""


class BenchmarkError(HeightmapError, RuntimeError):
    """Raised when a benchmark is used out of order."""
