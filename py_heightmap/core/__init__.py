"""
Core heightmap generation functionality.
"""

from .alea_prng import AleaPRNG, RandomSource
from .exceptions import BenchmarkError, DomainError, HeightmapError, IndexOutOfRange
from .grid import MAX_FACTOR, MIN_FACTOR, WraparoundGrid, clamp_factor, compute_side, wrap_index
from .heightmap_generator import GenerationParameters, GeneratorState, HeightMapGenerator

__all__ = ['AleaPRNG', 'RandomSource',
           'HeightmapError', 'DomainError', 'IndexOutOfRange', 'BenchmarkError',
           'MIN_FACTOR', 'MAX_FACTOR', 'WraparoundGrid', 'clamp_factor', 'compute_side', 'wrap_index',
           'GenerationParameters', 'GeneratorState', 'HeightMapGenerator']
