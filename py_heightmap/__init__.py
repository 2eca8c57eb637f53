"""
Diamond-square heightmap generation.
"""

from .core import (
    DomainError,
    GenerationParameters,
    GeneratorState,
    HeightMapGenerator,
    IndexOutOfRange,
    compute_side,
    wrap_index,
)

__version__ = "0.1.0"

__all__ = ['HeightMapGenerator', 'GenerationParameters', 'GeneratorState',
           'DomainError', 'IndexOutOfRange', 'compute_side', 'wrap_index']
