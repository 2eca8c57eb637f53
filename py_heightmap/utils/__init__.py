"""
Utilities around heightmap generation: logging setup and benchmarking.
"""

from .benchmark import Benchmark, DurationUnit
from .log_config import configure_logging

__all__ = ['Benchmark', 'DurationUnit', 'configure_logging']
