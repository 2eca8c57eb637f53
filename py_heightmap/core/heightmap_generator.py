"""
Heightmap generation using the diamond-square algorithm.

The generator fills a flat ``side * side`` grid by recursive midpoint
displacement: the four corners are seeded with random values, then the step
size is halved repeatedly, alternating a diamond pass (cell centres) and a
square pass (edge midpoints). Every new value is the average of four
neighbours and one random perturbation term.

Example:

    generator = HeightMapGenerator(8, 0.096, seed=1234)
    generator.build()
    heights = generator.get_map()
"""

import operator
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import numpy as np
import structlog

from ..config import settings as default_settings
from .alea_prng import AleaPRNG, RandomSource
from .exceptions import DomainError, IndexOutOfRange
from .grid import MAX_FACTOR, MIN_FACTOR, WraparoundGrid, clamp_factor, compute_side

logger = structlog.get_logger()


def _time_seed() -> int:
    return int(time.time()) & 0xFFFFFFFF


@dataclass(frozen=True)
class GenerationParameters:
    """
    Immutable configuration for one generator instance.

    ``factor`` is kept as requested; clamping happens when the grid is sized.
    A missing seed is taken from the current time.
    """

    factor: int
    offset: float
    seed: Optional[int] = None
    dtype: Any = np.float64
    roughness_decay: bool = False

    def __post_init__(self):
        try:
            dtype = np.dtype(self.dtype)
        except TypeError as e:
            raise DomainError(f"Unknown dtype {self.dtype!r}") from e
        if not np.issubdtype(dtype, np.floating):
            raise DomainError(f"Heightmap dtype must be floating point, got {dtype}")

        # Checked in the grid dtype, so overflow and underflow are caught
        try:
            with np.errstate(over="ignore", under="ignore"):
                offset = dtype.type(self.offset)
        except (TypeError, ValueError) as e:
            raise DomainError(f"Offset must be a number, got {self.offset!r}") from e
        if offset == 0 or not np.isfinite(offset):
            raise DomainError(
                f"Offset must be a finite non-zero {dtype} number, got {self.offset!r}"
            )

        seed = _time_seed() if self.seed is None else operator.index(self.seed)
        if seed < 0:
            raise DomainError(f"Seed must be non-negative, got {seed}")

        object.__setattr__(self, "factor", operator.index(self.factor))
        object.__setattr__(self, "seed", seed)
        object.__setattr__(self, "dtype", dtype)


class GeneratorState(Enum):
    """Lifecycle of a HeightMapGenerator."""

    UNINITIALIZED = "uninitialized"
    SEEDED = "seeded"
    GENERATING = "generating"
    COMPLETE = "complete"


class HeightMapGenerator:
    """
    Generates a square heightmap with the diamond-square algorithm.

    The grid side is fixed at construction from the detail factor. Each call
    to ``build()`` re-seeds the instance's own random source, so repeated
    builds with the same parameters always produce the same map.
    """

    MIN_FACTOR = MIN_FACTOR
    MAX_FACTOR = MAX_FACTOR

    def __init__(
        self,
        factor: int,
        offset: float,
        seed: Optional[int] = None,
        *,
        dtype: Any = np.float64,
        roughness_decay: bool = False,
        random_source: Optional[RandomSource] = None,
    ):
        """
        Initialize the heightmap generator.

        Args:
            factor: Detail factor; the grid side is ``2**factor + 1``
            offset: Non-zero divisor for the random term, higher is smoother
            seed: Seed for the random source, defaults to the current time
            dtype: NumPy floating dtype of the grid
            roughness_decay: Shrink the random term as the step size shrinks
            random_source: Optional seedable source replacing the Alea PRNG
        """
        self._state = GeneratorState.UNINITIALIZED
        self.params = GenerationParameters(
            factor=factor,
            offset=offset,
            seed=seed,
            dtype=dtype,
            roughness_decay=roughness_decay,
        )

        self._factor = clamp_factor(self.params.factor)
        self._side = compute_side(self.params.factor)
        self._scalar = self.params.dtype.type
        self._offset = self._scalar(self.params.offset)

        self._heights = np.zeros(self._side * self._side, dtype=self.params.dtype)
        self._grid = WraparoundGrid(self._heights, self._side)

        self._prng = random_source if random_source is not None else AleaPRNG()
        self._prng.seed(self.params.seed)
        self._state = GeneratorState.SEEDED

    @classmethod
    def from_settings(cls, config=None, **overrides) -> "HeightMapGenerator":
        """Create a generator from application settings, with keyword overrides."""
        config = config or default_settings
        kwargs = {
            "factor": config.default_factor,
            "offset": config.default_offset,
            "seed": config.default_seed,
            "dtype": config.dtype,
            "roughness_decay": config.roughness_decay,
        }
        kwargs.update(overrides)
        return cls(**kwargs)

    @property
    def side(self) -> int:
        return self._side

    @property
    def factor(self) -> int:
        return self._factor

    @property
    def seed(self) -> int:
        return self.params.seed

    @property
    def offset(self) -> float:
        return self.params.offset

    @property
    def dtype(self) -> np.dtype:
        return self.params.dtype

    @property
    def state(self) -> GeneratorState:
        return self._state

    @property
    def is_complete(self) -> bool:
        return self._state is GeneratorState.COMPLETE

    def build(self) -> np.ndarray:
        """
        Build the heightmap.

        The grid is replaced wholesale: the random source is re-seeded, a new
        zero-filled buffer is allocated, the corners are seeded and the
        diamond-square loop runs until the step size reaches 1.

        Returns:
            Read-only copy of the finished heightmap
        """
        logger.info(
            "Building heightmap",
            side=self._side,
            seed=self.seed,
            offset=self.offset,
            roughness_decay=self.params.roughness_decay,
        )
        started = time.perf_counter()

        self._reset()
        self._seed_corners()

        self._state = GeneratorState.GENERATING
        step = self._side - 1
        while step > 1:
            logger.debug("Subdivision step", step=step)
            self._diamond_pass(step)
            self._square_pass(step)
            step //= 2
        self._state = GeneratorState.COMPLETE

        logger.info(
            "Heightmap complete",
            side=self._side,
            min_height=float(self._heights.min()),
            max_height=float(self._heights.max()),
            elapsed=round(time.perf_counter() - started, 4),
        )
        return self.get_map()

    def get_map(self) -> np.ndarray:
        """Return a read-only, row-major copy of the whole grid."""
        snapshot = self._heights.copy()
        snapshot.flags.writeable = False
        return snapshot

    def get_value(self, position: int):
        """
        Get a single value in the heightmap.

        Args:
            position: Row-major position in the flat grid

        Returns:
            Height at that position

        Raises:
            IndexOutOfRange: If position is negative or >= side * side
        """
        position = operator.index(position)
        if position < 0 or position >= self._heights.size:
            raise IndexOutOfRange(
                f"Invalid map position {position} for grid of {self._heights.size} cells"
            )
        return self._heights[position]

    def __getitem__(self, position: int):
        return self.get_value(position)

    def __len__(self) -> int:
        return self._side * self._side

    def _reset(self) -> None:
        """Re-seed the random source and start from a zero-filled grid."""
        self._prng.seed(self.params.seed)
        self._heights = np.zeros(self._side * self._side, dtype=self.params.dtype)
        self._grid = WraparoundGrid(self._heights, self._side)
        self._state = GeneratorState.SEEDED

    def _random(self):
        return self._scalar(self._prng.random())

    def _perturbation(self, step: int):
        """Random term added to each 4-way average."""
        value = self._random() / self._offset
        if self.params.roughness_decay:
            value = value * (self._scalar(step) / self._scalar(self._side - 1))
        return value

    def _set(self, x: int, y: int, value) -> None:
        self._grid.set(x, y, value)

    def _seed_corners(self) -> None:
        # This also counts as the first square step
        last = self._side - 1
        for x, y in ((0, 0), (last, 0), (0, last), (last, last)):
            self._set(x, y, self._random() / self._offset)

    def _diamond_pass(self, step: int) -> None:
        """Set the centre of every step x step cell."""
        half = step // 2
        get = self._grid.get
        for y in range(0, self._side - 1, step):
            for x in range(0, self._side - 1, step):
                total = (
                    get(x, y)
                    + get(x, y + step)
                    + get(x + step, y)
                    + get(x + step, y + step)
                )
                self._set(x + half, y + half, (total + self._perturbation(step)) / 5)

    def _square_pass(self, step: int) -> None:
        """Set the edge midpoints, reading neighbours across the wrapped border."""
        half = step // 2
        get = self._grid.get
        for y in range(0, self._side, half):
            for x in range((y + half) % step, self._side, step):
                total = (
                    get(x, y - half)
                    + get(x + half, y)
                    + get(x, y + half)
                    + get(x - half, y)
                )
                self._set(x, y, (total + self._perturbation(step)) / 5)
