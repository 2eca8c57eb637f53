"""
Benchmark timer that appends duration records to a shared log file.

Example:

    bench = Benchmark("Build map", DurationUnit.MILLISECONDS)
    bench.start()
    generator.build()
    bench.stop()

Each ``stop()`` appends one record. Writers in different threads are
serialized by a lock shared by all Benchmark instances.
"""

import threading
import time
from enum import Enum
from pathlib import Path
from typing import Optional, Union

import structlog

from ..config import settings
from ..core.exceptions import BenchmarkError

logger = structlog.get_logger()


class DurationUnit(Enum):
    """Duration units with their display label and length in nanoseconds."""

    NANOSECONDS = ("nanoseconds", 1)
    MICROSECONDS = ("microseconds", 1_000)
    MILLISECONDS = ("milliseconds", 1_000_000)
    SECONDS = ("seconds", 1_000_000_000)
    MINUTES = ("minutes", 60 * 1_000_000_000)
    HOURS = ("hours", 3600 * 1_000_000_000)

    def __init__(self, label: str, nanoseconds: int):
        self.label = label
        self.nanoseconds = nanoseconds

    @classmethod
    def parse(cls, value: Union[str, "DurationUnit"]) -> "DurationUnit":
        """Look up a unit by its label, e.g. ``"milliseconds"``."""
        if isinstance(value, cls):
            return value
        for unit in cls:
            if unit.label == str(value).lower():
                return unit
        raise ValueError(f"Unknown duration unit: {value!r}")

    def convert(self, nanoseconds: int) -> int:
        """Truncate a nanosecond duration to whole units."""
        return nanoseconds // self.nanoseconds


class Benchmark:
    """Time a block of work and record it in the benchmark log."""

    _lock = threading.Lock()

    def __init__(
        self,
        label: str,
        unit: Union[str, DurationUnit, None] = None,
        log_path: Union[str, Path, None] = None,
    ):
        self.label = label
        self.unit = DurationUnit.parse(unit or settings.benchmark_unit)
        self.log_path = Path(log_path or settings.benchmark_log_path)
        self._started_at: Optional[float] = None
        self._start_ns: Optional[int] = None

    def start(self) -> None:
        self._started_at = time.time()
        self._start_ns = time.perf_counter_ns()

    def stop(self) -> int:
        """
        Stop the benchmark and append a record to the log file.

        Returns:
            Elapsed time in nanoseconds

        Raises:
            BenchmarkError: If ``start()`` was not called first
        """
        end_ns = time.perf_counter_ns()
        finished_at = time.time()
        if self._start_ns is None:
            raise BenchmarkError(f"Benchmark '{self.label}' was stopped before it was started")

        elapsed_ns = end_ns - self._start_ns
        lines = [
            f"Benchmark:  {self.label}",
            f"Started at:  {time.ctime(self._started_at)}",
            f"Completed at:  {time.ctime(finished_at)}",
        ]
        if elapsed_ns == 0:
            lines.append("Internal clock did not tick during benchmark")
        else:
            lines.append(f"Total time:  {self.unit.convert(elapsed_ns)} {self.unit.label}")
        record = "\n".join(lines) + "\n\n"

        with self._lock:
            self.log_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.log_path, "a", encoding="utf-8") as log_file:
                log_file.write(record)

        logger.info(
            "Benchmark complete",
            benchmark=self.label,
            elapsed=self.unit.convert(elapsed_ns),
            unit=self.unit.label,
        )
        self._start_ns = None
        return elapsed_ns

    def __enter__(self) -> "Benchmark":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.stop()
        return False
