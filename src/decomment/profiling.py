"""decomment ScanAccumulator — opt-in profiling for comment stripping.

This module provides accumulated metrics across scans:
- Total elapsed time
- Source and output length
- Number of comments removed

Zero overhead when disabled (get_scan_accumulator() returns None).

Example:
    from decomment import strip_comments
    from decomment.profiling import profiled_scan

    with profiled_scan() as metrics:
        strip_comments("code // note\\n")

    print(metrics.summary())
    # {"total_ms": 0.1, "scan_calls": 1, "source_length": 13, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ScanAccumulator:
    """Accumulated metrics across scans.

    Attributes:
        start_time: Profiling start timestamp.
        scan_calls: Number of scans recorded.
        source_length: Total characters read.
        output_length: Total characters produced.
        comments_removed: Total comments dropped.

    """

    start_time: float = field(default_factory=perf_counter)
    scan_calls: int = 0
    source_length: int = 0
    output_length: int = 0
    comments_removed: int = 0

    def record_scan(self, source_length: int, output_length: int, comments_removed: int) -> None:
        """Record one completed scan."""
        self.scan_calls += 1
        self.source_length += source_length
        self.output_length += output_length
        self.comments_removed += comments_removed

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics.

        Returns:
            Dict with total_ms, scan_calls, source_length, output_length,
            comments_removed.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "scan_calls": self.scan_calls,
            "source_length": self.source_length,
            "output_length": self.output_length,
            "comments_removed": self.comments_removed,
        }


_accumulator: ContextVar[ScanAccumulator | None] = ContextVar(
    "scan_accumulator",
    default=None,
)


def get_scan_accumulator() -> ScanAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_scan() -> Iterator[ScanAccumulator]:
    """Context manager for profiled scanning.

    Creates a ScanAccumulator and makes it available via
    get_scan_accumulator() for the duration of the with block.

    Yields:
        ScanAccumulator that will be populated during scans.

    """
    acc = ScanAccumulator()
    token: Token[ScanAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
