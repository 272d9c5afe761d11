"""
Profiling utilities for the Grade Report pipeline.

Measures wall-clock time (perf_counter) and resident memory (psutil) around a
block of code so a pipeline run can report how long it took.

Usage:
    from grade_report.utils.profiler import profile_block

    with profile_block("grade-report") as stats:
        run()

    print(stats.duration_seconds, stats.peak_rss_bytes)
"""

from __future__ import annotations

import contextlib
import time
from dataclasses import dataclass, field
from typing import Any, Generator, Optional

import psutil


@dataclass
class ProfileStats:
    """
    Container for profiling measurements.
    """

    label: str
    start_ts: float = field(default=0.0)
    end_ts: float = field(default=0.0)
    duration_seconds: float = field(default=0.0)
    peak_rss_bytes: Optional[int] = field(default=None)
    extra: dict[str, Any] = field(default_factory=dict)


@contextlib.contextmanager
def profile_block(label: str) -> Generator[ProfileStats, None, None]:
    """
    Context manager to profile a block of code.

    Stats are filled in when the block exits, including when it raises.
    RSS is the larger of the readings taken on entry and on exit.
    """
    stats = ProfileStats(label=label)
    process = psutil.Process()
    rss_on_entry = process.memory_info().rss

    stats.start_ts = time.perf_counter()
    try:
        yield stats
    finally:
        stats.end_ts = time.perf_counter()
        stats.duration_seconds = stats.end_ts - stats.start_ts
        stats.peak_rss_bytes = max(rss_on_entry, process.memory_info().rss)


__all__ = ["ProfileStats", "profile_block"]
