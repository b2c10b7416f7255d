#!/usr/bin/env python3
"""
Timestamp Benchmark Script.

Measures per-call cost of the TimePoint hot paths.
"""

import statistics
import sys
from collections.abc import Callable
from datetime import UTC
from pathlib import Path

# Add src to path for direct execution
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from timepoint import TimePoint, add_time, time_difference
from timepoint.utils.time import LatencyTimer, format_duration_us


def benchmark(op: Callable[[], object], batches: int = 50, batch_size: int = 2000) -> dict[str, float]:
    """Time ``op`` in batches and return per-call latency stats in microseconds."""
    per_call: list[float] = []

    for _ in range(batches):
        with LatencyTimer() as timer:
            for _ in range(batch_size):
                op()
        per_call.append(timer.latency_us / batch_size)

    return {
        "min": min(per_call),
        "max": max(per_call),
        "avg": statistics.mean(per_call),
        "p50": statistics.median(per_call),
    }


def format_stats(stats: dict[str, float]) -> str:
    """Format stats for display, in nanoseconds below one microsecond."""
    return ", ".join(
        f"{name}={value * 1000:.0f}ns" if value < 1 else f"{name}={format_duration_us(int(value))}"
        for name, value in stats.items()
    )


def main() -> int:
    """Run all benchmarks."""
    a = TimePoint(1_530_000_000_123_456)
    b = TimePoint(1_530_000_001_000_000)

    cases: list[tuple[str, Callable[[], object]]] = [
        ("TimePoint.now()", TimePoint.now),
        ("to_string()", a.to_string),
        ("to_formatted_string(UTC)", lambda: a.to_formatted_string(tz=UTC)),
        ("time_difference()", lambda: time_difference(a, b)),
        ("add_time()", lambda: add_time(a, 1.5)),
        ("comparison", lambda: a < b),
    ]

    print("=" * 70)
    print("  TIMEPOINT BENCHMARK")
    print("=" * 70)
    print()

    # Warm up
    for _, op in cases:
        benchmark(op, batches=2, batch_size=100)

    for i, (name, op) in enumerate(cases, start=1):
        print(f"{i}. {name}")
        print(f"   {format_stats(benchmark(op))}")
        print()

    return 0


if __name__ == "__main__":
    sys.exit(main())
