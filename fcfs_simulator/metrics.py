from __future__ import annotations

from typing import Sequence

from .models import IDLE, AverageMetrics, ScheduleResult


def aggregate(results: Sequence[ScheduleResult]) -> AverageMetrics:
    """
    Return the mean waiting and turnaround times across all results.
    """
    if not results:
        raise ValueError("Cannot average metrics of an empty schedule")

    n = len(results)
    return AverageMetrics(
        avg_waiting=sum(r.waiting_time for r in results) / n,
        avg_turnaround=sum(r.turnaround_time for r in results) / n,
    )


def cpu_busy_time(timeline: Sequence[str]) -> int:
    return sum(1 for unit in timeline if unit != IDLE)


def cpu_utilization(timeline: Sequence[str]) -> float:
    """
    Fraction of the makespan during which the CPU ran a process.
    """
    if not timeline:
        return 0.0
    return cpu_busy_time(timeline) / len(timeline)
