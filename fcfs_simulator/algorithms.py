from __future__ import annotations

import logging
from typing import Iterable, List

from .models import IDLE, ProcessInput, Schedule, ScheduleResult

logger = logging.getLogger(__name__)


def schedule_fcfs(processes: Iterable[ProcessInput]) -> Schedule:
    """
    First-Come First-Serve (non-preemptive) scheduling.

    Processes run to completion in arrival order; simultaneous arrivals run
    in ascending pid order. The returned timeline holds one entry per time
    unit, either the running pid or IDLE.
    """
    processes_sorted = sorted(processes, key=lambda p: (p.arrival_time, p.pid))

    clock = 0
    timeline: List[str] = []
    results: List[ScheduleResult] = []

    for p in processes_sorted:
        if p.arrival_time > clock:
            timeline.extend([IDLE] * (p.arrival_time - clock))
            clock = p.arrival_time

        timeline.extend([p.pid] * p.burst_time)

        completion_time = clock + p.burst_time
        turnaround_time = completion_time - p.arrival_time
        waiting_time = turnaround_time - p.burst_time

        results.append(
            ScheduleResult(
                pid=p.pid,
                arrival_time=p.arrival_time,
                burst_time=p.burst_time,
                completion_time=completion_time,
                turnaround_time=turnaround_time,
                waiting_time=waiting_time,
            )
        )

        clock = completion_time

    logger.debug("FCFS scheduled %d processes, makespan %d", len(results), clock)
    return Schedule(timeline=tuple(timeline), results=tuple(results))
