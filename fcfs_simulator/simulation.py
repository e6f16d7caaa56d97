from __future__ import annotations

import logging
from typing import Iterable, Sequence

from .algorithms import schedule_fcfs
from .config import MAX_TIME_UNIT
from .gantt import compress_timeline
from .metrics import aggregate
from .models import ProcessInput, ProcessRow, SimulationReport
from .validation import validate_rows

logger = logging.getLogger(__name__)


def simulate(processes: Sequence[ProcessInput]) -> SimulationReport:
    """
    Schedule validated processes and derive the display data.

    Results are re-sorted by pid for display; the timeline keeps execution
    order.
    """
    schedule = schedule_fcfs(processes)
    blocks = compress_timeline(schedule.timeline)
    averages = aggregate(schedule.results)

    logger.debug(
        "Simulation finished: %d blocks, avg waiting %.2f, avg turnaround %.2f",
        len(blocks),
        averages.avg_waiting,
        averages.avg_turnaround,
    )

    return SimulationReport(
        results=tuple(sorted(schedule.results, key=lambda r: r.pid)),
        timeline=schedule.timeline,
        blocks=tuple(blocks),
        averages=averages,
    )


def simulate_rows(rows: Iterable[ProcessRow], max_time_unit: int = MAX_TIME_UNIT) -> SimulationReport:
    """
    Validate raw rows and simulate them. Raises ValidationError on bad input.
    """
    processes = validate_rows(rows, max_time_unit=max_time_unit)
    return simulate(processes)
