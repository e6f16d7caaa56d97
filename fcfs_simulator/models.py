from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

IDLE = "IDLE"

FieldValue = Optional[Union[str, int]]


@dataclass(frozen=True)
class ProcessInput:
    pid: str
    arrival_time: int
    burst_time: int


@dataclass(frozen=True)
class ScheduleResult:
    pid: str
    arrival_time: int
    burst_time: int
    completion_time: int
    turnaround_time: int
    waiting_time: int


@dataclass(frozen=True)
class TimelineBlock:
    """
    A run of consecutive identical timeline units in the Gantt chart.
    """

    pid: str
    duration: int

    @property
    def is_idle(self) -> bool:
        return self.pid == IDLE


@dataclass(frozen=True)
class Schedule:
    """
    Per-unit execution trace plus per-process results in execution order.
    """

    timeline: Tuple[str, ...] = ()
    results: Tuple[ScheduleResult, ...] = ()

    @property
    def makespan(self) -> int:
        return len(self.timeline)


@dataclass(frozen=True)
class AverageMetrics:
    avg_waiting: float
    avg_turnaround: float


@dataclass(frozen=True)
class SimulationReport:
    results: Tuple[ScheduleResult, ...]
    timeline: Tuple[str, ...]
    blocks: Tuple[TimelineBlock, ...]
    averages: AverageMetrics

    @property
    def makespan(self) -> int:
        return sum(block.duration for block in self.blocks)


@dataclass
class ProcessRow:
    """
    One editable row of the process table. Times stay blank until filled.
    """

    pid: str
    arrival: FieldValue = None
    burst: FieldValue = None

    def is_blank(self) -> bool:
        return is_blank_value(self.arrival) and is_blank_value(self.burst)


def is_blank_value(value: FieldValue) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())
