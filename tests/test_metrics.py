import pytest

from fcfs_simulator.metrics import aggregate, cpu_busy_time, cpu_utilization
from fcfs_simulator.models import IDLE, ScheduleResult


def _results():
    return [
        ScheduleResult("P1", 0, 5, completion_time=5, turnaround_time=5, waiting_time=0),
        ScheduleResult("P2", 1, 3, completion_time=8, turnaround_time=7, waiting_time=4),
    ]


def test_aggregate_means():
    averages = aggregate(_results())
    assert averages.avg_waiting == pytest.approx(2.0)
    assert averages.avg_turnaround == pytest.approx(6.0)


def test_aggregate_requires_results():
    with pytest.raises(ValueError):
        aggregate([])


def test_cpu_busy_and_utilization():
    timeline = [IDLE, IDLE, "P1", "P1", "P1"]
    assert cpu_busy_time(timeline) == 3
    assert cpu_utilization(timeline) == pytest.approx(0.6)
    assert cpu_utilization([]) == 0.0
