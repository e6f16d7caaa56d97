"""
FCFS simulator package.

Provides a First-Come First-Served CPU scheduling simulator with a
terminal front end: an editable process table, a Gantt chart and
per-process metrics.
"""

from .algorithms import schedule_fcfs
from .simulation import simulate, simulate_rows

__all__ = ["cli", "schedule_fcfs", "simulate", "simulate_rows"]
