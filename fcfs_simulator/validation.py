from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional

from .config import MAX_TIME_UNIT
from .models import FieldValue, ProcessInput, ProcessRow, is_blank_value

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"\d*")
_INTEGER = re.compile(r"[+-]?\d+")


class ValidationError(ValueError):
    """
    Raised when a batch of process rows cannot be scheduled.
    """

    def __init__(self, message: str, pid: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.pid = pid


class InvalidIdentifier(ValidationError):
    pass


class IncompleteProcess(ValidationError):
    pass


class InvalidNumeric(ValidationError):
    pass


class OutOfRange(ValidationError):
    pass


class ValueTooLarge(ValidationError):
    pass


class EmptyBatch(ValidationError):
    pass


def is_digit_entry(value: str) -> bool:
    """
    True if ``value`` may be typed into a time field (digits only, or empty).
    """
    return bool(_DIGITS.fullmatch(value))


def _to_int(value: FieldValue, pid: str) -> int:
    if isinstance(value, bool):
        raise InvalidNumeric(_numeric_message(pid), pid=pid)
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INTEGER.fullmatch(value.strip()):
        return int(value.strip())
    raise InvalidNumeric(_numeric_message(pid), pid=pid)


def _numeric_message(pid: str) -> str:
    return f"Process {pid}: Arrival Time and Burst Time must be valid numbers."


def validate_rows(rows: Iterable[ProcessRow], max_time_unit: int = MAX_TIME_UNIT) -> List[ProcessInput]:
    """
    Convert raw table rows into scheduler input.

    Rows are checked in order and the first violated rule aborts the whole
    batch. Rows with both times blank are skipped; at least one filled row
    is required.
    """
    processes: List[ProcessInput] = []

    for row in rows:
        pid = row.pid
        if not isinstance(pid, str) or not pid.strip():
            raise InvalidIdentifier("PID cannot be empty for any process.")

        if row.is_blank():
            continue

        if is_blank_value(row.arrival) or is_blank_value(row.burst):
            raise IncompleteProcess(
                f"Process {pid}: Arrival Time and Burst Time must both be filled.",
                pid=pid,
            )

        arrival = _to_int(row.arrival, pid)
        burst = _to_int(row.burst, pid)

        if arrival < 0 or burst < 1:
            raise OutOfRange(
                f"Process {pid}: Arrival Time must be ≥ 0 and Burst Time must be ≥ 1.",
                pid=pid,
            )
        if arrival > max_time_unit or burst > max_time_unit:
            raise ValueTooLarge(
                f"Process {pid}: Value too large. Times must be ≤ {max_time_unit}.",
                pid=pid,
            )

        processes.append(ProcessInput(pid=pid, arrival_time=arrival, burst_time=burst))

    if not processes:
        raise EmptyBatch("Please define at least one process.")

    logger.debug("Validated %d processes", len(processes))
    return processes
