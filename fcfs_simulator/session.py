from __future__ import annotations

import logging
from typing import List, Optional

from .config import SimulatorConfig
from .models import ProcessRow, SimulationReport
from .simulation import simulate_rows
from .validation import ValidationError, is_digit_entry

logger = logging.getLogger(__name__)

TIME_FIELDS = ("arrival", "burst")


class SimulatorSession:
    """
    Editable process table plus the latest simulation outcome.

    Holds either a report or an error message from the last simulate() call,
    never both. Any edit to the table discards the previous outcome.
    """

    def __init__(self, config: Optional[SimulatorConfig] = None) -> None:
        self.config = config or SimulatorConfig()
        self.rows: List[ProcessRow] = []
        self.report: Optional[SimulationReport] = None
        self.error = ""
        self.reset()

    def reset(self) -> None:
        self.rows = [ProcessRow(pid=f"P{i + 1}") for i in range(self.config.default_row_count)]
        self.report = None
        self.error = ""

    def add_row(self) -> ProcessRow:
        row = ProcessRow(pid=f"P{len(self.rows) + 1}")
        self.rows.append(row)
        self.report = None
        return row

    def remove_row(self, index: int) -> None:
        """
        Delete a row and renumber the remaining rows P1..Pn.
        """
        del self.rows[index]
        self.rows = [
            ProcessRow(pid=f"P{i + 1}", arrival=row.arrival, burst=row.burst)
            for i, row in enumerate(self.rows)
        ]
        self.report = None
        self.error = ""

    def update_field(self, index: int, field: str, value: str) -> bool:
        """
        Set one cell of the table. Time fields only accept digits; anything
        else is ignored and False is returned.
        """
        row = self.rows[index]
        self.error = ""

        if field == "pid":
            row.pid = value
            return True

        if field not in TIME_FIELDS:
            raise ValueError(f"Unknown field: {field!r} (use pid, arrival or burst)")

        if not is_digit_entry(value):
            logger.debug("Ignored non-digit entry %r for %s of row %d", value, field, index)
            return False

        setattr(row, field, None if value == "" else int(value))
        return True

    def simulate(self) -> Optional[SimulationReport]:
        self.report = None
        self.error = ""

        snapshot = [ProcessRow(pid=r.pid, arrival=r.arrival, burst=r.burst) for r in self.rows]
        try:
            self.report = simulate_rows(snapshot, max_time_unit=self.config.max_time_unit)
        except ValidationError as exc:
            logger.info("Simulation rejected: %s", exc.message)
            self.error = exc.message

        return self.report
