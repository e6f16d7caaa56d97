from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

MAX_TIME_UNIT = 500
DEFAULT_ROW_COUNT = 4

PALETTE: Tuple[str, ...] = ("blue", "green", "yellow", "magenta", "cyan")
IDLE_STYLE = "grey50"

ENV_MAX_TIME_UNIT = "FCFS_SIM_MAX_TIME_UNIT"


@dataclass(frozen=True)
class SimulatorConfig:
    max_time_unit: int = MAX_TIME_UNIT
    default_row_count: int = DEFAULT_ROW_COUNT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SimulatorConfig":
        """
        Build a config from defaults, overridden by environment variables.
        """
        environ = os.environ if environ is None else environ
        raw = environ.get(ENV_MAX_TIME_UNIT, "").strip()
        if not raw:
            return cls()

        try:
            max_time_unit = int(raw)
        except ValueError as exc:
            raise ValueError(f"{ENV_MAX_TIME_UNIT} must be an integer, got {raw!r}") from exc
        if max_time_unit < 1:
            raise ValueError(f"{ENV_MAX_TIME_UNIT} must be at least 1, got {max_time_unit}")

        return cls(max_time_unit=max_time_unit)
