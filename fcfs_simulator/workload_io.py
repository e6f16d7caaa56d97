from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import List, Mapping

from .config import MAX_TIME_UNIT
from .models import ProcessInput, ProcessRow
from .validation import validate_rows

logger = logging.getLogger(__name__)


def load_workload(path: str | Path, max_time_unit: int = MAX_TIME_UNIT) -> List[ProcessInput]:
    """
    Load a workload file and validate it into scheduler input.
    """
    return validate_rows(load_rows(path), max_time_unit=max_time_unit)


def load_rows(path: str | Path) -> List[ProcessRow]:
    """
    Load a workload from a JSON or CSV file into raw, unvalidated rows.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        rows = _load_json(path)
    elif suffix == ".csv":
        rows = _load_csv(path)
    else:
        raise ValueError(f"Unsupported workload format: {suffix} (use .json or .csv)")

    logger.debug("Loaded %d rows from %s", len(rows), path)
    return rows


def _load_json(path: Path) -> List[ProcessRow]:
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, list):
        raise ValueError("JSON workload must be a list of process objects")

    return [_row_from_mapping(entry) for entry in raw]


def _load_csv(path: Path) -> List[ProcessRow]:
    rows: List[ProcessRow] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        for row in reader:
            rows.append(_row_from_mapping(row))
    return rows


def _row_from_mapping(mapping: Mapping) -> ProcessRow:
    try:
        pid = mapping["pid"]
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Invalid process entry: {mapping!r}") from exc

    return ProcessRow(
        pid="" if pid is None else str(pid),
        arrival=mapping.get("arrival_time"),
        burst=mapping.get("burst_time"),
    )
