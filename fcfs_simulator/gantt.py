from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .config import IDLE_STYLE, PALETTE
from .models import IDLE, TimelineBlock


def compress_timeline(timeline: Iterable[str]) -> List[TimelineBlock]:
    """
    Merge runs of identical consecutive timeline units into blocks.
    """
    blocks: List[TimelineBlock] = []
    for unit in timeline:
        if blocks and blocks[-1].pid == unit:
            blocks[-1] = TimelineBlock(pid=unit, duration=blocks[-1].duration + 1)
        else:
            blocks.append(TimelineBlock(pid=unit, duration=1))
    return blocks


def expand_blocks(blocks: Iterable[TimelineBlock]) -> List[str]:
    timeline: List[str] = []
    for block in blocks:
        timeline.extend([block.pid] * block.duration)
    return timeline


def assign_colors(pids: Iterable[str]) -> Dict[str, str]:
    """
    Map each pid to a palette color, cycling in the order given.
    """
    pid_to_color: Dict[str, str] = {}
    for pid in pids:
        if pid == IDLE or pid in pid_to_color:
            continue
        pid_to_color[pid] = PALETTE[len(pid_to_color) % len(PALETTE)]
    return pid_to_color


def time_marks(blocks: Sequence[TimelineBlock]) -> List[int]:
    marks = [0]
    for block in blocks:
        marks.append(marks[-1] + block.duration)
    return marks


def render_gantt(blocks: Sequence[TimelineBlock]) -> str:
    """
    Plain-text Gantt chart renderer, one character per time unit.
    """
    if not blocks:
        return "(no execution)"

    line = "|"
    labels = ""
    marks = "0"
    last_time = 0

    for block in blocks:
        width = block.duration
        line += ("." if block.is_idle else "=") * width
        label = "" if block.is_idle else block.pid
        labels += label[:width].ljust(width)
        last_time += width
        marks += f"{last_time:>{max(width, len(str(last_time)))}}"

    line += "|"

    return "\n".join(
        [
            "Gantt Chart:",
            line,
            " " + labels,
            marks,
        ]
    )


def build_rich_gantt(blocks: Sequence[TimelineBlock], pid_to_color: Dict[str, str] | None = None) -> tuple[Panel, str]:
    """
    Build a Rich Panel containing a colored Gantt chart and a string with time marks.
    """
    if not blocks:
        panel = Panel("No execution", title="Gantt Chart")
        return panel, ""

    if pid_to_color is None:
        pid_to_color = assign_colors(block.pid for block in blocks)

    timeline = Text()
    labels = Text()
    ends = time_marks(blocks)[1:]
    marks = "0"

    for block, end in zip(blocks, ends):
        # Widen short blocks so both the label and the end mark fit.
        label = "idle" if block.is_idle else block.pid
        width = max(block.duration, len(label) + 1, len(str(end)) + 1)
        style = f"on {IDLE_STYLE}" if block.is_idle else f"on {pid_to_color.get(block.pid, 'white')}"

        timeline.append(" " * width, style=style)
        labels.append(label[:width].ljust(width), style="dim" if block.is_idle else "bold")

        marks += f"{end:>{width}}"

    table = Table.grid(padding=(0, 0))
    table.add_row(timeline)
    table.add_row(labels)

    panel = Panel.fit(table, title="Gantt Chart")
    return panel, marks
