from __future__ import annotations

import argparse
import logging
import time
from dataclasses import replace
from pathlib import Path
from typing import Optional

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import SimulatorConfig
from .gantt import assign_colors, build_rich_gantt, expand_blocks, render_gantt
from .metrics import cpu_utilization
from .models import IDLE, SimulationReport
from .session import SimulatorSession
from .simulation import simulate
from .validation import ValidationError
from .workload_io import load_workload

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fcfs-sim",
        description="First-Come First-Served CPU scheduling simulator.",
    )
    parser.add_argument(
        "--max-time",
        type=int,
        default=None,
        help="Largest allowed arrival/burst time (default: 500, or $FCFS_SIM_MAX_TIME_UNIT).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug output.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Simulate FCFS on a workload file.")
    run_parser.add_argument(
        "--workload",
        "-w",
        required=True,
        help="Path to JSON or CSV workload file.",
    )
    run_parser.add_argument(
        "--step",
        action="store_true",
        help="Show a simple time-stepped simulation in the terminal.",
    )
    run_parser.add_argument(
        "--step-delay",
        type=float,
        default=0.3,
        help="Seconds to wait between steps when --step is used (default: 0.3).",
    )

    subparsers.add_parser(
        "menu",
        help="Interactive process table: edit rows, then simulate.",
    )

    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=verbose)],
        force=True,
    )


def _print_result(report: SimulationReport, console: Console) -> None:
    console.print("[bold]Algorithm:[/bold] FCFS (non-preemptive)")
    console.print()

    pid_to_color = assign_colors(r.pid for r in report.results)
    panel, time_marks = build_rich_gantt(report.blocks, pid_to_color)
    console.print(panel)
    if time_marks:
        console.print(time_marks)
    console.print(f"Total Execution Time: {report.makespan}")

    console.print()

    headers = ["PID", "Arrival", "Burst", "Completion", "Turnaround", "Waiting"]

    proc_table = Table(title="Process metrics", box=box.SIMPLE_HEAVY)
    for h in headers:
        justify = "center" if h == "PID" else "right"
        proc_table.add_column(h, justify=justify)

    for r in report.results:
        proc_table.add_row(
            f"[{pid_to_color.get(r.pid, 'white')}]{escape(r.pid)}[/]",
            str(r.arrival_time),
            str(r.burst_time),
            str(r.completion_time),
            str(r.turnaround_time),
            str(r.waiting_time),
        )

    console.print(proc_table)
    console.print()

    utilization = cpu_utilization(report.timeline)

    sys_table = Table(title="Averages", box=box.SIMPLE_HEAVY)
    sys_table.add_column("Metric")
    sys_table.add_column("Value", justify="right")
    sys_table.add_row("Avg waiting", f"{report.averages.avg_waiting:.2f}")
    sys_table.add_row("Avg turnaround", f"{report.averages.avg_turnaround:.2f}")
    sys_table.add_row("CPU utilization", f"{utilization * 100:.1f}%")

    console.print(sys_table)


def _print_error(message: str, console: Console) -> None:
    console.print(f"[bold red]!!! ERROR: {escape(message)}[/bold red]")


def _animate_result(report: SimulationReport, delay: float, console: Console) -> None:
    """
    Simple time-stepped textual simulation using the computed schedule.
    """
    units = expand_blocks(report.blocks)
    if not units:
        console.print("[red]No execution to animate.[/red]")
        return

    console.print(f"[bold]Simulating FCFS[/bold] (duration {len(units)} time units)")
    console.print("[dim]Press Ctrl+C to skip animation.[/dim]")

    run_length = 0
    for t, unit in enumerate(units):
        run_length = run_length + 1 if t > 0 and units[t - 1] == unit else 1
        if unit == IDLE:
            console.print(f"t={t:3d}: [idle]", markup=False)
        else:
            console.print(f"t={t:3d}: {escape(unit)} [green]{'█' * run_length}[/green]")
        time.sleep(delay)


def _print_table(session: SimulatorSession, console: Console) -> None:
    table = Table(title="Process input (arrival / burst)", box=box.SIMPLE_HEAVY)
    table.add_column("#", justify="right")
    table.add_column("PID", justify="center")
    table.add_column("Arrival", justify="right")
    table.add_column("Burst", justify="right")

    for idx, row in enumerate(session.rows, start=1):
        table.add_row(
            str(idx),
            escape(row.pid),
            "" if row.arrival is None else str(row.arrival),
            "" if row.burst is None else str(row.burst),
        )

    console.print(table)
    if session.error:
        _print_error(session.error, console)


def _pick_row(session: SimulatorSession, raw: str, console: Console) -> Optional[int]:
    try:
        idx = int(raw) - 1
    except ValueError:
        console.print("[red]Invalid row number.[/red]")
        return None
    if not 0 <= idx < len(session.rows):
        console.print("[red]Invalid row number.[/red]")
        return None
    return idx


def _interactive_menu(config: SimulatorConfig) -> None:
    console = Console()
    session = SimulatorSession(config)

    while True:
        console.print("\n[bold cyan]FCFS Simulator[/bold cyan] [dim](q to quit)[/dim]")
        _print_table(session, console)
        console.print(
            "  [yellow]e N[/yellow] edit row  [yellow]a[/yellow] add row  "
            "[yellow]d N[/yellow] delete row  [yellow]r[/yellow] reset  "
            "[yellow]s[/yellow] simulate"
        )

        choice = input("Choice: ").strip().lower()
        if choice in {"q", "quit", "exit"}:
            return

        command, _, arg = choice.partition(" ")

        if command == "a":
            session.add_row()
        elif command == "r":
            session.reset()
        elif command == "d":
            idx = _pick_row(session, arg, console)
            if idx is not None:
                session.remove_row(idx)
        elif command == "e":
            idx = _pick_row(session, arg, console)
            if idx is None:
                continue
            for field in ("arrival", "burst"):
                value = input(f"{session.rows[idx].pid} {field} time [blank=clear]: ").strip()
                if not session.update_field(idx, field, value):
                    console.print(f"[red]Ignored {escape(repr(value))}: digits only.[/red]")
        elif command == "s":
            report = session.simulate()
            if report is not None:
                _print_result(report, console)
                console.print("[dim]Run complete. Press Enter to return to menu...[/dim]")
                input()
        else:
            console.print("[red]Invalid selection.[/red]")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    console = Console()

    try:
        config = SimulatorConfig.from_env()
    except ValueError as exc:
        _print_error(str(exc), console)
        return 2
    if args.max_time is not None:
        if args.max_time < 1:
            parser.error("--max-time must be at least 1")
        config = replace(config, max_time_unit=args.max_time)

    if args.command == "run":
        try:
            processes = load_workload(Path(args.workload), max_time_unit=config.max_time_unit)
        except ValidationError as exc:
            _print_error(exc.message, console)
            return 2
        except (OSError, ValueError) as exc:
            logger.debug("Failed to load workload %s", args.workload, exc_info=True)
            _print_error(str(exc), console)
            return 1

        report = simulate(processes)
        logger.debug("Schedule for %s:\n%s", args.workload, render_gantt(report.blocks))
        if args.step:
            try:
                _animate_result(report, delay=args.step_delay, console=console)
            except KeyboardInterrupt:
                console.print("[yellow]Animation skipped.[/yellow]")
        _print_result(report, console)
        return 0

    if args.command == "menu":
        _interactive_menu(config)
        return 0

    parser.error(f"Unknown command: {args.command}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
