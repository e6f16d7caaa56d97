from pathlib import Path

import pytest

from fcfs_simulator import cli


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    monkeypatch.delenv("FCFS_SIM_MAX_TIME_UNIT", raising=False)


def _workload(tmp_path: Path, body: str) -> Path:
    p = tmp_path / "w.json"
    p.write_text(body)
    return p


def test_run_prints_results(tmp_path: Path, capsys):
    p = _workload(tmp_path, '[{"pid":"P1","arrival_time":0,"burst_time":5},'
                            '{"pid":"P2","arrival_time":1,"burst_time":3}]')
    assert cli.main(["run", "-w", str(p)]) == 0

    out = capsys.readouterr().out
    assert "Gantt Chart" in out
    assert "Total Execution Time: 8" in out
    assert "2.00" in out
    assert "6.00" in out


def test_run_rejects_incomplete_row(tmp_path: Path, capsys):
    p = _workload(tmp_path, '[{"pid":"P1","arrival_time":5,"burst_time":""}]')
    assert cli.main(["run", "-w", str(p)]) == 2

    out = capsys.readouterr().out
    assert "must both be filled" in out
    assert "Gantt Chart" not in out


def test_run_honours_max_time(tmp_path: Path, capsys):
    p = _workload(tmp_path, '[{"pid":"P1","arrival_time":0,"burst_time":20}]')
    assert cli.main(["--max-time", "10", "run", "-w", str(p)]) == 2
    assert "Value too large" in capsys.readouterr().out


def test_run_missing_file(tmp_path: Path, capsys):
    assert cli.main(["run", "-w", str(tmp_path / "missing.json")]) == 1
    assert "ERROR" in capsys.readouterr().out


def test_run_step_animation(tmp_path: Path, capsys):
    p = _workload(tmp_path, '[{"pid":"P1","arrival_time":1,"burst_time":2}]')
    assert cli.main(["run", "-w", str(p), "--step", "--step-delay", "0"]) == 0
    out = capsys.readouterr().out
    assert "t=  0: [idle]" in out
    assert "t=  2: P1" in out


def test_menu_quit(monkeypatch, capsys):
    answers = iter(["e 1", "0", "4", "s", "", "q"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert cli.main(["menu"]) == 0
    assert "Total Execution Time: 4" in capsys.readouterr().out


def test_run_step_with_bracketed_pid(tmp_path: Path, capsys):
    p = _workload(tmp_path, '[{"pid":"P[/x]","arrival_time":0,"burst_time":1}]')
    assert cli.main(["run", "-w", str(p), "--step", "--step-delay", "0"]) == 0
    assert "t=  0: P[/x]" in capsys.readouterr().out
