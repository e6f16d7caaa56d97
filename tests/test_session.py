import pytest

from fcfs_simulator.config import SimulatorConfig
from fcfs_simulator.session import SimulatorSession


def _filled_session():
    session = SimulatorSession()
    session.update_field(0, "arrival", "0")
    session.update_field(0, "burst", "5")
    session.update_field(1, "arrival", "1")
    session.update_field(1, "burst", "3")
    return session


def test_starts_with_four_blank_rows():
    session = SimulatorSession()
    assert [r.pid for r in session.rows] == ["P1", "P2", "P3", "P4"]
    assert all(r.is_blank() for r in session.rows)
    assert session.report is None
    assert session.error == ""


def test_simulate_stores_report():
    session = _filled_session()
    report = session.simulate()
    assert report is session.report
    assert [r.completion_time for r in report.results] == [5, 8]
    assert session.error == ""


def test_simulate_stores_error_instead_of_report():
    session = SimulatorSession()
    session.update_field(0, "arrival", "5")
    assert session.simulate() is None
    assert session.report is None
    assert session.error == "Process P1: Arrival Time and Burst Time must both be filled."


def test_simulate_blank_table_reports_empty_batch():
    session = SimulatorSession()
    session.simulate()
    assert session.error == "Please define at least one process."


def test_non_digit_entry_ignored():
    session = SimulatorSession()
    assert session.update_field(0, "arrival", "12") is True
    assert session.update_field(0, "arrival", "1a") is False
    assert session.update_field(0, "arrival", "\n") is False
    assert session.rows[0].arrival == 12
    assert session.update_field(0, "arrival", "") is True
    assert session.rows[0].arrival is None


def test_unknown_field_rejected():
    with pytest.raises(ValueError):
        SimulatorSession().update_field(0, "priority", "1")


def test_remove_row_renumbers():
    session = _filled_session()
    session.simulate()
    session.remove_row(0)

    assert [r.pid for r in session.rows] == ["P1", "P2", "P3"]
    assert (session.rows[0].arrival, session.rows[0].burst) == (1, 3)
    assert session.report is None


def test_add_row_clears_report():
    session = _filled_session()
    session.simulate()
    row = session.add_row()
    assert row.pid == "P5"
    assert session.report is None


def test_reset_restores_defaults():
    session = _filled_session()
    session.add_row()
    session.simulate()
    session.reset()
    assert len(session.rows) == 4
    assert all(r.is_blank() for r in session.rows)
    assert session.report is None


def test_config_limits_apply():
    session = SimulatorSession(SimulatorConfig(max_time_unit=10, default_row_count=1))
    assert len(session.rows) == 1
    session.update_field(0, "arrival", "0")
    session.update_field(0, "burst", "11")
    session.simulate()
    assert session.error == "Process P1: Value too large. Times must be ≤ 10."
