import pytest

from fcfs_simulator.config import MAX_TIME_UNIT, SimulatorConfig


def test_defaults():
    config = SimulatorConfig.from_env({})
    assert config.max_time_unit == MAX_TIME_UNIT == 500
    assert config.default_row_count == 4


def test_env_override():
    assert SimulatorConfig.from_env({"FCFS_SIM_MAX_TIME_UNIT": "100"}).max_time_unit == 100


@pytest.mark.parametrize("raw", ["ten", "0"])
def test_env_override_rejects_bad_values(raw):
    with pytest.raises(ValueError):
        SimulatorConfig.from_env({"FCFS_SIM_MAX_TIME_UNIT": raw})
