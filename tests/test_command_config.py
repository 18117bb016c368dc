# tests/test_command_config.py
import pytest

from cmdbar.command_config import BarConfig, CommandSpec, default_config
from cmdbar.exceptions import ConfigError


def test_command_spec_defaults():
    spec = CommandSpec(command="date")
    assert spec.command == "date"
    assert spec.update_delay is None
    assert spec.ignore_status_code is None


def test_effective_delay_falls_back_to_default():
    assert CommandSpec(command="date").effective_delay(990) == 990
    assert CommandSpec(command="date", update_delay=250).effective_delay(990) == 250
    assert CommandSpec(command="date", update_delay=0).effective_delay(990) == 0


def test_to_dict_omits_unset_optionals():
    assert CommandSpec(command="date").to_dict() == {"command": "date"}
    assert CommandSpec(command="x", update_delay=0, ignore_status_code=False).to_dict() == {
        "command": "x",
        "update_delay": 0,
        "ignore_status_code": False,
    }


def test_command_spec_validation_errors():
    with pytest.raises(ConfigError, match="command must be a string"):
        CommandSpec(command=42)

    with pytest.raises(ConfigError, match="update_delay for 'date'"):
        CommandSpec(command="date", update_delay=-1)

    with pytest.raises(ConfigError, match="update_delay"):
        CommandSpec(command="date", update_delay=True)

    with pytest.raises(ConfigError, match="ignore_status_code"):
        CommandSpec(command="date", ignore_status_code="no")


def test_bar_config_validation_errors():
    with pytest.raises(ConfigError, match="default_update_delay"):
        BarConfig(default_update_delay=-5, thread_polling_delay=500, delimiter=" ")

    with pytest.raises(ConfigError, match="thread_polling_delay"):
        BarConfig(default_update_delay=5, thread_polling_delay=1.5, delimiter=" ")

    with pytest.raises(ConfigError, match="delimiter"):
        BarConfig(default_update_delay=5, thread_polling_delay=5, delimiter=None)


def test_empty_command_list_is_allowed():
    config = BarConfig(default_update_delay=1, thread_polling_delay=1, delimiter=" ")
    assert config.commands == []


def test_default_config_contents():
    config = default_config()
    assert config.default_update_delay == 990
    assert config.thread_polling_delay == 500
    assert config.delimiter == " "
    assert [c.command for c in config.commands] == ["date", 'echo "The bar is working"']
    assert config.commands[0].update_delay is None
    assert config.commands[1].update_delay == 0


def test_default_config_returns_fresh_values():
    assert default_config() == default_config()
    assert default_config() is not default_config()
