from __future__ import annotations

import json
import logging
from dataclasses import fields
from pathlib import Path
from typing import Any, BinaryIO, TextIO

from .command_config import BarConfig, CommandSpec, default_config
from .exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config.json")

_REQUIRED_KEYS = ("default_update_delay", "thread_polling_delay", "delimiter", "commands")
_COMMAND_FIELDS = frozenset(f.name for f in fields(CommandSpec))


# =====================================================================
#   Main loader
# =====================================================================
def load_config(path: str | Path | BinaryIO | TextIO) -> BarConfig:
    """
    Load a JSON config document into a BarConfig.

    Accepts a path or an already-open file object.
    """
    try:
        if not hasattr(path, "read"):
            config_path = Path(path)
            with open(config_path, "rb") as f:
                data = json.load(f)
        else:
            data = json.load(path)  # type: ignore[arg-type]
    except json.JSONDecodeError as e:
        raise ConfigError(f"Malformed config document: {e}") from None
    except UnicodeDecodeError as e:
        raise ConfigError(f"Config is not valid UTF-8: {e}") from None
    except OSError as e:
        raise ConfigError(f"Cannot read config: {e}") from None

    return parse_config(data)


def parse_config(data: Any) -> BarConfig:
    """Build a BarConfig from an already-decoded JSON document."""
    if not isinstance(data, dict):
        raise ConfigError("Config document must be a JSON object")

    missing = [key for key in _REQUIRED_KEYS if key not in data]
    if missing:
        raise ConfigError(f"Config is missing required field(s): {', '.join(missing)}")

    # ────── Parse commands ──────
    command_data = data["commands"]
    if not isinstance(command_data, list):
        raise ConfigError("'commands' must be an array of objects")

    commands = []
    for cmd_dict in command_data:
        if not isinstance(cmd_dict, dict):
            raise ConfigError(f"Invalid entry in 'commands': {cmd_dict!r}")
        # Unrecognised keys are ignored
        known = {k: v for k, v in cmd_dict.items() if k in _COMMAND_FIELDS}
        try:
            commands.append(CommandSpec(**known))
        except TypeError as e:
            raise ConfigError(f"Invalid entry in 'commands': {e}") from None

    try:
        config = BarConfig(
            default_update_delay=data["default_update_delay"],
            thread_polling_delay=data["thread_polling_delay"],
            delimiter=data["delimiter"],
            commands=commands,
        )
    except TypeError as e:
        raise ConfigError(f"Invalid config: {e}") from None

    logger.debug(
        f"Loaded config with {len(config.commands)} commands "
        f"(default_update_delay={config.default_update_delay}ms, "
        f"thread_polling_delay={config.thread_polling_delay}ms)"
    )
    return config


def dump_config(config: BarConfig) -> str:
    """Serialize a config to the pretty-printed document form."""
    return json.dumps(config.to_dict(), indent=2)


def write_default_config(path: str | Path = DEFAULT_CONFIG_PATH) -> Path:
    """Write default_config() to `path`, replacing any existing file."""
    config_path = Path(path)
    try:
        config_path.write_text(dump_config(default_config()), encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot write default config to {config_path}: {e}") from None
    return config_path


def read_config(path: str | Path = DEFAULT_CONFIG_PATH) -> BarConfig:
    """
    Load the config at `path`, creating it with the defaults first if absent.
    """
    config_path = Path(path)
    if not config_path.exists():
        logger.info(f"Config file {config_path} does not exist yet, creating...")
        write_default_config(config_path)
        logger.info("OK")

    return load_config(config_path)
