from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from .exceptions import ConfigError

logger = logging.getLogger(__name__)


def _is_uint(value: Any) -> bool:
    # bool is an int subclass; JSON true/false must not pass as a delay
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


@dataclass(frozen=True)
class CommandSpec:
    """
    Immutable configuration for a single status bar command.
    Used both when loading from JSON and when passed programmatically.
    """

    command: str
    """Shell command to execute. Passed to /bin/sh -c, so pipes and quoting work."""

    update_delay: int | None = None
    """
    Milliseconds to wait after a run completes before running again.
    None → use BarConfig.default_update_delay
    0    → run once, never again (static labels)
    """

    ignore_status_code: bool | None = None
    """
    Policy for runs that exit non-zero.
    None/True → cache the output anyway
    False     → keep the previous output, log a diagnostic and re-arm
    """

    def __post_init__(self) -> None:
        if not isinstance(self.command, str):
            logger.warning(f"Invalid config: command must be a string, got {self.command!r}")
            raise ConfigError(f"command must be a string, got {type(self.command).__name__}")
        if self.update_delay is not None and not _is_uint(self.update_delay):
            logger.warning(f"Invalid config for '{self.command}': bad update_delay")
            raise ConfigError(
                f"update_delay for '{self.command}' must be a non-negative integer"
            )
        if self.ignore_status_code is not None and not isinstance(self.ignore_status_code, bool):
            logger.warning(f"Invalid config for '{self.command}': bad ignore_status_code")
            raise ConfigError(f"ignore_status_code for '{self.command}' must be a boolean")

    def effective_delay(self, default_update_delay: int) -> int:
        """Delay in ms before the next run, falling back to the global default."""
        if self.update_delay is not None:
            return self.update_delay
        return default_update_delay

    def to_dict(self) -> dict[str, Any]:
        """Document form; unset optionals are omitted."""
        data: dict[str, Any] = {"command": self.command}
        if self.update_delay is not None:
            data["update_delay"] = self.update_delay
        if self.ignore_status_code is not None:
            data["ignore_status_code"] = self.ignore_status_code
        return data


@dataclass(frozen=True)
class BarConfig:
    """
    Top-level configuration object returned by load_config().
    Contains everything needed to instantiate a StatusBar.
    """

    default_update_delay: int
    """Delay in ms used by commands that do not set update_delay."""

    thread_polling_delay: int
    """Interval in ms between two publishes of the status string."""

    delimiter: str
    """Appended after every command's output when assembling the status string."""

    commands: list[CommandSpec] = field(default_factory=list)
    """Commands in display order."""

    def __post_init__(self) -> None:
        if not _is_uint(self.default_update_delay):
            raise ConfigError("default_update_delay must be a non-negative integer")
        if not _is_uint(self.thread_polling_delay):
            raise ConfigError("thread_polling_delay must be a non-negative integer")
        if not isinstance(self.delimiter, str):
            raise ConfigError("delimiter must be a string")

    def to_dict(self) -> dict[str, Any]:
        return {
            "default_update_delay": self.default_update_delay,
            "thread_polling_delay": self.thread_polling_delay,
            "delimiter": self.delimiter,
            "commands": [c.to_dict() for c in self.commands],
        }


def default_config() -> BarConfig:
    """
    The configuration written when no config file exists yet.

    A clock refreshed every 990ms and a static label that runs exactly once.
    """
    return BarConfig(
        default_update_delay=990,
        thread_polling_delay=500,
        delimiter=" ",
        commands=[
            CommandSpec(command="date"),
            CommandSpec(command='echo "The bar is working"', update_delay=0),
        ],
    )
