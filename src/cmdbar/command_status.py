# cmdbar/command_status.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .run_result import RunResult


class CommandState(Enum):
    """Where a command is in its run → wait → run cycle."""

    PENDING = "pending"
    RUNNING = "running"
    WAITING = "waiting"
    RETIRED = "retired"


@dataclass(frozen=True)
class CommandStatus:
    """
    Snapshot of a scheduled command, returned by StatusBar.get_status().

    Used by tests and embedders to observe the scheduler without touching
    its live objects.
    """

    command: str
    """The command text."""

    state: CommandState
    """Current scheduling state."""

    output: str = ""
    """Cached output as the aggregator would read it (not truncated)."""

    run_count: int = 0
    """Number of runs started since the process began."""

    failure_count: int = 0
    """Number of completed runs that exited non-zero."""

    last_run: RunResult | None = None
    """Most recent completed RunResult (or None if it never finished a run)."""
