# cmdbar/run_result.py
from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """
    Represents a single execution of a command.

    Filled in by the executor; read by the scheduler to decide whether the
    output is cached and by status snapshots.
    """

    command: str
    """Command text that was executed."""

    # ------------------------------------------------------------------ #
    # Execution output & result
    # ------------------------------------------------------------------ #
    exit_code: int | None = None
    """Process return code. None while the run is still in progress."""

    output: str = ""
    """Captured stdout (stderr is discarded)."""

    # ------------------------------------------------------------------ #
    # Timing
    # ------------------------------------------------------------------ #
    start_time: datetime.datetime | None = None
    end_time: datetime.datetime | None = None
    duration: datetime.timedelta | None = None

    # ------------------------------------------------------------------ #
    # State transitions
    # ------------------------------------------------------------------ #
    def mark_running(self) -> None:
        """Record start time."""
        self.start_time = datetime.datetime.now()
        logger.debug(f"Run of '{self.command}' started")

    def mark_finished(self, exit_code: int, output: str) -> None:
        """Record exit status and output, compute duration."""
        self.exit_code = exit_code
        self.output = output
        self.end_time = datetime.datetime.now()
        if self.start_time:
            self.duration = self.end_time - self.start_time
        else:
            self.duration = datetime.timedelta(0)
        logger.debug(
            f"Run of '{self.command}' exited with {exit_code} in {self.duration_str} "
            f"(output={len(output)} chars)"
        )

    # ------------------------------------------------------------------ #
    # Properties
    # ------------------------------------------------------------------ #
    @property
    def success(self) -> bool:
        return self.exit_code == 0

    @property
    def is_finished(self) -> bool:
        return self.exit_code is not None

    @property
    def duration_secs(self) -> float | None:
        return self.duration.total_seconds() if self.duration is not None else None

    @property
    def duration_str(self) -> str:
        """Human-readable duration (e.g. '452ms', '2.4s', '1m 23s', '2h 5m')."""
        secs = self.duration_secs
        if secs is None:
            return "—"
        if secs < 1:
            return f"{secs * 1000:.0f}ms"
        if secs < 60:
            return f"{secs:.1f}s"
        mins, secs = divmod(secs, 60)
        if mins < 60:
            return f"{int(mins)}m {secs:.0f}s"
        hrs, mins = divmod(mins, 60)
        return f"{int(hrs)}h {int(mins)}m"

    # ------------------------------------------------------------------ #
    # Representation & serialization
    # ------------------------------------------------------------------ #
    def __repr__(self) -> str:
        return (
            f"RunResult(cmd='{self.command}', exit_code={self.exit_code}, "
            f"dur={self.duration_str}, success={self.success})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "command": self.command,
            "exit_code": self.exit_code,
            "output": self.output,
            "success": self.success,
            "start_time": self.start_time.isoformat() if self.start_time else None,
            "end_time": self.end_time.isoformat() if self.end_time else None,
            "duration_str": self.duration_str,
        }
