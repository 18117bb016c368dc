# cmdbar/types.py
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .run_result import RunResult

if TYPE_CHECKING:
    from .scheduled_command import ScheduledCommand


@dataclass(frozen=True)
class CompletionMessage:
    """
    Sent by a finished run to the scheduler's completion queue.

    The run has already applied its outcome to the command's output cell
    (cached=True), or left it untouched because the failure must not be
    cached (cached=False).
    """

    command: ScheduledCommand
    result: RunResult
    cached: bool = True
    initial: bool = False
