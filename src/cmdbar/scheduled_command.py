from __future__ import annotations

import logging

from .command_config import CommandSpec
from .command_status import CommandState, CommandStatus
from .output_cell import OutputCell
from .run_result import RunResult

logger = logging.getLogger(__name__)


class ScheduledCommand:
    """
    A configured command paired with its latest cached output.

    The CommandSpec never changes. The output cell is written by the command's
    current run and read by the aggregator; the counters and state are
    only touched from the event loop.
    """

    def __init__(self, spec: CommandSpec, index: int = 0) -> None:
        self.spec = spec
        self.index = index
        self.output = OutputCell()

        self.state = CommandState.PENDING
        self.run_count = 0
        self.failure_count = 0
        self.last_result: RunResult | None = None

    @property
    def text(self) -> str:
        return self.spec.command

    def should_retry(self, result: RunResult) -> bool:
        """
        True when a failed run must not be cached.

        Only an explicit ignore_status_code=False opts in; unset behaves
        like True.
        """
        return not result.success and self.spec.ignore_status_code is False

    def record(self, result: RunResult) -> None:
        self.last_result = result
        if not result.success:
            self.failure_count += 1

    def status(self) -> CommandStatus:
        return CommandStatus(
            command=self.text,
            state=self.state,
            output=self.output.read(),
            run_count=self.run_count,
            failure_count=self.failure_count,
            last_run=self.last_result,
        )

    def __repr__(self) -> str:
        return (
            f"ScheduledCommand(#{self.index} '{self.text}', state={self.state.value}, "
            f"runs={self.run_count})"
        )
