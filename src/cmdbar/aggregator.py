# cmdbar/aggregator.py
"""
Aggregator - assembles and publishes the status string on a fixed tick.

The tick is not synchronized with any command's cycle, so one status string
may mix outputs from different completion times.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable

from .publisher import Publisher
from .respawn_scheduler import RespawnScheduler
from .scheduled_command import ScheduledCommand

logger = logging.getLogger(__name__)


def first_line(output: str) -> str:
    """Everything before the first newline; the whole string if there is none."""
    head, _, _ = output.partition("\n")
    return head


def assemble_status(outputs: Iterable[str], delimiter: str) -> str:
    """
    Concatenate the first line of each output, each followed by `delimiter`.

    >>> assemble_status(["A\\n", "B\\nmore"], "|")
    'A|B|'
    """
    return "".join(first_line(output) + delimiter for output in outputs)


class Aggregator:
    """Drains completions, reads every cached output and publishes the result."""

    def __init__(
        self,
        commands: Iterable[ScheduledCommand],
        delimiter: str,
        publisher: Publisher,
        scheduler: RespawnScheduler,
        polling_interval_ms: int,
    ) -> None:
        self._commands = list(commands)
        self._delimiter = delimiter
        self._publisher = publisher
        self._scheduler = scheduler
        self._polling_interval = polling_interval_ms / 1000
        self.ticks = 0

    def status_text(self) -> str:
        """The status string for the current cached outputs, in configured order."""
        return assemble_status((cmd.output.read() for cmd in self._commands), self._delimiter)

    def tick(self) -> str:
        """
        One aggregation step. Returns the published string.

        Raises:
            ShellSpawnError: Propagated from the scheduler
            PublishError: If the publisher fails
        """
        processed = self._scheduler.drain()
        text = self.status_text()
        self._publisher.publish(text)
        self.ticks += 1
        if processed:
            logger.debug(f"Tick {self.ticks}: {processed} completion(s), published {text!r}")
        return text

    async def run_forever(self) -> None:
        """Tick every polling interval until an exception ends the loop."""
        logger.debug(f"Aggregator loop started (interval={self._polling_interval:.3f}s)")
        while True:
            self.tick()
            await asyncio.sleep(self._polling_interval)
