# cmdbar/status_bar.py
"""
StatusBar - wires a BarConfig to the scheduler, aggregator and publisher.

    config ─► ScheduledCommand × N ─► RespawnScheduler ─► Aggregator ─► Publisher
"""

from __future__ import annotations

import logging

from .aggregator import Aggregator
from .command_config import BarConfig
from .command_executor import CommandExecutor
from .command_status import CommandStatus
from .publisher import Publisher
from .respawn_scheduler import RespawnScheduler
from .scheduled_command import ScheduledCommand

logger = logging.getLogger(__name__)


class StatusBar:
    """
    The whole status bar engine for one configuration.

    Usage:
        async with StatusBar(config, XRootPublisher()) as bar:
            await bar.run_forever()
    """

    def __init__(
        self,
        config: BarConfig,
        publisher: Publisher,
        executor: CommandExecutor | None = None,
    ) -> None:
        self.config = config
        self.publisher = publisher
        self.commands = [ScheduledCommand(spec, i) for i, spec in enumerate(config.commands)]
        self.scheduler = RespawnScheduler(
            self.commands,
            config.default_update_delay,
            executor=executor,
        )
        self.aggregator = Aggregator(
            self.commands,
            config.delimiter,
            publisher,
            self.scheduler,
            config.thread_polling_delay,
        )
        logger.debug(f"StatusBar created with {len(self.commands)} commands")

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #
    def start(self) -> None:
        """Launch the first run of every command."""
        self.scheduler.start()

    def tick(self) -> str:
        """Run one aggregation step and return the published string."""
        return self.aggregator.tick()

    async def run_forever(self) -> None:
        """Start the commands (if not yet started) and publish until a fatal error."""
        if not self.scheduler.started:
            self.start()
        await self.aggregator.run_forever()

    async def shutdown(self) -> None:
        await self.scheduler.shutdown()
        self.publisher.close()

    async def __aenter__(self) -> StatusBar:
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.shutdown()

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #
    def status_text(self) -> str:
        """Assemble the status string without publishing it."""
        return self.aggregator.status_text()

    def get_status(self, index: int) -> CommandStatus:
        """Snapshot of the command at configuration position `index`."""
        try:
            cmd = self.commands[index]
        except IndexError:
            raise ValueError(f"Unknown command index: {index}") from None
        return cmd.status()

    def __repr__(self) -> str:
        return f"StatusBar(commands={len(self.commands)}, scheduler={self.scheduler!r})"
