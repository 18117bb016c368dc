# cmdbar/respawn_scheduler.py
"""
RespawnScheduler - decides when each command runs next.

Lifecycle of one command:

    PENDING ──start()──► RUNNING ──completion──► WAITING(delay) ──► RUNNING ──► ...
                                      │
                                      └── delay == 0 ──► RETIRED

Every run ends by putting exactly one CompletionMessage on the completion
queue, and a command is only re-armed when its message is drained. That is
what keeps runs of the same command from ever overlapping.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine, Iterable
from typing import Any

from .command_executor import CommandExecutor
from .command_status import CommandState
from .local_subprocess_executor import LocalSubprocessExecutor
from .run_result import RunResult
from .scheduled_command import ScheduledCommand
from .types import CompletionMessage

logger = logging.getLogger(__name__)


class RespawnScheduler:
    """
    Owns the run/wait cycle of every ScheduledCommand.

    - start() fans out the first run of every command immediately
    - drain() consumes finished runs and re-arms or retires each command
    - a ShellSpawnError in any run is re-raised from the next drain()
    """

    def __init__(
        self,
        commands: Iterable[ScheduledCommand],
        default_update_delay: int,
        executor: CommandExecutor | None = None,
    ) -> None:
        self._commands = list(commands)
        self._default_update_delay = default_update_delay
        self._executor = executor or LocalSubprocessExecutor()

        # Many producers (run tasks), one consumer (drain)
        self._completions: asyncio.Queue[CompletionMessage] = asyncio.Queue()

        # command index -> its single live run/wait task
        self._tasks: dict[int, asyncio.Task[None]] = {}

        self._fatal: BaseException | None = None
        self._started = False

        logger.debug(
            f"RespawnScheduler initialized with {len(self._commands)} commands "
            f"(default_update_delay={default_update_delay}ms)"
        )

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #
    @property
    def commands(self) -> list[ScheduledCommand]:
        return self._commands.copy()

    @property
    def started(self) -> bool:
        return self._started

    @property
    def in_flight(self) -> int:
        """Number of live run or wait tasks."""
        return len(self._tasks)

    @property
    def pending_completions(self) -> int:
        return self._completions.qsize()

    def start(self) -> None:
        """Start the first run of every command, without waiting for any delay."""
        if self._started:
            raise RuntimeError("RespawnScheduler already started")
        self._started = True

        for cmd in self._commands:
            self._spawn(cmd, self._run_initial(cmd), name=f"initial_{cmd.index}")

        logger.debug(f"Started initial runs for {len(self._commands)} commands")

    def drain(self) -> int:
        """
        Re-arm every command whose run finished since the last call.

        Never blocks. Returns the number of completions processed.

        Raises:
            ShellSpawnError: If any run could not start its shell
        """
        self.raise_if_failed()

        processed = 0
        while True:
            try:
                message = self._completions.get_nowait()
            except asyncio.QueueEmpty:
                break
            self._rearm(message)
            processed += 1

        return processed

    def raise_if_failed(self) -> None:
        if self._fatal is not None:
            raise self._fatal

    async def shutdown(self) -> None:
        """Cancel every run and wait task, then kill leftover processes."""
        tasks = list(self._tasks.values())
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._tasks.clear()

        await self._executor.cleanup()
        logger.debug("RespawnScheduler shut down")

    # ------------------------------------------------------------------ #
    # Re-arming
    # ------------------------------------------------------------------ #
    def _rearm(self, message: CompletionMessage) -> None:
        cmd = message.command
        delay = cmd.spec.effective_delay(self._default_update_delay)

        if delay == 0:
            cmd.state = CommandState.RETIRED
            logger.debug(f"Command '{cmd.text}' retired after {cmd.run_count} run(s)")
            return

        cmd.state = CommandState.WAITING
        logger.debug(
            f"Re-arming '{cmd.text}' in {delay}ms after "
            f"{'initial' if message.initial else 'respawned'} run "
            f"({'cached' if message.cached else 'not cached'})"
        )
        self._spawn(cmd, self._respawn(cmd, delay), name=f"respawn_{cmd.index}")

    def _spawn(
        self,
        cmd: ScheduledCommand,
        coro: Coroutine[Any, Any, None],
        *,
        name: str,
    ) -> None:
        task = asyncio.create_task(coro, name=name)
        self._tasks[cmd.index] = task
        task.add_done_callback(lambda t, c=cmd: self._task_done(c, t))

    def _task_done(self, cmd: ScheduledCommand, task: asyncio.Task[None]) -> None:
        # drain() may already have replaced this task with the next cycle
        if self._tasks.get(cmd.index) is task:
            del self._tasks[cmd.index]

        if task.cancelled():
            return

        exc = task.exception()
        if exc is not None and self._fatal is None:
            logger.critical(f"Run of '{cmd.text}' aborted: {exc}")
            self._fatal = exc

    # ------------------------------------------------------------------ #
    # Run tasks
    # ------------------------------------------------------------------ #
    async def _execute(self, cmd: ScheduledCommand) -> RunResult:
        cmd.state = CommandState.RUNNING
        cmd.run_count += 1
        result = await self._executor.run(cmd.text)
        cmd.record(result)
        return result

    async def _run_initial(self, cmd: ScheduledCommand) -> None:
        # First runs are cached whatever their exit status
        result = await self._execute(cmd)
        cmd.output.write(result.output)
        self._completions.put_nowait(
            CompletionMessage(command=cmd, result=result, cached=True, initial=True)
        )

    async def _respawn(self, cmd: ScheduledCommand, delay_ms: int) -> None:
        await asyncio.sleep(delay_ms / 1000)

        result = await self._execute(cmd)
        if cmd.should_retry(result):
            logger.warning(f"Command {cmd.text} was not successful!")
            self._completions.put_nowait(
                CompletionMessage(command=cmd, result=result, cached=False)
            )
            return

        cmd.output.write(result.output)
        self._completions.put_nowait(CompletionMessage(command=cmd, result=result, cached=True))

    def __repr__(self) -> str:
        return (
            f"RespawnScheduler(commands={len(self._commands)}, in_flight={self.in_flight}, "
            f"pending_completions={self.pending_completions})"
        )
