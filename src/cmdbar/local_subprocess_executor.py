# cmdbar/local_subprocess_executor.py
"""
LocalSubprocessExecutor - Default executor using asyncio subprocesses.

Executes commands as local subprocesses through /bin/sh with:
- stdout capture (stderr captured and discarded)
- no timeout: a hung command only stalls its own schedule
- process cleanup on shutdown
"""

from __future__ import annotations

import asyncio
import logging

from .command_executor import CommandExecutor
from .exceptions import ShellSpawnError
from .run_result import RunResult

logger = logging.getLogger(__name__)


class LocalSubprocessExecutor(CommandExecutor):
    """
    Executes commands as local subprocesses using asyncio.

    Each call to run() suspends only the calling task; any number of runs
    may be in progress at once.
    """

    def __init__(self) -> None:
        # Active processes, killed by cleanup()
        self._processes: set[asyncio.subprocess.Process] = set()

        logger.debug("Initialized LocalSubprocessExecutor")

    async def run(self, command: str) -> RunResult:
        """
        Launch `command` via the shell and wait for it to exit.

        Raises:
            ShellSpawnError: If the shell process cannot be created
        """
        result = RunResult(command=command)

        try:
            process = await asyncio.create_subprocess_shell(
                command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            logger.critical(f"Could not spawn shell for '{command}': {e}")
            raise ShellSpawnError(command, e) from e

        self._processes.add(process)
        result.mark_running()

        try:
            stdout, _ = await process.communicate()
        except asyncio.CancelledError:
            logger.debug(f"Run of '{command}' was cancelled")
            if process.returncode is None:
                await self._kill_process(process)
            raise
        finally:
            self._processes.discard(process)

        output = stdout.decode("utf-8", errors="replace") if stdout else ""
        result.mark_finished(process.returncode, output)
        return result

    async def _kill_process(self, process: asyncio.subprocess.Process) -> None:
        """
        Forcefully kill a process with SIGKILL.

        Args:
            process: The process to kill
        """
        try:
            process.kill()  # SIGKILL
            await process.wait()
        except ProcessLookupError:
            # Already dead
            pass

    async def cleanup(self) -> None:
        """Kill every process that is still running."""
        if not self._processes:
            logger.debug("No active processes to clean up")
            return

        logger.info(f"Cleaning up {len(self._processes)} active processes")

        for process in list(self._processes):
            if process.returncode is None:
                try:
                    await self._kill_process(process)
                except OSError as e:
                    logger.warning(f"Error killing process {process.pid}: {e}")

        self._processes.clear()

    def __repr__(self) -> str:
        return f"LocalSubprocessExecutor(active_processes={len(self._processes)})"
