"""
CommandExecutor - abstract interface for running one command to completion.

The scheduler only depends on this interface, so tests and embedders can
swap in an executor that does not spawn real processes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .run_result import RunResult


class CommandExecutor(ABC):
    """
    Runs a single shell command and reports its exit status and stdout.

    Implementations must:
    - suspend the caller until the command terminates (no timeout)
    - report a non-zero exit through RunResult, never by raising
    - raise ShellSpawnError only when the shell itself cannot be started
    """

    @abstractmethod
    async def run(self, command: str) -> RunResult:
        """Execute `command` through a shell and wait for it to finish."""

    async def cleanup(self) -> None:
        """Release anything still running. Default: nothing to do."""
        return None
