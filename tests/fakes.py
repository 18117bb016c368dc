# tests/fakes.py
"""In-process stand-ins for the publisher and the executor."""

from __future__ import annotations

import asyncio
from collections import defaultdict

from cmdbar.command_executor import CommandExecutor
from cmdbar.exceptions import PublishError
from cmdbar.publisher import Publisher
from cmdbar.run_result import RunResult


class RecordingPublisher(Publisher):
    """Keeps every published string; optionally fails after N publishes."""

    def __init__(self, fail_after: int | None = None):
        self.published: list[str] = []
        self.fail_after = fail_after
        self.closed = False

    def publish(self, text: str) -> None:
        if self.fail_after is not None and len(self.published) >= self.fail_after:
            raise PublishError("status surface went away")
        self.published.append(text)

    def close(self) -> None:
        self.closed = True


class ScriptedExecutor(CommandExecutor):
    """
    Executor that never spawns a process.

    `script` maps command text to a list of (exit_code, output) outcomes,
    consumed in order; the last outcome repeats forever. Unscripted commands
    succeed and echo their own text.
    """

    def __init__(self, script=None, delay: float = 0.0, error: Exception | None = None):
        self.script = {k: list(v) for k, v in (script or {}).items()}
        self.delay = delay
        self.error = error
        self.calls: list[str] = []
        self.active: dict[str, int] = defaultdict(int)
        self.max_active: dict[str, int] = defaultdict(int)
        self.cleaned_up = False

    async def run(self, command: str) -> RunResult:
        if self.error is not None:
            raise self.error

        self.calls.append(command)
        self.active[command] += 1
        self.max_active[command] = max(self.max_active[command], self.active[command])
        result = RunResult(command=command)
        result.mark_running()
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            exit_code, output = self._next(command)
        finally:
            self.active[command] -= 1
        result.mark_finished(exit_code, output)
        return result

    def _next(self, command: str) -> tuple[int, str]:
        outcomes = self.script.get(command)
        if not outcomes:
            return 0, f"{command}\n"
        if len(outcomes) > 1:
            return outcomes.pop(0)
        return outcomes[0]

    def count(self, command: str) -> int:
        return self.calls.count(command)

    async def cleanup(self) -> None:
        self.cleaned_up = True


async def pump(bar_or_scheduler, rounds: int, interval: float = 0.005) -> None:
    """Call tick()/drain() `rounds` times, sleeping `interval` between calls."""
    step = getattr(bar_or_scheduler, "tick", None) or bar_or_scheduler.drain
    for _ in range(rounds):
        step()
        await asyncio.sleep(interval)
