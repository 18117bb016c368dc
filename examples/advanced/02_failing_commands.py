"""
02_failing_commands.py - What ignore_status_code does

This example demonstrates:
- ignore_status_code unset: a failing command's output is shown anyway
- ignore_status_code=False: the last good output stays, a warning is logged
  and the command is retried after every delay
- Inspecting commands with StatusBar.get_status()

Try it:
    python examples/advanced/02_failing_commands.py
"""
# ruff: noqa: T201

import asyncio
from pathlib import Path

from cmdbar import BarConfig, CommandSpec, Publisher, StatusBar, setup_logging


class ListPublisher(Publisher):
    def __init__(self):
        self.history: list[str] = []

    def publish(self, text: str) -> None:
        self.history.append(text)


async def main():
    setup_logging("INFO")
    Path("/tmp/cmdbar-demo").unlink(missing_ok=True)

    # A marker file makes the second command succeed once, then fail forever
    config = BarConfig(
        default_update_delay=300,
        thread_polling_delay=100,
        delimiter=" / ",
        commands=[
            CommandSpec(command="echo shown-even-on-failure; exit 1"),
            CommandSpec(
                command="test -e /tmp/cmdbar-demo && exit 1; touch /tmp/cmdbar-demo; echo last-good",
                ignore_status_code=False,
            ),
        ],
    )

    publisher = ListPublisher()
    async with StatusBar(config, publisher) as bar:
        for _ in range(15):
            bar.tick()
            await asyncio.sleep(0.1)

        print(f"Published: {publisher.history[-1]!r}")
        for index in range(len(config.commands)):
            status = bar.get_status(index)
            print(
                f"  #{index} {status.command!r}: state={status.state.value} "
                f"runs={status.run_count} failures={status.failure_count}"
            )


if __name__ == "__main__":
    asyncio.run(main())
