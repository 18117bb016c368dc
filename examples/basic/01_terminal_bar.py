"""
01_terminal_bar.py - A status bar that prints instead of touching X

This example demonstrates:
- Building a BarConfig in code
- Writing a custom Publisher
- Static labels (update_delay=0) next to refreshing fields

Try it:
    python examples/basic/01_terminal_bar.py
"""
# ruff: noqa: T201

import asyncio

from cmdbar import BarConfig, CommandSpec, Publisher, StatusBar, setup_logging


class TerminalPublisher(Publisher):
    """Rewrites the current terminal line with the status string."""

    def publish(self, text: str) -> None:
        print(f"\r{text}", end="", flush=True)

    def close(self) -> None:
        print()


async def main():
    setup_logging("WARNING")

    config = BarConfig(
        default_update_delay=1000,
        thread_polling_delay=250,
        delimiter=" | ",
        commands=[
            CommandSpec(command="echo cmdbar", update_delay=0),
            CommandSpec(command="date +%H:%M:%S"),
            CommandSpec(command="cut -d' ' -f1 /proc/loadavg", update_delay=5000),
        ],
    )

    async with StatusBar(config, TerminalPublisher()) as bar:
        try:
            await asyncio.wait_for(bar.run_forever(), timeout=5.0)
        except asyncio.TimeoutError:
            pass


if __name__ == "__main__":
    asyncio.run(main())
