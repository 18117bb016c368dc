# tests/conftest.py
import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

import asyncio
import logging
from unittest.mock import AsyncMock

import pytest

from cmdbar.command_config import BarConfig, CommandSpec

from .fakes import RecordingPublisher, ScriptedExecutor


@pytest.fixture
def recording_publisher():
    return RecordingPublisher()


@pytest.fixture
def scripted_executor():
    return ScriptedExecutor()


@pytest.fixture
def sample_config():
    return BarConfig(
        default_update_delay=10,
        thread_polling_delay=5,
        delimiter="|",
        commands=[
            CommandSpec(command="echo A"),
            CommandSpec(command="echo B", update_delay=0),
        ],
    )


@pytest.fixture(autouse=True)
def restore_cmdbar_logger():
    """Undo setup_logging()/disable_logging() side effects between tests."""
    logger = logging.getLogger("cmdbar")
    saved = (logger.level, logger.propagate, logger.disabled, list(logger.handlers))
    yield
    for handler in list(logger.handlers):
        if handler not in saved[3]:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(saved[0])
    logger.propagate = saved[1]
    logger.disabled = saved[2]


@pytest.fixture
def create_proc():
    """
    Factory fixture that returns asyncio subprocess mocks.
    Use it like:
        proc = create_proc(stdout=b"hello\n", returncode=0)
        with patch("asyncio.create_subprocess_shell", return_value=proc):
            ...
    """
    def _make(stdout=b"", stderr=b"", returncode=0, delay=0.0):
        proc = AsyncMock()

        async def communicate():
            if delay:
                await asyncio.sleep(delay)
            return stdout, stderr

        proc.communicate = communicate
        proc.returncode = returncode
        proc.kill = lambda: setattr(proc, "returncode", -9)
        proc.wait = AsyncMock(return_value=returncode)

        return proc

    return _make
