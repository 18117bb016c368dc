# tests/test_main.py
import json

import pytest

from cmdbar import PublishError
from cmdbar import __main__ as entry

from .fakes import RecordingPublisher


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setenv("CMDBAR_CONFIG", str(path))
    monkeypatch.setenv("CMDBAR_LOG_LEVEL", "DEBUG")
    return path


def test_malformed_config_exits_with_config_error(config_path):
    config_path.write_text("{ not json")
    assert entry.main() == entry.EXIT_CONFIG


def test_undecodable_config_exits_with_config_error(config_path):
    config_path.write_bytes(b'{"delimiter": "\xff"}')
    assert entry.main() == entry.EXIT_CONFIG


def test_missing_display_exits_before_scheduling(config_path, monkeypatch):
    def no_display():
        raise PublishError("Failed to open X display: :0")

    monkeypatch.setattr(entry, "XRootPublisher", no_display)
    started = []
    monkeypatch.setattr(entry, "StatusBar", lambda *a, **kw: started.append(a))

    assert entry.main() == entry.EXIT_FATAL
    assert started == []
    # The default config was still written on the way
    assert json.loads(config_path.read_text())["default_update_delay"] == 990


def test_publish_failure_at_runtime_is_fatal(config_path, monkeypatch):
    config_path.write_text(
        json.dumps(
            {
                "default_update_delay": 10,
                "thread_polling_delay": 5,
                "delimiter": " ",
                "commands": [{"command": "echo hi"}],
            }
        )
    )
    publisher = RecordingPublisher(fail_after=3)
    monkeypatch.setattr(entry, "XRootPublisher", lambda: publisher)

    assert entry.main() == entry.EXIT_FATAL
    assert len(publisher.published) == 3
    assert publisher.closed
