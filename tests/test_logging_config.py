# tests/test_logging_config.py
import logging
import sys

from cmdbar import disable_logging, get_log_file_path, setup_logging


def test_setup_logging_attaches_stderr_handler():
    logger = setup_logging("debug")

    assert logger.name == "cmdbar"
    assert logger.level == logging.DEBUG
    stream_handlers = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
    assert any(h.stream is sys.stderr for h in stream_handlers)


def test_setup_logging_is_idempotent():
    setup_logging(logging.INFO)
    logger = setup_logging(logging.WARNING, propagate=False)

    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
    assert logger.propagate is False


def test_setup_logging_custom_format():
    logger = setup_logging(format_string="[%(levelname)s] %(message)s")
    assert logger.handlers[0].formatter._fmt == "[%(levelname)s] %(message)s"


def test_unknown_level_name_falls_back_to_info():
    assert setup_logging("chatty").level == logging.INFO


def test_file_logging(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    logger = setup_logging("INFO", console=False, file=True)

    logging.getLogger("cmdbar.test").info("written to file")
    for handler in logger.handlers:
        handler.flush()

    assert (tmp_path / get_log_file_path()).read_text().strip().endswith("written to file")


def test_disable_logging():
    setup_logging()
    disable_logging()

    logger = logging.getLogger("cmdbar")
    assert logger.disabled
    assert logger.handlers == []


def test_failure_diagnostic_reaches_stderr_at_default_level(capsys):
    setup_logging()
    logging.getLogger("cmdbar.respawn_scheduler").warning("Command exit 1 was not successful!")
    assert "Command exit 1 was not successful!" in capsys.readouterr().err


def test_level_above_warning_hides_failure_diagnostic(capsys):
    setup_logging("ERROR")
    logging.getLogger("cmdbar.respawn_scheduler").warning("Command exit 1 was not successful!")
    assert "was not successful" not in capsys.readouterr().err
