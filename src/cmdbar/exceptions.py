# cmdbar/exceptions.py
"""
Custom exception hierarchy for cmdbar.

All cmdbar-specific exceptions inherit from CmdbarError to enable
catch-all error handling at the process edge while still providing
specific exception types for the different fatal conditions.

A command exiting with a non-zero status is NOT an exception; it is
reported through RunResult.success and handled by the scheduler policy.
"""

from __future__ import annotations


class CmdbarError(Exception):
    """
    Base exception for all cmdbar errors.

    Catch this to handle any cmdbar-specific error.
    """

    pass


class ConfigError(CmdbarError):
    """
    Raised when the configuration document cannot be loaded.

    Covers a missing or malformed JSON document, fields of the wrong type,
    and I/O failures while writing the default configuration.

    Example:
        >>> CommandSpec(command="date", update_delay=-1)
        ConfigError: update_delay for 'date' must be a non-negative integer
    """

    pass


class ShellSpawnError(CmdbarError):
    """
    Raised when the shell for a command cannot be created.

    This is an environment fault (fork/exec failure, missing /bin/sh),
    not a per-command condition, and is fatal for the whole process.

    Attributes:
        command: The command text that was being launched
    """

    def __init__(self, command: str, reason: str | Exception):
        """
        Initialize ShellSpawnError with the offending command.

        Args:
            command: Command text that could not be spawned
            reason: Underlying OS error or message
        """
        self.command = command
        self.reason = reason
        super().__init__(f"Failed to execute command '{command}': {reason}")


class PublishError(CmdbarError):
    """
    Raised when the status string cannot be published.

    Includes failing to acquire the publishing handle (e.g. the X display)
    at startup. Without a status surface the process has no purpose, so
    this is always fatal.
    """

    pass
