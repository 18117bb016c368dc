# cmdbar/publisher.py
"""
Publishers write the assembled status string somewhere a bar can read it.

XRootPublisher sets the name (WM_NAME) of the X root window, which is what
dwm and similar window managers display in their status area.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import Xlib.display
import Xlib.error

from .exceptions import PublishError

logger = logging.getLogger(__name__)


class Publisher(ABC):
    """Destination of the status string. Any failure must raise PublishError."""

    @abstractmethod
    def publish(self, text: str) -> None:
        """Write `text` to the status surface."""

    def close(self) -> None:
        """Release the publishing handle. Default: nothing to do."""
        return None


class XRootPublisher(Publisher):
    """
    Publishes to the root window name of an X display.

    The display is opened in the constructor so that a missing X server is
    reported before any command is scheduled.
    """

    def __init__(self, display_name: str | None = None) -> None:
        """
        Args:
            display_name: X display to connect to; None uses $DISPLAY

        Raises:
            PublishError: If the display cannot be opened
        """
        try:
            self._display: Xlib.display.Display = Xlib.display.Display(display_name)
        except (Xlib.error.DisplayError, Xlib.error.ConnectionClosedError, OSError) as e:
            raise PublishError(f"Failed to open X display: {e}") from e

        self._root = self._display.screen().root
        logger.debug(f"Opened X display {self._display.get_display_name()}")

    def publish(self, text: str) -> None:
        try:
            # Raw UTF-8 bytes, the way XStoreName stores them
            self._root.set_wm_name(text.encode("utf-8"))
            self._display.flush()
        except (Xlib.error.XError, Xlib.error.ConnectionClosedError, OSError) as e:
            raise PublishError(f"Failed to set root window name: {e}") from e

    def close(self) -> None:
        try:
            self._display.close()
        except (Xlib.error.ConnectionClosedError, OSError) as e:
            logger.debug(f"Error closing X display: {e}")

    def __repr__(self) -> str:
        return f"XRootPublisher(display={self._display.get_display_name()!r})"
