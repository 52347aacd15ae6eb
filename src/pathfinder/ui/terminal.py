"""Scoped terminal resource: raw keyboard input and a rich screen."""

from __future__ import annotations

import logging
import os
import select
import sys
import termios
import tty
from typing import IO, Any

from rich.console import Console, RenderableType

from pathfinder.session.keys import KeyEvent, decode_key

LOGGER = logging.getLogger(__name__)

TTY_DEVICE = "/dev/tty"
ESCAPE_DELAY_SECONDS = 0.05


class TerminalError(RuntimeError):
    """Raised when the controlling terminal cannot be acquired."""


class TerminalSession:
    """Acquire the terminal on enter and restore it on every exit path.

    Output goes to stdout when it is a terminal and to the controlling
    terminal device otherwise, so the final path printed after the session
    stays the only thing written to a pipe.
    """

    def __init__(
        self,
        stdin: IO[Any] | None = None,
        stdout: IO[Any] | None = None,
        tty_device: str = TTY_DEVICE,
    ) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._tty_device = tty_device
        self._owned_output: IO[Any] | None = None
        self._saved_attrs: list[Any] | None = None
        self._fd: int | None = None
        self.console: Console | None = None

    def __enter__(self) -> "TerminalSession":
        output = self._stdout
        if not output.isatty():
            try:
                self._owned_output = open(self._tty_device, "w", encoding="utf-8", buffering=1)
            except OSError as exc:
                raise TerminalError(f"Cannot open {self._tty_device}: {exc}") from exc
            output = self._owned_output
            LOGGER.debug("stdout is not a terminal, drawing on %s", self._tty_device)

        try:
            self._fd = self._stdin.fileno()
            if os.isatty(self._fd):
                self._saved_attrs = termios.tcgetattr(self._fd)
                tty.setcbreak(self._fd)

            self.console = Console(file=output, force_terminal=True, highlight=False)
            self.console.set_alt_screen(True)
            self.console.show_cursor(False)
        except BaseException:
            self.close()
            raise
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self.console is not None:
            self.console.show_cursor(True)
            self.console.set_alt_screen(False)
            self.console = None
        if self._saved_attrs is not None and self._fd is not None:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved_attrs)
            self._saved_attrs = None
        if self._owned_output is not None:
            self._owned_output.close()
            self._owned_output = None

    def read_event(self) -> KeyEvent | None:
        """Block until one key press is read."""
        if self._fd is None:
            raise TerminalError("Terminal session is not active")
        fd = self._fd
        return decode_key(
            lambda size: os.read(fd, size),
            lambda: bool(select.select([fd], [], [], ESCAPE_DELAY_SECONDS)[0]),
        )

    def draw(self, renderable: RenderableType) -> None:
        if self.console is None:
            raise TerminalError("Terminal session is not active")
        self.console.clear()
        self.console.print(renderable)
