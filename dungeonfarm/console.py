"""Line-oriented terminal input and output for the game screens."""

from __future__ import annotations

import sys
from collections import deque
from typing import TextIO

_CLEAR_SCREEN = "\033[2J\033[H"


class Console:
    """Reads numeric menu choices and writes screen text."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._pending: deque[str] = deque()

    def read_choice(self) -> int:
        """Return the next whitespace-separated integer typed by the player.

        Tokens that are not integers are skipped. Raises EOFError once the
        input is exhausted.
        """
        while True:
            while not self._pending:
                line = self._stdin.readline()
                if not line:
                    raise EOFError("no more input")
                self._pending.extend(line.split())
            token = self._pending.popleft()
            try:
                return int(token)
            except ValueError:
                continue

    def show(self, text: str) -> None:
        """Write a block of text followed by a newline."""
        print(text, file=self._stdout)

    def clear(self) -> None:
        """Clear the screen when writing to a terminal."""
        isatty = getattr(self._stdout, "isatty", None)
        if isatty is not None and isatty():
            self._stdout.write(_CLEAR_SCREEN)
            self._stdout.flush()