"""Terminal input and output helpers."""

from __future__ import annotations

import string
import subprocess
import sys
from typing import Optional, Sequence, TextIO

_UPPER_TABLE = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)

_HEADER_RULE = "----------------------------------------------"

PRESS_ENTER_MESSAGE = (
    "\n-----------------------------------------------\n"
    "Pressione ENTER para retornar ao MENU RELATORIOS\n"
)


def strip_newline(text: str) -> str:
    """Drop the line terminator left by reading a line."""
    return text[:-1] if text.endswith("\n") else text


def to_upper(text: str) -> str:
    """Upper-case ASCII letters, leaving every other character as it is."""
    return text.translate(_UPPER_TABLE)


def header(message: str) -> str:
    """Return a message framed by horizontal rules."""
    return f"{_HEADER_RULE}\n{message}\n{_HEADER_RULE}\n\n"


class Console:
    """Line-oriented user interaction over a pair of text streams."""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        clear_command: Optional[Sequence[str]] = ("clear",),
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.clear_command = tuple(clear_command) if clear_command else None

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def read_line(self, prompt: str = "") -> str:
        """Show a prompt and return the next line without its newline."""
        if prompt:
            self.write(prompt)
        line = self.stdin.readline()
        if not line:
            raise EOFError("end of input")
        return strip_newline(line)

    def clear_screen(self) -> None:
        if not self.clear_command:
            return
        self.stdout.flush()
        try:
            subprocess.run(list(self.clear_command), check=False)
        except OSError:
            pass

    def press_enter(self) -> None:
        """Tell the user to press ENTER and wait for it."""
        self.write(PRESS_ENTER_MESSAGE)
        self.stdin.readline()

    def header(self, message: str) -> None:
        self.write(header(message))