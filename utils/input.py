"""Input collection: turn typed lines into commands and raw menu values.

End of input counts as quit so piped or scripted sessions always terminate.
"""

from __future__ import annotations

from collections import deque
from typing import Iterable

from core.commands import Command


class InputHandler:
    """Reads commands and values from the terminal via input()."""

    def __init__(self, prompt: str = "\nCommand: "):
        self.prompt = prompt

    def read_line(self, prompt: str) -> str | None:
        """Return one stripped line, or None at end of input."""
        try:
            return input(prompt).strip()
        except EOFError:
            return None

    def get_command(self) -> Command:
        line = self.read_line(self.prompt)
        if line is None:
            return Command.QUIT
        return Command.from_key(line)


class ScriptedInput(InputHandler):
    """Feeds a fixed sequence of lines; runs headless and in tests."""

    def __init__(self, lines: Iterable[str]):
        super().__init__()
        self._lines: deque[str] = deque(lines)

    @classmethod
    def from_keys(cls, keys: str) -> "ScriptedInput":
        """One command per non-blank character, e.g. "VWYYX"."""
        return cls(ch for ch in keys if not ch.isspace())

    @property
    def remaining(self) -> int:
        return len(self._lines)

    def read_line(self, prompt: str) -> str | None:
        _ = prompt
        if not self._lines:
            return None
        return self._lines.popleft().strip()
