"""Typing protocols for the game's I/O collaborators."""

from __future__ import annotations

from typing import Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from core.commands import Command
    from core.config import GameConfig
    from core.controllers import TurnResult


class CommandSource(Protocol):
    def get_command(self) -> Command: ...

    def read_line(self, prompt: str) -> str | None: ...


class OutputSink(Protocol):
    def show_banner(self, config: GameConfig) -> None: ...

    def render(self, result: TurnResult, config: GameConfig) -> None: ...

    def notice(self, text: str) -> None: ...

    def write_lines(self, lines: list[str]) -> None: ...
