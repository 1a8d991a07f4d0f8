"""Between-games configuration menu."""

from __future__ import annotations

from dataclasses import replace

from core.config import GameConfig
from utils.protocols import CommandSource, OutputSink

# choice -> (config field, prompt, parser)
NUMERIC_SETTINGS = {
    1: ("gravity", "Enter new gravity (e.g., 1.6 for Moon): ", float),
    2: ("thrust", "Enter new engine force (m/s²): ", float),
    3: ("initial_fuel", "Enter new initial fuel: ", int),
}
TOGGLE_DISPLAY = 4
RETURN = 5


class ConfigMenu:
    """Edits a GameConfig in place; malformed values are rejected and re-prompted."""

    def __init__(self, source: CommandSource, output: OutputSink):
        self.source = source
        self.output = output

    def menu_lines(self, config: GameConfig) -> list[str]:
        return [
            "",
            "=== GAME CONFIGURATION ===",
            f"1. Gravity:       {config.gravity:.2f} m/s²",
            f"2. Engine Force:  {config.thrust:.2f} m/s²",
            f"3. Initial Fuel:  {config.initial_fuel} burns",
            f"4. Display Mode:  {config.display_mode}",
            "5. Return to game",
        ]

    def run(self, config: GameConfig) -> GameConfig:
        while True:
            self.output.write_lines(self.menu_lines(config))
            line = self.source.read_line("Choose setting to change (1-5): ")
            if line is None:
                return config
            try:
                choice = int(line)
            except ValueError:
                choice = 0

            if choice == RETURN:
                self.output.notice("Returning to main menu...")
                return config
            if choice == TOGGLE_DISPLAY:
                config.display_delta_v = not config.display_delta_v
                self.output.notice(f"Display mode set to {config.display_mode}")
            elif choice in NUMERIC_SETTINGS:
                if not self._edit_numeric(config, choice):
                    return config
            else:
                self.output.notice("Invalid choice.")

    def _edit_numeric(self, config: GameConfig, choice: int) -> bool:
        """Prompt for one numeric setting; False when input ran out."""
        name, prompt, parse = NUMERIC_SETTINGS[choice]
        raw = self.source.read_line(prompt)
        if raw is None:
            return False
        try:
            candidate = replace(config, **{name: parse(raw)})
            candidate.validate()
        except ValueError as exc:
            self.output.notice(f"Invalid value {raw!r}: {exc}")
            return True
        setattr(config, name, getattr(candidate, name))
        return True
