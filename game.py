"""Game orchestration: ties input, turn controller, output, and results log together."""

from __future__ import annotations

import logging
import random
from pathlib import Path

from core.commands import Command
from core.components import FlightState
from core.config import DEFAULT_RESULTS_FILE, GameConfig
from core.controllers import TurnController, TurnResult
from core.eval import append_result, build_result_record
from ui.config_menu import ConfigMenu
from ui.renderer import TextRenderer
from utils.input import InputHandler
from utils.protocols import CommandSource, OutputSink

logger = logging.getLogger(__name__)


class LanderGame:
    """Main interactive loop for the text moon lander."""

    def __init__(
        self,
        config: GameConfig | None = None,
        source: CommandSource | None = None,
        output: OutputSink | None = None,
        results_path: str | Path | None = DEFAULT_RESULTS_FILE,
        seed: int | None = None,
    ):
        self.config = config if config is not None else GameConfig()
        self.source = source if source is not None else InputHandler()
        self.output = output if output is not None else TextRenderer()
        self.results_path = Path(results_path) if results_path is not None else None
        self.seed = random.randint(0, 1000000) if seed is None else seed
        self.controller = TurnController(self.config, random.Random(self.seed))
        self.menu = ConfigMenu(self.source, self.output)

        self.running = True
        self.games = 0
        self.landing_count = 0
        self.crash_count = 0

    def run(self) -> dict:
        logger.info("Session seed %d", self.seed)
        self.output.show_banner(self.config)
        while self.running:
            self.step(self.source.get_command())
        return self.summary()

    def step(self, command: Command) -> TurnResult | None:
        """Handle one command; returns the controller result when there is one."""
        if command == Command.QUIT:
            self.output.notice("Thanks for playing Moon Lander!")
            self.running = False
            return None
        if command == Command.CONFIGURE:
            self.configure()
            return None

        result = self.controller.handle(command)
        if result.started:
            self.games += 1
        self.output.render(result, self.config)
        if result.concluded:
            self._conclude(result)
        return result

    def configure(self) -> None:
        if self.controller.in_flight:
            self.output.notice(
                "Configuration is locked during a descent. Finish the game or press 'V' first."
            )
            return
        self.menu.run(self.config)
        self.output.notice(
            "\nConfiguration updated. Press 'V' to start a new game with these settings."
        )

    def _conclude(self, result: TurnResult) -> None:
        if result.state == FlightState.SUCCESS:
            self.landing_count += 1
        else:
            self.crash_count += 1
        if self.results_path is None or result.snapshot is None or result.profile is None:
            return

        record = build_result_record(result.snapshot, result.profile)
        try:
            path = append_result(self.results_path, record)
        except OSError as exc:
            logger.warning("Could not write results to %s: %s", self.results_path, exc)
            self.output.notice(f"Error: Could not save result to {self.results_path}.")
            return
        self.output.notice(f"Result saved to {path}")

    def summary(self) -> dict:
        lander = self.controller.lander
        return {
            "seed": self.seed,
            "games": self.games,
            "landing_count": self.landing_count,
            "crash_count": self.crash_count,
            "state": self.controller.state.value,
            "fuel": lander.fuel if lander is not None else self.config.initial_fuel,
        }
