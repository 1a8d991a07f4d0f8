"""Turn controller: translates player commands into session state changes."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from core.commands import Command
from core.components import FlightState
from core.config import GameConfig
from core.ecs import World
from core.lander import Lander, StatusSnapshot
from core.physics import PhysicsEngine
from core.sensor import RadarReport, get_radar_report
from core.systems.contact import ContactSystem
from core.systems.physics_sync import PhysicsSystem
from core.systems.propulsion import PropulsionSystem
from core.systems.sensor_update import RadarCountdownSystem, activate_radar
from core.systems.state_transition import transition
from core.terrain import TerrainProfile, generate_profile

logger = logging.getLogger(__name__)

NOTICE_NO_GAME = "No active game. Press 'V' to start a new game."
NOTICE_GAME_OVER = "Game over. Press 'V' to start a new game or 'Q' to quit."
NOTICE_UNKNOWN = "Unknown command. Use: V, W, S, Y, Z, X, R, C, Q"
NOTICE_ENGINES_OFF = "Cannot burn. Main engines are OFF (use 'W' to turn on)."
NOTICE_FORCED_DRIFT = "No fuel remaining! Lander is now drifting."
NOTICE_NO_RADAR_FUEL = "No fuel remaining! Cannot activate radar."
NOTICE_FUEL_DEPLETED = "*** WARNING: FUEL DEPLETED. ***"
NOTICE_RADAR_LOST = ">>> Landing radar signal lost. Visuals deactivated. <<<"
NOTICE_LANDED = "*** THE EAGLE HAS LANDED! SUCCESSFUL LANDING! ***"
NOTICE_CRASHED = "*** CRASHED! High impact speed. ***"


@dataclass
class TurnResult:
    """Everything the output collaborators need to report one command."""

    command: Command
    state: FlightState
    accepted: bool = True
    executed: bool = False  # True when simulated time advanced
    started: bool = False
    notices: list[str] = field(default_factory=list)
    radar_report: RadarReport | None = None
    snapshot: StatusSnapshot | None = None
    profile: TerrainProfile | None = None

    @property
    def concluded(self) -> bool:
        return self.executed and self.state.is_terminal


class TurnController:
    """Explicit state machine for one game session at a time.

    NOT_STARTED -> FLYING -> {SUCCESS, CRASH}. Starting a new game is allowed
    from any state and rebuilds the lander, radar, and terrain.
    """

    def __init__(self, config: GameConfig, rng: random.Random | None = None):
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.lander: Lander | None = None
        self.world: World | None = None
        self._radar_countdown: RadarCountdownSystem | None = None
        self._handlers = {
            Command.START: lambda _cmd: self.start_game(),
            Command.ENGINES_ON: lambda _cmd: self.set_engines(True),
            Command.ENGINES_OFF: lambda _cmd: self.set_engines(False),
            Command.RADAR: lambda _cmd: self.activate_radar(),
            Command.BURN_LEFT: self.play_turn,
            Command.BURN_RIGHT: self.play_turn,
            Command.DRIFT: self.play_turn,
        }

    @property
    def state(self) -> FlightState:
        if self.lander is None:
            return FlightState.NOT_STARTED
        return self.lander.state

    @property
    def in_flight(self) -> bool:
        return self.state == FlightState.FLYING

    def handle(self, command: Command) -> TurnResult:
        """Dispatch a session command; configure and quit belong to the game loop."""
        if command in (Command.CONFIGURE, Command.QUIT):
            raise ValueError(f"{command.name} is handled by the game loop, not the turn controller")
        handler = self._handlers.get(command)
        if handler is None:
            return self._rejected(command, NOTICE_UNKNOWN)
        return handler(command)

    def start_game(self) -> TurnResult:
        self.config.validate()
        profile = generate_profile(self.rng)
        lander = Lander.spawn(self.rng, self.config, profile)

        world = World()
        world.add_entity(lander)
        world.add_system(PhysicsSystem(PhysicsEngine.from_config(self.config)))
        world.add_system(PropulsionSystem())
        self._radar_countdown = RadarCountdownSystem()
        world.add_system(self._radar_countdown)
        world.add_system(ContactSystem())

        transition(lander.lander_state, FlightState.FLYING)
        self.lander = lander
        self.world = world
        logger.info(
            "New game: safe zone x=%.1f (%.0f%%); %s",
            profile.safe_landing_x,
            profile.safe_landing_score,
            lander.get_stats_text(),
        )
        return self._result(Command.START, started=True)

    def set_engines(self, on: bool) -> TurnResult:
        command = Command.ENGINES_ON if on else Command.ENGINES_OFF
        lander = self.lander
        if lander is None or not self.in_flight:
            return self._rejected(command, self._inactive_notice())
        lander.engine.on = on
        lander.engine.forced_off = False
        notice = ">>> Main Engines ON. <<<" if on else ">>> Main Engines OFF. <<<"
        return self._result(command, notices=[notice], with_snapshot=False)

    def activate_radar(self) -> TurnResult:
        lander = self.lander
        if lander is None or not self.in_flight:
            return self._rejected(Command.RADAR, self._inactive_notice())
        if lander.tank.empty:
            return self._rejected(Command.RADAR, NOTICE_NO_RADAR_FUEL)

        activate_radar(lander.radar)
        lander.tank.consume(1)
        report = get_radar_report(lander.profile, lander.x, lander.radar.turns_remaining)
        notices = ["=== ACTIVATING LANDING RADAR (1 fuel consumed) ==="]
        if lander.tank.empty:
            notices.append(NOTICE_FUEL_DEPLETED)
        logger.debug("Radar activated: %s", lander.get_stats_text())
        return self._result(Command.RADAR, notices=notices, radar_report=report)

    def play_turn(self, command: Command) -> TurnResult:
        """Resolve one burn or drift turn.

        A burn with the engines off is rejected before anything changes; an
        empty tank turns any command into a drift with the engines forced off.
        """
        if not command.is_turn:
            raise ValueError(f"{command.name} does not advance a turn")
        lander = self.lander
        if lander is None or self.world is None or not self.in_flight:
            return self._rejected(command, self._inactive_notice())

        notices: list[str] = []
        forced_drift = lander.tank.empty
        if forced_drift:
            command = Command.DRIFT
        elif command.is_burn and not lander.engine.on:
            return self._rejected(command, NOTICE_ENGINES_OFF)

        lander.engine.forced_off = forced_drift
        if forced_drift:
            notices.append(NOTICE_FORCED_DRIFT)
            lander.engine.on = False

        report = None
        if lander.radar.active and lander.radar.turns_remaining > 0:
            report = get_radar_report(lander.profile, lander.x, lander.radar.turns_remaining)

        lander.intent.command = command
        self.world.update(lander.physics.time_step)

        if self._radar_countdown is not None and self._radar_countdown.lost_signal:
            notices.append(NOTICE_RADAR_LOST)

        if lander.state == FlightState.SUCCESS:
            notices.append(NOTICE_LANDED)
        elif lander.state == FlightState.CRASH:
            notices.append(NOTICE_CRASHED)
        elif lander.tank.empty:
            notices.append(NOTICE_FUEL_DEPLETED)

        logger.debug("Turn %s: %s", command.name, lander.get_stats_text())
        if lander.state.is_terminal:
            logger.info("Game over (%s): %s", lander.state.value, lander.get_stats_text())
        return self._result(command, executed=True, notices=notices, radar_report=report)

    def _inactive_notice(self) -> str:
        if self.state == FlightState.NOT_STARTED:
            return NOTICE_NO_GAME
        return NOTICE_GAME_OVER

    def _rejected(self, command: Command, notice: str) -> TurnResult:
        return TurnResult(command=command, state=self.state, accepted=False, notices=[notice])

    def _result(
        self,
        command: Command,
        *,
        executed: bool = False,
        started: bool = False,
        notices: list[str] | None = None,
        radar_report: RadarReport | None = None,
        with_snapshot: bool = True,
    ) -> TurnResult:
        lander = self.lander
        return TurnResult(
            command=command,
            state=self.state,
            executed=executed,
            started=started,
            notices=list(notices or []),
            radar_report=radar_report,
            snapshot=lander.snapshot() if lander is not None and with_snapshot else None,
            profile=lander.radar.profile if lander is not None else None,
        )
