"""Main entry point for the text moon lander (thin wrapper)."""

from __future__ import annotations

import argparse
import logging
import math
from dataclasses import dataclass

from core.config import (
    DEFAULT_GRAVITY,
    DEFAULT_INITIAL_FUEL,
    DEFAULT_RESULTS_FILE,
    DEFAULT_THRUST,
    GameConfig,
)
from game import LanderGame
from utils.input import InputHandler, ScriptedInput

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class RunConfig:
    game: GameConfig
    seed: int | None
    results_path: str | None
    commands: str | None
    log_level: str


def _non_negative_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise argparse.ArgumentTypeError(f"must be a finite number, got {text}")
    if value < 0.0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {text}")
    return value


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {text}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Moon Lander - turn-based descent with landing radar",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog="Commands: V start, W/S engines on/off, Y/Z burn left/right, "
        "X drift, R radar, C configure, Q quit",
    )
    parser.add_argument(
        "-d",
        "--delta-v",
        action="store_true",
        help="Display velocity changes as Delta V",
    )
    parser.add_argument(
        "--gravity",
        type=_non_negative_float,
        default=None,
        help=f"Gravity in m/s^2 (default: {DEFAULT_GRAVITY})",
    )
    parser.add_argument(
        "--thrust",
        type=_non_negative_float,
        default=None,
        help=f"Engine thrust acceleration in m/s^2 (default: {DEFAULT_THRUST})",
    )
    parser.add_argument(
        "--fuel",
        type=_non_negative_int,
        default=None,
        help=f"Initial fuel in burns (default: {DEFAULT_INITIAL_FUEL})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--results",
        default=DEFAULT_RESULTS_FILE,
        help=f"Results log file (default: {DEFAULT_RESULTS_FILE}); '-' disables it",
    )
    parser.add_argument(
        "--commands",
        default=None,
        help="Headless: play this command sequence (e.g. VWYYX) instead of reading stdin",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Diagnostic log level written to stderr",
    )
    return parser


def _parse_args(args: argparse.Namespace) -> RunConfig:
    game = GameConfig(display_delta_v=args.delta_v)
    if args.gravity is not None:
        game.gravity = args.gravity
    if args.thrust is not None:
        game.thrust = args.thrust
    if args.fuel is not None:
        game.initial_fuel = args.fuel

    return RunConfig(
        game=game,
        seed=args.seed,
        results_path=None if args.results == "-" else args.results,
        commands=args.commands,
        log_level=args.log_level,
    )


def _print_headless_results(result: dict) -> None:
    print("\n" + "=" * 60)
    print("FINAL RESULTS")
    print("=" * 60)
    for key in ("seed", "games", "landing_count", "crash_count", "state", "fuel"):
        if key in result:
            print(f"{key.replace('_', ' ').capitalize():<18}{result[key]}")
    print("=" * 60)


def main(argv: list[str] | None = None) -> None:
    """Entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    config = _parse_args(args)

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    source = ScriptedInput.from_keys(config.commands) if config.commands else InputHandler()
    game = LanderGame(
        config=config.game,
        source=source,
        results_path=config.results_path,
        seed=config.seed,
    )
    result = game.run()

    if config.commands:
        _print_headless_results(result)


if __name__ == "__main__":
    main()
