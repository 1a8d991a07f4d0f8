"""Discrete one-turn kinematics for the lander."""

from __future__ import annotations

from core.commands import Command
from core.components import Engine, PhysicsState, Transform
from core.config import LATERAL_THRUST_RATIO, TIME_STEP, GameConfig


class PhysicsEngine:
    """Advances lander position and velocity by one fixed time step.

    Gravity always applies first; thrust only applies on a burn command with
    the engines on. A burn pushes up and sideways: burn-left adds positive
    horizontal velocity, burn-right subtracts it.
    """

    def __init__(self, gravity: float, thrust: float, time_step: float = TIME_STEP):
        self.gravity = float(gravity)
        self.thrust = float(thrust)
        self.time_step = float(time_step)

    @classmethod
    def from_config(cls, config: GameConfig) -> "PhysicsEngine":
        return cls(gravity=config.gravity, thrust=config.thrust)

    def thrust_acceleration(self, command: Command, engines_on: bool) -> tuple[float, float]:
        """(horizontal, vertical) thrust acceleration for a command."""
        if not engines_on or not command.is_burn:
            return 0.0, 0.0
        lateral = self.thrust * LATERAL_THRUST_RATIO
        if command is Command.BURN_RIGHT:
            lateral = -lateral
        return lateral, self.thrust

    def step(
        self,
        trans: Transform,
        phys: PhysicsState,
        engine: Engine,
        command: Command,
    ) -> None:
        dt = self.time_step
        phys.prev_vel.update(phys.vel)

        phys.vel.y -= self.gravity * dt
        ax, ay = self.thrust_acceleration(command, engine.on)
        phys.vel.x += ax * dt
        phys.vel.y += ay * dt

        trans.x += phys.vel.x * dt
        trans.y += phys.vel.y * dt
        if trans.y < 0.0:
            trans.y = 0.0
