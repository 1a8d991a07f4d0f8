"""Lander entity: component composition, spawning, and status snapshots."""

from __future__ import annotations

import random
from dataclasses import dataclass

from core.components import (
    ControlIntent,
    Engine,
    FlightState,
    FuelTank,
    LanderState,
    PhysicsState,
    Radar,
    Transform,
)
from core.config import GameConfig
from core.ecs import Entity
from core.maths import Vector2
from core.terrain import TerrainProfile


@dataclass(frozen=True)
class StatusSnapshot:
    """Read-only view of the lander handed to output and results collaborators."""

    x: float
    altitude: float
    vx: float
    vy: float
    dvx: float
    dvy: float
    fuel: int
    engines_on: bool
    engines_forced_off: bool
    radar_active: bool
    radar_turns_remaining: int
    state: FlightState


class Lander(Entity):
    """Lunar lander entity composed of functional components."""

    def __init__(
        self,
        start_pos: Vector2 | None = None,
        start_vel: Vector2 | None = None,
        fuel: int = 0,
        profile: TerrainProfile | None = None,
    ):
        super().__init__()

        self.trans = Transform(Vector2(start_pos) if start_pos is not None else Vector2(0.0, 0.0))
        self.add_component(self.trans)

        vel = Vector2(start_vel) if start_vel is not None else Vector2(0.0, 0.0)
        self.physics = PhysicsState(vel=vel, prev_vel=Vector2(vel))
        self.add_component(self.physics)

        self.tank = FuelTank(fuel=max(0, int(fuel)))
        self.add_component(self.tank)

        self.engine = Engine()
        self.add_component(self.engine)

        self.radar = Radar(profile=profile)
        self.add_component(self.radar)

        self.lander_state = LanderState()
        self.add_component(self.lander_state)

        self.intent = ControlIntent()
        self.add_component(self.intent)

    @classmethod
    def spawn(cls, rng: random.Random, config: GameConfig, profile: TerrainProfile) -> "Lander":
        """Place a new lander somewhere above the surveyed strip with a random drift."""
        x = float(rng.randrange(200) - 100)
        altitude = float(rng.randrange(500) + 100)
        vx = (rng.randrange(20) - 10) / 2.0
        vy = float(rng.randrange(20) - 15)
        return cls(
            start_pos=Vector2(x, altitude),
            start_vel=Vector2(vx, vy),
            fuel=config.initial_fuel,
            profile=profile,
        )

    # Property facades

    @property
    def x(self) -> float: return self.trans.x

    @property
    def altitude(self) -> float: return self.trans.y

    @property
    def vx(self) -> float: return self.physics.vel.x

    @property
    def vy(self) -> float: return self.physics.vel.y

    @property
    def fuel(self) -> int: return self.tank.fuel

    @property
    def engines_on(self) -> bool: return self.engine.on

    @property
    def state(self) -> FlightState: return self.lander_state.state

    @property
    def profile(self) -> TerrainProfile:
        if self.radar.profile is None:
            raise RuntimeError("Lander has no terrain profile attached")
        return self.radar.profile

    def snapshot(self) -> StatusSnapshot:
        delta = self.physics.delta_vel
        return StatusSnapshot(
            x=self.x,
            altitude=self.altitude,
            vx=self.vx,
            vy=self.vy,
            dvx=delta.x,
            dvy=delta.y,
            fuel=self.fuel,
            engines_on=self.engine.on,
            engines_forced_off=self.engine.forced_off,
            radar_active=self.radar.active,
            radar_turns_remaining=self.radar.turns_remaining,
            state=self.state,
        )

    def get_stats_text(self) -> str:
        """Return a single-line concise stats string for debug logging."""
        return (
            f"x={self.x:.1f} alt={self.altitude:.1f} vx={self.vx:.2f} vy={self.vy:.2f} "
            f"fuel={self.fuel} engines={'on' if self.engine.on else 'off'} "
            f"radar={self.radar.turns_remaining if self.radar.active else '-'} "
            f"state={self.state.value}"
        )
