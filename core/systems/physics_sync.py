from __future__ import annotations

from core.components import (
    ControlIntent,
    Engine,
    FlightState,
    LanderState,
    PhysicsState,
    Transform,
)
from core.ecs import System
from core.physics import PhysicsEngine


class PhysicsSystem(System):
    """Step kinematics of every flying entity with its chosen command."""

    def __init__(self, engine: PhysicsEngine):
        super().__init__()
        self.engine = engine

    def update(self, dt: float) -> None:
        _ = dt
        if not self.world:
            return

        for entity in self.world.get_entities_with(
            Transform, PhysicsState, Engine, ControlIntent, LanderState
        ):
            ls = entity.require_component(LanderState)
            if ls.state != FlightState.FLYING:
                continue
            self.engine.step(
                entity.require_component(Transform),
                entity.require_component(PhysicsState),
                entity.require_component(Engine),
                entity.require_component(ControlIntent).command,
            )
