from core.components import FlightState, LanderState, PhysicsState, Radar, Transform
from core.ecs import Entity, System
from core.landing import judge_landing
from core.systems.state_transition import transition


class ContactSystem(System):
    """Post-physics: resolve ground contact into a landing or a crash."""

    def update(self, dt: float) -> None:
        if not self.world:
            return

        for entity in self.world.get_entities_with(LanderState, PhysicsState, Transform, Radar):
            self._resolve(entity)

    def _resolve(self, entity: Entity) -> None:
        ls = entity.require_component(LanderState)
        if ls.state != FlightState.FLYING:
            return
        trans = entity.require_component(Transform)
        phys = entity.require_component(PhysicsState)
        radar = entity.require_component(Radar)
        if radar.profile is None:
            raise RuntimeError(f"Entity {entity.uid} has no terrain profile to land on")

        outcome = judge_landing(radar.profile, trans.x, trans.y, phys.vel.x, phys.vel.y)
        transition(ls, outcome)
