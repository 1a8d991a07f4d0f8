from core.components import ControlIntent, Engine, FuelTank
from core.ecs import System


class PropulsionSystem(System):
    """Charges one unit of fuel for each burn fired with the engines on."""

    def update(self, dt: float) -> None:
        if not self.world:
            return

        for entity in self.world.get_entities_with(Engine, FuelTank, ControlIntent):
            engine = entity.require_component(Engine)
            tank = entity.require_component(FuelTank)
            intent = entity.require_component(ControlIntent)
            if engine.on and intent.command.is_burn:
                tank.consume(1)
