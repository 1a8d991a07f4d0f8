from __future__ import annotations

from core.components import Radar
from core.config import RADAR_VALID_TURNS
from core.ecs import System


def activate_radar(radar: Radar, turns: int = RADAR_VALID_TURNS) -> None:
    radar.active = True
    radar.turns_remaining = turns


class RadarCountdownSystem(System):
    """Count down radar validity once per executed turn; switch off at zero."""

    def __init__(self):
        super().__init__()
        self.lost_signal: list[str] = []

    def update(self, dt: float) -> None:
        _ = dt
        self.lost_signal = []
        if not self.world:
            return

        for entity in self.world.get_entities_with(Radar):
            radar = entity.require_component(Radar)
            if not radar.active or radar.turns_remaining <= 0:
                continue
            radar.turns_remaining -= 1
            if radar.turns_remaining <= 0:
                radar.turns_remaining = 0
                radar.active = False
                self.lost_signal.append(entity.uid)
