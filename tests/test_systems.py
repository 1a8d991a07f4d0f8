from __future__ import annotations

import numpy as np
import pytest

from core.commands import Command
from core.components import FlightState, LanderState
from core.ecs import Entity, World
from core.lander import Lander
from core.landing import judge_landing, terrain_penalty
from core.maths import Vector2
from core.physics import PhysicsEngine
from core.systems.contact import ContactSystem
from core.systems.physics_sync import PhysicsSystem
from core.systems.propulsion import PropulsionSystem
from core.systems.sensor_update import RadarCountdownSystem, activate_radar
from core.systems.state_transition import can_transition, transition
from core.terrain import TerrainProfile

# Heights stay below 7.5 so a motionless touchdown clears both thresholds.
MILD_PROFILES = [
    TerrainProfile.from_heights([0.0] * 21),
    TerrainProfile.from_heights([7.4] * 21),
    TerrainProfile.from_heights([-7.4] * 21),
    TerrainProfile.from_heights(np.linspace(-7.0, 7.0, 21)),
]
ROUGH_PROFILES = MILD_PROFILES + [
    TerrainProfile.from_heights([12.5] * 21),
    TerrainProfile.from_heights([(-1) ** i * 9.0 for i in range(21)]),
]


def _world_with(lander: Lander, *systems) -> World:
    world = World()
    world.add_entity(lander)
    for system in systems:
        world.add_system(system)
    return world


def _flying_lander(profile: TerrainProfile, pos=(0.0, 100.0), vel=(0.0, 0.0), fuel=10) -> Lander:
    lander = Lander(start_pos=Vector2(pos), start_vel=Vector2(vel), fuel=fuel, profile=profile)
    transition(lander.lander_state, FlightState.FLYING)
    return lander


@pytest.mark.parametrize("profile", MILD_PROFILES)
@pytest.mark.parametrize("x", [-100.0, -37.0, 0.0, 55.0, 100.0, 140.0])
def test_motionless_touchdown_always_lands(profile: TerrainProfile, x: float) -> None:
    assert judge_landing(profile, x, 0.0, 0.0, 0.0) == FlightState.SUCCESS


@pytest.mark.parametrize("profile", ROUGH_PROFILES)
@pytest.mark.parametrize("x", [-100.0, 0.0, 63.0, 250.0])
def test_fast_descent_always_crashes(profile: TerrainProfile, x: float) -> None:
    assert judge_landing(profile, x, 0.0, 0.0, 10.0) == FlightState.CRASH
    assert judge_landing(profile, x, 0.0, 0.0, -10.0) == FlightState.CRASH


def test_motionless_touchdown_crashes_on_tall_hazard() -> None:
    # penalty 1.5 leaves no horizontal margin at all
    tall = TerrainProfile.from_heights([7.5] * 21)
    assert judge_landing(tall, 0.0, 0.0, 0.0, 0.0) == FlightState.CRASH
    assert judge_landing(TerrainProfile.from_heights([7.4] * 21), 0.0, 0.0, 0.0, 0.0) == FlightState.SUCCESS


def test_airborne_lander_is_not_judged() -> None:
    profile = TerrainProfile.from_heights([0.0] * 21)
    assert judge_landing(profile, 0.0, 0.1, 50.0, -50.0) == FlightState.FLYING


def test_thresholds_shrink_on_rough_ground() -> None:
    flat = TerrainProfile.from_heights([0.0] * 21)
    rough = TerrainProfile.from_heights([5.0] * 21)
    # penalty 1.0 -> limits become 1.0 vertical and 0.5 horizontal
    assert terrain_penalty(rough, 0.0) == pytest.approx(1.0)
    assert judge_landing(flat, 0.0, 0.0, 1.2, -1.8) == FlightState.SUCCESS
    assert judge_landing(rough, 0.0, 0.0, 1.2, -1.8) == FlightState.CRASH
    assert judge_landing(rough, 0.0, 0.0, 0.4, -0.9) == FlightState.SUCCESS


def test_no_penalty_outside_surveyed_range() -> None:
    rough = TerrainProfile.from_heights([5.0] * 21)
    assert terrain_penalty(rough, -100.5) == 0.0
    assert terrain_penalty(rough, 100.5) == 0.0
    assert judge_landing(rough, 150.0, 0.0, 1.2, -1.8) == FlightState.SUCCESS


def test_speed_limits_are_strict() -> None:
    flat = TerrainProfile.from_heights([0.0] * 21)
    assert judge_landing(flat, 0.0, 0.0, 0.0, -2.0) == FlightState.CRASH
    assert judge_landing(flat, 0.0, 0.0, 1.5, 0.0) == FlightState.CRASH


def test_state_transition_table() -> None:
    assert can_transition(FlightState.NOT_STARTED, FlightState.FLYING)
    assert can_transition(FlightState.FLYING, FlightState.CRASH)
    assert not can_transition(FlightState.NOT_STARTED, FlightState.SUCCESS)
    assert not can_transition(FlightState.CRASH, FlightState.FLYING)

    ls = LanderState()
    with pytest.raises(RuntimeError):
        transition(ls, FlightState.SUCCESS)
    transition(ls, FlightState.FLYING)
    assert ls.state == FlightState.FLYING


def test_propulsion_charges_only_engine_burns() -> None:
    profile = TerrainProfile.from_heights([0.0] * 21)
    lander = _flying_lander(profile, fuel=5)
    world = _world_with(lander, PropulsionSystem())

    lander.intent.command = Command.BURN_LEFT
    world.update(1.0)
    assert lander.fuel == 5  # engines off

    lander.engine.on = True
    world.update(1.0)
    lander.intent.command = Command.DRIFT
    world.update(1.0)
    lander.intent.command = Command.BURN_RIGHT
    world.update(1.0)
    assert lander.fuel == 3


def test_radar_countdown_deactivates_at_zero() -> None:
    profile = TerrainProfile.from_heights([0.0] * 21)
    lander = _flying_lander(profile)
    countdown = RadarCountdownSystem()
    world = _world_with(lander, countdown)

    world.update(1.0)
    assert not lander.radar.active
    assert lander.radar.turns_remaining == 0

    activate_radar(lander.radar)
    seen = []
    for _ in range(4):
        world.update(1.0)
        seen.append((lander.radar.active, lander.radar.turns_remaining, bool(countdown.lost_signal)))
    assert seen == [
        (True, 2, False),
        (True, 1, False),
        (False, 0, True),
        (False, 0, False),
    ]


def test_contact_system_resolves_touchdown() -> None:
    profile = TerrainProfile.from_heights([0.0] * 21)
    lander = _flying_lander(profile, pos=(0.0, 1.0), vel=(0.0, 0.0))
    engine = PhysicsEngine(gravity=1.6, thrust=3.0)
    world = _world_with(lander, PhysicsSystem(engine), ContactSystem())

    world.update(1.0)
    assert lander.altitude == 0.0
    assert lander.state == FlightState.SUCCESS

    # Terminal landers are left alone.
    world.update(1.0)
    assert lander.vy == pytest.approx(-1.6)


def test_contact_system_crash_on_hard_impact() -> None:
    profile = TerrainProfile.from_heights([0.0] * 21)
    lander = _flying_lander(profile, pos=(0.0, 5.0), vel=(0.0, -8.0))
    world = _world_with(lander, PhysicsSystem(PhysicsEngine(1.6, 3.0)), ContactSystem())
    world.update(1.0)
    assert lander.state == FlightState.CRASH


def test_entity_require_component_raises_when_missing() -> None:
    entity = Entity(uid="bare")
    with pytest.raises(RuntimeError):
        entity.require_component(LanderState)
    world = World()
    world.add_entity(entity)
    world.add_entity(entity)
    assert world.get_entities_with(LanderState) == []
    assert len(world.entities) == 1
