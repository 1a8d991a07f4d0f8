from __future__ import annotations

from core.components import FlightState, LanderState

# Allowed session transitions. Starting a new game builds a fresh lander, so
# terminal states have no outgoing edges here.
TRANSITIONS: dict[FlightState, frozenset[FlightState]] = {
    FlightState.NOT_STARTED: frozenset({FlightState.FLYING}),
    FlightState.FLYING: frozenset({FlightState.FLYING, FlightState.SUCCESS, FlightState.CRASH}),
    FlightState.SUCCESS: frozenset(),
    FlightState.CRASH: frozenset(),
}


def can_transition(current: FlightState, new: FlightState) -> bool:
    return new in TRANSITIONS[current]


def transition(ls: LanderState, new: FlightState) -> None:
    """Move ls to new, raising on an edge the table does not allow."""
    if not can_transition(ls.state, new):
        raise RuntimeError(f"Illegal flight state transition {ls.state.value} -> {new.value}")
    ls.state = new
