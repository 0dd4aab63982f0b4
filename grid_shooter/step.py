"""State reducer and tick orchestration.

This module wires the systems together to implement a single *tick* given an
``Action``. The exported :func:`step` is the only gameplay mutation entry
point and is pure: it returns a *new* :class:`grid_shooter.state.State`.

Ordering within a tick:

1. ``QUIT`` flags the state and ends the tick immediately.
2. The player action is applied: movement (with pickups) or fire.
3. If the action killed the player the game is over and the tick stops there.
4. ``projectile_system`` advances the projectile unconditionally.
5. The turn counter is bumped.

Input sampling, presentation and throttling live in
:func:`grid_shooter.game.run_game`.
"""

from dataclasses import replace

from grid_shooter.actions import Action, MOVE_ACTIONS, MOVE_DELTAS
from grid_shooter.state import State
from grid_shooter.systems.movement import movement_system
from grid_shooter.systems.projectile import fire_system, projectile_system
from grid_shooter.systems.terminal import lose_system, quit_system
from grid_shooter.utils.terminal import is_terminal_state


def step(state: State, action: Action) -> State:
    """Advance the simulation by one tick.

    Args:
        state (State): Previous immutable game state.
        action (Action): Player action for this tick (``WAIT`` when no key
            was pressed).

    Returns:
        State: Next state snapshot. A terminal input state (lost or quit) is
            returned unchanged.

    Raises:
        ValueError: If the action is not recognized.
    """
    if is_terminal_state(state):
        return state

    if action == Action.QUIT:
        return quit_system(state)

    if action in MOVE_ACTIONS:
        state = _step_move(state, action)
    elif action == Action.FIRE:
        state = _step_fire(state, action)
    elif action == Action.WAIT:
        state = _step_wait(state, action)
    else:
        raise ValueError("Action is not valid")

    state = lose_system(state)
    if state.lose:
        return state

    return _after_step(state)


def _step_move(state: State, action: Action) -> State:
    """Handle movement actions via :func:`movement_system`."""
    dx, dy = MOVE_DELTAS[action]
    return movement_system(state, dx, dy)


def _step_fire(state: State, action: Action) -> State:
    return fire_system(state)


def _step_wait(state: State, action: Action) -> State:
    """No-op action; the projectile still advances afterwards."""
    return state


def _after_step(state: State) -> State:
    """Advance the projectile and bump the turn counter."""
    state = projectile_system(state)
    return replace(state, turn=state.turn + 1)
