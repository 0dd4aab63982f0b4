"""Poll-and-throttle game loop.

One iteration of :func:`run_game` is one tick: poll at most one key without
blocking, run :func:`grid_shooter.step.step`, render, then sleep a fixed delay.
The loop ends on quit or game over; the cursor is made visible again on every
exit path.
"""

import logging
import time
from typing import Callable, Optional

from grid_shooter.input import InputSource, poll_action
from grid_shooter.renderer.presenter import Presenter, status_from_state
from grid_shooter.state import State
from grid_shooter.step import step
from grid_shooter.utils.terminal import is_terminal_state

logger = logging.getLogger(__name__)


def run_game(
    state: State,
    presenter: Presenter,
    input_source: InputSource,
    tick_delay: float = 0.008,
    sleep: Callable[[float], None] = time.sleep,
    max_ticks: Optional[int] = None,
    game_over_delay: float = 1.5,
) -> State:
    """Run ticks until the player quits, dies, or ``max_ticks`` elapse.

    Args:
        state: Initial state (already initialized, player placed).
        presenter: Drawing surface, rendered once before the first tick and
            once after every tick.
        input_source: Non-blocking keyboard source.
        tick_delay: Seconds to sleep after each tick.
        sleep: Sleep function (injected for tests).
        max_ticks: Optional tick limit for headless runs.
        game_over_delay: Seconds to keep the announced game over on screen
            before returning.

    Returns:
        State: The final state; ``lose`` or ``quit`` is set unless the tick
        limit stopped the loop.
    """
    presenter.set_cursor_visible(False)
    ticks = 0
    try:
        presenter.render(state.grid, status_from_state(state))
        while not is_terminal_state(state):
            if max_ticks is not None and ticks >= max_ticks:
                break
            action = poll_action(input_source)
            state = step(state, action)
            ticks += 1
            if state.lose:
                presenter.render(state.grid, status_from_state(state))
                presenter.announce_game_over(status_from_state(state))
                sleep(game_over_delay)
                break
            if state.quit:
                break
            presenter.render(state.grid, status_from_state(state))
            sleep(tick_delay)
    finally:
        presenter.set_cursor_visible(True)
    logger.info("Game loop finished after %d ticks", ticks)
    logger.debug("Final state: %s", dict(state.description))
    return state
