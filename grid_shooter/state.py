"""Core immutable ``State`` dataclass.

This module defines the frozen :class:`State` object holding the entire game
snapshot at a single tick: the tile grid, the player, the projectile slot and
the run's status flags. :func:`grid_shooter.step.step` is a pure function from
one ``State`` (plus an ``Action``) to the next; nothing is mutated in place,
so whoever holds the latest snapshot owns the game.

Design notes:

* The grid is a persistent vector of persistent row vectors
    (``pyrsistent.PVector``), indexed ``grid[y][x]``. Writing a cell produces
    a new grid sharing every untouched row with the previous one.
* ``lose`` and ``quit`` are mutually exclusive terminal markers. The reducer
    short-circuits on terminal states.
"""

from dataclasses import dataclass
from typing import Any, Optional

from pyrsistent import PMap, pmap

from grid_shooter.components import Player, Projectile
from grid_shooter.types import Grid


@dataclass(frozen=True)
class State:
    """Immutable game state.

    Attributes:
        width (int): Grid width in tiles.
        height (int): Grid height in tiles.
        grid (Grid): Row-major tile buffer, ``grid[y][x]``.
        player (Player): The controllable actor.
        projectile (Projectile): Single projectile slot (``active=False`` when empty).
        name (str): Display name shown in the status line.
        turn (int): Tick counter (0-based).
        lose (bool): True once the player's health reached zero.
        quit (bool): True once the player asked to quit.
        message (str | None): Optional terminal message (e.g. "Game Over!").
        seed (int | None): Seed used to place the player at startup.
    """

    width: int
    height: int
    grid: Grid
    player: Player
    projectile: Projectile = Projectile()
    name: str = "soldier_"

    # Status
    turn: int = 0
    lose: bool = False
    quit: bool = False
    message: Optional[str] = None

    # RNG
    seed: Optional[int] = None

    @property
    def description(self) -> PMap[str, Any]:
        """Compact summary of the scalar fields (the grid is omitted).

        Returns:
            PMap[str, Any]: Field name to value for diagnostics and logging.
        """
        return pmap(
            {
                "width": self.width,
                "height": self.height,
                "player": self.player,
                "projectile": self.projectile,
                "name": self.name,
                "turn": self.turn,
                "lose": self.lose,
                "quit": self.quit,
                "message": self.message,
                "seed": self.seed,
            }
        )
