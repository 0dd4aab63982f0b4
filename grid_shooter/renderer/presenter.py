"""Presenter protocol and status line.

A presenter is invoked once per tick with the full grid and a :class:`Status`
snapshot. It owns every terminal concern (cursor visibility, colors, screen
layout); the core never touches the console directly.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Protocol

from grid_shooter.state import State
from grid_shooter.types import Grid, HealthAppearance
from grid_shooter.utils.health import health_appearance

# Gap between the health and facing fields of the status line
STATUS_GAP = " " * 42


@dataclass(frozen=True)
class Status:
    """Status-line fields shown under the grid.

    Attributes:
        health: Current player health.
        facing: Direction glyph of the player's last move.
        name: Display name (``None`` hides the name line).
        appearance: Health-derived look of the player marker.
    """

    health: int
    facing: str
    name: Optional[str] = None
    appearance: HealthAppearance = HealthAppearance.FULL

    def lines(self) -> List[str]:
        text = [f"Health: {self.health}{STATUS_GAP}Last move: {self.facing}"]
        if self.name is not None:
            text.append(f"Name: {self.name}")
        return text


def status_from_state(state: State) -> Status:
    player = state.player
    return Status(
        health=player.health,
        facing=player.direction_symbol(),
        name=state.name,
        appearance=health_appearance(player.health, player.max_health),
    )


def grid_lines(grid: Grid) -> List[str]:
    """Row-major text rendering: one string per grid row."""
    return ["".join(row) for row in grid]


class Presenter(Protocol):
    """Drawing surface the game loop renders to."""

    def render(self, grid: Grid, status: Status) -> None: ...

    def set_cursor_visible(self, visible: bool) -> None: ...

    def announce_game_over(self, status: Status) -> None: ...


@dataclass
class TextPresenter:
    """Headless presenter that keeps every frame as a list of text lines.

    Useful for tests, replays and piping a run into another program.
    """

    frames: List[List[str]] = field(default_factory=list)
    cursor_visible: bool = True
    game_over: Optional[Status] = None

    def render(self, grid: Grid, status: Status) -> None:
        self.frames.append(grid_lines(grid) + status.lines())

    def set_cursor_visible(self, visible: bool) -> None:
        self.cursor_visible = visible

    def announce_game_over(self, status: Status) -> None:
        self.game_over = status

    @property
    def last_frame(self) -> List[str]:
        return self.frames[-1] if self.frames else []
