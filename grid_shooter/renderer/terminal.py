"""Curses presenter.

Draws the grid from the top-left corner on every tick and colors the player
marker by health: green at full health, red when damaged. Windows needs the
``windows-curses`` distribution for the ``curses`` module.
"""

import curses
from typing import Any, Dict

from grid_shooter.renderer.presenter import Status, grid_lines
from grid_shooter.types import Grid, HealthAppearance, Tile

COLOR_FULL = 1
COLOR_DAMAGED = 2
COLOR_PROJECTILE = 3
COLOR_PICKUP = 4
COLOR_HAZARD = 5

GAME_OVER_TEXT = "Game Over!"


class CursesPresenter:
    """Presenter backed by a curses window (usually ``stdscr``)."""

    def __init__(self, window: Any, colors: bool = True) -> None:
        self._window = window
        self._colors = colors and curses.has_colors()
        self._attrs: Dict[str, int] = {}
        if self._colors:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(COLOR_FULL, curses.COLOR_GREEN, -1)
            curses.init_pair(COLOR_DAMAGED, curses.COLOR_RED, -1)
            curses.init_pair(COLOR_PROJECTILE, curses.COLOR_YELLOW, -1)
            curses.init_pair(COLOR_PICKUP, curses.COLOR_CYAN, -1)
            curses.init_pair(COLOR_HAZARD, curses.COLOR_MAGENTA, -1)

    def _attr(self, tile: str, status: Status) -> int:
        if not self._colors:
            return curses.A_NORMAL
        if tile == Tile.PLAYER:
            pair = (
                COLOR_FULL
                if status.appearance == HealthAppearance.FULL
                else COLOR_DAMAGED
            )
            return curses.color_pair(pair) | curses.A_BOLD
        if tile == Tile.PROJECTILE:
            return curses.color_pair(COLOR_PROJECTILE) | curses.A_BOLD
        if tile == Tile.HEALTH_PICKUP:
            return curses.color_pair(COLOR_PICKUP)
        if tile == Tile.HAZARD_PICKUP:
            return curses.color_pair(COLOR_HAZARD)
        return curses.A_NORMAL

    def _addstr(self, row: int, col: int, text: str, attr: int = 0) -> None:
        try:
            self._window.addstr(row, col, text, attr)
        except curses.error:
            # Writing the bottom-right cell or past a small terminal's edge
            pass

    def render(self, grid: Grid, status: Status) -> None:
        self._window.erase()
        lines = grid_lines(grid)
        for y, line in enumerate(lines):
            self._addstr(y, 0, line)
            for x, glyph in enumerate(line):
                if glyph in (
                    Tile.PLAYER,
                    Tile.PROJECTILE,
                    Tile.HEALTH_PICKUP,
                    Tile.HAZARD_PICKUP,
                ):
                    self._addstr(y, x, glyph, self._attr(glyph, status))
        for offset, text in enumerate(status.lines()):
            self._addstr(len(lines) + offset, 0, text)
        self._window.refresh()

    def set_cursor_visible(self, visible: bool) -> None:
        try:
            curses.curs_set(1 if visible else 0)
        except curses.error:
            # Terminal does not support changing cursor visibility
            pass

    def announce_game_over(self, status: Status) -> None:
        height, _ = self._window.getmaxyx()
        self._addstr(max(0, height - 1), 0, GAME_OVER_TEXT, curses.A_BOLD)
        self._window.refresh()
