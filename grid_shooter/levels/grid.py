from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from grid_shooter.types import HEIGHT, WIDTH, MapLoader, Tile

# Grid coordinate alias (x, y)
Coord = tuple[int, int]


@dataclass
class Level:
    """
    Mutable, authoring-time map representation.
    - `grid[y][x]` is the Tile at that cell.
    - `initialize()` lays down the border ring and blank interior, then hands the
      level to the map loader which places pickups.
    - This module is State-agnostic. Use the converter (levels.convert.to_state)
      to freeze a Level into the immutable State.
    """

    width: int = WIDTH
    height: int = HEIGHT
    map_loader: Optional[MapLoader] = None

    grid: List[List[Tile]] = field(init=False)

    def __post_init__(self) -> None:
        if self.width < 3 or self.height < 3:
            raise ValueError(
                f"Level must be at least 3x3, got {self.width}x{self.height}"
            )
        self.grid = [[Tile.EMPTY] * self.width for _ in range(self.height)]

    # -------- Grid editing API (purely authoring-time) --------

    def initialize(self) -> None:
        """
        Fill the border with walls and the interior with blanks, then run the map loader.
        Top and bottom rows are horizontal walls; the remaining edge cells are vertical walls.
        """
        for y in range(self.height):
            for x in range(self.width):
                if y == 0 or y == self.height - 1:
                    tile = Tile.WALL_HORIZONTAL
                elif x == 0 or x == self.width - 1:
                    tile = Tile.WALL_VERTICAL
                else:
                    tile = Tile.EMPTY
                self.grid[y][x] = tile
        if self.map_loader is not None:
            self.map_loader(self)

    def tile_at(self, pos: Coord) -> Tile:
        x, y = pos
        self._check_bounds(x, y)
        return self.grid[y][x]

    def set_tile(self, pos: Coord, tile: Tile) -> None:
        x, y = pos
        self._check_bounds(x, y)
        self.grid[y][x] = tile

    def is_interior(self, pos: Coord) -> bool:
        x, y = pos
        return 0 < x < self.width - 1 and 0 < y < self.height - 1

    def empty_interior_cells(self) -> List[Coord]:
        """
        Return every interior (x, y) currently holding Tile.EMPTY, row-major.
        """
        return [
            (x, y)
            for y in range(1, self.height - 1)
            for x in range(1, self.width - 1)
            if self.grid[y][x] == Tile.EMPTY
        ]

    # -------- Internal helpers --------

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Out of bounds: {(x, y)} for grid {self.width}x{self.height}"
            )
