"""Map data sources.

A map loader is any callable taking the authoring-time
:class:`grid_shooter.levels.grid.Level` (already bordered) and writing its
pickup overrides into it. Loaders are applied exactly once, at startup.

``DEFAULT_MAP_DATA`` is the fixed pickup layout of the standard 64x32 map.
Overrides that fall outside a smaller level's interior are skipped so the same
layout can be reused on reduced grids.
"""

from typing import Dict, Sequence, Tuple

from grid_shooter.levels.grid import Coord, Level
from grid_shooter.types import MapLoader, Tile

MapData = Sequence[Tuple[Coord, Tile]]


DEFAULT_MAP_DATA: MapData = (
    # Health caches along the top corridor
    ((6, 3), Tile.HEALTH_PICKUP),
    ((20, 4), Tile.HEALTH_PICKUP),
    ((41, 3), Tile.HEALTH_PICKUP),
    ((57, 5), Tile.HEALTH_PICKUP),
    # Central minefield
    ((28, 12), Tile.HAZARD_PICKUP),
    ((29, 12), Tile.HAZARD_PICKUP),
    ((30, 12), Tile.HAZARD_PICKUP),
    ((34, 15), Tile.HAZARD_PICKUP),
    ((35, 16), Tile.HAZARD_PICKUP),
    ((36, 17), Tile.HAZARD_PICKUP),
    ((31, 16), Tile.HEALTH_PICKUP),
    # Scattered traps and medkits in the lower half
    ((9, 20), Tile.HAZARD_PICKUP),
    ((14, 24), Tile.HEALTH_PICKUP),
    ((22, 27), Tile.HAZARD_PICKUP),
    ((45, 22), Tile.HAZARD_PICKUP),
    ((50, 26), Tile.HEALTH_PICKUP),
    ((58, 28), Tile.HAZARD_PICKUP),
)


def map_data_loader(overrides: MapData) -> MapLoader:
    """Build a loader that writes ``overrides`` into a level's interior."""

    def load(level: Level) -> None:
        for pos, tile in overrides:
            if level.is_interior(pos):
                level.set_tile(pos, tile)

    return load


def empty_map_loader(level: Level) -> None:
    """Loader that leaves the bordered level untouched."""


default_map_loader: MapLoader = map_data_loader(DEFAULT_MAP_DATA)


# Map loader registry for CLI / config selection
MAP_DATA_REGISTRY: Dict[str, MapLoader] = {
    "default": default_map_loader,
    "empty": empty_map_loader,
}
"""Registry of built-in map names to loaders."""
