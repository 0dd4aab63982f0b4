"""Pillow rasterizer.

Paints every tile as a solid square (player and projectile slightly inset) so
a ``State`` can be turned into an RGB image or a NumPy array. This is the
observation/``render`` backend of :class:`grid_shooter.gym_env.GridShooterEnv`.
"""

from typing import Dict, Tuple

import numpy as np
from PIL import Image, ImageDraw

from grid_shooter.state import State
from grid_shooter.types import HealthAppearance, Tile
from grid_shooter.utils.health import health_appearance

DEFAULT_CELL_SIZE = 8

Color = Tuple[int, int, int]

BACKGROUND: Color = (20, 20, 24)

TILE_COLORS: Dict[Tile, Color] = {
    Tile.EMPTY: BACKGROUND,
    Tile.WALL_HORIZONTAL: (150, 150, 150),
    Tile.WALL_VERTICAL: (150, 150, 150),
    Tile.HEALTH_PICKUP: (60, 200, 220),
    Tile.HAZARD_PICKUP: (200, 60, 200),
    Tile.PROJECTILE: (240, 220, 60),
}

PLAYER_COLORS: Dict[HealthAppearance, Color] = {
    HealthAppearance.FULL: (60, 220, 60),
    HealthAppearance.DAMAGED: (230, 50, 50),
    HealthAppearance.DEAD: (90, 90, 90),
}

# Tiles drawn smaller than a full cell
INSET_TILES = frozenset({Tile.PLAYER, Tile.PROJECTILE})


class ImageRenderer:
    """Rasterize states at ``cell_size`` pixels per tile."""

    def __init__(self, cell_size: int = DEFAULT_CELL_SIZE) -> None:
        if cell_size < 1:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        self.cell_size = cell_size

    def image_size(self, state: State) -> Tuple[int, int]:
        return state.width * self.cell_size, state.height * self.cell_size

    def render(self, state: State) -> Image.Image:
        img = Image.new("RGB", self.image_size(state), BACKGROUND)
        draw = ImageDraw.Draw(img)
        player_color = PLAYER_COLORS[
            health_appearance(state.player.health, state.player.max_health)
        ]
        size = self.cell_size
        inset = max(1, size // 4) if size >= 4 else 0
        for y, row in enumerate(state.grid):
            for x, tile in enumerate(row):
                if tile == Tile.EMPTY:
                    continue
                color = player_color if tile == Tile.PLAYER else TILE_COLORS[tile]
                pad = inset if tile in INSET_TILES else 0
                x0, y0 = x * size + pad, y * size + pad
                x1, y1 = (x + 1) * size - 1 - pad, (y + 1) * size - 1 - pad
                draw.rectangle((x0, y0, x1, y1), fill=color)
        return img

    def render_array(self, state: State) -> np.ndarray:
        """Return the rendered frame as an ``(H, W, 3)`` uint8 array."""
        return np.asarray(self.render(state), dtype=np.uint8)
