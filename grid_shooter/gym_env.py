"""Gymnasium environment wrapper for the shooter.

Observation is the rendered RGB frame plus a structured ``info`` dict::

    {"image": np.ndarray(H, W, 3), "info": {"player": {...}, "status": {...}}}

Reward is the change in player health over the step (health is the only score
the game keeps). ``terminated`` is ``True`` on game over; nothing truncates.

Usage:

``env = GridShooterEnv(seed=3)``
"""

from dataclasses import replace
from typing import Any, Callable, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces
from PIL.Image import Image as PILImage

from grid_shooter.actions import GYM_TO_ACTION, GymAction
from grid_shooter.config import GameConfig
from grid_shooter.levels.convert import new_game
from grid_shooter.renderer.image import DEFAULT_CELL_SIZE, ImageRenderer
from grid_shooter.state import State
from grid_shooter.step import step

ObsType = Dict[str, Any]


def default_initial_state(config: GameConfig) -> State:
    return new_game(
        config.make_level(),
        name=config.default_name,
        max_health=config.max_health,
        seed=config.seed,
    )


def player_observation_dict(state: State) -> Dict[str, Any]:
    """Player sub-observation: health, facing glyph and projectile flag."""
    player = state.player
    return {
        "health": int(player.health),
        "max_health": int(player.max_health),
        "facing": player.direction_symbol(),
        "x": int(player.position.x),
        "y": int(player.position.y),
        "projectile_active": int(state.projectile.active),
    }


def status_observation_dict(state: State) -> Dict[str, Any]:
    """Status portion of observation (phase and turn)."""
    return {
        "phase": "lose" if state.lose else "ongoing",
        "turn": int(state.turn),
    }


class GridShooterEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` over :func:`grid_shooter.step.step`.

    The action space is ``Discrete(len(GymAction))``; see
    :mod:`grid_shooter.actions`.
    """

    metadata = {"render_modes": ["human", "texture"]}

    def __init__(
        self,
        render_mode: str = "texture",
        cell_size: int = DEFAULT_CELL_SIZE,
        initial_state_fn: Callable[[GameConfig], State] = default_initial_state,
        **kwargs: Any,
    ):
        """Create a new environment instance.

        Arguments:
            render_mode: "texture" to return PIL image frames, "human" to open a window.
            cell_size: Pixels per tile in rendered frames.
            initial_state_fn: Callable building the initial ``State`` from a config.
            **kwargs: Forwarded to :class:`grid_shooter.config.GameConfig`.
        """
        self._config = GameConfig(**kwargs)
        self._initial_state_fn = initial_state_fn
        self._renderer = ImageRenderer(cell_size=cell_size)
        self._render_mode = render_mode
        self.state: Optional[State] = None

        def int_box(low: int, high: int) -> spaces.Box:
            return spaces.Box(
                low=np.array(low, dtype=np.int64),
                high=np.array(high, dtype=np.int64),
                shape=(),
                dtype=np.int64,
            )

        height = self._config.height * cell_size
        width = self._config.width * cell_size
        self.observation_space = spaces.Dict(
            {
                "image": spaces.Box(
                    low=0, high=255, shape=(height, width, 3), dtype=np.uint8
                ),
                "info": spaces.Dict(
                    {
                        "player": spaces.Dict(
                            {
                                "health": int_box(0, self._config.max_health),
                                "max_health": int_box(1, self._config.max_health),
                                "facing": spaces.Text(
                                    min_length=1, max_length=1, charset="^><V"
                                ),
                                "x": int_box(0, self._config.width - 1),
                                "y": int_box(0, self._config.height - 1),
                                "projectile_active": int_box(0, 1),
                            }
                        ),
                        "status": spaces.Dict(
                            {
                                "phase": spaces.Text(max_length=16),
                                "turn": int_box(0, 1_000_000_000),
                            }
                        ),
                    }
                ),
            }
        )
        self.action_space = spaces.Discrete(len(GymAction))

        self.reset()

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new episode.

        Arguments:
            seed: Overrides the configured placement seed when given.
            options: Gymnasium options (unused).
        """
        super().reset(seed=seed)
        config = self._config
        if seed is not None:
            config = replace(config, seed=seed)
        self.state = self._initial_state_fn(config)
        return self._get_obs(), {}

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Apply one tick.

        Arguments:
            action: Integer index into ``GymAction``.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.state is not None
        if not 0 <= int(action) < len(GymAction):
            raise ValueError(f"Invalid action: {action}")
        tick_action = GYM_TO_ACTION[GymAction(int(action))]

        prev_health = self.state.player.health
        self.state = step(self.state, tick_action)
        reward = float(self.state.player.health - prev_health)
        return self._get_obs(), reward, self.state.lose, False, {}

    def render(self, mode: Optional[str] = None) -> Optional[PILImage]:  # type: ignore
        render_mode = mode or self._render_mode
        assert self.state is not None
        img = self._renderer.render(self.state)
        if render_mode == "human":
            img.show()
            return None
        elif render_mode == "texture":
            return img
        else:
            raise NotImplementedError(f"Render mode '{render_mode}' not supported.")

    def _get_obs(self) -> ObsType:
        assert self.state is not None
        return {
            "image": self._renderer.render_array(self.state),
            "info": {
                "player": player_observation_dict(self.state),
                "status": status_observation_dict(self.state),
            },
        }
