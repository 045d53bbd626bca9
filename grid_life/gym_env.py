"""Gymnasium environment wrapper for the Game of Life.

Each ``step`` advances the wrapped :class:`grid_life.simulation.Simulation` by
one turn. There is nothing to choose, so the action space is ``Discrete(1)``
("advance"). The observation is the dense ``uint8`` alive mask of shape
``(grid_size, grid_size)`` indexed ``[y, x]``.

Episode ends:

* ``terminated`` once the population reaches zero (an empty grid stays empty).
* ``truncated`` once ``max_turns`` turns have been played, if set.

Usage:

``env = GameOfLifeEnv(LifeConfig(grid_size=32, seed_fn_name="random"))``
"""

import logging
import random
from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
import numpy.typing as npt
from gymnasium import spaces

from grid_life.config import LifeConfig
from grid_life.renderer.canvas import GridCanvas
from grid_life.simulation import Simulation

logger = logging.getLogger(__name__)

ObsType = npt.NDArray[np.uint8]

ADVANCE = 0


class GameOfLifeEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` stepping a bounded Game of Life board."""

    metadata = {"render_modes": ["human", "rgb_array"]}

    def __init__(
        self,
        config: Optional[LifeConfig] = None,
        render_mode: str = "rgb_array",
    ):
        """Create a new environment instance.

        Arguments:
            config: Board, seeding and truncation settings. Defaults to
                ``LifeConfig()``.
            render_mode: "rgb_array" returns RGBA frames, "human" opens an image viewer.
        """
        if render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Render mode '{render_mode}' not supported.")
        self.config = config or LifeConfig()
        self.render_mode = render_mode

        self.canvas = GridCanvas.for_grid(self.config.grid_size, self.config.cell_size)
        self.simulation = Simulation(
            self.config.grid_size,
            seed_fn=self.config.seed_fn,
            render_fn=self.canvas.paint_grid,
        )

        size = self.config.grid_size
        self.observation_space = spaces.Box(
            low=0, high=1, shape=(size, size), dtype=np.uint8
        )
        self.action_space = spaces.Discrete(1)

        self._done = False

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None
    ) -> Tuple[ObsType, Dict[str, Any]]:
        """Start a new episode.

        Arguments:
            seed: RNG seed for the seed policy. Falls back to ``config.seed``.
            options: Gymnasium options (unused).

        Returns:
            Observation and info dict per Gymnasium API.
        """
        super().reset(seed=seed)
        rng_seed = seed if seed is not None else self.config.seed
        self.simulation.rng = random.Random(rng_seed)
        self.simulation.restart()
        self._done = False
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, Any]]:
        """Advance one turn.

        Returns:
            (observation, reward, terminated, truncated, info). Reward is the
            change in population.
        """
        if not self.action_space.contains(action):
            raise ValueError(f"Invalid action: {action}")
        if self._done:
            logger.warning("step() called on a finished episode; call reset() first")

        prev_population = self.simulation.grid.population
        grid = self.simulation.next()
        reward = float(grid.population - prev_population)
        terminated = grid.population == 0
        truncated = (
            self.config.max_turns is not None
            and self.simulation.turn >= self.config.max_turns
        )
        self._done = terminated or truncated
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[npt.NDArray[np.uint8]]:  # type: ignore[override]
        img = self.canvas.image
        if self.render_mode == "human":
            img.show()
            return None
        return np.array(img, dtype=np.uint8)

    def _get_obs(self) -> ObsType:
        return self.simulation.grid.to_array().astype(np.uint8)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "turn": self.simulation.turn,
            "population": self.simulation.grid.population,
        }

    def close(self) -> None:
        self.canvas.close()
