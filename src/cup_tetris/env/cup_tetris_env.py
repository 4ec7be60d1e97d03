from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from cup_tetris.game import Action, GameConfig, TileKind, advance, new_game, reset_game
from cup_tetris.visualization.palette import color_for


class CupTetrisEnv(gym.Env):
    """One env step is one engine step.

    Gravity is applied every ``gravity_period`` env steps, so with the
    default of 1 the piece falls a row after every action.
    """

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 gravity_period: int = 1,
                 reward_weights: Optional[Dict[str, float]] = None,
                 terminal_penalty: float = 0.0,
                 max_episode_steps: int = 10000) -> None:
        super().__init__()
        self.state = new_game(config)
        self.render_mode = render_mode
        self.gravity_period = max(1, int(gravity_period))
        self.terminal_penalty = float(terminal_penalty)
        self.max_episode_steps = int(max_episode_steps)
        self.reward_weights: Dict[str, float] = {
            "lines_sq": 1.0,     # engine score delta (lines squared)
            "holes": 0.1,        # penalize holes created on landing
            "height": 0.02,      # penalize max height increase on landing
        }
        if reward_weights:
            self.reward_weights.update({k: float(v) for k, v in reward_weights.items()})

        h, w = self.state.config.height, self.state.config.width
        n_kinds = len(TileKind)
        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(low=0, high=n_kinds - 1, shape=(h, w), dtype=np.int8),
                "piece": spaces.Discrete(n_kinds),
                "next": spaces.Discrete(n_kinds),
            }
        )
        self.action_space = spaces.Discrete(len(Action))

        self._steps = 0

    def _get_obs(self) -> Dict[str, Any]:
        piece = self.state.piece.kind if self.state.piece is not None else TileKind.EMPTY
        return {
            "grid": self.state.render_grid().astype(np.int8),
            "piece": np.int64(int(piece)),
            "next": np.int64(int(self.state.next_kind)),
        }

    def _get_info(self) -> Dict[str, Any]:
        outcome = self.state.last_outcome
        return {
            "score": self.state.score,
            "lines_cleared_total": self.state.lines_cleared_total,
            "lines_cleared": outcome.lines_cleared,
            "did_spawn": outcome.did_spawn,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        reset_game(self.state, seed)
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action):
        if self.state.game_over:
            info = self._get_info()
            info["reward_components"] = {}
            return self._get_obs(), 0.0, True, False, info

        action = Action(int(action))
        self._steps += 1
        gravity = self._steps % self.gravity_period == 0

        board = self.state.board
        holes_before = board.count_holes()
        height_before = board.max_height()
        score_before = self.state.score

        outcome = advance(self.state, action, gravity)

        reward_components: Dict[str, float] = {
            "lines_sq": self.reward_weights["lines_sq"] * float(self.state.score - score_before),
        }
        if outcome.did_spawn or outcome.is_game_over:
            # The board only changes when a piece lands
            board = self.state.board
            reward_components["holes"] = -self.reward_weights["holes"] * float(
                max(0, board.count_holes() - holes_before))
            reward_components["height"] = -self.reward_weights["height"] * float(
                max(0, board.max_height() - height_before))

        terminated = bool(outcome.is_game_over)
        truncated = self._steps >= self.max_episode_steps and not terminated
        if terminated:
            reward_components["terminal"] = self.terminal_penalty

        reward = float(sum(reward_components.values()))
        info = self._get_info()
        info["reward_components"] = reward_components
        return self._get_obs(), reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            grid = self.state.render_grid()
            cell = 12
            h, w = grid.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color_for(int(grid[y, x]))
            return img
        # human rendering delegated to the pygame viewer; noop
        return None

    def close(self) -> None:
        pass
