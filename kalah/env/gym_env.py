from __future__ import annotations

from dataclasses import replace
from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from kalah.core import Outcome, Player
from kalah.game import GameConfig, Kalah, normalize_player


class KalahEnv(gym.Env):
    """Both sides are driven through ``step``; actions are mover-relative pits minus one."""

    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._config = config or GameConfig()
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode

        n = self._config.pits_per_player
        self.observation_space = spaces.Box(
            low=0,
            high=max(1, self._config.total_seeds),
            shape=(2 * n + 2,),
            dtype=np.int64,
        )
        self.action_space = spaces.Discrete(n)

        self._session = Kalah(self._config)

    @property
    def session(self) -> Kalah:
        return self._session

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        config = self._config
        if options and "opening_player" in options:
            config = replace(config, opening_player=normalize_player(options["opening_player"]))
        self._session = Kalah(config)
        return self._build_observation(), self._build_info()

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")

        legal_mask = self.legal_action_mask()
        if self._enforce_legal and not legal_mask[action_index]:
            raise ValueError("Illegal action provided and enforce_legal_actions=True.")

        mover = self._session.next()
        offset = 0 if mover is Player.HUMAN else self._config.pits_per_player
        self._session = self._session.move(int(action_index) + 1 + offset)

        terminated = self._session.is_game_over()
        reward = self._compute_reward() if terminated else 0.0
        return self._build_observation(), reward, terminated, False, self._build_info()

    def legal_action_mask(self) -> np.ndarray:
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        if self._session.is_game_over():
            return mask
        mover = self._session.next()
        mask[:] = self._session.board.pits(mover) > 0
        return mask

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return self._session.board.render()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_observation(self) -> np.ndarray:
        return np.array(self._session.board.cells, dtype=np.int64)

    def _build_info(self) -> Dict[str, object]:
        return {
            "legal_action_mask": self.legal_action_mask(),
            "current_player": self._session.next(),
        }

    def _compute_reward(self) -> float:
        winner = self._session.get_winner()
        if winner is Outcome.HUMAN:
            return 1.0
        if winner is Outcome.COMPUTER:
            return -1.0
        return 0.0
