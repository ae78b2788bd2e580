"""
rules.py - Game session and Gymnasium environment for Connect Four

This module provides:
1. ConnectFourGame, a two-player session that alternates turns on a Board
   and stops accepting moves once the game is over
2. ConnectFourEnv, a gymnasium-compatible environment over the same session
"""

from typing import Any, Dict, List, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connect_four.debug import debug
from connect_four.game.board import Board
from connect_four.utils import ROWS, COLS, Player, GameState, PlaceResult, check_column


class ConnectFourGame:
    """
    Two-player Connect Four session.

    Player ONE moves first. After every successful placement the board is
    classified with ``Board.check_win``; the turn passes to the other player
    only while the game is still in progress.
    """

    def __init__(self):
        debug.debug("Initializing ConnectFourGame", "game")
        self.reset()

    def reset(self) -> None:
        """Reset the game to its initial state."""
        self.board = Board.create()
        self.current_player = Player.ONE
        self.game_state = GameState.IN_PROGRESS
        self.last_move: Optional[Tuple[int, int]] = None
        self.moves: List[int] = []

    def make_move(self, column: int) -> PlaceResult:
        """
        Play the current player's token in a column.

        Args:
            column: Column to play (0-indexed)

        Returns:
            PlaceResult.PLACED, or PlaceResult.COLUMN_FULL if the column has
            no room (nothing changes and the same player moves again)

        Raises:
            RuntimeError: If the game is already over
            ValueError: If the column is out of range
        """
        if self.game_state.is_game_over():
            raise RuntimeError(f"Game is already over ({self.game_state.name})")

        player = self.current_player
        result = self.board.place(player, column)
        if result == PlaceResult.COLUMN_FULL:
            return result

        self.moves.append(column)
        self.last_move = (self.board.height(column) - 1, column)
        self.game_state = self.board.check_win(player, column)

        if self.game_state.is_game_over():
            debug.info(f"Game over after {len(self.moves)} moves: {self.game_state.name}", "game")
        else:
            self.current_player = player.other()

        return result

    def is_game_over(self) -> bool:
        return self.game_state.is_game_over()

    def get_winner(self) -> Optional[Player]:
        return self.game_state.winner()

    def get_current_player(self) -> Player:
        return self.current_player

    def get_valid_moves(self) -> List[int]:
        if self.is_game_over():
            return []
        return self.board.valid_moves()

    def get_winning_line(self) -> List[Tuple[int, int]]:
        """Cells of the winning line, or an empty list if nobody has won."""
        winner = self.get_winner()
        if winner is None:
            return []
        return self.board.winning_line(winner, self.moves[-1])

    def render(self) -> str:
        return self.board.render()


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Both players act through ``step``; ``info["current_player"]`` tells the
    caller whose move it is. Rewards are from the point of view of the
    player who just moved.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    reward_win = 1.0
    reward_draw = 0.1
    reward_invalid_move = -0.5
    reward_step = -0.01

    def __init__(self, render_mode: Optional[str] = None):
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        self.action_space = spaces.Discrete(COLS)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(ROWS, COLS), dtype=np.int8
        )
        self.render_mode = render_mode
        self.game = ConnectFourGame()

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        self.game.reset()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict[str, Any]]:
        """
        Play the current player's token in column ``action``.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)

        Raises:
            RuntimeError: If the episode has already terminated
        """
        if self.game.is_game_over():
            raise RuntimeError("step() called after the episode terminated; call reset()")

        try:
            column = check_column(action)
        except ValueError:
            column = None

        if column is None or self.game.make_move(column) == PlaceResult.COLUMN_FULL:
            debug.warning(f"Invalid action: {action}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        state = self.game.game_state
        if state in (GameState.PLAYER_ONE_WIN, GameState.PLAYER_TWO_WIN):
            reward, terminated = self.reward_win, True
        elif state == GameState.TIE:
            reward, terminated = self.reward_draw, True
        else:
            reward, terminated = self.reward_step, False

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        if self.render_mode == "ascii":
            return self.game.render()
        if self.render_mode == "human":
            print(self.game.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.game.board.get_state()

    def _get_info(self) -> Dict[str, Any]:
        valid_moves = self.game.get_valid_moves()
        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': self.game.current_player.value,
            'game_state': self.game.game_state.name,
            'moves_made': len(self.game.moves),
            'winning_line': self.game.get_winning_line(),
            'last_move': self.game.last_move,
        }
