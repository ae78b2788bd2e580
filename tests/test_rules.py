"""
Tests for the ConnectFourGame session and the gymnasium environment.
"""

import numpy as np
import pytest

from connect_four.game.rules import ConnectFourGame, ConnectFourEnv
from connect_four.utils import ROWS, COLS, Player, GameState, PlaceResult

# Row by row this fills the board with no four in a row, alternating players
TIE_MOVES = [0, 2, 1, 3, 4, 6, 5] * ROWS
# Player ONE takes row 0, columns 0-3; player TWO stacks on top
ROW_WIN_MOVES = [0, 0, 1, 1, 2, 2, 3]


def play(game, moves):
    for col in moves:
        assert game.make_move(col) == PlaceResult.PLACED
    return game


class TestConnectFourGame:

    def test_initial_state(self):
        game = ConnectFourGame()
        assert game.get_current_player() == Player.ONE
        assert game.game_state == GameState.IN_PROGRESS
        assert game.get_valid_moves() == list(range(COLS))
        assert game.last_move is None

    def test_players_alternate(self):
        game = play(ConnectFourGame(), [3])
        assert game.get_current_player() == Player.TWO
        assert game.board.token_at(0, 3) == Player.ONE
        play(game, [3])
        assert game.get_current_player() == Player.ONE
        assert game.board.token_at(1, 3) == Player.TWO
        assert game.last_move == (1, 3)

    def test_row_win(self):
        game = play(ConnectFourGame(), ROW_WIN_MOVES)
        assert game.game_state == GameState.PLAYER_ONE_WIN
        assert game.is_game_over() is True
        assert game.get_winner() == Player.ONE
        assert game.get_current_player() == Player.ONE
        assert game.get_winning_line() == [(0, 0), (0, 1), (0, 2), (0, 3)]
        assert game.get_valid_moves() == []

    def test_no_moves_after_game_over(self):
        game = play(ConnectFourGame(), ROW_WIN_MOVES)
        with pytest.raises(RuntimeError):
            game.make_move(6)
        assert game.board.height(6) == 0

    def test_full_column_keeps_turn(self):
        game = play(ConnectFourGame(), [0] * ROWS)
        assert game.get_current_player() == Player.ONE
        assert game.make_move(0) == PlaceResult.COLUMN_FULL
        assert game.get_current_player() == Player.ONE
        assert len(game.moves) == ROWS
        assert 0 not in game.get_valid_moves()

    def test_out_of_range_column(self):
        game = ConnectFourGame()
        with pytest.raises(ValueError):
            game.make_move(COLS)
        assert game.get_current_player() == Player.ONE

    def test_tie_game(self):
        game = ConnectFourGame()
        for col in TIE_MOVES[:-1]:
            game.make_move(col)
            assert game.game_state == GameState.IN_PROGRESS
        game.make_move(TIE_MOVES[-1])
        assert game.game_state == GameState.TIE
        assert game.get_winner() is None
        assert game.get_winning_line() == []

    def test_reset(self):
        game = play(ConnectFourGame(), ROW_WIN_MOVES)
        game.reset()
        assert game.game_state == GameState.IN_PROGRESS
        assert game.board.move_count == 0
        assert game.moves == []


class TestConnectFourEnv:

    def test_spaces_and_reset(self):
        env = ConnectFourEnv()
        obs, info = env.reset(seed=0)
        assert env.action_space.n == COLS
        assert obs.shape == (ROWS, COLS)
        assert env.observation_space.contains(obs)
        assert not obs.any()
        assert info['current_player'] == 1
        assert info['valid_moves'] == list(range(COLS))

    def test_step_places_token(self):
        env = ConnectFourEnv()
        env.reset()
        obs, reward, terminated, truncated, info = env.step(np.int64(3))
        assert obs[ROWS - 1, 3] == 1
        assert reward == env.reward_step
        assert not terminated and not truncated
        assert info['current_player'] == 2
        assert info['last_move'] == (0, 3)

    def test_invalid_actions(self):
        env = ConnectFourEnv()
        env.reset()
        for _ in range(ROWS):
            env.step(0)
        before = env.game.board.get_state()

        for action in (0, -1, COLS):
            obs, reward, terminated, truncated, info = env.step(action)
            assert reward == env.reward_invalid_move
            assert truncated is True and terminated is False
            assert info['invalid_move'] is True
            assert np.array_equal(obs, before)

    def test_win_terminates(self):
        env = ConnectFourEnv()
        env.reset()
        for action in ROW_WIN_MOVES[:-1]:
            env.step(action)
        _, reward, terminated, truncated, info = env.step(ROW_WIN_MOVES[-1])
        assert reward == env.reward_win
        assert terminated is True and truncated is False
        assert info['game_state'] == GameState.PLAYER_ONE_WIN.name
        assert info['winning_line'] == [(0, 0), (0, 1), (0, 2), (0, 3)]

        with pytest.raises(RuntimeError):
            env.step(6)

    def test_tie_reward(self):
        env = ConnectFourEnv()
        env.reset()
        for action in TIE_MOVES[:-1]:
            env.step(action)
        _, reward, terminated, _, info = env.step(TIE_MOVES[-1])
        assert reward == env.reward_draw
        assert terminated is True
        assert info['game_state'] == 'TIE'

    def test_reset_after_episode(self):
        env = ConnectFourEnv()
        env.reset()
        for action in ROW_WIN_MOVES:
            env.step(action)
        obs, info = env.reset()
        assert not obs.any()
        assert info['moves_made'] == 0

    def test_render_modes(self, capsys):
        env = ConnectFourEnv(render_mode="ascii")
        env.reset()
        env.step(2)
        assert "X" in env.render()

        human = ConnectFourEnv(render_mode="human")
        human.reset()
        assert "|0 1 2 3 4 5 6|" in capsys.readouterr().out

        with pytest.raises(ValueError):
            ConnectFourEnv(render_mode="rgb_array")
