"""
connect_four.game - Core game mechanics for Connect Four

This package contains the board engine, the two-player game session
and the gymnasium environment built on top of them.
"""

from connect_four.game.board import Board
from connect_four.game.rules import ConnectFourGame, ConnectFourEnv

__all__ = ['Board', 'ConnectFourGame', 'ConnectFourEnv']
