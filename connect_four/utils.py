"""
utils.py - Constants, enumerations and helpers for the Connect Four engine

Board coordinates used throughout the package are (row, column) pairs with
row 0 at the bottom of the board and column 0 on the left.
"""

from enum import Enum, auto
from typing import Optional

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of tokens in a line needed to win

EMPTY = 0  # Cell value for an empty position in dense numpy grids


class Player(Enum):
    """The two players. Tokens on the board are Player values."""
    ONE = 1
    TWO = 2

    def other(self) -> 'Player':
        """Get the opposing player."""
        return Player.TWO if self == Player.ONE else Player.ONE

    def __str__(self):
        return "X" if self == Player.ONE else "O"


class GameState(Enum):
    """Classification of the board after a placement."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    TIE = auto()

    def is_game_over(self) -> bool:
        """Check if this state is terminal."""
        return self != GameState.IN_PROGRESS

    @classmethod
    def win_for(cls, player: Player) -> 'GameState':
        return cls.PLAYER_ONE_WIN if player == Player.ONE else cls.PLAYER_TWO_WIN

    def winner(self) -> Optional[Player]:
        if self == GameState.PLAYER_ONE_WIN:
            return Player.ONE
        if self == GameState.PLAYER_TWO_WIN:
            return Player.TWO
        return None


class PlaceResult(Enum):
    """Outcome of placing a token in a column."""
    PLACED = auto()
    COLUMN_FULL = auto()


class ScanDirection(Enum):
    """Line scans used for win detection, as (row step, column step)."""
    ROW = (0, 1)
    COLUMN = (1, 0)
    FORWARD_DIAGONAL = (1, 1)   # "/" rises left to right
    BACK_DIAGONAL = (1, -1)     # "\" falls left to right

    @property
    def step(self):
        return self.value


# Order in which check_win runs the scans
SCAN_ORDER = (
    ScanDirection.ROW,
    ScanDirection.COLUMN,
    ScanDirection.FORWARD_DIAGONAL,
    ScanDirection.BACK_DIAGONAL,
)


def to_player(value) -> Player:
    """
    Coerce a player identifier to a Player.

    Accepts a Player or its integer value (1 or 2).

    Raises:
        ValueError: For any other value
    """
    if isinstance(value, Player):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Invalid player: {value!r}")
    try:
        return Player(value)
    except ValueError:
        raise ValueError(f"Invalid player: {value!r} (expected 1 or 2)") from None


def is_valid_position(row: int, col: int) -> bool:
    """Check if a (row, column) position is inside the board boundaries."""
    return 0 <= row < ROWS and 0 <= col < COLS


def check_column(column: int) -> int:
    """
    Validate a column index.

    Raises:
        ValueError: If the column is outside 0..COLS-1
    """
    if isinstance(column, bool) or not isinstance(column, (int, np.integer)):
        raise ValueError(f"Column must be an integer, got {column!r}")
    if not 0 <= column < COLS:
        raise ValueError(f"Column {column} out of range 0..{COLS - 1}")
    return int(column)


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a dense grid (row 0 at the top) as ASCII art.

    Args:
        grid: (ROWS, COLS) array of EMPTY / player values

    Returns:
        ASCII representation of the board
    """
    markers = {EMPTY: " ", Player.ONE.value: "X", Player.TWO.value: "O"}
    border = "|" + "-" * (COLS * 2 - 1) + "|"

    result = [border]
    for row in range(ROWS):
        result.append("|" + " ".join(markers[int(cell)] for cell in grid[row]) + "|")
    result.append(border)
    result.append("|" + " ".join(str(col) for col in range(COLS)) + "|")

    return "\n".join(result)
