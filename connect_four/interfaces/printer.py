"""
printer.py - Console rendering of the Connect Four board

Renders the board as rows of coloured discs, top row first, with a
1-based column header and the instructions for the player to move.
"""

from typing import List

from connect_four.game.board import Board
from connect_four.utils import ROWS, COLS, Player

BOARD_INDENT = "    "
TOKEN_EMPTY = "  "  # discs are two cells wide
TOKENS = {
    Player.ONE: "\U0001F7E1",  # yellow disc
    Player.TWO: "\U0001F534",  # red disc
}
BOTTOM_ROW = BOARD_INDENT + " " + "=" * (COLS * 5 + 1) + " "
COMMAND_ROW = BOARD_INDENT + " " + "".join(f"  {col + 1}  " for col in range(COLS))


def clear_screen() -> str:
    """Terminal reset sequence."""
    return "\x1bc"


def token(player: Player) -> str:
    return TOKENS[player]


def render_row(board: Board, row: int) -> str:
    cells = []
    for col in range(COLS):
        player = board.token_at(row, col)
        cells.append(TOKEN_EMPTY if player is None else token(player))
    return BOARD_INDENT + " | " + " | ".join(cells) + " | "


def _grid_lines(board: Board) -> List[str]:
    lines = [render_row(board, row) for row in range(ROWS - 1, -1, -1)]
    lines.append(BOTTOM_ROW)
    return lines


def render_instructions(player: Player) -> str:
    return "\n".join([
        f"Choose a column - [1] through [{COLS}] - and press [Enter] to play that column. ",
        "Enter [q] to quit.",
        f"It's {token(player)}'s turn.",
    ])


def render_board(board: Board, player: Player) -> str:
    """Board, column numbers and instructions for ``player``."""
    lines = _grid_lines(board)
    lines.append(COMMAND_ROW)
    lines.append("")
    lines.append(render_instructions(player))
    return "\n".join(lines)


def render_end(board: Board) -> str:
    """Board only, for the final position."""
    return "\n".join(_grid_lines(board))
