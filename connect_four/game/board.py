"""
board.py - Board representation and core game mechanics for Connect Four

The board is stored as a list of columns, left to right. Each column is a
list of tokens appended bottom to top, so a column's length is its fill
level and a cell exists only if its row index is below that length.
"""

from typing import List, Optional, Tuple

import numpy as np

from connect_four.debug import debug
from connect_four.utils import (ROWS, COLS, CONNECT_N, EMPTY, Player, GameState,
                                PlaceResult, ScanDirection, SCAN_ORDER,
                                check_column, is_valid_position, to_player,
                                render_board_ascii)

Cell = Tuple[int, int]


class Board:
    """
    A 7x6 Connect Four board.

    The only mutation is ``place``. After each successful placement the
    caller asks ``check_win`` to classify the board, passing the player and
    column it just used.
    """

    def __init__(self):
        """Initialize an empty board."""
        self._columns: List[List[Player]] = [[] for _ in range(COLS)]

    @classmethod
    def create(cls) -> 'Board':
        return cls()

    def copy(self) -> 'Board':
        """Create an independent copy of this board."""
        new_board = Board()
        new_board._columns = [column[:] for column in self._columns]
        return new_board

    @property
    def columns(self) -> Tuple[Tuple[Player, ...], ...]:
        """Read-only snapshot of the grid, one tuple per column, bottom first."""
        return tuple(tuple(column) for column in self._columns)

    @property
    def move_count(self) -> int:
        return sum(len(column) for column in self._columns)

    def height(self, column: int) -> int:
        return len(self._columns[check_column(column)])

    def token_at(self, row: int, column: int) -> Optional[Player]:
        """Token at (row, column), or None if the column does not reach that row."""
        if not is_valid_position(row, column):
            return None
        tokens = self._columns[column]
        return tokens[row] if row < len(tokens) else None

    def is_column_full(self, column: int) -> bool:
        return len(self._columns[check_column(column)]) == ROWS

    def is_board_full(self) -> bool:
        return all(len(column) == ROWS for column in self._columns)

    def valid_moves(self) -> List[int]:
        return [col for col in range(COLS) if len(self._columns[col]) < ROWS]

    def place(self, player, column: int) -> PlaceResult:
        """
        Drop a player's token into a column.

        Args:
            player: Player (or 1/2) placing the token
            column: The column to play (0-indexed)

        Returns:
            PlaceResult.PLACED, or PlaceResult.COLUMN_FULL if the column
            already holds ROWS tokens (the board is left unchanged)

        Raises:
            ValueError: If the player or column is not valid
        """
        player = to_player(player)
        column = check_column(column)

        if len(self._columns[column]) >= ROWS:
            debug.debug(f"Column {column} is full, {player.name} must choose again", "board")
            return PlaceResult.COLUMN_FULL

        self._columns[column].append(player)
        debug.trace(f"Placed {player.name} at ({len(self._columns[column]) - 1}, {column})", "board")
        return PlaceResult.PLACED

    def _anchor(self, player, column: int) -> Tuple[Player, int, int]:
        player = to_player(player)
        column = check_column(column)

        tokens = self._columns[column]
        if not tokens:
            raise ValueError(f"Column {column} is empty; check_win needs the column just played")

        row = len(tokens) - 1
        if tokens[row] != player:
            raise ValueError(
                f"Token at ({row}, {column}) belongs to {tokens[row].name}, not {player.name}"
            )
        return player, row, column

    def _scan(self, player: Player, row: int, column: int,
              direction: ScanDirection) -> List[Cell]:
        """
        Scan the full line through (row, column) in one direction.

        Starts at the cell where the line enters the board and walks with the
        direction's step until it leaves the board. Missing cells and
        opponent tokens reset the run.

        Returns:
            The cells of a run of at least CONNECT_N tokens that contains the
            anchor, or an empty list
        """
        dr, dc = direction.step

        r, c = row, column
        while is_valid_position(r - dr, c - dc):
            r, c = r - dr, c - dc

        run: List[Cell] = []
        while is_valid_position(r, c):
            if self.token_at(r, c) == player:
                run.append((r, c))
            else:
                if len(run) >= CONNECT_N and (row, column) in run:
                    return run
                run = []
            r, c = r + dr, c + dc

        if len(run) >= CONNECT_N and (row, column) in run:
            return run
        return []

    def winning_line(self, player, column: int) -> List[Cell]:
        """
        Cells of the line completed by the token just played, if any.

        Args:
            player: The player who just moved
            column: The column they played

        Returns:
            List of (row, column) cells, or an empty list if there is no win
        """
        player, row, column = self._anchor(player, column)

        for direction in SCAN_ORDER:
            line = self._scan(player, row, column, direction)
            if line:
                debug.trace(f"{direction.name} scan found {line}", "board")
                return line
        return []

    def check_win(self, player, column: int) -> GameState:
        """
        Classify the board after ``player`` placed a token in ``column``.

        Only the most recent token can newly complete a line, so the four
        scans are anchored at the top token of ``column``.

        Returns:
            The win state for ``player`` if any scan finds a line, otherwise
            GameState.TIE on a full board, otherwise GameState.IN_PROGRESS

        Raises:
            ValueError: If the column is empty or its top token is not the
                player's
        """
        debug.start_timer("check_win")
        player, row, column = self._anchor(player, column)

        state = GameState.IN_PROGRESS
        for direction in SCAN_ORDER:
            if self._scan(player, row, column, direction):
                state = GameState.win_for(player)
                debug.debug(f"{player.name} wins by {direction.name} through ({row}, {column})", "board")
                break
        else:
            if self.is_board_full():
                state = GameState.TIE
                debug.debug("Board is full with no winner", "board")

        debug.end_timer("check_win", "board")
        return state

    def get_state(self) -> np.ndarray:
        """
        Get the board as a dense numpy array.

        Returns:
            (ROWS, COLS) int8 array with row 0 at the top, EMPTY for empty
            cells and the player value elsewhere
        """
        grid = np.full((ROWS, COLS), EMPTY, dtype=np.int8)
        for col, tokens in enumerate(self._columns):
            for row, token in enumerate(tokens):
                grid[ROWS - 1 - row, col] = token.value
        return grid

    def render(self) -> str:
        return render_board_ascii(self.get_state())

    def __str__(self) -> str:
        return self.render()
