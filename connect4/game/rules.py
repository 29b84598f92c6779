"""Connect4 rules for a 7x6 board."""

import logging
from typing import NamedTuple

from ..core.errors import ColumnFullError, GameAlreadyOverError, InvalidColumnError
from ..core.types import COLS, ROWS, WIN_LENGTH, Board, GameState, GameStatus, Player, Position


logger = logging.getLogger(__name__)

# Scan order matters: the first winning direction is the one reported.
DIRECTIONS = [
    (0, 1),   # Horizontal
    (1, 0),   # Vertical
    (1, 1),   # Diagonal down-right
    (1, -1),  # Diagonal down-left
]


class WinCheck(NamedTuple):
    """Result of a win check around one placed piece."""

    is_win: bool
    winning_line: list[Position] | None


class Connect4Rules:
    """Connect4 rules for a 7-column, 6-row board.

    Win condition: 4 in a row (horizontal, vertical, or diagonal)

    Stateless: every method takes the board or state it works on and
    never mutates its arguments.
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS, win_length: int = WIN_LENGTH):
        """Initialize rules.

        Args:
            rows: Number of rows (6 default)
            cols: Number of columns (7 default)
            win_length: Number in a row to win (4 default)
        """
        self.rows = rows
        self.cols = cols
        self.win_length = win_length

    def create_initial_state(self) -> GameState:
        """Fresh game: empty board, RED to move."""
        return GameState(
            board=Board(grid=[[Player.EMPTY] * self.cols for _ in range(self.rows)]),
            current_player=Player.RED,
            status=GameStatus.WAITING,
        )

    def is_valid_move(self, board: Board, column: int) -> bool:
        """Check if a piece can be dropped in a column.

        Args:
            board: Current board
            column: Column to check

        Returns:
            True if the column exists and its top cell is empty
        """
        return 0 <= column < self.cols and board.grid[0][column] == Player.EMPTY

    def get_valid_moves(self, board: Board) -> list[int]:
        """Get columns that aren't full, in ascending order."""
        return [col for col in range(self.cols) if self.is_valid_move(board, col)]

    def get_landing_row(self, board: Board, column: int) -> int:
        """Get the row where a piece would land in given column.

        Args:
            board: Current board
            column: Column to drop piece in

        Returns:
            Row index where piece lands, or -1 if column is full
        """
        for row in range(self.rows - 1, -1, -1):
            if board.grid[row][column] == Player.EMPTY:
                return row
        return -1  # Column full

    def drop_piece(self, board: Board, column: int, player: Player) -> tuple[Board, Position]:
        """Drop `player`'s piece into `column` on a copy of `board`.

        Raises:
            InvalidColumnError: If the column is outside the board
            ColumnFullError: If the column has no empty slot
        """
        if not 0 <= column < self.cols:
            raise InvalidColumnError(column, self.cols)

        row = self.get_landing_row(board, column)
        if row < 0:
            raise ColumnFullError(column)

        new_board = board.copy()
        new_board.grid[row][column] = player
        return new_board, Position(row=row, col=column)

    def apply_move(self, state: GameState, column: int) -> tuple[GameState, Position]:
        """Apply the current player's move (creates a new GameState).

        Args:
            state: Current game state
            column: Column to drop piece

        Returns:
            Tuple of (new_state, position_where_piece_landed)

        Raises:
            GameAlreadyOverError: If the game has finished
            InvalidColumnError: If the column is outside the board
            ColumnFullError: If the column has no empty slot
        """
        if state.is_game_over:
            raise GameAlreadyOverError(column)

        mover = state.current_player
        new_board, position = self.drop_piece(state.board, column, mover)

        is_win, winning_line = self.check_win(new_board, position)
        is_draw = not is_win and self.is_board_full(new_board)

        if is_win:
            status = GameStatus.WON
        elif is_draw:
            status = GameStatus.DRAW
        else:
            status = GameStatus.PLAYING

        logger.debug("%s dropped at (%d, %d) -> %s", mover, position.row, position.col, status.value)

        new_state = GameState(
            board=new_board,
            current_player=mover.opponent,
            winner=mover if is_win else None,
            is_draw=is_draw,
            is_game_over=is_win or is_draw,
            move_count=state.move_count + 1,
            status=status,
            winning_line=winning_line,
        )
        return new_state, position

    def check_win(self, board: Board, last_move: Position) -> WinCheck:
        """Check whether the piece at `last_move` completes a line.

        Args:
            board: Board with the piece already placed
            last_move: Position of the placed piece

        Returns:
            WinCheck with the first winning direction's line of
            `win_length` positions, or (False, None)
        """
        player = board.grid[last_move.row][last_move.col]
        if player == Player.EMPTY:
            return WinCheck(False, None)

        for dr, dc in DIRECTIONS:
            line = [last_move]

            row, col = last_move.row + dr, last_move.col + dc
            while board.in_bounds(row, col) and board.grid[row][col] == player:
                line.append(Position(row=row, col=col))
                row, col = row + dr, col + dc

            row, col = last_move.row - dr, last_move.col - dc
            while board.in_bounds(row, col) and board.grid[row][col] == player:
                line.insert(0, Position(row=row, col=col))
                row, col = row - dr, col - dc

            if len(line) >= self.win_length:
                return WinCheck(True, self._truncate_line(line, last_move))

        return WinCheck(False, None)

    def _truncate_line(self, line: list[Position], last_move: Position) -> list[Position]:
        """Cut a run longer than `win_length` to a window holding `last_move`."""
        index = line.index(last_move)
        start = min(index, len(line) - self.win_length)
        return line[start:start + self.win_length]

    def is_board_full(self, board: Board) -> bool:
        return not self.get_valid_moves(board)


_default_rules = Connect4Rules()


def create_initial_state() -> GameState:
    """Fresh standard game."""
    return _default_rules.create_initial_state()


def is_valid_move(board: Board, column: int) -> bool:
    return _default_rules.is_valid_move(board, column)


def get_valid_moves(board: Board) -> list[int]:
    return _default_rules.get_valid_moves(board)


def apply_move(state: GameState, column: int) -> tuple[GameState, Position]:
    """Apply a move with the standard rules. See `Connect4Rules.apply_move`."""
    return _default_rules.apply_move(state, column)


def check_win(board: Board, last_move: Position) -> WinCheck:
    return _default_rules.check_win(board, last_move)
