"""Integrity checks for game state snapshots received from outside the engine."""

from dataclasses import dataclass, field

import numpy as np

from ..core.types import COLS, ROWS, GameState, GameStatus, Player


@dataclass
class ValidationResult:
    """Outcome of `validate_state`."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def has_floating_pieces(matrix: np.ndarray) -> bool:
    """True if any column has an occupied cell above an empty one."""
    occupied = matrix != 0
    # Row 0 is the top: once a column is occupied, every row below must be too.
    return bool(np.any(occupied[:-1] & ~occupied[1:]))


def validate_state(state: GameState, rows: int = ROWS, cols: int = COLS) -> ValidationResult:
    """Check a GameState against the engine's invariants.

    Args:
        state: Snapshot to check
        rows: Expected number of rows
        cols: Expected number of columns

    Returns:
        ValidationResult; inconsistent move_count is only a warning
    """
    result = ValidationResult()
    grid = state.board.grid

    if len(grid) != rows or any(len(row) != cols for row in grid):
        result.errors.append(f"Invalid board shape: expected {rows}x{cols}")
        return result

    if any(not isinstance(cell, Player) for row in grid for cell in row):
        result.errors.append("Invalid cell value on board")
        return result

    matrix = state.board.as_matrix
    if has_floating_pieces(matrix):
        result.errors.append("Floating piece above an empty cell")

    red_count = int(np.count_nonzero(matrix == 1))
    yellow_count = int(np.count_nonzero(matrix == -1))

    if not 0 <= red_count - yellow_count <= 1:
        result.errors.append("Unbalanced number of pieces")

    if state.current_player == Player.EMPTY:
        result.errors.append("Current player must be red or yellow")
    else:
        expected = Player.RED if red_count == yellow_count else Player.YELLOW
        if state.current_player != expected:
            result.errors.append(f"Invalid turn order - {expected} should be to move")

    if state.winner is not None and state.is_draw:
        result.errors.append("Cannot have both winner and draw")

    if state.is_game_over != (state.winner is not None or state.is_draw):
        result.errors.append("Game-over flag disagrees with winner/draw")

    if (state.winning_line is not None) != (state.winner is not None):
        result.errors.append("Winning line must be present exactly when there is a winner")
    elif state.winning_line is not None:
        if any(grid[pos.row][pos.col] != state.winner for pos in state.winning_line):
            result.errors.append("Winning line holds pieces not owned by the winner")

    if state.is_game_over != state.status.is_terminal:
        result.errors.append(f"Status {state.status.value} disagrees with game-over flag")

    if state.status == GameStatus.WON and state.winner is None:
        result.errors.append("Status is won but no winner is set")

    if state.move_count != red_count + yellow_count:
        result.warnings.append("Move count does not match pieces on board")

    return result
