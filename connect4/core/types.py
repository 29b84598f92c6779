"""
Shared data types for the Connect4 engine.

These types are the contracts between modules.
All modules communicate using these structures.
"""

from dataclasses import dataclass, field
from enum import Enum

import numpy as np


ROWS = 6
COLS = 7
WIN_LENGTH = 4


# ─────────────────────────────────────────────────────────────
# PLAYER & GAME STATUS
# ─────────────────────────────────────────────────────────────


class Player(Enum):
    """Cell value and player identifier."""

    RED = "red"  # Always moves first
    YELLOW = "yellow"
    EMPTY = "empty"

    def __str__(self) -> str:
        return self.value

    @property
    def opponent(self) -> "Player":
        """The other colour (EMPTY has no opponent)."""
        if self == Player.RED:
            return Player.YELLOW
        if self == Player.YELLOW:
            return Player.RED
        return Player.EMPTY

    @property
    def symbol(self) -> str:
        """Single character for text display."""
        return {"red": "X", "yellow": "O", "empty": "."}[self.value]


class GameStatus(Enum):
    """Lifecycle status of a game."""

    WAITING = "waiting"  # Created, no move yet
    PLAYING = "playing"
    WON = "won"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.WON, GameStatus.DRAW)


# ─────────────────────────────────────────────────────────────
# BOARD REPRESENTATION
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Position:
    """Grid position (0-indexed)."""

    row: int  # 0 = top, 5 = bottom
    col: int  # 0 = left, 6 = right


@dataclass
class Board:
    """
    Connect4 board.

    The grid is a 2D list where:
    - grid[0] is the top row
    - grid[5] is the bottom row
    - grid[row][col] contains a Player value
    """

    grid: list[list[Player]] = field(
        default_factory=lambda: [[Player.EMPTY] * COLS for _ in range(ROWS)]
    )

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def __getitem__(self, row: int) -> list[Player]:
        return self.grid[row]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    @property
    def as_matrix(self) -> np.ndarray:
        """Convert to numpy matrix for analysis.

        Returns:
            numpy array where RED=1, YELLOW=-1, EMPTY=0
        """
        mapping = {Player.RED: 1, Player.YELLOW: -1, Player.EMPTY: 0}
        return np.array([[mapping[cell] for cell in row] for row in self.grid], dtype=np.int8)

    def count(self, player: Player) -> int:
        """Number of cells holding `player`."""
        return sum(row.count(player) for row in self.grid)

    def copy(self) -> "Board":
        """Create a deep copy of the board."""
        return Board(grid=[row.copy() for row in self.grid])

    def render(self) -> str:
        """Plain-text rendering, top row first, with column indices."""
        lines = [" ".join(cell.symbol for cell in row) for row in self.grid]
        lines.append(" ".join(str(col) for col in range(self.cols)))
        return "\n".join(lines)

    @classmethod
    def from_rows(cls, rows: list[str]) -> "Board":
        """Build a board from strings such as ``"..XO..."`` (top row first)."""
        mapping = {"X": Player.RED, "O": Player.YELLOW, ".": Player.EMPTY}
        return cls(grid=[[mapping[ch] for ch in line] for line in rows])


# ─────────────────────────────────────────────────────────────
# GAME STATE
# ─────────────────────────────────────────────────────────────


@dataclass
class GameState:
    """Complete game state snapshot."""

    board: Board = field(default_factory=Board)
    current_player: Player = Player.RED
    winner: Player | None = None
    is_draw: bool = False
    is_game_over: bool = False
    move_count: int = 0
    status: GameStatus = GameStatus.WAITING
    winning_line: list[Position] | None = None

    def copy(self) -> "GameState":
        """Create a copy of the game state."""
        return GameState(
            board=self.board.copy(),
            current_player=self.current_player,
            winner=self.winner,
            is_draw=self.is_draw,
            is_game_over=self.is_game_over,
            move_count=self.move_count,
            status=self.status,
            winning_line=None if self.winning_line is None else self.winning_line.copy(),
        )
