"""Static board evaluation used by the search at its horizon."""

from collections.abc import Iterator

from ..core.types import WIN_LENGTH, Board, Player


CENTER_WEIGHT = 3

# (own pieces, empties) -> score; opponent-only windows use the negation.
WINDOW_SCORES = {
    (3, 1): 50,
    (2, 2): 10,
    (1, 3): 1,
}

# Window start offsets: (row step, col step)
WINDOW_DIRECTIONS = [(0, 1), (1, 0), (1, 1), (1, -1)]


def iter_windows(board: Board, length: int = WIN_LENGTH) -> Iterator[list[Player]]:
    """Yield every run of `length` cells in all four line directions."""
    rows, cols = board.rows, board.cols
    span = length - 1

    for row in range(rows):
        for col in range(cols):
            for dr, dc in WINDOW_DIRECTIONS:
                if not board.in_bounds(row + span * dr, col + span * dc):
                    continue
                yield [board.grid[row + i * dr][col + i * dc] for i in range(length)]


def score_window(window: list[Player], player: Player) -> int:
    """Score one window from `player`'s point of view."""
    mine = window.count(player)
    theirs = window.count(player.opponent)
    empty = window.count(Player.EMPTY)

    # Dead window: both colours present
    if mine and theirs:
        return 0
    if mine:
        return WINDOW_SCORES.get((mine, empty), 0)
    if theirs:
        return -WINDOW_SCORES.get((theirs, empty), 0)
    return 0


def evaluate_board(board: Board, player: Player) -> int:
    """Heuristic value of `board` for `player`.

    Sum of every window's score plus a bonus for each piece in the
    center column (negative for the opponent's pieces).
    """
    score = 0

    center = board.cols // 2
    for row in range(board.rows):
        cell = board.grid[row][center]
        if cell == player:
            score += CENTER_WEIGHT
        elif cell == player.opponent:
            score -= CENTER_WEIGHT

    for window in iter_windows(board):
        score += score_window(window, player)

    return score


def count_open_threes(board: Board, player: Player) -> int:
    """Windows holding three of `player`'s pieces and one empty cell."""
    return sum(
        1
        for window in iter_windows(board)
        if window.count(player) == WIN_LENGTH - 1 and window.count(Player.EMPTY) == 1
    )
