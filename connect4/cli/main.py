"""
CLI for the Connect4 engine.

Usage:
    connect4 --help
    connect4 play --difficulty hard
    connect4 play --human-first
    connect4 selfplay --red easy --yellow hard
    connect4 suggest 3344 --difficulty medium
"""

import logging
from enum import Enum
from typing import Annotated

import typer

from ..ai.interface import Difficulty
from ..ai.search import SearchEngine
from ..core.config import get_settings
from ..core.errors import MoveError
from ..core.types import GameState, Player
from ..game.engine import GameEngine
from ..game.rules import Connect4Rules


app = typer.Typer(
    name="connect4",
    help="Connect4 rules engine and AI.",
    add_completion=False,
)


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


@app.callback()
def main(
    log_level: Annotated[
        LogLevel | None,
        typer.Option("--log-level", "-l", case_sensitive=False, help="Logging verbosity"),
    ] = None,
):
    """Configure logging before running a command."""
    level = log_level.value if log_level else get_settings().log.level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
    )


def _build_engine() -> GameEngine:
    rules = Connect4Rules()
    search = SearchEngine.from_settings(get_settings(), rules=rules)
    return GameEngine(rules=rules, search=search)


def _default_difficulty() -> Difficulty:
    return Difficulty(get_settings().ai.difficulty)


def print_status(state: GameState, last_move: int | None = None) -> None:
    """Print board and whose turn it is."""
    typer.echo("\n" + state.board.render())
    typer.echo(f"\nMoves: {state.move_count}")

    if last_move is not None:
        typer.echo(f"Last move: Column {last_move}")

    if state.winner is not None:
        typer.echo(f"\n{state.winner.value.upper()} ({state.winner.symbol}) WINS!")
    elif state.is_draw:
        typer.echo("\nIt's a DRAW!")
    else:
        typer.echo(f"To move: {state.current_player} ({state.current_player.symbol})")


@app.command()
def play(
    difficulty: Annotated[
        Difficulty | None, typer.Option("--difficulty", "-d", help="AI strength")
    ] = None,
    human_first: Annotated[bool, typer.Option("--human-first", help="Human plays red and moves first")] = False,
):
    """
    Play against the AI in the terminal.

    Examples:
        play                  # AI (red) opens, human is yellow
        play --human-first    # Human is red
    """
    difficulty = difficulty or _default_difficulty()
    engine = _build_engine()
    state = engine.new_game()
    human = Player.RED if human_first else Player.YELLOW

    typer.echo(f"AI difficulty: {difficulty.value}")
    typer.echo("Enter column number (0-6) to play, 'q' to quit")

    last_move = None

    while not engine.is_game_over:
        print_status(state, last_move)

        if state.current_player != human:
            move, state = engine.play_ai_move(difficulty)
            typer.echo(f"\nAI chose: Column {move.column} - {move.rationale}")
            last_move = move.column
            continue

        user_input = typer.prompt("\nYour move (0-6)")
        if user_input.strip().lower() == "q":
            typer.echo("Game quit.")
            return

        try:
            state = engine.make_move(int(user_input), human)
            last_move = int(user_input)
        except MoveError as e:
            typer.echo(f"Invalid! {e}")
        except ValueError:
            typer.echo("Enter a number 0-6")

    print_status(state, last_move)


@app.command()
def selfplay(
    red: Annotated[Difficulty, typer.Option("--red", help="Red AI strength")] = Difficulty.MEDIUM,
    yellow: Annotated[Difficulty, typer.Option("--yellow", help="Yellow AI strength")] = Difficulty.EASY,
):
    """Watch two AIs play each other."""
    engine = _build_engine()
    state = engine.new_game()
    tiers = {Player.RED: red, Player.YELLOW: yellow}

    typer.echo(f"Red: {red.value}  Yellow: {yellow.value}")

    while not engine.is_game_over:
        move, state = engine.play_ai_move(tiers[state.current_player])
        typer.echo(f"Move {state.move_count}: column {move.column} ({move.rationale})")

    print_status(state)


@app.command()
def suggest(
    moves: Annotated[str, typer.Argument(help="Columns played so far, e.g. 3344")] = "",
    difficulty: Annotated[
        Difficulty | None, typer.Option("--difficulty", "-d", help="AI strength")
    ] = None,
):
    """Replay a move sequence and print the AI's choice for the side to move."""
    difficulty = difficulty or _default_difficulty()
    engine = _build_engine()
    state = engine.new_game()

    try:
        for ch in moves:
            state = engine.make_move(int(ch), state.current_player)
    except (MoveError, ValueError) as e:
        typer.echo(f"Cannot replay '{moves}': {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(state.board.render())

    if state.is_game_over:
        typer.echo("Game is already over.")
        raise typer.Exit(code=1)

    move = engine.request_ai_move(difficulty)
    typer.echo(f"\n{state.current_player} should play column {move.column}")
    typer.echo(f"Confidence: {move.confidence:.2f}")
    typer.echo(f"Rationale: {move.rationale}")


if __name__ == "__main__":
    app()
