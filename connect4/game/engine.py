"""Game engine for Connect4 session management."""

import logging

from ..ai.interface import AIMove, Difficulty
from ..ai.search import SearchEngine
from ..core.bus import EventBus
from ..core.errors import GameNotStartedError, MoveError, NotPlayersTurnError
from ..core.events import Event, EventType
from ..core.types import GameState, Player
from .rules import Connect4Rules


logger = logging.getLogger(__name__)


class GameEngine:
    """Holds one game and turns commands into state transitions.

    Stateful wrapper that:
    - Tracks current game state
    - Checks whose turn it is
    - Delegates move application to the rules
    - Asks the search engine for computer moves
    - Emits events for state changes
    """

    def __init__(
        self,
        rules: Connect4Rules | None = None,
        search: SearchEngine | None = None,
        bus: EventBus | None = None,
    ):
        """Initialize game engine.

        Args:
            rules: Game rules (uses defaults if None)
            search: AI move selection (built from `rules` if None)
            bus: Event bus (a private bus if None)
        """
        self.rules = rules or Connect4Rules()
        self.search = search or SearchEngine(rules=self.rules)
        self.bus = bus or EventBus()
        self._state: GameState | None = None

    def new_game(self) -> GameState:
        """Initialize a new game.

        Returns:
            Initial game state
        """
        self._state = self.rules.create_initial_state()

        self.bus.publish(Event(
            type=EventType.GAME_STARTED,
            data={"first_player": self._state.current_player.value},
            source="game_engine"
        ))

        return self._state

    def make_move(self, column: int, player: Player) -> GameState:
        """Make a move.

        Args:
            column: Column to drop piece (0-6)
            player: Player making the move

        Returns:
            Updated game state

        Raises:
            GameNotStartedError: If no game was created
            NotPlayersTurnError: If `player` is not the side to move
            MoveError: If the rules reject the move (state is unchanged)
        """
        state = self._require_state()

        try:
            if not state.is_game_over and player != state.current_player:
                raise NotPlayersTurnError(player, state.current_player)
            new_state, position = self.rules.apply_move(state, column)
        except MoveError as e:
            logger.debug("Rejected move by %s in column %s: %s", player, column, e)
            self.bus.publish(Event(
                type=EventType.INVALID_MOVE,
                data={"column": column, "player": player.value, "reason": str(e)},
                source="game_engine"
            ))
            raise

        self._state = new_state

        self.bus.publish(Event(
            type=EventType.MOVE_MADE,
            data={"column": column, "player": player.value, "position": position},
            source="game_engine"
        ))

        if new_state.winner is not None:
            logger.info("%s wins after %d moves", new_state.winner, new_state.move_count)
            self.bus.publish(Event(
                type=EventType.GAME_WON,
                data={"winner": new_state.winner.value, "positions": new_state.winning_line},
                source="game_engine"
            ))
        elif new_state.is_draw:
            logger.info("Game drawn after %d moves", new_state.move_count)
            self.bus.publish(Event(
                type=EventType.GAME_DRAW,
                source="game_engine"
            ))
        else:
            self.bus.publish(Event(
                type=EventType.TURN_CHANGED,
                data={"player": new_state.current_player.value, "move_count": new_state.move_count},
                source="game_engine"
            ))

        return self._state

    def request_ai_move(self, difficulty: Difficulty | str = Difficulty.MEDIUM) -> AIMove:
        """Ask the AI for a move for the side to move, without playing it."""
        state = self._require_state()
        move = self.search.choose_move(state, difficulty)

        self.bus.publish(Event(
            type=EventType.AI_MOVE_CHOSEN,
            data={
                "column": move.column,
                "player": state.current_player.value,
                "difficulty": Difficulty(difficulty).value,
                "rationale": move.rationale,
            },
            source="game_engine"
        ))
        return move

    def play_ai_move(self, difficulty: Difficulty | str = Difficulty.MEDIUM) -> tuple[AIMove, GameState]:
        """Choose a move for the side to move and apply it."""
        move = self.request_ai_move(difficulty)
        state = self.make_move(move.column, self._require_state().current_player)
        return move, state

    def reset(self) -> None:
        """Reset game state."""
        self._state = None
        self.bus.publish(Event(
            type=EventType.GAME_RESET,
            source="game_engine"
        ))

    def _require_state(self) -> GameState:
        if self._state is None:
            raise GameNotStartedError("Game not started. Call new_game() first.")
        return self._state

    @property
    def state(self) -> GameState | None:
        """Get current game state."""
        return self._state

    @property
    def is_game_over(self) -> bool:
        """Check if game is over."""
        return self._state is not None and self._state.is_game_over
