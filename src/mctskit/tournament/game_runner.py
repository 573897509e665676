"""Game runner for agent-vs-agent games.

Plays a game to completion between agents keyed by the player they control,
rejecting illegal actions and recording how the game ended.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from loguru import logger

from mctskit.core.game import Game, IllegalActionError
from mctskit.tournament.agents import Agent


class GameTermination(Enum):
    """How a game ended."""

    WIN = "win"
    DRAW = "draw"
    MAX_MOVES = "max_moves"
    ILLEGAL_ACTION = "illegal_action"
    ENGINE_ERROR = "engine_error"


@dataclass
class GameConfig:
    """Configuration for game adjudication."""

    # Maximum actions before the game is adjudicated a draw
    max_moves: int = 200

    def __post_init__(self) -> None:
        if self.max_moves < 1:
            msg = f"max_moves must be at least 1, got {self.max_moves}"
            raise ValueError(msg)


@dataclass
class GameResult:
    """Result of a single game."""

    winner: Any  # Winning player, or None for a draw
    actions: list[Any]
    termination: GameTermination

    # Metadata
    move_count: int = field(init=False)
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    def __post_init__(self):
        self.move_count = len(self.actions)

    @property
    def is_draw(self) -> bool:
        """Whether the game ended without a winner."""
        return self.winner is None


class GameRunner:
    """Runs games between agents."""

    def __init__(self, config: GameConfig | None = None):
        """Initialize game runner.

        Args:
            config: Game adjudication configuration.
        """
        self.config = config or GameConfig()

    def play_game(
        self,
        agents: Mapping[Any, Agent],
        initial_state: Game,
        opponents: Mapping[Any, Any] | None = None,
    ) -> GameResult:
        """Play a single game until it ends.

        Args:
            agents: Agent for every player, keyed by player.
            initial_state: Starting position. Not modified.
            opponents: Optional map from player to the player that wins when
                it forfeits. Defaults to the other key of a two-player ``agents``.

        Returns:
            GameResult with the outcome.
        """
        state = initial_state.copy()
        actions: list[Any] = []

        while True:
            if state.done():
                winner = state.check_winner()
                termination = GameTermination.DRAW if winner is None else GameTermination.WIN
                break

            if len(actions) >= self.config.max_moves:
                winner = None
                termination = GameTermination.MAX_MOVES
                break

            player = state.current_player()
            agent = agents[player]

            try:
                action = agent.select_action(state.copy())
            except Exception as e:
                logger.error(f"Agent {agent.name} failed: {e}")
                winner = self._forfeit_winner(player, agents, opponents)
                termination = GameTermination.ENGINE_ERROR
                break

            if action not in state.legal_actions():
                logger.warning(f"Agent {agent.name} chose illegal action {action!r}")
                winner = self._forfeit_winner(player, agents, opponents)
                termination = GameTermination.ILLEGAL_ACTION
                break

            try:
                state.step(action)
            except IllegalActionError as e:
                logger.warning(f"Game rejected action {action!r} listed as legal: {e}")
                winner = self._forfeit_winner(player, agents, opponents)
                termination = GameTermination.ILLEGAL_ACTION
                break

            actions.append(action)
            logger.debug(f"{agent.name} ({player}) played {action!r}")

        logger.info(f"Game over after {len(actions)} moves: {termination.value}, winner={winner}")
        return GameResult(winner=winner, actions=actions, termination=termination)

    def play_match(
        self,
        agents: Mapping[Any, Agent],
        initial_state: Game,
        num_games: int,
    ) -> list[GameResult]:
        """Play ``num_games`` games from the same starting position."""
        return [self.play_game(agents, initial_state) for _ in range(num_games)]

    def _forfeit_winner(
        self,
        player: Any,
        agents: Mapping[Any, Agent],
        opponents: Mapping[Any, Any] | None,
    ) -> Any:
        """Player credited with the win when ``player`` forfeits."""
        if opponents is not None:
            return opponents.get(player)
        others = [p for p in agents if p != player]
        return others[0] if len(others) == 1 else None
