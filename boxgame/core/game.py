"""
Core Game
=========

Main game orchestrator combining boxes, players, and the turn loop.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Integral
from typing import Dict, Any, Iterable, List, Optional, Tuple

from boxgame.core.box import Box, make_boxes
from boxgame.core.config_loader import GameConfig, get_config
from boxgame.core.player import Player, TurnResult


@dataclass
class GameResult:
    """Outcome of a full game."""
    score_a: float
    score_b: float
    player_names: Tuple[str, str]
    turns_played: int
    turns: List[TurnResult] = field(default_factory=list)

    @property
    def scores(self) -> Tuple[float, float]:
        return (self.score_a, self.score_b)

    @property
    def winner(self) -> Optional[str]:
        """Name of the player with the higher score, None on a draw."""
        if self.score_a > self.score_b:
            return self.player_names[0]
        if self.score_b > self.score_a:
            return self.player_names[1]
        return None


def validate_token(token: Any, position: int = 0) -> int:
    """
    Check that a token is a non-negative integer.

    Args:
        token: Candidate token weight.
        position: Index of the token in its sequence, for the error message.

    Returns:
        The token as a plain int.

    Raises:
        ValueError: If the token is not a non-negative integer.
    """
    if isinstance(token, bool) or not isinstance(token, Integral):
        raise ValueError(
            f"Token at position {position} must be an integer, got {token!r}"
        )
    if token < 0:
        raise ValueError(
            f"Token at position {position} must be non-negative, got {token}"
        )
    return int(token)


def format_scores(result: GameResult) -> str:
    """One-line human-readable score summary."""
    name_a, name_b = result.player_names
    return (
        f"Scores: player {name_a} {result.score_a:g}, "
        f"player {name_b} {result.score_b:g}"
    )


class CoreGame:
    """
    Main game simulation class.

    Orchestrates:
    - Box roster (shared by both players)
    - Two players alternating turns, first player starts
    - Turn log

    One step = one token absorbed by the lightest box.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        debug: bool = False
    ):
        """
        Initialize game.

        Args:
            config: Game configuration. Uses default if None.
            debug: If True, print a trace line per turn.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._debug = debug

        name_a, name_b = config.players.names
        self._players: Tuple[Player, Player] = (Player(name_a), Player(name_b))
        self._boxes: List[Box] = make_boxes(config)

        # Game state
        self._turn: int = 0
        self._log: List[TurnResult] = []

    @property
    def config(self) -> GameConfig:
        """Game configuration."""
        return self._config

    @property
    def boxes(self) -> List[Box]:
        """Box roster in selection order."""
        return self._boxes

    @property
    def players(self) -> Tuple[Player, Player]:
        return self._players

    @property
    def turn(self) -> int:
        """Number of turns played."""
        return self._turn

    @property
    def active_player(self) -> Player:
        """Player whose turn is next."""
        return self._players[self._turn % 2]

    @property
    def scores(self) -> Tuple[float, float]:
        return (self._players[0].total_score, self._players[1].total_score)

    def reset(self) -> None:
        """Reset game to initial state."""
        self._boxes = make_boxes(self._config)
        for player in self._players:
            player.reset()
        self._turn = 0
        self._log = []

    def step(self, token: int) -> TurnResult:
        """
        Execute one turn: the active player feeds the token to the lightest box.

        Args:
            token: Non-negative integer token weight.

        Returns:
            TurnResult for this turn.
        """
        token = validate_token(token, self._turn)
        player = self.active_player

        result = player.take_turn(token, self._boxes, turn=self._turn)
        self._log.append(result)
        self._turn += 1

        if self._debug:
            print(f"[DEBUG] Turn {result.turn}: player {result.player} "
                  f"token={result.token} -> box {result.box_index} "
                  f"({result.box_kind.value}), points={result.points:g}, "
                  f"total={result.total_score:g}")

        return result

    def run(self, tokens: Iterable[int]) -> GameResult:
        """
        Play a full game from a fresh state.

        Args:
            tokens: Token weights, consumed in order, one per turn.

        Returns:
            GameResult with final scores and the turn log.
        """
        self.reset()
        for token in tokens:
            self.step(token)
        return self.get_result()

    def get_result(self) -> GameResult:
        """Snapshot of the current scores and turn log."""
        score_a, score_b = self.scores
        return GameResult(
            score_a=score_a,
            score_b=score_b,
            player_names=(self._players[0].name, self._players[1].name),
            turns_played=self._turn,
            turns=list(self._log)
        )

    def get_info(self) -> Dict[str, Any]:
        """Get additional info dict describing the table."""
        return {
            "turn": self._turn,
            "scores": self.scores,
            "box_weights": [box.weight for box in self._boxes],
            "box_scores": [box.score for box in self._boxes],
            "next_player": self.active_player.name,
        }


def play(
    input_weights: Iterable[int],
    config: Optional[GameConfig] = None,
    verbose: bool = True
) -> Tuple[float, float]:
    """
    Play one game and return both players' final scores.

    Args:
        input_weights: Non-negative integer token weights.
        config: Game configuration. Uses default if None.
        verbose: If True, print the one-line score summary.

    Returns:
        (score of first player, score of second player).
    """
    game = CoreGame(config=config)
    result = game.run(input_weights)

    if verbose:
        print(format_scores(result))

    return result.scores
