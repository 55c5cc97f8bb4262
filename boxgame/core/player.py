"""
Players
=======

Running score per player and the box selection rule.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from boxgame.core.box import Box, BoxKind


@dataclass
class TurnResult:
    """Record of a single turn."""
    turn: int
    player: str
    token: int
    box_index: int
    box_kind: BoxKind
    points: float
    total_score: float

    def __repr__(self) -> str:
        return (
            f"TurnResult(turn={self.turn}, player={self.player}, "
            f"token={self.token}, box={self.box_index}:{self.box_kind.value}, "
            f"points={self.points})"
        )


def select_box(boxes: Sequence[Box]) -> int:
    """
    Index of the lightest box.

    Only a strictly smaller weight displaces the current pick, so ties go
    to the box that appears first.

    Raises:
        ValueError: If there are no boxes to choose from.
    """
    if not boxes:
        raise ValueError("Cannot select a box from an empty collection")

    best = 0
    for i in range(1, len(boxes)):
        if boxes[i].weight < boxes[best].weight:
            best = i
    return best


class Player:
    """
    Accumulates score across turns.

    The total only ever grows: every absorption score is non-negative for
    non-negative tokens, and nothing is ever subtracted.
    """

    def __init__(self, name: str):
        self._name = name
        self._total_score: float = 0.0
        self._turns: int = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def total_score(self) -> float:
        """Sum of every score this player has collected."""
        return self._total_score

    @property
    def turns(self) -> int:
        """Number of turns taken."""
        return self._turns

    def take_turn(self, token: int, boxes: Sequence[Box], turn: int = 0) -> TurnResult:
        """
        Let the lightest box absorb the token and bank its score.

        Args:
            token: Token weight for this turn.
            boxes: Shared box collection in fixed order.
            turn: Game-wide turn index, for the record.

        Returns:
            TurnResult describing the absorption.
        """
        index = select_box(boxes)
        box = boxes[index]
        points = box.absorb(token)

        self._total_score += points
        self._turns += 1

        return TurnResult(
            turn=turn,
            player=self._name,
            token=token,
            box_index=index,
            box_kind=box.kind,
            points=points,
            total_score=self._total_score
        )

    def reset(self) -> None:
        """Reset score to zero."""
        self._total_score = 0.0
        self._turns = 0
