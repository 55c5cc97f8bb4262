"""
Boxes
=====

Stateful scoring units. A box absorbs token weights, grows heavier, and
reports a score computed by one of two rules depending on its kind.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

from boxgame.core.config_loader import GameConfig, get_config
from boxgame.core.scoring import blue_score, green_score


class BoxKind(Enum):
    """
    Scoring rule of a box.

    GREEN: square of the mean of the most recent tokens.
    BLUE: Cantor pairing of the smallest and largest token so far.
    """
    GREEN = "green"
    BLUE = "blue"


class Box:
    """
    A box with a running weight and an absorption history.

    The kind is fixed at creation. Blue boxes track their extremes as two
    scalars, which is all the pairing rule needs.
    """

    def __init__(
        self,
        kind: BoxKind,
        initial_weight: float = 0.0,
        window: int = 3
    ):
        """
        Initialize a box.

        Args:
            kind: Scoring rule for this box.
            initial_weight: Starting weight.
            window: Number of recent tokens averaged by a green box.

        Raises:
            ValueError: If the kind is unknown or the window is below 1.
        """
        if window < 1:
            raise ValueError(f"window must be at least 1, got {window}")

        self._kind = BoxKind(kind)
        self._weight: float = float(initial_weight)
        self._score: float = 0.0
        self._window = window
        self._history: List[float] = []
        self._lowest: Optional[float] = None
        self._highest: Optional[float] = None

    @classmethod
    def green(cls, initial_weight: float = 0.0, window: int = 3) -> "Box":
        return cls(BoxKind.GREEN, initial_weight, window)

    @classmethod
    def blue(cls, initial_weight: float = 0.0) -> "Box":
        return cls(BoxKind.BLUE, initial_weight)

    @property
    def kind(self) -> BoxKind:
        return self._kind

    @property
    def weight(self) -> float:
        """Current weight, including the initial weight."""
        return self._weight

    @property
    def score(self) -> float:
        """Score from the latest absorption, 0.0 before any."""
        return self._score

    @property
    def history(self) -> Tuple[float, ...]:
        """Absorbed token weights in absorption order."""
        return tuple(self._history)

    @property
    def lowest(self) -> Optional[float]:
        """Smallest token absorbed so far, or None."""
        return self._lowest

    @property
    def highest(self) -> Optional[float]:
        """Largest token absorbed so far, or None."""
        return self._highest

    def absorb(self, token_weight: float) -> float:
        """
        Absorb a token and return the new score.

        Args:
            token_weight: Non-negative weight to absorb.

        Returns:
            The score computed after absorbing the token.
        """
        token = float(token_weight)
        self._weight += token
        self._history.append(token)

        if self._lowest is None or token < self._lowest:
            self._lowest = token
        if self._highest is None or token > self._highest:
            self._highest = token

        if self._kind is BoxKind.GREEN:
            self._score = green_score(self._history, self._window)
        else:
            self._score = blue_score(self._lowest, self._highest)

        return self._score

    def __repr__(self) -> str:
        return (
            f"Box({self._kind.value}, weight={self._weight}, "
            f"score={self._score}, absorbed={len(self._history)})"
        )


def make_boxes(config: Optional[GameConfig] = None) -> List[Box]:
    """
    Build the box roster in configured order.

    Args:
        config: Game configuration. Uses default if None.

    Returns:
        Fresh boxes, one per configured entry.
    """
    if config is None:
        config = get_config()

    window = config.scoring.green_window
    return [
        Box(BoxKind(box.kind), box.initial_weight, window)
        for box in config.boxes
    ]
