"""
Scoring Formulas
================

Numeric helpers shared by the two box kinds.
"""

from __future__ import annotations

from typing import Sequence


def cantor_pairing(a: float, b: float) -> float:
    """
    Cantor's pairing function.

    pairing(a, b) = (a + b)(a + b + 1) / 2 + b, so pairing(0, 1) == 2.
    """
    total = a + b
    return (total * (total + 1)) / 2 + b


def recent_mean(values: Sequence[float], window: int) -> float:
    """
    Mean of the last `window` values (all of them if there are fewer).

    Args:
        values: Values in absorption order.
        window: Number of trailing values to average.

    Returns:
        The mean, or 0.0 for an empty sequence.
    """
    recent = values[-window:]
    if not recent:
        return 0.0
    return sum(recent) / len(recent)


def green_score(history: Sequence[float], window: int = 3) -> float:
    """Square of the mean of the most recent tokens."""
    mean = recent_mean(history, window)
    return mean * mean


def blue_score(lowest: float, highest: float) -> float:
    """Pairing of the smallest and largest token absorbed so far."""
    return cantor_pairing(lowest, highest)
