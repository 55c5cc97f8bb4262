"""
Box Game Package
================

A two-player, turn-based scoring game played with four boxes:

- Two green boxes score the square of the mean of their recent tokens
- Two blue boxes score the Cantor pairing of their lightest and heaviest token
- Each turn the lightest box absorbs the next token for the active player

The rule table lives in game_config.yaml and is fixed for every game.
"""

from boxgame.core import Box, BoxKind, CoreGame, GameResult, play

__all__ = ["Box", "BoxKind", "CoreGame", "GameResult", "play"]
