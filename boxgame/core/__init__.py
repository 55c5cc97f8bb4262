"""
Box Game Core - The rules and the turn loop.

This module provides the box abstraction, the players, and the game loop
that pits two players against a shared roster of boxes.

Main exports:
- Box / BoxKind: Stateful scoring units and their two rules
- Player: Running score and box selection
- CoreGame: Turn-by-turn game simulation
- play: Play a full game and return both scores
- GameConfig: Configuration loaded from game_config.yaml
"""

from boxgame.core.config_loader import GameConfig, load_config, get_config
from boxgame.core.scoring import cantor_pairing, recent_mean
from boxgame.core.box import Box, BoxKind, make_boxes
from boxgame.core.player import Player, TurnResult, select_box
from boxgame.core.game import CoreGame, GameResult, play

__all__ = [
    "GameConfig",
    "load_config",
    "get_config",
    "cantor_pairing",
    "recent_mean",
    "Box",
    "BoxKind",
    "make_boxes",
    "Player",
    "TurnResult",
    "select_box",
    "CoreGame",
    "GameResult",
    "play",
]
