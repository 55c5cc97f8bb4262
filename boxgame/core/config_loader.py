"""
Configuration Loader
====================

Loads and validates game_config.yaml, providing typed access to the rule table.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Tuple, Optional

import yaml


VALID_BOX_KINDS = ("green", "blue")


@dataclass(frozen=True)
class BoxConfig:
    """Starting state of a single box."""
    kind: str                # "green" or "blue"
    initial_weight: float    # Weight before any token is absorbed


@dataclass(frozen=True)
class ScoringConfig:
    """Scoring parameters."""
    green_window: int        # Number of recent tokens averaged by green boxes


@dataclass(frozen=True)
class PlayersConfig:
    """Player roster in turn order."""
    names: Tuple[str, ...]


@dataclass(frozen=True)
class GameConfig:
    """
    Complete game configuration loaded from YAML.

    All values are immutable to prevent accidental modification during runtime.
    """
    boxes: Tuple[BoxConfig, ...]
    scoring: ScoringConfig
    players: PlayersConfig

    @property
    def num_boxes(self) -> int:
        """Total number of boxes on the table."""
        return len(self.boxes)

    def get_box(self, index: int) -> BoxConfig:
        """Get box config by position."""
        if 0 <= index < len(self.boxes):
            return self.boxes[index]
        raise ValueError(f"Invalid box index: {index}")


def _section(raw: dict, name: str) -> dict:
    """Get a top-level mapping section, treating a missing or empty one as {}."""
    data = raw.get(name) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Section '{name}' must be a mapping, got {data!r}")
    return data


def _parse_box(index: int, box_data: Any) -> BoxConfig:
    """Parse a single box entry from YAML."""
    if not isinstance(box_data, dict):
        raise ValueError(f"Box {index} must be a mapping, got {box_data!r}")
    if "kind" not in box_data:
        raise ValueError(f"Box {index} is missing required key 'kind'")
    try:
        initial_weight = float(box_data.get("initial_weight", 0.0))
    except (TypeError, ValueError):
        raise ValueError(
            f"Box {index} initial_weight must be a number, "
            f"got {box_data.get('initial_weight')!r}"
        )
    return BoxConfig(
        kind=str(box_data["kind"]).lower(),
        initial_weight=initial_weight
    )


def _validate_config(config: GameConfig) -> None:
    """Validate configuration consistency."""
    if not config.boxes:
        raise ValueError("At least one box must be configured")

    for i, box in enumerate(config.boxes):
        if box.kind not in VALID_BOX_KINDS:
            raise ValueError(
                f"Box {i} has unknown kind '{box.kind}', "
                f"expected one of {VALID_BOX_KINDS}"
            )
        if not math.isfinite(box.initial_weight):
            raise ValueError(
                f"Box {i} initial_weight must be finite, got {box.initial_weight}"
            )

    if config.scoring.green_window < 1:
        raise ValueError(
            f"scoring.green_window must be at least 1, got {config.scoring.green_window}"
        )

    names = config.players.names
    if len(names) != 2:
        raise ValueError(f"Exactly two players are required, got {len(names)}")
    if names[0] == names[1]:
        raise ValueError(f"Player names must be distinct, got {list(names)}")


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """
    Load and validate game configuration from YAML.

    Args:
        config_path: Path to game_config.yaml. If None, uses default location.

    Returns:
        Validated GameConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config validation fails.
    """
    if config_path is None:
        config_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)),
            "game_config.yaml"
        )

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        try:
            raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ValueError(f"Config root must be a mapping, got {type(raw).__name__}")

    boxes_data = raw.get("boxes") or []
    if not isinstance(boxes_data, list):
        raise ValueError(f"Section 'boxes' must be a list, got {boxes_data!r}")
    boxes = tuple(_parse_box(i, b) for i, b in enumerate(boxes_data))

    scoring_data = _section(raw, "scoring")
    window = scoring_data.get("green_window", 3)
    if isinstance(window, bool) or not isinstance(window, int):
        raise ValueError(f"scoring.green_window must be an integer, got {window!r}")
    scoring = ScoringConfig(green_window=window)

    players_data = _section(raw, "players")
    names = players_data.get("names", ["A", "B"])
    if not isinstance(names, list):
        raise ValueError(f"players.names must be a list, got {names!r}")
    players = PlayersConfig(
        names=tuple(str(n) for n in names)
    )

    config = GameConfig(
        boxes=boxes,
        scoring=scoring,
        players=players
    )

    _validate_config(config)
    return config


# Module-level singleton for convenience
_cached_config: Optional[GameConfig] = None


def get_config() -> GameConfig:
    """Get the cached game configuration, loading if necessary."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def reload_config(config_path: Optional[str] = None) -> GameConfig:
    """Reload the configuration (useful for testing)."""
    global _cached_config
    _cached_config = load_config(config_path)
    return _cached_config
