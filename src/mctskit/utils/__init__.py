"""Shared utilities for mctskit."""

from mctskit.utils.config import (
    config_to_dict,
    game_config_from_dict,
    load_config,
    mcts_config_from_dict,
    save_config,
)
from mctskit.utils.logging import setup_logging

__all__ = [
    "config_to_dict",
    "game_config_from_dict",
    "load_config",
    "mcts_config_from_dict",
    "save_config",
    "setup_logging",
]
