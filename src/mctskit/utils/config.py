"""Configuration loading utilities.

YAML files hold one section per dataclass::

    mcts:
      exploration_constant: 1.414
      num_iterations: 1000
      seed: null
    game:
      max_moves: 200
"""

from dataclasses import asdict, fields
from pathlib import Path
from typing import Any

from omegaconf import DictConfig, OmegaConf

from mctskit.mcts.config import MCTSConfig
from mctskit.tournament.game_runner import GameConfig


def load_config(config_path: str | Path, overrides: list[str] | None = None) -> DictConfig:
    """Load a configuration file with optional overrides.

    Args:
        config_path: Path to the YAML configuration file.
        overrides: Optional list of CLI-style overrides (e.g., ["mcts.num_iterations=200"]).

    Returns:
        Merged configuration as a DictConfig.
    """
    config_path = Path(config_path)
    if not config_path.exists():
        msg = f"Config file not found: {config_path}"
        raise FileNotFoundError(msg)

    config = OmegaConf.load(config_path)

    if overrides:
        override_conf = OmegaConf.from_dotlist(overrides)
        config = OmegaConf.merge(config, override_conf)

    return config


def save_config(config: DictConfig | dict[str, Any], path: str | Path) -> None:
    """Save a configuration to a YAML file.

    Args:
        config: Configuration to save.
        path: Path to save the configuration to.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if isinstance(config, dict):
        config = OmegaConf.create(config)

    OmegaConf.save(config, path)


def _section(config: DictConfig | dict[str, Any] | None, name: str, known: set[str]) -> dict[str, Any]:
    """Extract section ``name`` as a plain dict, rejecting unknown keys."""
    if config is None:
        return {}
    if isinstance(config, DictConfig):
        config = OmegaConf.to_container(config, resolve=True)

    section = config.get(name) or {}
    unknown = set(section) - known
    if unknown:
        msg = f"Unknown keys in '{name}' config: {sorted(unknown)}"
        raise ValueError(msg)
    return dict(section)


def mcts_config_from_dict(config: DictConfig | dict[str, Any] | None) -> MCTSConfig:
    """Build an MCTSConfig from the ``mcts`` section of a config.

    Missing keys fall back to the dataclass defaults.
    """
    known = {f.name for f in fields(MCTSConfig)}
    return MCTSConfig(**_section(config, "mcts", known))


def game_config_from_dict(config: DictConfig | dict[str, Any] | None) -> GameConfig:
    """Build a GameConfig from the ``game`` section of a config."""
    known = {f.name for f in fields(GameConfig)}
    return GameConfig(**_section(config, "game", known))


def config_to_dict(mcts: MCTSConfig, game: GameConfig | None = None) -> dict[str, Any]:
    """Convert configuration dataclasses back to a nested dict for saving."""
    result: dict[str, Any] = {"mcts": asdict(mcts)}
    if game is not None:
        result["game"] = asdict(game)
    return result
