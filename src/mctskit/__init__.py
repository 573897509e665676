"""mctskit: Monte Carlo Tree Search for turn-based games.

The search engine works on any state implementing ``mctskit.core.Game``:
- `from mctskit import search` for a one-off search
- `from mctskit.mcts import MCTSEngine, MCTSConfig` for a reusable engine
- `from mctskit.games import TicTacToe` for a ready-made game
"""

__version__ = "0.1.0"

from mctskit.core import Game, IllegalActionError
from mctskit.games import TicTacToe
from mctskit.mcts import MCTSConfig, MCTSEngine, search
from mctskit.utils import load_config, save_config, setup_logging

__all__ = [
    "Game",
    "IllegalActionError",
    "MCTSConfig",
    "MCTSEngine",
    "TicTacToe",
    "__version__",
    "load_config",
    "save_config",
    "search",
    "setup_logging",
]
