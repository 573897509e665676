"""Command-line interface for mctskit."""

from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from mctskit import __version__
from mctskit.core.game import IllegalActionError
from mctskit.games.tictactoe import Player, TicTacToe
from mctskit.mcts import MCTSConfig, MCTSEngine
from mctskit.tournament import GameRunner, RandomAgent, summarize
from mctskit.utils.config import game_config_from_dict, load_config, mcts_config_from_dict
from mctskit.utils.logging import setup_logging

app = typer.Typer(
    name="mctskit",
    help="mctskit: Monte Carlo Tree Search for turn-based games",
    add_completion=False,
)
console = Console()


def parse_action(text: str) -> tuple[int, int]:
    """Parse ``"row col"`` into a board action.

    Raises:
        ValueError: If the text is not two integers.
    """
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        raise ValueError(f"expected 'row col', got {text!r}")
    return int(parts[0]), int(parts[1])


def _build_mcts_config(
    config: Path | None,
    iterations: int | None,
    seed: int | None,
) -> MCTSConfig:
    """Load the MCTS config from YAML (if given) and apply CLI overrides."""
    cfg = load_config(config) if config is not None else None
    mcts_config = mcts_config_from_dict(cfg)
    if iterations is not None:
        mcts_config = replace(mcts_config, num_iterations=iterations)
    if seed is not None:
        mcts_config = replace(mcts_config, seed=seed)
    return mcts_config


@app.command()
def version() -> None:
    """Print version information."""
    console.print(f"[bold blue]mctskit[/bold blue] v{__version__}")


@app.command()
def play(
    human: str = typer.Option("X", "--human", help="Side played by the human (X or O)"),
    iterations: Optional[int] = typer.Option(None, "--iterations", "-n", help="MCTS iterations per move"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for the engine"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Play tic-tac-toe against the engine. Enter moves as 'row col'."""
    setup_logging("DEBUG" if verbose else "WARNING")

    try:
        human_player = Player(human.upper())
    except ValueError:
        console.print(f"[red]Unknown side: {human}. Use X or O.[/red]")
        raise typer.Exit(code=2) from None

    engine = MCTSEngine(_build_mcts_config(config, iterations, seed))
    game = TicTacToe()

    while True:
        console.print(str(game))
        console.print()

        if game.done():
            winner = game.check_winner()
            if winner is None:
                console.print("[bold yellow]Draw![/bold yellow]")
            else:
                console.print(f"[bold green]Player {winner.value} wins![/bold green]")
            break

        if game.current_player() is human_player:
            text = typer.prompt(f"Your move ({human_player.value}), row col")
            try:
                game.step(parse_action(text))
            except (ValueError, IllegalActionError) as e:
                console.print(f"[red]Invalid move: {e}[/red]")
                continue
        else:
            action = engine.search(game)
            console.print(f"[cyan]{engine.name}[/cyan] plays {action[0]} {action[1]}")
            game.step(action)


@app.command()
def selfplay(
    games: int = typer.Option(10, "--games", "-g", help="Number of games to play"),
    opponent: str = typer.Option("mcts", "--opponent", help="Opponent for O: mcts or random"),
    iterations: Optional[int] = typer.Option(None, "--iterations", "-n", help="MCTS iterations per move"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Write DEBUG search traces to this file"),
) -> None:
    """Play engine-vs-engine (or engine-vs-random) games and summarize the results."""
    setup_logging("DEBUG" if verbose else "WARNING", log_file=log_file, file_level="DEBUG")

    cfg = load_config(config) if config is not None else None
    mcts_config = _build_mcts_config(config, iterations, seed)
    runner = GameRunner(game_config_from_dict(cfg))

    if opponent == "mcts":
        o_agent = MCTSEngine(mcts_config)
    elif opponent == "random":
        o_agent = RandomAgent(seed)
    else:
        console.print(f"[red]Unknown opponent: {opponent}. Use mcts or random.[/red]")
        raise typer.Exit(code=2)

    agents = {Player.X: MCTSEngine(mcts_config), Player.O: o_agent}
    results = runner.play_match(agents, TicTacToe(), games)
    summary = summarize(results)

    console.print(f"[bold]{games} games[/bold]: {agents[Player.X].name} (X) vs {o_agent.name} (O)")
    table = Table()
    table.add_column("Result")
    table.add_column("Games", justify="right")
    table.add_column("Rate", justify="right")
    for player in Player:
        table.add_row(f"{player.value} wins", str(summary.wins.get(player, 0)), f"{summary.win_rate(player):.1%}")
    table.add_row("Draws", str(summary.draws), f"{summary.draw_rate:.1%}")
    console.print(table)


if __name__ == "__main__":
    app()
