from dataclasses import asdict
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from typeahead.config import load_config
from typeahead.demo import make_async_lookup, render_character
from typeahead.errors import ConfigError
from typeahead.logger import get_logger, setup_logger

load_dotenv()

cli = typer.Typer(
    name="typeahead",
    help="Debounced, stale-safe suggestion controller with a Textual demo",
    epilog="""
    Examples:
    $ typeahead demo --latency-ms 800 --jitter-ms 600
    """,
    add_completion=False,
)

console = Console()


@cli.command()
def demo(
    debounce_ms: Optional[int] = typer.Option(None, "--debounce-ms", help="Quiet period before searching (overrides TYPEAHEAD_DEBOUNCE_MS)"),
    latency_ms: int = typer.Option(300, "--latency-ms", help="Simulated lookup latency"),
    jitter_ms: int = typer.Option(0, "--jitter-ms", help="Random extra latency, lets responses arrive out of order"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Run the demo TUI against a simulated asynchronous search backend."""
    config = _load_config_or_exit()
    if debounce_ms is not None:
        config.debounce_delay = debounce_ms / 1000.0

    setup_logger(log_level="DEBUG" if debug else config.log_level)
    logger = get_logger("main")
    logger.info(f"Starting demo: debounce={config.debounce_delay:.3f}s latency={latency_ms}ms jitter={jitter_ms}ms")

    from typeahead.presentation import TypeaheadApp

    app = TypeaheadApp(
        lookup=make_async_lookup(latency_ms / 1000.0, jitter_ms / 1000.0),
        config=config,
        render_option=render_character,
    )
    app.run()


@cli.command("show-config")
def show_config():
    """Print the effective configuration after reading the environment."""
    config = _load_config_or_exit()
    table = Table(title="Typeahead configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for key, value in asdict(config).items():
        table.add_row(key, str(value))
    console.print(table)


def _load_config_or_exit():
    try:
        return load_config()
    except ConfigError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    cli()
