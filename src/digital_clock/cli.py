"""Command-line interface for Digital Clock."""

import json
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.table import Table

from digital_clock.clock import ClockError, ClockLoop, SystemClock, render
from digital_clock.config import get_settings
from digital_clock.logging import configure_logging, get_logger

logger = get_logger(__name__)

app = typer.Typer(
    name="digital-clock",
    help="Digital Clock - prints the local time once per second",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Digital Clock CLI."""
    settings = get_settings()
    if debug or settings.debug:
        configure_logging(log_level="DEBUG", log_file=settings.log_file)
    else:
        configure_logging(log_level=settings.log_level, log_file=settings.log_file)


def _fail(error: ClockError) -> NoReturn:
    logger.debug(f"Clock failure: {error!r}")
    err_console.print(f"[red]Error:[/red] {error}", markup=True, highlight=False)
    raise typer.Exit(1)


@app.command("run")
def run(
    pad: Optional[bool] = typer.Option(
        None, "--pad/--no-pad", help="Zero-pad fields (default from settings)"
    ),
    banner: Optional[str] = typer.Option(None, "--banner", help="Startup banner text"),
) -> None:
    """Print the local time once per second until interrupted."""
    settings = get_settings()
    loop = ClockLoop(
        zero_pad=settings.zero_pad if pad is None else pad,
        banner=settings.banner if banner is None else banner,
    )

    try:
        loop.start()
    except KeyboardInterrupt:
        logger.info("Clock interrupted")
    except ClockError as e:
        _fail(e)


@app.command("now")
def now(
    pad: Optional[bool] = typer.Option(
        None, "--pad/--no-pad", help="Zero-pad fields (default from settings)"
    ),
) -> None:
    """Print the current local time once."""
    settings = get_settings()
    source = SystemClock()
    try:
        fields = source.to_local(source.now())
    except ClockError as e:
        _fail(e)
    else:
        typer.echo(render(fields, zero_pad=settings.zero_pad if pad is None else pad))


# Config commands
config_app = typer.Typer(help="Configuration management")
app.add_typer(config_app, name="config")


@config_app.command("show")
def config_show(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show current configuration."""
    settings = get_settings()

    config_dict = {}
    for field_name in type(settings).model_fields:
        value = getattr(settings, field_name)
        config_dict[field_name] = str(value) if isinstance(value, Path) else value

    if json_output:
        typer.echo(json.dumps(config_dict, indent=2))
        return

    table = Table(title="Digital Clock Configuration", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    for field_name, value in config_dict.items():
        table.add_row(field_name, str(value))

    console.print(table)


if __name__ == "__main__":
    app()
