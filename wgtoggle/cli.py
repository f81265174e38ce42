"""CLI entry point for waybar and key-bindings."""

from enum import Enum
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from .utils import Settings, get_settings, setup_logging
from .utils.logging import get_logger
from .vpn import (
    NEXT,
    PREVIOUS,
    AwgController,
    SelectionStore,
    StatusReport,
    TunnelSwitcher,
    WgToggleError,
)

app = typer.Typer(
    name="wg-toggle",
    help="Toggle and cycle AmneziaWG tunnels, printing waybar status JSON",
    add_completion=False,
)
err_console = Console(stderr=True)
log = get_logger("cli")


class Mode(str, Enum):
    """What one invocation does."""

    STATUS = "status"
    TOGGLE = "toggle"
    NEXT = "next"
    PREVIOUS = "previous"


def resolve_mode(status: bool, action: str | None) -> Mode:
    """Map command-line input to a mode; anything unrecognized toggles."""
    if status:
        return Mode.STATUS
    if action == Mode.NEXT.value:
        return Mode.NEXT
    if action == Mode.PREVIOUS.value:
        return Mode.PREVIOUS
    return Mode.TOGGLE


def make_switcher(settings: Settings) -> TunnelSwitcher:
    """Wire the switcher to the real tunnel tooling."""
    return TunnelSwitcher(
        control=AwgController(settings),
        store=SelectionStore(settings.state_path),
        settings=settings,
    )


def _emit(report: StatusReport | None) -> None:
    if report is not None:
        typer.echo(report.to_json())


@app.command(
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
def main(
    action: Annotated[
        str | None,
        typer.Argument(help="'next' or 'previous' to cycle; anything else toggles"),
    ] = None,
    status: Annotated[
        bool,
        typer.Option("--status", help="Only print the current status"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Log debug output to stderr"),
    ] = False,
    log_file: Annotated[
        str | None,
        typer.Option("--log-file", help="Also write debug logs to this file"),
    ] = None,
):
    """Toggle the selected tunnel (default), print status, or cycle configs."""
    setup_logging(debug=debug, log_file=log_file)
    settings = get_settings()
    mode = resolve_mode(status, action)
    log.debug("Mode %s, config dir %s", mode.value, settings.config_dir)

    switcher = make_switcher(settings)
    try:
        if mode == Mode.STATUS:
            report = switcher.status()
        elif mode == Mode.NEXT:
            report = switcher.cycle(NEXT)
        elif mode == Mode.PREVIOUS:
            report = switcher.cycle(PREVIOUS)
        else:
            report = switcher.toggle()
    except WgToggleError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    _emit(report)
