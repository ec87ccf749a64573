"""CLI command handlers."""

from typing import Optional

import typer
from rich.console import Console

from linemenu.cli.ui.base import PromptEngine
from linemenu.utils.config import Config, get_linemenu_dir
from linemenu.utils.constants import EXIT_ABORTED

console = Console()


def get_engine(config: Config) -> PromptEngine:
    """Build the prompt engine used by interactive commands."""
    from linemenu.cli.ui.console import ConsoleEngine

    return ConsoleEngine(config=config)


def cmd_pick(
    items: list[str],
    prompt: str,
    banner: Optional[str],
    error: str,
    repeat: bool,
    labels: Optional[str],
    suffix: Optional[str],
) -> None:
    """Show a menu and print the picked item."""
    from linemenu.core import Match, ask_with_menu, ask_with_menu_repeatedly, menu
    from linemenu.utils.debug import log_error
    from linemenu.utils.exceptions import LinemenuError

    config = Config(get_linemenu_dir())
    if labels is not None:
        config.labels = labels
    if suffix is not None:
        config.suffix = suffix

    try:
        m = menu(items).with_prefix(config.label_func()).with_suffix(config.suffix)
    except LinemenuError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)
    if banner:
        m = m.with_banner(banner)

    engine = get_engine(config)
    try:
        if repeat:
            typer.echo(ask_with_menu_repeatedly(engine, m, prompt, error))
            return
        choice = ask_with_menu(engine, m, prompt)
    except (EOFError, KeyboardInterrupt):
        console.print()
        raise typer.Exit(EXIT_ABORTED)
    except Exception as e:
        log_error("cli", "pick failed", e)
        raise

    if isinstance(choice, Match):
        typer.echo(choice.item)
    else:
        typer.echo(choice.text)
        raise typer.Exit(1)


def cmd_config() -> None:
    """Show the active configuration."""
    linemenu_dir = get_linemenu_dir()
    config = Config(linemenu_dir)

    for attr, desc, enabled in config.get_toggles():
        color = "green" if enabled else "dim"
        console.print(
            f"[bold]{attr}:[/bold] [{color}]{'on' if enabled else 'off'}[/{color}] [dim]{desc}[/dim]"
        )
    console.print(f"[bold]labels:[/bold] {config.labels}")
    console.print(f"[bold]suffix:[/bold] {config.suffix!r}")
    console.print(f"[bold]Config:[/bold] [dim]{linemenu_dir}[/dim]")


def cmd_debug_on() -> None:
    """Enable debug logging."""
    from linemenu.utils.debug import reload_config

    config = Config(get_linemenu_dir())
    config.set_debug(True)
    reload_config()
    console.print("Debug mode [green]enabled[/green]")
    console.print(f"[dim]Logging to {config.log_path}[/dim]")


def cmd_debug_off() -> None:
    """Disable debug logging."""
    from linemenu.utils.debug import reload_config

    config = Config(get_linemenu_dir())
    config.set_debug(False)
    reload_config()
    console.print("Debug mode [yellow]disabled[/yellow]")
