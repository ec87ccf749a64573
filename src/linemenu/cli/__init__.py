"""CLI entry point for linemenu.

Uses Typer for command routing with lazy loading of command handlers.
"""

from typing import List, Optional

import typer

__all__ = ["app", "cli_main"]

app = typer.Typer(
    name="linemenu",
    help="Pick an item from a numbered menu",
    no_args_is_help=True,
)


@app.command()
def pick(
    items: List[str] = typer.Argument(..., help="Menu items, in display order"),
    prompt: str = typer.Option("Which item? ", "--prompt", "-p", help="Prompt text"),
    banner: Optional[str] = typer.Option(
        None, "--banner", "-b", help="Printed above the menu"
    ),
    error: str = typer.Option(
        "Please pick one of the listed items.",
        "--error",
        "-e",
        help="Shown when the answer doesn't match an item",
    ),
    repeat: bool = typer.Option(
        True,
        "--repeat/--no-repeat",
        help="Ask again until an item is picked, or print free text and exit 1",
    ),
    labels: Optional[str] = typer.Option(
        None, "--labels", "-l", help="numbers, letters or roman (default from config)"
    ),
    suffix: Optional[str] = typer.Option(
        None, "--suffix", help="Text between label and item (default from config)"
    ),
) -> None:
    """Show a menu and print the picked item."""
    from linemenu.cli.commands import cmd_pick

    cmd_pick(items, prompt, banner, error, repeat, labels, suffix)


@app.command()
def config() -> None:
    """Show the active configuration."""
    from linemenu.cli.commands import cmd_config

    cmd_config()


# Debug subcommand group
debug_app = typer.Typer(help="Debug mode commands")
app.add_typer(debug_app, name="debug")


@debug_app.command("on")
def debug_on() -> None:
    """Enable debug logging."""
    from linemenu.cli.commands import cmd_debug_on

    cmd_debug_on()


@debug_app.command("off")
def debug_off() -> None:
    """Disable debug logging."""
    from linemenu.cli.commands import cmd_debug_off

    cmd_debug_off()


def cli_main() -> None:
    """Entry point for pyproject.toml scripts."""
    app()


if __name__ == "__main__":
    cli_main()
