"""Main CLI entry point and application setup."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

import click
from click.exceptions import Exit
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from rostermgr import __version__
from rostermgr.core.exceptions import RosterError
from rostermgr.operations import (
    add_character,
    build_character,
    find_character,
    find_characters_by_class,
    level_up,
    list_characters,
)
from rostermgr.storage import BackendSelector, BaseBackend, StorageFormat

from .config import Settings, load_config
from .menu import RosterMenu
from .output import print_warning, show_character, show_characters, show_result


@dataclass
class Context:
    """CLI session state shared by every command."""

    settings: Settings
    selector: BackendSelector
    console: Console
    debug: bool = False

    @property
    def backend(self) -> BaseBackend:
        """The active storage backend."""
        return self.selector.backend


def setup_logging(
    verbose: bool = False, quiet: bool = False, debug: bool = False
) -> None:
    """Configure logging based on CLI flags."""
    if quiet:
        level = logging.WARNING
    elif verbose or debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s"
        if not debug
        else "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_console(no_color: bool = False, width: int | None = None) -> Console:
    """Create Rich console with appropriate settings."""
    return Console(
        no_color=no_color,
        width=width or 120,
        highlight=not no_color,
        color_system=None if no_color else "auto",
    )


class RosterGroup(click.Group):
    """Custom group that handles KeyboardInterrupt and unexpected errors."""

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except KeyboardInterrupt:
            console = getattr(ctx.obj, "console", None) if ctx.obj else None
            if console:
                console.print("[yellow]Interrupted[/yellow]")
            ctx.exit(130)
        except (click.ClickException, click.Abort, Exit, SystemExit):
            raise
        except Exception as e:
            debug = getattr(ctx.obj, "debug", False) if ctx.obj else False
            if debug:
                raise
            console = getattr(ctx.obj, "console", None) if ctx.obj else None
            if console:
                console.print(f"[red]Error:[/red] {escape(str(e))}")
            else:
                click.echo(f"Error: {e}", err=True)
            ctx.exit(1)


@click.group(cls=RosterGroup, invoke_without_command=True)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-error output")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--debug", is_flag=True, help="Enable debug mode with full tracebacks")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--data-dir",
    "-d",
    type=click.Path(path_type=Path),
    help="Override data directory location",
)
@click.option(
    "--format",
    "-f",
    "storage_format",
    type=click.Choice([f.value for f in StorageFormat], case_sensitive=False),
    help="File format to start with",
)
@click.version_option(
    version=__version__, prog_name="rostermgr", message="rostermgr version %(version)s"
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    no_color: bool,
    debug: bool,
    config: Path | None,
    data_dir: Path | None,
    storage_format: str | None,
) -> None:
    """Console RPG character manager.

    Keeps a roster of characters in a CSV or JSON file. Run without a
    command to open the interactive menu.
    """
    setup_logging(verbose=verbose, quiet=quiet, debug=debug)
    console = create_console(no_color=no_color)

    try:
        settings = load_config(
            config, overrides={"data_dir": data_dir, "format": storage_format}
        )
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        selector = BackendSelector(settings.paths(), initial=settings.default_format)
    except (ValueError, OSError) as e:
        if debug:
            raise
        console.print(f"[red]Error initializing application:[/red] {escape(str(e))}")
        ctx.exit(1)

    ctx.obj = Context(
        settings=settings, selector=selector, console=console, debug=debug
    )

    if ctx.invoked_subcommand is None:
        RosterMenu(ctx.obj).run()


@cli.command(name="list")
@click.pass_obj
def list_cmd(obj: Context) -> None:
    """Display all characters."""
    characters = list_characters(obj.backend)
    show_characters(
        obj.console, characters, title=f"All Characters ({obj.selector.label})"
    )


@cli.command()
@click.argument("name")
@click.pass_context
def find(ctx: click.Context, name: str) -> None:
    """Find a character by name (case-insensitive)."""
    obj: Context = ctx.obj
    character = find_character(obj.backend, name)

    if character is None:
        print_warning(obj.console, f"Character '{name}' not found.")
        ctx.exit(1)

    show_character(obj.console, character)


@cli.command(name="class")
@click.argument("class_name")
@click.pass_obj
def class_cmd(obj: Context, class_name: str) -> None:
    """List characters of a class (case-insensitive)."""
    characters = find_characters_by_class(obj.backend, class_name)
    show_characters(
        obj.console,
        characters,
        title=f"{class_name} Characters",
        empty_message=f"No characters of class '{class_name}' found.",
    )


@cli.command()
@click.option("--name", "-n", help="Character name")
@click.option("--class", "class_name", help="Character class")
@click.option("--level", "-l", help="Starting level (defaults to 1 if not a number)")
@click.option("--hp", help="Hit points (defaults to 0 if not a number)")
@click.option("--equipment", "-e", help="Equipment separated by |")
@click.pass_context
def add(
    ctx: click.Context,
    name: str | None,
    class_name: str | None,
    level: str | None,
    hp: str | None,
    equipment: str | None,
) -> None:
    """Add a new character, prompting for missing values."""
    obj: Context = ctx.obj
    console = obj.console

    if name is None:
        name = Prompt.ask("Enter character name", console=console)
    if class_name is None:
        class_name = Prompt.ask("Enter character class", console=console)
    if level is None:
        level = Prompt.ask("Enter character level", console=console)
    if hp is None:
        hp = Prompt.ask("Enter character HP", console=console)
    if equipment is None:
        equipment = Prompt.ask(
            "Enter equipment (separated by |, e.g., sword|shield)", console=console
        )

    character = build_character(name, class_name, level, hp, equipment)
    result = add_character(obj.backend, character)
    show_result(console, result)

    if not result.success:
        ctx.exit(1)


@cli.command(name="level-up")
@click.argument("name")
@click.pass_context
def level_up_cmd(ctx: click.Context, name: str) -> None:
    """Increase a character's level by one."""
    obj: Context = ctx.obj
    result = level_up(obj.backend, name)
    show_result(obj.console, result)

    if not result.success:
        ctx.exit(1)


@cli.command()
@click.option("--no-pause", is_flag=True, help="Do not wait for Enter between commands")
@click.pass_obj
def menu(obj: Context, no_pause: bool) -> None:
    """Open the interactive menu."""
    try:
        RosterMenu(obj, pause=not no_pause).run()
    except RosterError as e:
        if obj.debug:
            raise
        raise click.ClickException(str(e))


def main() -> None:
    """Main entry point for the CLI application."""
    try:
        cli()
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
