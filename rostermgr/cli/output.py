"""CLI output helpers shared by commands and the interactive menu."""

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape

from rostermgr.core.models import Character
from rostermgr.operations.results import OperationResult, ResultStatus

from .formatters import format_character_details, format_characters_table


def print_success(console: Console, message: str) -> None:
    """Print success message."""
    console.print(f"[green]✓[/green] {escape(message)}")


def print_error(console: Console, message: str) -> None:
    """Print error message."""
    console.print(f"[red]Error:[/red] {escape(message)}")


def print_warning(console: Console, message: str) -> None:
    """Print warning message."""
    console.print(f"[yellow]{escape(message)}[/yellow]")


def show_characters(
    console: Console,
    characters: Sequence[Character],
    title: str,
    empty_message: str = "No characters found.",
) -> None:
    """Print a table of characters followed by the total."""
    if not characters:
        print_warning(console, empty_message)
        return

    console.print(format_characters_table(characters, title=title))
    console.print(f"Total characters: {len(characters)}")


def show_character(console: Console, character: Character) -> None:
    """Print the details of one character."""
    console.print(format_character_details(character))


def show_result(console: Console, result: OperationResult) -> None:
    """Print the outcome of an add or level-up operation."""
    if result.status == ResultStatus.SUCCESS:
        changes = (result.data or {}).get("changes", [])
        if not changes:
            print_success(console, result.message)
        for change in changes:
            print_success(
                console,
                f"'{change['name']}' has been leveled up from Level "
                f"{change['old_level']} to Level {change['new_level']}!",
            )
    elif result.status == ResultStatus.NOT_FOUND:
        print_warning(console, result.message)
    else:
        print_error(console, result.message)
        for error in result.errors or []:
            console.print(f"  - {escape(error)}")
