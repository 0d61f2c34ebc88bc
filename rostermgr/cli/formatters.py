"""Rich formatting for characters."""

from collections.abc import Sequence

from rich.box import ROUNDED
from rich.markup import escape
from rich.table import Table

from rostermgr.core.models import Character


def format_characters_table(
    characters: Sequence[Character],
    title: str | None = None,
) -> Table:
    """Format characters as a Rich table.

    Args:
        characters: Characters to format
        title: Table title

    Returns:
        Rich Table object
    """
    table = Table(
        title=title,
        box=ROUNDED,
        show_header=True,
        header_style="bold cyan",
        title_style="bold",
        row_styles=["none", "dim"],
    )

    table.add_column("Name", style="cyan")
    table.add_column("Class", style="magenta")
    table.add_column("Level", style="yellow", justify="right")
    table.add_column("HP", style="green", justify="right")
    table.add_column("Equipment", overflow="fold")

    for character in characters:
        table.add_row(
            escape(character.name),
            escape(character.class_),
            str(character.level),
            str(character.hp),
            escape(", ".join(character.equipment)),
        )

    return table


def format_character_details(character: Character) -> str:
    """Format one character as labelled lines of console markup."""
    lines = [
        f"[bold]Name:[/bold] {escape(character.name)}",
        f"[bold]Class:[/bold] {escape(character.class_)}",
        f"[bold]Level:[/bold] {character.level}",
        f"[bold]HP:[/bold] {character.hp}",
        f"[bold]Equipment:[/bold] {escape(', '.join(character.equipment))}",
    ]
    return "\n".join(lines)
