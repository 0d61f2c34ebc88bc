"""Interactive text menu over the active storage backend."""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from rich.prompt import Prompt

from rostermgr.core.exceptions import RosterError
from rostermgr.operations import (
    add_character,
    build_character,
    find_character,
    find_characters_by_class,
    level_up,
    list_characters,
)

from .output import (
    print_error,
    print_success,
    print_warning,
    show_character,
    show_characters,
    show_result,
)

if TYPE_CHECKING:
    from .main import Context

logger = logging.getLogger(__name__)

MENU_OPTIONS = [
    ("1", "Display All Characters"),
    ("2", "Find Character"),
    ("3", "Find Characters by Class"),
    ("4", "Add New Character"),
    ("5", "Level Up Character"),
    ("6", "Change File Format"),
    ("0", "Exit"),
]


class RosterMenu:
    """Menu loop that dispatches each choice to a command handler.

    The backend handle is always taken from the session's selector, so a
    format switch is picked up by the next command.
    """

    def __init__(self, context: "Context", pause: bool = True):
        self.context = context
        self.console = context.console
        self.pause = pause
        self.handlers: dict[str, Callable[[], None]] = {
            "1": self.display_all,
            "2": self.find_by_name,
            "3": self.find_by_class,
            "4": self.add,
            "5": self.level_up,
            "6": self.change_format,
        }

    def ask(self, prompt: str, default: str | None = None) -> str:
        """Prompt for a line of text."""
        if default is None:
            return Prompt.ask(prompt, console=self.console)
        return Prompt.ask(prompt, console=self.console, default=default)

    def run(self) -> None:
        """Run until the operator exits or input ends."""
        self.console.print("[bold]=== Console RPG Character Manager ===[/bold]")

        while True:
            self.show_menu()
            try:
                choice = self.ask("\nEnter your choice").strip()
            except EOFError:
                break

            if choice == "0":
                break

            handler = self.handlers.get(choice)
            if handler is None:
                print_warning(self.console, "Invalid choice. Please try again.")
            else:
                try:
                    handler()
                except RosterError as e:
                    logger.debug(f"Command {choice} failed: {e}")
                    print_error(self.console, str(e))
                except EOFError:
                    break

            if self.pause:
                try:
                    self.console.input("\nPress Enter to continue...")
                except EOFError:
                    break
                self.console.clear()

        self.console.print("\nGoodbye! Thanks for playing.")

    def show_menu(self) -> None:
        """Print the menu with the active format."""
        self.console.print(
            f"\nCurrent format: [cyan]{self.context.selector.label}[/cyan]"
        )
        self.console.print("What would you like to do?")
        for key, description in MENU_OPTIONS:
            self.console.print(f"{key}. {description}")

    def display_all(self) -> None:
        characters = list_characters(self.context.backend)
        show_characters(self.console, characters, title="All Characters")

    def find_by_name(self) -> None:
        name = self.ask("Enter character name to find").strip()
        if not name:
            print_warning(self.console, "Invalid name entered.")
            return

        character = find_character(self.context.backend, name)
        if character is None:
            print_warning(self.console, f"Character '{name}' not found.")
            return

        self.console.print("\nCharacter found:")
        show_character(self.console, character)

    def find_by_class(self) -> None:
        class_name = self.ask("Enter class to search for").strip()
        if not class_name:
            print_warning(self.console, "Invalid class entered.")
            return

        characters = find_characters_by_class(self.context.backend, class_name)
        show_characters(
            self.console,
            characters,
            title=f"{class_name} Characters",
            empty_message=f"No characters of class '{class_name}' found.",
        )

    def add(self) -> None:
        name = self.ask("Enter character name")
        class_name = self.ask("Enter character class")
        level = self.ask("Enter character level")
        hp = self.ask("Enter character HP")
        equipment = self.ask("Enter equipment (separated by |, e.g., sword|shield)")

        character = build_character(name, class_name, level, hp, equipment)
        show_result(self.console, add_character(self.context.backend, character))

    def level_up(self) -> None:
        name = self.ask("Enter character name to level up").strip()
        if not name:
            print_warning(self.console, "Invalid name entered.")
            return

        show_result(self.console, level_up(self.context.backend, name))

    def change_format(self) -> None:
        """Switch the active backend; cancel keeps the current one."""
        selector = self.context.selector
        self.console.print(f"Current format: {selector.label}")
        self.console.print("1. CSV\n2. JSON\n0. Cancel")
        token = self.ask("Select file format", default="0")

        if selector.switch(token):
            print_success(self.console, f"File format changed to {selector.label}")
        else:
            print_warning(self.console, f"File format unchanged ({selector.label})")
