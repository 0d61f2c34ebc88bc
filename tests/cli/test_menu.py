"""Tests for the interactive menu."""

import io

from rich.console import Console

from rostermgr.cli.config import Settings
from rostermgr.cli.main import Context
from rostermgr.cli.menu import RosterMenu
from rostermgr.core.exceptions import RosterError
from rostermgr.storage import BackendSelector


def run_menu(cli_runner, keys):
    """Drive the menu without pauses, one line per answer."""
    return cli_runner.invoke(
        ["menu", "--no-pause"], input="".join(f"{k}\n" for k in keys)
    )


class TestMenuLoop:
    def test_exit(self, cli_runner):
        result = run_menu(cli_runner, ["0"])

        assert result.exit_code == 0
        assert "Current format: CSV" in result.output
        assert "Goodbye! Thanks for playing." in result.output

    def test_end_of_input_exits(self, cli_runner):
        result = cli_runner.invoke(["menu", "--no-pause"], input="")

        assert result.exit_code == 0
        assert "Goodbye" in result.output

    def test_invalid_choice(self, cli_runner):
        result = run_menu(cli_runner, ["9", "0"])

        assert "Invalid choice. Please try again." in result.output
        assert "Goodbye" in result.output

    def test_default_command_runs_menu_with_pause(self, cli_runner, seeded_csv):
        result = cli_runner.invoke([], input="1\n\n0\n")

        assert result.exit_code == 0
        assert "Thrain" in result.output
        assert "Press Enter to continue..." in result.output
        assert "Goodbye" in result.output

    def test_error_is_reported_and_loop_continues(self, cli_runner, monkeypatch):
        def failing_list(backend):
            raise RosterError("disk on fire")

        monkeypatch.setattr("rostermgr.cli.menu.list_characters", failing_list)

        result = run_menu(cli_runner, ["1", "0"])

        assert result.exit_code == 0
        assert "Error: disk on fire" in result.output
        assert "Goodbye" in result.output


class TestMenuCommands:
    def test_display_all(self, cli_runner, seeded_csv):
        result = run_menu(cli_runner, ["1", "0"])

        assert "Elowen" in result.output
        assert "Total characters: 3" in result.output

    def test_display_all_empty(self, cli_runner):
        result = run_menu(cli_runner, ["1", "0"])

        assert "No characters found." in result.output

    def test_find_by_name(self, cli_runner, seeded_csv):
        result = run_menu(cli_runner, ["2", "thrain", "0"])

        assert "Character found:" in result.output
        assert "Fighter" in result.output

    def test_find_by_name_missing(self, cli_runner, seeded_csv):
        result = run_menu(cli_runner, ["2", "Ghost", "0"])

        assert "Character 'Ghost' not found." in result.output

    def test_find_by_name_blank(self, cli_runner, seeded_csv):
        result = run_menu(cli_runner, ["2", "", "0"])

        assert "Invalid name entered." in result.output

    def test_find_by_class(self, cli_runner, seeded_csv):
        result = run_menu(cli_runner, ["3", "Wizard", "0"])

        assert "Elowen" in result.output
        assert "Sable" in result.output
        assert "Total characters: 2" in result.output

    def test_add(self, cli_runner, csv_path):
        result = run_menu(cli_runner, ["4", "Rook", "Fighter", "1", "10", "axe", "0"])

        assert "Character 'Rook' has been added" in result.output
        assert csv_path.read_text(encoding="utf-8").splitlines() == [
            "name,class,level,hitPoints,equipment",
            "Rook,Fighter,1,10,axe",
        ]

    def test_add_coerces_numbers(self, cli_runner, csv_path):
        run_menu(cli_runner, ["4", "Rook", "Fighter", "one", "ten", "", "0"])

        assert csv_path.read_text(encoding="utf-8").splitlines()[1] == (
            "Rook,Fighter,1,0,"
        )

    def test_level_up(self, cli_runner, seeded_csv):
        result = run_menu(cli_runner, ["5", "THRAIN", "0"])

        assert "from Level 3 to Level 4" in result.output
        assert "Thrain,Fighter,4,25,axe|shield" in seeded_csv.read_text(
            encoding="utf-8"
        )

    def test_level_up_missing(self, cli_runner, seeded_csv):
        result = run_menu(cli_runner, ["5", "Ghost", "0"])

        assert "Character 'Ghost' not found" in result.output


class TestFormatSwitch:
    def test_cancel_keeps_format(self, cli_runner, json_path):
        result = run_menu(cli_runner, ["6", "0", "0"])

        assert "File format unchanged (CSV)" in result.output
        assert not json_path.exists()

    def test_unrecognized_keeps_format(self, cli_runner):
        result = run_menu(cli_runner, ["6", "xml", "0"])

        assert "File format unchanged (CSV)" in result.output

    def test_switch_to_json(self, cli_runner, csv_path, json_path):
        result = run_menu(
            cli_runner,
            ["6", "2", "4", "Rook", "Fighter", "1", "10", "axe", "0"],
        )

        assert "File format changed to JSON" in result.output
        assert "Current format: JSON" in result.output
        assert json_path.exists()
        assert not csv_path.exists()

    def test_switch_does_not_carry_data(self, cli_runner, seeded_csv):
        result = run_menu(cli_runner, ["6", "json", "1", "0"])

        assert "No characters found." in result.output

    def test_switch_back_to_csv(self, cli_runner, seeded_csv):
        result = run_menu(cli_runner, ["6", "2", "6", "1", "1", "0"])

        assert "File format changed to CSV" in result.output
        assert "Thrain" in result.output


class TestRosterMenuDirect:
    """Drive RosterMenu without the CLI wrapper."""

    def test_handlers_use_current_backend(self, tmp_path, monkeypatch):
        settings = Settings(data_dir=tmp_path)
        selector = BackendSelector(settings.paths())
        output = io.StringIO()
        console = Console(file=output, width=120, color_system=None)
        context = Context(settings=settings, selector=selector, console=console)

        answers = iter(["6", "2", "0"])
        monkeypatch.setattr(
            "rostermgr.cli.menu.Prompt.ask", lambda *args, **kwargs: next(answers)
        )

        RosterMenu(context, pause=False).run()

        assert context.backend is selector.backend
        assert selector.label == "JSON"
        assert "File format changed to JSON" in output.getvalue()
