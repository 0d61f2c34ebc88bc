"""Pytest configuration and fixtures for CLI tests.

Every invocation runs against an isolated data directory.
"""

import pytest
from click.testing import CliRunner

from rostermgr.cli.main import cli


@pytest.fixture
def data_dir(tmp_path):
    """Isolated data directory for roster files."""
    return tmp_path / "data"


@pytest.fixture
def csv_path(data_dir):
    return data_dir / "characters.csv"


@pytest.fixture
def json_path(data_dir):
    return data_dir / "characters.json"


class RosterRunner:
    """CliRunner wrapper that always points at the test data directory."""

    def __init__(self, data_dir):
        self.runner = CliRunner()
        self.data_dir = data_dir

    def invoke(self, args, input=None, **kwargs):
        return self.runner.invoke(
            cli,
            ["--no-color", "--data-dir", str(self.data_dir), *args],
            input=input,
            **kwargs,
        )


@pytest.fixture
def cli_runner(data_dir):
    """Runner bound to the isolated data directory."""
    return RosterRunner(data_dir)


@pytest.fixture
def seeded_csv(data_dir, csv_path):
    """CSV roster with three characters."""
    data_dir.mkdir(parents=True, exist_ok=True)
    csv_path.write_text(
        "name,class,level,hitPoints,equipment\n"
        "Thrain,Fighter,3,25,axe|shield\n"
        "Elowen,Wizard,5,14,staff\n"
        "Sable,wizard,1,8,wand|cloak\n",
        encoding="utf-8",
    )
    return csv_path
