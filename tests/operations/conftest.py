"""Fixtures for roster operation tests."""

import pytest

from rostermgr.core.models import Character
from rostermgr.storage.backends import StorageFormat, create_backend


@pytest.fixture(
    params=[StorageFormat.TABULAR, StorageFormat.DOCUMENT], ids=["csv", "json"]
)
def backend(request, tmp_path):
    """Backend of every format over a fresh file."""
    storage_format = request.param
    return create_backend(storage_format, tmp_path / storage_format.default_filename)


@pytest.fixture
def roster():
    return [
        Character(
            name="Thrain", class_="Fighter", level=3, hp=25, equipment=("axe",)
        ),
        Character(name="Elowen", class_="Wizard", level=5, hp=14),
        Character(name="Pip", class_="Rogue", level=2, hp=12),
        Character(name="Sable", class_="wizard", level=1, hp=8),
    ]
