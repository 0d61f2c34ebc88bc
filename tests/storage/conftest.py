"""Shared fixtures for storage tests."""

import pytest

from rostermgr.core.models import Character


@pytest.fixture
def temp_dir(tmp_path):
    """Temporary directory for roster files."""
    return tmp_path


@pytest.fixture
def sample_character():
    """A single valid character."""
    return Character(
        name="Rook",
        class_="Fighter",
        level=1,
        hp=10,
        equipment=("axe",),
    )


@pytest.fixture
def sample_characters():
    """Small mixed roster with repeated classes in different casing."""
    return [
        Character(
            name="Thrain",
            class_="Fighter",
            level=3,
            hp=25,
            equipment=("axe", "shield"),
        ),
        Character(
            name="Elowen",
            class_="Wizard",
            level=5,
            hp=14,
            equipment=("staff", "spellbook"),
        ),
        Character(name="Pip", class_="Rogue", level=2, hp=12, equipment=("dagger",)),
        Character(name="Morgath", class_="WIZARD", level=7, hp=20),
        Character(
            name="Sable",
            class_="wizard",
            level=1,
            hp=8,
            equipment=("wand", "cloak", "potion"),
        ),
    ]
