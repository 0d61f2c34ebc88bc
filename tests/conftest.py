"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch, tmp_path_factory):
    """Isolate environment variables and config lookups for each test.

    Keeps user config files, data directories and ROSTERMGR_* variables
    from leaking into tests.
    """
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(home / "data"))
    monkeypatch.delenv("ROSTERMGR_DATA_DIR", raising=False)
    monkeypatch.delenv("ROSTERMGR_FORMAT", raising=False)
    monkeypatch.chdir(home)
    yield
