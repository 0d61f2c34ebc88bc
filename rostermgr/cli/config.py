"""Configuration management for the CLI."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from rostermgr.storage.backends import StorageFormat


def default_data_dir() -> Path:
    """XDG data directory for roster files."""
    xdg_data_home = Path(
        os.environ.get("XDG_DATA_HOME", Path.home() / ".local" / "share")
    )
    return xdg_data_home / "rostermgr"


DEFAULTS: dict[str, Any] = {
    "format": StorageFormat.TABULAR.value,
    "files": {fmt.value: fmt.default_filename for fmt in StorageFormat},
}


class Config:
    """Configuration management for the CLI application."""

    @staticmethod
    def from_file(path: Path) -> dict[str, Any]:
        """Load configuration from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file: {e}")
        except OSError as e:
            raise ValueError(f"Error reading config file: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")
        return data

    @staticmethod
    def get_config_paths() -> list[Path]:
        """Get the default configuration file paths to check."""
        paths = []

        # User config
        xdg_config_home = Path(
            os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
        )
        paths.append(xdg_config_home / "rostermgr" / "config.yaml")

        # Project config
        paths.append(Path(".rostermgr.yaml"))
        paths.append(Path("rostermgr.yaml"))

        return paths

    @staticmethod
    def merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
        """Merge multiple configuration dictionaries."""
        result: dict[str, Any] = {}
        for config in configs:
            result = _deep_merge(result, config)
        return result


@dataclass
class Settings:
    """Resolved runtime settings."""

    data_dir: Path = field(default_factory=default_data_dir)
    default_format: StorageFormat = StorageFormat.TABULAR
    files: dict[str, str] = field(default_factory=lambda: dict(DEFAULTS["files"]))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Settings":
        """Build settings from a merged configuration mapping."""
        merged = Config.merge_configs(DEFAULTS, data)

        try:
            default_format = StorageFormat(str(merged["format"]).lower())
        except ValueError:
            choices = ", ".join(f.value for f in StorageFormat)
            raise ValueError(
                f"Unknown storage format '{merged['format']}' (choose from {choices})"
            )

        files = merged["files"]
        if not isinstance(files, dict):
            raise ValueError(
                f"Config key 'files' must map formats to file names, got {files!r}"
            )

        data_dir = merged.get("data_dir")
        return cls(
            data_dir=Path(data_dir).expanduser() if data_dir else default_data_dir(),
            default_format=default_format,
            files={str(k): str(v) for k, v in files.items()},
        )

    def path_for(self, storage_format: StorageFormat) -> Path:
        """Well-known file location for a format."""
        filename = Path(
            self.files.get(storage_format.value, storage_format.default_filename)
        ).expanduser()
        if filename.is_absolute():
            return filename
        return self.data_dir / filename

    def paths(self) -> dict[StorageFormat, Path]:
        """File location of every format."""
        return {fmt: self.path_for(fmt) for fmt in StorageFormat}


def load_config(
    config_file: Path | None = None, overrides: dict[str, Any] | None = None
) -> Settings:
    """Load settings from files, environment variables and CLI overrides.

    Later sources win: default paths, ``config_file``, environment,
    ``overrides``.
    """
    config: dict[str, Any] = {}

    for path in Config.get_config_paths():
        if path.exists():
            config = Config.merge_configs(config, Config.from_file(path))

    if config_file:
        config = Config.merge_configs(config, Config.from_file(config_file))

    env_overrides = {}
    if data_dir := os.environ.get("ROSTERMGR_DATA_DIR"):
        env_overrides["data_dir"] = data_dir
    if storage_format := os.environ.get("ROSTERMGR_FORMAT"):
        env_overrides["format"] = storage_format

    config = Config.merge_configs(config, env_overrides)
    if overrides:
        config = Config.merge_configs(
            config, {k: v for k, v in overrides.items() if v is not None}
        )

    return Settings.from_dict(config)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result
