"""Configuration file support for todo-app."""

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger(__name__)

ENV_PREFIX = "TODOAPP"
CONFIG_FILE = Path.home() / ".config" / "todo-app" / "todo-app.toml"

DEFAULT_DATA_FILE = "tasks.json"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FILE_NAME = "todo.log"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def default_data_dir() -> Path:
    """Per-user data directory: %APPDATA%\\TodoApp on Windows, ~/.todoapp elsewhere."""
    if sys.platform == "win32":
        appdata = os.getenv("APPDATA")
        base = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
        return base / "TodoApp"
    return Path.home() / ".todoapp"


@dataclass
class Config:
    """Application configuration."""

    data_dir: Path = field(default_factory=default_data_dir)
    data_file: str = DEFAULT_DATA_FILE
    log_level: str = DEFAULT_LOG_LEVEL
    color: bool = True

    @property
    def tasks_file(self) -> Path:
        return self.data_dir / self.data_file

    @property
    def log_file(self) -> Path:
        return self.data_dir / LOG_FILE_NAME


def load_config(path: Path | None = None) -> Config:
    """Load configuration from the config file, then apply env overrides.

    The file is ``path`` if given, else ``$TODOAPP_CONFIG``, else
    ``CONFIG_FILE``. Defaults are used if:
    - The config file doesn't exist
    - The config file has invalid TOML syntax or cannot be read

    Returns:
        Config object with loaded or default values.
    """
    if path is None:
        env_path = os.getenv(_k("CONFIG"))
        path = Path(env_path).expanduser() if env_path else CONFIG_FILE

    config = Config()
    if path.exists():
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            logger.warning("Ignoring config file %s: %s", path, exc)
        else:
            config = _parse_config(data)

    return _apply_env(config)


def _parse_config(data: dict[str, Any]) -> Config:
    """Parse configuration from a dictionary.

    Args:
        data: Dictionary from parsed TOML file.

    Returns:
        Config object with parsed values. Keys with the wrong type are ignored.
    """
    config = Config()

    if "data_dir" in data and isinstance(data["data_dir"], str) and data["data_dir"].strip():
        config.data_dir = Path(data["data_dir"]).expanduser()

    if "data_file" in data and isinstance(data["data_file"], str) and data["data_file"].strip():
        config.data_file = data["data_file"]

    if "log_level" in data and isinstance(data["log_level"], str):
        config.log_level = data["log_level"].upper()

    if "color" in data and isinstance(data["color"], bool):
        config.color = data["color"]

    return config


def _apply_env(config: Config) -> Config:
    data_dir = os.getenv(_k("DATA_DIR"))
    if data_dir is not None and data_dir.strip():
        config.data_dir = Path(data_dir).expanduser()

    log_level = os.getenv(_k("LOG_LEVEL"))
    if log_level is not None and log_level.strip():
        config.log_level = log_level.strip().upper()

    return config
