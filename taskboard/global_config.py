"""Global configuration storage for Taskboard.

Stores user preferences in ~/.taskboard/config.json. The directory can be
moved with the TASKBOARD_HOME environment variable.
"""

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

HOME_ENV_VAR = "TASKBOARD_HOME"


def get_config_dir() -> Path:
    """Get the Taskboard config directory."""
    override = os.environ.get(HOME_ENV_VAR)
    config_dir = Path(override).expanduser() if override else Path.home() / ".taskboard"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


class BoardConfig(BaseModel):
    """User-level settings for the CLI."""

    board_file: Path = Field(default_factory=lambda: get_config_dir() / "board.json")
    log_level: str = "WARNING"
    confirm_done: bool = True  # ask before moving a task into DONE

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


def get_global_config() -> BoardConfig:
    """Load global configuration, falling back to defaults."""
    config_file = get_config_dir() / "config.json"
    if config_file.exists():
        try:
            data = json.loads(config_file.read_text(encoding="utf-8"))
            return BoardConfig(**data)
        except (json.JSONDecodeError, TypeError, ValidationError) as e:
            logger.warning(f"Ignoring invalid config file {config_file}: {e}")
    return BoardConfig()


def save_global_config(config: BoardConfig) -> None:
    """Save global configuration."""
    config_file = get_config_dir() / "config.json"
    config_file.write_text(
        json.dumps(config.model_dump(mode="json"), indent=2),
        encoding="utf-8",
    )
