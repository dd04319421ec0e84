"""Configuration management for Taskbook."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

TASKBOOK_HOME = Path(os.environ.get("TASKBOOK_HOME", Path.home() / "taskbook"))
CONFIG_FILE = TASKBOOK_HOME / "config" / "taskbook.conf"
DATA_DIR = TASKBOOK_HOME / "data"


@dataclass
class Config:
    """Taskbook configuration."""

    tasks_file: str = field(default_factory=lambda: str(DATA_DIR / "tasks.json"))
    log_level: str = "WARNING"
    # Category level used by the CLI when --level is omitted
    default_category_level: int = 1


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from an unquoted value."""
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from taskbook.conf file."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if not config_file.exists():
        return config

    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            logger.warning(f"Ignoring malformed config line: {line}")
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "tasks_file":
                config.tasks_file = value
            case "log_level":
                if value.upper() in logging.getLevelNamesMapping():
                    config.log_level = value.upper()
                else:
                    logger.warning(f"Invalid LOG_LEVEL: {value}")
            case "default_category_level":
                try:
                    config.default_category_level = int(value)
                except ValueError:
                    logger.warning(f"Invalid DEFAULT_CATEGORY_LEVEL: {value}")
            case _:
                logger.debug(f"Ignoring unknown config key: {key}")

    return config
