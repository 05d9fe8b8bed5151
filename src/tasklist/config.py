"""Configuration management for tasklist."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

TASKLIST_HOME = Path(os.environ.get("TASKLIST_HOME", Path.home() / ".tasklist"))
CONFIG_FILE = TASKLIST_HOME / "tasklist.conf"


@dataclass
class Config:
    """tasklist configuration."""

    tasks_file: str = "tasklist.json"
    # Due tags are computed against today's date in this zone.
    timezone: str = "UTC"

    @property
    def tasks_path(self) -> Path:
        return Path(self.tasks_file).expanduser()


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from an unquoted value."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from tasklist.conf, then apply environment overrides."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if config_file.exists():
        for line in config_file.read_text().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if "=" not in line:
                continue

            key, _, value = line.partition("=")
            key = key.strip().lower()
            value = _unquote(value.strip())

            match key:
                case "tasks_file":
                    config.tasks_file = value
                case "timezone":
                    try:
                        ZoneInfo(value)
                        config.timezone = value
                    except (ZoneInfoNotFoundError, ValueError):
                        logger.warning(f"Unknown TIMEZONE {value!r}, using {config.timezone}")

    if os.environ.get("TASKLIST_FILE"):
        config.tasks_file = os.environ["TASKLIST_FILE"]

    return config
