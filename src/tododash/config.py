"""Configuration management for tododash."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

TODODASH_HOME = Path(os.environ.get("TODODASH_HOME", Path.home() / "tododash"))
CONFIG_FILE = TODODASH_HOME / "config" / "tododash.conf"
DATA_DIR = TODODASH_HOME / "data"
VIEW_CONFIG_FILE = DATA_DIR / "view_config.json"

DEFAULT_API_BASE = "https://api.todoist.com/api/v1"
GOAL_FILTER = "@goal"
DATED_GOAL_FILTER = "@goal & !no date"
WORK_FILTER = "@task"


@dataclass
class Config:
    """tododash configuration."""

    todoist_api_token: str = ""
    api_base: str = DEFAULT_API_BASE
    goal_filter: str = GOAL_FILTER
    dated_goal_filter: str = DATED_GOAL_FILTER
    work_filter: str = WORK_FILTER
    refresh_minutes: int = 15
    request_timeout: float = 30.0


def _unquote(value: str) -> str:
    """Strip matching quotes, or an inline comment from an unquoted value."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def _parse_number(key: str, value: str, cast, default):
    try:
        return cast(value)
    except ValueError:
        logger.warning(f"Ignoring invalid {key.upper()} value: {value!r}")
        return default


def load_config(path: Path | None = None) -> Config:
    """Load configuration from tododash.conf, then apply env overrides."""
    config = Config()
    path = path or CONFIG_FILE

    if path.exists():
        for line in path.read_text().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if "=" not in line:
                continue

            key, _, value = line.partition("=")
            key = key.strip().lower()
            value = _unquote(value.strip())

            match key:
                case "todoist_api_token":
                    config.todoist_api_token = value
                case "api_base":
                    config.api_base = value.rstrip("/")
                case "goal_filter":
                    config.goal_filter = value
                case "dated_goal_filter":
                    config.dated_goal_filter = value
                case "work_filter":
                    config.work_filter = value
                case "refresh_minutes":
                    config.refresh_minutes = _parse_number(key, value, int, config.refresh_minutes)
                case "request_timeout":
                    config.request_timeout = _parse_number(key, value, float, config.request_timeout)
                case _:
                    logger.debug(f"Unknown config key: {key}")

    env_token = os.environ.get("TODOIST_API_TOKEN")
    if env_token:
        config.todoist_api_token = env_token

    return config
