"""
Configuration Module - Settings from .env, environment and CLI flags

Precedence (highest first): command-line flags, environment variables
(a local .env file is loaded first), built-in defaults.
"""
import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, model_validator

DEFAULT_REGION = "eu-west-1"


def _default_filters_path() -> Path:
    return Path.home() / ".config" / "lumberjack" / "filters.json"


def _default_log_dir() -> Path:
    return Path.home() / ".local" / "state" / "lumberjack"


class Settings(BaseModel):
    """Runtime settings for the application"""
    region: str = DEFAULT_REGION
    profile: Optional[str] = None
    poll_interval: float = Field(default=3.0, gt=0)
    max_lines: int = Field(default=2000, gt=0)
    evict_lines: int = Field(default=500, gt=0)
    filters_path: Path = Field(default_factory=_default_filters_path)
    log_dir: Path = Field(default_factory=_default_log_dir)
    log_level: str = "INFO"

    @model_validator(mode="after")
    def _check_eviction(self) -> "Settings":
        if self.evict_lines > self.max_lines:
            raise ValueError("evict_lines must not exceed max_lines")
        return self


ENV_KEYS = {
    "poll_interval": "LUMBERJACK_POLL_INTERVAL",
    "max_lines": "LUMBERJACK_MAX_LINES",
    "evict_lines": "LUMBERJACK_EVICT_LINES",
    "filters_path": "LUMBERJACK_FILTERS_PATH",
    "log_dir": "LUMBERJACK_LOG_DIR",
    "log_level": "LUMBERJACK_LOG_LEVEL",
}


def load_settings(
    region: Optional[str] = None,
    profile: Optional[str] = None,
    poll_interval: Optional[float] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """
    Build settings from the environment, overridden by explicit arguments

    Args:
        region: --region flag value
        profile: --profile flag value
        poll_interval: --poll-interval flag value
        environ: Environment to read (defaults to os.environ after load_dotenv)

    Returns:
        Validated Settings

    Raises:
        pydantic.ValidationError: If a value is malformed
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    values = {}
    env_region = environ.get("AWS_REGION") or environ.get("AWS_DEFAULT_REGION")
    if env_region:
        values["region"] = env_region
    if environ.get("AWS_PROFILE"):
        values["profile"] = environ["AWS_PROFILE"]

    for field_name, key in ENV_KEYS.items():
        if environ.get(key):
            values[field_name] = environ[key]

    if region:
        values["region"] = region
    if profile:
        values["profile"] = profile
    if poll_interval is not None:
        values["poll_interval"] = poll_interval

    return Settings(**values)
