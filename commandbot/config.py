"""Configuration loader for the chat command bot."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Any

from dotenv import load_dotenv
import yaml


@dataclass(frozen=True)
class ApiConfig:
    """Upstream API configuration."""

    base_url: str
    ipinfo_url: str
    timeout_seconds: int


@dataclass(frozen=True)
class DisplayConfig:
    """Defaults applied when rendering attachments."""

    default_color: str
    datetime_format: str


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str
    log_dir: str


@dataclass(frozen=True)
class AppConfig:
    """Top-level application configuration."""

    api: ApiConfig
    display: DisplayConfig
    log: LoggingConfig


def _require_key(mapping: dict[str, Any], key: str, context: str) -> Any:
    if key not in mapping:
        raise ValueError(f"Missing required key '{key}' in {context} config")
    return mapping[key]


def _require_section(data: dict[str, Any], key: str) -> dict[str, Any]:
    section = _require_key(data, key, key)
    if not isinstance(section, dict):
        raise ValueError(f"'{key}' config must be a mapping")
    return section


def load_config(path: str = "config/config.yaml") -> AppConfig:
    """Load application configuration from a YAML file."""
    load_dotenv()
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except FileNotFoundError as exc:
        raise ValueError(f"Config file not found: {path}") from exc

    if not isinstance(data, dict):
        raise ValueError("Config file must contain a mapping at the top level")

    api_section = _require_section(data, "api")
    display_section = _require_section(data, "display")
    logging_section = _require_section(data, "logging")

    base_url = os.environ.get("COMMANDBOT_API_URL") or _require_key(api_section, "base_url", "api")
    ipinfo_url = os.environ.get("COMMANDBOT_IPINFO_URL") or _require_key(
        api_section, "ipinfo_url", "api"
    )

    api = ApiConfig(
        base_url=str(base_url).rstrip("/"),
        ipinfo_url=str(ipinfo_url).rstrip("/"),
        timeout_seconds=int(api_section.get("timeout_seconds", 10)),
    )

    display = DisplayConfig(
        default_color=_require_key(display_section, "default_color", "display"),
        datetime_format=_require_key(display_section, "datetime_format", "display"),
    )

    logging = LoggingConfig(
        level=_require_key(logging_section, "level", "logging"),
        log_dir=_require_key(logging_section, "log_dir", "logging"),
    )

    return AppConfig(api=api, display=display, log=logging)
