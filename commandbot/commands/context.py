"""Shared inputs handed to every command handler."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from commandbot.config import AppConfig
from commandbot.data.upstream_client import UpstreamClient
from commandbot.rendering.attachment import CommandResult


@dataclass(frozen=True)
class CommandSettings:
    """Settings consumed by the handlers."""

    api_url: str
    ipinfo_url: str
    default_color: str
    datetime_format: str

    @classmethod
    def from_config(cls, config: AppConfig) -> "CommandSettings":
        return cls(
            api_url=config.api.base_url,
            ipinfo_url=config.api.ipinfo_url,
            default_color=config.display.default_color,
            datetime_format=config.display.datetime_format,
        )


@dataclass(frozen=True)
class CommandContext:
    client: UpstreamClient
    settings: CommandSettings


CommandHandler = Callable[[CommandContext, Sequence[str]], CommandResult]


def get_arg(args: Sequence[str], index: int, default: str = "") -> str:
    """Return the stripped argument at ``index``, or ``default`` when absent or blank."""
    if index >= len(args):
        return default
    value = (args[index] or "").strip()
    return value or default


__all__ = ["CommandSettings", "CommandContext", "CommandHandler", "get_arg"]
