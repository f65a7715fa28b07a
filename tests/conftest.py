from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from commandbot.commands.context import CommandContext, CommandSettings

API_URL = "https://api.example.test/v1"
IPINFO_URL = "http://ipinfo.example.test"
DEFAULT_COLOR = "#28a745"


@pytest.fixture()
def settings() -> CommandSettings:
    return CommandSettings(
        api_url=API_URL,
        ipinfo_url=IPINFO_URL,
        default_color=DEFAULT_COLOR,
        datetime_format="%d %b %Y %H:%M",
    )


@pytest.fixture()
def make_context(settings: CommandSettings):
    def _make(body: Any = None) -> CommandContext:
        client = MagicMock()
        client.get_json.return_value = body
        return CommandContext(client=client, settings=settings)

    return _make
