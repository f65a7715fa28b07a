"""Run a single chat command and print the attachment payload as JSON."""

from __future__ import annotations

import argparse
import json

from commandbot.commands import CommandContext, CommandDispatcher, CommandSettings
from commandbot.config import load_config
from commandbot.data.upstream_client import UpstreamClient, UpstreamClientError
from commandbot.logger import logger, setup_logging
from commandbot.rendering.attachment import CommandFailure


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("command", help="Command name, e.g. bus, haze, weather, ipinfo, socialstats")
    parser.add_argument("args", nargs="*", help="Command arguments")
    parser.add_argument("--config", default="config/config.yaml", help="Path to the YAML config")
    options = parser.parse_args()

    config = load_config(options.config)
    setup_logging(config.log)

    context = CommandContext(
        client=UpstreamClient(timeout_seconds=config.api.timeout_seconds),
        settings=CommandSettings.from_config(config),
    )
    dispatcher = CommandDispatcher(context)

    try:
        result = dispatcher.dispatch(options.command, options.args)
    except UpstreamClientError as exc:
        logger.error("Command %s failed upstream: %s", options.command, exc)
        print(json.dumps({"text": str(exc)}, indent=2))
        return 2

    print(json.dumps(result.to_payload(), indent=2, ensure_ascii=False))
    return 1 if isinstance(result, CommandFailure) else 0


if __name__ == "__main__":
    raise SystemExit(main())
