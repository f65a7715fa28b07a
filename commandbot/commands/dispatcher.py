"""Command registry and dispatcher."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from concurrent.futures import Future, ThreadPoolExecutor
import threading

from commandbot.commands.bus import bus
from commandbot.commands.context import CommandContext, CommandHandler
from commandbot.commands.haze import haze
from commandbot.commands.ipinfo import ipinfo
from commandbot.commands.socialstats import socialstats
from commandbot.commands.weather import weather
from commandbot.logger import logger
from commandbot.rendering.attachment import CommandFailure, CommandResult

DEFAULT_HANDLERS: dict[str, CommandHandler] = {
    "bus": bus,
    "haze": haze,
    "weather": weather,
    "ipinfo": ipinfo,
    "socialstats": socialstats,
}


class CommandDispatcher:
    """Routes a command name and its arguments to the matching handler."""

    def __init__(
        self,
        context: CommandContext,
        handlers: Mapping[str, CommandHandler] | None = None,
        max_workers: int = 4,
    ) -> None:
        self._context = context
        self._handlers: dict[str, CommandHandler] = {}
        self._max_workers = max_workers
        self._executor: ThreadPoolExecutor | None = None
        self._executor_lock = threading.Lock()
        for name, handler in (handlers if handlers is not None else DEFAULT_HANDLERS).items():
            self.register(name, handler)

    def register(self, name: str, handler: CommandHandler) -> None:
        self._handlers[name.strip().lower()] = handler

    def commands(self) -> list[str]:
        """Registered command names, sorted."""
        return sorted(self._handlers)

    def dispatch(self, name: str, args: Sequence[str] = ()) -> CommandResult:
        """Run one command.

        Unknown commands and handler failures come back as CommandFailure;
        UpstreamClientError propagates to the caller.
        """
        key = (name or "").strip().lower()
        handler = self._handlers.get(key)
        if handler is None:
            logger.info("Unknown command: %s", name)
            return CommandFailure(f"Unknown command: {name}")

        logger.info("Dispatching %s %s", key, list(args))
        result = handler(self._context, tuple(args))
        if isinstance(result, CommandFailure):
            logger.info("Command %s failed: %s", key, result.message)
        return result

    def submit(self, name: str, args: Sequence[str] = ()) -> Future[CommandResult]:
        """Run ``dispatch`` on a worker thread and return its future."""
        with self._executor_lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self._max_workers, thread_name_prefix="commandbot"
                )
            return self._executor.submit(self.dispatch, name, tuple(args))

    def close(self) -> None:
        """Shut down the worker pool, waiting for in-flight commands."""
        with self._executor_lock:
            executor = self._executor
            self._executor = None
        if executor is not None:
            executor.shutdown(wait=True)


__all__ = ["DEFAULT_HANDLERS", "CommandDispatcher"]
