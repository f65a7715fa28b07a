"""Chat command handlers and their dispatcher."""

from commandbot.commands.context import CommandContext, CommandSettings
from commandbot.commands.dispatcher import DEFAULT_HANDLERS, CommandDispatcher

__all__ = ["CommandContext", "CommandSettings", "DEFAULT_HANDLERS", "CommandDispatcher"]
