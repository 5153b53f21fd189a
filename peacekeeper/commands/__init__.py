"""
Peacekeeper - Commands Package
==============================

Slash command handlers and their registration.

DESIGN:
    Each command is a CommandHandler registered by name in a
    CommandRegistry. To add a new command:
    1. Create new_command.py with a CommandHandler subclass
    2. Add an instance to build_default_registry() below
    3. Run `refresh_commands` in the console (or restart)

Available Commands:
    /ping: Replies "Pong!"
    /globalban: Ban a user in every server the bot is in
"""

from typing import TYPE_CHECKING

from .base import CommandHandler
from .registry import CommandRegistry
from .ping import PingCommand
from .globalban import GlobalBanCommand
from .registrar import CommandRegistrar

if TYPE_CHECKING:
    from peacekeeper.services.global_ban import GlobalBanService


def build_default_registry(ban_service: "GlobalBanService") -> CommandRegistry:
    """Registry with every command the bot exposes."""
    return CommandRegistry([
        PingCommand(),
        GlobalBanCommand(ban_service),
    ])


__all__ = [
    "CommandHandler",
    "CommandRegistry",
    "CommandRegistrar",
    "PingCommand",
    "GlobalBanCommand",
    "build_default_registry",
]
