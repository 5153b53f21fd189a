"""
Peacekeeper - Command Registrar
===============================

Pushes the registry's slash commands to Discord.

DESIGN:
    CommandTree.sync() is a bulk overwrite of the global command set, so
    calling register() again replaces whatever Discord had. Failures are
    logged and swallowed: the bot stays online and an operator can retry
    from the console with `refresh_commands`.
"""

from typing import TYPE_CHECKING, List

from discord import app_commands

from peacekeeper.core.errors import RegistrationError
from peacekeeper.core.logger import logger
from peacekeeper.utils.error_handler import ErrorHandler

from .registry import CommandRegistry

if TYPE_CHECKING:
    from peacekeeper.handlers.interactions import InteractionDispatcher


class CommandRegistrar:
    """
    Installs handlers on the command tree and syncs them.

    Attributes:
        tree: The bot's command tree.
        registry: Handlers to expose.
        dispatcher: Target of every installed command callback.
    """

    def __init__(
        self,
        tree: app_commands.CommandTree,
        registry: CommandRegistry,
        dispatcher: "InteractionDispatcher",
    ) -> None:
        self.tree = tree
        self.registry = registry
        self.dispatcher = dispatcher

    def install(self) -> None:
        """Add (or replace) every registry command on the local tree."""
        for handler in self.registry:
            self.tree.add_command(handler.build_app_command(self.dispatcher), override=True)

    async def register(self) -> bool:
        """
        Install and push the command set.

        Returns:
            True if Discord accepted the command set, False if it failed.
        """
        try:
            synced = await self._push()
        except RegistrationError as e:
            ErrorHandler.handle(e, location="commands.registrar.register")
            logger.error("Command Registration Failed", [
                ("Commands", ", ".join(self.registry.names)),
                ("Cause", f"{type(e.__cause__).__name__}: {e.__cause__}"),
            ])
            return False

        logger.tree("Commands Initialized", [
            ("Commands", ", ".join(synced) if synced else "None"),
            ("Count", str(len(synced))),
        ], emoji="✅")
        logger.success(f"Slash commands synced: {len(synced)}")
        return True

    async def _push(self) -> List[str]:
        try:
            self.install()
            synced = await self.tree.sync()
        except Exception as e:
            raise RegistrationError(f"Could not sync {len(self.registry)} commands") from e
        return [command.name for command in synced]


__all__ = ["CommandRegistrar"]
