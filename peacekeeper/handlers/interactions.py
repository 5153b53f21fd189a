"""
Peacekeeper - Interaction Dispatcher
====================================

Routes slash command interactions to their registered handler.

DESIGN:
    Every known command goes through the same lifecycle:
    Received -> Acknowledged (deferred) -> Responded | Failed

    The acknowledgement happens before any slow work so a global ban
    fan-out never misses Discord's response window. Whatever happens in
    the handler, exactly one follow-up is sent. Unknown command names
    are ignored without a reply.
"""

from typing import Optional

import discord
from discord import app_commands

from peacekeeper.commands.registry import CommandRegistry
from peacekeeper.core.logger import logger
from peacekeeper.utils.discord_errors import log_http_error
from peacekeeper.utils.error_handler import ErrorHandler


# =============================================================================
# Dispatcher
# =============================================================================

class InteractionDispatcher:
    """
    Registry-driven interaction router.

    Attributes:
        registry: Command name to handler mapping.
    """

    def __init__(self, registry: CommandRegistry) -> None:
        self.registry = registry

    async def dispatch(self, interaction: discord.Interaction, name: str, **options) -> bool:
        """
        Handle one interaction for command `name`.

        Args:
            interaction: The inbound interaction.
            name: Command name the interaction was routed by.
            **options: Parsed slash command options.

        Returns:
            True if a follow-up was attempted, False if the interaction
            was ignored or could not be acknowledged.
        """
        handler = self.registry.get(name)
        if handler is None:
            logger.debug(f"Ignoring interaction for unregistered command: {name}")
            return False

        logger.tree("Command Received", [
            ("Command", f"/{name}"),
            ("User", f"{interaction.user} ({interaction.user.id})"),
            ("Guild", interaction.guild.name if interaction.guild else "DM"),
        ], emoji="📥")

        if not await self._acknowledge(interaction, name):
            return False

        try:
            message = await handler.handle(interaction, **options)
        except Exception as e:
            ErrorHandler.handle(
                e,
                location=f"commands.{name}",
                interaction=interaction,
                options=options,
            )
            message = handler.failure_message

        await self._respond(interaction, name, message)
        return True

    async def _acknowledge(self, interaction: discord.Interaction, name: str) -> bool:
        if interaction.response.is_done():
            return True
        try:
            await interaction.response.defer(thinking=True)
        except discord.HTTPException as e:
            log_http_error(e, f"/{name} Acknowledge", [
                ("User", str(interaction.user.id)),
            ])
            return False
        return True

    async def _respond(self, interaction: discord.Interaction, name: str, message: str) -> None:
        try:
            await interaction.followup.send(message)
        except discord.HTTPException as e:
            log_http_error(e, f"/{name} Follow-up", [
                ("User", str(interaction.user.id)),
                ("Message", message),
            ])


# =============================================================================
# Command Tree
# =============================================================================

class PeacekeeperTree(app_commands.CommandTree):
    """
    Command tree that stays quiet about commands it does not know.

    Discord can still deliver commands from an older registration until
    the next sync lands; those are dropped with a debug line.
    """

    async def on_error(
        self,
        interaction: discord.Interaction,
        error: app_commands.AppCommandError,
    ) -> None:
        if isinstance(error, app_commands.CommandNotFound):
            logger.debug(f"Ignoring interaction for unknown command: {error.name}")
            return

        command: Optional[str] = interaction.command.name if interaction.command else None
        ErrorHandler.handle(
            error,
            location=f"tree.{command or 'unknown'}",
            interaction=interaction,
        )


__all__ = ["InteractionDispatcher", "PeacekeeperTree"]
