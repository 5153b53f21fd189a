"""
Peacekeeper - Ping Command
==========================

/ping replies "Pong!". No side effects.
"""

from typing import TYPE_CHECKING

import discord
from discord import app_commands

from peacekeeper.core.constants import PING_COMMAND, PONG_RESPONSE

from .base import CommandHandler

if TYPE_CHECKING:
    from peacekeeper.handlers.interactions import InteractionDispatcher


class PingCommand(CommandHandler):
    name = PING_COMMAND
    description = "pong!"

    async def handle(self, interaction: discord.Interaction, **options) -> str:
        return PONG_RESPONSE

    def build_app_command(self, dispatcher: "InteractionDispatcher") -> app_commands.Command:
        @app_commands.command(name=self.name, description=self.description)
        async def ping(interaction: discord.Interaction) -> None:
            await dispatcher.dispatch(interaction, PING_COMMAND)

        return ping


__all__ = ["PingCommand"]
