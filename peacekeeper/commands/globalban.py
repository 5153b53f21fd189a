"""
Peacekeeper - Global Ban Command
================================

/globalban userid:<id> [reason] bans a user in every guild the bot is in.

DESIGN:
    The command turns the options into a BanRequest, runs the global ban
    service and maps its result to exactly one reply. Each BanError
    subclass carries its own fixed reply.
"""

from typing import TYPE_CHECKING, Optional

import discord
from discord import app_commands

from peacekeeper.core.constants import (
    BAN_SUCCESS_RESPONSE,
    GENERIC_BAN_FAILURE_RESPONSE,
    GLOBAL_BAN_COMMAND,
)
from peacekeeper.core.errors import BanError, GenericBanFailure
from peacekeeper.services.global_ban import BanRequest, GlobalBanService
from peacekeeper.utils.error_handler import ErrorHandler

from .base import CommandHandler

if TYPE_CHECKING:
    from peacekeeper.handlers.interactions import InteractionDispatcher


class GlobalBanCommand(CommandHandler):
    """
    Cross-server ban command.

    Attributes:
        service: Pipeline that performs the permission check and fan-out.
    """

    name = GLOBAL_BAN_COMMAND
    description = "Ban a user across multiple servers."
    failure_message = GENERIC_BAN_FAILURE_RESPONSE

    def __init__(self, service: GlobalBanService) -> None:
        self.service = service

    async def handle(
        self,
        interaction: discord.Interaction,
        userid: Optional[str] = None,
        reason: Optional[str] = None,
        **options,
    ) -> str:
        request = BanRequest.from_options(interaction.user, userid, reason)

        try:
            summary = await self.service.execute_ban(request)
        except BanError as e:
            if isinstance(e, GenericBanFailure):
                ErrorHandler.handle(
                    e,
                    location="commands.globalban",
                    interaction=interaction,
                    target=request.target_user_id,
                )
            return e.response

        return BAN_SUCCESS_RESPONSE.format(
            tag=str(summary.user),
            user_id=summary.user.id,
            reason=request.reason,
        )

    def build_app_command(self, dispatcher: "InteractionDispatcher") -> app_commands.Command:
        @app_commands.command(name=self.name, description=self.description)
        @app_commands.describe(
            userid="The 18-digit unique identifier of the user",
            reason="A reason for the ban",
        )
        async def globalban(
            interaction: discord.Interaction,
            userid: str,
            reason: Optional[str] = None,
        ) -> None:
            await dispatcher.dispatch(interaction, GLOBAL_BAN_COMMAND, userid=userid, reason=reason)

        return globalban


__all__ = ["GlobalBanCommand"]
