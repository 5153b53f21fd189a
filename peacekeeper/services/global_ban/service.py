"""
Peacekeeper - Global Ban Service
================================

Bans one user in every guild the bot is a member of.

DESIGN:
    Gates run in order and each one short-circuits the rest:
    1. Permission: executor must be a Member with ban_members
    2. Target: the id must resolve through fetch_user
    3. Fan-out: every guild is banned concurrently, each guild isolated;
       the public-updates notice is a best-effort second step per guild
    4. Aggregation: once every guild was attempted, an "Unknown User"
       rejection anywhere wins over a generic failure

    Bans already applied stay applied when another guild fails.
"""

import asyncio
from typing import TYPE_CHECKING, List, Union

import discord

from peacekeeper.core.config import can_ban_members
from peacekeeper.core.constants import BAN_DELETE_MESSAGE_SECONDS
from peacekeeper.core.errors import GenericBanFailure, PermissionDenied, UnknownTarget
from peacekeeper.core.logger import logger
from peacekeeper.utils.discord_errors import describe_http_error, is_unknown_user, log_http_error
from peacekeeper.utils.error_handler import ErrorHandler

from .embeds import build_ban_notification
from .models import (
    BanOutcome,
    BanRequest,
    BanSummary,
    NotificationOutcome,
    NotificationStatus,
)

if TYPE_CHECKING:
    from discord.ext import commands


class GlobalBanService:
    """
    Cross-server ban pipeline.

    Attributes:
        client: Live gateway client; only `guilds` and `fetch_user` are used.
    """

    def __init__(self, client: "commands.Bot") -> None:
        self.client = client

    # =========================================================================
    # Pipeline
    # =========================================================================

    async def execute_ban(self, request: BanRequest) -> BanSummary:
        """
        Run the global ban.

        Returns:
            Summary of every guild attempted.

        Raises:
            PermissionDenied: Executor may not ban; nothing was contacted.
            UnknownTarget: The id is not a user, at lookup or mid fan-out.
            GenericBanFailure: Lookup or at least one guild ban failed.
        """
        self._ensure_permission(request)
        user = await self._resolve_target(request)

        guilds = list(self.client.guilds)
        outcomes: List[BanOutcome] = await asyncio.gather(*(
            self._ban_in_guild(guild, user, request) for guild in guilds
        ))

        summary = BanSummary(user=user, reason=request.reason, outcomes=list(outcomes))
        self._log_summary(request, summary)
        return self._aggregate(summary)

    # =========================================================================
    # Gates
    # =========================================================================

    def _ensure_permission(self, request: BanRequest) -> None:
        if can_ban_members(request.executor):
            return

        executor = request.executor
        logger.warning("Global Ban Denied", [
            ("Executor", f"{executor} ({executor.id})" if executor else "Unknown"),
            ("Context", "Guild" if isinstance(executor, discord.Member) else "No guild"),
            ("Target", str(request.target_user_id)),
        ])
        raise PermissionDenied(f"{executor} lacks ban_members")

    async def _resolve_target(self, request: BanRequest) -> Union[discord.User, discord.Member]:
        if request.target_user_id is None:
            raise UnknownTarget("userid option is not a Discord id")

        try:
            return await self.client.fetch_user(request.target_user_id)
        except discord.HTTPException as e:
            if isinstance(e, discord.NotFound) or is_unknown_user(e):
                logger.info(f"Global Ban Target Not Found: {request.target_user_id}")
                raise UnknownTarget(f"No user with id {request.target_user_id}") from e

            log_http_error(e, "Global Ban User Lookup", [
                ("Target", str(request.target_user_id)),
            ])
            raise GenericBanFailure(f"User lookup failed: {describe_http_error(e)}") from e

    # =========================================================================
    # Fan-out
    # =========================================================================

    async def _ban_in_guild(
        self,
        guild: discord.Guild,
        user: Union[discord.User, discord.Member],
        request: BanRequest,
    ) -> BanOutcome:
        try:
            await guild.ban(
                user,
                reason=request.reason,
                delete_message_seconds=BAN_DELETE_MESSAGE_SECONDS,
            )
        except discord.HTTPException as e:
            log_http_error(e, "Global Ban", [
                ("User", f"{user} ({user.id})"),
                ("Guild", f"{guild.name} ({guild.id})"),
            ])
            return BanOutcome(guild_id=guild.id, guild_name=guild.name, success=False, error=e)
        except Exception as e:
            ErrorHandler.handle(
                e,
                location="services.global_ban.ban",
                guild=f"{guild.name} ({guild.id})",
                user_id=user.id,
            )
            return BanOutcome(guild_id=guild.id, guild_name=guild.name, success=False, error=e)

        notification = await self._notify(guild, user, request)
        return BanOutcome(
            guild_id=guild.id,
            guild_name=guild.name,
            success=True,
            notification=notification,
        )

    async def _notify(
        self,
        guild: discord.Guild,
        user: Union[discord.User, discord.Member],
        request: BanRequest,
    ) -> NotificationOutcome:
        """Post the ban notice to the guild's public-updates channel, if any."""
        channel = guild.public_updates_channel
        if channel is None:
            return NotificationOutcome(NotificationStatus.SKIPPED)

        embed = build_ban_notification(user, request.executor, request.reason)
        try:
            await channel.send(embed=embed)
        except discord.HTTPException as e:
            log_http_error(e, "Ban Notification", [
                ("Guild", f"{guild.name} ({guild.id})"),
                ("Channel", str(channel.id)),
            ])
            return NotificationOutcome(
                NotificationStatus.FAILED,
                channel_id=channel.id,
                error=describe_http_error(e),
            )
        except Exception as e:
            ErrorHandler.handle(
                e,
                location="services.global_ban.notify",
                guild=f"{guild.name} ({guild.id})",
                channel_id=channel.id,
            )
            return NotificationOutcome(
                NotificationStatus.FAILED,
                channel_id=channel.id,
                error=f"{type(e).__name__}: {e}",
            )

        return NotificationOutcome(NotificationStatus.SENT, channel_id=channel.id)

    # =========================================================================
    # Aggregation
    # =========================================================================

    def _aggregate(self, summary: BanSummary) -> BanSummary:
        failures = summary.failures
        if not failures:
            return summary

        if any(o.unknown_user for o in failures):
            raise UnknownTarget(f"Discord reported user {summary.user.id} as unknown during fan-out")

        first = failures[0]
        raise GenericBanFailure(
            f"Ban failed in {len(failures)} of {len(summary.outcomes)} guilds "
            f"(first: {first.guild_name} - {first.error})",
            failure=first,
            summary=summary,
        )

    def _log_summary(self, request: BanRequest, summary: BanSummary) -> None:
        failed_notices = sum(
            1 for o in summary.outcomes if o.notification.status is NotificationStatus.FAILED
        )
        logger.tree("Global Ban Complete" if not summary.failures else "Global Ban Incomplete", [
            ("User", f"{summary.user} ({summary.user.id})"),
            ("Executor", f"{request.executor} ({request.executor.id})"),
            ("Reason", request.reason),
            ("Guilds", str(len(summary.outcomes))),
            ("Banned", str(summary.banned_count)),
            ("Failed", str(len(summary.failures))),
            ("Notified", str(summary.notified_count)),
            ("Notices Failed", str(failed_notices)),
        ], emoji="🔨")


__all__ = ["GlobalBanService"]
