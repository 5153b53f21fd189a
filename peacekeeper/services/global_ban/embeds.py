"""
Peacekeeper - Global Ban Embeds
===============================

Notification embed posted to each guild's public-updates channel.
"""

from typing import Union

import discord

from peacekeeper.core.config import EmbedColors
from peacekeeper.core.constants import BAN_NOTIFICATION_TITLE


def build_ban_notification(
    user: Union[discord.User, discord.Member],
    executor: discord.Member,
    reason: str,
) -> discord.Embed:
    """
    Build the public-updates notice for a global ban.

    Args:
        user: The banned user (thumbnail and title).
        executor: Member who ran the command (author line).
        reason: Ban reason shown in the description.

    Returns:
        A red embed stamped with the current time.
    """
    embed = discord.Embed(
        title=BAN_NOTIFICATION_TITLE.format(tag=str(user), user_id=user.id),
        description=f"**Reason:** {reason}",
        color=EmbedColors.BAN,
        timestamp=discord.utils.utcnow(),
    )
    embed.set_author(name=executor.name, icon_url=executor.display_avatar.url)
    embed.set_thumbnail(url=user.display_avatar.url)
    return embed


__all__ = ["build_ban_notification"]
