"""
Peacekeeper - Global Ban Models
===============================

Transient values for one global ban: the request built from the
interaction options, one outcome per guild, and the final summary.

DESIGN:
    The ban and the public-updates notification get separate result
    values. A failed notification never turns a guild's ban into a
    failure; it only shows up in the summary log.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

import discord

from peacekeeper.core.constants import DEFAULT_BAN_REASON
from peacekeeper.utils.discord_errors import is_unknown_user


# Discord snowflakes are unsigned 64-bit integers
_MAX_SNOWFLAKE = 2 ** 64 - 1


def parse_user_id(value: Optional[str]) -> Optional[int]:
    """
    Parse the `userid` option into a snowflake.

    Accepts a bare id or a user mention (`<@id>` / `<@!id>`).

    Returns:
        The id, or None when the value cannot be a Discord user id.
    """
    if value is None:
        return None

    text = value.strip()
    if text.startswith("<@") and text.endswith(">"):
        text = text[2:-1].lstrip("!")

    if not text.isdigit():
        return None

    user_id = int(text)
    if user_id <= 0 or user_id > _MAX_SNOWFLAKE:
        return None
    return user_id


# =============================================================================
# Request
# =============================================================================

@dataclass(frozen=True)
class BanRequest:
    """
    A global ban as asked for by the executor.

    Attributes:
        executor: Interaction user; a Member when invoked inside a guild.
        target_user_id: Parsed target id, None when the option was not an id.
        reason: Ban reason, defaulted when empty.
    """

    executor: Optional[Union[discord.Member, discord.User]]
    target_user_id: Optional[int]
    reason: str = DEFAULT_BAN_REASON

    @classmethod
    def from_options(
        cls,
        executor: Optional[Union[discord.Member, discord.User]],
        userid: Optional[str],
        reason: Optional[str] = None,
    ) -> "BanRequest":
        reason = (reason or "").strip()
        return cls(
            executor=executor,
            target_user_id=parse_user_id(userid),
            reason=reason or DEFAULT_BAN_REASON,
        )


# =============================================================================
# Outcomes
# =============================================================================

class NotificationStatus(Enum):
    SENT = "sent"
    SKIPPED = "skipped"          # guild has no public-updates channel
    FAILED = "failed"
    NOT_ATTEMPTED = "not_attempted"  # ban itself failed


@dataclass(frozen=True)
class NotificationOutcome:
    status: NotificationStatus
    channel_id: Optional[int] = None
    error: Optional[str] = None


NOT_ATTEMPTED = NotificationOutcome(NotificationStatus.NOT_ATTEMPTED)


@dataclass(frozen=True)
class BanOutcome:
    """Result of banning the target in one guild."""

    guild_id: int
    guild_name: str
    success: bool
    error: Optional[BaseException] = None
    notification: NotificationOutcome = NOT_ATTEMPTED

    @property
    def unknown_user(self) -> bool:
        return self.error is not None and is_unknown_user(self.error)


@dataclass
class BanSummary:
    """Every guild outcome for one executed ban."""

    user: Union[discord.User, discord.Member]
    reason: str
    outcomes: List[BanOutcome] = field(default_factory=list)

    @property
    def banned_count(self) -> int:
        return sum(1 for o in self.outcomes if o.success)

    @property
    def notified_count(self) -> int:
        return sum(1 for o in self.outcomes if o.notification.status is NotificationStatus.SENT)

    @property
    def failures(self) -> List[BanOutcome]:
        return [o for o in self.outcomes if not o.success]


__all__ = [
    "parse_user_id",
    "BanRequest",
    "NotificationStatus",
    "NotificationOutcome",
    "NOT_ATTEMPTED",
    "BanOutcome",
    "BanSummary",
]
