"""
Peacekeeper - Test Fixtures
===========================

Shared fixtures for all tests. Discord objects are MagicMocks; Discord
HTTP errors are real discord.py exceptions built from a mocked response.
"""

from typing import List, Optional
from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from peacekeeper.utils.discord_errors import HTTP_STATUS_DESCRIPTIONS


# =============================================================================
# Factories
# =============================================================================

def make_http_error(
    cls=discord.HTTPException,
    status: int = 500,
    code: int = 0,
    message: str = "Internal Server Error",
):
    """Build a real discord.py HTTP exception from a mocked aiohttp response."""
    response = MagicMock()
    response.status = status
    response.reason = HTTP_STATUS_DESCRIPTIONS.get(status, "Unknown")
    return cls(response, {"code": code, "message": message})


def make_unknown_user_error():
    return make_http_error(discord.NotFound, status=404, code=10013, message="Unknown User")


def make_channel(channel_id: int = 700000000000000001):
    channel = MagicMock()
    channel.id = channel_id
    channel.send = AsyncMock(return_value=MagicMock(id=800000000000000001))
    return channel


def make_guild(guild_id: int, name: str, channel: Optional[MagicMock] = None):
    guild = MagicMock()
    guild.id = guild_id
    guild.name = name
    guild.ban = AsyncMock()
    guild.public_updates_channel = channel
    return guild


def make_guilds(count: int, with_channels: bool = False) -> List[MagicMock]:
    return [
        make_guild(
            900000000000000000 + i,
            f"Server {chr(ord('A') + i)}",
            make_channel(700000000000000000 + i) if with_channels else None,
        )
        for i in range(count)
    ]


# =============================================================================
# Discord Objects
# =============================================================================

@pytest.fixture
def mock_target_user():
    """The user being banned."""
    user = MagicMock(spec=discord.User)
    user.id = 123456789012345678
    user.name = "spammer"
    user.__str__.return_value = "spammer"
    user.display_avatar = MagicMock()
    user.display_avatar.url = "https://cdn.discordapp.com/avatars/123/target.png"
    return user


@pytest.fixture
def mock_executor():
    """A guild member holding ban_members."""
    member = MagicMock(spec=discord.Member)
    member.id = 111222333444555666
    member.name = "moderator"
    member.__str__.return_value = "moderator"
    member.display_avatar = MagicMock()
    member.display_avatar.url = "https://cdn.discordapp.com/avatars/111/mod.png"
    member.guild_permissions = MagicMock()
    member.guild_permissions.ban_members = True
    return member


@pytest.fixture
def mock_unprivileged_member(mock_executor):
    """A guild member without ban_members."""
    mock_executor.guild_permissions.ban_members = False
    return mock_executor


@pytest.fixture
def mock_bare_user():
    """An interaction user with no guild context (DM invocation)."""
    user = MagicMock(spec=discord.User)
    user.id = 222333444555666777
    user.name = "stranger"
    user.__str__.return_value = "stranger"
    return user


@pytest.fixture
def mock_client(mock_target_user):
    """Gateway client with three guilds and no public-updates channels."""
    client = MagicMock()
    client.guilds = make_guilds(3)
    client.fetch_user = AsyncMock(return_value=mock_target_user)
    return client


@pytest.fixture
def mock_interaction(mock_executor):
    """A slash command interaction invoked by mock_executor."""
    interaction = MagicMock()
    interaction.user = mock_executor
    interaction.guild = MagicMock()
    interaction.guild.name = "Server A"
    interaction.response = MagicMock()
    interaction.response.is_done = MagicMock(return_value=False)
    interaction.response.defer = AsyncMock()
    interaction.response.send_message = AsyncMock()
    interaction.followup = MagicMock()
    interaction.followup.send = AsyncMock()
    return interaction


@pytest.fixture
def mock_registrar():
    registrar = MagicMock()
    registrar.register = AsyncMock(return_value=True)
    return registrar
