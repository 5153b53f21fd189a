"""
Peacekeeper - Interaction Dispatcher Tests
==========================================

Every known command gets one acknowledgement and exactly one follow-up;
unknown commands get nothing.
"""

import discord
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from discord import app_commands

from peacekeeper.commands import CommandHandler, CommandRegistry, PingCommand, build_default_registry
from peacekeeper.handlers import InteractionDispatcher, PeacekeeperTree
from peacekeeper.services.global_ban import GlobalBanService

from conftest import make_http_error, make_unknown_user_error


class ExplodingCommand(CommandHandler):
    name = "explode"
    description = "always fails"
    failure_message = "it broke"

    async def handle(self, interaction, **options):
        raise RuntimeError("kaboom")

    def build_app_command(self, dispatcher):
        raise NotImplementedError


@pytest.fixture
def dispatcher(mock_client):
    return InteractionDispatcher(build_default_registry(GlobalBanService(mock_client)))


# =============================================================================
# Lifecycle
# =============================================================================

class TestDispatchLifecycle:

    @pytest.mark.asyncio
    async def test_unknown_command_is_ignored(self, dispatcher, mock_interaction):
        handled = await dispatcher.dispatch(mock_interaction, "kick")

        assert handled is False
        mock_interaction.response.defer.assert_not_awaited()
        mock_interaction.followup.send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_ping_acknowledges_then_replies_once(self, dispatcher, mock_interaction):
        handled = await dispatcher.dispatch(mock_interaction, "ping")

        assert handled is True
        mock_interaction.response.defer.assert_awaited_once_with(thinking=True)
        mock_interaction.followup.send.assert_awaited_once_with("Pong!")

    @pytest.mark.asyncio
    async def test_already_acknowledged_skips_defer(self, dispatcher, mock_interaction):
        mock_interaction.response.is_done = MagicMock(return_value=True)

        await dispatcher.dispatch(mock_interaction, "ping")

        mock_interaction.response.defer.assert_not_awaited()
        mock_interaction.followup.send.assert_awaited_once_with("Pong!")

    @pytest.mark.asyncio
    async def test_failed_acknowledge_drops_interaction(self, mock_interaction):
        command = MagicMock(spec=PingCommand)
        command.name = "ping"
        command.handle = AsyncMock(return_value="Pong!")
        dispatcher = InteractionDispatcher(CommandRegistry([command]))
        mock_interaction.response.defer = AsyncMock(
            side_effect=make_http_error(discord.NotFound, status=404, code=10062, message="Unknown interaction")
        )

        handled = await dispatcher.dispatch(mock_interaction, "ping")

        assert handled is False
        command.handle.assert_not_awaited()
        mock_interaction.followup.send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_handler_exception_sends_failure_message(self, mock_interaction):
        dispatcher = InteractionDispatcher(CommandRegistry([ExplodingCommand()]))

        with patch("peacekeeper.handlers.interactions.ErrorHandler.handle") as handled:
            await dispatcher.dispatch(mock_interaction, "explode")

        handled.assert_called_once()
        mock_interaction.followup.send.assert_awaited_once_with("it broke")

    @pytest.mark.asyncio
    async def test_follow_up_failure_is_swallowed(self, dispatcher, mock_interaction):
        mock_interaction.followup.send = AsyncMock(side_effect=make_http_error(status=500))

        assert await dispatcher.dispatch(mock_interaction, "ping") is True


# =============================================================================
# /globalban Through The Dispatcher
# =============================================================================

class TestGlobalBanDispatch:

    @pytest.mark.asyncio
    async def test_three_guilds_no_channels(self, dispatcher, mock_client, mock_interaction):
        await dispatcher.dispatch(mock_interaction, "globalban", userid="123456789012345678", reason="raiding")

        assert sum(g.ban.await_count for g in mock_client.guilds) == 3
        mock_interaction.followup.send.assert_awaited_once_with(
            'User `spammer` (ID: `123456789012345678`) has been banned across all servers for: "raiding"'
        )

    @pytest.mark.asyncio
    async def test_unresolvable_target(self, dispatcher, mock_client, mock_interaction):
        mock_client.fetch_user = AsyncMock(side_effect=make_unknown_user_error())

        await dispatcher.dispatch(mock_interaction, "globalban", userid="999999999999999999", reason=None)

        mock_interaction.followup.send.assert_awaited_once_with("Are you gonna supply an ACTUAL user id?")
        assert sum(g.ban.await_count for g in mock_client.guilds) == 0

    @pytest.mark.asyncio
    async def test_bare_user(self, dispatcher, mock_client, mock_interaction, mock_bare_user):
        mock_interaction.user = mock_bare_user
        mock_interaction.guild = None

        await dispatcher.dispatch(mock_interaction, "globalban", userid="123456789012345678", reason=None)

        mock_interaction.followup.send.assert_awaited_once_with("You don't have permission to use this, buddy.")
        mock_client.fetch_user.assert_not_awaited()
        assert sum(g.ban.await_count for g in mock_client.guilds) == 0

    @pytest.mark.asyncio
    async def test_unexpected_error_uses_ban_failure_message(self, dispatcher, mock_client, mock_interaction):
        mock_client.fetch_user = AsyncMock(side_effect=RuntimeError("gateway gone"))

        with patch("peacekeeper.handlers.interactions.ErrorHandler.handle"):
            await dispatcher.dispatch(mock_interaction, "globalban", userid="123456789012345678", reason=None)

        mock_interaction.followup.send.assert_awaited_once_with("SOMETHING went wrong when banning...")


# =============================================================================
# Command Tree
# =============================================================================

class TestPeacekeeperTree:

    @pytest.mark.asyncio
    async def test_unknown_command_is_silent(self, mock_interaction):
        error = app_commands.CommandNotFound("oldcommand", [])

        with patch("peacekeeper.handlers.interactions.ErrorHandler.handle") as handled:
            await PeacekeeperTree.on_error(MagicMock(), mock_interaction, error)

        handled.assert_not_called()
        mock_interaction.followup.send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_other_errors_are_logged(self, mock_interaction):
        mock_interaction.command = MagicMock()
        mock_interaction.command.name = "globalban"
        error = app_commands.AppCommandError("bad option")

        with patch("peacekeeper.handlers.interactions.ErrorHandler.handle") as handled:
            await PeacekeeperTree.on_error(MagicMock(), mock_interaction, error)

        handled.assert_called_once()
        assert handled.call_args.kwargs["location"] == "tree.globalban"
