"""
Peacekeeper - Command Registrar Tests
=====================================

Registration installs every command, bulk-syncs, and never raises.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from peacekeeper.commands import CommandRegistrar, build_default_registry

from conftest import make_http_error


def synced(*names):
    commands = []
    for name in names:
        command = MagicMock()
        command.name = name
        commands.append(command)
    return commands


@pytest.fixture
def tree():
    tree = MagicMock()
    tree.sync = AsyncMock(return_value=synced("ping", "globalban"))
    return tree


@pytest.fixture
def registrar(tree):
    return CommandRegistrar(tree, build_default_registry(MagicMock()), MagicMock())


class TestCommandRegistrar:

    @pytest.mark.asyncio
    async def test_register_installs_and_syncs(self, registrar, tree):
        assert await registrar.register() is True

        names = [call.args[0].name for call in tree.add_command.call_args_list]
        assert names == ["ping", "globalban"]
        assert all(call.kwargs["override"] is True for call in tree.add_command.call_args_list)
        tree.sync.assert_awaited_once_with()

    @pytest.mark.asyncio
    async def test_success_line_only_after_sync(self, registrar, tree):
        with patch("peacekeeper.commands.registrar.logger") as log:
            await registrar.register()
        log.success.assert_called_once_with("Slash commands synced: 2")

        tree.sync = AsyncMock(side_effect=make_http_error(status=500))
        with patch("peacekeeper.commands.registrar.logger") as log:
            await registrar.register()
        log.success.assert_not_called()

    @pytest.mark.asyncio
    async def test_register_again_overwrites(self, registrar, tree):
        await registrar.register()
        await registrar.register()

        assert tree.sync.await_count == 2
        assert tree.add_command.call_count == 4

    @pytest.mark.asyncio
    async def test_sync_failure_is_swallowed(self, registrar, tree):
        tree.sync = AsyncMock(side_effect=make_http_error(status=401, message="401: Unauthorized"))

        assert await registrar.register() is False

    @pytest.mark.asyncio
    async def test_install_failure_is_swallowed(self, registrar, tree):
        tree.add_command.side_effect = RuntimeError("tree locked")

        assert await registrar.register() is False
        tree.sync.assert_not_awaited()
