"""
Peacekeeper - Main Bot Class
============================

Discord client that exposes /ping and /globalban.

Features:
- Slash command registry with a single dispatcher
- Cross-server ban fan-out
- Command registration at startup and on demand from the console
"""

from datetime import datetime
from typing import Optional

import discord
from discord.ext import commands

from peacekeeper.commands import CommandRegistrar, build_default_registry
from peacekeeper.core.config import Config, get_config
from peacekeeper.core.logger import logger
from peacekeeper.handlers import InteractionDispatcher, PeacekeeperTree
from peacekeeper.services.global_ban import GlobalBanService


# =============================================================================
# PeacekeeperBot Class
# =============================================================================

class PeacekeeperBot(commands.Bot):
    """
    Gateway client and owner of the command pipeline.

    SERVICE INITIALIZATION ORDER:
    1. __init__: ban service, registry, dispatcher, registrar
    2. setup_hook (before on_ready): command registration
    3. on_ready: startup summary
    """

    # =========================================================================
    # Initialization
    # =========================================================================

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config or get_config()

        # Guild intent is enough: bans and public-updates channels come from the guild cache
        intents = discord.Intents.default()

        super().__init__(
            command_prefix=commands.when_mentioned,
            intents=intents,
            help_command=None,
            tree_cls=PeacekeeperTree,
        )

        self.start_time: datetime = datetime.now()

        self.global_ban = GlobalBanService(self)
        self.registry = build_default_registry(self.global_ban)
        self.dispatcher = InteractionDispatcher(self.registry)
        self.registrar = CommandRegistrar(self.tree, self.registry, self.dispatcher)

        self._ready_initialized: bool = False

        logger.info("Bot Instance Created")

    # =========================================================================
    # Setup Hook
    # =========================================================================

    async def setup_hook(self) -> None:
        """Register slash commands; a failure here does not stop the bot."""
        await self.registrar.register()

    # =========================================================================
    # Events
    # =========================================================================

    async def on_ready(self) -> None:
        if self._ready_initialized:
            logger.info("Bot Reconnected")
            return

        self._ready_initialized = True

        if not self.user:
            return

        logger.tree("BOT ONLINE", [
            ("Name", self.user.name),
            ("ID", str(self.user.id)),
            ("Guilds", str(len(self.guilds))),
            ("Commands", ", ".join(f"/{name}" for name in self.registry.names)),
        ], emoji="🚀")

    async def on_guild_join(self, guild: discord.Guild) -> None:
        logger.tree("Guild Joined", [
            ("Guild", f"{guild.name} ({guild.id})"),
            ("Total Guilds", str(len(self.guilds))),
        ], emoji="➕")

    async def on_guild_remove(self, guild: discord.Guild) -> None:
        logger.tree("Guild Left", [
            ("Guild", f"{guild.name} ({guild.id})"),
            ("Total Guilds", str(len(self.guilds))),
        ], emoji="➖")

    # =========================================================================
    # Shutdown
    # =========================================================================

    async def close(self) -> None:
        """Log out of the gateway and log the session uptime."""
        if self.is_closed():
            return

        logger.info("Initiating Graceful Shutdown")
        await super().close()

        logger.tree("SHUTDOWN COMPLETE", [
            ("Uptime", str(datetime.now() - self.start_time)),
        ], emoji="🛑")


__all__ = ["PeacekeeperBot"]
