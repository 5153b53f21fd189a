#!/usr/bin/env python3
"""
Peacekeeper - Entry Point
=========================

Starts the Discord client and the operator console side by side and
exits with the code carried by the shutdown signal.

Features:
- .env configuration via python-dotenv
- Slash commands (/ping, /globalban)
- Operator console (stop, refresh_commands)
- Graceful error handling
"""

import asyncio
import sys

from dotenv import load_dotenv

from peacekeeper.bot import PeacekeeperBot
from peacekeeper.core.config import ConfigValidationError, validate_and_log_config
from peacekeeper.core.constants import EXIT_CODE_FATAL, EXIT_CODE_OK
from peacekeeper.core.logger import logger
from peacekeeper.core.shutdown import ShutdownSignal
from peacekeeper.services.console import OperatorConsole
from peacekeeper.utils.error_handler import ErrorHandler


async def run_until_shutdown(
    bot: PeacekeeperBot,
    console: OperatorConsole,
    shutdown: ShutdownSignal,
    token: str,
) -> int:
    """
    Run the gateway client and the console until one of them ends the process.

    The gateway ending on its own (login failure, crash) counts as a
    shutdown: exit code 1 on error, 0 on a clean close.

    Returns:
        Process exit code.
    """
    gateway = asyncio.create_task(bot.start(token), name="gateway")
    console_task = asyncio.create_task(console.run(), name="console")
    stop = asyncio.create_task(shutdown.wait(), name="shutdown")

    try:
        await asyncio.wait({gateway, stop}, return_when=asyncio.FIRST_COMPLETED)

        if gateway.done() and not shutdown.is_set:
            error = None if gateway.cancelled() else gateway.exception()
            if error is not None:
                ErrorHandler.handle(
                    error,
                    location="main.gateway",
                    critical=True,
                    token_present=bool(token),
                )
                shutdown.trigger(EXIT_CODE_FATAL, reason=f"Gateway failed: {type(error).__name__}")
            else:
                shutdown.trigger(EXIT_CODE_OK, reason="Gateway closed")
    finally:
        console_task.cancel()
        stop.cancel()
        if not bot.is_closed():
            await bot.close()
        await asyncio.gather(gateway, console_task, stop, return_exceptions=True)

    return shutdown.exit_code


async def main() -> int:
    """
    Main entry point for Peacekeeper.

    Handles the complete bot lifecycle:
    1. Loads environment configuration
    2. Validates the Discord bot token
    3. Starts the client and the console
    4. Shuts down on `stop`, console failure or gateway failure

    Returns:
        Process exit code.
    """
    load_dotenv()

    logger.tree("PEACEKEEPER STARTING", [
        ("Commands", "/ping, /globalban"),
        ("Console", "stop, refresh_commands"),
    ], emoji="🕊️")

    try:
        config = validate_and_log_config()
    except ConfigValidationError as e:
        logger.error("Configuration Invalid", [("Error", str(e))])
        logger.error("   Please add your bot token to the .env file as DISCORD_TOKEN")
        return EXIT_CODE_FATAL

    logger.set_webhook(config.error_webhook_url)

    shutdown = ShutdownSignal()
    bot = PeacekeeperBot(config)
    console = OperatorConsole(bot.registrar, shutdown)

    return await run_until_shutdown(bot, console, shutdown, config.discord_token)


def run() -> None:
    """Console script entry point."""
    try:
        exit_code = asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("🛑 Bot stopped by user (Ctrl+C)")
        exit_code = EXIT_CODE_OK
    sys.exit(exit_code)


if __name__ == "__main__":
    run()
