"""
Peacekeeper - Error Handler
===========================

Detailed error context and categorized logging for unexpected failures.

Features:
- Detailed error context with stack traces
- Error categorization (Discord, API, Command)
- Recovery suggestions in the log line
- Interaction context capture
- Critical error file logging
"""

import json
import sys
import traceback
from datetime import datetime
from typing import Any, Dict

import discord

from peacekeeper.core.constants import LOG_TRUNCATE_LENGTH
from peacekeeper.core.errors import ConsoleFatal, PeacekeeperError, RegistrationError
from peacekeeper.core.logger import LOGS_DIR, logger


ERRORS_DIR = LOGS_DIR / "errors"


class ErrorContext:
    """Captures and formats detailed error context"""

    @staticmethod
    def get_full_context(e: BaseException, location: str, **kwargs) -> Dict[str, Any]:
        """
        Get comprehensive error context.

        Args:
            e: The exception
            location: Where the error occurred
            **kwargs: Additional context (interaction, command, etc.)

        Returns:
            Dictionary with full error context
        """
        context = {
            'timestamp': datetime.now().isoformat(),
            'location': location,
            'error_type': type(e).__name__,
            'error_message': str(e),
            'traceback': ''.join(traceback.format_exception(type(e), e, e.__traceback__)),
            'python_version': sys.version,
            'additional_context': {k: v for k, v in kwargs.items() if k != 'interaction'},
        }

        interaction = kwargs.get('interaction')
        if isinstance(interaction, discord.Interaction):
            context['discord_context'] = {
                'guild': interaction.guild.name if interaction.guild else 'DM',
                'user': str(interaction.user),
                'user_id': interaction.user.id,
                'command': interaction.command.name if interaction.command else None,
            }

        return context


class ErrorHandler:
    """Categorized error handling with context"""

    ERROR_CATEGORIES = {
        'discord': [
            discord.Forbidden,
            discord.NotFound,
            discord.HTTPException,
        ],
        'api': [
            ConnectionError,
            TimeoutError,
            OSError,
        ],
        'command': [
            PeacekeeperError,
        ],
    }

    SUGGESTIONS = {
        discord.Forbidden: "Check bot permissions in server settings",
        discord.NotFound: "Resource not found - check IDs and channels",
        discord.HTTPException: "Discord API issue - check status and retry manually",
        ConnectionError: "Network connection issue - check internet connection",
        TimeoutError: "Request timed out - check Discord status",
        OSError: "System resource issue - check disk space and permissions",
        RegistrationError: "Run `refresh_commands` in the console to retry",
        ConsoleFatal: "Restart the process; console input is gone",
    }

    @classmethod
    def categorize_error(cls, e: BaseException) -> str:
        """
        Categorize the error type.

        Returns:
            Error category string
        """
        for category, error_types in cls.ERROR_CATEGORIES.items():
            if isinstance(e, tuple(error_types)):
                return category
        return 'general'

    @classmethod
    def get_recovery_suggestion(cls, e: BaseException) -> str:
        for error_type, suggestion in cls.SUGGESTIONS.items():
            if isinstance(e, error_type):
                return suggestion
        return "Unexpected error - check logs for details"

    @classmethod
    def handle(cls, e: BaseException, location: str, critical: bool = False, **context) -> None:
        """
        Handle an error with full context.

        Args:
            e: The exception
            location: Where the error occurred
            critical: Whether this error ends the process
            **context: Additional context
        """
        category = cls.categorize_error(e)
        suggestion = cls.get_recovery_suggestion(e)
        full_context = ErrorContext.get_full_context(e, location, **context)

        error_msg = f"[{category.upper()}] in {location}"

        if critical:
            logger.critical(
                f"💥 CRITICAL ERROR {error_msg}: {full_context['error_type']} - "
                f"{full_context['error_message']} | Recovery: {suggestion}"
            )
            logger.info(f"Traceback:\n{full_context['traceback']}")

            if 'discord_context' in full_context:
                dc = full_context['discord_context']
                logger.info(f"Discord Context: Guild={dc['guild']}, User={dc['user']}, Command={dc['command']}")

            cls._store_critical_error(full_context)
        else:
            logger.warning(
                f"ERROR {error_msg}: {full_context['error_type']} - "
                f"{str(e)[:LOG_TRUNCATE_LENGTH]} | Recovery: {suggestion}"
            )

    @staticmethod
    def _store_critical_error(context: Dict[str, Any]) -> None:
        """Dump a critical error context as JSON under logs/errors/."""
        try:
            ERRORS_DIR.mkdir(exist_ok=True, parents=True)

            timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
            error_file = ERRORS_DIR / f"error_{timestamp}.json"

            with open(error_file, 'w', encoding='utf-8') as f:
                json.dump(context, f, indent=2, default=str)

            logger.info(f"Critical error saved to {error_file}")
        except OSError as save_error:
            logger.info(f"Failed to save error details: {save_error}")


__all__ = ["ErrorContext", "ErrorHandler", "ERRORS_DIR"]
