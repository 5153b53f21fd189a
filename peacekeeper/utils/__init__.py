"""
Peacekeeper - Utils Package
===========================

Stateless helpers used across the bot.

Available Utilities:
    ErrorHandler: Categorized logging for unexpected exceptions
    Discord errors: HTTPException classification and logging
"""

from .error_handler import ErrorContext, ErrorHandler
from .discord_errors import (
    HTTP_STATUS_DESCRIPTIONS,
    describe_http_error,
    is_unknown_user,
    log_http_error,
)


__all__ = [
    # Error handling
    "ErrorContext",
    "ErrorHandler",
    # Discord errors
    "HTTP_STATUS_DESCRIPTIONS",
    "describe_http_error",
    "is_unknown_user",
    "log_http_error",
]
