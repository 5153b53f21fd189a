"""
Peacekeeper - Discord HTTP Error Helpers
========================================

Logging and classification for discord.HTTPException.

Usage:
    from peacekeeper.utils.discord_errors import is_unknown_user, log_http_error

    try:
        await guild.ban(user, reason=reason)
    except discord.HTTPException as e:
        log_http_error(e, "Ban", [("Guild", guild.name)])
"""

from typing import List, Optional, Tuple

import discord

from peacekeeper.core.constants import UNKNOWN_USER_ERROR_CODE, UNKNOWN_USER_ERROR_MESSAGE
from peacekeeper.core.logger import logger


# HTTP status code descriptions for logging
HTTP_STATUS_DESCRIPTIONS = {
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    429: "Rate Limited",
    500: "Internal Server Error",
    502: "Bad Gateway",
    503: "Service Unavailable",
    504: "Gateway Timeout",
}


def is_unknown_user(e: BaseException) -> bool:
    """
    Check whether Discord rejected a call because the user id does not exist.

    Discord reports this as JSON error code 10013 with the message
    "Unknown User". The code is checked first; the message is a fallback
    for payloads that carry no code.
    """
    if not isinstance(e, discord.HTTPException):
        return False
    if e.code == UNKNOWN_USER_ERROR_CODE:
        return True
    return (e.text or "").strip() == UNKNOWN_USER_ERROR_MESSAGE


def describe_http_error(e: discord.HTTPException) -> str:
    """One-line description like "404 Not Found (10013): Unknown User"."""
    status_desc = HTTP_STATUS_DESCRIPTIONS.get(e.status, "Unknown")
    text = f"{e.status} {status_desc} ({e.code})"
    if e.text:
        text += f": {e.text}"
    return text


def log_http_error(
    e: discord.HTTPException,
    operation: str,
    context: Optional[List[Tuple[str, str]]] = None,
) -> None:
    """
    Log a Discord HTTPException with status details.

    Args:
        e: The HTTPException that occurred
        operation: Description of what operation failed
        context: Additional context tuples for logging [(key, value), ...]
    """
    log_items = [
        ("Status", f"{e.status} ({HTTP_STATUS_DESCRIPTIONS.get(e.status, 'Unknown')})"),
        ("Code", str(e.code)),
        ("Error", e.text or str(e)),
    ]

    retry_after = getattr(e, "retry_after", None)
    if retry_after:
        log_items.append(("Retry After", f"{retry_after:.1f}s"))

    if context:
        log_items.extend(context)

    # Rate limits, permission and lookup misses are expected in a fan-out
    if e.status == 429:
        logger.warning(f"🚦 {operation} Rate Limited", log_items)
    elif e.status == 403:
        logger.warning(f"🚫 {operation} Forbidden", log_items)
    elif e.status == 404:
        logger.warning(f"❓ {operation} Not Found", log_items)
    else:
        logger.error(f"{operation} Failed", log_items)


__all__ = [
    "HTTP_STATUS_DESCRIPTIONS",
    "is_unknown_user",
    "describe_http_error",
    "log_http_error",
]
