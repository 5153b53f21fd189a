"""
Peacekeeper - Exceptions
========================

Exception hierarchy shared by the command pipeline, the registrar
and the operator console.

DESIGN:
    Ban errors carry the fixed user-facing response for their case so the
    command layer maps them without a branch per type. Registration and
    console errors never reach a Discord user; they are logged only.
"""

from typing import TYPE_CHECKING, Optional

from peacekeeper.core.constants import (
    EXIT_CODE_FATAL,
    GENERIC_BAN_FAILURE_RESPONSE,
    PERMISSION_DENIED_RESPONSE,
    UNKNOWN_TARGET_RESPONSE,
)

if TYPE_CHECKING:
    from peacekeeper.services.global_ban.models import BanOutcome, BanSummary


class PeacekeeperError(Exception):
    """Base for all Peacekeeper exceptions."""

    pass


# =============================================================================
# Ban Pipeline
# =============================================================================

class BanError(PeacekeeperError):
    """A global ban could not be completed. Shown to the executor as `response`."""

    response: str = GENERIC_BAN_FAILURE_RESPONSE


class PermissionDenied(BanError):
    """Executor is not a guild member or lacks the ban members permission."""

    response = PERMISSION_DENIED_RESPONSE


class UnknownTarget(BanError):
    """The supplied id does not belong to a Discord user."""

    response = UNKNOWN_TARGET_RESPONSE


class GenericBanFailure(BanError):
    """
    A platform or network failure while resolving or banning.

    Attributes:
        failure: First failed guild outcome, when the fan-out was reached.
        summary: Every attempted guild, when the fan-out was reached.
    """

    response = GENERIC_BAN_FAILURE_RESPONSE

    def __init__(
        self,
        message: str,
        failure: Optional["BanOutcome"] = None,
        summary: Optional["BanSummary"] = None,
    ) -> None:
        super().__init__(message)
        self.failure = failure
        self.summary = summary


# =============================================================================
# Registration / Console
# =============================================================================

class RegistrationError(PeacekeeperError):
    """Pushing the slash command set to Discord failed. Raise with ``from``."""

    pass


class ConsoleFatal(PeacekeeperError):
    """The operator console can no longer read input. Ends the process."""

    exit_code: int = EXIT_CODE_FATAL


__all__ = [
    "PeacekeeperError",
    "BanError",
    "PermissionDenied",
    "UnknownTarget",
    "GenericBanFailure",
    "RegistrationError",
    "ConsoleFatal",
]
