"""
Peacekeeper - Shutdown Signal
=============================

The one piece of state the operator console and the entry point share.

DESIGN:
    The first trigger wins; later triggers are logged and ignored so a
    console failure racing a `stop` cannot change the exit code.
"""

import asyncio
from typing import Optional

from peacekeeper.core.constants import EXIT_CODE_OK
from peacekeeper.core.logger import logger


class ShutdownSignal:
    """One-shot process shutdown request carrying an exit code."""

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self.exit_code: int = EXIT_CODE_OK
        self.reason: Optional[str] = None

    @property
    def is_set(self) -> bool:
        return self._event.is_set()

    def trigger(self, exit_code: int = EXIT_CODE_OK, reason: str = "requested") -> None:
        """
        Request shutdown.

        Args:
            exit_code: Process exit code to finish with.
            reason: Short description for the log.
        """
        if self._event.is_set():
            logger.debug(f"Shutdown already requested, ignoring: {reason}")
            return

        self.exit_code = exit_code
        self.reason = reason
        self._event.set()

        logger.tree("Shutdown Requested", [
            ("Reason", reason),
            ("Exit Code", str(exit_code)),
        ], emoji="🛑")

    async def wait(self) -> int:
        """Block until triggered, then return the exit code."""
        await self._event.wait()
        return self.exit_code


__all__ = ["ShutdownSignal"]
