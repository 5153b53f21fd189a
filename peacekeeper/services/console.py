"""
Peacekeeper - Operator Console
==============================

Line-oriented stdin commands for whoever runs the bot process.

Commands:
    stop              Graceful shutdown, exit code 0
    refresh_commands  Push the slash command set again

Anything else is ignored.

DESIGN:
    A daemon thread does the blocking readline and hands lines to the
    event loop through an asyncio.Queue; the console task itself never
    blocks the loop. The console talks to the rest of the process only
    through the registrar and the ShutdownSignal. A failure reading
    input ends the process with a non-zero exit code.
"""

import asyncio
import sys
import threading
from typing import TYPE_CHECKING, Awaitable, Callable, Dict, Optional, TextIO, Union

from peacekeeper.core.constants import CONSOLE_REFRESH_COMMANDS, CONSOLE_STOP, EXIT_CODE_OK
from peacekeeper.core.errors import ConsoleFatal
from peacekeeper.core.logger import logger
from peacekeeper.core.shutdown import ShutdownSignal
from peacekeeper.utils.error_handler import ErrorHandler

if TYPE_CHECKING:
    from peacekeeper.commands.registrar import CommandRegistrar


_EOF = object()


class OperatorConsole:
    """
    Reads operator commands until `stop`, end of input or a failure.

    Attributes:
        registrar: Used by `refresh_commands`.
        shutdown: Triggered by `stop` or by a console failure.
        stream: Input stream, stdin by default.
    """

    def __init__(
        self,
        registrar: "CommandRegistrar",
        shutdown: ShutdownSignal,
        stream: Optional[TextIO] = None,
    ) -> None:
        self.registrar = registrar
        self.shutdown = shutdown
        self.stream = stream if stream is not None else sys.stdin
        self._actions: Dict[str, Callable[[], Awaitable[None]]] = {
            CONSOLE_STOP: self._stop,
            CONSOLE_REFRESH_COMMANDS: self._refresh_commands,
        }

    # =========================================================================
    # Loop
    # =========================================================================

    async def run(self) -> None:
        """Listen for commands; never raises except on cancellation."""
        logger.tree("Console Listening", [
            ("Commands", ", ".join(self._actions)),
        ], emoji="⌨️")

        try:
            await self._listen()
        except Exception as e:
            fatal = e if isinstance(e, ConsoleFatal) else ConsoleFatal(f"Console loop crashed: {e}")
            ErrorHandler.handle(e, location="services.console.run", critical=True)
            self.shutdown.trigger(fatal.exit_code, reason=str(fatal))

    async def _listen(self) -> None:
        queue: "asyncio.Queue[Union[str, BaseException, object]]" = asyncio.Queue()
        loop = asyncio.get_running_loop()

        reader = threading.Thread(
            target=self._read_lines,
            args=(loop, queue),
            name="console-reader",
            daemon=True,
        )
        reader.start()

        while not self.shutdown.is_set:
            item = await queue.get()
            if item is _EOF:
                logger.info("Console input closed, no longer listening")
                return
            if isinstance(item, BaseException):
                raise ConsoleFatal(f"Reading console input failed: {item}") from item
            await self.handle_line(item)

    def _read_lines(self, loop: asyncio.AbstractEventLoop, queue: asyncio.Queue) -> None:
        """Reader thread body: forward lines, then EOF or the read error."""
        last: object = _EOF
        try:
            for line in iter(self.stream.readline, ""):
                if not self._forward(loop, queue, line):
                    return
        except Exception as e:
            last = e

        self._forward(loop, queue, last)

    @staticmethod
    def _forward(loop: asyncio.AbstractEventLoop, queue: asyncio.Queue, item: object) -> bool:
        """Hand `item` to the loop; False once the loop has closed."""
        try:
            loop.call_soon_threadsafe(queue.put_nowait, item)
        except RuntimeError:
            return False  # loop closed, process is exiting
        return True

    # =========================================================================
    # Commands
    # =========================================================================

    async def handle_line(self, line: str) -> None:
        """Run the command on `line`, ignoring unknown input."""
        command = line.strip()
        action = self._actions.get(command)
        if action is None:
            if command:
                logger.debug(f"Ignoring console input: {command}")
            return
        await action()

    async def _stop(self) -> None:
        logger.info("Stopping...")
        self.shutdown.trigger(EXIT_CODE_OK, reason="Console stop")

    async def _refresh_commands(self) -> None:
        logger.info("Refreshing slash commands")
        await self.registrar.register()


__all__ = ["OperatorConsole"]
