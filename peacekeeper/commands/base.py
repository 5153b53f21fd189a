"""
Peacekeeper - Command Handler Base
==================================

Uniform shape every slash command implements.

DESIGN:
    A handler owns two things: its slash schema (build_app_command) and
    its behaviour (handle). The schema's callback only forwards the
    parsed options to the dispatcher, which acknowledges, calls handle()
    and sends exactly one follow-up with the returned text.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import discord
from discord import app_commands

from peacekeeper.core.constants import GENERIC_COMMAND_FAILURE_RESPONSE

if TYPE_CHECKING:
    from peacekeeper.handlers.interactions import InteractionDispatcher


class CommandHandler(ABC):
    """
    A slash command registered by name.

    Attributes:
        name: Slash command name.
        description: Slash command description.
        failure_message: Follow-up sent when handle() raises unexpectedly.
    """

    name: str
    description: str
    failure_message: str = GENERIC_COMMAND_FAILURE_RESPONSE

    @abstractmethod
    async def handle(self, interaction: discord.Interaction, **options) -> str:
        """Run the command and return the follow-up text."""

    @abstractmethod
    def build_app_command(self, dispatcher: "InteractionDispatcher") -> app_commands.Command:
        """Build the app command whose callback forwards to `dispatcher`."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} /{self.name}>"


__all__ = ["CommandHandler"]
