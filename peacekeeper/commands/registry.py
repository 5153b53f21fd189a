"""
Peacekeeper - Command Registry
==============================

Name to handler mapping used by the dispatcher and the registrar.
"""

from typing import Dict, Iterable, Iterator, List, Optional

from .base import CommandHandler


class CommandRegistry:
    """Ordered set of command handlers, unique by name."""

    def __init__(self, handlers: Iterable[CommandHandler] = ()) -> None:
        self._handlers: Dict[str, CommandHandler] = {}
        for handler in handlers:
            self.register(handler)

    def register(self, handler: CommandHandler) -> None:
        """
        Add a handler.

        Raises:
            ValueError: A handler with the same name is already registered.
        """
        if handler.name in self._handlers:
            raise ValueError(f"Command already registered: {handler.name}")
        self._handlers[handler.name] = handler

    def get(self, name: str) -> Optional[CommandHandler]:
        return self._handlers.get(name)

    @property
    def names(self) -> List[str]:
        return list(self._handlers)

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def __iter__(self) -> Iterator[CommandHandler]:
        return iter(self._handlers.values())

    def __len__(self) -> int:
        return len(self._handlers)


__all__ = ["CommandRegistry"]
