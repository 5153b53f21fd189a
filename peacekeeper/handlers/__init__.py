"""
Peacekeeper - Handlers Package
==============================

Inbound Discord event handling.

Available Handlers:
    InteractionDispatcher: Acknowledges, runs and answers slash commands
    PeacekeeperTree: Command tree that ignores unknown commands
"""

from .interactions import InteractionDispatcher, PeacekeeperTree


__all__ = [
    "InteractionDispatcher",
    "PeacekeeperTree",
]
