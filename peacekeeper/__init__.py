"""
Peacekeeper - Source Package
============================

Discord bot that bans a user across every server it is in.

Package Structure:
- bot.py: Discord client and startup wiring
- commands/: Slash command handlers, registry and registrar
- core/: Configuration, logging, exceptions, shutdown signal
- handlers/: Interaction dispatcher and command tree
- services/: Global ban pipeline and operator console
- utils/: Error handling helpers

Version: v1.0.0
"""

__version__ = "1.0.0"
