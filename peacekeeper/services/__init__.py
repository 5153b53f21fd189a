"""
Peacekeeper - Services Package
==============================

Long-running or multi-step work the commands and the entry point use.

Available Services:
    GlobalBanService: Cross-server ban fan-out with notifications
    OperatorConsole: stdin commands (stop, refresh_commands)
"""

from .global_ban import GlobalBanService
from .console import OperatorConsole


__all__ = [
    "GlobalBanService",
    "OperatorConsole",
]
