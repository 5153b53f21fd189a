"""
Peacekeeper - Core Package
==========================

Configuration, logging, exceptions and process lifecycle primitives.

DESIGN:
    Core modules are singletons or global instances so every part of
    the bot sees the same state:
    - get_config() returns the same Config instance
    - logger is a global TreeLogger instance
"""

from .config import (
    Config,
    ConfigValidationError,
    EmbedColors,
    get_config,
    can_ban_members,
)

from .errors import (
    PeacekeeperError,
    BanError,
    PermissionDenied,
    UnknownTarget,
    GenericBanFailure,
    RegistrationError,
    ConsoleFatal,
)

from .logger import logger, TreeLogger

from .shutdown import ShutdownSignal


__all__ = [
    # Config
    "Config",
    "ConfigValidationError",
    "EmbedColors",
    "get_config",
    "can_ban_members",
    # Errors
    "PeacekeeperError",
    "BanError",
    "PermissionDenied",
    "UnknownTarget",
    "GenericBanFailure",
    "RegistrationError",
    "ConsoleFatal",
    # Logger
    "logger",
    "TreeLogger",
    # Lifecycle
    "ShutdownSignal",
]
