"""
Peacekeeper - Centralized Constants
===================================

All fixed values are defined here for maintainability.
Import from this module instead of hardcoding values.
"""

# =============================================================================
# Command Names
# =============================================================================

PING_COMMAND = "ping"
GLOBAL_BAN_COMMAND = "globalban"

# =============================================================================
# Ban Defaults
# =============================================================================

DEFAULT_BAN_REASON = "<No Reason Specified>"

# Messages are kept when banning; the ban only blocks rejoining
BAN_DELETE_MESSAGE_SECONDS = 0

# =============================================================================
# Discord API Error Codes
# =============================================================================

# JSON error code and message Discord returns for a user id that does not exist
UNKNOWN_USER_ERROR_CODE = 10013
UNKNOWN_USER_ERROR_MESSAGE = "Unknown User"

# =============================================================================
# User-Facing Responses
# =============================================================================

PONG_RESPONSE = "Pong!"
BAN_SUCCESS_RESPONSE = 'User `{tag}` (ID: `{user_id}`) has been banned across all servers for: "{reason}"'
UNKNOWN_TARGET_RESPONSE = "Are you gonna supply an ACTUAL user id?"
GENERIC_BAN_FAILURE_RESPONSE = "SOMETHING went wrong when banning..."
PERMISSION_DENIED_RESPONSE = "You don't have permission to use this, buddy."
GENERIC_COMMAND_FAILURE_RESPONSE = "Something went wrong while running this command."

# =============================================================================
# Notification Embed
# =============================================================================

BAN_NOTIFICATION_TITLE = "User `{tag}` (ID: `{user_id}`) has been banned across all servers"

# =============================================================================
# Operator Console
# =============================================================================

CONSOLE_STOP = "stop"
CONSOLE_REFRESH_COMMANDS = "refresh_commands"

EXIT_CODE_OK = 0
EXIT_CODE_FATAL = 1

# =============================================================================
# Logging
# =============================================================================

LOG_TRUNCATE_LENGTH = 100
