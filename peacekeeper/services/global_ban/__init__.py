"""
Peacekeeper - Global Ban Package
================================

Cross-server ban fan-out.

Structure:
    - models.py: BanRequest, per-guild outcomes and the summary
    - embeds.py: Public-updates notification embed
    - service.py: GlobalBanService pipeline
"""

from .models import (
    BanOutcome,
    BanRequest,
    BanSummary,
    NotificationOutcome,
    NotificationStatus,
    parse_user_id,
)
from .embeds import build_ban_notification
from .service import GlobalBanService

__all__ = [
    "BanOutcome",
    "BanRequest",
    "BanSummary",
    "NotificationOutcome",
    "NotificationStatus",
    "parse_user_id",
    "build_ban_notification",
    "GlobalBanService",
]
