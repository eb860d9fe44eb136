from core.services.notification_service import NotificationService
from core.services.redirect_service import RedirectService
from core.services.earnings_service import EarningsService, summarize_payouts

__all__ = [
    "NotificationService",
    "RedirectService",
    "EarningsService",
    "summarize_payouts",
]
