"""
API loader - builds repositories and services from validated settings.
"""

from aiohttp import web
from config.settings import Settings

# Infrastructure
from infrastructure.database import (
    SupabaseAuthRepository,
    SupabaseNotificationRepository,
    SupabasePaymentRepository,
    SupabaseProfileRepository,
    SupabaseBoutRepository,
)
from infrastructure.database.supabase_client import get_supabase_client

# Core services
from core.services import NotificationService, RedirectService, EarningsService
from core.utils.platform_fees import PlatformFeeCalculator

from adapters.api.app import create_api_app


def build_api_app(settings: Settings) -> web.Application:
    """Wire the API against Supabase. Raises ConfigurationError on missing keys."""
    settings.validate_startup()
    client = get_supabase_client(settings)

    # === REPOSITORIES ===
    auth_repo = SupabaseAuthRepository(client)
    notification_repo = SupabaseNotificationRepository(client)
    payment_repo = SupabasePaymentRepository(client)
    profile_repo = SupabaseProfileRepository(client)
    bout_repo = SupabaseBoutRepository(client)

    # === CORE SERVICES ===
    fee_calculator = PlatformFeeCalculator.from_settings(settings)
    notification_service = NotificationService(notification_repo)
    redirect_service = RedirectService(bout_repo, profile_repo)
    earnings_service = EarningsService(payment_repo, profile_repo, fee_calculator)

    return create_api_app(auth_repo, notification_service, redirect_service, earnings_service)
