"""
HTTP API - aiohttp application wiring.
"""

import logging
from aiohttp import web
from adapters.api.notifications import create_notification_routes
from adapters.api.payouts import create_payout_routes
from adapters.api.redirects import create_redirect_routes
from core.interfaces.repositories import IAuthRepository
from core.services.earnings_service import EarningsService
from core.services.notification_service import NotificationService
from core.services.redirect_service import RedirectService

logger = logging.getLogger(__name__)


def create_api_app(
    auth_repo: IAuthRepository,
    notification_service: NotificationService,
    redirect_service: RedirectService,
    earnings_service: EarningsService,
) -> web.Application:
    """Create aiohttp app with notification, payout and legacy redirect routes."""
    app = web.Application()
    app.add_routes(create_notification_routes(auth_repo, notification_service))
    app.add_routes(create_payout_routes(auth_repo, earnings_service))
    app.add_routes(create_redirect_routes(auth_repo, redirect_service))

    async def handle_health(request: web.Request) -> web.Response:
        return web.json_response({"ok": True})

    app.router.add_get("/health", handle_health)
    logger.info(f"[API] {len(app.router.routes())} routes registered")
    return app
