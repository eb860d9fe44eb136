"""
Apex Platform API - Main entry point.

Serves notification, payout and legacy redirect routes for the
combat-sports event platform. Auth and storage live in Supabase.
"""

import logging
import sys
from aiohttp import web
from config.settings import settings, ConfigurationError
from adapters.api.loader import build_api_app

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler("api.log", encoding="utf-8"),
    ],
)
logger = logging.getLogger(__name__)

# Set DEBUG level only for our app loggers, not for noisy libraries
if settings.debug:
    for name in ['adapters', 'core', 'infrastructure', 'config', '__main__']:
        logging.getLogger(name).setLevel(logging.DEBUG)
    # Silence noisy HTTP debug logs
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)
    logging.getLogger('hpack').setLevel(logging.WARNING)


def main():
    """Validate configuration, wire services and serve the API."""
    logger.info("=== Apex Platform API Starting ===")
    logger.info(f"  env: {settings.env}")
    logger.info(f"  schema: {settings.db_schema}")
    logger.info(f"  platform fee: {settings.platform_fee_percentage}%")

    try:
        app = build_api_app(settings)
    except ConfigurationError as e:
        logger.error(f"{e}. Hint: check your .env or deployment variables")
        sys.exit(1)

    logger.info(f"Listening on {settings.api_host}:{settings.api_port}")
    web.run_app(app, host=settings.api_host, port=settings.api_port, print=None)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        logger.info("API stopped by user (Ctrl+C)")
