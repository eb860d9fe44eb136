"""
REST API adapter.

Thin aiohttp handlers over the core services:
- notifications read state
- organizer earnings
- legacy route redirects
"""

from adapters.api.app import create_api_app

__all__ = ["create_api_app"]
