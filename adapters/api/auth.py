"""
Request authentication - the backend verifies tokens, we only forward them.
"""

import logging
from typing import Optional
from aiohttp import web
from core.interfaces.repositories import IAuthRepository

logger = logging.getLogger(__name__)

ACCESS_TOKEN_COOKIE = "sb-access-token"


def not_authenticated() -> web.Response:
    return web.json_response({"error": "Not authenticated"}, status=401)


def extract_access_token(request: web.Request) -> str:
    """Bearer token from the Authorization header, else the session cookie"""
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() == "bearer" and token.strip():
        return token.strip()
    return request.cookies.get(ACCESS_TOKEN_COOKIE, "")


async def current_user_id(request: web.Request, auth_repo: IAuthRepository) -> Optional[str]:
    token = extract_access_token(request)
    if not token:
        return None
    return await auth_repo.get_user_id(token)


async def read_json(request: web.Request) -> dict:
    """JSON object body; anything else reads as empty"""
    try:
        body = await request.json()
    except ValueError:
        # malformed JSON or a body that is not UTF-8
        logger.debug(f"[API] Non-JSON body on {request.path}")
        return {}
    return body if isinstance(body, dict) else {}
