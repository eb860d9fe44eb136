"""
Legacy route redirects - old links answer with 302 to the canonical page.
"""

from aiohttp import web
from adapters.api.auth import current_user_id
from core.interfaces.repositories import IAuthRepository
from core.services.redirect_service import RedirectService


def create_redirect_routes(
    auth_repo: IAuthRepository,
    redirect_service: RedirectService,
) -> web.RouteTableDef:
    routes = web.RouteTableDef()

    @routes.get("/events/new")
    async def handle_new_event(request: web.Request) -> web.Response:
        raise web.HTTPFound(redirect_service.resolve_static(request.path))

    @routes.get("/bouts/{bout_id}")
    async def handle_bout(request: web.Request) -> web.Response:
        location = await redirect_service.resolve_bout(request.match_info["bout_id"])
        raise web.HTTPFound(location)

    @routes.get("/profile/me")
    async def handle_my_profile(request: web.Request) -> web.Response:
        user_id = await current_user_id(request, auth_repo)
        raise web.HTTPFound(await redirect_service.resolve_my_profile(user_id))

    return routes
