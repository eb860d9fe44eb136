import pytest
from datetime import datetime, timezone
from adapters.api import create_api_app
from core.domain.models import Notification, OrganizerEarnings, EventEarnings, PayoutRequest
from core.services.earnings_service import EarningsService
from core.services.notification_service import NotificationService
from core.services.redirect_service import RedirectService

AUTH = {"Authorization": "Bearer token-abc"}


@pytest.fixture
def notification_service(mocker):
    service = mocker.Mock(spec=NotificationService)
    service.mark_read.return_value = (True, "ok")
    service.mark_all_read.return_value = (True, "ok")
    service.mark_thread_read.return_value = (True, "ok")
    service.get_recent.return_value = (True, "ok", [])
    return service


@pytest.fixture
def redirect_service(mocker):
    service = mocker.Mock(spec=RedirectService)
    service.resolve_static.side_effect = RedirectService.resolve_static
    return service


@pytest.fixture
def earnings_service(mocker):
    return mocker.Mock(spec=EarningsService)


@pytest.fixture
async def client(aiohttp_client, mock_auth_repo, notification_service, redirect_service, earnings_service):
    app = create_api_app(mock_auth_repo, notification_service, redirect_service, earnings_service)
    return await aiohttp_client(app)


async def test_health(client):
    resp = await client.get("/health")
    assert resp.status == 200
    assert await resp.json() == {"ok": True}


# === NOTIFICATIONS ===

@pytest.mark.parametrize("path", [
    "/api/notifications/mark-read",
    "/api/notifications/mark-read-all",
    "/api/notifications/mark-thread-read",
])
async def test_notifications_require_auth(client, mock_auth_repo, path):
    resp = await client.post(path, json={})
    assert resp.status == 401
    assert await resp.json() == {"error": "Not authenticated"}
    mock_auth_repo.get_user_id.assert_not_called()


async def test_rejected_token_is_unauthenticated(client, mock_auth_repo):
    mock_auth_repo.get_user_id.return_value = None
    resp = await client.post("/api/notifications/mark-read-all", headers=AUTH)
    assert resp.status == 401


async def test_token_from_cookie(client, mock_auth_repo, notification_service):
    resp = await client.post("/api/notifications/mark-read-all", cookies={"sb-access-token": "cookie-token"})
    assert resp.status == 200
    mock_auth_repo.get_user_id.assert_awaited_once_with("cookie-token")


async def test_notifications_signed_out_are_empty(client, notification_service):
    resp = await client.get("/api/notifications")
    assert resp.status == 200
    assert await resp.json() == {"notifications": [], "unreadCount": 0}
    notification_service.get_recent.assert_not_called()


async def test_notifications_rejected_token_are_empty(client, mock_auth_repo, notification_service):
    mock_auth_repo.get_user_id.return_value = None
    resp = await client.get("/api/notifications", headers=AUTH)
    assert resp.status == 200
    assert await resp.json() == {"notifications": [], "unreadCount": 0}


async def test_list_notifications(client, notification_service):
    notification_service.get_recent.return_value = (True, "ok", [
        Notification(id="n-2", type="message", data={"thread_id": "t-1"}, actor_profile_id="user-2",
                     created_at=datetime(2026, 10, 2, 12, tzinfo=timezone.utc)),
        Notification(id="n-1", type="follow", is_read=True),
    ])

    resp = await client.get("/api/notifications", headers=AUTH)

    assert resp.status == 200
    body = await resp.json()
    assert body["unreadCount"] == 1
    assert body["notifications"][0] == {
        "id": "n-2",
        "type": "message",
        "data": {"thread_id": "t-1"},
        "is_read": False,
        "created_at": "2026-10-02T12:00:00+00:00",
        "actor_profile_id": "user-2",
    }
    assert body["notifications"][1]["created_at"] is None
    notification_service.get_recent.assert_awaited_once_with("user-1")


async def test_list_notifications_failure(client, notification_service):
    notification_service.get_recent.return_value = (False, "Could not load notifications", [])
    resp = await client.get("/api/notifications", headers=AUTH)
    assert resp.status == 500
    assert await resp.json() == {"error": "Could not load notifications"}


async def test_mark_read(client, mock_auth_repo, notification_service):
    resp = await client.post("/api/notifications/mark-read", json={"notificationId": "n-1"}, headers=AUTH)
    assert resp.status == 200
    assert await resp.json() == {"ok": True}
    mock_auth_repo.get_user_id.assert_awaited_once_with("token-abc")
    notification_service.mark_read.assert_awaited_once_with("user-1", "n-1")


@pytest.mark.parametrize("kwargs", [
    {"json": {}},
    {"json": {"notificationId": ""}},
    {"data": "not json"},
    {"data": b"\xff\xfe{"},
    {"json": ["n-1"]},
])
async def test_mark_read_requires_notification_id(client, notification_service, kwargs):
    resp = await client.post("/api/notifications/mark-read", headers=AUTH, **kwargs)
    assert resp.status == 400
    assert await resp.json() == {"error": "notificationId is required"}
    notification_service.mark_read.assert_not_called()


async def test_mark_read_failure(client, notification_service):
    notification_service.mark_read.return_value = (False, "Could not mark notification as read")
    resp = await client.post("/api/notifications/mark-read", json={"notificationId": "n-1"}, headers=AUTH)
    assert resp.status == 500
    assert await resp.json() == {"error": "Could not mark notification as read"}


async def test_mark_read_all(client, notification_service):
    resp = await client.post("/api/notifications/mark-read-all", headers=AUTH)
    assert resp.status == 200
    notification_service.mark_all_read.assert_awaited_once_with("user-1")


async def test_mark_read_all_failure(client, notification_service):
    notification_service.mark_all_read.return_value = (False, "Could not mark as read")
    resp = await client.post("/api/notifications/mark-read-all", headers=AUTH)
    assert resp.status == 500


async def test_mark_thread_read(client, notification_service):
    resp = await client.post("/api/notifications/mark-thread-read", json={"threadId": "t-1"}, headers=AUTH)
    assert resp.status == 200
    notification_service.mark_thread_read.assert_awaited_once_with("user-1", "t-1")


async def test_mark_thread_read_requires_thread_id(client, notification_service):
    resp = await client.post("/api/notifications/mark-thread-read", json={}, headers=AUTH)
    assert resp.status == 400
    assert await resp.json() == {"error": "threadId is required"}


# === REDIRECTS ===

async def test_new_event_redirect(client):
    resp = await client.get("/events/new", allow_redirects=False)
    assert resp.status == 302
    assert resp.headers["Location"] == "/create-event"


async def test_bout_redirect(client, redirect_service):
    redirect_service.resolve_bout.return_value = "/events/e-3#bout-b-7"
    resp = await client.get("/bouts/b-7", allow_redirects=False)
    assert resp.status == 302
    assert resp.headers["Location"] == "/events/e-3#bout-b-7"
    redirect_service.resolve_bout.assert_awaited_once_with("b-7")


async def test_my_profile_redirect_signed_out(client, redirect_service, mock_auth_repo):
    redirect_service.resolve_my_profile.return_value = "/login"
    resp = await client.get("/profile/me", allow_redirects=False)
    assert resp.status == 302
    assert resp.headers["Location"] == "/login"
    redirect_service.resolve_my_profile.assert_awaited_once_with(None)


async def test_my_profile_redirect_signed_in(client, redirect_service):
    redirect_service.resolve_my_profile.return_value = "/profile/iron_mike"
    resp = await client.get("/profile/me", headers=AUTH, allow_redirects=False)
    assert resp.headers["Location"] == "/profile/iron_mike"
    redirect_service.resolve_my_profile.assert_awaited_once_with("user-1")


# === PAYOUTS ===

async def test_organizer_earnings_requires_auth(client):
    resp = await client.get("/api/payouts/organizer/earnings")
    assert resp.status == 401


async def test_organizer_earnings_forbidden(client, earnings_service):
    earnings_service.get_organizer_earnings.return_value = (
        False, "Only organizers can view organizer earnings", None
    )
    resp = await client.get("/api/payouts/organizer/earnings", headers=AUTH)
    assert resp.status == 403
    assert await resp.json() == {"error": "Only organizers can view organizer earnings"}


async def test_organizer_earnings_backend_error(client, earnings_service, api_error):
    earnings_service.get_organizer_earnings.side_effect = api_error
    resp = await client.get("/api/payouts/organizer/earnings", headers=AUTH)
    assert resp.status == 500
    assert await resp.json() == {"error": "Failed to calculate organizer earnings"}


async def test_organizer_earnings_invalid_row(client, earnings_service):
    earnings_service.get_organizer_earnings.side_effect = ValueError("amount_requested is not an integer")
    resp = await client.get("/api/payouts/organizer/earnings", headers=AUTH)
    assert resp.status == 500
    assert await resp.json() == {"error": "Failed to calculate organizer earnings"}


async def test_organizer_earnings(client, earnings_service):
    earnings_service.get_organizer_earnings.return_value = (True, "ok", OrganizerEarnings(
        total_revenue=12000,
        total_platform_fees=600,
        total_fighter_share=5000,
        organizer_share=6400,
        total_paid_out=2000,
        pending_requests=0,
        available_balance=4400,
        earnings_breakdown=[EventEarnings(
            event_id="e-1", event_name="Fight Night 1", total_revenue=12000,
            platform_fee=600, fighter_share=5000, organizer_share=6400,
        )],
        payout_requests=[PayoutRequest(id="p-1", event_id="e-1", amount_requested=2000, status="processed")],
    ))

    resp = await client.get("/api/payouts/organizer/earnings", headers=AUTH)

    assert resp.status == 200
    body = await resp.json()
    assert body["totalPlatformFees"] == 600
    assert body["availableBalance"] == 4400
    assert body["earningsBreakdown"] == [{
        "eventId": "e-1",
        "eventName": "Fight Night 1",
        "eventDate": None,
        "totalRevenue": 12000,
        "platformFee": 600,
        "fighterShare": 5000,
        "organizerShare": 6400,
    }]
    assert body["payoutRequests"][0]["status"] == "processed"
    earnings_service.get_organizer_earnings.assert_awaited_once_with("user-1")
