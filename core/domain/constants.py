"""
Domain constants - fees, roles, statuses and route tables.
Centralized here for easy modification.
"""

# === Billing ===
DEFAULT_PLATFORM_FEE_PERCENTAGE = 5  # 5% platform fee
# Largest integer a JavaScript number holds exactly (Number.MAX_SAFE_INTEGER)
MAX_AMOUNT_MINOR_UNITS = 2 ** 53 - 1

# === Roles ===
ORGANIZER_ROLES = ("promotion", "gym")

# === Payouts ===
PAYOUT_STATUSES_PAID = ("processed",)
PAYOUT_STATUSES_PENDING = ("pending", "approved")
ORGANIZER_RECIPIENT_TYPE = "organizer"

# === Notifications ===
NOTIFICATION_TYPE_MESSAGE = "message"
RECENT_NOTIFICATIONS_LIMIT = 30

# === Routes ===
# Deprecated path -> canonical path
LEGACY_ROUTES = {
    "/events/new": "/create-event",
}
EVENTS_ROUTE = "/events"
LOGIN_ROUTE = "/login"
PROFILE_SETTINGS_ROUTE = "/profile/settings"
