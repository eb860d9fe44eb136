from infrastructure.database.auth_repository import SupabaseAuthRepository
from infrastructure.database.notification_repository import SupabaseNotificationRepository
from infrastructure.database.payment_repository import SupabasePaymentRepository
from infrastructure.database.profile_repository import SupabaseProfileRepository, SupabaseBoutRepository

__all__ = [
    "SupabaseAuthRepository",
    "SupabaseNotificationRepository",
    "SupabasePaymentRepository",
    "SupabaseProfileRepository",
    "SupabaseBoutRepository",
]
