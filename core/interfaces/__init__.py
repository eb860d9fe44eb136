from core.interfaces.repositories import (
    IAuthRepository,
    INotificationRepository,
    IProfileRepository,
    IBoutRepository,
    IPaymentRepository,
)

__all__ = [
    "IAuthRepository",
    "INotificationRepository",
    "IProfileRepository",
    "IBoutRepository",
    "IPaymentRepository",
]
