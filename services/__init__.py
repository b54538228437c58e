from __future__ import annotations

# Re-export key service classes for convenient imports
from .booking import BookingService, NotMobileError, BookingValidationError
from .messagebird import (
    GeneralError,
    MessageBirdClient,
    NotFoundError,
    ProviderError,
    UnauthorizedError,
)
from .verification import VerificationService

__all__ = [
    "BookingService",
    "GeneralError",
    "MessageBirdClient",
    "NotFoundError",
    "NotMobileError",
    "ProviderError",
    "UnauthorizedError",
    "BookingValidationError",
    "VerificationService",
]
