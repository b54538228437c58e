from __future__ import annotations

import logging
from typing import Protocol

from schemas.booking import VerificationOutcome, View
from services.messagebird import ProviderError, VerifyResult


logger = logging.getLogger(__name__)


class VerifyProvider(Protocol):
    def verify_token(self, verify_id: str, token: str) -> VerifyResult: ...


class VerificationService:
    """Checks a one-time token against a pending MessageBird verification."""

    def __init__(self, provider: VerifyProvider) -> None:
        self.provider = provider

    def verify(self, verify_id: str, token: str) -> VerificationOutcome:
        verify_id = (verify_id or "").strip()
        token = (token or "").strip()
        if not verify_id or not token:
            message = "Please provide both the verification id and the token!"
            logger.info("verify.rejected", extra={"reason": "missing fields"})
            return VerificationOutcome(
                view=View.verify_retry,
                model={"id": verify_id, "errors": message},
                error=ValueError(message),
            )

        try:
            result = self.provider.verify_token(verify_id, token)
        except ProviderError as exc:
            logger.info(
                "verify.failed",
                extra={"verify_id": verify_id, "error": str(exc), "error_type": type(exc).__name__},
            )
            return VerificationOutcome(
                view=View.verify_retry,
                model={"id": verify_id, "errors": str(exc)},
                error=exc,
            )

        logger.info("verify.succeeded", extra={"verify_id": result.id, "status": result.status})
        return VerificationOutcome(view=View.verify_success)
