from __future__ import annotations

import pytest

from conftest import FakeMessageBird
from schemas.booking import View
from services.messagebird import GeneralError, NotFoundError, UnauthorizedError
from services.verification import VerificationService


def test_valid_token_renders_success_view() -> None:
    provider = FakeMessageBird()

    outcome = VerificationService(provider).verify("verify-id", "123456")

    assert outcome.verified
    assert outcome.view is View.verify_success
    assert outcome.model == {}
    assert provider.verify_calls == [("verify-id", "123456")]


@pytest.mark.parametrize(
    "error",
    [
        UnauthorizedError("Request not allowed (incorrect access_key)", status_code=401),
        GeneralError("The token is invalid.", status_code=422),
        NotFoundError("Verify object could not be found", status_code=404),
    ],
)
def test_provider_failure_renders_retry_view(error) -> None:
    provider = FakeMessageBird(verify_error=error)

    outcome = VerificationService(provider).verify("verify-id", "000000")

    assert outcome.view is View.verify_retry
    assert outcome.model == {"id": "verify-id", "errors": str(error)}
    assert outcome.error is error


@pytest.mark.parametrize("verify_id, token", [("", "123456"), ("verify-id", ""), ("  ", "  ")])
def test_blank_input_is_rejected_locally(verify_id, token) -> None:
    provider = FakeMessageBird()

    outcome = VerificationService(provider).verify(verify_id, token)

    assert outcome.view is View.verify_retry
    assert "errors" in outcome.model
    assert provider.verify_calls == []
