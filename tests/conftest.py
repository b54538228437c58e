from __future__ import annotations

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from models.appointment import LineType
from repositories.appointments import InMemoryAppointmentStore
from services.messagebird import LookupResult, MessageResult, VerifyResult


FIXED_NOW = datetime(2024, 1, 1, 0, 0, 0)


class FakeMessageBird:
    """Stand-in for MessageBirdClient that records every call."""

    def __init__(
        self,
        *,
        line_type: LineType = LineType.mobile,
        lookup_error: Exception | None = None,
        send_error: Exception | None = None,
        verify_error: Exception | None = None,
    ) -> None:
        self.line_type = line_type
        self.lookup_error = lookup_error
        self.send_error = send_error
        self.verify_error = verify_error
        self.lookup_calls: list[tuple] = []
        self.send_calls: list[tuple] = []
        self.verify_calls: list[tuple] = []

    def lookup(self, phone_number, country_code=None):
        self.lookup_calls.append((phone_number, country_code))
        if self.lookup_error:
            raise self.lookup_error
        return LookupResult(
            phone_number=str(phone_number),
            country_code=country_code,
            line_type=self.line_type,
            raw_type=self.line_type.value,
        )

    def send_message(self, originator, body, recipients):
        self.send_calls.append((originator, body, list(recipients)))
        if self.send_error:
            raise self.send_error
        return MessageResult(id="msg-1", total_count=1, total_sent_count=1)

    def verify_token(self, verify_id, token):
        self.verify_calls.append((verify_id, token))
        if self.verify_error:
            raise self.verify_error
        return VerifyResult(id=verify_id, status="verified")


@pytest.fixture
def provider() -> FakeMessageBird:
    return FakeMessageBird()


@pytest.fixture
def store() -> InMemoryAppointmentStore:
    return InMemoryAppointmentStore()


@pytest.fixture
def client(provider: FakeMessageBird, store: InMemoryAppointmentStore):
    from api.deps import get_appointment_store, get_messagebird_client, get_now
    from main import create_app

    app = create_app()
    app.dependency_overrides[get_messagebird_client] = lambda: provider
    app.dependency_overrides[get_appointment_store] = lambda: store
    app.dependency_overrides[get_now] = lambda: FIXED_NOW
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
