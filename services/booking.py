"""Appointment booking workflow.

Received -> Validated -> Looked-up -> Dispatched -> Committed, where any
step may short-circuit to a form re-render. The appointment is only stored
after the confirmation SMS went out.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta
from typing import Any, Dict, Protocol

from models.appointment import Appointment, LineType
from repositories.appointments import AppointmentStore
from schemas.booking import BookingOutcome, BookingRequest, View
from services.messagebird import LookupResult, MessageResult, ProviderError


logger = logging.getLogger(__name__)

MINIMUM_LEAD_TIME = timedelta(hours=3, minutes=5)
SUGGESTED_LEAD_TIME = timedelta(hours=3, minutes=10)

REQUIRED_FIELDS = ("name", "treatment", "number", "date", "time")
# E.164 caps numbers at 15 digits
_DIGITS = re.compile(r"[0-9]{1,15}")

MESSAGE_TEMPLATE = "{name}, here's a reminder that you have a {treatment} scheduled for {time}. See you soon!"


class BookingError(Exception):
    reason = "booking failed"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class BookingValidationError(BookingError):
    def __init__(self, reason: str, message: str) -> None:
        super().__init__(message)
        self.reason = reason


class NotMobileError(BookingError):
    reason = "not mobile"
    default_message = (
        "You have entered a valid phone number, but it's not a mobile number! "
        "Provide a mobile number so we can contact you via SMS."
    )

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class BookingProvider(Protocol):
    def lookup(self, phone_number: int | str, country_code: str | None = None) -> LookupResult: ...

    def send_message(self, originator: str, body: str, recipients: list[int]) -> MessageResult: ...


def mask_number(number: str) -> str:
    if len(number) <= 4:
        return "*" * len(number)
    return f"{'*' * (len(number) - 4)}{number[-4:]}"


def suggested_slot(now: datetime) -> Dict[str, str]:
    future = now + SUGGESTED_LEAD_TIME
    return {"date": future.date().isoformat(), "time": future.strftime("%H:%M:%S")}


def compose_message(name: str, treatment: str, appointment_at: datetime) -> str:
    return MESSAGE_TEMPLATE.format(name=name, treatment=treatment, time=appointment_at.strftime("%H:%M"))


def check_required_fields(request: BookingRequest) -> None:
    if any(not getattr(request, f).strip() for f in REQUIRED_FIELDS):
        raise BookingValidationError("missing fields", "Please fill all required fields!")


def parse_appointment_at(date: str, time: str) -> datetime:
    try:
        parsed = datetime.fromisoformat(f"{date.strip()}T{time.strip()}")
    except ValueError as exc:
        raise BookingValidationError("bad datetime", "Please provide a valid appointment date and time!") from exc
    if parsed.tzinfo is not None:
        raise BookingValidationError("bad datetime", "Please provide a valid appointment date and time!")
    return parsed


def check_lead_time(appointment_at: datetime, now: datetime) -> None:
    if appointment_at < now + MINIMUM_LEAD_TIME:
        raise BookingValidationError(
            "too soon", "You can only book appointments that are at least 3 hours in the future!"
        )


def parse_phone_number(number: str) -> int:
    cleaned = number.strip()
    if not _DIGITS.fullmatch(cleaned):
        raise BookingValidationError("bad phone number", "Please enter your phone number using digits only (at most 15)!")
    return int(cleaned)


class BookingService:
    def __init__(
        self,
        provider: BookingProvider,
        store: AppointmentStore,
        *,
        country_code: str | None,
        originator: str,
    ) -> None:
        self.provider = provider
        self.store = store
        self.country_code = country_code
        self.originator = originator

    def _rejected(self, request: BookingRequest, exc: Exception, *, state: str) -> BookingOutcome:
        model: Dict[str, Any] = {**request.as_form_values(), "errors": str(exc)}
        logger.info(
            "booking.rejected",
            extra={
                "state": state,
                "reason": getattr(exc, "reason", type(exc).__name__),
                "number": mask_number(request.number.strip()),
                "error": str(exc),
            },
        )
        return BookingOutcome(view=View.form, model=model, error=exc)

    def book_appointment(self, request: BookingRequest, now: datetime) -> BookingOutcome:
        # Received -> Validated
        try:
            check_required_fields(request)
            appointment_at = parse_appointment_at(request.date, request.time)
            check_lead_time(appointment_at, now)
            phone_number = parse_phone_number(request.number)
        except BookingValidationError as exc:
            return self._rejected(request, exc, state="received")

        # Validated -> Looked-up
        try:
            lookup = self.provider.lookup(phone_number, self.country_code)
        except ProviderError as exc:
            return self._rejected(request, exc, state="validated")
        if lookup.line_type is not LineType.mobile:
            return self._rejected(request, NotMobileError(), state="validated")

        # Looked-up -> Dispatched
        body = compose_message(request.name, request.treatment, appointment_at)
        try:
            result = self.provider.send_message(self.originator, body, [phone_number])
        except ProviderError as exc:
            return self._rejected(request, exc, state="looked-up")

        # Dispatched -> Committed
        appointment = Appointment.schedule(
            name=request.name,
            treatment=request.treatment,
            number=request.number.strip(),
            appointment_at=appointment_at,
        )
        self.store.append(appointment)
        logger.info(
            "booking.committed",
            extra={
                "number": mask_number(appointment.number),
                "appointment_at": appointment.appointment_at.isoformat(),
                "reminder_at": appointment.reminder_at.isoformat(),
                "message_id": result.id,
            },
        )
        return BookingOutcome(
            view=View.confirmation,
            model=appointment.model_dump(),
            appointment=appointment,
        )
