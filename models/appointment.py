from __future__ import annotations

from datetime import datetime, timedelta
from enum import Enum

from pydantic import BaseModel, ConfigDict


REMINDER_OFFSET = timedelta(hours=3)


class LineType(str, Enum):
    mobile = "mobile"
    fixed = "fixed"
    unknown = "unknown"

    @classmethod
    def from_provider(cls, value: str | None) -> "LineType":
        # MessageBird reports e.g. "mobile", "fixed line", "fixed line or mobile", "voip"
        normalized = (value or "").strip().lower()
        if normalized == "mobile":
            return cls.mobile
        if normalized == "fixed line":
            return cls.fixed
        return cls.unknown


class Appointment(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    treatment: str
    number: str
    appointment_at: datetime
    reminder_at: datetime

    @classmethod
    def schedule(cls, *, name: str, treatment: str, number: str, appointment_at: datetime) -> "Appointment":
        return cls(
            name=name,
            treatment=treatment,
            number=number,
            appointment_at=appointment_at,
            reminder_at=appointment_at - REMINDER_OFFSET,
        )
