from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel

from models.appointment import Appointment


class View(str, Enum):
    form = "form"
    confirmation = "confirmation"
    verify_success = "verify-success"
    verify_retry = "verify-retry"

    @property
    def template(self) -> str:
        return f"{self.value}.html"


class BookingRequest(BaseModel):
    name: str = ""
    treatment: str = ""
    number: str = ""
    date: str = ""
    time: str = ""

    def as_form_values(self) -> dict[str, Any]:
        return self.model_dump()


@dataclass(slots=True)
class BookingOutcome:
    view: View
    model: dict[str, Any] = field(default_factory=dict)
    appointment: Optional[Appointment] = None
    error: Optional[Exception] = None

    @property
    def committed(self) -> bool:
        return self.appointment is not None


@dataclass(slots=True)
class VerificationOutcome:
    view: View
    model: dict[str, Any] = field(default_factory=dict)
    error: Optional[Exception] = None

    @property
    def verified(self) -> bool:
        return self.view is View.verify_success
