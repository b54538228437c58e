from __future__ import annotations

import logging
from datetime import datetime
from functools import lru_cache
from zoneinfo import ZoneInfo

from fastapi import Depends

from core.config import AppSettings, get_settings
from repositories.appointments import AppointmentStore, InMemoryAppointmentStore
from services.booking import BookingService
from services.messagebird import MessageBirdClient
from services.verification import VerificationService


logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_messagebird_client() -> MessageBirdClient:
    settings = get_settings()
    if not settings.messagebird_api_key:
        logger.warning("messagebird.api_key_missing")
    return MessageBirdClient(
        settings.messagebird_api_key,
        base_url=settings.messagebird_base_url,
        timeout=settings.messagebird_timeout_seconds,
    )


@lru_cache(maxsize=1)
def get_appointment_store() -> AppointmentStore:
    return InMemoryAppointmentStore()


def get_now(settings: AppSettings = Depends(get_settings)) -> datetime:
    # Appointments are naive wall-clock times in the clinic's zone; the zone is validated in AppSettings
    if settings.timezone:
        return datetime.now(ZoneInfo(settings.timezone)).replace(tzinfo=None)
    return datetime.now()


def get_booking_service(
    settings: AppSettings = Depends(get_settings),
    client: MessageBirdClient = Depends(get_messagebird_client),
    store: AppointmentStore = Depends(get_appointment_store),
) -> BookingService:
    return BookingService(
        client,
        store,
        country_code=settings.country_code,
        originator=settings.sms_originator,
    )


def get_verification_service(
    client: MessageBirdClient = Depends(get_messagebird_client),
) -> VerificationService:
    return VerificationService(client)
