from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


load_dotenv()
logger = logging.getLogger(__name__)


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(populate_by_name=True, extra="ignore")

    # MessageBird (lookup, SMS, verify)
    messagebird_api_key: Optional[str] = Field(default=None, alias="MESSAGEBIRD_API_KEY")
    messagebird_base_url: str = Field(
        default="https://rest.messagebird.com", alias="MESSAGEBIRD_BASE_URL"
    )
    messagebird_timeout_seconds: float = Field(
        default=10.0, gt=0, alias="MESSAGEBIRD_TIMEOUT_SECONDS"
    )

    # Country hint for number lookups (ISO 3166-1 alpha-2)
    country_code: str = Field(default="NL", alias="COUNTRY_CODE")
    sms_originator: str = Field(default="BeautyBird", alias="SMS_ORIGINATOR")

    # Wall-clock zone used for "now"; unset or unknown means process-local time
    timezone: Optional[str] = Field(default=None, alias="TZ")

    environment: Literal["development", "production", "test"] = Field(
        default="development", alias="ENVIRONMENT"
    )

    @field_validator("timezone")
    @classmethod
    def known_timezone(cls, value: Optional[str]) -> Optional[str]:
        if not value:
            return None
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError, OSError):
            logger.warning("config.invalid_timezone", extra={"timezone": value})
            return None
        return value


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return AppSettings()


settings = get_settings()
