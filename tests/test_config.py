from __future__ import annotations

from datetime import datetime, timedelta, timezone

from api.deps import get_now
from core.config import AppSettings


def test_unknown_timezone_is_dropped_at_load() -> None:
    settings = AppSettings(timezone="Not/AZone")

    assert settings.timezone is None


def test_blank_timezone_means_local_time() -> None:
    assert AppSettings(timezone="").timezone is None


def test_known_timezone_is_kept_and_used_for_now() -> None:
    settings = AppSettings(timezone="UTC")

    now = get_now(settings)

    assert settings.timezone == "UTC"
    assert now.tzinfo is None
    utc_now = datetime.now(timezone.utc).replace(tzinfo=None)
    assert abs(utc_now - now) < timedelta(minutes=1)


def test_invalid_timezone_falls_back_to_local_clock() -> None:
    now = get_now(AppSettings(timezone="Mars/Olympus_Mons"))

    assert now.tzinfo is None
    assert abs(datetime.now() - now) < timedelta(minutes=1)
