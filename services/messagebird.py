"""Thin synchronous client for the MessageBird REST API.

Covers the three calls the booking service needs: number lookup, SMS
dispatch and verify-token checks. Every failure (HTTP error status,
timeout, connection problem, unreadable payload) surfaces as a
``ProviderError`` subclass so callers have a single thing to catch.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import quote

import requests

from models.appointment import LineType


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://rest.messagebird.com"


class ProviderError(Exception):
    def __init__(self, message: str, *, status_code: int | None = None, errors: Optional[List[Dict[str, Any]]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = errors or []

    def __str__(self) -> str:
        return self.message


class UnauthorizedError(ProviderError):
    pass


class GeneralError(ProviderError):
    pass


class NotFoundError(ProviderError):
    pass


@dataclass(slots=True)
class LookupResult:
    phone_number: str
    country_code: str | None
    line_type: LineType
    raw_type: str | None = None


@dataclass(slots=True)
class MessageResult:
    id: str
    href: str | None = None
    total_count: int = 0
    total_sent_count: int = 0


@dataclass(slots=True)
class VerifyResult:
    id: str
    status: str | None = None
    recipient: str | None = None


def _describe(errors: List[Dict[str, Any]], fallback: str) -> str:
    descriptions = [str(e.get("description")) for e in errors if isinstance(e, dict) and e.get("description")]
    return "; ".join(descriptions) or fallback


class MessageBirdClient:
    def __init__(
        self,
        api_key: str | None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Dict[str, Any] | None = None,
        json: Dict[str, Any] | None = None,
    ) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        headers = {
            "Authorization": f"AccessKey {self.api_key or ''}",
            "Accept": "application/json",
        }
        try:
            response = self.session.request(
                method, url, params=params, json=json, headers=headers, timeout=self.timeout
            )
        except requests.RequestException as exc:
            logger.warning("messagebird.unreachable", extra={"method": method, "path": path, "error": str(exc)})
            raise GeneralError(f"MessageBird is unreachable: {exc}") from exc

        try:
            payload = response.json() if response.content else {}
        except ValueError:
            payload = {}
        if not isinstance(payload, dict):
            payload = {}

        if response.status_code >= 400:
            errors = payload.get("errors") or []
            message = _describe(errors, f"MessageBird request failed with HTTP {response.status_code}")
            logger.warning(
                "messagebird.request_failed",
                extra={"method": method, "path": path, "status_code": response.status_code, "error": message},
            )
            if response.status_code == 401:
                raise UnauthorizedError(message, status_code=401, errors=errors)
            if response.status_code == 404:
                raise NotFoundError(message, status_code=404, errors=errors)
            raise GeneralError(message, status_code=response.status_code, errors=errors)

        return payload

    def lookup(self, phone_number: int | str, country_code: str | None = None) -> LookupResult:
        params = {"countryCode": country_code} if country_code else None
        payload = self._request("GET", f"/lookup/{quote(str(phone_number), safe='')}", params=params)
        raw_type = payload.get("type")
        return LookupResult(
            phone_number=str(payload.get("phoneNumber", phone_number)),
            country_code=payload.get("countryCode", country_code),
            line_type=LineType.from_provider(raw_type),
            raw_type=raw_type,
        )

    def send_message(self, originator: str, body: str, recipients: Iterable[int | str]) -> MessageResult:
        payload = self._request(
            "POST",
            "/messages",
            json={"originator": originator, "body": body, "recipients": list(recipients)},
        )
        counts = payload.get("recipients") or {}
        return MessageResult(
            id=str(payload.get("id", "")),
            href=payload.get("href"),
            total_count=int(counts.get("totalCount", 0) or 0),
            total_sent_count=int(counts.get("totalSentCount", 0) or 0),
        )

    def verify_token(self, verify_id: str, token: str) -> VerifyResult:
        payload = self._request("GET", f"/verify/{quote(verify_id, safe='')}", params={"token": token})
        recipient = payload.get("recipient")
        return VerifyResult(
            id=str(payload.get("id", verify_id)),
            status=payload.get("status"),
            recipient=str(recipient) if recipient is not None else None,
        )
