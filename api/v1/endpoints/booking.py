from __future__ import annotations

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse

from api.deps import get_booking_service, get_now
from api.templating import render
from schemas.booking import BookingRequest, View
from services.booking import BookingService, suggested_slot


router = APIRouter(tags=["booking"])
logger = logging.getLogger(__name__)


@router.get("/", response_class=HTMLResponse)
def booking_form(request: Request, now: datetime = Depends(get_now)) -> HTMLResponse:
    # Pre-fill a slot 3h10m ahead so the form passes the lead-time check as-is
    return render(request, View.form, suggested_slot(now))


# Blocking provider calls: plain def so FastAPI runs this in its thread pool
@router.post("/book", response_class=HTMLResponse)
def book(
    request: Request,
    name: str = Form(""),
    treatment: str = Form(""),
    number: str = Form(""),
    date: str = Form(""),
    time: str = Form(""),
    now: datetime = Depends(get_now),
    service: BookingService = Depends(get_booking_service),
) -> HTMLResponse:
    logger.info("booking.request", extra={"path": str(request.url.path)})
    booking_request = BookingRequest(name=name, treatment=treatment, number=number, date=date, time=time)
    outcome = service.book_appointment(booking_request, now)
    return render(request, outcome.view, outcome.model)
