from __future__ import annotations

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse

from api.deps import get_verification_service
from api.templating import render
from services.verification import VerificationService


router = APIRouter(tags=["verification"])


@router.post("/step3", response_class=HTMLResponse)
def verify(
    request: Request,
    id: str = Form(""),
    token: str = Form(""),
    service: VerificationService = Depends(get_verification_service),
) -> HTMLResponse:
    outcome = service.verify(id, token)
    return render(request, outcome.view, outcome.model)
