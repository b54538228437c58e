from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from schemas.booking import View


TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render(request: Request, view: View, model: Dict[str, Any] | None = None) -> HTMLResponse:
    return templates.TemplateResponse(request, view.template, {"view": view.value, **(model or {})})
