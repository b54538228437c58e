from __future__ import annotations

from fastapi import APIRouter

from api.v1.endpoints import booking as booking_endpoints
from api.v1.endpoints import verification as verification_endpoints


api_router = APIRouter()

# Form-driven pages, mounted at the site root
api_router.include_router(booking_endpoints.router)
api_router.include_router(verification_endpoints.router)
