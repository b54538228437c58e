from __future__ import annotations

import logging
from logging.config import dictConfig
from fastapi import FastAPI

from api.v1.router import api_router
from core.config import settings


def configure_logging() -> None:
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "()": "pythonjsonlogger.jsonlogger.JsonFormatter",
                    "fmt": "%(asctime)s %(levelname)s %(name)s %(message)s",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                    "level": "INFO",
                }
            },
            "root": {"handlers": ["console"], "level": "INFO"},
            "loggers": {
                "services": {"level": "INFO", "propagate": True},
                "api": {"level": "INFO", "propagate": True},
            },
        }
    )


configure_logging()
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title="BeautyBird Appointment Reminders", version="0.1.0")

    app.include_router(api_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    logger.info(
        "Application initialized",
        extra={"environment": settings.environment, "country_code": settings.country_code},
    )
    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.environment == "development")
