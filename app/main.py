import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from app.core.config import settings
from app.core.errors import WeatherLookupError
from app.core.logging import configure_logging
from app.api.routes.weather import router as weather_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    configure_logging(settings.log_level)
    if not settings.openweather_api_key:
        logger.warning("OPENWEATHER_API_KEY is not set; provider calls will be rejected")

    app = FastAPI(title=settings.app_name)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @app.exception_handler(WeatherLookupError)
    async def weather_lookup_error_handler(request: Request, exc: WeatherLookupError):
        if exc.status_code >= 500:
            logger.error("%s: %s", type(exc).__name__, exc, exc_info=exc)
        else:
            logger.info("Rejected request: %s (%s)", type(exc).__name__, exc)
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.get("/healthz")
    async def healthz():
        return {"ok": True}

    app.include_router(weather_router, tags=["weather"])

    return app

app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, log_level=settings.log_level.lower())
