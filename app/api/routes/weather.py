import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse, PlainTextResponse

from app.api.deps import get_weather_service
from app.core.errors import GENERIC_ERROR_MESSAGE, WeatherLookupError
from app.services.weather_service import WeatherService, validate_lookup_request

logger = logging.getLogger(__name__)

router = APIRouter()

@router.api_route("/weather", methods=["GET", "POST"])
async def get_weather(
    city_id: str | None = Query(None, alias="cityId"),
    units: str | None = Query(None),
    svc: WeatherService = Depends(get_weather_service),
):
    logger.info("Weather request cityId=%r units=%r", city_id, units)

    # InvalidCityId / InvalidUnits -> 400 via the app exception handler
    lookup = validate_lookup_request(city_id, units)

    try:
        envelope = await svc.lookup(lookup)
    except WeatherLookupError:
        raise
    except Exception:
        logger.exception("Error fetching weather data")
        return PlainTextResponse(GENERIC_ERROR_MESSAGE, status_code=500)

    # provider-side errors ride inside a 200 envelope
    return JSONResponse(envelope.to_json(), status_code=200)
