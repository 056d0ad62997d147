import logging
import re
from typing import Optional

from pydantic import ValidationError

from app.clients.openweather import OpenWeatherClient, ProviderReply
from app.core.errors import InvalidCityId, InvalidUnits, MalformedProviderResponse
from app.models.weather import (
    LookupRequest,
    NormalizedWeather,
    ProviderWeatherResponse,
    ResultEnvelope,
    WeatherCondition,
)

logger = logging.getLogger(__name__)

VALID_UNITS = ("metric", "imperial")

# last entry repeats N so bearings in [348.75, 360) that round up to 16 still land on N
CARDINALS = (
    "N", "NNE", "NE", "ENE",
    "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW",
    "W", "WNW", "NW", "NNW", "N",
)

# int.TryParse-style: optional sign, surrounding whitespace allowed
_INT_RE = re.compile(r"\s*[+-]?[0-9]+\s*")
_INT32_MIN, _INT32_MAX = -(2 ** 31), 2 ** 31 - 1


def _is_int32(value: str) -> bool:
    if not _INT_RE.fullmatch(value):
        return False
    return _INT32_MIN <= int(value) <= _INT32_MAX


def validate_lookup_request(city_id: Optional[str], units: Optional[str]) -> LookupRequest:
    if not city_id or not _is_int32(city_id):
        raise InvalidCityId(f"cityId={city_id!r}")
    if units and units not in VALID_UNITS:
        raise InvalidUnits(f"units={units!r}")
    return LookupRequest(city_id=city_id, units=units or None)


def wind_direction(degrees: float) -> str:
    """16-point compass label for a bearing; round() is half-to-even."""
    return CARDINALS[round((degrees * 10 % 3600) / 225)]


def normalize(payload: ProviderWeatherResponse) -> NormalizedWeather:
    return NormalizedWeather(
        weather_list=[
            WeatherCondition(name=w.main, description=w.description, icon=w.icon)
            for w in payload.weather
        ],
        temperature=payload.main.temp,
        humidity=payload.main.humidity,
        pressure=payload.main.pressure,
        wind_speed=payload.wind.speed,
        wind_direction=wind_direction(payload.wind.deg),
        sunrise=payload.sys.sunrise,
        sunset=payload.sys.sunset,
    )


def transform(reply: ProviderReply) -> ResultEnvelope:
    status = reply["status_code"]
    if status != 200:
        logger.warning("Provider returned %s %s", status, reply["reason_phrase"])
        return ResultEnvelope(type="ERROR", status=status, response=reply["reason_phrase"] or "")

    try:
        payload = ProviderWeatherResponse.model_validate_json(reply["body"])
    except ValidationError as e:
        raise MalformedProviderResponse(f"{e.error_count()} validation error(s) in provider body") from e

    return ResultEnvelope(type="OK", status=200, response=normalize(payload))


class WeatherService:
    def __init__(self, client: OpenWeatherClient):
        self.client = client

    async def lookup(self, request: LookupRequest) -> ResultEnvelope:
        reply = await self.client.fetch_current(request)
        return transform(reply)
