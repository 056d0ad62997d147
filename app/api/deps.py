from fastapi import Depends

from app.core.config import settings
from app.clients.openweather import OpenWeatherClient
from app.services.weather_service import WeatherService


def get_openweather_client() -> OpenWeatherClient:
    return OpenWeatherClient(
        api_key=settings.openweather_api_key,
        base_url=settings.openweather_base_url,
        timeout_seconds=settings.http_timeout_seconds,
    )

def get_weather_service(
    client: OpenWeatherClient = Depends(get_openweather_client),
) -> WeatherService:
    return WeatherService(client=client)
