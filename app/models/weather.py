from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional, Union


class LookupRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    city_id: str = Field(..., description="City id, already known to parse as an integer")
    units: Optional[Literal["metric", "imperial"]] = None


# --- provider payload (OpenWeatherMap /data/2.5/weather) ---

class ProviderCondition(BaseModel):
    id: Optional[int] = None
    main: str
    description: str
    icon: str


class ProviderMain(BaseModel):
    temp: float
    pressure: float
    humidity: float


class ProviderWind(BaseModel):
    speed: float
    deg: float = 0.0  # omitted by the provider in calm conditions


class ProviderSys(BaseModel):
    sunrise: int
    sunset: int


class ProviderWeatherResponse(BaseModel):
    weather: List[ProviderCondition]
    main: ProviderMain
    wind: ProviderWind
    sys: ProviderSys


# --- outbound shape ---

class WeatherCondition(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., serialization_alias="Name")
    description: str = Field(..., serialization_alias="Description")
    icon: str = Field(..., serialization_alias="Icon")


class NormalizedWeather(BaseModel):
    model_config = ConfigDict(frozen=True)

    weather_list: List[WeatherCondition] = Field(..., serialization_alias="WeatherList")
    temperature: float = Field(..., serialization_alias="Temperature")
    humidity: float = Field(..., serialization_alias="Humidity")
    pressure: float = Field(..., serialization_alias="Pressure")
    wind_speed: float = Field(..., serialization_alias="WindSpeed")
    wind_direction: str = Field(..., serialization_alias="WindDirection")
    sunrise: int = Field(..., serialization_alias="Sunrise")
    sunset: int = Field(..., serialization_alias="Sunset")


class ResultEnvelope(BaseModel):
    """``{"Type", "Status", "Response"}`` wrapper; Response is the reason phrase on ERROR."""

    model_config = ConfigDict(frozen=True)

    type: Literal["OK", "ERROR"] = Field(..., serialization_alias="Type")
    status: int = Field(..., serialization_alias="Status")
    response: Union[NormalizedWeather, str] = Field(..., serialization_alias="Response")

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
