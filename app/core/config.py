from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # App
    app_name: str = Field(default="Weather Lookup Service")
    env: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # OpenWeatherMap (server-side only)
    openweather_api_key: str = Field(default="")
    openweather_base_url: str = Field(default="http://api.openweathermap.org")

    # Network safety; None disables the timeout
    http_timeout_seconds: Optional[float] = Field(default=12.0)

settings = Settings()
