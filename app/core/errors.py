GENERIC_ERROR_MESSAGE = "An error occurred while fetching weather data"


class WeatherLookupError(Exception):
    """Base error; carries the HTTP status and the message safe to show callers."""

    status_code = 500
    message = GENERIC_ERROR_MESSAGE

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.message)
        self.detail = detail


class InvalidCityId(WeatherLookupError):
    status_code = 400
    message = "Invalid cityId. Make sure you are sending it to the queryString and that it's a valid integer"


class InvalidUnits(WeatherLookupError):
    status_code = 400
    message = "Invalid unit type. You may only use imperial or metric"


class ProviderUnavailable(WeatherLookupError):
    """Network or transport failure talking to the provider."""


class MalformedProviderResponse(WeatherLookupError):
    """Provider answered 200 with a body we could not parse."""
