from __future__ import annotations

import logging
import re
from typing import Dict, TypedDict
from urllib.parse import quote
import httpx

from app.core.config import settings
from app.core.errors import ProviderUnavailable
from app.models.weather import LookupRequest

logger = logging.getLogger(__name__)

WEATHER_PATH = "/data/2.5/weather"
DEFAULT_UNITS = "metric"


_WHITESPACE_RE = re.compile(r"\s")


def _escape_whitespace(value: str) -> str:
    return _WHITESPACE_RE.sub(lambda m: quote(m.group()), value)


class ProviderReply(TypedDict):
    status_code: int
    reason_phrase: str
    body: str


class OpenWeatherClient:
    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.base_url = (base_url or settings.openweather_base_url).rstrip("/")
        self.timeout = timeout_seconds
        self.transport = transport

    def build_query(self, request: LookupRequest) -> Dict[str, str]:
        # order matters: id, APPID, units
        return {
            "id": request.city_id,
            "APPID": self.api_key,
            "units": request.units or DEFAULT_UNITS,
        }

    def build_url(self, query: Dict[str, str]) -> str:
        """
        Join pairs with '&' as-is. Values are not percent-encoded here,
        except whitespace the validator lets through around the city id
        (httpx refuses raw control characters such as tabs).
        """
        qs = "&".join(f"{k}={_escape_whitespace(v)}" for k, v in query.items())
        return f"{self.base_url}{WEATHER_PATH}?{qs}"

    def _redacted(self, url: str) -> str:
        if not self.api_key:
            return url
        return url.replace(f"APPID={self.api_key}", "APPID=***")

    async def fetch_current(self, request: LookupRequest) -> ProviderReply:
        url = self.build_url(self.build_query(request))
        logger.debug("GET %s", self._redacted(url))

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                r = await client.get(url)
                body = r.text
        except httpx.HTTPError as e:
            raise ProviderUnavailable(f"{type(e).__name__} calling {self._redacted(url)}") from e

        return {"status_code": r.status_code, "reason_phrase": r.reason_phrase, "body": body}
