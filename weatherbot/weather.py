"""Client for the OpenWeatherMap geocoding and current weather APIs."""

from __future__ import annotations

import math
from typing import Any

import requests

GEOCODING_URL = "http://api.openweathermap.org/geo/1.0/direct"
WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"


class WeatherError(Exception):
    """Raised when the weather service answers with something unexpected."""


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class WeatherClient:
    """Looks up a city's coordinates, then the weather there."""

    def __init__(
        self, api_key: str, session: requests.Session | None = None
    ) -> None:
        self.api_key = api_key
        self.session = session if session is not None else requests.Session()
        self.lat = ""
        self.lon = ""

    def _get_json(self, url: str, params: dict[str, str]) -> Any:
        response = self.session.get(url, params=params)
        try:
            return response.json()
        except ValueError as exc:
            raise WeatherError(f"invalid JSON from {url}") from exc

    def geocoding(self, city: str) -> bool:
        """Resolve the city's coordinates; return False if none was found."""
        result = self._get_json(GEOCODING_URL, {"q": city, "appid": self.api_key})
        if not result:
            return False
        if not isinstance(result, list):
            raise WeatherError(f"unexpected geocoding answer: {result!r}")
        try:
            place = result[0]
            self.lat = f"{float(place['lat']):f}"
            self.lon = f"{float(place['lon']):f}"
        except (KeyError, TypeError, ValueError) as exc:
            raise WeatherError(f"malformed geocoding answer: {result!r}") from exc
        return True

    def current_weather(self) -> Any:
        """Return the raw current weather for the resolved coordinates."""
        return self._get_json(
            WEATHER_URL,
            {
                "lat": self.lat,
                "lon": self.lon,
                "appid": self.api_key,
                "units": "metric",
                "lang": "ru",
            },
        )

    def data(self) -> list[str]:
        """Return the report values: name, conditions, temperature, feels-like,
        pressure, humidity, wind speed and wind direction."""
        weather = self.current_weather()
        if not weather:
            return []
        try:
            main = weather["main"]
            wind = weather["wind"]
            return [
                str(weather["name"]),
                str(weather["weather"][0]["description"]),
                str(_round_half_away(float(main["temp"]))),
                str(_round_half_away(float(main["feels_like"]))),
                str(int(main["pressure"])),
                str(int(main["humidity"])),
                str(int(wind["speed"])),
                str(int(wind["deg"])),
            ]
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            raise WeatherError(f"malformed weather answer: {weather!r}") from exc