import pytest
import requests
import responses
from responses import matchers

from weatherbot.weather import (
    GEOCODING_URL,
    WEATHER_URL,
    WeatherClient,
    WeatherError,
)

WEATHER_SAMPLE = {
    "name": "Москва",
    "weather": [{"description": "ясно"}],
    "main": {"temp": 2.5, "feels_like": -2.5, "pressure": 1012, "humidity": 80},
    "wind": {"speed": 4.9, "deg": 270},
}


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def client():
    return WeatherClient("placeholder", requests.Session())


def test_geocoding_found_sets_coordinates(mocked, client):
    mocked.add(
        responses.GET,
        GEOCODING_URL,
        json=[{"lat": 55.75, "lon": 37.5}],
        match=[matchers.query_param_matcher({"q": "Moscow", "appid": "placeholder"})],
    )
    assert client.geocoding("Moscow") is True
    assert client.lat == "55.750000"
    assert float(client.lon) == 37.5


def test_geocoding_not_found(mocked, client):
    mocked.add(responses.GET, GEOCODING_URL, json=[])
    assert client.geocoding("Nowhere") is False
    assert client.lat == ""


def test_geocoding_error_object_raises(mocked, client):
    mocked.add(responses.GET, GEOCODING_URL, json={"cod": 401, "message": "bad key"})
    with pytest.raises(WeatherError):
        client.geocoding("Moscow")


def test_geocoding_invalid_json_raises(mocked, client):
    mocked.add(responses.GET, GEOCODING_URL, body="not json")
    with pytest.raises(WeatherError):
        client.geocoding("Moscow")


def test_current_weather_sends_coordinates(mocked, client):
    client.lat, client.lon = "1.000000", "2.000000"
    mocked.add(
        responses.GET,
        WEATHER_URL,
        json=WEATHER_SAMPLE,
        match=[
            matchers.query_param_matcher(
                {
                    "lat": "1.000000",
                    "lon": "2.000000",
                    "appid": "placeholder",
                    "units": "metric",
                    "lang": "ru",
                }
            )
        ],
    )
    assert client.current_weather() == WEATHER_SAMPLE


def test_data_formats_values(mocked, client):
    mocked.add(responses.GET, WEATHER_URL, json=WEATHER_SAMPLE)
    data = client.data()
    assert len(data) == 8
    assert data[0] == "Москва"
    assert data[1] == "ясно"
    # rounding is half away from zero; wind speed is truncated
    assert data[2:4] == ["3", "-3"]
    assert data[4:6] == ["1012", "80"]
    assert data[6] == "4"
    assert data[7] == "270"


def test_data_empty_answer(mocked, client):
    mocked.add(responses.GET, WEATHER_URL, json={})
    assert client.data() == []


def test_data_missing_field_raises(mocked, client):
    broken = {k: v for k, v in WEATHER_SAMPLE.items() if k != "wind"}
    mocked.add(responses.GET, WEATHER_URL, json=broken)
    with pytest.raises(WeatherError):
        client.data()


def test_geocoding_then_data_round_trip(mocked, client):
    mocked.add(responses.GET, GEOCODING_URL, json=[{"lat": 10.0, "lon": 20.0}])
    mocked.add(responses.GET, WEATHER_URL, json=WEATHER_SAMPLE)
    assert client.geocoding("Moscow") is True
    data = client.data()
    assert data[0] == WEATHER_SAMPLE["name"]
    assert data[4] == str(WEATHER_SAMPLE["main"]["pressure"])