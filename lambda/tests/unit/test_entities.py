"""
Testes das entidades de domínio (CurrentConditions, DailyForecastEntry, WeatherData, ResolvedLocation)
"""
from datetime import date

import pytest

from domain.constants import WeatherCategory
from domain.entities.daily_forecast import DailyForecastEntry
from domain.entities.location import ResolvedLocation
from domain.entities.weather import CurrentConditions
from domain.entities.weather_data import WeatherData
from domain.value_objects.coordinates import Coordinates
from domain.value_objects.temperature import TemperatureScale
from domain.value_objects.wind_speed import WindSpeedUnit


def _current(code=61):
    return CurrentConditions(
        temperature=18.4,
        humidity=62,
        wind_speed=10.0,
        observation_date=date(2025, 6, 2),
        weather_code=code
    )


def _entry(day, code=0, temp_max=20.0, temp_min=10.0):
    return DailyForecastEntry(
        date=date(2025, 6, day),
        temp_max=temp_max,
        temp_min=temp_min,
        weather_code=code
    )


class TestCurrentConditions:

    def test_classification_from_code(self):
        """REGRA: Categoria e descrição vêm da tabela WMO"""
        current = _current(code=61)
        assert current.category == WeatherCategory.RAIN
        assert current.description == "Slight rain"

    def test_missing_code_is_unknown(self):
        current = _current(code=None)
        assert current.category == WeatherCategory.UNKNOWN
        assert current.description == "Unknown"

    def test_explicit_category_is_kept(self):
        current = CurrentConditions(
            temperature=1.0,
            humidity=1.0,
            wind_speed=1.0,
            observation_date=date(2025, 1, 1),
            weather_code=0,
            category=WeatherCategory.MIST,
            description="Haze"
        )
        assert current.category == WeatherCategory.MIST
        assert current.description == "Haze"

    def test_unit_views(self):
        current = _current()
        assert current.wind_speed_in(WindSpeedUnit.KILOMETERS_PER_HOUR) == pytest.approx(36.0)
        assert current.temperature_in(TemperatureScale.FAHRENHEIT) == pytest.approx(65.12)

    def test_to_api_response(self):
        response = _current().to_api_response()
        assert response == {
            'date': '2025-06-02',
            'temperature': 18.4,
            'humidity': 62,
            'windSpeed': 10.0,
            'weatherCode': 61,
            'category': 'Rain',
            'description': 'Slight rain',
            'isDay': True
        }


class TestDailyForecastEntry:

    def test_classification(self):
        entry = _entry(3, code=95)
        assert entry.category == WeatherCategory.THUNDERSTORM
        assert entry.description == "Thunderstorm"

    def test_to_api_response(self):
        response = _entry(3, code=3, temp_max=21.26, temp_min=12.04).to_api_response()
        assert response['date'] == '2025-06-03'
        assert response['tempMax'] == 21.3
        assert response['tempMin'] == 12.0
        assert response['category'] == 'BrokenClouds'

    def test_unit_views(self):
        entry = _entry(3, temp_max=100.0, temp_min=0.0)
        assert entry.temp_max_in(TemperatureScale.FAHRENHEIT) == pytest.approx(212.0)
        assert entry.temp_min_in(TemperatureScale.KELVIN) == pytest.approx(273.15)


class TestWeatherData:
    """Agregado: previsão ordenada e sem datas repetidas"""

    def test_forecast_is_sorted(self):
        weather = WeatherData(
            coordinates=Coordinates(51.5, -0.12),
            current=_current(),
            forecast=[_entry(5), _entry(3), _entry(4)]
        )
        assert [e.date.day for e in weather.forecast] == [3, 4, 5]

    def test_duplicate_dates_keep_first(self):
        """REGRA: A primeira ocorrência de cada data prevalece"""
        weather = WeatherData(
            coordinates=Coordinates(51.5, -0.12),
            current=_current(),
            forecast=[_entry(3, code=0), _entry(3, code=95), _entry(4)]
        )
        assert len(weather.forecast) == 2
        assert weather.forecast[0].weather_code == 0

    def test_to_api_response_uses_coordinates_when_unnamed(self):
        weather = WeatherData(coordinates=Coordinates(51.5074, -0.1278), current=_current())
        response = weather.to_api_response()
        assert response['location'] == {
            'name': '51.51°N, 0.13°W',
            'latitude': 51.5074,
            'longitude': -0.1278
        }
        assert response['forecast'] == []

    def test_to_api_response_with_location_name(self):
        weather = WeatherData(
            coordinates=Coordinates(51.5, -0.12),
            current=_current(),
            forecast=[_entry(3)],
            location_name="London"
        )
        response = weather.to_api_response()
        assert response['location']['name'] == "London"
        assert response['current']['category'] == "Rain"
        assert len(response['forecast']) == 1


class TestResolvedLocation:

    def test_properties_and_response(self):
        location = ResolvedLocation(
            coordinates=Coordinates(-23.5475, -46.63611),
            display_name="São Paulo",
            country="Brazil",
            admin1="São Paulo",
            timezone="America/Sao_Paulo"
        )
        assert location.latitude == -23.5475
        assert location.longitude == -46.63611
        assert location.to_api_response() == {
            'name': 'São Paulo',
            'latitude': -23.5475,
            'longitude': -46.63611,
            'country': 'Brazil',
            'region': 'São Paulo',
            'timezone': 'America/Sao_Paulo'
        }

    def test_optional_fields_omitted(self):
        location = ResolvedLocation(coordinates=Coordinates(0, 0), display_name="0.00°N, 0.00°E")
        assert set(location.to_api_response()) == {'name', 'latitude', 'longitude'}
