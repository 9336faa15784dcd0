"""
OpenMeteo Data Mapper - Transforma dados da API Open-Meteo para entities
LOCALIZAÇÃO: infrastructure (transforma dados externos → domínio)
"""
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from domain.constants import Forecast
from domain.entities.daily_forecast import DailyForecastEntry
from domain.entities.weather import CurrentConditions
from domain.entities.weather_data import WeatherData
from domain.exceptions import DomainException, NoDataError
from domain.value_objects.coordinates import Coordinates
from domain.value_objects.temperature import Temperature, TemperatureScale
from domain.value_objects.wind_speed import WindSpeed, WindSpeedUnit
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


def _value_at(values: List[Any], index: int) -> Any:
    return values[index] if index < len(values) else None


def _series(daily: Dict[str, Any], key: str) -> List[Any]:
    """Série diária ausente vira lista vazia; qualquer outro tipo é payload quebrado"""
    values = daily.get(key)
    if values is None:
        return []
    if not isinstance(values, list):
        raise NoDataError(
            f"Malformed daily forecast data: {key} is not a list",
            details={"series": key, "type": type(values).__name__}
        )
    return values


def _units_block(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    units = data.get(key)
    return units if isinstance(units, dict) else {}


def _parse_date(raw: Any) -> Optional[date]:
    """Aceita "2024-01-01" ou "2024-01-01T12:00" (horário local do provider)"""
    if not isinstance(raw, str):
        return None
    try:
        return datetime.fromisoformat(raw).date()
    except ValueError:
        return None


def _first_date(daily: Dict[str, Any]) -> Optional[date]:
    dates = daily.get('time')
    return _parse_date(dates[0]) if isinstance(dates, list) and dates else None


def _weather_code(raw: Any) -> Optional[int]:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


class OpenMeteoDataMapper:
    """
    Mapper para transformar respostas da API Open-Meteo em entities de domínio

    Responsabilidade: Traduzir formato Open-Meteo → Domain entities
    Fronteira de conversão de unidades: tudo sai daqui em °C e m/s
    """

    @staticmethod
    def map_forecast_response(
        data: Dict[str, Any],
        requested_coordinates: Coordinates,
        temperature_unit: str = Forecast.TEMPERATURE_UNIT,
        wind_speed_unit: str = Forecast.WIND_SPEED_UNIT,
        max_entries: int = Forecast.ENTRIES_RETURNED
    ) -> WeatherData:
        """
        Mapeia resposta /forecast (current + daily) para WeatherData

        Args:
            data: Resposta raw da API Open-Meteo
            requested_coordinates: Coordenadas usadas na requisição
            temperature_unit: Unidade pedida (fallback quando a resposta não declara)
            wind_speed_unit: Unidade pedida (fallback quando a resposta não declara)
            max_entries: Número de dias devolvidos após descartar hoje

        Returns:
            WeatherData canônico

        Raises:
            NoDataError: Se faltar o bloco current ou daily, ou se vierem malformados
        """
        if not isinstance(data, dict):
            raise NoDataError("Malformed forecast response", details={"type": type(data).__name__})

        current = data.get('current')
        if not current or not isinstance(current, dict):
            raise NoDataError("No current weather data available")

        daily = data.get('daily')
        if not daily or not isinstance(daily, dict):
            raise NoDataError("No forecast data available")

        current_conditions = OpenMeteoDataMapper.map_current(
            current,
            units=_units_block(data, 'current_units'),
            temperature_unit=temperature_unit,
            wind_speed_unit=wind_speed_unit
        )

        days = OpenMeteoDataMapper._map_days(
            daily,
            units=_units_block(data, 'daily_units'),
            temperature_unit=temperature_unit
        )

        return WeatherData(
            coordinates=OpenMeteoDataMapper._response_coordinates(data, requested_coordinates),
            current=current_conditions,
            forecast=OpenMeteoDataMapper._select_forecast(days, _first_date(daily), max_entries),
            daily_series=[day for day in days if day is not None]
        )

    @staticmethod
    def map_current(
        current: Dict[str, Any],
        units: Dict[str, Any],
        temperature_unit: str,
        wind_speed_unit: str
    ) -> CurrentConditions:
        """
        Mapeia o bloco "current" para CurrentConditions

        Raises:
            NoDataError: Sem temperatura ou com unidades desconhecidas
        """
        raw_temp = current.get('temperature_2m')
        if raw_temp is None:
            raise NoDataError("Current weather data has no temperature")

        temp_scale = OpenMeteoDataMapper._temperature_scale(
            units.get('temperature_2m'), temperature_unit
        )
        wind_unit = OpenMeteoDataMapper._wind_speed_unit(
            units.get('wind_speed_10m'), wind_speed_unit
        )

        raw_wind = current.get('wind_speed_10m')
        raw_humidity = current.get('relative_humidity_2m')
        raw_is_day = current.get('is_day')

        observation_date = _parse_date(current.get('time'))
        if observation_date is None:
            logger.warning("Current weather without parseable time, using today", time=current.get('time'))
            observation_date = date.today()

        try:
            temperature = Temperature.from_value(float(raw_temp), temp_scale).celsius
            wind_speed = WindSpeed.from_value(float(raw_wind), wind_unit).mps if raw_wind is not None else 0.0
            humidity = float(raw_humidity) if raw_humidity is not None else 0.0
            is_day = bool(int(raw_is_day)) if raw_is_day is not None else True
        except (TypeError, ValueError) as e:
            raise NoDataError(f"Malformed current weather data: {e}") from e

        return CurrentConditions(
            temperature=temperature,
            humidity=humidity,
            wind_speed=wind_speed,
            observation_date=observation_date,
            weather_code=_weather_code(current.get('weather_code')),
            is_day=is_day
        )

    @staticmethod
    def map_daily(
        daily: Dict[str, Any],
        units: Dict[str, Any],
        temperature_unit: str,
        max_entries: int
    ) -> List[DailyForecastEntry]:
        """
        Mapeia a série "daily" para a previsão canônica

        O índice 0 (hoje) é descartado, pois as condições atuais já cobrem o dia.
        Só os índices 1..max_entries são considerados; datas repetidas, inválidas
        ou sem temperatura são ignoradas sem puxar dias seguintes.

        Returns:
            Até max_entries entradas em ordem cronológica
        """
        days = OpenMeteoDataMapper._map_days(daily, units, temperature_unit)
        return OpenMeteoDataMapper._select_forecast(days, _first_date(daily), max_entries)

    @staticmethod
    def map_daily_series(
        daily: Dict[str, Any],
        units: Dict[str, Any],
        temperature_unit: str
    ) -> List[DailyForecastEntry]:
        """
        Série diária completa do provider (hoje incluído) em °C

        Mantém a ordem do provider; é a base dos arrays "daily" do proxy /weather.
        """
        days = OpenMeteoDataMapper._map_days(daily, units, temperature_unit)
        return [day for day in days if day is not None]

    @staticmethod
    def _map_days(
        daily: Dict[str, Any],
        units: Dict[str, Any],
        temperature_unit: str
    ) -> List[Optional[DailyForecastEntry]]:
        """Uma posição por índice da série "time"; None para dias inválidos"""
        dates = daily.get('time')
        if not isinstance(dates, list):
            raise NoDataError("Daily forecast has no time series")

        temp_max = _series(daily, 'temperature_2m_max')
        temp_min = _series(daily, 'temperature_2m_min')
        weather_codes = _series(daily, 'weather_code')

        temp_scale = OpenMeteoDataMapper._temperature_scale(
            units.get('temperature_2m_max'), temperature_unit
        )

        days: List[Optional[DailyForecastEntry]] = []
        for i, raw_date in enumerate(dates):
            entry_date = _parse_date(raw_date)
            if entry_date is None:
                logger.warning(f"Dia {i}: data inválida {raw_date!r}, pulando")
                days.append(None)
                continue

            t_max = _value_at(temp_max, i)
            t_min = _value_at(temp_min, i)
            if t_max is None or t_min is None:
                logger.warning(f"Dia {entry_date}: temperaturas ausentes, pulando")
                days.append(None)
                continue

            try:
                days.append(DailyForecastEntry(
                    date=entry_date,
                    temp_max=Temperature.from_value(float(t_max), temp_scale).celsius,
                    temp_min=Temperature.from_value(float(t_min), temp_scale).celsius,
                    weather_code=_weather_code(_value_at(weather_codes, i))
                ))
            except (TypeError, ValueError) as e:
                logger.warning(f"Falha ao processar dia {i}: {e}")
                days.append(None)

        return days

    @staticmethod
    def _select_forecast(
        days: List[Optional[DailyForecastEntry]],
        today: Optional[date],
        max_entries: int
    ) -> List[DailyForecastEntry]:
        seen = {today} if today is not None else set()

        forecasts: List[DailyForecastEntry] = []
        for day in days[1:max_entries + 1]:
            if day is None:
                continue
            if day.date in seen:
                logger.warning(f"Dia {day.date}: data repetida, pulando")
                continue
            seen.add(day.date)
            forecasts.append(day)

        forecasts.sort(key=lambda entry: entry.date)
        return forecasts

    @staticmethod
    def _response_coordinates(data: Dict[str, Any], requested: Coordinates) -> Coordinates:
        """O provider ajusta as coordenadas à sua grade; usa as da resposta se válidas"""
        latitude = data.get('latitude')
        longitude = data.get('longitude')
        if latitude is None or longitude is None:
            return requested
        try:
            return Coordinates(latitude=float(latitude), longitude=float(longitude))
        except (TypeError, ValueError, DomainException):
            logger.warning(
                "Provider returned invalid coordinates, keeping requested ones",
                latitude=latitude,
                longitude=longitude
            )
            return requested

    @staticmethod
    def _temperature_scale(declared: Optional[str], requested: str) -> TemperatureScale:
        try:
            return TemperatureScale.from_unit_label(declared or requested)
        except ValueError as e:
            raise NoDataError(str(e), details={"temperature_unit": declared or requested}) from e

    @staticmethod
    def _wind_speed_unit(declared: Optional[str], requested: str) -> WindSpeedUnit:
        try:
            return WindSpeedUnit.from_unit_label(declared or requested)
        except ValueError as e:
            raise NoDataError(str(e), details={"wind_speed_unit": declared or requested}) from e
