"""
WeatherData Entity - Agregado com condições atuais + previsão diária
"""
from dataclasses import dataclass, field
from typing import List, Optional

from domain.entities.daily_forecast import DailyForecastEntry
from domain.entities.weather import CurrentConditions
from domain.value_objects.coordinates import Coordinates


@dataclass
class WeatherData:
    """
    Resultado canônico de uma consulta de clima

    A previsão é mantida em ordem cronológica e sem datas repetidas
    (a primeira ocorrência de cada data prevalece).

    daily_series guarda a série diária do provider como veio (hoje no
    índice 0, já em °C); alimenta os arrays "daily" do proxy /weather.
    """
    coordinates: Coordinates
    current: CurrentConditions
    forecast: List[DailyForecastEntry] = field(default_factory=list)
    location_name: Optional[str] = None
    daily_series: List[DailyForecastEntry] = field(default_factory=list)

    def __post_init__(self):
        unique = {}
        for entry in self.forecast:
            unique.setdefault(entry.date, entry)
        self.forecast = [unique[d] for d in sorted(unique)]

    def to_api_response(self) -> dict:
        """Converte para formato de resposta da API (rota canônica)"""
        return {
            'location': {
                'name': self.location_name or str(self.coordinates),
                'latitude': self.coordinates.latitude,
                'longitude': self.coordinates.longitude
            },
            'current': self.current.to_api_response(),
            'forecast': [entry.to_api_response() for entry in self.forecast]
        }
