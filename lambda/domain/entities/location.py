"""
Location Entity - Resultado da resolução de uma entrada de localização
"""
from dataclasses import dataclass
from typing import Optional

from domain.value_objects.coordinates import Coordinates


@dataclass(frozen=True)
class ResolvedLocation:
    """Coordenadas + nome de exibição normalizado"""
    coordinates: Coordinates
    display_name: str
    country: Optional[str] = None
    admin1: Optional[str] = None  # Estado/região
    timezone: Optional[str] = None

    @property
    def latitude(self) -> float:
        return self.coordinates.latitude

    @property
    def longitude(self) -> float:
        return self.coordinates.longitude

    def to_api_response(self) -> dict:
        response = {
            'name': self.display_name,
            'latitude': self.latitude,
            'longitude': self.longitude
        }
        if self.country:
            response['country'] = self.country
        if self.admin1:
            response['region'] = self.admin1
        if self.timezone:
            response['timezone'] = self.timezone
        return response
