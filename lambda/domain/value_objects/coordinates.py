"""
Value Object para coordenadas geográficas
Garante imutabilidade e validação no domínio
"""
import math
from dataclasses import dataclass
from typing import Tuple

from domain.exceptions import InvalidCoordinateError


@dataclass(frozen=True)
class Coordinates:
    """
    Value Object para coordenadas geográficas

    Características:
    - Imutável (frozen=True)
    - Auto-validação no __post_init__
    - Type-safe (não são floats soltos)
    """
    latitude: float
    longitude: float

    def __post_init__(self):
        """Valida coordenadas no momento da criação"""
        if isinstance(self.latitude, bool) or not isinstance(self.latitude, (int, float)) \
                or math.isnan(self.latitude) or not (-90 <= self.latitude <= 90):
            raise InvalidCoordinateError(
                f"Invalid latitude: {self.latitude}. Must be between -90 and 90 degrees.",
                details={"latitude": self.latitude, "min": -90, "max": 90}
            )
        if isinstance(self.longitude, bool) or not isinstance(self.longitude, (int, float)) \
                or math.isnan(self.longitude) or not (-180 <= self.longitude <= 180):
            raise InvalidCoordinateError(
                f"Invalid longitude: {self.longitude}. Must be between -180 and 180 degrees.",
                details={"longitude": self.longitude, "min": -180, "max": 180}
            )

    def to_tuple(self) -> Tuple[float, float]:
        """
        Retorna coordenadas como tupla (lat, lon)

        Returns:
            Tupla (latitude, longitude)
        """
        return (self.latitude, self.longitude)

    def __str__(self) -> str:
        """String representation amigável (ex: 51.51°N, 0.13°W)"""
        lat_dir = "N" if self.latitude >= 0 else "S"
        lon_dir = "E" if self.longitude >= 0 else "W"
        return f"{abs(self.latitude):.2f}°{lat_dir}, {abs(self.longitude):.2f}°{lon_dir}"

    @classmethod
    def from_tuple(cls, coords: Tuple[float, float]) -> 'Coordinates':
        """
        Factory method para criar a partir de tupla

        Args:
            coords: Tupla (latitude, longitude)

        Returns:
            Instância de Coordinates
        """
        return cls(latitude=coords[0], longitude=coords[1])
