"""
Value Objects para a entrada de localização
União discriminada: nome de cidade OU coordenadas explícitas
"""
from dataclasses import dataclass
from typing import Union

from domain.exceptions import InvalidInputError
from domain.value_objects.coordinates import Coordinates


@dataclass(frozen=True)
class CityInput:
    """Nome de cidade em texto livre (resolvido via geocoding)"""
    name: str

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidInputError(
                "City name cannot be empty",
                details={"name": self.name}
            )
        object.__setattr__(self, 'name', self.name.strip())


@dataclass(frozen=True)
class CoordinatesInput:
    """Coordenadas fornecidas diretamente pelo chamador"""
    coordinates: Coordinates

    @classmethod
    def of(cls, latitude: float, longitude: float) -> 'CoordinatesInput':
        return cls(coordinates=Coordinates(latitude=latitude, longitude=longitude))


LocationInput = Union[CityInput, CoordinatesInput]
