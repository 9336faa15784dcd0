"""
Validators Utility
Input validation with domain exceptions
"""
import math
from typing import Optional, Type

from domain.exceptions import InvalidInputError
from domain.value_objects.coordinates import Coordinates


class GenericValidator:
    """Validador genérico para reduzir duplicação de código"""

    @staticmethod
    def validate_not_empty(
        value: Optional[str],
        param_name: str,
        exception_class: Type[Exception] = InvalidInputError
    ) -> str:
        """
        Valida se string não está vazia

        Args:
            value: String a validar
            param_name: Nome do parâmetro (para mensagem de erro)
            exception_class: Classe de exceção a lançar

        Returns:
            String validada e trimmed

        Raises:
            exception_class: Se string vazia
        """
        if not value or not value.strip():
            raise exception_class(f"{param_name} cannot be empty")
        return value.strip()

    @staticmethod
    def parse_float(
        value: Optional[str],
        param_name: str,
        exception_class: Type[Exception] = InvalidInputError
    ) -> float:
        """
        Converte string em float finito

        Raises:
            exception_class: Se ausente, não numérico, NaN ou infinito
        """
        if value is None or not value.strip():
            raise exception_class(f"Missing {param_name} parameter")
        try:
            number = float(value)
        except ValueError:
            raise exception_class(f"Invalid {param_name} format: {value}")
        if math.isnan(number) or math.isinf(number):
            raise exception_class(f"Invalid {param_name} format: {value}")
        return number


class CoordinateValidator:
    """Validate latitude/longitude query parameters"""

    MISSING_OR_INVALID_MESSAGE = "Missing or invalid latitude/longitude parameters"

    @staticmethod
    def parse_query(latitude: Optional[str], longitude: Optional[str]) -> Coordinates:
        """
        Parse query string values into Coordinates

        Args:
            latitude: Raw "latitude" query value
            longitude: Raw "longitude" query value

        Returns:
            Validated Coordinates

        Raises:
            InvalidInputError: If a value is missing or not a number
            InvalidCoordinateError: If a value is outside the valid range
        """
        try:
            lat = GenericValidator.parse_float(latitude, "latitude")
            lon = GenericValidator.parse_float(longitude, "longitude")
        except InvalidInputError as ex:
            raise InvalidInputError(
                CoordinateValidator.MISSING_OR_INVALID_MESSAGE,
                details={"latitude": latitude, "longitude": longitude, "reason": ex.message}
            ) from ex

        return Coordinates(latitude=lat, longitude=lon)


class CityNameValidator:
    """Validate city name parameter"""

    MAX_LENGTH = 100

    @staticmethod
    def validate(name: Optional[str]) -> str:
        """
        Validate city name is present and reasonably sized

        Raises:
            InvalidInputError: If name is empty or too long
        """
        trimmed = GenericValidator.validate_not_empty(name, "City name")
        if len(trimmed) > CityNameValidator.MAX_LENGTH:
            raise InvalidInputError(
                f"City name must be at most {CityNameValidator.MAX_LENGTH} characters",
                details={"length": len(trimmed)}
            )
        return trimmed
