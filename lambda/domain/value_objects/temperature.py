"""
Value Object para temperatura
Celsius é a unidade canônica; conversões ficam concentradas aqui
"""
from dataclasses import dataclass
from enum import Enum

from domain.constants import Units


class TemperatureScale(Enum):
    """Escalas de temperatura suportadas"""
    CELSIUS = "°C"
    FAHRENHEIT = "°F"
    KELVIN = "K"

    @classmethod
    def from_unit_label(cls, label: str) -> 'TemperatureScale':
        """
        Converte o rótulo de unidade do Open-Meteo (ex: "°F", "fahrenheit")

        Raises:
            ValueError: Se o rótulo não for reconhecido
        """
        normalized = (label or "").strip().lower()
        if normalized in ("°c", "c", "celsius"):
            return cls.CELSIUS
        if normalized in ("°f", "f", "fahrenheit"):
            return cls.FAHRENHEIT
        if normalized in ("k", "kelvin"):
            return cls.KELVIN
        raise ValueError(f"Unsupported temperature unit: {label!r}")


@dataclass(frozen=True)
class Temperature:
    """
    Value Object para temperatura

    Características:
    - Imutável (frozen=True)
    - Armazena sempre em Celsius
    - Conversões entre escalas
    """
    celsius: float

    def __post_init__(self):
        """Valida temperatura no momento da criação"""
        if self.celsius < Units.ABSOLUTE_ZERO_CELSIUS:
            raise ValueError(
                f"Impossible temperature: {self.celsius}°C is below absolute zero"
            )

    @property
    def fahrenheit(self) -> float:
        return (self.celsius * 9 / 5) + 32

    @property
    def kelvin(self) -> float:
        return self.celsius - Units.ABSOLUTE_ZERO_CELSIUS

    def in_scale(self, scale: TemperatureScale) -> float:
        """
        Retorna o valor na escala pedida

        Args:
            scale: Escala desejada

        Returns:
            Valor numérico na escala
        """
        if scale == TemperatureScale.FAHRENHEIT:
            return self.fahrenheit
        if scale == TemperatureScale.KELVIN:
            return self.kelvin
        return self.celsius

    def format(self, scale: TemperatureScale = TemperatureScale.CELSIUS) -> str:
        """Formata temperatura na escala especificada (ex: "25.5°C")"""
        return f"{self.in_scale(scale):.1f}{scale.value}"

    def __str__(self) -> str:
        return self.format(TemperatureScale.CELSIUS)

    def __float__(self) -> float:
        return self.celsius

    @classmethod
    def from_value(cls, value: float, scale: TemperatureScale) -> 'Temperature':
        """
        Factory method para criar a partir de um valor em qualquer escala

        Args:
            value: Valor numérico
            scale: Escala em que o valor está expresso

        Returns:
            Instância de Temperature
        """
        if scale == TemperatureScale.FAHRENHEIT:
            return cls(celsius=(value - 32) * 5 / 9)
        if scale == TemperatureScale.KELVIN:
            return cls(celsius=value + Units.ABSOLUTE_ZERO_CELSIUS)
        return cls(celsius=value)
