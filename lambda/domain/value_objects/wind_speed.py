"""
Value Object para velocidade do vento
Metros por segundo é a unidade canônica
"""
from dataclasses import dataclass
from enum import Enum

from domain.constants import Units


class WindSpeedUnit(Enum):
    """Unidades de velocidade do vento suportadas"""
    METERS_PER_SECOND = "m/s"
    KILOMETERS_PER_HOUR = "km/h"
    MILES_PER_HOUR = "mph"
    KNOTS = "kn"

    @property
    def mps_factor(self) -> float:
        """Quantos m/s equivalem a 1 unidade"""
        if self == WindSpeedUnit.KILOMETERS_PER_HOUR:
            return 1 / Units.KMH_PER_MPS
        if self == WindSpeedUnit.MILES_PER_HOUR:
            return Units.MPS_PER_MPH
        if self == WindSpeedUnit.KNOTS:
            return Units.MPS_PER_KNOT
        return 1.0

    @classmethod
    def from_unit_label(cls, label: str) -> 'WindSpeedUnit':
        """
        Converte rótulos do Open-Meteo ("km/h", "kmh", "mp/h", "m/s", "kn")

        Raises:
            ValueError: Se o rótulo não for reconhecido
        """
        normalized = (label or "").strip().lower()
        if normalized in ("km/h", "kmh"):
            return cls.KILOMETERS_PER_HOUR
        if normalized in ("mph", "mp/h"):
            return cls.MILES_PER_HOUR
        if normalized in ("m/s", "ms"):
            return cls.METERS_PER_SECOND
        if normalized in ("kn", "kt", "knots"):
            return cls.KNOTS
        raise ValueError(f"Unsupported wind speed unit: {label!r}")


@dataclass(frozen=True)
class WindSpeed:
    """Velocidade do vento armazenada em m/s"""
    mps: float

    def __post_init__(self):
        if self.mps < 0:
            raise ValueError(f"Wind speed cannot be negative: {self.mps} m/s")

    def in_unit(self, unit: WindSpeedUnit) -> float:
        if unit == WindSpeedUnit.METERS_PER_SECOND:
            return self.mps
        # KMH: m/s * 3.6 exato, sem arredondamento do fator inverso
        if unit == WindSpeedUnit.KILOMETERS_PER_HOUR:
            return self.mps * Units.KMH_PER_MPS
        return self.mps / unit.mps_factor

    def format(self, unit: WindSpeedUnit = WindSpeedUnit.METERS_PER_SECOND) -> str:
        return f"{self.in_unit(unit):.1f} {unit.value}"

    @classmethod
    def from_value(cls, value: float, unit: WindSpeedUnit) -> 'WindSpeed':
        """
        Factory method para criar a partir de um valor em qualquer unidade

        Example:
            >>> WindSpeed.from_value(36, WindSpeedUnit.KILOMETERS_PER_HOUR).mps
            10.0
        """
        if unit == WindSpeedUnit.KILOMETERS_PER_HOUR:
            return cls(mps=value / Units.KMH_PER_MPS)
        return cls(mps=value * unit.mps_factor)
