"""
Validators Utility
Input validation with domain exceptions
"""
import math
from typing import Any, Optional, Type

from domain.constants import App
from domain.exceptions import DomainException, InvalidCoordinatesException, InvalidRequestException
from domain.value_objects.coordinates import Coordinates


class GenericValidator:
    """Validador genérico para reduzir duplicação de código"""

    @staticmethod
    def validate_range(
        value: float,
        min_val: float,
        max_val: float,
        param_name: str,
        exception_class: Type[DomainException] = InvalidRequestException
    ) -> float:
        """
        Valida se valor numérico está dentro do range

        Args:
            value: Valor a validar
            min_val: Valor mínimo permitido
            max_val: Valor máximo permitido
            param_name: Nome do parâmetro (para mensagem de erro)
            exception_class: Classe de exceção a lançar

        Returns:
            Valor validado

        Raises:
            exception_class: Se valor fora do range
        """
        if not (min_val <= value <= max_val):
            raise exception_class(
                f"{param_name} must be between {min_val} and {max_val}",
                details={
                    param_name: value,
                    "min": min_val,
                    "max": max_val
                }
            )
        return value

    @staticmethod
    def validate_float(
        value: Any,
        param_name: str,
        exception_class: Type[DomainException] = InvalidRequestException
    ) -> float:
        """
        Converte valor (string de query ou número do body) para float

        Raises:
            exception_class: Se ausente, não numérico ou não finito (NaN, inf)
        """
        if value is None or (isinstance(value, str) and not value.strip()):
            raise exception_class(f"{param_name} is required", details={param_name: value})
        # bool é subclasse de int, mas não é um número válido aqui
        if isinstance(value, bool):
            raise exception_class(f"Invalid {param_name}: {value}", details={param_name: value})
        try:
            number = float(value)
        except (TypeError, ValueError):
            raise exception_class(f"Invalid {param_name}: {value}", details={param_name: value})
        if not math.isfinite(number):
            raise exception_class(f"{param_name} must be a finite number", details={param_name: str(value)})
        return number


class CoordinatesValidator:
    """Validate latitude/longitude query parameters"""

    @staticmethod
    def from_query_params(lat: Optional[str], lon: Optional[str]) -> Coordinates:
        """
        Parse and validate coordinates from query string

        Args:
            lat: Latitude string
            lon: Longitude string

        Returns:
            Coordinates value object

        Raises:
            InvalidCoordinatesException: If missing, non numeric or out of range
        """
        latitude = GenericValidator.validate_float(lat, "lat", InvalidCoordinatesException)
        longitude = GenericValidator.validate_float(lon, "lon", InvalidCoordinatesException)
        return Coordinates(latitude=latitude, longitude=longitude)


class HourValidator:
    """Validate hour-of-day parameter"""

    @staticmethod
    def validate(hour: Any, param_name: str = "hour") -> int:
        value = GenericValidator.validate_float(hour, param_name)
        if not value.is_integer():
            raise InvalidRequestException(f"{param_name} must be an integer", details={param_name: hour})
        return int(GenericValidator.validate_range(value, 0, App.HOURS_PER_DAY - 1, param_name))
