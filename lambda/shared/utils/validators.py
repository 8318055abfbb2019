"""
Validators Utility
Input validation with domain exceptions
"""
import re
from typing import Optional, Tuple, Type

from domain.exceptions import InvalidParameterException
from domain.value_objects.coordinates import Coordinates


class GenericValidator:
    """Validador genérico para reduzir duplicação de código"""

    @staticmethod
    def validate_range(
        value: float,
        min_val: float,
        max_val: float,
        param_name: str,
        exception_class: Type[Exception] = InvalidParameterException
    ) -> float:
        """
        Valida se valor numérico está dentro do range

        Raises:
            exception_class: Se valor fora do range
        """
        if not (min_val <= value <= max_val):
            raise exception_class(
                f"{param_name} must be between {min_val} and {max_val}",
                details={param_name: value, "min": min_val, "max": max_val}
            )
        return value

    @staticmethod
    def validate_not_empty(
        value: Optional[str],
        param_name: str,
        exception_class: Type[Exception] = InvalidParameterException
    ) -> str:
        """
        Valida se string não está vazia

        Returns:
            String validada e trimmed
        """
        if not value or not value.strip():
            raise exception_class(f"{param_name} is required", details={"parameter": param_name})
        return value.strip()

    @staticmethod
    def validate_float(value: str, param_name: str) -> float:
        try:
            return float(value)
        except (TypeError, ValueError):
            raise InvalidParameterException(
                f"Invalid {param_name}: {value}",
                details={param_name: value}
            )


class StateCodeValidator:
    """UF com duas letras (ex: SP)"""

    PATTERN = re.compile(r'^[A-Za-z]{2}$')

    @staticmethod
    def validate(state: Optional[str]) -> str:
        trimmed = GenericValidator.validate_not_empty(state, "state")
        if not StateCodeValidator.PATTERN.match(trimmed):
            raise InvalidParameterException(
                f"Invalid state code: {state}",
                details={"state": state}
            )
        return trimmed.upper()


class StationCodeValidator:
    """Código de estação automática do INMET (ex: A701)"""

    PATTERN = re.compile(r'^[A-Z]\d{3}$')

    @staticmethod
    def validate(code: Optional[str]) -> str:
        trimmed = GenericValidator.validate_not_empty(code, "station").upper()
        if not StationCodeValidator.PATTERN.match(trimmed):
            raise InvalidParameterException(
                f"Invalid station code: {code}",
                details={"station": code}
            )
        return trimmed


class CapitalSlugValidator:
    """Slug de capital (ex: sao-paulo)"""

    PATTERN = re.compile(r'^[a-z]+(-[a-z]+)*$')

    @staticmethod
    def validate(slug: Optional[str]) -> str:
        trimmed = GenericValidator.validate_not_empty(slug, "capital").lower()
        if not CapitalSlugValidator.PATTERN.match(trimmed):
            raise InvalidParameterException(
                f"Invalid capital: {slug}",
                details={"capital": slug}
            )
        return trimmed


class CoordinatesValidator:

    @staticmethod
    def validate(lat: Optional[str], lng: Optional[str]) -> Coordinates:
        """
        Valida o par lat/lng vindo da query string

        Raises:
            InvalidParameterException: Parâmetro ausente, não numérico ou fora do range
        """
        latitude = GenericValidator.validate_float(GenericValidator.validate_not_empty(lat, "lat"), "lat")
        longitude = GenericValidator.validate_float(GenericValidator.validate_not_empty(lng, "lng"), "lng")
        GenericValidator.validate_range(latitude, -90.0, 90.0, "lat")
        GenericValidator.validate_range(longitude, -180.0, 180.0, "lng")
        return Coordinates(latitude=latitude, longitude=longitude)


class CityQueryValidator:
    """Parâmetros de geocodificação: city (ou q) e state opcional"""

    MAX_LENGTH = 100

    @staticmethod
    def validate(city: Optional[str], state: Optional[str] = None) -> Tuple[str, Optional[str]]:
        name = GenericValidator.validate_not_empty(city, "city")
        if len(name) > CityQueryValidator.MAX_LENGTH:
            raise InvalidParameterException(
                f"city must have at most {CityQueryValidator.MAX_LENGTH} characters",
                details={"city": name}
            )
        state_value = state.strip() if state and state.strip() else None
        return name, state_value
