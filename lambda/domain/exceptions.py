"""
Domain Exceptions - Business Rule Violations
Clean Architecture: Domain layer exceptions
"""


class DomainException(Exception):
    """Base exception for all domain-level errors"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidParameterException(DomainException):
    """Raised when a query parameter is missing or malformed"""
    pass


class StationNotFoundException(DomainException):
    """Raised when a station code is not part of the monitored catalog"""
    pass


class CapitalNotFoundException(DomainException):
    """Raised when a capital slug (or the capital of a state) is unknown"""
    pass


class WeatherDataNotFoundException(DomainException):
    """Raised when upstream returned no usable weather data"""
    pass


class LocationNotFoundException(DomainException):
    """Raised when geocoding finds no Brazilian location"""
    pass


class UpstreamProviderException(DomainException):
    """Raised when an upstream API fails (HTTP error, network, invalid payload)"""
    pass
