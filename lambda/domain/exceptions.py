"""
Domain Exceptions - Business Rule Violations
Clean Architecture: Domain layer exceptions

O núcleo de pontuação (HourScorer/PatternAnalyzer) não lança nenhuma destas:
elas pertencem às bordas (validação de entrada e provedores externos).
"""


class DomainException(Exception):
    """Base exception for all domain-level errors"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidCoordinatesException(DomainException):
    """Raised when latitude/longitude are missing or outside valid range"""
    pass


class InvalidDateTimeException(DomainException):
    """Raised when date/time parameters are invalid"""
    pass


class InvalidRequestException(DomainException):
    """Raised when a request body cannot be turned into weather samples"""
    pass


class WeatherDataNotFoundException(DomainException):
    """Raised when weather data is not available"""
    pass


class WeatherProviderException(DomainException):
    """Raised when the upstream weather provider fails unexpectedly"""
    pass
