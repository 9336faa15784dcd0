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


class InvalidInputError(DomainException, ValueError):
    """Raised when caller input is missing or malformed (user-correctable)"""
    pass


class InvalidCoordinateError(InvalidInputError):
    """Raised when latitude/longitude fall outside the valid ranges"""
    pass


class LocationNotFoundError(DomainException):
    """Raised when the geocoding service returns no match for a place name"""
    pass


class UpstreamUnavailableError(DomainException):
    """Raised on network failure, timeout or non-2xx from an upstream provider"""
    pass


class NoDataError(DomainException):
    """Raised when the provider payload is incomplete or malformed"""
    pass
