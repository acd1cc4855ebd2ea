"""
Custom exceptions for the geocoding services
"""

from typing import Optional


class NominatimError(Exception):
    """Base exception for all geocoding service errors"""

    pass


class InvalidConfigurationError(NominatimError):
    """Exception for invalid nominatim configuration"""

    pass


class RequestError(NominatimError):
    """Exception for failed requests to a geocoding provider"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class TransformationError(NominatimError):
    """Exception for provider responses that cannot be transformed"""

    pass
