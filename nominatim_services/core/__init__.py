"""
Core interfaces and models for the geocoding services
"""

from .exceptions import (
    InvalidConfigurationError,
    NominatimError,
    RequestError,
    TransformationError,
)
from .interfaces import (
    ForwardGeocodingRequestParameters,
    GeocoderService,
    GeocodingResponseTransformer,
    HttpClient,
)
from .logging import configure_logging, get_logger
from .models import (
    Address,
    BoundingBox,
    Coordinate,
    ForwardGeocodingQueryRequestParameters,
    ForwardGeocodingResponse,
    ForwardGeocodingStructuredRequestParameters,
    HttpResponse,
    Place,
    ReverseGeocodingRequestParameters,
    ReverseGeocodingResponse,
)

__all__ = [
    # Interfaces
    "HttpClient",
    "GeocodingResponseTransformer",
    "GeocoderService",
    "ForwardGeocodingRequestParameters",
    # Models
    "Address",
    "BoundingBox",
    "Coordinate",
    "Place",
    "ForwardGeocodingQueryRequestParameters",
    "ForwardGeocodingStructuredRequestParameters",
    "ReverseGeocodingRequestParameters",
    "ForwardGeocodingResponse",
    "ReverseGeocodingResponse",
    "HttpResponse",
    # Exceptions
    "NominatimError",
    "InvalidConfigurationError",
    "RequestError",
    "TransformationError",
    # Logging
    "configure_logging",
    "get_logger",
]
