"""
Nominatim geocoding services with configuration-driven provider selection
"""

from .config import (
    ConfigResolver,
    GeocoderServiceFactory,
    ProviderConfig,
    ServiceKind,
    default_config,
    resolve,
)
from .core import GeocoderService, InvalidConfigurationError, NominatimError
from .provider import GeocoderServiceProvider, create_geocoder_service

__version__ = "0.1.0"

__all__ = [
    "ConfigResolver",
    "GeocoderServiceFactory",
    "GeocoderServiceProvider",
    "GeocoderService",
    "ProviderConfig",
    "ServiceKind",
    "InvalidConfigurationError",
    "NominatimError",
    "create_geocoder_service",
    "default_config",
    "resolve",
]
