"""
Configuration resolution and geocoder service selection
"""

from .settings import (
    GenericConfig,
    LocationIqConfig,
    NominatimConfig,
    ProviderConfig,
    ServiceKind,
    default_config,
    load_config_file,
    merge_config,
    write_config_file,
)
from .resolver import ConfigResolver, resolve
from .factory import GeocoderServiceFactory

__all__ = [
    "ServiceKind",
    "ProviderConfig",
    "NominatimConfig",
    "LocationIqConfig",
    "GenericConfig",
    "default_config",
    "merge_config",
    "load_config_file",
    "write_config_file",
    "ConfigResolver",
    "resolve",
    "GeocoderServiceFactory",
]
