"""
Geocoder service implementations
"""

from .base import AbstractGeocoderService
from .generic import GenericGeocoderService
from .location_iq import LocationIqGeocoderService
from .nominatim import NominatimGeocoderService

__all__ = [
    "AbstractGeocoderService",
    "GenericGeocoderService",
    "LocationIqGeocoderService",
    "NominatimGeocoderService",
]
