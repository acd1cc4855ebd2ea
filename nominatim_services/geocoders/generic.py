"""
Generic implementation of GeocoderService
"""

from ..config.settings import GenericConfig
from .base import AbstractGeocoderService


class GenericGeocoderService(AbstractGeocoderService):
    """Geocoder for self-hosted or other Nominatim-compatible APIs"""

    config: GenericConfig
