"""
LocationIQ implementation of GeocoderService
"""

from ..config.settings import LocationIqConfig
from .base import AbstractGeocoderService


class LocationIqGeocoderService(AbstractGeocoderService):
    """Geocoder for the LocationIQ API, authenticated with an access token"""

    # LocationIQ has no jsonv2 output
    RESPONSE_FORMAT = "json"

    config: LocationIqConfig

    def _get_params(self) -> dict[str, str]:
        return {"key": self.config.key}
