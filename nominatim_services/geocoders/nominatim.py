"""
Nominatim implementation of GeocoderService
"""

from ..config.settings import NominatimConfig
from .base import AbstractGeocoderService


class NominatimGeocoderService(AbstractGeocoderService):
    """
    Geocoder for Nominatim instances

    The public instance's usage policy requires an identifying User-Agent;
    the contact email is sent along so the operator can reach us.
    """

    config: NominatimConfig

    def _get_params(self) -> dict[str, str]:
        return {"email": self.config.email}

    def _get_headers(self) -> dict[str, str]:
        return {"User-Agent": self.config.user_agent}
