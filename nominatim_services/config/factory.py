"""
Factory for creating the configured geocoder service
"""

from collections.abc import Mapping
from typing import Any, Optional

from ..core.exceptions import InvalidConfigurationError
from ..core.interfaces import GeocoderService, GeocodingResponseTransformer, HttpClient
from ..core.logging import get_logger
from ..geocoders.base import AbstractGeocoderService
from ..geocoders.generic import GenericGeocoderService
from ..geocoders.location_iq import LocationIqGeocoderService
from ..geocoders.nominatim import NominatimGeocoderService
from .resolver import ConfigResolver
from .settings import ServiceKind

logger = get_logger(__name__)


class GeocoderServiceFactory:
    """
    Factory for creating the geocoder service selected by the configuration
    """

    # One entry per ServiceKind
    GEOCODER_SERVICES: dict[ServiceKind, type[AbstractGeocoderService]] = {
        ServiceKind.NOMINATIM: NominatimGeocoderService,
        ServiceKind.LOCATION_IQ: LocationIqGeocoderService,
        ServiceKind.GENERIC: GenericGeocoderService,
    }

    def __init__(
        self,
        client: HttpClient,
        transformer: GeocodingResponseTransformer,
        resolver: Optional[ConfigResolver] = None,
    ):
        """
        Initialize geocoder service factory

        Args:
            client: Shared HTTP client handed to every service
            transformer: Shared response transformer handed to every service
            resolver: Configuration resolver, a default one if None
        """
        missing = set(ServiceKind) - set(self.GEOCODER_SERVICES)
        if missing:
            raise RuntimeError(
                f"No geocoder service for: {sorted(kind.value for kind in missing)}"
            )

        self.client = client
        self.transformer = transformer
        self.resolver = resolver or ConfigResolver()

    def make(self, raw_config: Optional[Mapping[str, Any]]) -> GeocoderService:
        """
        Create the geocoder service for a raw configuration

        Args:
            raw_config: The nominatim configuration section

        Returns:
            Configured GeocoderService instance

        Raises:
            InvalidConfigurationError: If the configuration is invalid
        """
        service, provider_config = self.resolver.resolve(raw_config)
        service_class = self.GEOCODER_SERVICES[service]

        logger.info(
            f"Creating {service_class.__name__}",
            extra={"context": {"service_kind": service.value, "provider_url": provider_config.url}},
        )

        return service_class(self.client, self.transformer, provider_config)

    def get_available_services(self) -> dict[str, str]:
        """
        Get the supported services and the class each one creates

        Returns:
            Mapping of service name to geocoder service class name
        """
        return {
            kind.value: self.GEOCODER_SERVICES[kind].__name__
            for kind in ServiceKind
        }

    def validate_configuration(self, raw_config: Optional[Mapping[str, Any]]) -> dict:
        """
        Validate a configuration without raising

        Returns:
            Dictionary with validation results
        """
        results = {
            "valid": True,
            "service": None,
            "errors": [],
        }

        try:
            service, _ = self.resolver.resolve(raw_config)
            results["service"] = service.value
        except InvalidConfigurationError as e:
            results["valid"] = False
            results["errors"].append(str(e))

        return results
