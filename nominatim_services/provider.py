"""
Start-up wiring for the geocoder service
"""

from collections.abc import Mapping
from typing import Any, Optional

from .config.factory import GeocoderServiceFactory
from .config.settings import default_config, merge_config
from .core.interfaces import GeocoderService, GeocodingResponseTransformer, HttpClient
from .core.logging import get_logger
from .transformers.geocoding import JsonGeocodingResponseTransformer
from .transport.client import HttpxClient

logger = get_logger(__name__)


class GeocoderServiceProvider:
    """
    Builds the shared HTTP client, transformer and geocoder service once

    The application creates one provider at start-up and passes
    ``provider.geocoder_service`` to whatever needs geocoding. Subclasses can
    override ``get_http_client`` or ``get_transformer`` to swap collaborators.
    """

    def __init__(
        self,
        config: Optional[Mapping[str, Any]] = None,
        env_file: Optional[str] = None,
        http_client: Optional[HttpClient] = None,
    ):
        """
        Initialize the provider

        Args:
            config: Application overrides for the nominatim section
            env_file: Path to a .env file used to fill the defaults
            http_client: Shared HTTP client, built by get_http_client if None.
                An injected client stays open on close(), its owner closes it
        """
        self.overrides = config
        self.env_file = env_file

        self._http_client: Optional[HttpClient] = http_client
        self._owns_http_client = False
        self._transformer: Optional[GeocodingResponseTransformer] = None
        self._geocoder_service: Optional[GeocoderService] = None

    def register(self) -> "GeocoderServiceProvider":
        """
        Resolve the configuration and build the geocoder service

        Raises:
            InvalidConfigurationError: If the merged configuration is invalid
        """
        if self._geocoder_service is not None:
            return self

        config = self.get_config()
        factory = GeocoderServiceFactory(self.http_client, self.transformer)
        self._geocoder_service = factory.make(config)

        logger.info("Geocoder service registered")
        return self

    def get_config(self) -> dict[str, Any]:
        """The package defaults merged with the application overrides"""
        return merge_config(default_config(self.env_file), self.overrides)

    def get_http_client(self) -> HttpClient:
        return HttpxClient()

    def get_transformer(self) -> GeocodingResponseTransformer:
        return JsonGeocodingResponseTransformer()

    @property
    def http_client(self) -> HttpClient:
        if self._http_client is None:
            self._http_client = self.get_http_client()
            self._owns_http_client = True
        return self._http_client

    @property
    def transformer(self) -> GeocodingResponseTransformer:
        if self._transformer is None:
            self._transformer = self.get_transformer()
        return self._transformer

    @property
    def geocoder_service(self) -> GeocoderService:
        if self._geocoder_service is None:
            self.register()
        return self._geocoder_service

    def close(self) -> None:
        """Release the HTTP client if this provider built it"""
        if self._owns_http_client and self._http_client is not None:
            self._http_client.close()
            self._http_client = None
            self._owns_http_client = False
        self._geocoder_service = None


def create_geocoder_service(
    config: Optional[Mapping[str, Any]] = None,
    http_client: Optional[HttpClient] = None,
    env_file: Optional[str] = None,
) -> GeocoderService:
    """
    Convenience function to build a geocoder service in one call

    When no http_client is given a new HttpxClient is built for the service;
    the caller releases it with ``service.client.close()``. Use
    GeocoderServiceProvider to have the client closed for you.

    Args:
        config: Application overrides for the nominatim section
        http_client: HTTP client to use instead of a new HttpxClient
        env_file: Path to a .env file used to fill the defaults

    Returns:
        Configured GeocoderService instance
    """
    provider = GeocoderServiceProvider(config=config, env_file=env_file, http_client=http_client)
    return provider.register().geocoder_service
