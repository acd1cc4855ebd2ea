"""
Resolve the nominatim configuration section into a provider config
"""

from collections.abc import Mapping
from typing import Any, Optional

from ..core.exceptions import InvalidConfigurationError
from ..core.logging import get_logger
from .settings import (
    GenericConfig,
    LocationIqConfig,
    NominatimConfig,
    ProviderConfig,
    ServiceKind,
)

logger = get_logger(__name__)

CONFIG_KEY = "nominatim"

# Required string fields per service, in validation order
REQUIRED_FIELDS: dict[ServiceKind, tuple[str, ...]] = {
    ServiceKind.NOMINATIM: (
        "user_agent",
        "email",
        "url",
        "forward_geocoding_endpoint",
        "reverse_geocoding_endpoint",
    ),
    ServiceKind.LOCATION_IQ: (
        "key",
        "url",
        "forward_geocoding_endpoint",
        "reverse_geocoding_endpoint",
    ),
    ServiceKind.GENERIC: (
        "url",
        "forward_geocoding_endpoint",
        "reverse_geocoding_endpoint",
    ),
}

PROVIDER_CONFIGS: dict[ServiceKind, type[ProviderConfig]] = {
    ServiceKind.NOMINATIM: NominatimConfig,
    ServiceKind.LOCATION_IQ: LocationIqConfig,
    ServiceKind.GENERIC: GenericConfig,
}


class ConfigResolver:
    """
    Validates the raw nominatim configuration and builds the provider config

    Validation is fail-fast: the first violation raises
    InvalidConfigurationError naming the offending dotted config path.
    """

    def resolve(self, raw_config: Optional[Mapping]) -> tuple[ServiceKind, ProviderConfig]:
        """
        Resolve a raw configuration mapping

        Args:
            raw_config: The nominatim configuration section

        Returns:
            The selected service kind and its provider config
        """
        data = self._get_config_data(raw_config)
        service = self._get_service(data)
        language = self._get_language(data)
        service_data = self._get_service_data(data, service)

        values = {
            key: self._get_string_value(service, service_data, key)
            for key in REQUIRED_FIELDS[service]
        }

        provider_config = PROVIDER_CONFIGS[service](language=language, **values)
        logger.debug(f"Resolved nominatim configuration for service '{service.value}'")

        return service, provider_config

    def _get_config_data(self, raw_config: Optional[Mapping]) -> Mapping:
        if raw_config and isinstance(raw_config, Mapping):
            return raw_config

        raise InvalidConfigurationError("Nominatim config not found")

    def _get_service(self, data: Mapping) -> ServiceKind:
        try:
            return ServiceKind.from_value(data.get("service"))
        except ValueError:
            raise InvalidConfigurationError(
                f"The config value '{CONFIG_KEY}.service' is not supported"
            ) from None

    def _get_language(self, data: Mapping) -> Optional[str]:
        language = data.get("language")

        if language is None or isinstance(language, str):
            return language

        raise InvalidConfigurationError(
            f"The config value '{CONFIG_KEY}.language' must be a string or null"
        )

    def _get_service_data(self, data: Mapping, service: ServiceKind) -> Mapping:
        path = f"{CONFIG_KEY}.services.{service.value}"
        services = data.get("services")

        if not isinstance(services, Mapping) or service.value not in services:
            raise InvalidConfigurationError(f"The config value '{path}' must be present")

        service_data = services[service.value]
        if not isinstance(service_data, Mapping):
            raise InvalidConfigurationError(f"The config value '{path}' must be a mapping")

        return service_data

    def _get_string_value(self, service: ServiceKind, service_data: Mapping, key: str) -> str:
        path = f"{CONFIG_KEY}.services.{service.value}.{key}"
        value = service_data.get(key)

        if not isinstance(value, str):
            raise InvalidConfigurationError(f"The config value '{path}' must be a string")

        if not value:
            raise InvalidConfigurationError(f"The config value '{path}' must not be empty")

        return value


def resolve(raw_config: Optional[Mapping[str, Any]]) -> tuple[ServiceKind, ProviderConfig]:
    """Convenience function to resolve a raw configuration mapping"""
    return ConfigResolver().resolve(raw_config)
