"""
Configuration settings for geocoding services
"""

import copy
import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from dotenv import find_dotenv, load_dotenv

from ..core.exceptions import InvalidConfigurationError
from ..core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_NOMINATIM_URL = "https://nominatim.openstreetmap.org"
DEFAULT_LOCATION_IQ_URL = "https://eu1.locationiq.com/v1"


class ServiceKind(str, Enum):
    """Supported geocoding providers"""

    GENERIC = "generic"
    NOMINATIM = "nominatim"
    LOCATION_IQ = "location_iq"

    @classmethod
    def from_value(cls, value: Any) -> "ServiceKind":
        """
        Map a raw config value to a service kind

        Raises:
            ValueError: If the value is not one of the supported kinds
        """
        if isinstance(value, str):
            for kind in cls:
                if kind.value == value:
                    return kind
        raise ValueError(f"Unsupported service: {value!r}")


@dataclass(frozen=True)
class ProviderConfig:
    """Configuration shared by every geocoding provider"""

    url: str
    forward_geocoding_endpoint: str
    reverse_geocoding_endpoint: str
    language: Optional[str]

    @property
    def forward_geocoding_url(self) -> str:
        return self._join(self.forward_geocoding_endpoint)

    @property
    def reverse_geocoding_url(self) -> str:
        return self._join(self.reverse_geocoding_endpoint)

    def _join(self, endpoint: str) -> str:
        return f"{self.url.rstrip('/')}/{endpoint.lstrip('/')}"


@dataclass(frozen=True)
class NominatimConfig(ProviderConfig):
    """Configuration for a Nominatim instance, which requires identification"""

    user_agent: str
    email: str


@dataclass(frozen=True)
class LocationIqConfig(ProviderConfig):
    """Configuration for the LocationIQ API"""

    key: str = field(repr=False)


@dataclass(frozen=True)
class GenericConfig(ProviderConfig):
    """Configuration for any other Nominatim-compatible API"""

    pass


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.environ.get(name)
    if value is None or value == "":
        return default
    return value


def default_config(env_file: Optional[str] = None) -> dict[str, Any]:
    """
    Build the configuration template from environment variables

    Args:
        env_file: Path to a .env file, searched from the working directory if None

    Returns:
        Fresh configuration mapping for the nominatim section
    """
    load_dotenv(env_file or find_dotenv(usecwd=True))

    return {
        "service": _env("NOMINATIM_SERVICE", ServiceKind.NOMINATIM.value),
        "language": _env("NOMINATIM_LANGUAGE"),
        "services": {
            "nominatim": {
                "user_agent": _env("NOMINATIM_NOMINATIM_USER_AGENT"),
                "email": _env("NOMINATIM_NOMINATIM_EMAIL"),
                "url": _env("NOMINATIM_NOMINATIM_URL", DEFAULT_NOMINATIM_URL),
                "forward_geocoding_endpoint": _env(
                    "NOMINATIM_NOMINATIM_FORWARD_GEOCODING_ENDPOINT", "search"
                ),
                "reverse_geocoding_endpoint": _env(
                    "NOMINATIM_NOMINATIM_REVERSE_GEOCODING_ENDPOINT", "reverse"
                ),
            },
            "location_iq": {
                "key": _env("NOMINATIM_LOCATION_IQ_KEY"),
                "url": _env("NOMINATIM_LOCATION_IQ_URL", DEFAULT_LOCATION_IQ_URL),
                "forward_geocoding_endpoint": _env(
                    "NOMINATIM_LOCATION_IQ_FORWARD_GEOCODING_ENDPOINT", "search.php"
                ),
                "reverse_geocoding_endpoint": _env(
                    "NOMINATIM_LOCATION_IQ_REVERSE_GEOCODING_ENDPOINT", "reverse.php"
                ),
            },
            "generic": {
                "url": _env("NOMINATIM_GENERIC_URL"),
                "forward_geocoding_endpoint": _env(
                    "NOMINATIM_GENERIC_FORWARD_GEOCODING_ENDPOINT", "search"
                ),
                "reverse_geocoding_endpoint": _env(
                    "NOMINATIM_GENERIC_REVERSE_GEOCODING_ENDPOINT", "reverse"
                ),
            },
        },
    }


def merge_config(defaults: Mapping, overrides: Optional[Mapping]) -> dict[str, Any]:
    """
    Recursively merge application overrides into the defaults

    Args:
        defaults: Base configuration
        overrides: Values that take precedence, may be None

    Returns:
        New merged mapping; neither input is modified
    """
    merged = copy.deepcopy(dict(defaults))

    for key, value in (overrides or {}).items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)

    return merged


def load_config_file(config_path: Union[str, Path]) -> dict[str, Any]:
    """
    Load the nominatim configuration section from a JSON or YAML file

    Args:
        config_path: Path to a .json, .yaml or .yml file

    Returns:
        Configuration mapping
    """
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    suffix = config_file.suffix.lower()

    try:
        with open(config_file, "r") as f:
            if suffix == ".json":
                data = json.load(f)
            elif suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            else:
                raise InvalidConfigurationError(
                    f"Unsupported configuration file type: {config_file.suffix}"
                )
    except json.JSONDecodeError as e:
        raise InvalidConfigurationError(f"Invalid JSON in configuration file: {e}")
    except yaml.YAMLError as e:
        raise InvalidConfigurationError(f"Invalid YAML in configuration file: {e}")

    if data is None:
        return {}

    if not isinstance(data, Mapping):
        raise InvalidConfigurationError(
            f"Configuration file must contain a mapping: {config_path}"
        )

    logger.info(f"Configuration loaded from: {config_path}")
    return dict(data)


def write_config_file(config: Mapping, config_path: Union[str, Path]) -> None:
    """
    Save a configuration mapping as JSON or YAML

    Args:
        config: Configuration mapping to save
        config_path: Destination; the suffix selects the format
    """
    config_file = Path(config_path)
    suffix = config_file.suffix.lower()

    if suffix not in (".json", ".yaml", ".yml"):
        raise InvalidConfigurationError(
            f"Unsupported configuration file type: {config_file.suffix}"
        )

    config_file.parent.mkdir(parents=True, exist_ok=True)

    with open(config_file, "w") as f:
        if suffix == ".json":
            json.dump(dict(config), f, indent=2)
        else:
            yaml.safe_dump(dict(config), f, sort_keys=False)

    logger.info(f"Configuration saved to: {config_path}")
