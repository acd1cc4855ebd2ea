"""
Shared request handling for Nominatim-compatible geocoder services
"""

from ..config.settings import ProviderConfig
from ..core.exceptions import RequestError
from ..core.interfaces import (
    ForwardGeocodingRequestParameters,
    GeocoderService,
    GeocodingResponseTransformer,
    HttpClient,
)
from ..core.logging import get_logger
from ..core.models import (
    ForwardGeocodingResponse,
    ReverseGeocodingRequestParameters,
    ReverseGeocodingResponse,
)


class AbstractGeocoderService(GeocoderService):
    """
    Geocoder service talking to a Nominatim-compatible API

    Subclasses only decide which identification or credentials go on the wire.
    The client and transformer are shared handles owned by the caller.
    """

    RESPONSE_FORMAT = "jsonv2"

    def __init__(
        self,
        client: HttpClient,
        transformer: GeocodingResponseTransformer,
        config: ProviderConfig,
    ):
        """
        Initialize geocoder service

        Args:
            client: Shared HTTP client
            transformer: Shared response transformer
            config: Provider configuration
        """
        self.client = client
        self.transformer = transformer
        self.config = config

        self.logger = get_logger(
            __name__, {"geocoder": self.__class__.__name__, "provider_url": config.url}
        )
        self.logger.info("Geocoder service initialized")

    def request_forward_geocoding(
        self, parameters: ForwardGeocodingRequestParameters
    ) -> ForwardGeocodingResponse:
        content = self._request(self.config.forward_geocoding_url, parameters)
        return self.transformer.transform_forward(content)

    def request_reverse_geocoding(
        self, parameters: ReverseGeocodingRequestParameters
    ) -> ReverseGeocodingResponse:
        content = self._request(self.config.reverse_geocoding_url, parameters)
        return self.transformer.transform_reverse(content)

    def _request(self, url: str, parameters) -> str:
        params = {"format": self.RESPONSE_FORMAT, **parameters.to_params()}

        if "accept-language" not in params and self.config.language:
            params["accept-language"] = self.config.language

        params.update(self._get_params())

        self.logger.debug(f"Requesting {url}")
        response = self.client.get(url, params=params, headers=self._get_headers())

        if response.is_error:
            self.logger.error(
                f"Geocoding request to {url} failed with status {response.status_code}"
            )
            raise RequestError(
                f"Geocoding request failed with status {response.status_code}",
                status_code=response.status_code,
            )

        return response.content

    def _get_params(self) -> dict[str, str]:
        """Provider specific query parameters"""
        return {}

    def _get_headers(self) -> dict[str, str]:
        """Provider specific request headers"""
        return {}
