"""
Abstract interfaces for the geocoding collaborators
"""

from abc import ABC, abstractmethod
from typing import Optional, Union

from .models import (
    ForwardGeocodingQueryRequestParameters,
    ForwardGeocodingResponse,
    ForwardGeocodingStructuredRequestParameters,
    HttpResponse,
    ReverseGeocodingRequestParameters,
    ReverseGeocodingResponse,
)

ForwardGeocodingRequestParameters = Union[
    ForwardGeocodingQueryRequestParameters,
    ForwardGeocodingStructuredRequestParameters,
]


class HttpClient(ABC):
    """Abstract interface for the HTTP transport"""

    @abstractmethod
    def get(
        self,
        url: str,
        params: Optional[dict[str, str]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> HttpResponse:
        """
        Issue a GET request

        Args:
            url: Absolute request URL
            params: Query parameters
            headers: Extra request headers

        Returns:
            HttpResponse with status and raw body
        """
        pass

    def close(self) -> None:
        """Release any held connections"""
        pass


class GeocodingResponseTransformer(ABC):
    """Abstract interface for turning raw provider bodies into models"""

    @abstractmethod
    def transform_forward(self, content: str) -> ForwardGeocodingResponse:
        """
        Transform a forward geocoding response body

        Args:
            content: Raw response body

        Returns:
            ForwardGeocodingResponse with the matched places
        """
        pass

    @abstractmethod
    def transform_reverse(self, content: str) -> ReverseGeocodingResponse:
        """
        Transform a reverse geocoding response body

        Args:
            content: Raw response body

        Returns:
            ReverseGeocodingResponse with the matched place, if any
        """
        pass


class GeocoderService(ABC):
    """Abstract interface for a configured geocoding service"""

    @abstractmethod
    def request_forward_geocoding(
        self, parameters: ForwardGeocodingRequestParameters
    ) -> ForwardGeocodingResponse:
        """
        Look up places matching a query

        Args:
            parameters: Free-form or structured query parameters

        Returns:
            ForwardGeocodingResponse
        """
        pass

    @abstractmethod
    def request_reverse_geocoding(
        self, parameters: ReverseGeocodingRequestParameters
    ) -> ReverseGeocodingResponse:
        """
        Look up the place at a coordinate

        Args:
            parameters: Reverse geocoding parameters

        Returns:
            ReverseGeocodingResponse
        """
        pass
