"""
httpx implementation of HttpClient
"""

from typing import Optional

import httpx

from ..core.exceptions import RequestError
from ..core.interfaces import HttpClient
from ..core.logging import get_logger
from ..core.models import HttpResponse

logger = get_logger(__name__)


class HttpxClient(HttpClient):
    """
    Synchronous HTTP transport backed by a pooled httpx.Client
    """

    DEFAULT_TIMEOUT = 10.0

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Optional[dict[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the HTTP client

        Args:
            timeout: Request timeout in seconds
            headers: Headers sent with every request
            transport: Custom httpx transport, e.g. httpx.MockTransport in tests
        """
        self.client = httpx.Client(
            timeout=timeout,
            headers={"Accept": "application/json", **(headers or {})},
            follow_redirects=True,
            transport=transport,
        )

    def get(
        self,
        url: str,
        params: Optional[dict[str, str]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> HttpResponse:
        try:
            response = self.client.get(url, params=params, headers=headers)
        except httpx.TimeoutException as e:
            logger.error(f"Request to {url} timed out")
            raise RequestError(f"Request timed out: {url}") from e
        except httpx.HTTPError as e:
            logger.error(f"Request to {url} failed: {str(e)}")
            raise RequestError(f"Request failed: {str(e)}") from e

        return HttpResponse(
            status_code=response.status_code,
            content=response.text,
            headers=dict(response.headers),
        )

    def close(self) -> None:
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
