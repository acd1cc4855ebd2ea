"""
Unit tests for the geocoder services
"""

import unittest
from pathlib import Path
from unittest.mock import Mock

from nominatim_services.config.settings import GenericConfig, LocationIqConfig, NominatimConfig
from nominatim_services.core.exceptions import RequestError
from nominatim_services.core.interfaces import HttpClient
from nominatim_services.core.models import (
    ForwardGeocodingQueryRequestParameters,
    ForwardGeocodingStructuredRequestParameters,
    HttpResponse,
    ReverseGeocodingRequestParameters,
)
from nominatim_services.geocoders import (
    GenericGeocoderService,
    LocationIqGeocoderService,
    NominatimGeocoderService,
)
from nominatim_services.transformers import JsonGeocodingResponseTransformer

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def fixture_response(name: str, status_code: int = 200) -> HttpResponse:
    return HttpResponse(status_code=status_code, content=(FIXTURES_DIR / name).read_text())


class GeocoderServiceTestCase(unittest.TestCase):
    """Shared setup for geocoder service tests"""

    def setUp(self):
        self.client = Mock(spec=HttpClient)
        self.client.get.return_value = fixture_response("search.json")
        self.transformer = JsonGeocodingResponseTransformer()

    def last_request(self):
        args, kwargs = self.client.get.call_args
        return args[0], kwargs["params"], kwargs["headers"]


class TestNominatimGeocoderService(GeocoderServiceTestCase):
    """Test NominatimGeocoderService"""

    def setUp(self):
        super().setUp()
        self.service = NominatimGeocoderService(
            self.client,
            self.transformer,
            NominatimConfig(
                url="https://nominatim.openstreetmap.org",
                forward_geocoding_endpoint="search",
                reverse_geocoding_endpoint="reverse",
                language="nl",
                user_agent="app-identifier",
                email="email@provider.net",
            ),
        )

    def test_forward_geocoding(self):
        """Test a free-form query"""
        response = self.service.request_forward_geocoding(
            ForwardGeocodingQueryRequestParameters.make("query")
        )

        self.assertEqual(response.count, 2)
        self.assertEqual(response.items[0].place_id, 12345)
        self.assertEqual(response.items[0].display_name, "Beautiful Building")
        self.assertEqual(response.items[1].place_id, 67890)
        self.assertEqual(response.items[1].display_name, "Statue of Something")

        url, params, headers = self.last_request()
        self.assertEqual(url, "https://nominatim.openstreetmap.org/search")
        self.assertEqual(params, {
            "format": "jsonv2",
            "q": "query",
            "accept-language": "nl",
            "email": "email@provider.net",
        })
        self.assertEqual(headers, {"User-Agent": "app-identifier"})

    def test_structured_forward_geocoding(self):
        self.service.request_forward_geocoding(
            ForwardGeocodingStructuredRequestParameters(city="Amsterdam", country="nl")
        )

        _, params, _ = self.last_request()
        self.assertEqual(params["city"], "Amsterdam")
        self.assertEqual(params["country"], "nl")
        self.assertNotIn("q", params)

    def test_request_language_wins(self):
        self.service.request_forward_geocoding(
            ForwardGeocodingQueryRequestParameters(query="query", language="en")
        )

        _, params, _ = self.last_request()
        self.assertEqual(params["accept-language"], "en")

    def test_reverse_geocoding(self):
        self.client.get.return_value = fixture_response("reverse.json")

        response = self.service.request_reverse_geocoding(
            ReverseGeocodingRequestParameters.make(52.3731, 4.8922)
        )

        self.assertTrue(response.found)
        self.assertEqual(response.item.place_id, 12345)

        url, params, _ = self.last_request()
        self.assertEqual(url, "https://nominatim.openstreetmap.org/reverse")
        self.assertEqual(params["lat"], "52.3731")
        self.assertEqual(params["lon"], "4.8922")

    def test_error_status(self):
        self.client.get.return_value = HttpResponse(status_code=403, content="Forbidden")

        with self.assertRaises(RequestError) as context:
            self.service.request_forward_geocoding(
                ForwardGeocodingQueryRequestParameters.make("query")
            )

        self.assertEqual(context.exception.status_code, 403)


class TestLocationIqGeocoderService(GeocoderServiceTestCase):
    """Test LocationIqGeocoderService"""

    def setUp(self):
        super().setUp()
        self.service = LocationIqGeocoderService(
            self.client,
            self.transformer,
            LocationIqConfig(
                url="https://eu1.locationiq.com/v1",
                forward_geocoding_endpoint="search.php",
                reverse_geocoding_endpoint="reverse.php",
                language=None,
                key="access-token",
            ),
        )

    def test_forward_geocoding(self):
        response = self.service.request_forward_geocoding(
            ForwardGeocodingQueryRequestParameters.make("query")
        )

        self.assertEqual(response.count, 2)
        self.assertEqual(response.items[0].place_id, 12345)

        url, params, headers = self.last_request()
        self.assertEqual(url, "https://eu1.locationiq.com/v1/search.php")
        self.assertEqual(params, {"format": "json", "q": "query", "key": "access-token"})
        self.assertEqual(headers, {})

    def test_reverse_geocoding_not_found(self):
        self.client.get.return_value = fixture_response("reverse_error.json")

        response = self.service.request_reverse_geocoding(
            ReverseGeocodingRequestParameters.make(0.0, 0.0)
        )

        self.assertFalse(response.found)
        url, _, _ = self.last_request()
        self.assertEqual(url, "https://eu1.locationiq.com/v1/reverse.php")


class TestGenericGeocoderService(GeocoderServiceTestCase):
    """Test GenericGeocoderService"""

    def test_sends_no_credentials(self):
        service = GenericGeocoderService(
            self.client,
            self.transformer,
            GenericConfig(
                url="https://geocoder.internal/",
                forward_geocoding_endpoint="search",
                reverse_geocoding_endpoint="reverse",
                language=None,
            ),
        )

        service.request_forward_geocoding(ForwardGeocodingQueryRequestParameters.make("query"))

        url, params, headers = self.last_request()
        self.assertEqual(url, "https://geocoder.internal/search")
        self.assertEqual(params, {"format": "jsonv2", "q": "query"})
        self.assertEqual(headers, {})


if __name__ == "__main__":
    unittest.main()
