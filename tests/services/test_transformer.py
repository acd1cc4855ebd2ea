"""
Unit tests for the JSON response transformer
"""

import json
import unittest
from pathlib import Path

from nominatim_services.core.exceptions import TransformationError
from nominatim_services.core.models import BoundingBox, Coordinate
from nominatim_services.transformers import JsonGeocodingResponseTransformer

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class TestJsonGeocodingResponseTransformer(unittest.TestCase):
    """Test JsonGeocodingResponseTransformer"""

    def setUp(self):
        self.transformer = JsonGeocodingResponseTransformer()

    def test_transform_forward(self):
        """Test a jsonv2 search response"""
        content = (FIXTURES_DIR / "search.json").read_text()

        response = self.transformer.transform_forward(content)

        self.assertEqual(response.count, 2)

        first, second = response.items
        self.assertEqual(first.place_id, 12345)
        self.assertEqual(first.display_name, "Beautiful Building")
        self.assertEqual(first.coordinate, Coordinate(latitude=52.3731, longitude=4.8922))
        self.assertEqual(first.osm_type, "way")
        self.assertEqual(first.osm_id, 2345678)
        self.assertEqual(first.category, "building")
        self.assertEqual(first.place_rank, 30)
        self.assertEqual(first.importance, 0.61)
        self.assertEqual(
            first.bounding_box,
            BoundingBox(south=52.3729, north=52.3733, west=4.8918, east=4.8926),
        )
        self.assertEqual(first.address.road, "Dam")
        self.assertEqual(first.address.city, "Amsterdam")
        self.assertEqual(first.address.country_code, "nl")

        self.assertEqual(second.place_id, 67890)
        self.assertEqual(second.display_name, "Statue of Something")
        # json format names the OSM class "class"
        self.assertEqual(second.category, "tourism")
        self.assertIsNone(second.address)
        self.assertIsNone(second.place_rank)

    def test_transform_forward_empty(self):
        response = self.transformer.transform_forward("[]")

        self.assertEqual(response.items, [])

    def test_transform_forward_not_a_list(self):
        with self.assertRaises(TransformationError):
            self.transformer.transform_forward('{"place_id": 1}')

    def test_transform_reverse(self):
        content = (FIXTURES_DIR / "reverse.json").read_text()

        response = self.transformer.transform_reverse(content)

        self.assertTrue(response.found)
        self.assertIsNone(response.error)
        self.assertEqual(response.item.place_id, 12345)
        self.assertEqual(response.item.display_name, "Beautiful Building")
        self.assertEqual(response.item.address.city, "Amsterdam")

    def test_transform_reverse_not_found(self):
        content = (FIXTURES_DIR / "reverse_error.json").read_text()

        response = self.transformer.transform_reverse(content)

        self.assertFalse(response.found)
        self.assertEqual(response.error, "Unable to geocode")

    def test_transform_reverse_error_object(self):
        content = json.dumps({"error": {"code": 400, "message": "Invalid key"}})

        response = self.transformer.transform_reverse(content)

        self.assertEqual(response.error, "Invalid key")

    def test_invalid_json(self):
        with self.assertRaises(TransformationError):
            self.transformer.transform_forward("<html>Bad Gateway</html>")

    def test_missing_required_field(self):
        content = json.dumps([{"place_id": 1, "lat": "1.0", "lon": "2.0"}])

        with self.assertRaises(TransformationError) as context:
            self.transformer.transform_forward(content)

        self.assertIn("display_name", str(context.exception))

    def test_invalid_coordinate(self):
        content = json.dumps([
            {"place_id": 1, "display_name": "Somewhere", "lat": "north", "lon": "2.0"}
        ])

        with self.assertRaises(TransformationError):
            self.transformer.transform_forward(content)

    def test_invalid_bounding_box(self):
        content = json.dumps({
            "place_id": 1,
            "display_name": "Somewhere",
            "lat": "1.0",
            "lon": "2.0",
            "boundingbox": ["1.0", "2.0"],
        })

        with self.assertRaises(TransformationError):
            self.transformer.transform_reverse(content)

    def test_address_must_be_an_object(self):
        content = json.dumps({
            "place_id": 1,
            "display_name": "Somewhere",
            "lat": "1.0",
            "lon": "2.0",
            "address": ["Dam", "Amsterdam"],
        })

        with self.assertRaises(TransformationError) as context:
            self.transformer.transform_reverse(content)

        self.assertIn("address", str(context.exception))

    def test_bounding_box_must_be_a_list(self):
        content = json.dumps([{
            "place_id": 1,
            "display_name": "Somewhere",
            "lat": "1.0",
            "lon": "2.0",
            "boundingbox": "1.0,2.0,3.0,4.0",
        }])

        with self.assertRaises(TransformationError):
            self.transformer.transform_forward(content)


if __name__ == "__main__":
    unittest.main()
