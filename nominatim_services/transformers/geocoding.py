"""
JSON implementation of GeocodingResponseTransformer
"""

import json
from typing import Any, Optional

from ..core.exceptions import TransformationError
from ..core.interfaces import GeocodingResponseTransformer
from ..core.logging import get_logger
from ..core.models import (
    Address,
    BoundingBox,
    Coordinate,
    ForwardGeocodingResponse,
    Place,
    ReverseGeocodingResponse,
)

logger = get_logger(__name__)


def _optional_int(value: Any) -> Optional[int]:
    return int(value) if value is not None else None


def _optional_float(value: Any) -> Optional[float]:
    return float(value) if value is not None else None


class JsonGeocodingResponseTransformer(GeocodingResponseTransformer):
    """
    Transforms Nominatim style JSON bodies into response models

    Handles both the ``json`` and ``jsonv2`` output formats, which differ
    in naming the OSM class ``class`` or ``category``.
    """

    def transform_forward(self, content: str) -> ForwardGeocodingResponse:
        data = self._decode(content)

        if not isinstance(data, list):
            raise TransformationError(
                f"Expected a list of places, got {type(data).__name__}"
            )

        return ForwardGeocodingResponse(items=[self.transform_place(item) for item in data])

    def transform_reverse(self, content: str) -> ReverseGeocodingResponse:
        data = self._decode(content)

        if not isinstance(data, dict):
            raise TransformationError(f"Expected a place object, got {type(data).__name__}")

        # Nominatim answers 200 with an error object when nothing is found
        if "error" in data:
            error = data["error"]
            if isinstance(error, dict):
                error = error.get("message", str(error))
            return ReverseGeocodingResponse(item=None, error=str(error))

        return ReverseGeocodingResponse(item=self.transform_place(data))

    def transform_place(self, data: Any) -> Place:
        """
        Transform a single place object

        Args:
            data: Decoded place object

        Returns:
            Place model
        """
        if not isinstance(data, dict):
            raise TransformationError(f"Expected a place object, got {type(data).__name__}")

        try:
            return Place(
                place_id=int(data["place_id"]),
                display_name=str(data["display_name"]),
                coordinate=Coordinate(
                    latitude=float(data["lat"]),
                    longitude=float(data["lon"]),
                ),
                osm_type=data.get("osm_type"),
                osm_id=_optional_int(data.get("osm_id")),
                licence=data.get("licence"),
                category=data.get("category", data.get("class")),
                type=data.get("type"),
                place_rank=_optional_int(data.get("place_rank")),
                importance=_optional_float(data.get("importance")),
                bounding_box=self._transform_bounding_box(data.get("boundingbox")),
                address=self._transform_address(data.get("address")),
                extra_tags=dict(data.get("extratags") or {}),
                name_details=dict(data.get("namedetails") or {}),
            )
        except KeyError as e:
            raise TransformationError(f"Place is missing required field {e}") from e
        except (TypeError, ValueError) as e:
            raise TransformationError(f"Place has an invalid value: {e}") from e

    def _transform_bounding_box(self, data: Any) -> Optional[BoundingBox]:
        if not data:
            return None

        if not isinstance(data, (list, tuple)):
            raise TransformationError(
                f"Expected a bounding box list, got {type(data).__name__}"
            )

        if len(data) != 4:
            raise TransformationError(f"Bounding box needs 4 values, got {len(data)}")

        south, north, west, east = (float(value) for value in data)
        return BoundingBox(south=south, north=north, west=west, east=east)

    def _transform_address(self, data: Any) -> Optional[Address]:
        if not data:
            return None

        if not isinstance(data, dict):
            raise TransformationError(f"Expected an address object, got {type(data).__name__}")

        return Address(components={str(k): str(v) for k, v in data.items()})

    def _decode(self, content: str) -> Any:
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to decode geocoding response: {e}")
            raise TransformationError(f"Invalid JSON in geocoding response: {e}") from e
