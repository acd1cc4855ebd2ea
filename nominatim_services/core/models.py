"""
Data models for geocoding requests and responses
"""

from dataclasses import dataclass, field
from typing import Any, Optional


def _flag(value: Optional[bool]) -> Optional[str]:
    if value is None:
        return None
    return "1" if value else "0"


class _RequestParameters:
    """Query parameters shared by every geocoding request"""

    def _common_params(self) -> dict[str, Any]:
        params = {
            "addressdetails": _flag(getattr(self, "address_details", None)),
            "extratags": _flag(getattr(self, "extra_tags", None)),
            "namedetails": _flag(getattr(self, "name_details", None)),
            "accept-language": getattr(self, "language", None),
        }

        limit = getattr(self, "limit", None)
        if limit is not None:
            params["limit"] = str(limit)

        country_codes = getattr(self, "country_codes", None)
        if country_codes:
            params["countrycodes"] = ",".join(code.lower() for code in country_codes)

        exclude_place_ids = getattr(self, "exclude_place_ids", None)
        if exclude_place_ids:
            params["exclude_place_ids"] = ",".join(str(place_id) for place_id in exclude_place_ids)

        return params

    def to_params(self) -> dict[str, str]:
        """Render as query parameters, leaving out unset values"""
        params = {**self._specific_params(), **self._common_params()}
        return {k: v for k, v in params.items() if v is not None}

    def _specific_params(self) -> dict[str, Any]:
        raise NotImplementedError


def _validate_limit(limit: Optional[int]) -> None:
    if limit is not None and limit < 1:
        raise ValueError(f"Limit must be at least 1, got {limit}")


@dataclass
class ForwardGeocodingQueryRequestParameters(_RequestParameters):
    """Free-form forward geocoding query"""

    query: str
    limit: Optional[int] = None
    address_details: Optional[bool] = None
    extra_tags: Optional[bool] = None
    name_details: Optional[bool] = None
    country_codes: list[str] = field(default_factory=list)
    exclude_place_ids: list[int] = field(default_factory=list)
    language: Optional[str] = None

    def __post_init__(self):
        if not self.query or not self.query.strip():
            raise ValueError("Query must not be empty")
        _validate_limit(self.limit)

    @classmethod
    def make(cls, query: str, **options) -> "ForwardGeocodingQueryRequestParameters":
        return cls(query=query, **options)

    def _specific_params(self) -> dict[str, Any]:
        return {"q": self.query}


@dataclass
class ForwardGeocodingStructuredRequestParameters(_RequestParameters):
    """Structured forward geocoding query; at least one address field is required"""

    street: Optional[str] = None
    city: Optional[str] = None
    county: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None
    limit: Optional[int] = None
    address_details: Optional[bool] = None
    extra_tags: Optional[bool] = None
    name_details: Optional[bool] = None
    country_codes: list[str] = field(default_factory=list)
    exclude_place_ids: list[int] = field(default_factory=list)
    language: Optional[str] = None

    def __post_init__(self):
        if not any(self._address_fields().values()):
            raise ValueError("Structured query needs at least one address field")
        _validate_limit(self.limit)

    def _address_fields(self) -> dict[str, Optional[str]]:
        return {
            "street": self.street,
            "city": self.city,
            "county": self.county,
            "state": self.state,
            "country": self.country,
            "postalcode": self.postal_code,
        }

    def _specific_params(self) -> dict[str, Any]:
        return {k: v for k, v in self._address_fields().items() if v}


@dataclass
class ReverseGeocodingRequestParameters(_RequestParameters):
    """Reverse geocoding lookup for a coordinate"""

    latitude: float
    longitude: float
    zoom: Optional[int] = None
    address_details: Optional[bool] = None
    extra_tags: Optional[bool] = None
    name_details: Optional[bool] = None
    language: Optional[str] = None

    def __post_init__(self):
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"Latitude out of range: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"Longitude out of range: {self.longitude}")
        if self.zoom is not None and not 0 <= self.zoom <= 18:
            raise ValueError(f"Zoom must be between 0 and 18, got {self.zoom}")

    @classmethod
    def make(cls, latitude: float, longitude: float, **options) -> "ReverseGeocodingRequestParameters":
        return cls(latitude=latitude, longitude=longitude, **options)

    def _specific_params(self) -> dict[str, Any]:
        return {
            "lat": str(self.latitude),
            "lon": str(self.longitude),
            "zoom": str(self.zoom) if self.zoom is not None else None,
        }


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 coordinate"""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class BoundingBox:
    """Bounding box of a place"""

    south: float
    north: float
    west: float
    east: float

    def contains(self, coordinate: Coordinate) -> bool:
        """Check whether a coordinate lies inside the box"""
        return (
            self.south <= coordinate.latitude <= self.north
            and self.west <= coordinate.longitude <= self.east
        )


@dataclass
class Address:
    """Address breakdown as returned with addressdetails=1"""

    components: dict[str, str] = field(default_factory=dict)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.components.get(key, default)

    @property
    def house_number(self) -> Optional[str]:
        return self.components.get("house_number")

    @property
    def road(self) -> Optional[str]:
        return self.components.get("road")

    @property
    def city(self) -> Optional[str]:
        """City, falling back to town, village and municipality"""
        for key in ("city", "town", "village", "municipality"):
            if key in self.components:
                return self.components[key]
        return None

    @property
    def state(self) -> Optional[str]:
        return self.components.get("state")

    @property
    def postcode(self) -> Optional[str]:
        return self.components.get("postcode")

    @property
    def country(self) -> Optional[str]:
        return self.components.get("country")

    @property
    def country_code(self) -> Optional[str]:
        return self.components.get("country_code")


@dataclass
class Place:
    """A single geocoding result"""

    place_id: int
    display_name: str
    coordinate: Coordinate
    osm_type: Optional[str] = None
    osm_id: Optional[int] = None
    licence: Optional[str] = None
    category: Optional[str] = None
    type: Optional[str] = None
    place_rank: Optional[int] = None
    importance: Optional[float] = None
    bounding_box: Optional[BoundingBox] = None
    address: Optional[Address] = None
    extra_tags: dict[str, str] = field(default_factory=dict)
    name_details: dict[str, str] = field(default_factory=dict)


@dataclass
class ForwardGeocodingResponse:
    """Result of a forward geocoding request"""

    items: list[Place] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.items)

    def first(self) -> Optional[Place]:
        return self.items[0] if self.items else None


@dataclass
class ReverseGeocodingResponse:
    """Result of a reverse geocoding request"""

    item: Optional[Place] = None
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.item is not None


@dataclass
class HttpResponse:
    """Raw response returned by an HTTP client"""

    status_code: int
    content: str
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def is_error(self) -> bool:
        return self.status_code >= 400
