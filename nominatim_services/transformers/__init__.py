"""
Response transformers
"""

from .geocoding import JsonGeocodingResponseTransformer

__all__ = [
    "JsonGeocodingResponseTransformer",
]
