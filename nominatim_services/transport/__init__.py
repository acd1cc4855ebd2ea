"""
HTTP transports
"""

from .client import HttpxClient

__all__ = [
    "HttpxClient",
]
