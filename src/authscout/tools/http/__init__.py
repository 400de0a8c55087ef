"""HTTP helpers for authscout."""

from .client import HTML_ACCEPT, HTTPClient, HTTPResponse

__all__ = [
    "HTML_ACCEPT",
    "HTTPClient",
    "HTTPResponse",
]
