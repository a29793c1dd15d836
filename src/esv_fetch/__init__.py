"""
ESV Fetch - Prints Bible passages from the ESV API.
"""

from .models import PassageOptions, PassageResponse, MINIMAL_OPTIONS, PLAIN_TEXT_OPTIONS
from .client import (
    ESVError,
    ConfigurationError,
    TransportError,
    HTTPStatusError,
    EmptyResponseError,
    MalformedResponseError,
    UnexpectedResponseError,
    PassageNotFoundError,
    url_encode,
    build_request,
    fetch_passage,
)

__all__ = [
    "PassageOptions",
    "PassageResponse",
    "MINIMAL_OPTIONS",
    "PLAIN_TEXT_OPTIONS",
    "ESVError",
    "ConfigurationError",
    "TransportError",
    "HTTPStatusError",
    "EmptyResponseError",
    "MalformedResponseError",
    "UnexpectedResponseError",
    "PassageNotFoundError",
    "url_encode",
    "build_request",
    "fetch_passage",
]

__version__ = "0.1.0"
