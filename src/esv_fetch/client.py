"""Core request/response handling for the ESV passage text API."""

import json
import logging
import re

import requests

from .config import API_BASE_URL, DEFAULT_TIMEOUT
from .models import MINIMAL_OPTIONS, PassageOptions, PassageResponse


logger = logging.getLogger(__name__)


# =============================================================================
# Errors
# =============================================================================

class ESVError(Exception):
    """Base class for every failure while fetching a passage."""


class ConfigurationError(ESVError):
    """Raised when required settings are missing or invalid."""


class TransportError(ESVError):
    """Raised when the request could not be completed at all."""


class HTTPStatusError(ESVError):
    """Raised when the API answers with anything other than 200."""

    def __init__(self, status_code: int, reason: str, body: str):
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(
            f"API returned a non-200 status code: {status_code} {reason}\n"
            f"Response: {body or 'No response body'}"
        )


class EmptyResponseError(ESVError):
    """Raised when a 200 response carries no body."""


class MalformedResponseError(ESVError):
    """Raised when the body is not valid JSON."""

    def __init__(self, error: json.JSONDecodeError, body: str):
        self.position = error.pos
        self.body = body
        super().__init__(
            f"Error parsing JSON response: {error.msg} at line {error.lineno} "
            f"column {error.colno} (position {error.pos})\n"
            f"Raw Body: {body}"
        )


class UnexpectedResponseError(ESVError):
    """Raised when the body is valid JSON but not an object."""

    def __init__(self, value):
        self.value = value
        super().__init__(
            "API response was not a JSON object as expected.\n"
            f"Decoded Type: {type(value).__name__}\n"
            f"Decoded Value: {value!r}"
        )


class PassageNotFoundError(ESVError):
    """Raised when the API returns no passages for the query."""

    def __init__(self, query: str, detail=None):
        self.query = query
        self.detail = detail
        message = f"Passage not found for query '{query}'."
        if detail is not None:
            message += f"\nAPI Detail: {detail}"
        super().__init__(message)


# =============================================================================
# Request Building
# =============================================================================

_UNRESERVED = re.compile(rb"[^A-Za-z0-9._-]")


def url_encode(value: str) -> str:
    """Percent-encode every UTF-8 byte outside ``[A-Za-z0-9._-]``."""
    encoded = _UNRESERVED.sub(lambda m: b"%%%02X" % m.group()[0], value.encode("utf-8"))
    return encoded.decode("ascii")


def build_query_string(params: list[tuple[str, str]]) -> str:
    """Join encoded ``key=value`` pairs with ``&``, keeping their order."""
    return "&".join(f"{url_encode(key)}={url_encode(value)}" for key, value in params)


def build_request(
    reference: str,
    api_key: str,
    options: PassageOptions = MINIMAL_OPTIONS,
    base_url: str = API_BASE_URL,
) -> tuple[str, dict[str, str]]:
    """
    Build the full URL and headers for a passage lookup.

    Args:
        reference: Passage reference (e.g., 'John 3:16-17')
        api_key: ESV API token
        options: Formatting options to send alongside ``q``
        base_url: Endpoint the query string is appended to

    Returns:
        Tuple of (url, headers)
    """
    params = [("q", reference)] + options.to_params()
    url = f"{base_url}?{build_query_string(params)}"
    headers = {"Authorization": f"Token {api_key}"}
    return url, headers


# =============================================================================
# Transport
# =============================================================================

def send_request(url: str, headers: dict[str, str], timeout: float = DEFAULT_TIMEOUT) -> str:
    """
    Perform the GET request and return the response body.

    Raises:
        TransportError: If the request could not be completed
        HTTPStatusError: If the status code is not 200
        EmptyResponseError: If the body is empty
    """
    logger.debug("GET %s", url)
    try:
        response = requests.get(url, headers=headers, timeout=timeout)
    except requests.RequestException as e:
        raise TransportError(f"Request failed: {e}") from e

    logger.debug("Response status: %s %s", response.status_code, response.reason)
    if response.status_code != 200:
        raise HTTPStatusError(response.status_code, response.reason or "", response.text)

    if not response.text:
        raise EmptyResponseError("Failed to get a response body from the API.")

    return response.text


# =============================================================================
# Response Decoding
# =============================================================================

def decode_response(body: str) -> dict:
    """Parse the body as JSON and require a top-level object."""
    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise MalformedResponseError(e, body) from e

    if not isinstance(data, dict):
        raise UnexpectedResponseError(data)

    return data


# =============================================================================
# Public API
# =============================================================================

def fetch_passage(
    reference: str,
    api_key: str,
    options: PassageOptions = MINIMAL_OPTIONS,
    base_url: str = API_BASE_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> PassageResponse:
    """
    Fetch a passage from the ESV API.

    Args:
        reference: Passage reference (e.g., 'John 3:16')
        api_key: ESV API token
        options: Formatting options
        base_url: API endpoint
        timeout: Seconds to wait for the server

    Returns:
        PassageResponse with at least one passage

    Raises:
        ConfigurationError: If no API key is given
        PassageNotFoundError: If the API matched nothing
        ESVError: For any other failure along the way
    """
    if not api_key:
        raise ConfigurationError("An API key is required.")

    url, headers = build_request(reference, api_key, options, base_url)
    body = send_request(url, headers, timeout)
    passage = PassageResponse.from_dict(decode_response(body), reference)

    if not passage.found:
        raise PassageNotFoundError(passage.query, passage.detail)

    return passage
