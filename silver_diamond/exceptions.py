"""
Exceptions raised by the Silver Diamond client.

Every error derives from SilverDiamondError so callers can catch the whole
family at once:
- ConfigError: missing or empty API key
- InvalidArgument: bad text or label arguments, raised before any request
- RemoteError: the service answered with a `message` or `error` field
- TransportError: the request itself failed or the body was not JSON
- UnexpectedResponse: the body lacks fields the operation needs
"""

from typing import Any, Dict, Optional, Sequence

from .constants import UNKNOWN_ERROR


class SilverDiamondError(Exception):
    """Base class for all client errors."""


class ConfigError(SilverDiamondError):
    """Raised when the client cannot be configured (e.g. no API key)."""


class InvalidArgument(SilverDiamondError, ValueError):
    """Raised when a caller-supplied argument is rejected locally."""


class RemoteError(SilverDiamondError):
    """
    Raised when the service reports an error in the response body.

    Attributes:
        message: Value of the `message` (or `error`) field
        status_code: HTTP status of the response, if known
        body: Decoded response body
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body or {}


class TransportError(SilverDiamondError):
    """Raised when the HTTP exchange fails or the body is not valid JSON."""


class UnexpectedResponse(SilverDiamondError):
    """
    Raised when a request succeeded but the body does not match the
    endpoint's contract.

    Attributes:
        endpoint: Endpoint that was called
        missing: Fields that were absent or invalid
        body: Decoded response body
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        missing: Sequence[str] = (),
        body: Any = None
    ):
        super().__init__(UNKNOWN_ERROR)
        self.endpoint = endpoint
        self.missing = tuple(missing)
        self.body = body
