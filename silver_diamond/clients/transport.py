"""
HTTP transport for the Silver Diamond API.

Sends one authenticated JSON POST per call and decodes the body into either
an error envelope or a success envelope. Endpoint-specific checks live in
silver_diamond.schemas; this module only knows about the shared contract.

Usage:
    from silver_diamond.clients import Client

    client = Client(api_key="sd_...")
    body = client.request("language-detection", {"text": "Hola mundo"})
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

import requests

from ..config import Config
from ..constants import ERROR_FIELDS, UNKNOWN_ERROR
from ..exceptions import ConfigError, RemoteError, TransportError, UnexpectedResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ErrorEnvelope:
    """Body carrying a `message` or `error` field."""
    message: str
    body: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class SuccessEnvelope:
    """Body without any error field; contents are endpoint specific."""
    body: Dict[str, Any] = field(default_factory=dict)


Envelope = Union[ErrorEnvelope, SuccessEnvelope]


def decode_envelope(body: Any, endpoint: Optional[str] = None) -> Envelope:
    """
    Classify a decoded JSON body.

    Args:
        body: Parsed JSON body
        endpoint: Endpoint name, used for error reporting

    Returns:
        ErrorEnvelope if any error field is present, SuccessEnvelope otherwise

    Raises:
        UnexpectedResponse: If the body is not a JSON object
    """
    if not isinstance(body, dict):
        raise UnexpectedResponse(endpoint=endpoint, body=body)

    present = [name for name in ERROR_FIELDS if name in body]
    if not present:
        return SuccessEnvelope(body=body)

    # First non-empty value wins, like `message || error`
    value = next((body[name] for name in present if body[name]), None)
    return ErrorEnvelope(message=str(value) if value else UNKNOWN_ERROR, body=body)


class Client:
    """
    Low level client for the Silver Diamond service endpoints.

    Holds the API key and a requests.Session; each call to `request` is a
    single POST with no retries.
    """

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        verify_ssl: Optional[bool] = None,
        session: Optional[requests.Session] = None,
        verbose: bool = False
    ):
        """
        Initialize the transport.

        Args:
            api_key: Silver Diamond API key, sent as a bearer token
            base_url: Service root (defaults to Config.BASE_URL)
            timeout: Request timeout in seconds; None uses the requests default
            verify_ssl: Whether to verify SSL certificates (defaults to Config.VERIFY_SSL);
                None keeps the session's own `verify` setting
            session: Pre-built requests.Session to reuse; the caller keeps ownership
            verbose: If True, log every request and response
        """
        if not isinstance(api_key, str) or not api_key.strip():
            raise ConfigError("No API Key was provided")

        self._api_key = api_key
        self.base_url = (base_url or Config.BASE_URL).rstrip('/') + '/'
        self.timeout = timeout if timeout is not None else Config.REQUEST_TIMEOUT
        self.verify_ssl = Config.VERIFY_SSL if verify_ssl is None else verify_ssl
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.verbose = verbose

        logger.info(f"🔗 Silver Diamond client initialized: {self.base_url}")

    def __repr__(self) -> str:
        return f"Client(base_url={self.base_url!r}, api_key='***')"

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": f"Bearer {self._api_key}",
        }

    def _request_options(self) -> Dict[str, Any]:
        options = {"headers": self.headers, "timeout": self.timeout}
        if self.verify_ssl is not None:
            options["verify"] = self.verify_ssl
        return options

    def url(self, endpoint: str) -> str:
        return self.base_url + endpoint.strip('/')

    def request(self, endpoint: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        POST `data` to `endpoint` and return the decoded body.

        Args:
            endpoint: Endpoint name, e.g. "language-detection"
            data: JSON serializable payload

        Returns:
            The parsed response body, unmodified

        Raises:
            RemoteError: If the body carries a `message` or `error` field
            TransportError: If the request fails or the body is not JSON
            UnexpectedResponse: If the body is JSON but not an object
        """
        endpoint = endpoint.strip('/')
        url = self.url(endpoint)

        if self.verbose:
            logger.info(f"📤 POST {url} fields={sorted(data)}")

        try:
            response = self.session.post(url, json=data, **self._request_options())
        except requests.exceptions.RequestException as e:
            logger.error(f"❌ Silver Diamond request to {endpoint} failed: {e}")
            raise TransportError(f"Request to {endpoint} failed: {e}") from e

        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"❌ Invalid JSON from {endpoint} (status {response.status_code})")
            raise TransportError(f"Invalid JSON response from {endpoint}: {e}") from e

        if self.verbose:
            logger.info(f"📥 {endpoint} responded with status {response.status_code}")

        envelope = decode_envelope(body, endpoint=endpoint)
        if isinstance(envelope, ErrorEnvelope):
            logger.error(f"❌ Silver Diamond error on {endpoint}: {envelope.message}")
            raise RemoteError(
                envelope.message,
                status_code=response.status_code,
                body=envelope.body
            )

        return envelope.body

    def close(self):
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
