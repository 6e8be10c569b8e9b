"""
Custom exception hierarchy for the OpenAI client library.

All public exceptions inherit from :class:`OpenAIClientError`, allowing callers
to catch a single base class for any client‑related failure while still being
able to differentiate specific error conditions when needed:

* :class:`RequestConstructionError` – the request could not be built
  (malformed base URL, missing path parameter, empty proxy path).
* :class:`TransportError` – no response was received at all.
* :class:`HTTPStatusError` – the server answered with a non‑2xx status.
  Structured provider errors become :class:`APIError` (and its status
  specific subclasses), anything else becomes :class:`BadStatusError`.
* :class:`DecodeError` – the status was fine, but the body did not match the
  shape expected for the operation.
* :class:`StreamDecodeError` / :class:`StreamTransportError` – failures
  reported while consuming a streaming response.
"""

from typing import Optional


class OpenAIClientError(Exception):
    """Base exception for all client‑specific errors."""

    pass


class RequestConstructionError(OpenAIClientError):
    """Raised when a request cannot be built from the client configuration."""

    pass


class TransportError(OpenAIClientError):
    """Raised when the network call itself fails (DNS, TLS, timeout, reset)."""

    pass


class HTTPStatusError(OpenAIClientError):
    """
    Raised when the server returns a status code outside ``200–299``.

    Attributes
    ----------
    status_code : int
        HTTP status returned by the server.
    body : bytes
        Raw response body (may be empty).
    """

    def __init__(self, message: str, status_code: int, body: bytes = b""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body or b""


class APIError(HTTPStatusError):
    """
    Non‑2xx response carrying a structured ``{"error": {...}}`` payload.

    The decoded ``message``, ``type``, ``param`` and ``code`` fields of the
    provider error object are exposed as attributes.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        body: bytes = b"",
        error_type: Optional[str] = None,
        param: Optional[str] = None,
        code: Optional[str] = None,
    ):
        super().__init__(message, status_code=status_code, body=body)
        self.message = message
        self.type = error_type
        self.param = param
        self.code = code


class AuthenticationError(APIError):
    """Raised when the server returns HTTP 401/403 – invalid or missing token."""

    pass


class RateLimitError(APIError):
    """Raised when the server returns HTTP 429 – request rate limit exceeded."""

    pass


class ValidationError(APIError):
    """Raised when the server returns HTTP 400 – malformed request payload."""

    pass


class ChatError(APIError):
    """Raised when a chat completion answers ``200`` with an embedded error."""

    pass


class BadStatusError(HTTPStatusError):
    """Non‑2xx response whose body is empty or not a provider error object."""

    pass


class DecodeError(OpenAIClientError):
    """
    Raised when a successful response cannot be decoded into the result shape.

    Attributes
    ----------
    body : bytes
        The raw body that failed to decode.
    """

    def __init__(self, message: str, body: bytes = b""):
        super().__init__(message)
        self.body = body


class StreamDecodeError(DecodeError):
    """A single streamed event frame could not be decoded (stream continues)."""

    pass


class StreamTransportError(TransportError):
    """The streaming connection failed before the end‑of‑stream sentinel."""

    pass


class StreamAlreadyConnectedError(OpenAIClientError):
    """Raised when ``connect`` is called on a decoder that is not idle."""

    pass


class NoArgsAndNoPayloadError(OpenAIClientError):
    """Raised when a client method receives neither a payload nor required arguments."""

    pass
