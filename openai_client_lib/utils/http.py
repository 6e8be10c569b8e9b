"""
Thin wrapper around ``requests`` that executes prepared requests and
classifies the outcome.

The :class:`HttpTransport` class is the only place in the library that talks
to the network.  It centralises:

* a pooled ``requests.Session`` (one per client, reused across calls),
* an explicit *no retry* policy via ``urllib3.Retry`` – every logical call
  produces exactly one network attempt,
* conversion of failures into the library exception hierarchy
  (:class:`TransportError`, :class:`APIError` and its subclasses,
  :class:`BadStatusError`).

:meth:`HttpTransport.execute` returns the raw body bytes of a successful
response, :meth:`HttpTransport.open_stream` returns the still‑open streaming
``requests.Response``.
"""

import json
import logging
from typing import Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from openai_client_lib.base.constants import (
    DEFAULT_POOL_MAXSIZE,
    DEFAULT_STREAM_TIMEOUT,
    DEFAULT_TIMEOUT,
)
from openai_client_lib.exceptions import (
    APIError,
    AuthenticationError,
    BadStatusError,
    RateLimitError,
    TransportError,
    ValidationError,
)
from openai_client_lib.utils.request_builder import RequestSpec


_STATUS_ERRORS = {
    400: ValidationError,
    401: AuthenticationError,
    403: AuthenticationError,
    429: RateLimitError,
}


def raise_for_status_error(status_code: int, body: bytes) -> None:
    """
    Translate a non‑2xx response into a library‑specific exception.

    A body of the form ``{"error": {"message": ..., "type": ..., ...}}`` is
    decoded and raised as :class:`APIError` (or the status specific subclass:
    :class:`ValidationError` for ``400``, :class:`AuthenticationError` for
    ``401``/``403``, :class:`RateLimitError` for ``429``).  Any other body –
    empty, HTML, plain text – is raised as :class:`BadStatusError`.

    Parameters
    ----------
    status_code : int
        HTTP status returned by the server.
    body : bytes
        Raw response body.

    Raises
    ------
    APIError
        When the body carries a structured provider error.
    BadStatusError
        For every other non‑2xx response.
    """
    if 200 <= status_code < 300:
        return

    body = body or b""
    error = _structured_error(body)
    if error is None:
        text = body.decode("utf-8", errors="replace")
        raise BadStatusError(
            f"HTTP {status_code}: {text[:500]}", status_code=status_code, body=body
        )

    error_cls = _STATUS_ERRORS.get(status_code, APIError)
    raise error_cls(
        str(error.get("message") or f"HTTP {status_code}"),
        status_code=status_code,
        body=body,
        error_type=error.get("type"),
        param=error.get("param"),
        code=None if error.get("code") is None else str(error.get("code")),
    )


def _structured_error(body: bytes) -> Optional[dict]:
    if not body:
        return None
    try:
        payload = json.loads(body)
    except ValueError:
        return None
    if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
        return payload["error"]
    return None


class HttpTransport:
    """
    Execute :class:`RequestSpec` objects over a shared ``requests.Session``.

    Parameters
    ----------
    timeout : float, optional
        Per‑request timeout in seconds (defaults to ``DEFAULT_TIMEOUT``).
    stream_timeout : float, optional
        Read timeout used for streaming connections.
    pool_maxsize : int, optional
        Size of the connection pool kept per host.
    session : requests.Session, optional
        Pre‑built session (mainly for tests); when given, no adapter is
        mounted on it.
    logger : Optional[logging.Logger]
        Logger instance; if omitted, a module‑level logger is created.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        stream_timeout: Optional[float] = None,
        pool_maxsize: Optional[int] = None,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.timeout = timeout if timeout is not None else DEFAULT_TIMEOUT
        self.stream_timeout = (
            stream_timeout if stream_timeout is not None else DEFAULT_STREAM_TIMEOUT
        )
        self.logger = logger or logging.getLogger(__name__)

        if session is not None:
            self.session = session
            return

        self.session = requests.Session()
        # one attempt per call, status codes are classified by the caller
        retry_strategy = Retry(total=0, read=False, raise_on_status=False)
        adapter = HTTPAdapter(
            max_retries=retry_strategy,
            pool_maxsize=pool_maxsize or DEFAULT_POOL_MAXSIZE,
        )
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)

    def execute(self, request: RequestSpec) -> bytes:
        """
        Perform a single request and return the response body.

        Parameters
        ----------
        request : RequestSpec
            Fully built request.

        Returns
        -------
        bytes
            Raw body of a ``2xx`` response (possibly empty).

        Raises
        ------
        TransportError
            When no response was received.
        APIError, BadStatusError
            When the response status is outside ``200–299``.
        """
        self.logger.debug("%s %s", request.method, request.url)
        try:
            resp = self.session.request(
                request.method,
                request.url,
                headers=request.headers,
                data=request.body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            self.logger.error("%s %s failed: %s", request.method, request.url, exc)
            raise TransportError(
                f"{request.method} {request.url} failed: {exc}"
            ) from exc

        body = resp.content or b""
        self.logger.debug(
            "%s %s -> %s (%d bytes)",
            request.method,
            request.url,
            resp.status_code,
            len(body),
        )
        raise_for_status_error(resp.status_code, body)
        return body

    def open_stream(self, request: RequestSpec) -> requests.Response:
        """
        Open a streaming connection.

        The returned response has been status‑checked; the caller owns it and
        must ``close()`` it once the stream is consumed.

        Raises
        ------
        TransportError
            When the connection could not be opened.
        APIError, BadStatusError
            When the server answered with a non‑2xx status.
        """
        self.logger.debug("%s %s (stream)", request.method, request.url)
        try:
            resp = self.session.request(
                request.method,
                request.url,
                headers=request.headers,
                data=request.body,
                timeout=(self.timeout, self.stream_timeout),
                stream=True,
            )
        except requests.RequestException as exc:
            self.logger.error("%s %s failed: %s", request.method, request.url, exc)
            raise TransportError(
                f"{request.method} {request.url} failed: {exc}"
            ) from exc

        if not 200 <= resp.status_code < 300:
            try:
                body = resp.content or b""
            except requests.RequestException:
                body = b""
            finally:
                resp.close()
            raise_for_status_error(resp.status_code, body)
        return resp

    def close(self) -> None:
        self.session.close()
