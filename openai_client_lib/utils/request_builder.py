"""
Construction of fully formed HTTP requests.

:class:`RequestBuilder` turns a logical operation plus its arguments into a
:class:`RequestSpec`:

* the ``(method, path)`` pair is resolved through the configured endpoint
  provider (direct table or proxy functions),
* ``{placeholders}`` in the path are filled from ``path_params``,
* the path is joined with the base URL and the query string is appended,
* the body is serialised as JSON or as a multipart form,
* the authorization strategy stamps credentials on the finished request.

Every failure is reported as
:class:`~openai_client_lib.exceptions.RequestConstructionError` – a broken
request is never handed to the transport.
"""

import json
import logging
import string
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote, urlencode, urlsplit

from pydantic import BaseModel

from openai_client_lib.api_types.operations import Operation
from openai_client_lib.api_types.types_i import EndpointProviderI
from openai_client_lib.base.constants import ASSISTANTS_BETA_HEADER
from openai_client_lib.exceptions import RequestConstructionError
from openai_client_lib.utils.auth import AuthorizationStrategy, no_auth
from openai_client_lib.utils.multipart import MultipartForm

_ALLOWED_SCHEMES = ("http", "https")


@dataclass
class RequestSpec:
    """
    A single prepared request.

    Created per call and discarded once the transport returns.
    """

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None
    operation: Optional[Operation] = None


class RequestBuilder:
    """
    Build :class:`RequestSpec` objects for a fixed client configuration.

    Parameters
    ----------
    endpoints : EndpointProviderI
        Source of ``(method, path)`` for each operation.
    base_url : str
        Base URL of the provider or proxy, e.g. ``"https://api.openai.com"``.
        A path prefix (``"https://proxy.local/openai"``) is preserved.
    auth : AuthorizationStrategy, optional
        Callable stamping credentials onto each request.
    logger : Optional[logging.Logger]
        Logger instance; if omitted, a module‑level logger is created.
    """

    def __init__(
        self,
        endpoints: EndpointProviderI,
        base_url: str,
        auth: Optional[AuthorizationStrategy] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.endpoints = endpoints
        self.base_url = base_url
        self.auth = auth or no_auth
        self.logger = logger or logging.getLogger(__name__)

    def build(
        self,
        operation: Operation,
        body: Any = None,
        query: Optional[Mapping[str, Any]] = None,
        path_params: Optional[Mapping[str, Any]] = None,
        form: Optional[MultipartForm] = None,
        headers: Optional[Mapping[str, str]] = None,
        base_url: Optional[str] = None,
    ) -> RequestSpec:
        """
        Build the request for ``operation``.

        Parameters
        ----------
        operation : Operation
            Logical operation to call.
        body : Any
            JSON body – a pydantic model, a ``dict`` or a ``list``.  Ignored
            when ``form`` is given.
        query : Optional[Mapping[str, Any]]
            Query parameters; ``None`` values are dropped.
        path_params : Optional[Mapping[str, Any]]
            Values for ``{placeholders}`` in the resolved path.
        form : Optional[MultipartForm]
            Multipart body; required for upload operations and rejected
            for every other operation.
        headers : Optional[Mapping[str, str]]
            Extra headers (e.g. ``Accept`` for streaming).
        base_url : Optional[str]
            Overrides the configured base URL for this call.

        Returns
        -------
        RequestSpec
            The prepared request with credentials applied.

        Raises
        ------
        RequestConstructionError
            When the URL cannot be formed, the body cannot be serialised or
            the presence of ``form`` does not match ``operation.is_multipart``.
        """
        if operation.is_multipart != (form is not None):
            kind = "requires" if operation.is_multipart else "does not accept"
            raise RequestConstructionError(
                f"Operation {operation.value} {kind} a multipart form"
            )

        method, path = self._resolve(operation)
        url = self._full_url(
            base_url or self.base_url, self._fill_path(path, path_params), query
        )

        request = RequestSpec(method=method, url=url, operation=operation)
        if form is not None:
            request.body, request.headers["Content-Type"] = form.encode()
        elif body is not None:
            request.body = self._encode_json(body)
            request.headers["Content-Type"] = "application/json"

        if operation.is_assistants_beta:
            request.headers[ASSISTANTS_BETA_HEADER[0]] = ASSISTANTS_BETA_HEADER[1]
        if headers:
            request.headers.update(headers)

        self.auth(request)
        self.logger.debug("Built %s %s (%s)", method, url, operation.value)
        return request

    # ------------------------------------------------------------------ #
    def _resolve(self, operation: Operation):
        try:
            method, path = self.endpoints.resolve(operation)
        except Exception as exc:
            raise RequestConstructionError(
                f"Cannot resolve endpoint for {operation.value}: {exc}"
            ) from exc

        if not isinstance(method, str) or not method.strip():
            raise RequestConstructionError(
                f"Empty HTTP method resolved for {operation.value}"
            )
        if not isinstance(path, str) or not path.strip():
            raise RequestConstructionError(f"Empty path resolved for {operation.value}")
        return method.strip().upper(), path.strip()

    @staticmethod
    def _fill_path(path: str, path_params: Optional[Mapping[str, Any]]) -> str:
        params = path_params or {}
        try:
            names = [
                name for _, name, _, _ in string.Formatter().parse(path) if name
            ]
        except ValueError as exc:
            raise RequestConstructionError(f"Malformed path '{path}': {exc}") from exc

        values = {}
        for name in names:
            value = params.get(name)
            if value is None or str(value) == "":
                raise RequestConstructionError(
                    f"Missing path parameter '{name}' for '{path}'"
                )
            values[name] = quote(str(value), safe="")
        return path.format(**values) if names else path

    @staticmethod
    def _full_url(
        base_url: str, path: str, query: Optional[Mapping[str, Any]]
    ) -> str:
        try:
            parts = urlsplit(base_url or "")
            # raises on a non-numeric or out of range port
            parts.port
        except ValueError as exc:
            raise RequestConstructionError(
                f"Invalid base url '{base_url}': {exc}"
            ) from exc
        if parts.scheme not in _ALLOWED_SCHEMES or not parts.hostname:
            raise RequestConstructionError(f"Invalid base url '{base_url}'")

        url = base_url.rstrip("/") + "/" + path.lstrip("/")
        if query:
            pairs = [
                (key, _query_value(value))
                for key, value in query.items()
                if value is not None
            ]
            if pairs:
                url += "?" + urlencode(pairs)
        return url

    @staticmethod
    def _encode_json(body: Any) -> bytes:
        if isinstance(body, BaseModel):
            body = body.model_dump(mode="json", exclude_none=True)
        try:
            return json.dumps(body, ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise RequestConstructionError(
                f"Request body is not JSON serialisable: {exc}"
            ) from exc


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if hasattr(value, "value"):
        # enums
        return str(value.value)
    return str(value)
