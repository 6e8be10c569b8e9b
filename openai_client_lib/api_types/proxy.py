from __future__ import annotations

from typing import Callable

from openai_client_lib.api_types.operations import Operation
from openai_client_lib.api_types.types_i import EndpointProviderI

PathFunction = Callable[[Operation], str]
MethodFunction = Callable[[Operation], str]


class ProxyEndpoints(EndpointProviderI):
    """
    Endpoint descriptor that delegates to caller supplied functions.

    Used to redirect the whole client through a proxy (or any other
    OpenAI‑compatible backend) without changing calling code.  The output of
    ``path_fn`` and ``method_fn`` is returned unchanged – a malformed value
    (e.g. an empty path) surfaces later as
    :class:`~openai_client_lib.exceptions.RequestConstructionError` when the
    request is built.

    Parameters
    ----------
    path_fn : Callable[[Operation], str]
        Returns the path (template) for an operation.
    method_fn : Callable[[Operation], str]
        Returns the HTTP verb for an operation.
    """

    def __init__(self, path_fn: PathFunction, method_fn: MethodFunction):
        self._path_fn = path_fn
        self._method_fn = method_fn

    def path(self, operation: Operation) -> str:
        return self._path_fn(operation)

    def method(self, operation: Operation) -> str:
        return self._method_fn(operation)
