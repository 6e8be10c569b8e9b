"""
openai_client_lib.api_types.dispatcher
======================================

A thin façade that maps a **string identifier of an endpoint source** (e.g.
``"openai"``) to the concrete implementation that knows how to turn a logical
:class:`~openai_client_lib.api_types.operations.Operation` into an HTTP verb
and a URL path.

The dispatcher is used by :class:`~openai_client_lib.client.OpenAIClient` to
stay agnostic of the concrete mapping.  Adding a new built‑in backend only
requires:

1. creating a class that implements the
   :class:`~openai_client_lib.api_types.types_i.EndpointProviderI` interface,
   and
2. registering that class in the ``_REGISTRY`` dictionary below.

Callers that route through their own proxy use :meth:`EndpointDispatcher.proxy`
instead of a registered source.
"""

from __future__ import annotations

from typing import Dict, Type

from openai_client_lib.api_types.types_i import EndpointProviderI
from openai_client_lib.api_types.openai import OpenAIEndpoints
from openai_client_lib.api_types.proxy import (
    ProxyEndpoints,
    PathFunction,
    MethodFunction,
)


class EndpointDispatcher:
    """
    Dispatcher for concrete ``EndpointProviderI`` implementations.

    The class does **not** store any state – it only contains a registry that
    maps a normalized source name to the class implementing the
    :class:`~openai_client_lib.api_types.types_i.EndpointProviderI` protocol.

    Example
    -------
    >>> EndpointDispatcher.for_source("openai").resolve(Operation.CHAT_CREATE)
    ('POST', '/v1/chat/completions')
    """

    _REGISTRY: Dict[str, Type[EndpointProviderI]] = {
        "openai": OpenAIEndpoints,
    }

    @classmethod
    def for_source(cls, source: str) -> EndpointProviderI:
        """
        Resolve ``source`` to a concrete ``EndpointProviderI`` instance.

        Parameters
        ----------
        source : str
            Identifier of the built‑in endpoint table.  The lookup is
            case‑insensitive and ignores surrounding whitespace.

        Returns
        -------
        EndpointProviderI
            An **instance** (not the class) of the matching implementation.

        Raises
        ------
        ValueError
            If ``source`` is ``None``, empty, or not present in ``_REGISTRY``.
            The error message lists the supported identifiers.
        """
        key = (source or "").strip().lower()
        impl = cls._REGISTRY.get(key)
        if impl is None:
            supported = ", ".join(sorted(cls._REGISTRY.keys()))
            raise ValueError(
                f"Unsupported endpoint source '{source}'. Supported: {supported}"
            )
        return impl()

    @classmethod
    def proxy(cls, path_fn: PathFunction, method_fn: MethodFunction) -> ProxyEndpoints:
        """
        Build a proxy mapping from two caller‑supplied functions.
        """
        return ProxyEndpoints(path_fn=path_fn, method_fn=method_fn)
