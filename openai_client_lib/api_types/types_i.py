from __future__ import annotations

from typing import Tuple
from abc import ABC, abstractmethod

from openai_client_lib.api_types.operations import Operation


class EndpointProviderI(ABC):
    """
    Abstract base class describing endpoints and HTTP methods for a backend.

    Subclasses must implement:
    - path(operation)
    - method(operation)

    Implementations hold no mutable state once constructed, so a single
    instance can be shared by every request of a client (and across threads).
    """

    @abstractmethod
    def path(self, operation: Operation) -> str:
        """
        Return the relative URL path for ``operation``.

        Returns
        -------
        str
            Endpoint path (e.g., "/v1/chat/completions").  It may contain
            ``{name}`` placeholders filled in by the request builder.
        """
        raise NotImplementedError

    @abstractmethod
    def method(self, operation: Operation) -> str:
        """
        Return the HTTP method used by ``operation``.

        Returns
        -------
        str
            HTTP method name (e.g., "POST").
        """
        raise NotImplementedError

    def resolve(self, operation: Operation) -> Tuple[str, str]:
        """
        Resolve ``operation`` to a ``(method, path)`` pair.
        """
        return self.method(operation), self.path(operation)
