"""
Authorization strategies.

An authorization strategy is any callable taking the request being built and
stamping credentials onto its headers.  It is supplied once when the client is
configured and invoked for every request, so it must be idempotent and must
not touch anything but the headers.
"""

from typing import Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from openai_client_lib.utils.request_builder import RequestSpec

AuthorizationStrategy = Callable[["RequestSpec"], None]


class BearerAuth:
    """
    Stamp ``Authorization: Bearer <token>`` (and optionally the organization).

    Parameters
    ----------
    token : str
        API key; if empty, no ``Authorization`` header is added.
    organization : Optional[str]
        Value of the ``OpenAI-Organization`` header.
    """

    def __init__(self, token: Optional[str], organization: Optional[str] = None):
        self.token = token
        self.organization = organization

    def __call__(self, request: "RequestSpec") -> None:
        if self.token:
            request.headers["Authorization"] = f"Bearer {self.token}"
        if self.organization:
            request.headers["OpenAI-Organization"] = self.organization

    def __repr__(self) -> str:
        # never leak the key into logs
        return f"BearerAuth(organization={self.organization!r})"


def no_auth(request: "RequestSpec") -> None:
    """Leave the request untouched (e.g. a proxy injects credentials itself)."""
    return None
