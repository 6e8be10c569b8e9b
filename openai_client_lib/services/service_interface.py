import abc
import logging
from typing import Any, Mapping, Optional, Type, TypeVar

from pydantic import ValidationError as PydanticValidationError

from openai_client_lib.api_types.operations import Operation
from openai_client_lib.data_models.errors import ChatErrorEnvelope
from openai_client_lib.exceptions import ChatError, DecodeError
from openai_client_lib.utils.http import HttpTransport
from openai_client_lib.utils.multipart import MultipartForm
from openai_client_lib.utils.request_builder import RequestBuilder

R = TypeVar("R")


class BaseServiceInterface(abc.ABC):
    """
    Abstract base class for the per‑family service wrappers.

    Sub‑classes expose one method per operation of their resource family and
    delegate to :meth:`request`, which builds the request, executes it and
    decodes the body into the result shape declared for the operation.
    """

    def __init__(
        self,
        builder: RequestBuilder,
        transport: HttpTransport,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialise the service wrapper.

        Parameters
        ----------
        builder : RequestBuilder
            Turns operations into fully built requests.
        transport : HttpTransport
            Executes the requests.
        logger : logging.Logger, optional
            Logger instance used for debugging and error reporting.
        """
        self.builder = builder
        self.transport = transport
        self.logger = logger or logging.getLogger(__name__)

    def request(
        self,
        operation: Operation,
        result_cls: Type[R],
        body: Any = None,
        query: Optional[Mapping[str, Any]] = None,
        path_params: Optional[Mapping[str, Any]] = None,
        form: Optional[MultipartForm] = None,
        check_chat_error: bool = False,
    ) -> R:
        """
        Perform one operation and decode its response.

        Parameters
        ----------
        operation : Operation
            Logical operation to call.
        result_cls : type
            Pydantic model of the successful response, ``bytes`` for a raw
            body or ``str`` for a plain text body.
        check_chat_error : bool
            Look for an embedded ``{"error": {...}}`` object before decoding
            the success shape (chat completions may answer ``200`` with one).

        Returns
        -------
        R
            The decoded result.

        Raises
        ------
        RequestConstructionError, TransportError, HTTPStatusError
            Propagated from the builder and the transport.
        ChatError
            When a ``200`` body carries an error object.
        DecodeError
            When the body does not match ``result_cls``.
        """
        request_spec = self.builder.build(
            operation,
            body=body,
            query=query,
            path_params=path_params,
            form=form,
        )
        raw = self.transport.execute(request_spec)
        return self.decode(raw, result_cls, check_chat_error=check_chat_error)

    def decode(self, raw: bytes, result_cls: Type[R], check_chat_error: bool = False):
        if result_cls is bytes:
            return raw
        if result_cls is str:
            return raw.decode("utf-8", errors="replace")

        if check_chat_error:
            self._raise_embedded_error(raw)

        try:
            return result_cls.model_validate_json(raw)
        except PydanticValidationError as exc:
            self.logger.error(
                "Cannot decode response as %s: %s", result_cls.__name__, exc
            )
            raise DecodeError(
                f"Invalid response format for {result_cls.__name__}: {exc}",
                body=raw,
            ) from exc

    @staticmethod
    def _raise_embedded_error(raw: bytes) -> None:
        try:
            envelope = ChatErrorEnvelope.model_validate_json(raw)
        except PydanticValidationError:
            # not an error object, decode as a regular result
            return
        if envelope.error is None:
            return

        error = envelope.error
        raise ChatError(
            error.message or "Chat completion returned an error",
            status_code=200,
            body=raw,
            error_type=error.type,
            param=error.param,
            code=None if error.code is None else str(error.code),
        )


def list_query(
    limit: Optional[int] = None,
    order: Optional[str] = None,
    after: Optional[str] = None,
    before: Optional[str] = None,
) -> dict:
    """Cursor pagination parameters shared by the list endpoints."""
    return {"limit": limit, "order": order, "after": after, "before": before}
