"""
Service layer for ``/v1/chat/completions``.

Non‑streaming calls go through :meth:`BaseServiceInterface.request` with the
embedded error check enabled.  Streaming calls hand the built request to a
fresh :class:`~openai_client_lib.core.stream_handler.StreamDecoder`.
"""

from typing import Optional

from openai_client_lib.api_types.operations import Operation
from openai_client_lib.core.stream_handler import (
    CompleteCallback,
    ErrorCallback,
    EventCallback,
    StreamDecoder,
)
from openai_client_lib.data_models.chat import (
    ChatCompletion,
    ChatConversation,
    ChatStreamChunk,
)
from openai_client_lib.services.service_interface import BaseServiceInterface

STREAM_HEADERS = {"Accept": "text/event-stream"}


class ChatService(BaseServiceInterface):
    def create(self, conversation: ChatConversation) -> ChatCompletion:
        """
        Send a chat completion request and wait for the whole answer.

        Raises
        ------
        ChatError
            When the provider answers ``200`` with an error object.
        """
        if conversation.stream:
            conversation = conversation.model_copy(update={"stream": None})
        return self.request(
            Operation.CHAT_CREATE,
            ChatCompletion,
            body=conversation,
            check_chat_error=True,
        )

    def stream(
        self,
        conversation: ChatConversation,
        on_event: Optional[EventCallback] = None,
        on_error: Optional[ErrorCallback] = None,
        on_complete: Optional[CompleteCallback] = None,
        background: bool = True,
    ) -> StreamDecoder:
        """
        Start a streaming chat completion.

        Each decoded :class:`ChatStreamChunk` is passed to ``on_event`` in
        order; ``on_complete`` fires once after ``data: [DONE]``.  Connection
        and status failures are reported through ``on_error``.

        Parameters
        ----------
        conversation : ChatConversation
            Request body; ``stream`` is forced to ``True``.
        background : bool
            Consume the stream on a daemon thread (default) or block until it
            ends.

        Returns
        -------
        StreamDecoder
            The decoder bound to this call; use ``disconnect()`` to cancel or
            ``join()`` to wait.

        Raises
        ------
        RequestConstructionError
            When the request cannot be built; nothing is sent in that case.
        """
        request_spec = self.builder.build(
            Operation.CHAT_CREATE,
            body=conversation.model_copy(update={"stream": True}),
            headers=STREAM_HEADERS,
        )
        decoder = StreamDecoder(
            on_event=on_event,
            on_error=on_error,
            on_complete=on_complete,
            event_model=ChatStreamChunk,
            logger=self.logger,
        )
        decoder.connect(request_spec, self.transport, background=background)
        return decoder
