"""
Incremental decoder for server‑sent‑event token streams.

A streaming chat completion arrives as newline separated lines::

    data: {"id": "...", "choices": [{"delta": {"content": "Hel"}}]}
    data: {"id": "...", "choices": [{"delta": {"content": "lo"}}]}
    data: [DONE]

Network reads do not respect line (or even UTF‑8 character) boundaries, so
:class:`StreamDecoder` keeps both a byte‑level and a line‑level buffer and only
decodes complete lines.  Each decoded frame is handed to ``on_event``; a frame
that cannot be decoded is reported through ``on_error`` and the stream goes
on.  ``data: [DONE]`` or a clean end of the connection fires ``on_complete``
exactly once, a dropped connection fires ``on_error`` with a
:class:`~openai_client_lib.exceptions.StreamTransportError` instead.
"""

import codecs
import enum
import logging
import threading
from typing import Callable, Iterable, Iterator, List, Optional, Type

import requests
from pydantic import BaseModel, ValidationError as PydanticValidationError

from openai_client_lib.base.constants import (
    STREAM_DATA_PREFIX,
    STREAM_DONE_SENTINEL,
)
from openai_client_lib.data_models.chat import ChatStreamChunk
from openai_client_lib.exceptions import (
    OpenAIClientError,
    StreamAlreadyConnectedError,
    StreamDecodeError,
    StreamTransportError,
)

EventCallback = Callable[[BaseModel], None]
ErrorCallback = Callable[[OpenAIClientError], None]
CompleteCallback = Callable[[], None]


class StreamState(str, enum.Enum):
    IDLE = "idle"
    CONNECTED = "connected"
    COMPLETED = "completed"


class StreamDecoder:
    """
    One‑shot decoder bound to a single streaming connection.

    The decoder is stateful and must not be shared between concurrent
    streams; create a fresh instance for every call.

    Parameters
    ----------
    on_event : Callable[[BaseModel], None], optional
        Called with every decoded frame, in stream order.
    on_error : Callable[[OpenAIClientError], None], optional
        Called with :class:`StreamDecodeError` for a malformed frame (the
        stream continues) or with a transport/status error that ends it.
    on_complete : Callable[[], None], optional
        Called once on normal completion.
    event_model : Type[BaseModel]
        Pydantic model each ``data:`` payload is validated against.
    logger : Optional[logging.Logger]
        Logger instance; if omitted, a module‑level logger is created.
    """

    def __init__(
        self,
        on_event: Optional[EventCallback] = None,
        on_error: Optional[ErrorCallback] = None,
        on_complete: Optional[CompleteCallback] = None,
        event_model: Type[BaseModel] = ChatStreamChunk,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.on_event = on_event
        self.on_error = on_error
        self.on_complete = on_complete
        self.event_model = event_model
        self.logger = logger or logging.getLogger(__name__)

        self._state = StreamState.IDLE
        self._lock = threading.Lock()
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._buffer = ""
        self._response: Optional[requests.Response] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def state(self) -> StreamState:
        return self._state

    # --------------------------------------------------------------------- #
    # Connection lifecycle
    # --------------------------------------------------------------------- #
    def connect(self, request, transport, background: bool = True) -> None:
        """
        Open the streaming connection and start consuming it.

        Parameters
        ----------
        request : RequestSpec
            Streaming request built by the request builder.
        transport : HttpTransport
            Transport used to open the connection (``open_stream``).
        background : bool
            When ``True`` the body is read on a daemon thread and this method
            returns immediately; otherwise it blocks until the stream ends.

        Raises
        ------
        StreamAlreadyConnectedError
            If this decoder has already been connected.
        """
        self._begin()

        try:
            response = transport.open_stream(request)
        except OpenAIClientError as exc:
            self.logger.error("Cannot open stream %s: %s", request.url, exc)
            self._fail(exc)
            return

        with self._lock:
            if self._state is not StreamState.CONNECTED:
                # disconnected while the connection was being opened
                response.close()
                return
            self._response = response

        if not background:
            self._pump(response)
            return

        self._thread = threading.Thread(
            target=self._pump, args=(response,), daemon=True
        )
        self._thread.start()

    def join(self, timeout: Optional[float] = None) -> bool:
        """
        Wait for the background reader.

        Returns
        -------
        bool
            ``True`` if the stream has reached :attr:`StreamState.COMPLETED`.
        """
        if self._thread is not None:
            self._thread.join(timeout)
        return self._state is StreamState.COMPLETED

    def disconnect(self) -> None:
        """Cancel the stream; no callback fires afterwards."""
        with self._lock:
            if self._state is StreamState.COMPLETED:
                return
            self._state = StreamState.COMPLETED
            response, self._response = self._response, None
        self.logger.debug("Stream disconnected by caller")
        if response is not None:
            response.close()

    # --------------------------------------------------------------------- #
    # Byte level input
    # --------------------------------------------------------------------- #
    def feed(self, chunk: bytes) -> None:
        """
        Consume one raw chunk of the response body.

        Complete lines are decoded immediately, a trailing partial line (or a
        partial UTF‑8 sequence) is kept until the next chunk.
        """
        if self._state is not StreamState.CONNECTED or not chunk:
            return

        self._buffer += self._decoder.decode(chunk)
        while "\n" in self._buffer:
            line, self._buffer = self._buffer.split("\n", 1)
            self._handle_line(line)
            if self._state is not StreamState.CONNECTED:
                self._buffer = ""
                return

    def finish(self, error: Optional[BaseException] = None) -> None:
        """
        Signal the end of the byte stream.

        Parameters
        ----------
        error : Optional[BaseException]
            The transport failure that ended the stream; ``None`` for a clean
            close of the connection.
        """
        if self._state is not StreamState.CONNECTED:
            return

        if error is not None:
            if not isinstance(error, StreamTransportError):
                stream_error = StreamTransportError(
                    f"Stream interrupted before {STREAM_DONE_SENTINEL}: {error}"
                )
                stream_error.__cause__ = error
                error = stream_error
            self._fail(error)
            return

        self._buffer += self._decoder.decode(b"", final=True)
        if self._buffer:
            line, self._buffer = self._buffer, ""
            self._handle_line(line)
        self._complete()

    # --------------------------------------------------------------------- #
    # Internals
    # --------------------------------------------------------------------- #
    def _begin(self) -> None:
        with self._lock:
            if self._state is not StreamState.IDLE:
                raise StreamAlreadyConnectedError(
                    f"Stream decoder is already {self._state.value}"
                )
            self._state = StreamState.CONNECTED

    def _pump(self, response: requests.Response) -> None:
        chunks = response.iter_content(chunk_size=None)
        try:
            while self._state is StreamState.CONNECTED:
                try:
                    chunk = next(chunks)
                except StopIteration:
                    self.finish()
                    break
                except (requests.RequestException, OSError) as exc:
                    self.logger.warning("Stream connection failed: %s", exc)
                    self.finish(exc)
                    break
                self.feed(chunk)
        except Exception:
            # raised by a caller callback; end the stream without more callbacks
            with self._lock:
                self._state = StreamState.COMPLETED
            raise
        finally:
            response.close()
            with self._lock:
                self._response = None

    def _handle_line(self, line: str) -> None:
        line = line.rstrip("\r")
        if not line.startswith(STREAM_DATA_PREFIX):
            # blank separators, comments and other SSE fields
            return

        payload = line[len(STREAM_DATA_PREFIX) :].strip()
        if not payload:
            return
        if payload == STREAM_DONE_SENTINEL:
            self._complete()
            return

        try:
            event = self.event_model.model_validate_json(payload)
        except PydanticValidationError as exc:
            self.logger.warning("Skipping malformed stream frame: %s", payload[:200])
            self._emit_error(
                StreamDecodeError(
                    f"Cannot decode stream frame as {self.event_model.__name__}: {exc}",
                    body=payload.encode("utf-8"),
                )
            )
            return

        if self.on_event is not None and self._state is StreamState.CONNECTED:
            self.on_event(event)

    def _complete(self) -> None:
        if not self._finalize():
            return
        self.logger.debug("Stream completed")
        if self.on_complete is not None:
            self.on_complete()

    def _fail(self, error: OpenAIClientError) -> None:
        if not self._finalize():
            return
        if self.on_error is not None:
            self.on_error(error)

    def _emit_error(self, error: OpenAIClientError) -> None:
        if self.on_error is not None and self._state is StreamState.CONNECTED:
            self.on_error(error)

    def _finalize(self) -> bool:
        with self._lock:
            if self._state is not StreamState.CONNECTED:
                return False
            self._state = StreamState.COMPLETED
            return True


def iter_events(
    chunks: Iterable[bytes],
    event_model: Type[BaseModel] = ChatStreamChunk,
    logger: Optional[logging.Logger] = None,
) -> Iterator[BaseModel]:
    """
    Pull‑style decoding of an already opened stream.

    Yields decoded frames in order and stops at ``data: [DONE]``.  Malformed
    frames are logged and skipped.

    Parameters
    ----------
    chunks : Iterable[bytes]
        Raw body chunks, e.g. ``response.iter_content(chunk_size=None)``.
    """
    pending: List[BaseModel] = []
    decoder = StreamDecoder(
        on_event=pending.append,
        event_model=event_model,
        logger=logger,
    )
    decoder._begin()

    for chunk in chunks:
        decoder.feed(chunk)
        while pending:
            yield pending.pop(0)
        if decoder.state is StreamState.COMPLETED:
            return

    decoder.finish()
    while pending:
        yield pending.pop(0)
