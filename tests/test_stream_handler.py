"""
Tests for the server-sent-event decoder.
"""

import json

import pytest
import requests

from openai_client_lib.api_types import Operation
from openai_client_lib.core.stream_handler import StreamDecoder, StreamState, iter_events
from openai_client_lib.data_models import ChatStreamChunk
from openai_client_lib.exceptions import (
    BadStatusError,
    StreamAlreadyConnectedError,
    StreamDecodeError,
    StreamTransportError,
    TransportError,
)

from conftest import FakeResponse, chunk_event, sse


class Recorder:
    """Collects callbacks in the order they fire."""

    def __init__(self):
        self.log = []

    def on_event(self, event):
        self.log.append(("event", event))

    def on_error(self, error):
        self.log.append(("error", error))

    def on_complete(self):
        self.log.append(("complete", None))

    @property
    def kinds(self):
        return [kind for kind, _ in self.log]

    @property
    def contents(self):
        return [
            value.choices[0].delta.content
            for kind, value in self.log
            if kind == "event"
        ]

    @property
    def errors(self):
        return [value for kind, value in self.log if kind == "error"]

    def decoder(self, **kwargs):
        return StreamDecoder(
            on_event=self.on_event,
            on_error=self.on_error,
            on_complete=self.on_complete,
            **kwargs,
        )


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def stream_request(builder):
    return builder.build(Operation.CHAT_CREATE, body={"stream": True})


THREE_EVENTS = sse(
    chunk_event("E1"), chunk_event("E2"), chunk_event("E3"), "data: [DONE]"
)


def run(recorder, transport, session, stream_request, chunks, **response_kwargs):
    session.respond(FakeResponse(chunks=chunks, **response_kwargs))
    decoder = recorder.decoder()
    decoder.connect(stream_request, transport, background=False)
    return decoder


class TestOrdering:
    def test_events_then_single_completion(
        self, recorder, transport, session, stream_request
    ):
        decoder = run(recorder, transport, session, stream_request, [THREE_EVENTS])

        assert recorder.kinds == ["event", "event", "event", "complete"]
        assert recorder.contents == ["E1", "E2", "E3"]
        assert isinstance(recorder.log[0][1], ChatStreamChunk)
        assert decoder.state is StreamState.COMPLETED

    def test_nothing_after_done(self, recorder, transport, session, stream_request):
        body = THREE_EVENTS + sse(chunk_event("late"))
        run(recorder, transport, session, stream_request, [body, sse("data: [DONE]")])
        assert recorder.kinds == ["event", "event", "event", "complete"]

    def test_malformed_frame_is_skipped(
        self, recorder, transport, session, stream_request
    ):
        body = sse(chunk_event("E1"), "data: {not json", chunk_event("E2"), "data: [DONE]")
        run(recorder, transport, session, stream_request, [body])

        assert recorder.kinds == ["event", "error", "event", "complete"]
        assert recorder.contents == ["E1", "E2"]
        error = recorder.errors[0]
        assert isinstance(error, StreamDecodeError)
        assert error.body == b"{not json"

    def test_non_object_frame_is_a_decode_error(
        self, recorder, transport, session, stream_request
    ):
        run(recorder, transport, session, stream_request, [sse("data: [1, 2]", "data: [DONE]")])
        assert recorder.kinds == ["error", "complete"]

    def test_other_lines_are_ignored(self, recorder, transport, session, stream_request):
        body = sse(": keep-alive", "event: message", "id: 7", chunk_event("E1"), "data: [DONE]")
        run(recorder, transport, session, stream_request, [body])
        assert recorder.kinds == ["event", "complete"]

    def test_crlf_line_endings(self, recorder, transport, session, stream_request):
        body = THREE_EVENTS.replace(b"\n", b"\r\n")
        run(recorder, transport, session, stream_request, [body])
        assert recorder.contents == ["E1", "E2", "E3"]
        assert recorder.kinds[-1] == "complete"


class TestChunkBoundaries:
    @pytest.mark.parametrize("offset", range(1, len(THREE_EVENTS), 7))
    def test_split_in_two(self, recorder, transport, session, stream_request, offset):
        chunks = [THREE_EVENTS[:offset], THREE_EVENTS[offset:]]
        run(recorder, transport, session, stream_request, chunks)
        assert recorder.contents == ["E1", "E2", "E3"]
        assert recorder.kinds.count("complete") == 1

    def test_byte_by_byte(self, recorder, transport, session, stream_request):
        chunks = [THREE_EVENTS[i : i + 1] for i in range(len(THREE_EVENTS))]
        run(recorder, transport, session, stream_request, chunks)
        assert recorder.contents == ["E1", "E2", "E3"]
        assert recorder.kinds.count("complete") == 1

    def test_multibyte_character_split(
        self, recorder, transport, session, stream_request
    ):
        body = sse(chunk_event("zażółć"), "data: [DONE]")
        cut = body.index("ż".encode("utf-8")) + 1
        run(recorder, transport, session, stream_request, [body[:cut], body[cut:]])
        assert recorder.contents == ["zażółć"]

    def test_documented_three_chunk_delivery(
        self, recorder, transport, session, stream_request
    ):
        first = json.dumps(chunk_event("Hel"))
        second = json.dumps(chunk_event("lo"))
        chunks = [
            f"data: {first}\n".encode(),
            b"da",
            f"ta: {second}\n\ndata: [DONE]\n".encode(),
        ]
        run(recorder, transport, session, stream_request, chunks)
        assert recorder.kinds == ["event", "event", "complete"]
        assert recorder.contents == ["Hel", "lo"]


class TestTermination:
    def test_clean_close_without_sentinel(
        self, recorder, transport, session, stream_request
    ):
        # last line has no trailing newline
        body = ("data: " + json.dumps(chunk_event("tail"))).encode()
        run(recorder, transport, session, stream_request, [body])
        assert recorder.kinds == ["event", "complete"]

    def test_transport_failure_mid_stream(
        self, recorder, transport, session, stream_request
    ):
        failure = requests.exceptions.ChunkedEncodingError("connection reset")
        run(
            recorder,
            transport,
            session,
            stream_request,
            [sse(chunk_event("E1"))],
            fail_with=failure,
        )

        assert recorder.kinds == ["event", "error"]
        error = recorder.errors[0]
        assert isinstance(error, StreamTransportError)
        assert error.__cause__ is failure

    def test_connection_refused(
        self, recorder, transport, session, stream_request, connection_error
    ):
        session.respond(connection_error)
        decoder = recorder.decoder()
        decoder.connect(stream_request, transport, background=False)

        assert recorder.kinds == ["error"]
        assert isinstance(recorder.errors[0], TransportError)
        assert decoder.state is StreamState.COMPLETED

    def test_error_status_on_open(self, recorder, transport, session, stream_request):
        session.respond(FakeResponse(status_code=500, content=b""))
        decoder = recorder.decoder()
        decoder.connect(stream_request, transport, background=False)
        assert isinstance(recorder.errors[0], BadStatusError)
        assert "complete" not in recorder.kinds

    def test_callback_exception_is_not_a_transport_error(
        self, recorder, transport, session, stream_request
    ):
        response = session.respond(FakeResponse(chunks=[THREE_EVENTS]))
        decoder = recorder.decoder()

        def broken_handler(event):
            raise KeyError("handler bug")

        decoder.on_event = broken_handler
        with pytest.raises(KeyError):
            decoder.connect(stream_request, transport, background=False)

        assert recorder.errors == []
        assert "complete" not in recorder.kinds
        assert decoder.state is StreamState.COMPLETED
        assert response.closed

    def test_response_is_closed(self, recorder, transport, session, stream_request):
        response = session.respond(FakeResponse(chunks=[THREE_EVENTS]))
        recorder.decoder().connect(stream_request, transport, background=False)
        assert response.closed


class TestLifecycle:
    def test_second_connect_is_rejected(
        self, recorder, transport, session, stream_request
    ):
        decoder = run(recorder, transport, session, stream_request, [THREE_EVENTS])
        with pytest.raises(StreamAlreadyConnectedError):
            decoder.connect(stream_request, transport)
        assert len(session.calls) == 1

    def test_disconnect_stops_callbacks(
        self, recorder, transport, session, stream_request
    ):
        response = session.respond(FakeResponse(chunks=[sse(chunk_event("E1")), THREE_EVENTS]))
        decoder = recorder.decoder()

        def stop_after_first(event):
            recorder.on_event(event)
            decoder.disconnect()

        decoder.on_event = stop_after_first
        decoder.connect(stream_request, transport, background=False)

        assert recorder.kinds == ["event"]
        assert decoder.state is StreamState.COMPLETED
        assert response.closed

    def test_background_reader(self, recorder, transport, session, stream_request):
        session.respond(FakeResponse(chunks=[THREE_EVENTS]))
        decoder = recorder.decoder()
        decoder.connect(stream_request, transport)

        assert decoder.join(timeout=5)
        assert recorder.contents == ["E1", "E2", "E3"]

    def test_feed_before_connect_is_ignored(self, recorder):
        decoder = recorder.decoder()
        decoder.feed(THREE_EVENTS)
        decoder.finish()
        assert recorder.log == []
        assert decoder.state is StreamState.IDLE


class TestIterEvents:
    def test_yields_until_done(self):
        chunks = [THREE_EVENTS[:40], THREE_EVENTS[40:], sse(chunk_event("late"))]
        events = list(iter_events(chunks))
        assert [e.choices[0].delta.content for e in events] == ["E1", "E2", "E3"]

    def test_skips_malformed(self):
        body = sse("data: oops", chunk_event("ok"))
        events = list(iter_events([body]))
        assert [e.choices[0].delta.content for e in events] == ["ok"]
