from openai_client_lib.core.stream_handler import (
    StreamDecoder,
    StreamState,
    iter_events,
)

__all__ = ["StreamDecoder", "StreamState", "iter_events"]
