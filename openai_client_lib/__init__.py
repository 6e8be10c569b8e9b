from openai_client_lib.client import OpenAIClient
from openai_client_lib.api_types import Operation, EndpointDispatcher
from openai_client_lib.core.stream_handler import StreamDecoder, StreamState
from openai_client_lib.prompts.history import ConversationHistory
from openai_client_lib.utils.auth import BearerAuth, no_auth
from openai_client_lib.exceptions import (
    OpenAIClientError,
    RequestConstructionError,
    TransportError,
    HTTPStatusError,
    APIError,
    AuthenticationError,
    RateLimitError,
    ValidationError,
    ChatError,
    BadStatusError,
    DecodeError,
    StreamDecodeError,
    StreamTransportError,
    StreamAlreadyConnectedError,
    NoArgsAndNoPayloadError,
)

__all__ = [
    "OpenAIClient",
    "Operation",
    "EndpointDispatcher",
    "StreamDecoder",
    "StreamState",
    "ConversationHistory",
    "BearerAuth",
    "no_auth",
    "OpenAIClientError",
    "RequestConstructionError",
    "TransportError",
    "HTTPStatusError",
    "APIError",
    "AuthenticationError",
    "RateLimitError",
    "ValidationError",
    "ChatError",
    "BadStatusError",
    "DecodeError",
    "StreamDecodeError",
    "StreamTransportError",
    "StreamAlreadyConnectedError",
    "NoArgsAndNoPayloadError",
]
