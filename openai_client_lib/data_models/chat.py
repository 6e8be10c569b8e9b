"""
Request and response models for the ``/v1/chat/completions`` endpoint.

The request mirrors the JSON schema accepted by the provider.  Responses are
the generic :class:`OpenAIEnvelope` parametrised with a chat specific choice:
:class:`MessageResult` for a whole completion and :class:`StreamMessageResult`
for one streamed delta.
"""

import enum
from typing import Any, Dict, List, Optional, Union

from openai_client_lib.data_models.base_model import OpenAIBaseModel
from openai_client_lib.data_models.envelope import OpenAIEnvelope


class ChatRole(str, enum.Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"
    FUNCTION = "function"


class ChatMessage(OpenAIBaseModel):
    """
    A single conversation turn.

    Attributes
    ----------
    role : ChatRole
        Author of the message.
    content : Optional[str]
        Message text; ``None`` for assistant turns that only call tools.
    name : Optional[str]
        Optional participant name.
    """

    role: ChatRole
    content: Optional[str] = None
    name: Optional[str] = None

    @classmethod
    def system(cls, content: str) -> "ChatMessage":
        return cls(role=ChatRole.SYSTEM, content=content)

    @classmethod
    def user(cls, content: str) -> "ChatMessage":
        return cls(role=ChatRole.USER, content=content)

    @classmethod
    def assistant(cls, content: str) -> "ChatMessage":
        return cls(role=ChatRole.ASSISTANT, content=content)


class ChatDelta(OpenAIBaseModel):
    """Incremental part of a message delivered in one stream frame."""

    role: Optional[ChatRole] = None
    content: Optional[str] = None


class MessageResult(OpenAIBaseModel):
    index: Optional[int] = None
    message: Optional[ChatMessage] = None
    finish_reason: Optional[str] = None


class StreamMessageResult(OpenAIBaseModel):
    index: Optional[int] = None
    delta: Optional[ChatDelta] = None
    finish_reason: Optional[str] = None


class ChatConversation(OpenAIBaseModel):
    """
    Payload model for the chat completion endpoint.

    Attributes
    ----------
    messages : List[ChatMessage]
        Conversation history, oldest first.
    model : str
        Identifier of the model (see :class:`ChatModels`).
    max_tokens : Optional[int]
        Upper bound of generated tokens.
    stream : Optional[bool]
        Set by the client for streaming calls; leave unset otherwise.
    """

    messages: List[ChatMessage]
    model: str

    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    n: Optional[int] = None
    stream: Optional[bool] = None
    stop: Optional[Union[str, List[str]]] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None
    logit_bias: Optional[Dict[str, float]] = None
    user: Optional[str] = None
    response_format: Optional[Dict[str, Any]] = None
    seed: Optional[int] = None


ChatCompletion = OpenAIEnvelope[MessageResult]
ChatStreamChunk = OpenAIEnvelope[StreamMessageResult]
