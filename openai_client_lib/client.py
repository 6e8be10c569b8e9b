import logging
import os
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Dict, List, Optional, Type, Union

import requests
from pydantic import BaseModel, ValidationError as PydanticValidationError

from openai_client_lib.api_types.dispatcher import EndpointDispatcher
from openai_client_lib.api_types.proxy import MethodFunction, PathFunction
from openai_client_lib.api_types.types_i import EndpointProviderI
from openai_client_lib.base.constants import (
    API_KEY_ENV,
    DEFAULT_BASE_URL,
    DEFAULT_MAX_WORKERS,
    ORGANIZATION_ENV,
)
from openai_client_lib.core.stream_handler import (
    CompleteCallback,
    ErrorCallback,
    EventCallback,
    StreamDecoder,
)
from openai_client_lib.data_models.audio import (
    AudioResponseFormat,
    SpeechRequest,
    TranscriptionResponseFormat,
    Voice,
)
from openai_client_lib.data_models.chat import (
    ChatCompletion,
    ChatConversation,
    ChatMessage,
)
from openai_client_lib.data_models.completions import (
    Completion,
    CompletionRequest,
    EditRequest,
)
from openai_client_lib.data_models.constants import (
    DEFAULT_AUDIO_MODEL,
    DEFAULT_CHAT_MODEL,
    DEFAULT_COMPLETION_MODEL,
    DEFAULT_EDIT_MODEL,
    DEFAULT_EMBEDDING_MODEL,
    DEFAULT_MODERATION_MODEL,
    DEFAULT_TTS_MODEL,
)
from openai_client_lib.data_models.embeddings import EmbeddingRequest, Embeddings
from openai_client_lib.data_models.images import (
    ImageGeneration,
    ImageSize,
    ImagesResponse,
)
from openai_client_lib.data_models.moderation import Moderation, ModerationRequest
from openai_client_lib.exceptions import (
    NoArgsAndNoPayloadError,
    RequestConstructionError,
)
from openai_client_lib.prompts.history import ConversationHistory
from openai_client_lib.services import (
    AssistantsService,
    AudioService,
    ChatService,
    CompletionsService,
    EmbeddingsService,
    FilesService,
    FineTuningService,
    ImagesService,
    MessagesService,
    ModelsService,
    ModerationsService,
    RunsService,
    ThreadsService,
)
from openai_client_lib.utils.auth import AuthorizationStrategy, BearerAuth
from openai_client_lib.utils.http import HttpTransport
from openai_client_lib.utils.logger import prepare_logger
from openai_client_lib.utils.request_builder import RequestBuilder

Messages = List[Union[ChatMessage, Dict[str, Any]]]


def _payload_model(model_cls: Type[BaseModel], payload, **fields) -> BaseModel:
    """
    Turn ``payload`` (model instance or dict) or explicit ``fields`` into a
    request model.

    A field given as ``None`` counts as missing; when the payload is absent
    and any required field is missing, :class:`NoArgsAndNoPayloadError` is
    raised.
    """
    try:
        if isinstance(payload, model_cls):
            return payload
        if isinstance(payload, dict):
            return model_cls.model_validate(payload)
        if payload is not None:
            raise RequestConstructionError(
                f"Payload must be {model_cls.__name__} or dict, "
                f"got {type(payload).__name__}"
            )

        required = [
            name
            for name, info in model_cls.model_fields.items()
            if info.is_required()
        ]
        if any(fields.get(name) is None for name in required):
            raise NoArgsAndNoPayloadError("No payload and no arguments were passed!")
        return model_cls(**{k: v for k, v in fields.items() if v is not None})
    except PydanticValidationError as exc:
        raise RequestConstructionError(
            f"Invalid {model_cls.__name__} payload: {exc}"
        ) from exc


class OpenAIClient:
    """
    Entry point of the library.

    The client owns the long‑lived configuration (endpoint mapping,
    authorization, HTTP session) and exposes every operation twice: grouped
    per resource family (``client.chat.create(...)``, ``client.files.list()``)
    and as flat convenience methods for the most common calls
    (``client.send_chat(...)``).

    Parameters
    ----------
    api_key : Optional[str]
        Provider API key; defaults to the ``OPENAI_API_KEY`` variable.
    base_url : Optional[str]
        Provider or proxy base URL; defaults to ``OPENAI_CLIENT_BASE_URL``.
    endpoints : Optional[EndpointProviderI]
        Operation -> ``(method, path)`` mapping.  Defaults to the built‑in
        OpenAI table; pass ``EndpointDispatcher.proxy(...)`` for proxy mode.
    auth : Optional[AuthorizationStrategy]
        Replaces the default ``BearerAuth(api_key, organization)``.
    timeout : Optional[float]
        Per‑request timeout in seconds.
    organization : Optional[str]
        ``OpenAI-Organization`` header; defaults to ``OPENAI_ORGANIZATION``.
    max_workers : Optional[int]
        Size of the pool used by :meth:`submit`.
    logger : Optional[logging.Logger]
        Logger shared by every component of this client.
    session : Optional[requests.Session]
        Pre‑built HTTP session (mainly for tests).
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        endpoints: Optional[EndpointProviderI] = None,
        auth: Optional[AuthorizationStrategy] = None,
        timeout: Optional[float] = None,
        organization: Optional[str] = None,
        max_workers: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key if api_key is not None else os.environ.get(API_KEY_ENV)
        self.organization = organization or os.environ.get(ORGANIZATION_ENV)
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.logger = logger or prepare_logger(__name__)

        self.endpoints = endpoints or EndpointDispatcher.for_source("openai")
        self.auth = auth or BearerAuth(self.api_key, self.organization)
        self.builder = RequestBuilder(
            self.endpoints, self.base_url, self.auth, logger=self.logger
        )
        self.transport = HttpTransport(
            timeout=timeout, session=session, logger=self.logger
        )

        args = (self.builder, self.transport, self.logger)
        self.completions = CompletionsService(*args)
        self.chat = ChatService(*args)
        self.embeddings = EmbeddingsService(*args)
        self.moderations = ModerationsService(*args)
        self.images = ImagesService(*args)
        self.audio = AudioService(*args)
        self.files = FilesService(*args)
        self.fine_tuning = FineTuningService(*args)
        self.models = ModelsService(*args)
        self.assistants = AssistantsService(*args)
        self.threads = ThreadsService(*args)
        self.messages = MessagesService(*args)
        self.runs = RunsService(*args)

        self._max_workers = max_workers or DEFAULT_MAX_WORKERS
        self._executor: Optional[ThreadPoolExecutor] = None
        self._executor_lock = threading.Lock()

    @classmethod
    def with_proxy(
        cls,
        base_url: str,
        path_fn: PathFunction,
        method_fn: MethodFunction,
        **kwargs,
    ) -> "OpenAIClient":
        """
        Build a client that routes every operation through a proxy.

        ``path_fn`` and ``method_fn`` must be total over
        :class:`~openai_client_lib.api_types.operations.Operation`.
        """
        return cls(
            base_url=base_url,
            endpoints=EndpointDispatcher.proxy(path_fn, method_fn),
            **kwargs,
        )

    # ------------------------------------------------------------------ #
    def send_completion(
        self,
        payload: Optional[Union[CompletionRequest, Dict[str, Any]]] = None,
        prompt: Optional[str] = None,
        model: str = DEFAULT_COMPLETION_MODEL,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> Completion:
        request = _payload_model(
            CompletionRequest,
            payload,
            prompt=prompt,
            model=getattr(model, "value", model),
            max_tokens=max_tokens,
            temperature=temperature,
        )
        return self.completions.create(request)

    # ------------------------------------------------------------------ #
    def send_edits(
        self,
        payload: Optional[Union[EditRequest, Dict[str, Any]]] = None,
        instruction: Optional[str] = None,
        input: str = "",
        model: str = DEFAULT_EDIT_MODEL,
    ) -> Completion:
        request = _payload_model(
            EditRequest,
            payload,
            instruction=instruction,
            input=input,
            model=getattr(model, "value", model),
        )
        return self.completions.edit(request)

    # ------------------------------------------------------------------ #
    def send_chat(
        self,
        payload: Optional[Union[ChatConversation, Dict[str, Any]]] = None,
        messages: Optional[Messages] = None,
        model: str = DEFAULT_CHAT_MODEL,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        user: Optional[str] = None,
    ) -> ChatCompletion:
        conversation = _payload_model(
            ChatConversation,
            payload,
            messages=messages,
            model=getattr(model, "value", model),
            max_tokens=max_tokens,
            temperature=temperature,
            user=user,
        )
        return self.chat.create(conversation)

    # ------------------------------------------------------------------ #
    def send_streaming_chat(
        self,
        payload: Optional[Union[ChatConversation, Dict[str, Any]]] = None,
        messages: Optional[Messages] = None,
        model: str = DEFAULT_CHAT_MODEL,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        on_event: Optional[EventCallback] = None,
        on_error: Optional[ErrorCallback] = None,
        on_complete: Optional[CompleteCallback] = None,
        background: bool = True,
    ) -> StreamDecoder:
        conversation = _payload_model(
            ChatConversation,
            payload,
            messages=messages,
            model=getattr(model, "value", model),
            max_tokens=max_tokens,
            temperature=temperature,
        )
        return self.chat.stream(
            conversation,
            on_event=on_event,
            on_error=on_error,
            on_complete=on_complete,
            background=background,
        )

    # ------------------------------------------------------------------ #
    def send_chat_with_history(
        self,
        text: str,
        history: ConversationHistory,
        model: str = DEFAULT_CHAT_MODEL,
        system_prompt: Optional[str] = None,
        max_tokens: Optional[int] = None,
    ) -> ChatCompletion:
        """
        Ask ``text`` in the context of a caller‑owned ``history``.

        The history is read to build the messages and receives the new turn
        only after a successful answer; the client itself keeps no state.
        """
        result = self.send_chat(
            messages=history.to_messages(text, system_prompt=system_prompt),
            model=model,
            max_tokens=max_tokens,
        )
        if result.choices and result.choices[0].message:
            history.append(text, result.choices[0].message.content or "")
        return result

    # ------------------------------------------------------------------ #
    def send_embeddings(
        self,
        payload: Optional[Union[EmbeddingRequest, Dict[str, Any]]] = None,
        input: Optional[Union[str, List[str]]] = None,
        model: str = DEFAULT_EMBEDDING_MODEL,
    ) -> Embeddings:
        request = _payload_model(
            EmbeddingRequest,
            payload,
            input=input,
            model=getattr(model, "value", model),
        )
        return self.embeddings.create(request)

    def send_moderation(
        self,
        payload: Optional[Union[ModerationRequest, Dict[str, Any]]] = None,
        input: Optional[Union[str, List[str]]] = None,
        model: str = DEFAULT_MODERATION_MODEL,
    ) -> Moderation:
        request = _payload_model(
            ModerationRequest,
            payload,
            input=input,
            model=getattr(model, "value", model),
        )
        return self.moderations.create(request)

    # ------------------------------------------------------------------ #
    def send_images(
        self,
        payload: Optional[Union[ImageGeneration, Dict[str, Any]]] = None,
        prompt: Optional[str] = None,
        n: int = 1,
        size: Union[ImageSize, str] = ImageSize.SIZE_1024,
        user: Optional[str] = None,
    ) -> ImagesResponse:
        request = _payload_model(
            ImageGeneration, payload, prompt=prompt, n=n, size=size, user=user
        )
        return self.images.generate(request)

    def send_image_edit(
        self,
        image: bytes,
        prompt: str,
        mask: Optional[bytes] = None,
        n: int = 1,
        size: Union[ImageSize, str] = ImageSize.SIZE_1024,
        user: Optional[str] = None,
    ) -> ImagesResponse:
        return self.images.edit(
            image=image, prompt=prompt, mask=mask, n=n, size=size, user=user
        )

    def send_image_variations(
        self,
        image: bytes,
        n: int = 1,
        size: Union[ImageSize, str] = ImageSize.SIZE_1024,
        user: Optional[str] = None,
    ) -> ImagesResponse:
        return self.images.variation(image=image, n=n, size=size, user=user)

    # ------------------------------------------------------------------ #
    def create_speech(
        self,
        payload: Optional[Union[SpeechRequest, Dict[str, Any]]] = None,
        input: Optional[str] = None,
        voice: Union[Voice, str] = Voice.ALLOY,
        model: str = DEFAULT_TTS_MODEL,
        response_format: Optional[Union[AudioResponseFormat, str]] = None,
        speed: Optional[float] = None,
    ) -> bytes:
        request = _payload_model(
            SpeechRequest,
            payload,
            input=input,
            voice=voice,
            model=getattr(model, "value", model),
            response_format=response_format,
            speed=speed,
        )
        return self.audio.speech(request)

    def create_transcription(
        self,
        file: bytes,
        filename: str,
        model: str = DEFAULT_AUDIO_MODEL,
        language: Optional[str] = None,
        prompt: Optional[str] = None,
        response_format: Optional[Union[TranscriptionResponseFormat, str]] = None,
        temperature: Optional[float] = None,
    ):
        return self.audio.transcription(
            file=file,
            filename=filename,
            model=model,
            language=language,
            prompt=prompt,
            response_format=response_format,
            temperature=temperature,
        )

    def create_translation(
        self,
        file: bytes,
        filename: str,
        model: str = DEFAULT_AUDIO_MODEL,
        prompt: Optional[str] = None,
        response_format: Optional[Union[TranscriptionResponseFormat, str]] = None,
        temperature: Optional[float] = None,
    ):
        return self.audio.translation(
            file=file,
            filename=filename,
            model=model,
            prompt=prompt,
            response_format=response_format,
            temperature=temperature,
        )

    # ------------------------------------------------------------------ #
    def submit(self, fn: Callable[..., Any], *args, **kwargs) -> Future:
        """
        Run any client call on the client's thread pool.

        >>> future = client.submit(client.send_chat, messages=[...])
        >>> future.result(timeout=30)
        """
        with self._executor_lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self._max_workers,
                    thread_name_prefix="openai-client",
                )
            return self._executor.submit(fn, *args, **kwargs)

    def close(self) -> None:
        with self._executor_lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=True)
        self.transport.close()

    def __enter__(self) -> "OpenAIClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
