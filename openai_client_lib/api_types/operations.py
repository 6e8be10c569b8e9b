"""
Closed set of logical API operations.

An :class:`Operation` is only a lookup key – it carries no data and knows
nothing about paths or verbs.  The mapping to ``(method, path)`` lives in the
endpoint providers of :mod:`openai_client_lib.api_types`.
"""

from __future__ import annotations

import enum


class Operation(str, enum.Enum):
    # completions & friends
    COMPLETIONS_CREATE = "completions-create"
    EDITS_CREATE = "edits-create"
    CHAT_CREATE = "chat-create"
    EMBEDDINGS_CREATE = "embeddings-create"
    MODERATIONS_CREATE = "moderations-create"

    # images
    IMAGES_GENERATE = "images-generate"
    IMAGES_EDIT = "images-edit"
    IMAGES_VARIATION = "images-variation"

    # audio
    AUDIO_SPEECH = "audio-speech"
    AUDIO_TRANSCRIPTION = "audio-transcription"
    AUDIO_TRANSLATION = "audio-translation"

    # files
    FILES_LIST = "files-list"
    FILES_UPLOAD = "files-upload"
    FILES_RETRIEVE = "files-retrieve"
    FILES_DELETE = "files-delete"
    FILES_RETRIEVE_CONTENT = "files-retrieve-content"

    # fine tuning
    FINE_TUNING_CREATE = "fine-tuning-create"
    FINE_TUNING_LIST = "fine-tuning-list"
    FINE_TUNING_RETRIEVE = "fine-tuning-retrieve"
    FINE_TUNING_CANCEL = "fine-tuning-cancel"
    FINE_TUNING_EVENTS = "fine-tuning-events"

    # models
    MODELS_LIST = "models-list"
    MODELS_RETRIEVE = "models-retrieve"
    MODELS_DELETE = "models-delete"

    # assistants
    ASSISTANT_CREATE = "assistant-create"
    ASSISTANT_RETRIEVE = "assistant-retrieve"
    ASSISTANT_MODIFY = "assistant-modify"
    ASSISTANT_DELETE = "assistant-delete"
    ASSISTANT_LIST = "assistant-list"
    ASSISTANT_FILE_CREATE = "assistant-file-create"
    ASSISTANT_FILE_RETRIEVE = "assistant-file-retrieve"
    ASSISTANT_FILE_DELETE = "assistant-file-delete"
    ASSISTANT_FILE_LIST = "assistant-file-list"

    # threads
    THREAD_CREATE = "thread-create"
    THREAD_RETRIEVE = "thread-retrieve"
    THREAD_MODIFY = "thread-modify"
    THREAD_DELETE = "thread-delete"

    # messages
    MESSAGE_CREATE = "message-create"
    MESSAGE_RETRIEVE = "message-retrieve"
    MESSAGE_MODIFY = "message-modify"
    MESSAGE_LIST = "message-list"
    MESSAGE_FILE_RETRIEVE = "message-file-retrieve"
    MESSAGE_FILE_LIST = "message-file-list"

    # runs
    RUN_CREATE = "run-create"
    RUN_RETRIEVE = "run-retrieve"
    RUN_MODIFY = "run-modify"
    RUN_LIST = "run-list"
    RUN_SUBMIT_TOOL_OUTPUTS = "run-submit-tool-outputs"
    RUN_CANCEL = "run-cancel"
    THREAD_AND_RUN_CREATE = "thread-and-run-create"
    RUN_STEP_RETRIEVE = "run-step-retrieve"
    RUN_STEP_LIST = "run-step-list"

    @property
    def is_assistants_beta(self) -> bool:
        """
        ``True`` for the stateful assistants/threads/messages/runs family.

        Requests for these operations must carry the ``OpenAI-Beta`` header.
        """
        return self.value.startswith(_BETA_PREFIXES)

    @property
    def is_multipart(self) -> bool:
        """``True`` when the operation uploads binary data as a multipart form."""
        return self in _MULTIPART_OPERATIONS


_BETA_PREFIXES = ("assistant-", "thread-", "message-", "run-")

_MULTIPART_OPERATIONS = frozenset(
    {
        Operation.IMAGES_EDIT,
        Operation.IMAGES_VARIATION,
        Operation.AUDIO_TRANSCRIPTION,
        Operation.AUDIO_TRANSLATION,
        Operation.FILES_UPLOAD,
    }
)
