from __future__ import annotations

from typing import Dict, Tuple

from openai_client_lib.api_types.operations import Operation
from openai_client_lib.api_types.types_i import EndpointProviderI


# Operation -> (HTTP verb, path template)
OPENAI_ENDPOINTS: Dict[Operation, Tuple[str, str]] = {
    Operation.COMPLETIONS_CREATE: ("POST", "/v1/completions"),
    Operation.EDITS_CREATE: ("POST", "/v1/edits"),
    Operation.CHAT_CREATE: ("POST", "/v1/chat/completions"),
    Operation.EMBEDDINGS_CREATE: ("POST", "/v1/embeddings"),
    Operation.MODERATIONS_CREATE: ("POST", "/v1/moderations"),
    Operation.IMAGES_GENERATE: ("POST", "/v1/images/generations"),
    Operation.IMAGES_EDIT: ("POST", "/v1/images/edits"),
    Operation.IMAGES_VARIATION: ("POST", "/v1/images/variations"),
    Operation.AUDIO_SPEECH: ("POST", "/v1/audio/speech"),
    Operation.AUDIO_TRANSCRIPTION: ("POST", "/v1/audio/transcriptions"),
    Operation.AUDIO_TRANSLATION: ("POST", "/v1/audio/translations"),
    Operation.FILES_LIST: ("GET", "/v1/files"),
    Operation.FILES_UPLOAD: ("POST", "/v1/files"),
    Operation.FILES_RETRIEVE: ("GET", "/v1/files/{file_id}"),
    Operation.FILES_DELETE: ("DELETE", "/v1/files/{file_id}"),
    Operation.FILES_RETRIEVE_CONTENT: ("GET", "/v1/files/{file_id}/content"),
    Operation.FINE_TUNING_CREATE: ("POST", "/v1/fine_tuning/jobs"),
    Operation.FINE_TUNING_LIST: ("GET", "/v1/fine_tuning/jobs"),
    Operation.FINE_TUNING_RETRIEVE: ("GET", "/v1/fine_tuning/jobs/{job_id}"),
    Operation.FINE_TUNING_CANCEL: ("POST", "/v1/fine_tuning/jobs/{job_id}/cancel"),
    Operation.FINE_TUNING_EVENTS: ("GET", "/v1/fine_tuning/jobs/{job_id}/events"),
    Operation.MODELS_LIST: ("GET", "/v1/models"),
    Operation.MODELS_RETRIEVE: ("GET", "/v1/models/{model}"),
    Operation.MODELS_DELETE: ("DELETE", "/v1/models/{model}"),
    Operation.ASSISTANT_CREATE: ("POST", "/v1/assistants"),
    Operation.ASSISTANT_RETRIEVE: ("GET", "/v1/assistants/{assistant_id}"),
    Operation.ASSISTANT_MODIFY: ("POST", "/v1/assistants/{assistant_id}"),
    Operation.ASSISTANT_DELETE: ("DELETE", "/v1/assistants/{assistant_id}"),
    Operation.ASSISTANT_LIST: ("GET", "/v1/assistants"),
    Operation.ASSISTANT_FILE_CREATE: ("POST", "/v1/assistants/{assistant_id}/files"),
    Operation.ASSISTANT_FILE_RETRIEVE: (
        "GET",
        "/v1/assistants/{assistant_id}/files/{file_id}",
    ),
    Operation.ASSISTANT_FILE_DELETE: (
        "DELETE",
        "/v1/assistants/{assistant_id}/files/{file_id}",
    ),
    Operation.ASSISTANT_FILE_LIST: ("GET", "/v1/assistants/{assistant_id}/files"),
    Operation.THREAD_CREATE: ("POST", "/v1/threads"),
    Operation.THREAD_RETRIEVE: ("GET", "/v1/threads/{thread_id}"),
    Operation.THREAD_MODIFY: ("POST", "/v1/threads/{thread_id}"),
    Operation.THREAD_DELETE: ("DELETE", "/v1/threads/{thread_id}"),
    Operation.MESSAGE_CREATE: ("POST", "/v1/threads/{thread_id}/messages"),
    Operation.MESSAGE_RETRIEVE: (
        "GET",
        "/v1/threads/{thread_id}/messages/{message_id}",
    ),
    Operation.MESSAGE_MODIFY: (
        "POST",
        "/v1/threads/{thread_id}/messages/{message_id}",
    ),
    Operation.MESSAGE_LIST: ("GET", "/v1/threads/{thread_id}/messages"),
    Operation.MESSAGE_FILE_RETRIEVE: (
        "GET",
        "/v1/threads/{thread_id}/messages/{message_id}/files/{file_id}",
    ),
    Operation.MESSAGE_FILE_LIST: (
        "GET",
        "/v1/threads/{thread_id}/messages/{message_id}/files",
    ),
    Operation.RUN_CREATE: ("POST", "/v1/threads/{thread_id}/runs"),
    Operation.RUN_RETRIEVE: ("GET", "/v1/threads/{thread_id}/runs/{run_id}"),
    Operation.RUN_MODIFY: ("POST", "/v1/threads/{thread_id}/runs/{run_id}"),
    Operation.RUN_LIST: ("GET", "/v1/threads/{thread_id}/runs"),
    Operation.RUN_SUBMIT_TOOL_OUTPUTS: (
        "POST",
        "/v1/threads/{thread_id}/runs/{run_id}/submit_tool_outputs",
    ),
    Operation.RUN_CANCEL: ("POST", "/v1/threads/{thread_id}/runs/{run_id}/cancel"),
    Operation.THREAD_AND_RUN_CREATE: ("POST", "/v1/threads/runs"),
    Operation.RUN_STEP_RETRIEVE: (
        "GET",
        "/v1/threads/{thread_id}/runs/{run_id}/steps/{step_id}",
    ),
    Operation.RUN_STEP_LIST: ("GET", "/v1/threads/{thread_id}/runs/{run_id}/steps"),
}


class _StartAppVerificator:
    """
    Import‑time check that the built‑in table covers every operation.
    """

    @staticmethod
    def verify():
        missing = [op.name for op in Operation if op not in OPENAI_ENDPOINTS]
        if missing:
            raise RuntimeError(
                f"OpenAI endpoint table is missing operations: {', '.join(missing)}"
            )


_StartAppVerificator.verify()


class OpenAIEndpoints(EndpointProviderI):
    """
    Concrete endpoint descriptor for the OpenAI REST API (direct mode).

    The class implements the abstract methods defined in
    :class:`~openai_client_lib.api_types.types_i.EndpointProviderI`.  Each
    method looks the operation up in :data:`OPENAI_ENDPOINTS`, which is
    verified to be total over :class:`Operation` when the module is imported.
    """

    def path(self, operation: Operation) -> str:
        """
        Return the path template for ``operation``.

        Returns
        -------
        str
            The relative path, e.g. ``/v1/threads/{thread_id}/runs``.
        """
        return OPENAI_ENDPOINTS[operation][1]

    def method(self, operation: Operation) -> str:
        """
        Return the HTTP method for ``operation``.

        Returns
        -------
        str
            ``"GET"``, ``"POST"`` or ``"DELETE"``.
        """
        return OPENAI_ENDPOINTS[operation][0]
