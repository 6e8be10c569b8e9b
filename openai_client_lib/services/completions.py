"""
Service layer for the text generation endpoints.

* :class:`CompletionsService` – legacy ``/v1/completions`` and ``/v1/edits``.
* :class:`EmbeddingsService` – ``/v1/embeddings``.
* :class:`ModerationsService` – ``/v1/moderations``.
"""

from openai_client_lib.api_types.operations import Operation
from openai_client_lib.data_models.completions import (
    Completion,
    CompletionRequest,
    EditRequest,
)
from openai_client_lib.data_models.embeddings import EmbeddingRequest, Embeddings
from openai_client_lib.data_models.moderation import Moderation, ModerationRequest
from openai_client_lib.services.service_interface import BaseServiceInterface


class CompletionsService(BaseServiceInterface):
    def create(self, request: CompletionRequest) -> Completion:
        return self.request(Operation.COMPLETIONS_CREATE, Completion, body=request)

    def edit(self, request: EditRequest) -> Completion:
        return self.request(Operation.EDITS_CREATE, Completion, body=request)


class EmbeddingsService(BaseServiceInterface):
    def create(self, request: EmbeddingRequest) -> Embeddings:
        return self.request(Operation.EMBEDDINGS_CREATE, Embeddings, body=request)


class ModerationsService(BaseServiceInterface):
    def create(self, request: ModerationRequest) -> Moderation:
        return self.request(Operation.MODERATIONS_CREATE, Moderation, body=request)
