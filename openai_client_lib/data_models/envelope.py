"""
Generic response envelope and the simple result payloads carried inside it.

Completion‑like endpoints wrap their results in the same outer object::

    {"id": "...", "object": "text_completion", "created": 1700000000,
     "model": "...", "choices": [...], "usage": {...}}

Embeddings and images put the list under ``data``, moderations under
``results``.  :class:`OpenAIEnvelope` keeps every field optional; which of
them is present depends on the operation that was called.
"""

from typing import Dict, Generic, List, Optional, TypeVar

from openai_client_lib.data_models.base_model import OpenAIBaseModel

T = TypeVar("T")


class UsageResult(OpenAIBaseModel):
    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None


class TextResult(OpenAIBaseModel):
    """One choice of a text (or edit) completion."""

    text: Optional[str] = None
    index: Optional[int] = None
    finish_reason: Optional[str] = None


class EmbeddingResult(OpenAIBaseModel):
    object: Optional[str] = None
    embedding: List[float] = []
    index: Optional[int] = None


class UrlResult(OpenAIBaseModel):
    """
    One generated image.

    Either ``url`` or ``b64_json`` is set, depending on the requested
    ``response_format``.
    """

    url: Optional[str] = None
    b64_json: Optional[str] = None
    revised_prompt: Optional[str] = None


class ModerationResult(OpenAIBaseModel):
    """
    Moderation verdict for one input.

    Attributes
    ----------
    categories : Dict[str, bool]
        Category name (e.g. ``"hate/threatening"``) -> flagged.
    category_scores : Dict[str, float]
        Category name -> model confidence.
    flagged : bool
        Whether any category was flagged.
    """

    categories: Dict[str, bool] = {}
    category_scores: Dict[str, float] = {}
    flagged: bool = False


class OpenAIEnvelope(OpenAIBaseModel, Generic[T]):
    """
    Loose outer object shared by completion, chat, embedding, image and
    moderation responses.

    No cross‑field consistency is enforced: an empty JSON object decodes to
    an envelope with every field set to ``None``.
    """

    id: Optional[str] = None
    object: Optional[str] = None
    created: Optional[int] = None
    model: Optional[str] = None
    choices: Optional[List[T]] = None
    usage: Optional[UsageResult] = None
    data: Optional[List[T]] = None
    results: Optional[List[T]] = None
