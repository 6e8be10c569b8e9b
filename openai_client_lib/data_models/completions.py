"""
Request models for the legacy text completion and edit endpoints.
"""

from typing import Dict, List, Optional, Union

from openai_client_lib.data_models.base_model import OpenAIBaseModel
from openai_client_lib.data_models.envelope import OpenAIEnvelope, TextResult


class CompletionRequest(OpenAIBaseModel):
    """
    Payload model for ``/v1/completions``.

    Attributes
    ----------
    model : str
        Identifier of the model (see :class:`CompletionModels`).
    prompt : Union[str, List[str]]
        Text (or batch of texts) to complete.
    max_tokens : Optional[int]
        Upper bound of generated tokens; the provider default is ``16``.
    """

    model: str
    prompt: Union[str, List[str]]

    suffix: Optional[str] = None
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    n: Optional[int] = None
    stop: Optional[Union[str, List[str]]] = None
    echo: Optional[bool] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None
    logit_bias: Optional[Dict[str, float]] = None
    user: Optional[str] = None


class EditRequest(OpenAIBaseModel):
    """Payload model for ``/v1/edits``."""

    model: str
    instruction: str
    input: Optional[str] = None

    n: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None


Completion = OpenAIEnvelope[TextResult]
