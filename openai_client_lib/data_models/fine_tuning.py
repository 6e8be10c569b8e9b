"""
Fine‑tuning job models.
"""

from typing import List, Optional, Union

from openai_client_lib.data_models.base_model import OpenAIBaseModel

# ``"auto"`` or a concrete number
HyperParamValue = Union[str, int, float]


class FineTuningHyperParams(OpenAIBaseModel):
    batch_size: Optional[HyperParamValue] = None
    learning_rate_multiplier: Optional[HyperParamValue] = None
    n_epochs: Optional[HyperParamValue] = None


class FineTuningError(OpenAIBaseModel):
    code: Optional[str] = None
    message: Optional[str] = None
    param: Optional[str] = None


class FineTuningRequest(OpenAIBaseModel):
    """
    Payload model for ``POST /v1/fine_tuning/jobs``.

    Attributes
    ----------
    model : str
        Base model to fine‑tune (see :class:`FineTuningModels`).
    training_file : str
        Id of an uploaded file with purpose ``fine-tune``.
    suffix : Optional[str]
        Up to 40 characters appended to the fine‑tuned model name.
    """

    model: str
    training_file: str
    hyperparameters: Optional[FineTuningHyperParams] = None
    suffix: Optional[str] = None
    validation_file: Optional[str] = None


class FineTuningJob(OpenAIBaseModel):
    id: str
    object: Optional[str] = None
    created_at: Optional[int] = None
    finished_at: Optional[int] = None
    model: Optional[str] = None
    fine_tuned_model: Optional[str] = None
    organization_id: Optional[str] = None
    status: Optional[str] = None
    hyperparameters: Optional[FineTuningHyperParams] = None
    training_file: Optional[str] = None
    validation_file: Optional[str] = None
    result_files: List[str] = []
    trained_tokens: Optional[int] = None
    error: Optional[FineTuningError] = None


class FineTuningEvent(OpenAIBaseModel):
    id: str
    object: Optional[str] = None
    created_at: Optional[int] = None
    level: Optional[str] = None
    message: Optional[str] = None
