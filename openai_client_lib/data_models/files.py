import enum
from typing import Optional

from openai_client_lib.data_models.base_model import OpenAIBaseModel


class FilePurpose(str, enum.Enum):
    FINE_TUNE = "fine-tune"
    FINE_TUNE_RESULTS = "fine-tune-results"
    ASSISTANTS = "assistants"
    ASSISTANTS_OUTPUT = "assistants-output"


class FileObject(OpenAIBaseModel):
    """An uploaded file as described by ``/v1/files``."""

    id: str
    object: str = "file"
    bytes: Optional[int] = None
    created_at: Optional[int] = None
    filename: Optional[str] = None
    purpose: Optional[str] = None
    status: Optional[str] = None
