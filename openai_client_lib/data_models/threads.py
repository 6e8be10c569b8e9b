from typing import Dict, List, Optional

from openai_client_lib.data_models.base_model import OpenAIBaseModel
from openai_client_lib.data_models.messages import MessageRequest


class ThreadRequest(OpenAIBaseModel):
    """Create (``messages`` + ``metadata``) or modify (``metadata``) a thread."""

    messages: Optional[List[MessageRequest]] = None
    metadata: Optional[Dict[str, str]] = None


class ThreadObject(OpenAIBaseModel):
    id: str
    object: Optional[str] = None
    created_at: Optional[int] = None
    metadata: Dict[str, str] = {}
