from typing import Optional

from openai_client_lib.data_models.base_model import OpenAIBaseModel


class ModelObject(OpenAIBaseModel):
    id: str
    object: Optional[str] = None
    created: Optional[int] = None
    owned_by: Optional[str] = None
