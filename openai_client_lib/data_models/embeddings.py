from typing import List, Optional, Union

from openai_client_lib.data_models.base_model import OpenAIBaseModel
from openai_client_lib.data_models.envelope import EmbeddingResult, OpenAIEnvelope


class EmbeddingRequest(OpenAIBaseModel):
    model: str
    input: Union[str, List[str]]
    encoding_format: Optional[str] = None
    user: Optional[str] = None


Embeddings = OpenAIEnvelope[EmbeddingResult]
