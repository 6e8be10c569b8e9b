"""
Moderation request and verdict.
"""

import enum
from typing import List, Union

from openai_client_lib.data_models.base_model import OpenAIBaseModel
from openai_client_lib.data_models.envelope import ModerationResult, OpenAIEnvelope


class ModerationCategory(str, enum.Enum):
    HATE = "hate"
    HATE_THREATENING = "hate/threatening"
    HARASSMENT = "harassment"
    SELF_HARM = "self-harm"
    SEXUAL = "sexual"
    SEXUAL_MINORS = "sexual/minors"
    VIOLENCE = "violence"
    VIOLENCE_GRAPHIC = "violence/graphic"


class ModerationRequest(OpenAIBaseModel):
    input: Union[str, List[str]]
    model: str


Moderation = OpenAIEnvelope[ModerationResult]
