"""
Base model definitions for the OpenAI client library.

Every request body and response schema derives from :class:`OpenAIBaseModel`.
The provider adds new response fields regularly, so unknown keys are kept
(``extra="allow"``) instead of failing validation; they stay reachable through
``model_extra``.
"""

from pydantic import BaseModel, ConfigDict


class OpenAIBaseModel(BaseModel):
    """
    Common configuration shared by all schemas.

    Request bodies are serialised with ``exclude_none=True`` by the request
    builder, so optional fields left at ``None`` never reach the wire.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)
