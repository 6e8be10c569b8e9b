"""
Wrappers shared by list and delete endpoints.
"""

from typing import Generic, List, Optional, TypeVar

from openai_client_lib.data_models.base_model import OpenAIBaseModel

T = TypeVar("T")


class ListResponse(OpenAIBaseModel, Generic[T]):
    """
    A page of objects.

    ``first_id``/``last_id``/``has_more`` are only returned by the cursor
    paginated endpoints (assistants, messages, runs, fine‑tuning).
    """

    object: Optional[str] = None
    data: List[T] = []
    first_id: Optional[str] = None
    last_id: Optional[str] = None
    has_more: Optional[bool] = None


class DeletionStatus(OpenAIBaseModel):
    id: str
    object: Optional[str] = None
    deleted: bool = False
