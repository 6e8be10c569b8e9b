"""
Thread message models.

Message content is a list of typed parts; a text part may carry annotations
(file citations or generated file paths), an image part references an
uploaded file.
"""

from typing import Any, Dict, List, Optional

from openai_client_lib.data_models.base_model import OpenAIBaseModel


class MessageText(OpenAIBaseModel):
    value: str = ""
    annotations: List[Dict[str, Any]] = []


class ImageFileRef(OpenAIBaseModel):
    file_id: str


class MessageContent(OpenAIBaseModel):
    """One content part – ``type`` is ``"text"`` or ``"image_file"``."""

    type: str
    text: Optional[MessageText] = None
    image_file: Optional[ImageFileRef] = None


class MessageRequest(OpenAIBaseModel):
    """
    Payload model for adding a message to a thread.

    Attributes
    ----------
    role : str
        Only ``"user"`` is accepted by the provider.
    content : str
        Message text.
    file_ids : Optional[List[str]]
        Up to 10 file ids the message refers to.
    """

    role: str = "user"
    content: str
    file_ids: Optional[List[str]] = None
    metadata: Optional[Dict[str, str]] = None


class MessageModifyRequest(OpenAIBaseModel):
    metadata: Optional[Dict[str, str]] = None


class MessageObject(OpenAIBaseModel):
    id: str
    object: Optional[str] = None
    created_at: Optional[int] = None
    thread_id: Optional[str] = None
    role: Optional[str] = None
    content: List[MessageContent] = []
    assistant_id: Optional[str] = None
    run_id: Optional[str] = None
    file_ids: List[str] = []
    metadata: Dict[str, str] = {}

    @property
    def text(self) -> str:
        """Concatenated value of all text parts."""
        return "".join(part.text.value for part in self.content if part.text)


class MessageFileObject(OpenAIBaseModel):
    id: str
    object: Optional[str] = None
    created_at: Optional[int] = None
    message_id: Optional[str] = None
