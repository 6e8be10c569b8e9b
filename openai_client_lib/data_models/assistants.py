"""
Assistants (beta) models.

An assistant bundles a model, instructions and a set of tools.  Tools are
described by :class:`Tool`: ``{"type": "code_interpreter"}``,
``{"type": "retrieval"}`` or ``{"type": "function", "function": {...}}``.
"""

from typing import Any, Dict, List, Optional

from openai_client_lib.data_models.base_model import OpenAIBaseModel


class FunctionObject(OpenAIBaseModel):
    name: str
    description: Optional[str] = None
    # JSON schema of the arguments
    parameters: Optional[Dict[str, Any]] = None


class Tool(OpenAIBaseModel):
    type: str
    function: Optional[FunctionObject] = None

    @classmethod
    def code_interpreter(cls) -> "Tool":
        return cls(type="code_interpreter")

    @classmethod
    def retrieval(cls) -> "Tool":
        return cls(type="retrieval")

    @classmethod
    def for_function(cls, function: FunctionObject) -> "Tool":
        return cls(type="function", function=function)


class AssistantBody(OpenAIBaseModel):
    """
    Payload model for creating or modifying an assistant.

    Attributes
    ----------
    model : Optional[str]
        Required on create, optional on modify.
    tools : Optional[List[Tool]]
        Up to 128 tools.
    file_ids : Optional[List[str]]
        Up to 20 file ids used by the ``retrieval`` tool.
    metadata : Optional[Dict[str, str]]
        Up to 16 key/value pairs.
    """

    model: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    instructions: Optional[str] = None
    tools: Optional[List[Tool]] = None
    file_ids: Optional[List[str]] = None
    metadata: Optional[Dict[str, str]] = None


class AssistantObject(OpenAIBaseModel):
    id: str
    object: Optional[str] = None
    created_at: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    model: Optional[str] = None
    instructions: Optional[str] = None
    tools: List[Tool] = []
    file_ids: List[str] = []
    metadata: Dict[str, str] = {}


class AssistantFileRequest(OpenAIBaseModel):
    file_id: str


class AssistantFileObject(OpenAIBaseModel):
    id: str
    object: Optional[str] = None
    created_at: Optional[int] = None
    assistant_id: Optional[str] = None
