"""
Run and run step models.

A run executes an assistant on a thread.  When the assistant calls a
function the run stops in ``requires_action``; the caller answers with
:class:`ToolOutput` objects through ``submit_tool_outputs``.
"""

import enum
from typing import Any, Dict, List, Optional

from openai_client_lib.data_models.assistants import Tool
from openai_client_lib.data_models.base_model import OpenAIBaseModel
from openai_client_lib.data_models.threads import ThreadRequest


class RunStatus(str, enum.Enum):
    QUEUED = "queued"
    IN_PROGRESS = "in_progress"
    REQUIRES_ACTION = "requires_action"
    CANCELLING = "cancelling"
    CANCELLED = "cancelled"
    FAILED = "failed"
    COMPLETED = "completed"
    EXPIRED = "expired"

    @property
    def is_terminal(self) -> bool:
        return self in (
            RunStatus.CANCELLED,
            RunStatus.FAILED,
            RunStatus.COMPLETED,
            RunStatus.EXPIRED,
        )


class ToolCallFunction(OpenAIBaseModel):
    name: str
    arguments: str = ""


class ToolCall(OpenAIBaseModel):
    id: str
    type: str = "function"
    function: Optional[ToolCallFunction] = None


class SubmitToolOutputs(OpenAIBaseModel):
    tool_calls: List[ToolCall] = []


class RequiredAction(OpenAIBaseModel):
    type: str = "submit_tool_outputs"
    submit_tool_outputs: Optional[SubmitToolOutputs] = None


class LastError(OpenAIBaseModel):
    code: Optional[str] = None
    message: Optional[str] = None


class RunObject(OpenAIBaseModel):
    id: str
    object: Optional[str] = None
    created_at: Optional[int] = None
    thread_id: Optional[str] = None
    assistant_id: Optional[str] = None
    # plain string so that statuses added by the provider still decode
    status: Optional[str] = None
    required_action: Optional[RequiredAction] = None
    last_error: Optional[LastError] = None
    expires_at: Optional[int] = None
    started_at: Optional[int] = None
    cancelled_at: Optional[int] = None
    failed_at: Optional[int] = None
    completed_at: Optional[int] = None
    model: Optional[str] = None
    instructions: Optional[str] = None
    tools: List[Tool] = []
    file_ids: List[str] = []
    metadata: Dict[str, str] = {}

    @property
    def is_terminal(self) -> bool:
        try:
            return RunStatus(self.status).is_terminal
        except ValueError:
            return False


class RunRequest(OpenAIBaseModel):
    """
    Payload model for starting a run on an existing thread.

    ``model``, ``instructions`` and ``tools`` override the assistant's
    configuration for this run only.
    """

    assistant_id: str
    model: Optional[str] = None
    instructions: Optional[str] = None
    tools: Optional[List[Tool]] = None
    metadata: Optional[Dict[str, str]] = None


class RunModifyRequest(OpenAIBaseModel):
    metadata: Optional[Dict[str, str]] = None


class ThreadRunRequest(RunRequest):
    """Create a thread and start a run on it in one request."""

    thread: Optional[ThreadRequest] = None


class ToolOutput(OpenAIBaseModel):
    tool_call_id: str
    output: str


class ToolOutputsRequest(OpenAIBaseModel):
    tool_outputs: List[ToolOutput]


class RunStep(OpenAIBaseModel):
    """
    One step of a run.

    ``type`` is ``"message_creation"`` or ``"tool_calls"``; the shape of
    ``step_details`` depends on it and is kept as plain JSON.
    """

    id: str
    object: Optional[str] = None
    created_at: Optional[int] = None
    assistant_id: Optional[str] = None
    thread_id: Optional[str] = None
    run_id: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None
    step_details: Dict[str, Any] = {}
    last_error: Optional[LastError] = None
    expired_at: Optional[int] = None
    cancelled_at: Optional[int] = None
    failed_at: Optional[int] = None
    completed_at: Optional[int] = None
    metadata: Dict[str, str] = {}
