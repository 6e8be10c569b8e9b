"""
Service layer for the assistants (beta) family.

Every request of this family carries the ``OpenAI-Beta`` header; the request
builder adds it based on the operation, so the services below only bind
operations to result shapes.
"""

from typing import Dict, List, Optional

from openai_client_lib.api_types.operations import Operation
from openai_client_lib.data_models.assistants import (
    AssistantBody,
    AssistantFileObject,
    AssistantFileRequest,
    AssistantObject,
)
from openai_client_lib.data_models.listing import DeletionStatus, ListResponse
from openai_client_lib.data_models.messages import (
    MessageFileObject,
    MessageModifyRequest,
    MessageObject,
    MessageRequest,
)
from openai_client_lib.data_models.runs import (
    RunModifyRequest,
    RunObject,
    RunRequest,
    RunStep,
    ThreadRunRequest,
    ToolOutput,
    ToolOutputsRequest,
)
from openai_client_lib.data_models.threads import ThreadObject, ThreadRequest
from openai_client_lib.services.service_interface import (
    BaseServiceInterface,
    list_query,
)


class AssistantsService(BaseServiceInterface):
    def create(self, body: AssistantBody) -> AssistantObject:
        return self.request(Operation.ASSISTANT_CREATE, AssistantObject, body=body)

    def retrieve(self, assistant_id: str) -> AssistantObject:
        return self.request(
            Operation.ASSISTANT_RETRIEVE,
            AssistantObject,
            path_params={"assistant_id": assistant_id},
        )

    def modify(self, assistant_id: str, body: AssistantBody) -> AssistantObject:
        return self.request(
            Operation.ASSISTANT_MODIFY,
            AssistantObject,
            body=body,
            path_params={"assistant_id": assistant_id},
        )

    def delete(self, assistant_id: str) -> DeletionStatus:
        return self.request(
            Operation.ASSISTANT_DELETE,
            DeletionStatus,
            path_params={"assistant_id": assistant_id},
        )

    def list(
        self,
        limit: Optional[int] = None,
        order: Optional[str] = None,
        after: Optional[str] = None,
        before: Optional[str] = None,
    ) -> ListResponse[AssistantObject]:
        return self.request(
            Operation.ASSISTANT_LIST,
            ListResponse[AssistantObject],
            query=list_query(limit, order, after, before),
        )

    def create_file(self, assistant_id: str, file_id: str) -> AssistantFileObject:
        """Attach an uploaded file (purpose ``assistants``) to the assistant."""
        return self.request(
            Operation.ASSISTANT_FILE_CREATE,
            AssistantFileObject,
            body=AssistantFileRequest(file_id=file_id),
            path_params={"assistant_id": assistant_id},
        )

    def retrieve_file(self, assistant_id: str, file_id: str) -> AssistantFileObject:
        return self.request(
            Operation.ASSISTANT_FILE_RETRIEVE,
            AssistantFileObject,
            path_params={"assistant_id": assistant_id, "file_id": file_id},
        )

    def delete_file(self, assistant_id: str, file_id: str) -> DeletionStatus:
        return self.request(
            Operation.ASSISTANT_FILE_DELETE,
            DeletionStatus,
            path_params={"assistant_id": assistant_id, "file_id": file_id},
        )

    def list_files(
        self,
        assistant_id: str,
        limit: Optional[int] = None,
        order: Optional[str] = None,
        after: Optional[str] = None,
        before: Optional[str] = None,
    ) -> ListResponse[AssistantFileObject]:
        return self.request(
            Operation.ASSISTANT_FILE_LIST,
            ListResponse[AssistantFileObject],
            query=list_query(limit, order, after, before),
            path_params={"assistant_id": assistant_id},
        )


class ThreadsService(BaseServiceInterface):
    def create(self, request: Optional[ThreadRequest] = None) -> ThreadObject:
        # an empty object creates an empty thread
        return self.request(
            Operation.THREAD_CREATE, ThreadObject, body=request or ThreadRequest()
        )

    def retrieve(self, thread_id: str) -> ThreadObject:
        return self.request(
            Operation.THREAD_RETRIEVE,
            ThreadObject,
            path_params={"thread_id": thread_id},
        )

    def modify(
        self, thread_id: str, metadata: Optional[Dict[str, str]] = None
    ) -> ThreadObject:
        return self.request(
            Operation.THREAD_MODIFY,
            ThreadObject,
            body=ThreadRequest(metadata=metadata),
            path_params={"thread_id": thread_id},
        )

    def delete(self, thread_id: str) -> DeletionStatus:
        return self.request(
            Operation.THREAD_DELETE,
            DeletionStatus,
            path_params={"thread_id": thread_id},
        )


class MessagesService(BaseServiceInterface):
    def create(self, thread_id: str, request: MessageRequest) -> MessageObject:
        return self.request(
            Operation.MESSAGE_CREATE,
            MessageObject,
            body=request,
            path_params={"thread_id": thread_id},
        )

    def retrieve(self, thread_id: str, message_id: str) -> MessageObject:
        return self.request(
            Operation.MESSAGE_RETRIEVE,
            MessageObject,
            path_params={"thread_id": thread_id, "message_id": message_id},
        )

    def modify(
        self,
        thread_id: str,
        message_id: str,
        metadata: Optional[Dict[str, str]] = None,
    ) -> MessageObject:
        return self.request(
            Operation.MESSAGE_MODIFY,
            MessageObject,
            body=MessageModifyRequest(metadata=metadata),
            path_params={"thread_id": thread_id, "message_id": message_id},
        )

    def list(
        self,
        thread_id: str,
        limit: Optional[int] = None,
        order: Optional[str] = None,
        after: Optional[str] = None,
        before: Optional[str] = None,
    ) -> ListResponse[MessageObject]:
        return self.request(
            Operation.MESSAGE_LIST,
            ListResponse[MessageObject],
            query=list_query(limit, order, after, before),
            path_params={"thread_id": thread_id},
        )

    def retrieve_file(
        self, thread_id: str, message_id: str, file_id: str
    ) -> MessageFileObject:
        return self.request(
            Operation.MESSAGE_FILE_RETRIEVE,
            MessageFileObject,
            path_params={
                "thread_id": thread_id,
                "message_id": message_id,
                "file_id": file_id,
            },
        )

    def list_files(
        self,
        thread_id: str,
        message_id: str,
        limit: Optional[int] = None,
        order: Optional[str] = None,
        after: Optional[str] = None,
        before: Optional[str] = None,
    ) -> ListResponse[MessageFileObject]:
        return self.request(
            Operation.MESSAGE_FILE_LIST,
            ListResponse[MessageFileObject],
            query=list_query(limit, order, after, before),
            path_params={"thread_id": thread_id, "message_id": message_id},
        )


class RunsService(BaseServiceInterface):
    """
    Service wrapper for runs and run steps.

    A run started with :meth:`create` is asynchronous on the provider side;
    poll it with :meth:`retrieve` until ``RunObject.is_terminal`` or until it
    stops in ``requires_action`` and answer with :meth:`submit_tool_outputs`.
    """

    def create(self, thread_id: str, request: RunRequest) -> RunObject:
        return self.request(
            Operation.RUN_CREATE,
            RunObject,
            body=request,
            path_params={"thread_id": thread_id},
        )

    def retrieve(self, thread_id: str, run_id: str) -> RunObject:
        return self.request(
            Operation.RUN_RETRIEVE,
            RunObject,
            path_params={"thread_id": thread_id, "run_id": run_id},
        )

    def modify(
        self,
        thread_id: str,
        run_id: str,
        metadata: Optional[Dict[str, str]] = None,
    ) -> RunObject:
        return self.request(
            Operation.RUN_MODIFY,
            RunObject,
            body=RunModifyRequest(metadata=metadata),
            path_params={"thread_id": thread_id, "run_id": run_id},
        )

    def list(
        self,
        thread_id: str,
        limit: Optional[int] = None,
        order: Optional[str] = None,
        after: Optional[str] = None,
        before: Optional[str] = None,
    ) -> ListResponse[RunObject]:
        return self.request(
            Operation.RUN_LIST,
            ListResponse[RunObject],
            query=list_query(limit, order, after, before),
            path_params={"thread_id": thread_id},
        )

    def submit_tool_outputs(
        self, thread_id: str, run_id: str, tool_outputs: List[ToolOutput]
    ) -> RunObject:
        return self.request(
            Operation.RUN_SUBMIT_TOOL_OUTPUTS,
            RunObject,
            body=ToolOutputsRequest(tool_outputs=tool_outputs),
            path_params={"thread_id": thread_id, "run_id": run_id},
        )

    def cancel(self, thread_id: str, run_id: str) -> RunObject:
        return self.request(
            Operation.RUN_CANCEL,
            RunObject,
            path_params={"thread_id": thread_id, "run_id": run_id},
        )

    def create_thread_and_run(self, request: ThreadRunRequest) -> RunObject:
        return self.request(Operation.THREAD_AND_RUN_CREATE, RunObject, body=request)

    def retrieve_step(self, thread_id: str, run_id: str, step_id: str) -> RunStep:
        return self.request(
            Operation.RUN_STEP_RETRIEVE,
            RunStep,
            path_params={
                "thread_id": thread_id,
                "run_id": run_id,
                "step_id": step_id,
            },
        )

    def list_steps(
        self,
        thread_id: str,
        run_id: str,
        limit: Optional[int] = None,
        order: Optional[str] = None,
        after: Optional[str] = None,
        before: Optional[str] = None,
    ) -> ListResponse[RunStep]:
        return self.request(
            Operation.RUN_STEP_LIST,
            ListResponse[RunStep],
            query=list_query(limit, order, after, before),
            path_params={"thread_id": thread_id, "run_id": run_id},
        )
