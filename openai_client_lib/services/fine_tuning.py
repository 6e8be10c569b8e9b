from typing import Optional

from openai_client_lib.api_types.operations import Operation
from openai_client_lib.data_models.fine_tuning import (
    FineTuningEvent,
    FineTuningJob,
    FineTuningRequest,
)
from openai_client_lib.data_models.listing import ListResponse
from openai_client_lib.services.service_interface import BaseServiceInterface


class FineTuningService(BaseServiceInterface):
    def create(self, request: FineTuningRequest) -> FineTuningJob:
        return self.request(Operation.FINE_TUNING_CREATE, FineTuningJob, body=request)

    def list(
        self, after: Optional[str] = None, limit: Optional[int] = None
    ) -> ListResponse[FineTuningJob]:
        return self.request(
            Operation.FINE_TUNING_LIST,
            ListResponse[FineTuningJob],
            query={"after": after, "limit": limit},
        )

    def retrieve(self, job_id: str) -> FineTuningJob:
        return self.request(
            Operation.FINE_TUNING_RETRIEVE,
            FineTuningJob,
            path_params={"job_id": job_id},
        )

    def cancel(self, job_id: str) -> FineTuningJob:
        return self.request(
            Operation.FINE_TUNING_CANCEL,
            FineTuningJob,
            path_params={"job_id": job_id},
        )

    def events(
        self,
        job_id: str,
        after: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> ListResponse[FineTuningEvent]:
        return self.request(
            Operation.FINE_TUNING_EVENTS,
            ListResponse[FineTuningEvent],
            query={"after": after, "limit": limit},
            path_params={"job_id": job_id},
        )
