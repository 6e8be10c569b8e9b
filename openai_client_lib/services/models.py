from openai_client_lib.api_types.operations import Operation
from openai_client_lib.data_models.listing import DeletionStatus, ListResponse
from openai_client_lib.data_models.models import ModelObject
from openai_client_lib.services.service_interface import BaseServiceInterface


class ModelsService(BaseServiceInterface):
    """
    Service wrapper for ``/v1/models``.

    ``delete`` only works for fine‑tuned models owned by the organization.
    """

    def list(self) -> ListResponse[ModelObject]:
        return self.request(Operation.MODELS_LIST, ListResponse[ModelObject])

    def retrieve(self, model: str) -> ModelObject:
        return self.request(
            Operation.MODELS_RETRIEVE, ModelObject, path_params={"model": model}
        )

    def delete(self, model: str) -> DeletionStatus:
        return self.request(
            Operation.MODELS_DELETE, DeletionStatus, path_params={"model": model}
        )
