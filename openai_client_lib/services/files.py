from typing import Optional, Union

from openai_client_lib.api_types.operations import Operation
from openai_client_lib.data_models.files import FileObject, FilePurpose
from openai_client_lib.data_models.listing import DeletionStatus, ListResponse
from openai_client_lib.services.service_interface import BaseServiceInterface
from openai_client_lib.utils.multipart import MultipartForm


class FilesService(BaseServiceInterface):
    """
    Service wrapper for ``/v1/files``.

    Uploaded files are referenced by id from fine‑tuning jobs, assistants and
    messages.
    """

    def list(
        self, purpose: Optional[Union[FilePurpose, str]] = None
    ) -> ListResponse[FileObject]:
        return self.request(
            Operation.FILES_LIST,
            ListResponse[FileObject],
            query={"purpose": purpose},
        )

    def upload(
        self,
        file: bytes,
        filename: str,
        purpose: Union[FilePurpose, str],
    ) -> FileObject:
        form = (
            MultipartForm()
            .add_field("purpose", getattr(purpose, "value", purpose))
            .add_file("file", file, filename=filename)
        )
        return self.request(Operation.FILES_UPLOAD, FileObject, form=form)

    def retrieve(self, file_id: str) -> FileObject:
        return self.request(
            Operation.FILES_RETRIEVE, FileObject, path_params={"file_id": file_id}
        )

    def delete(self, file_id: str) -> DeletionStatus:
        return self.request(
            Operation.FILES_DELETE, DeletionStatus, path_params={"file_id": file_id}
        )

    def retrieve_content(self, file_id: str) -> bytes:
        return self.request(
            Operation.FILES_RETRIEVE_CONTENT,
            bytes,
            path_params={"file_id": file_id},
        )
