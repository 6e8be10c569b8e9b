"""
Service layer for the image endpoints.

Generation sends a JSON body; edits and variations upload PNG data as a
multipart form.
"""

from typing import Optional, Union

from openai_client_lib.api_types.operations import Operation
from openai_client_lib.data_models.images import (
    ImageGeneration,
    ImageResponseFormat,
    ImageSize,
    ImagesResponse,
)
from openai_client_lib.services.service_interface import BaseServiceInterface
from openai_client_lib.utils.multipart import MultipartForm

PNG = "image/png"


def _enum_value(value):
    return getattr(value, "value", value)


class ImagesService(BaseServiceInterface):
    def generate(self, request: ImageGeneration) -> ImagesResponse:
        return self.request(Operation.IMAGES_GENERATE, ImagesResponse, body=request)

    def edit(
        self,
        image: bytes,
        prompt: str,
        mask: Optional[bytes] = None,
        n: int = 1,
        size: Union[ImageSize, str] = ImageSize.SIZE_1024,
        model: Optional[str] = None,
        response_format: Optional[Union[ImageResponseFormat, str]] = None,
        user: Optional[str] = None,
    ) -> ImagesResponse:
        """
        Edit ``image`` according to ``prompt``.

        Parameters
        ----------
        image : bytes
            Square PNG, less than 4MB.  Fully transparent areas are edited
            unless ``mask`` is given.
        mask : Optional[bytes]
            PNG of the same size as ``image``; transparent areas mark the
            region to edit.
        """
        form = (
            MultipartForm()
            .add_file("image", image, filename="image.png", content_type=PNG)
            .add_file("mask", mask, filename="mask.png", content_type=PNG)
            .add_field("prompt", prompt)
        )
        self._add_common_fields(form, n, size, model, response_format, user)
        return self.request(Operation.IMAGES_EDIT, ImagesResponse, form=form)

    def variation(
        self,
        image: bytes,
        n: int = 1,
        size: Union[ImageSize, str] = ImageSize.SIZE_1024,
        model: Optional[str] = None,
        response_format: Optional[Union[ImageResponseFormat, str]] = None,
        user: Optional[str] = None,
    ) -> ImagesResponse:
        form = MultipartForm().add_file(
            "image", image, filename="image.png", content_type=PNG
        )
        self._add_common_fields(form, n, size, model, response_format, user)
        return self.request(Operation.IMAGES_VARIATION, ImagesResponse, form=form)

    @staticmethod
    def _add_common_fields(form, n, size, model, response_format, user):
        form.add_field("n", n)
        form.add_field("size", _enum_value(size))
        form.add_field("model", model)
        form.add_field("response_format", _enum_value(response_format))
        form.add_field("user", user)
