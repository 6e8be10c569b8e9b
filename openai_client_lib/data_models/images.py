"""
Image generation models.

Edits and variations upload binary images and are sent as multipart forms
built directly by :class:`~openai_client_lib.services.images.ImagesService`;
only generation has a JSON body.
"""

import enum
from typing import Optional

from openai_client_lib.data_models.base_model import OpenAIBaseModel
from openai_client_lib.data_models.envelope import OpenAIEnvelope, UrlResult


class ImageSize(str, enum.Enum):
    SIZE_256 = "256x256"
    SIZE_512 = "512x512"
    SIZE_1024 = "1024x1024"
    SIZE_1792_1024 = "1792x1024"
    SIZE_1024_1792 = "1024x1792"


class ImageResponseFormat(str, enum.Enum):
    URL = "url"
    B64_JSON = "b64_json"


class ImageGeneration(OpenAIBaseModel):
    """
    Payload model for ``/v1/images/generations``.

    Attributes
    ----------
    prompt : str
        Description of the desired image.
    n : int, default ``1``
        Number of images to generate.
    size : ImageSize, default ``1024x1024``
        Dimensions of the generated images.
    """

    prompt: str
    n: int = 1
    size: ImageSize = ImageSize.SIZE_1024

    model: Optional[str] = None
    quality: Optional[str] = None
    style: Optional[str] = None
    response_format: Optional[ImageResponseFormat] = None
    user: Optional[str] = None


ImagesResponse = OpenAIEnvelope[UrlResult]
