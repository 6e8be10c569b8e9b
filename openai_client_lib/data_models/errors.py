"""
Provider error object.

Failed calls (and, for chat completions behind some proxies, even ``200``
responses) carry a body of the form::

    {"error": {"message": "...", "type": "...", "param": null, "code": "..."}}
"""

from typing import Optional, Union

from openai_client_lib.data_models.base_model import OpenAIBaseModel


class ErrorDetail(OpenAIBaseModel):
    message: Optional[str] = None
    type: Optional[str] = None
    param: Optional[str] = None
    code: Optional[Union[str, int]] = None


class ChatErrorEnvelope(OpenAIBaseModel):
    error: Optional[ErrorDetail] = None
