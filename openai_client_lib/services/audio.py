"""
Service layer for the audio endpoints.

``speech`` returns the synthesised audio as raw bytes.  ``transcription`` and
``translation`` upload an audio file; for the JSON response formats the
result is decoded into :class:`TranscriptionResult`, for ``text``, ``srt``
and ``vtt`` the body is returned as a string.
"""

from typing import Optional, Union

from openai_client_lib.api_types.operations import Operation
from openai_client_lib.data_models.audio import (
    SpeechRequest,
    TranscriptionResponseFormat,
    TranscriptionResult,
)
from openai_client_lib.data_models.constants import DEFAULT_AUDIO_MODEL
from openai_client_lib.exceptions import RequestConstructionError
from openai_client_lib.services.service_interface import BaseServiceInterface
from openai_client_lib.utils.multipart import MultipartForm

AudioText = Union[TranscriptionResult, str]


class AudioService(BaseServiceInterface):
    def speech(self, request: SpeechRequest) -> bytes:
        return self.request(Operation.AUDIO_SPEECH, bytes, body=request)

    def transcription(
        self,
        file: bytes,
        filename: str,
        model: str = DEFAULT_AUDIO_MODEL,
        language: Optional[str] = None,
        prompt: Optional[str] = None,
        response_format: Optional[Union[TranscriptionResponseFormat, str]] = None,
        temperature: Optional[float] = None,
    ) -> AudioText:
        """
        Transcribe an audio file in its own language.

        Parameters
        ----------
        file : bytes
            Audio content (mp3, mp4, mpeg, mpga, m4a, wav or webm).
        filename : str
            File name sent with the upload; the provider infers the format
            from its extension.
        language : Optional[str]
            ISO‑639‑1 code of the spoken language.
        """
        form = MultipartForm().add_field("language", language)
        return self._send(
            Operation.AUDIO_TRANSCRIPTION,
            form,
            file,
            filename,
            model,
            prompt,
            response_format,
            temperature,
        )

    def translation(
        self,
        file: bytes,
        filename: str,
        model: str = DEFAULT_AUDIO_MODEL,
        prompt: Optional[str] = None,
        response_format: Optional[Union[TranscriptionResponseFormat, str]] = None,
        temperature: Optional[float] = None,
    ) -> AudioText:
        """Translate an audio file into English text."""
        return self._send(
            Operation.AUDIO_TRANSLATION,
            MultipartForm(),
            file,
            filename,
            model,
            prompt,
            response_format,
            temperature,
        )

    def _send(
        self,
        operation,
        form,
        file,
        filename,
        model,
        prompt,
        response_format,
        temperature,
    ) -> AudioText:
        fmt = None
        if response_format is not None:
            try:
                fmt = TranscriptionResponseFormat(response_format)
            except ValueError as exc:
                allowed = ", ".join(f.value for f in TranscriptionResponseFormat)
                raise RequestConstructionError(
                    f"Unsupported response_format '{response_format}', "
                    f"expected one of: {allowed}"
                ) from exc
        form.add_file("file", file, filename=filename)
        form.add_field("model", getattr(model, "value", model))
        form.add_field("prompt", prompt)
        form.add_field("response_format", None if fmt is None else fmt.value)
        form.add_field("temperature", temperature)

        result_cls = TranscriptionResult if fmt is None or fmt.is_json else str
        return self.request(operation, result_cls, form=form)
