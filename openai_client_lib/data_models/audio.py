"""
Text‑to‑speech and speech‑to‑text models.

Speech synthesis returns raw audio bytes.  Transcription and translation
return :class:`TranscriptionResult` for the JSON formats; for ``text``,
``srt`` and ``vtt`` the provider answers with plain text which the client
returns undecoded.
"""

import enum
from typing import Optional

from openai_client_lib.data_models.base_model import OpenAIBaseModel


class Voice(str, enum.Enum):
    ALLOY = "alloy"
    ECHO = "echo"
    FABLE = "fable"
    ONYX = "onyx"
    NOVA = "nova"
    SHIMMER = "shimmer"


class AudioResponseFormat(str, enum.Enum):
    MP3 = "mp3"
    OPUS = "opus"
    AAC = "aac"
    FLAC = "flac"


class TranscriptionResponseFormat(str, enum.Enum):
    JSON = "json"
    TEXT = "text"
    SRT = "srt"
    VERBOSE_JSON = "verbose_json"
    VTT = "vtt"

    @property
    def is_json(self) -> bool:
        return self in (
            TranscriptionResponseFormat.JSON,
            TranscriptionResponseFormat.VERBOSE_JSON,
        )


class SpeechRequest(OpenAIBaseModel):
    """
    Payload model for ``/v1/audio/speech``.

    Attributes
    ----------
    model : str
        TTS model (see :class:`TTSModels`).
    input : str
        Text to synthesise.
    voice : Voice
        Voice preset.
    speed : Optional[float]
        Playback speed between ``0.25`` and ``4.0``.
    """

    model: str
    input: str
    voice: Voice = Voice.ALLOY
    response_format: Optional[AudioResponseFormat] = None
    speed: Optional[float] = None


class TranscriptionResult(OpenAIBaseModel):
    """``verbose_json`` adds ``language``, ``duration`` and ``segments``."""

    text: str = ""
    language: Optional[str] = None
    duration: Optional[float] = None
