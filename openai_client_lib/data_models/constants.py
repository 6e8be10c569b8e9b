"""
Well known model identifiers per endpoint family.

The enums are conveniences only; every ``model`` argument also accepts a
plain string, so fine‑tuned or newer models need no change here.
"""

import enum


class ChatModels(str, enum.Enum):
    GPT_4 = "gpt-4"
    GPT_4_0613 = "gpt-4-0613"
    GPT_4_32K = "gpt-4-32k"
    GPT_4_32K_0613 = "gpt-4-32k-0613"
    GPT_4_1106_PREVIEW = "gpt-4-1106-preview"
    GPT_35_TURBO = "gpt-3.5-turbo"
    GPT_35_TURBO_0613 = "gpt-3.5-turbo-0613"
    GPT_35_TURBO_1106 = "gpt-3.5-turbo-1106"
    GPT_35_TURBO_16K = "gpt-3.5-turbo-16k"
    GPT_35_TURBO_16K_0613 = "gpt-3.5-turbo-16k-0613"


class CompletionModels(str, enum.Enum):
    GPT_35_TURBO_INSTRUCT = "gpt-3.5-turbo-instruct"
    TEXT_DAVINCI_003 = "text-davinci-003"
    TEXT_DAVINCI_002 = "text-davinci-002"
    TEXT_DAVINCI_001 = "text-davinci-001"
    TEXT_CURIE_001 = "text-curie-001"
    TEXT_BABBAGE_001 = "text-babbage-001"
    TEXT_ADA_001 = "text-ada-001"
    DAVINCI = "davinci"
    CURIE = "curie"
    BABBAGE = "babbage"
    ADA = "ada"


class EditModels(str, enum.Enum):
    TEXT_DAVINCI_EDIT_001 = "text-davinci-edit-001"
    CODE_DAVINCI_EDIT_001 = "code-davinci-edit-001"


class EmbeddingModels(str, enum.Enum):
    TEXT_EMBEDDING_ADA_002 = "text-embedding-ada-002"


class ModerationModels(str, enum.Enum):
    TEXT_MODERATION_LATEST = "text-moderation-latest"
    TEXT_MODERATION_STABLE = "text-moderation-stable"


class AudioModels(str, enum.Enum):
    WHISPER_1 = "whisper-1"


class TTSModels(str, enum.Enum):
    TTS_1 = "tts-1"
    TTS_1_HD = "tts-1-hd"


class ImageModels(str, enum.Enum):
    DALL_E_2 = "dall-e-2"
    DALL_E_3 = "dall-e-3"


class FineTuningModels(str, enum.Enum):
    GPT_4_0613 = "gpt-4-0613"
    GPT_35_TURBO_1106 = "gpt-3.5-turbo-1106"
    GPT_35_TURBO_0613 = "gpt-3.5-turbo-0613"
    BABBAGE_002 = "babbage-002"
    DAVINCI_002 = "davinci-002"


# Defaults used by the flat client methods when no model is given
DEFAULT_CHAT_MODEL = ChatModels.GPT_35_TURBO.value
DEFAULT_COMPLETION_MODEL = CompletionModels.GPT_35_TURBO_INSTRUCT.value
DEFAULT_EDIT_MODEL = EditModels.TEXT_DAVINCI_EDIT_001.value
DEFAULT_EMBEDDING_MODEL = EmbeddingModels.TEXT_EMBEDDING_ADA_002.value
DEFAULT_MODERATION_MODEL = ModerationModels.TEXT_MODERATION_LATEST.value
DEFAULT_AUDIO_MODEL = AudioModels.WHISPER_1.value
DEFAULT_TTS_MODEL = TTSModels.TTS_1.value
