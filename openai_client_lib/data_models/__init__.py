from openai_client_lib.data_models.base_model import OpenAIBaseModel
from openai_client_lib.data_models.envelope import (
    OpenAIEnvelope,
    UsageResult,
    TextResult,
    EmbeddingResult,
    UrlResult,
    ModerationResult,
)
from openai_client_lib.data_models.errors import ChatErrorEnvelope, ErrorDetail
from openai_client_lib.data_models.chat import (
    ChatRole,
    ChatMessage,
    ChatDelta,
    ChatConversation,
    MessageResult,
    StreamMessageResult,
    ChatCompletion,
    ChatStreamChunk,
)
from openai_client_lib.data_models.completions import (
    CompletionRequest,
    EditRequest,
    Completion,
)
from openai_client_lib.data_models.embeddings import EmbeddingRequest, Embeddings
from openai_client_lib.data_models.moderation import (
    ModerationCategory,
    ModerationRequest,
    Moderation,
)
from openai_client_lib.data_models.images import (
    ImageSize,
    ImageResponseFormat,
    ImageGeneration,
    ImagesResponse,
)
from openai_client_lib.data_models.audio import (
    Voice,
    AudioResponseFormat,
    TranscriptionResponseFormat,
    SpeechRequest,
    TranscriptionResult,
)
from openai_client_lib.data_models.files import FilePurpose, FileObject
from openai_client_lib.data_models.fine_tuning import (
    FineTuningHyperParams,
    FineTuningError,
    FineTuningRequest,
    FineTuningJob,
    FineTuningEvent,
)
from openai_client_lib.data_models.models import ModelObject
from openai_client_lib.data_models.assistants import (
    FunctionObject,
    Tool,
    AssistantBody,
    AssistantObject,
    AssistantFileRequest,
    AssistantFileObject,
)
from openai_client_lib.data_models.messages import (
    MessageText,
    MessageContent,
    MessageRequest,
    MessageModifyRequest,
    MessageObject,
    MessageFileObject,
)
from openai_client_lib.data_models.threads import ThreadRequest, ThreadObject
from openai_client_lib.data_models.runs import (
    RunStatus,
    RunObject,
    RunRequest,
    RunModifyRequest,
    ThreadRunRequest,
    ToolOutput,
    ToolOutputsRequest,
    RunStep,
)
from openai_client_lib.data_models.listing import ListResponse, DeletionStatus
from openai_client_lib.data_models.constants import (
    ChatModels,
    CompletionModels,
    EditModels,
    EmbeddingModels,
    ModerationModels,
    AudioModels,
    TTSModels,
    ImageModels,
    FineTuningModels,
)
