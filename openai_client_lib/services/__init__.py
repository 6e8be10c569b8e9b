from openai_client_lib.services.service_interface import BaseServiceInterface
from openai_client_lib.services.completions import (
    CompletionsService,
    EmbeddingsService,
    ModerationsService,
)
from openai_client_lib.services.chat import ChatService
from openai_client_lib.services.images import ImagesService
from openai_client_lib.services.audio import AudioService
from openai_client_lib.services.files import FilesService
from openai_client_lib.services.fine_tuning import FineTuningService
from openai_client_lib.services.models import ModelsService
from openai_client_lib.services.assistants import (
    AssistantsService,
    ThreadsService,
    MessagesService,
    RunsService,
)
