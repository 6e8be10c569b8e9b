"""
Constants and configuration for the OpenAI client library.

All values are loaded from environment variables, allowing the deployment
environment to control behaviour without code changes.  Arguments passed
explicitly to :class:`~openai_client_lib.client.OpenAIClient` always win over
the values defined here.
"""

import os


class _DontChangeMe:
    MAIN_ENV_PREFIX = "OPENAI_CLIENT_"


def bool_env_value(env_name: str, default: bool = False) -> bool:
    """
    Interpret an environment variable as a boolean flag.

    ``1``, ``true``, ``yes`` and ``on`` (case‑insensitive) are truthy, any
    other non‑empty value is falsy.  Unset variables yield ``default``.
    """
    value = os.environ.get(env_name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Name of the variable holding the provider API key
API_KEY_ENV = "OPENAI_API_KEY"

# Name of the variable holding the organization identifier
ORGANIZATION_ENV = "OPENAI_ORGANIZATION"

# Base url of the provider (or of a proxy in front of it)
DEFAULT_BASE_URL = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}BASE_URL", "https://api.openai.com"
).strip()

# Timeout (seconds) for regular requests
DEFAULT_TIMEOUT = float(
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}TIMEOUT", "60").strip()
)

# Timeout (seconds) for streaming connections (read timeout between chunks)
DEFAULT_STREAM_TIMEOUT = float(
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}STREAM_TIMEOUT", "300").strip()
)

# Size of the connection pool kept by the HTTP session
DEFAULT_POOL_MAXSIZE = int(
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}POOL_MAXSIZE", "10").strip()
)

# Number of workers used by ``OpenAIClient.submit``
DEFAULT_MAX_WORKERS = int(
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}MAX_WORKERS", "4").strip()
)

# Default logging level used by ``prepare_logger``
LOG_LEVEL = os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}LOG_LEVEL", "INFO").strip()

# Run the client in debug mode
RUN_IN_DEBUG_MODE = bool_env_value(f"{_DontChangeMe.MAIN_ENV_PREFIX}IN_DEBUG")
if RUN_IN_DEBUG_MODE:
    LOG_LEVEL = "DEBUG"

# Header value sent with every assistants/threads/messages/runs request
ASSISTANTS_BETA_HEADER = ("OpenAI-Beta", "assistants=v1")

# Streaming wire format
STREAM_DATA_PREFIX = "data:"
STREAM_DONE_SENTINEL = "[DONE]"
