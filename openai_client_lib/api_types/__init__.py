from openai_client_lib.api_types.operations import Operation
from openai_client_lib.api_types.types_i import EndpointProviderI
from openai_client_lib.api_types.openai import OpenAIEndpoints, OPENAI_ENDPOINTS
from openai_client_lib.api_types.proxy import ProxyEndpoints
from openai_client_lib.api_types.dispatcher import EndpointDispatcher

__all__ = [
    "Operation",
    "EndpointProviderI",
    "OpenAIEndpoints",
    "OPENAI_ENDPOINTS",
    "ProxyEndpoints",
    "EndpointDispatcher",
]
