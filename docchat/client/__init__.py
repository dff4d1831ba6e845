"""Generation backend client.

Responsibilities:
    - Backend configuration from environment (API key, model, endpoint)
    - One non-streaming generateContent call per outgoing turn
    - Defensive decoding of the response into a tagged result

Maintains clean separation from session state and the HTTP layer.
"""

from docchat.client.completion import (
    CompletionClient,
    CompletionError,
    CompletionReply,
    CompletionResult,
)
from docchat.client.config import BackendConfig, get_backend_config

__all__ = [
    "BackendConfig",
    "CompletionClient",
    "CompletionError",
    "CompletionReply",
    "CompletionResult",
    "get_backend_config",
]
