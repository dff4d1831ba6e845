"""Client for the Gemini generateContent endpoint.

Failures never propagate to the caller. Every call returns either a
``CompletionReply`` or a ``CompletionError`` and the session decides what the
user sees.
"""

import logging
from typing import Any, Literal

import httpx
from pydantic import BaseModel, ValidationError

from docchat.client.config import BackendConfig, get_backend_config
from docchat.models.schemas import OutgoingRequest

logger = logging.getLogger(__name__)

UNPARSEABLE_REPLY = "Sorry, I couldn't understand that."


class CompletionReply(BaseModel):
    """Reply text of a successful call."""

    kind: Literal["reply"] = "reply"
    text: str


class CompletionError(BaseModel):
    """Transport or decoding failure of a call."""

    kind: Literal["error"] = "error"
    reason: str


CompletionResult = CompletionReply | CompletionError


class _ResponsePart(BaseModel):
    text: str | None = None


class _ResponseContent(BaseModel):
    parts: list[Any] = []


class _Candidate(BaseModel):
    content: Any = None


class _GenerateContentResponse(BaseModel):
    candidates: list[Any] = []


def _decode(model: type[BaseModel], value: Any) -> Any:
    # Only the entry on the reply path is validated, never its siblings.
    try:
        return model.model_validate(value)
    except ValidationError:
        return None


def parse_reply(payload: Any) -> str | None:
    """Extract ``candidates[0].content.parts[0].text`` from a response body.

    Each step of the path is decoded on its own, so malformed entries the
    path does not go through are ignored.

    Args:
        payload: Decoded JSON body of any shape.

    Returns:
        The trimmed reply text, or None if the path is absent, empty, or not
        of the expected types.
    """
    response = _decode(_GenerateContentResponse, payload)
    if response is None or not response.candidates:
        return None
    candidate = _decode(_Candidate, response.candidates[0])
    if candidate is None or candidate.content is None:
        return None
    content = _decode(_ResponseContent, candidate.content)
    if content is None or not content.parts:
        return None
    part = _decode(_ResponsePart, content.parts[0])
    if part is None:
        return None
    text = part.text
    if text is None or not text.strip():
        return None
    return text.strip()


class CompletionClient:
    """Sends assembled requests to the generation endpoint.

    Args:
        config: Backend configuration. Loads from environment if not provided.
        transport: Optional httpx transport, used to stub the backend.
    """

    def __init__(
        self,
        config: BackendConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or get_backend_config()
        self._transport = transport

    @property
    def fallback_text(self) -> str:
        """Message shown when the backend cannot be reached."""
        return f"Error contacting {self._config.backend_name}."

    async def complete(self, request: OutgoingRequest) -> CompletionResult:
        """Perform one generateContent call.

        Args:
            request: The assembled request.

        Returns:
            CompletionReply with the reply (or the fixed "couldn't understand"
            text when the response has no reply), or CompletionError on
            transport failure, malformed JSON, or any other exception.
        """
        try:
            async with httpx.AsyncClient(
                transport=self._transport, timeout=self._config.timeout
            ) as client:
                response = await client.post(
                    self._config.endpoint,
                    params={"key": self._config.api_key},
                    json=request.model_dump(by_alias=True),
                )
            if response.is_error:
                logger.warning(
                    f"{self._config.backend_name} returned HTTP {response.status_code}"
                )
            payload = response.json()
        except httpx.HTTPError as e:
            logger.warning(f"Request to {self._config.backend_name} failed: {e}")
            return CompletionError(reason=f"Connection failed: {e}")
        except ValueError as e:
            logger.warning(f"Malformed response from {self._config.backend_name}: {e}")
            return CompletionError(reason=f"Malformed response: {e}")
        except Exception as e:
            logger.exception(f"Unexpected error contacting {self._config.backend_name}")
            return CompletionError(reason=str(e))

        text = parse_reply(payload)
        if text is None:
            logger.warning("Response did not contain a reply text")
            return CompletionReply(text=UNPARSEABLE_REPLY)

        logger.info(f"Received reply ({len(text)} chars)")
        return CompletionReply(text=text)
