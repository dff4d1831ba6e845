"""Backend configuration with environment variable loading.

Pydantic-based configuration for the Gemini generateContent client.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()


class BackendConfig(BaseModel):
    """Configuration for the generation backend.

    Attributes:
        api_key: API key, sent as the ``key`` query parameter.
        base_url: API base URL up to the API version.
        model_name: Model identifier to use.
        backend_name: Display name used in the error fallback message.
        timeout: Request timeout in seconds.
    """

    model_config = ConfigDict(validate_default=True)

    api_key: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY", os.getenv("LLM_API_KEY", "")),
        description="API key for the generation backend",
    )
    base_url: str = Field(
        default_factory=lambda: os.getenv(
            "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
        ),
        description="API base URL",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", "gemini-2.0-flash-lite"),
        description="Model to use",
    )
    backend_name: str = Field(
        default_factory=lambda: os.getenv("BACKEND_NAME", "Gemini"),
        description="Backend name shown when the backend cannot be reached",
    )
    timeout: float = Field(
        default_factory=lambda: float(os.getenv("LLM_TIMEOUT", "60")),
        gt=0.0,
        description="Request timeout in seconds",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError("API key required. Set GEMINI_API_KEY in .env")
        return v.strip()

    @property
    def endpoint(self) -> str:
        return f"{self.base_url.rstrip('/')}/models/{self.model_name}:generateContent"


def get_backend_config() -> BackendConfig:
    """Create backend configuration from environment.

    Returns:
        Configured BackendConfig instance.

    Raises:
        ValueError: If no API key is set.
    """
    return BackendConfig()
