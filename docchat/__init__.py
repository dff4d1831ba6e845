"""DocChat - chat with a generative-text backend about an attached PDF.

Combines FastAPI for HTTP endpoints, NiceGUI for visualization, httpx for the
Gemini API, pypdf for text extraction, and Pydantic for data validation.

Components:
    - chat: message history, context assembly, session state machine
    - client: generation backend configuration and HTTP client
    - parsing: PDF text extraction
    - api: HTTP endpoints over a session controller
    - ui: Web interface for chat interactions
    - models: Data and request/response schemas
"""

__version__ = "0.1.0"
