"""FastAPI endpoints for the document chat session.

Endpoints:
    - GET /health: Service health status
    - GET /session: Current messages and busy state
    - POST /session/new: Start a new chat
    - POST /chat: Send a user message and get the reply
    - POST /upload/pdf: Attach a PDF to the conversation
"""

from docchat.api.app import create_app

__all__ = ["create_app"]
