"""Integration tests for components working together as a system.

Coverage:
    - API endpoints through ASGITransport
    - Upload followed by chat, checking the request sent to the backend

The generation backend is a MockTransport, so no API key is required.
"""
