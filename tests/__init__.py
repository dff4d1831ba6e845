"""Test package for DocChat.

Structure:
    - unit/: Individual function and class tests
    - integration/: HTTP API workflow tests

PDFs are generated in fixtures with pypdf; the generation backend is an
httpx MockTransport. Leverages pytest with pytest-check for soft assertions.
"""
