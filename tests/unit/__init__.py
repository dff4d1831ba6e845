"""Unit tests for individual components in isolation.

Coverage:
    - parsing/: PDF text extraction and MIME checks
    - chat/: message store, request assembly, session state machine
    - client/: backend configuration and response decoding
    - ui/: markdown filter

The generation backend is stubbed at the transport level.
"""
