"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Chat message display with a typing indicator while a reply is awaited
    - PDF upload button
    - New chat button, dark/light theme toggle, random user avatar

Contains no business logic. Delegates all operations to a SessionController
and re-renders from its snapshots.
"""
