"""Text filters applied to ai messages before display."""

import re


def markdown_to_html(text: str) -> str:
    """Convert the markdown subset used by the model to HTML.

    Supports: bold, italic, line breaks. HTML in the input is escaped.
    """
    # Escape HTML entities first
    text = text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")

    # Bold (**text**)
    text = re.sub(r"\*\*(.*?)\*\*", r"<strong>\1</strong>", text)

    # Italic (*text*)
    text = re.sub(r"\*(.*?)\*", r"<em>\1</em>", text)

    # Line breaks (preserve newlines as <br>)
    text = text.replace("\n", "<br>")

    return text
