"""
Text utilities for templates: HTML escaping and paragraph truncation.
"""

from xml.sax.saxutils import escape

PARAGRAPH_END = '</p>'


def escape_html(text):
    """
    Escape brackets and ampersands.

    Falsy values (``None``, ``''``) are returned unchanged.
    """
    return text and escape(text)


def truncate_paragraphs(text, length, more_text):
    """
    Truncate HTML based on paragraph counts.

    Args:
        text: HTML using ``</p>`` as the paragraph delimiter
        length: Number of paragraphs to keep
        more_text: Text to append when truncated

    Returns:
        The original text when it splits into fewer than ``length`` segments,
        otherwise the first ``length`` segments followed by ``more_text``.
    """
    segments = text.split(PARAGRAPH_END)
    if len(segments) < length:
        return text
    return PARAGRAPH_END.join(segments[:length]) + PARAGRAPH_END + more_text
