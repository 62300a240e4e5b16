"""
Input Sanitization Module

Cleans free-text fields (names, descriptions, categories) before they
are stored. Text is kept literal; escaping for HTML belongs to whatever
renders it, so a value read back and saved again is unchanged.
"""

import re


def sanitize_text(text, max_length=255):
    """
    Sanitize text by trimming it and dropping control characters.

    Args:
        text: The text to sanitize (can be None)
        max_length: Maximum allowed length (default 255)

    Returns:
        Sanitized string, truncated if necessary
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    # Remove control characters and null bytes
    text = re.sub(r'[\x00-\x1f\x7f-\x9f]', '', text)

    # Strip leading/trailing whitespace
    text = text.strip()

    # Truncate if too long
    if len(text) > max_length:
        text = text[:max_length].rstrip()

    return text


def sanitize_name(name, max_length=255):
    """
    Sanitize an ingredient, recipe or dish name.

    Same as sanitize_text but also collapses runs of whitespace.
    Returns an empty string when nothing is left after cleaning.
    """
    name = sanitize_text(name, max_length=max_length)
    return re.sub(r'\s+', ' ', name)
