"""Session abstract formatting.

Converts a plain-text abstract into paragraph markup that is safe to embed
in a page.

The whole text is escaped before it is split. The paragraph delimiter is
then looked up in its escaped form, so the only unescaped markup in the
output is the ``<p>``/``</p>`` pairs added here.

The escaper is supplied by the caller (``html.escape`` or a
template engine.s escape filter).

Usage:
    import html

    markup = format_abstract(session.abstract, html.escape)
"""

from collections.abc import Callable

from src.core.constants import PARAGRAPH_CLOSE, PARAGRAPH_DELIMITER, PARAGRAPH_OPEN

type TextEscaper = Callable[[str], str]
"""Escapes HTML-significant characters in a string."""


def format_abstract(abstract: str | None, escape: TextEscaper) -> str | None:
    """Render a raw abstract as escaped ``<p>`` paragraphs.

    Args:
        abstract: Raw abstract; CR/LF separates paragraphs.
        escape: Escaping function applied to the raw text.

    Returns:
        Concatenated ``<p>...</p>`` markup, or None for an empty abstract.

    Example:
        >>> format_abstract("A\\r\\nB", html.escape)
        '<p>A</p><p>B</p>'
    """
    if not abstract:
        return None

    escaped = escape(abstract)
    escaped_delimiter = escape(PARAGRAPH_DELIMITER)

    return "".join(
        f"{PARAGRAPH_OPEN}{paragraph}{PARAGRAPH_CLOSE}"
        for paragraph in escaped.split(escaped_delimiter)
        if paragraph
    )
