#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/plaintify/utils/escape.py
"""Text escaping utilities for literal content.

Code blocks and raw HTML are emitted as literal text. Their content is
HTML-escaped so the plain text output can be embedded in HTML contexts
without being interpreted as markup.

"""

from __future__ import annotations

import re

from plaintify.constants import HTML_ESCAPE_MAP

_HTML_ESCAPE_RE = re.compile("[" + re.escape("".join(HTML_ESCAPE_MAP)) + "]")


def escape_html(text: str) -> str:
    """Escape HTML special characters in text.

    Replaces ``&``, ``<``, ``>``, ``"`` and ``'`` with their entities in a
    single pass. Applying it twice escapes the ampersands of the first pass
    again, so callers escape raw text exactly once.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text

    Examples
    --------
        >>> escape_html('<a href="x">Tom & Jerry\\'s</a>')
        '&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&#39;s&lt;/a&gt;'

    """
    if not text:
        return text
    return _HTML_ESCAPE_RE.sub(lambda match: HTML_ESCAPE_MAP[match.group(0)], text)


__all__ = ["escape_html"]
