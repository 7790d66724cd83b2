"""HTML escaping for interpolated story content."""

from __future__ import annotations

import json
from typing import Any

_HTML_ESCAPES: dict[int, str] = {
    ord("&"): "&amp;",
    ord("<"): "&lt;",
    ord(">"): "&gt;",
    ord('"'): "&quot;",
    ord("'"): "&#39;",
}


def escape_html(value: Any) -> str:
    """Escape ``& < > " '`` for use in element text or a quoted attribute.

    None becomes an empty string; other values are converted with ``str``.
    """
    if value is None:
        return ""
    return str(value).translate(_HTML_ESCAPES)


def nl2br(escaped: str) -> str:
    """Turn newlines into ``<br>`` in already-escaped text."""
    return escaped.replace("\n", "<br>")


def json_for_script(data: Any) -> str:
    """Serialize data for an inline ``<script>`` block.

    ``<``, ``>`` and ``&`` are written as JSON unicode escapes so text in the
    data can neither close the script nor open a comment inside it.
    """
    return (
        json.dumps(data, indent=2, ensure_ascii=False)
        .replace("<", "\\u003c")
        .replace(">", "\\u003e")
        .replace("&", "\\u0026")
    )
