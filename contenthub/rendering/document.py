"""Assemble a standalone HTML document from a source bundle.

Markup, styles and script are inserted verbatim. Author code is the product,
so nothing here escapes it; isolation is the job of the sandboxed iframe
that displays the result (see :mod:`contenthub.rendering.sandbox`).
"""

from __future__ import annotations

import html
import re
from typing import Optional

from .models import RenderMode, SourceBundle

DOCUMENT_WRAPPER_PATTERN = re.compile(
    r"<!DOCTYPE[^>]*>"
    r"|<html\b[^>]*>"
    r"|</html\s*>"
    r"|<head\b[^>]*>.*?</head\s*>"
    r"|<body\b[^>]*>"
    r"|</body\s*>",
    re.IGNORECASE | re.DOTALL,
)

DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
{title}<style>{styles}</style>
</head>
<body>
{markup}
<script>{script}</script>
</body>
</html>"""

CARD_BASE_STYLES = "body { margin: 0; overflow: hidden; background: white; }"
CARD_SCALE_STYLES = "body { transform: scale(0.5); transform-origin: top left; width: 200%; height: 200%; }"
CARD_GUARD_SCRIPT = (
    "document.addEventListener('click', e => e.preventDefault(), true);\n"
    "document.addEventListener('submit', e => e.preventDefault(), true);"
)


def strip_document_wrappers(markup: str) -> str:
    """Drop doctype, ``<html>``, ``<head>…</head>`` and ``<body>`` tags from a fragment."""
    if not markup:
        return ""
    return DOCUMENT_WRAPPER_PATTERN.sub("", markup)


def _join(*parts: str) -> str:
    return "\n".join(part for part in parts if part)


def assemble_document(
    bundle: SourceBundle,
    mode: RenderMode = RenderMode.PREVIEW,
    title: Optional[str] = None,
) -> str:
    markup = bundle.markup
    styles = bundle.styles
    script = bundle.script

    if mode is RenderMode.PREVIEW:
        markup = strip_document_wrappers(markup)
    elif mode is RenderMode.CARD:
        markup = strip_document_wrappers(markup)
        styles = _join(CARD_BASE_STYLES, styles, CARD_SCALE_STYLES)
        script = _join(CARD_GUARD_SCRIPT, script)
    elif mode is not RenderMode.PUBLISHED:
        raise ValueError(f"unsupported render mode: {mode!r}")

    title_tag = f"<title>{html.escape(title)}</title>\n" if title else ""
    return DOCUMENT_TEMPLATE.format(
        title=title_tag,
        styles=styles,
        markup=markup,
        script=script,
    )


__all__ = ["assemble_document", "strip_document_wrappers"]
