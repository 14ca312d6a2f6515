"""Minimal Markdown-to-HTML conversion for synthesized prompts."""

from __future__ import annotations

import re

from markupsafe import escape

# Applied in order; headings must run before emphasis so "### **x**" still nests.
_RULES = (
    (re.compile(r"^### (.*)$", re.MULTILINE), r"<h3>\1</h3>"),
    (re.compile(r"^## (.*)$", re.MULTILINE), r"<h2>\1</h2>"),
    (re.compile(r"^# (.*)$", re.MULTILINE), r"<h1>\1</h1>"),
    (re.compile(r"\*\*(.+?)\*\*"), r"<strong>\1</strong>"),
    (re.compile(r"\*(.+?)\*"), r"<em>\1</em>"),
    (re.compile(r"^- (.*)$", re.MULTILINE), r"<li>\1</li>"),
)


def render_markdown(text: str) -> str:
    """Render headings, bold, italics and dash lists; newlines become <br />.

    The input is HTML-escaped first, so model output cannot inject markup.
    """
    html = str(escape(text or ""))
    for pattern, replacement in _RULES:
        html = pattern.sub(replacement, html)
    return html.replace("\n", "<br />")
