"""Best-effort check that generated HTML renders something visible.

A browser preview loads the markup into an isolated document; when the model
emits nothing but text, fences or a truncated shell, the document ends up with
empty ``<head>`` and ``<body>`` containers. We approximate that by parsing the
markup and looking for any element other than the html/head/body scaffolding.
The heuristic accepts broken-but-non-empty output and cannot tell an
intentionally blank page from a failed one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from bs4 import BeautifulSoup

_LOGGER = logging.getLogger(__name__)

PREVIEW_LANGUAGE = "HTML"
SCAFFOLD_TAGS = {"html", "head", "body"}
FALLBACK_ACTIONS = ["view-code", "regenerate"]
FAILURE_MESSAGE = (
    "The live preview could not be rendered. This often happens if the generated "
    "HTML is incomplete or contains errors."
)


@dataclass
class PreviewResult:
    status: str  # "ok", "failed" or "not_applicable"
    default_tab: str
    highlight_language: str
    message: str = ""
    actions: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "defaultTab": self.default_tab,
            "highlightLanguage": self.highlight_language,
            "message": self.message,
            "actions": list(self.actions),
        }


def highlight_language(language: str) -> str:
    """Map a target label to the syntax highlighter's language name."""
    lowered = language.lower()
    return {"react": "jsx", "vue": "vue", "html": "xml"}.get(lowered, lowered)


def has_rendered_content(code: str) -> bool:
    soup = BeautifulSoup(code, "html.parser")
    return soup.find(lambda tag: tag.name not in SCAFFOLD_TAGS) is not None


def check_preview(code: str, language: str) -> PreviewResult:
    """Decide whether the live preview for ``code`` should fall back."""
    lang = highlight_language(language)
    if language != PREVIEW_LANGUAGE:
        return PreviewResult(status="not_applicable", default_tab="code", highlight_language=lang)

    if not code or not code.strip():
        return PreviewResult(status="ok", default_tab="preview", highlight_language=lang)

    try:
        rendered = has_rendered_content(code)
    except Exception:  # pragma: no cover - parser failures count as an uninspectable preview
        _LOGGER.warning("Unable to inspect generated HTML preview", exc_info=True)
        rendered = False

    if rendered:
        return PreviewResult(status="ok", default_tab="preview", highlight_language=lang)
    return PreviewResult(
        status="failed",
        default_tab="preview",
        highlight_language=lang,
        message=FAILURE_MESSAGE,
        actions=list(FALLBACK_ACTIONS),
    )
