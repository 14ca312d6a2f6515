from __future__ import annotations

import pytest

from promptforge.services.preview_service import FAILURE_MESSAGE, check_preview, highlight_language


@pytest.mark.parametrize(
    "language, expected",
    [("React", "jsx"), ("Vue", "vue"), ("HTML", "xml"), ("Python", "python")],
)
def test_highlight_language_mapping(language, expected):
    assert highlight_language(language) == expected


def test_rendered_html_shows_preview():
    result = check_preview("<html><body><main><p>Hi</p></main></body></html>", "HTML")

    assert result.status == "ok"
    assert result.default_tab == "preview"
    assert result.actions == []


@pytest.mark.parametrize(
    "code",
    [
        "<!DOCTYPE html><html><head></head><body></body></html>",
        "Here is your page, but I forgot the markup.",
        "<html>\n  <body>\n  </body>\n</html>",
    ],
)
def test_empty_documents_fall_back(code):
    result = check_preview(code, "HTML")

    assert result.status == "failed"
    assert result.message == FAILURE_MESSAGE
    assert result.to_dict()["actions"] == ["view-code", "regenerate"]


def test_frameworks_are_not_previewed():
    result = check_preview("<template><div>Hi</div></template>", "Vue")

    assert result.status == "not_applicable"
    assert result.default_tab == "code"
    assert result.to_dict()["highlightLanguage"] == "vue"


def test_blank_code_is_not_a_failure():
    assert check_preview("", "HTML").status == "ok"
