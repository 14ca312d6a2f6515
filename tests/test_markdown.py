from __future__ import annotations

from promptforge.utils.markdown import render_markdown


def test_headings_and_emphasis():
    text = "# Title\n## Section\n### **Detail**\nSome *soft* and **strong** words"

    assert render_markdown(text) == (
        "<h1>Title</h1><br /><h2>Section</h2><br /><h3><strong>Detail</strong></h3><br />"
        "Some <em>soft</em> and <strong>strong</strong> words"
    )


def test_dash_lists_become_items():
    assert render_markdown("- one\n- two") == "<li>one</li><br /><li>two</li>"


def test_emphasis_is_not_greedy():
    assert render_markdown("**a** and **b**") == "<strong>a</strong> and <strong>b</strong>"


def test_markup_in_model_output_is_escaped():
    html = render_markdown("<script>alert(1)</script> **hi**")

    assert "<script>" not in html
    assert html.startswith("&lt;script&gt;")
    assert html.endswith("<strong>hi</strong>")


def test_empty_input():
    assert render_markdown("") == ""
