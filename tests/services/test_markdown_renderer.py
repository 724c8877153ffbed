from app.services.markdown_renderer import render_markdown


def test_render_heading_and_paragraph():
    html = render_markdown("# Title\n\nHello *world*")
    assert "<h1>Title</h1>" in html
    assert "<em>world</em>" in html


def test_single_newlines_become_breaks():
    html = render_markdown("line one\nline two")
    assert "<br" in html


def test_fenced_code_block():
    html = render_markdown("```python\nprint('hi')\n```")
    assert "<code" in html
    assert "print(&#x27;hi&#x27;)" in html or "print('hi')" in html


def test_tables():
    html = render_markdown("| a | b |\n|---|---|\n| 1 | 2 |")
    assert "<table>" in html


def test_empty_input():
    assert render_markdown("") == ""
    assert render_markdown(None) == ""
