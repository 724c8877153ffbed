import markdown

# Matches the editor preview: fenced code, tables and single newlines as <br>.
MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "sane_lists", "nl2br"]


def render_markdown(text: str) -> str:
    return markdown.markdown(text or "", extensions=MARKDOWN_EXTENSIONS)
