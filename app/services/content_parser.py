import datetime
import re
from typing import Optional

TITLE_PATTERN = re.compile(r"^#\s+(.+)$", re.MULTILINE)
DATE_PREFIX_PATTERN = re.compile(r"^(\d{4}-\d{2}-\d{2})")
DATED_STEM_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}-")
UNSAFE_CHARS_PATTERN = re.compile(r"[^a-zA-Z0-9\-_]")
WHITESPACE_PATTERN = re.compile(r"\s+")

MARKDOWN_SUFFIX = ".md"
EXCERPT_SKIP_PREFIXES = ("#", ">", "*")


def extract_title(markdown: str) -> Optional[str]:
    """Return the text of the first level-one heading, if any."""
    match = TITLE_PATTERN.search(markdown or "")
    return match.group(1) if match else None


def extract_date(filename: str) -> str:
    """Return the ``YYYY-MM-DD`` prefix of a post filename, or ``""``."""
    match = DATE_PREFIX_PATTERN.match(filename or "")
    return match.group(1) if match else ""


def extract_excerpt(markdown: str, limit: int = 200) -> str:
    """
    First line of body text: skips blank lines, headings, blockquotes and
    emphasis-led lines such as an italic byline.
    """
    for line in (markdown or "").split("\n"):
        if not line.strip():
            continue
        if line.lstrip().startswith(EXCERPT_SKIP_PREFIXES):
            continue
        return line[:limit]
    return ""


def slug_from_filename(filename: str) -> str:
    return filename.removesuffix(MARKDOWN_SUFFIX)


def display_name(filename: str) -> str:
    """Human-readable fallback title built from a post filename."""
    stem = DATED_STEM_PATTERN.sub("", filename, count=1)
    return slug_from_filename(stem).replace("-", " ")


def safe_name(name: str) -> str:
    return UNSAFE_CHARS_PATTERN.sub("-", name)


def title_to_filename(markdown: str) -> str:
    """The name an editor client submits for a new post."""
    title = extract_title(markdown) or "untitled"
    return WHITESPACE_PATTERN.sub("-", title.lower())


def build_base_name(name: str, day: datetime.date) -> str:
    return f"{day.isoformat()}-{safe_name(name)}"


def resolve_base_name(
    name: str, existing_filename: Optional[str], day: datetime.date
) -> str:
    """Reuse an existing post's stem, otherwise build a dated one."""
    if existing_filename:
        return slug_from_filename(existing_filename)
    return build_base_name(name, day)
