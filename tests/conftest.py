import datetime
import textwrap

import pytest

from app.repos.posts_repo import FilePostsRepo
from app.schemas.blog import SaveResponse
from app.services.posts_service import PostsService

FIXED_DAY = datetime.date(2025, 1, 15)


class FakeRepo:
    """
    Minimal in-memory repo stand-in used in service tests.
    """

    def __init__(self, files: dict[str, str] | None = None):
        self.files = {
            name: textwrap.dedent(content).lstrip()
            for name, content in (files or {}).items()
        }
        self.html = {}
        self.writes = []

    def list_markdown_files(self):
        return list(self.files)

    def read_markdown(self, filename):
        return self.files.get(filename)

    def write_post(self, base_name, markdown, html):
        self.writes.append(base_name)
        self.files[f"{base_name}.md"] = markdown
        self.html[f"{base_name}.html"] = html
        return {
            "markdown": f"markdown/{base_name}.md",
            "html": f"posts/{base_name}.html",
        }


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(
        self,
        list_posts_return=None,
        list_entries_return=None,
        load_post_return=None,
        get_post_return=None,
    ):
        self._list_posts_return = list_posts_return or []
        self._list_entries_return = list_entries_return or []
        self._load_post_return = load_post_return
        self._get_post_return = get_post_return
        self.saved = []

    def list_posts(self):
        return self._list_posts_return

    def list_entries(self):
        return self._list_entries_return

    def load_post(self, filename: str):
        return self._load_post_return

    def get_post(self, slug: str):
        return self._get_post_return

    def save_post(self, filename, markdown, html=None, existing_filename=None):
        self.saved.append((filename, markdown, html, existing_filename))
        base = (existing_filename or f"2025-01-15-{filename}.md").removesuffix(".md")
        return SaveResponse(
            success=True,
            filename=f"{base}.md",
            files={"markdown": f"markdown/{base}.md", "html": f"posts/{base}.html"},
        )


@pytest.fixture
def file_repo(tmp_path):
    return FilePostsRepo(tmp_path / "markdown", tmp_path / "posts")


@pytest.fixture
def file_service(file_repo):
    return PostsService(repo=file_repo, today=lambda: FIXED_DAY)
