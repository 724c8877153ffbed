import datetime
import logging
from typing import Callable, List, Optional

from app.schemas.blog import BlogEntry, LoadResponse, PostListItem, PostPage, SaveResponse
from app.services.content_parser import (
    display_name,
    extract_date,
    extract_excerpt,
    extract_title,
    resolve_base_name,
    slug_from_filename,
)
from app.services.markdown_renderer import render_markdown

logger = logging.getLogger(__name__)


def utc_today() -> datetime.date:
    return datetime.datetime.now(datetime.timezone.utc).date()


class PostsService:
    def __init__(
        self,
        repo,
        renderer: Callable[[str], str] = render_markdown,
        today: Callable[[], datetime.date] = utc_today,
        excerpt_length: int = 200,
    ):
        self.repo = repo
        self.renderer = renderer
        self.today = today
        self.excerpt_length = excerpt_length

    def list_posts(self) -> List[PostListItem]:
        """Editor listing: filename, display name and date, newest first."""
        posts = []
        for filename in self.repo.list_markdown_files():
            content = self.repo.read_markdown(filename)
            if content is None:
                logger.warning(f"Post {filename} disappeared while listing")
                continue
            posts.append(
                PostListItem(
                    filename=filename,
                    name=extract_title(content) or display_name(filename),
                    date=extract_date(filename),
                )
            )
        return _newest_first(posts)

    def list_entries(self) -> List[BlogEntry]:
        """Blog index entries: title, date, slug and excerpt, newest first."""
        entries = []
        for filename in self.repo.list_markdown_files():
            content = self.repo.read_markdown(filename)
            if content is None:
                logger.warning(f"Post {filename} disappeared while listing")
                continue
            entries.append(self._entry(filename, content))
        return _newest_first(entries)

    def load_post(self, filename: str) -> Optional[LoadResponse]:
        content = self.repo.read_markdown(filename)
        if content is None:
            return None
        return LoadResponse(content=content)

    def get_post(self, slug: str) -> Optional[PostPage]:
        content = self.repo.read_markdown(f"{slug}.md")
        if content is None:
            return None
        return self._page(slug, content)

    def get_pages(self) -> List[PostPage]:
        """Rendered pages for every post, newest first."""
        pages = []
        for filename in self.repo.list_markdown_files():
            content = self.repo.read_markdown(filename)
            if content is None:
                continue
            pages.append(self._page(slug_from_filename(filename), content))
        return _newest_first(pages)

    def save_post(
        self,
        filename: str,
        markdown: str,
        html: Optional[str] = None,
        existing_filename: Optional[str] = None,
    ) -> SaveResponse:
        """
        Persist markdown and its rendered HTML.

        A new post gets ``<today>-<safe filename>``; saving with
        ``existing_filename`` rewrites that post in place.
        """
        base_name = resolve_base_name(filename, existing_filename, self.today())
        if html is None:
            html = self.renderer(markdown)

        files = self.repo.write_post(base_name, markdown, html)
        return SaveResponse(success=True, filename=f"{base_name}.md", files=files)

    def _entry(self, filename: str, content: str) -> BlogEntry:
        slug = slug_from_filename(filename)
        return BlogEntry(
            title=extract_title(content) or slug,
            date=extract_date(filename),
            slug=slug,
            excerpt=extract_excerpt(content, self.excerpt_length),
        )

    def _page(self, slug: str, content: str) -> PostPage:
        return PostPage(
            slug=slug,
            title=extract_title(content) or slug,
            date=extract_date(slug),
            html=self.renderer(content),
        )


def _newest_first(items):
    return sorted(items, key=lambda item: item.date, reverse=True)
