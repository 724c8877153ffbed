import logging
import shutil
from pathlib import Path
from typing import List

from app.services.page_renderer import PageRenderer
from app.services.posts_service import PostsService

logger = logging.getLogger(__name__)


class SiteBuilder:
    """
    Static export of the blog.

    Layout::

        <dist>/index.html
        <dist>/blog/index.html
        <dist>/blog/<slug>/index.html
    """

    def __init__(self, service: PostsService, renderer: PageRenderer, dist_dir: Path):
        self.service = service
        self.renderer = renderer
        self.dist_dir = Path(dist_dir)

    def build(self) -> List[Path]:
        """Rebuild the whole site from scratch and return the files written."""
        shutil.rmtree(self.dist_dir, ignore_errors=True)
        blog_dir = self.dist_dir / "blog"
        blog_dir.mkdir(parents=True, exist_ok=True)

        entries = self.service.list_entries()
        index_html = self.renderer.render_index(entries, static=True)

        written = [
            self._write(self.dist_dir / "index.html", index_html),
            self._write(blog_dir / "index.html", index_html),
        ]

        for page in self.service.get_pages():
            post_dir = blog_dir / page.slug
            post_dir.mkdir(parents=True, exist_ok=True)
            written.append(
                self._write(
                    post_dir / "index.html",
                    self.renderer.render_post(page, static=True),
                )
            )

        logger.info(f"Built {len(entries)} posts to {self.dist_dir}/")
        for path in written:
            logger.info(f"  - {path}")
        return written

    @staticmethod
    def _write(path: Path, html: str) -> Path:
        path.write_text(html, encoding="utf-8")
        return path
