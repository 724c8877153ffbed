import logging
from pathlib import Path
from typing import Iterable, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from app.schemas.blog import BlogEntry, PostPage

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


class PageRenderer:
    """
    Renders the blog index and post pages.

    The same templates back the live ``/blog`` views and the static export;
    callers choose the link layout (``/blog/<slug>`` vs ``/blog/<slug>/``)
    and which back links appear.
    """

    def __init__(
        self,
        css_path: Path | str,
        blog_title: str = "Blog",
        excerpt_length: int = 200,
        env: Optional[Environment] = None,
    ):
        self.css_path = Path(css_path)
        self.blog_title = blog_title
        self.excerpt_length = excerpt_length
        self.env = env or Environment(
            loader=FileSystemLoader(str(TEMPLATES_DIR)),
            autoescape=select_autoescape(),
        )
        self._css: Optional[str] = None

    @property
    def css(self) -> str:
        if self._css is None:
            try:
                self._css = self.css_path.read_text(encoding="utf-8")
            except FileNotFoundError:
                logger.warning(f"Blog stylesheet not found at {self.css_path}")
                self._css = ""
        return self._css

    def render_index(
        self,
        entries: Iterable[BlogEntry],
        *,
        static: bool = False,
    ) -> str:
        if static:
            post_href = "/blog/{}/".format
            back_href, back_label = None, None
            empty_message = "No posts yet."
        else:
            post_href = "/blog/{}".format
            back_href, back_label = "/", "Back to writer"
            empty_message = "No posts yet. Start writing!"

        template = self.env.get_template("blog_index.html")
        return template.render(
            blog_title=self.blog_title,
            entries=list(entries),
            excerpt_length=self.excerpt_length,
            post_href=post_href,
            back_href=back_href,
            back_label=back_label,
            empty_message=empty_message,
        )

    def render_post(self, post: PostPage, *, static: bool = False) -> str:
        template = self.env.get_template("post.html")
        return template.render(
            post=post,
            css=self.css,
            back_href="/" if static else "/blog",
        )
