import logging
import sys

from app.repos.posts_repo import FilePostsRepo
from app.services.page_renderer import PageRenderer
from app.services.posts_service import PostsService
from app.services.site_builder import SiteBuilder
from app.settings import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> int:
    repo = FilePostsRepo(settings.markdown_path, settings.html_path, create=False)
    service = PostsService(repo=repo, excerpt_length=settings.EXCERPT_LENGTH)
    renderer = PageRenderer(
        css_path=settings.BLOG_CSS_PATH,
        blog_title=settings.BLOG_TITLE,
        excerpt_length=settings.EXCERPT_LENGTH,
    )
    try:
        SiteBuilder(service, renderer, settings.dist_path).build()
    except Exception as e:
        logger.error(f"Static build failed: {e}", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
