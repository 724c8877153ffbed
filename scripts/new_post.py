#!/usr/bin/env python3
"""
Start a new dated post from a title.

    python -m scripts.new_post My First Post
"""

import logging
import sys

from app.repos.posts_repo import FilePostsRepo
from app.services.content_parser import build_base_name, title_to_filename
from app.services.posts_service import PostsService
from app.settings import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def new_post(title: str, service: PostsService) -> str:
    if not title.strip():
        raise ValueError("Title cannot be empty")

    markdown = f"# {title.strip()}\n\n"
    filename = title_to_filename(markdown)
    target = f"{build_base_name(filename, service.today())}.md"
    if service.load_post(target) is not None:
        raise FileExistsError(f"Post already exists: {target}")

    saved = service.save_post(
        filename=filename, markdown=markdown, existing_filename=target
    )
    return saved.filename


def main(argv: list[str]) -> int:
    repo = FilePostsRepo(settings.markdown_path, settings.html_path)
    service = PostsService(repo=repo, excerpt_length=settings.EXCERPT_LENGTH)
    try:
        created = new_post(" ".join(argv), service)
    except (ValueError, FileExistsError) as e:
        logger.error(str(e))
        return 1
    logger.info(f"Created {settings.markdown_path / created}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
