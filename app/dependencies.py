from fastapi import Depends

from app.repos.posts_repo import FilePostsRepo
from app.services.page_renderer import PageRenderer
from app.services.posts_service import PostsService
from app.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilePostsRepo(current_settings.markdown_path, current_settings.html_path)


def get_posts_service(
    repo=Depends(get_posts_repo),
    current_settings: Settings = Depends(get_settings),
):
    return PostsService(repo=repo, excerpt_length=current_settings.EXCERPT_LENGTH)


def get_page_renderer(current_settings: Settings = Depends(get_settings)):
    return PageRenderer(
        css_path=current_settings.BLOG_CSS_PATH,
        blog_title=current_settings.BLOG_TITLE,
        excerpt_length=current_settings.EXCERPT_LENGTH,
    )
