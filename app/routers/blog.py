import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse

from app import dependencies as deps
from app.services.page_renderer import PageRenderer
from app.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/blog", response_class=HTMLResponse)
def blog_index(
    service: PostsService = Depends(deps.get_posts_service),
    renderer: PageRenderer = Depends(deps.get_page_renderer),
):
    try:
        return renderer.render_index(service.list_entries())
    except Exception as e:
        logger.error(f"Unexpected error rendering blog index: {e}")
        raise HTTPException(status_code=500, detail="Failed to render blog")


@router.get("/blog/{slug}", response_class=HTMLResponse)
def blog_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
    renderer: PageRenderer = Depends(deps.get_page_renderer),
):
    try:
        post = service.get_post(slug)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return renderer.render_post(post)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error rendering post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to render post")
