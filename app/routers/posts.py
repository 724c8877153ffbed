import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app import dependencies as deps
from app.schemas.blog import LoadResponse, PostListItem, SaveRequest, SaveResponse
from app.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.get("/posts", response_model=List[PostListItem])
def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Saved posts for the editor's load dialog, newest first."""
    try:
        return service.list_posts()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/load/{filename}", response_model=LoadResponse)
def load_post(
    filename: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Raw markdown of a saved post."""
    try:
        post = service.load_post(filename)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error loading post {filename}: {e}")
        raise HTTPException(status_code=500, detail="Failed to load post")


@router.post("/save", response_model=SaveResponse)
def save_post(
    request: SaveRequest,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Create a dated post, or overwrite the one named by existingFilename."""
    if not request.filename:
        raise HTTPException(status_code=400, detail="Filename required")
    if request.markdown is None:
        raise HTTPException(status_code=400, detail="Markdown required")

    try:
        return service.save_post(
            filename=request.filename,
            markdown=request.markdown,
            html=request.html,
            existing_filename=request.existingFilename,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error saving post {request.filename}: {e}")
        raise HTTPException(status_code=500, detail="Failed to save post")
