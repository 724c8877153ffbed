import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import FileResponse

from app.routers import blog, posts
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Blog Writer API", description="Markdown editor backend and blog")


@asynccontextmanager
async def lifespan(app: FastAPI):
    for directory in (settings.markdown_path, settings.html_path):
        directory.mkdir(parents=True, exist_ok=True)
    logger.info(
        f"Serving posts from {settings.markdown_path} (rendered to {settings.html_path})"
    )
    yield


app.router.lifespan_context = lifespan

app.include_router(posts.router)
app.include_router(blog.router)


@app.get("/")
async def root():
    editor_index = Path(settings.EDITOR_INDEX_PATH)
    if editor_index.is_file():
        return FileResponse(editor_index, media_type="text/html")
    return {"message": "Blog Writer API is running"}
