from typing import Optional

from pydantic import BaseModel


class PostListItem(BaseModel):
    filename: str
    name: str
    date: str = ""


class BlogEntry(BaseModel):
    title: str
    date: str = ""
    slug: str
    excerpt: str = ""


class PostPage(BaseModel):
    slug: str
    title: str
    date: str = ""
    html: str


class LoadResponse(BaseModel):
    content: str


class SaveRequest(BaseModel):
    filename: Optional[str] = None
    markdown: Optional[str] = None
    html: Optional[str] = None
    existingFilename: Optional[str] = None


class SavedFiles(BaseModel):
    markdown: str
    html: str


class SaveResponse(BaseModel):
    success: bool = True
    filename: str
    files: SavedFiles
