import logging
from pathlib import Path
from typing import Dict, List, Optional

from app.services.content_parser import MARKDOWN_SUFFIX

logger = logging.getLogger(__name__)

HTML_SUFFIX = ".html"


class FilePostsRepo:
    def __init__(self, markdown_dir: Path, html_dir: Path, create: bool = True):
        self.markdown_dir = Path(markdown_dir)
        self.html_dir = Path(html_dir)
        if create:
            self.markdown_dir.mkdir(parents=True, exist_ok=True)
            self.html_dir.mkdir(parents=True, exist_ok=True)

    def list_markdown_files(self) -> List[str]:
        if not self.markdown_dir.is_dir():
            return []
        return [
            path.name
            for path in self.markdown_dir.iterdir()
            if path.is_file() and path.name.endswith(MARKDOWN_SUFFIX)
        ]

    def read_markdown(self, filename: str) -> Optional[str]:
        path = self._markdown_path(filename)
        if path is None or not path.is_file():
            return None
        # Hand-edited files may not be UTF-8; undecodable bytes become U+FFFD.
        return path.read_text(encoding="utf-8", errors="replace")

    def write_post(self, base_name: str, markdown: str, html: str) -> Dict[str, str]:
        md_path = self._markdown_path(f"{base_name}{MARKDOWN_SUFFIX}")
        html_path = self._child(self.html_dir, f"{base_name}{HTML_SUFFIX}")
        if md_path is None or html_path is None:
            raise ValueError(f"Invalid post name: {base_name!r}")

        md_path.write_text(markdown, encoding="utf-8")
        html_path.write_text(html, encoding="utf-8")
        logger.info(f"Saved post {base_name} to {md_path} and {html_path}")
        return {"markdown": str(md_path), "html": str(html_path)}

    def _markdown_path(self, filename: str) -> Optional[Path]:
        return self._child(self.markdown_dir, filename)

    @staticmethod
    def _child(directory: Path, filename: str) -> Optional[Path]:
        if not filename or filename in (".", "..") or "/" in filename or "\\" in filename:
            logger.warning(f"Rejected post filename outside {directory}: {filename!r}")
            return None
        return directory / filename
