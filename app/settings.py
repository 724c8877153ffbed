from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Storage
    MARKDOWN_DIR: str = "markdown"
    HTML_DIR: str = "posts"

    # Static export
    DIST_DIR: str = "dist"

    # Presentation
    BLOG_TITLE: str = "Blog"
    BLOG_CSS_PATH: str = str(PACKAGE_DIR / "static" / "blog.css")
    EDITOR_INDEX_PATH: str = "index.html"
    EXCERPT_LENGTH: int = 200

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def markdown_path(self) -> Path:
        return Path(self.MARKDOWN_DIR)

    @property
    def html_path(self) -> Path:
        return Path(self.HTML_DIR)

    @property
    def dist_path(self) -> Path:
        return Path(self.DIST_DIR)


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
