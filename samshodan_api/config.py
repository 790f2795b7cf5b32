"""Application configuration via environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # App
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:8000",
    ]

    # Blog content
    content_dir: str = "content/blog"
    use_file_source: bool = True  # False: serve the compiled fallback posts only
    default_author: str = "Samshodan Team"
    default_read_time: str = "5 min read"

    # Listing
    page_size: int = 6
    related_limit: int = 3

    # Remote listing endpoint tried before the local fallback
    blog_api_url: str = "http://localhost:8000/api/blog"

    model_config = {"env_file": ".env", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
