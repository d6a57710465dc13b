from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    PRISMIC_API_ENDPOINT: str = "https://spacetraveling.cdn.prismic.io/api/v2"
    PRISMIC_ACCESS_TOKEN: str = ""
    REQUEST_TIMEOUT: int = 30

    POSTS_PAGE_SIZE: int = 2

    # Static export; leave empty to disable scheduled rebuilds
    STATIC_OUTPUT_DIR: str = ""
    REVALIDATE_SECONDS: int = 60 * 60

    DISPLAY_TIMEZONE: str = "UTC"

    APP_TITLE: str = "spacetraveling"
    DEBUG: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
