from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    debug: bool = True
    cors_origins: list[str] = ["http://localhost:8080"]

    ENVIRONMENT: str = "Production"

    # Database
    DB_DSN: str = "sqlite+aiosqlite:///./eventia.db"
    LOG_DB: bool = False
    LOG_LEVEL: str = ""

    # JWT
    secret_key: str = "your-super-secret-key-change-in-production"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 120  # 2 hours
    password_hash_iterations: int = 100_000

    # Cart
    cart_write_retries: int = 3

    # Pagination
    default_page_size: int = 20
    max_page_size: int = 100

    SENTRY_DSN: str = ""
    SENTRY_TRACES_SAMPLE_RATE: float = 0.0
    SENTRY_PROFILES_SAMPLE_RATE: float = 0.0

    RUN_MIGRATIONS_ON_STARTUP: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
