"""Application configuration."""

from os import getenv

from pydantic import BaseModel


class Settings(BaseModel):
    """Runtime settings for the application."""

    app_name: str = "restoman API"
    app_env: str = getenv("APP_ENV", "dev")
    log_level: str = getenv("LOG_LEVEL", "INFO")
    database_url: str = getenv("DATABASE_URL", "sqlite:///./restoman.db")
    jwt_secret_key: str = getenv("JWT_SECRET", "dev-only-change-me-to-a-long-random-secret")
    jwt_algorithm: str = getenv("JWT_ALGORITHM", "HS256")
    jwt_expire_minutes: int = int(getenv("JWT_EXPIRE_MINUTES", "1440"))
    cron_secret: str | None = getenv("CRON_SECRET") or None
    cron_require_secret: bool = getenv("CRON_REQUIRE_SECRET", "0") == "1"
    restock_timeout_seconds: float = float(getenv("RESTOCK_TIMEOUT_SECONDS", "30"))
    admin_username: str = getenv("ADMIN_USERNAME", "admin")
    admin_password: str = getenv("ADMIN_PASSWORD", "admin123")


settings: Settings = Settings()
