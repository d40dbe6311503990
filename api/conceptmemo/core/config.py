from pydantic_settings import BaseSettings
from dotenv import load_dotenv
import logging
import os
from pathlib import Path

_logger = logging.getLogger(__name__)

# Look for .env in api directory (parent of conceptmemo directory)
api_dir = Path(__file__).parent.parent.parent
env_path = api_dir / ".env"

if env_path.exists():
    load_dotenv(env_path, override=False)
    _logger.info(f"Loaded .env file from: {env_path}")
else:
    # Fallback to current directory
    current_env = Path(".env")
    if current_env.exists():
        load_dotenv(current_env, override=False)
        _logger.info(f"Loaded .env file from: {current_env.absolute()}")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database - hosting platforms provide DATABASE_URL (uppercase)
    database_url: str = ""

    # API
    api_prefix: str = "/api"

    # CORS - the web client runs on the Vite dev server by default
    cors_origins: list[str] = ["http://localhost:5173"]

    # Public demo dataset is owned by this session identifier
    demo_user_id: str = "demo-user"

    # Anonymous session cookie
    session_cookie_name: str = "user_id"
    session_cookie_max_age: int = 365 * 24 * 60 * 60  # 1 year
    session_cookie_secure: bool = False  # Local development; enable behind HTTPS

    # Logging
    log_level: str = "INFO"

    # production / development
    environment: str = "production"

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"

    def __init__(self, **kwargs):
        # Ensure we read DATABASE_URL from environment
        if not kwargs.get("database_url"):
            kwargs["database_url"] = os.getenv("DATABASE_URL", "")
        super().__init__(**kwargs)

    @property
    def is_development(self) -> bool:
        return self.environment.lower() in ("development", "dev", "local")


# Create settings instance
settings = Settings()

# Validate required DATABASE_URL
if not settings.database_url:
    raise ValueError("DATABASE_URL environment variable is required")
