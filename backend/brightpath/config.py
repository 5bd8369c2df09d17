# brightpath/config.py
import os
from pydantic import BaseModel, ConfigDict, field_validator
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


def _env_list(name: str, default: str) -> list[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


ENV = os.getenv("ENV", "dev")


class Settings(BaseModel):
    model_config = ConfigDict(validate_default=True)

    # General app settings
    APP_NAME: str = "BrightPath"
    env: str = ENV

    # Host & Port settings
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "10000"))

    # CORS origins for frontend (pages are served by this app, so usually empty)
    CORS_ORIGINS: list[str] = _env_list("CORS_ORIGINS", "")

    # Store
    database_url: str = os.getenv("DATABASE_URL", "sqlite://brightpath.sqlite3")
    # Auto-create tables on startup; production should run Aerich migrations instead
    generate_schemas: bool = _env_flag("GENERATE_SCHEMAS", "true" if ENV == "dev" else "false")

    # Session cookie
    session_secret: str = os.getenv("SESSION_SECRET", "brightpath-dev-secret")
    session_ttl_hours: int = int(os.getenv("SESSION_TTL_HOURS", "24"))
    session_cookie_name: str = os.getenv("SESSION_COOKIE_NAME", "brightpath_session")
    session_cookie_secure: bool = _env_flag("SESSION_COOKIE_SECURE", "true" if ENV == "prod" else "false")

    # Accounts
    default_role: str = os.getenv("DEFAULT_ROLE", "user")
    refresh_role_on_admin: bool = _env_flag("REFRESH_ROLE_ON_ADMIN", "false")

    # Optional collections
    enable_journal: bool = _env_flag("ENABLE_JOURNAL", "true")
    enable_feedback: bool = _env_flag("ENABLE_FEEDBACK", "true")
    enable_confessions: bool = _env_flag("ENABLE_CONFESSIONS", "true")
    feedback_requires_auth: bool = _env_flag("FEEDBACK_REQUIRES_AUTH", "true")

    @field_validator("default_role")
    @classmethod
    def _default_role_not_admin(cls, v: str) -> str:
        if v not in ("user", "student"):
            raise ValueError("DEFAULT_ROLE must be 'user' or 'student'")
        return v

    @property
    def session_ttl_seconds(self) -> int:
        return self.session_ttl_hours * 60 * 60


settings = Settings()  # Instantiate configuration
