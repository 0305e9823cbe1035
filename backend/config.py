import os
from functools import lru_cache
from dotenv import load_dotenv
from pydantic import BaseModel, Field




load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    database_url: str = "sqlite+aiosqlite:///./cadet_admin.db"
    session_expire_days: int = 30
    narrative_api_key: str = ""
    narrative_api_url: str = "https://api.x.ai/v1/chat/completions"
    narrative_model: str = "grok-beta"
    narrative_timeout: float = 30.0
    cors_origins: list[str] = Field(default_factory=lambda: ["http://127.0.0.1:5173"])
    log_level: str = "INFO"
    reset_database: bool = False
    seed_test_data: bool = False
    host: str = "0.0.0.0"
    port: int = 3001

    @classmethod
    def from_env(cls):
        """Build settings from the process environment (.env is picked up by load_dotenv)"""
        defaults = cls()
        origins = os.getenv("CORS_ORIGINS")
        return cls(
            database_url=os.getenv("DATABASE_URL", defaults.database_url),
            session_expire_days=int(os.getenv("SESSION_EXPIRE_DAYS", defaults.session_expire_days)),
            narrative_api_key=os.getenv("NARRATIVE_API_KEY") or os.getenv("GROK_API_KEY", ""),
            narrative_api_url=os.getenv("NARRATIVE_API_URL", defaults.narrative_api_url),
            narrative_model=os.getenv("NARRATIVE_MODEL", defaults.narrative_model),
            narrative_timeout=float(os.getenv("NARRATIVE_TIMEOUT", defaults.narrative_timeout)),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()] if origins else defaults.cors_origins,
            log_level=os.getenv("LOG_LEVEL", defaults.log_level).upper(),
            reset_database=_env_bool("RESET_DATABASE"),
            seed_test_data=_env_bool("SEED_TEST_DATA"),
            host=os.getenv("HOST", defaults.host),
            port=int(os.getenv("PORT", defaults.port)),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
