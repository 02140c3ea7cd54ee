# grawlix/core/config.py

from pathlib import Path
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# ─── 1) Load .env into os.environ ──────────────────────────────────────────────
env_path = Path(__file__).resolve().parents[2] / ".env"
load_dotenv(dotenv_path=env_path, override=False)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(extra="ignore")

    # ──────────────────────────────────────────────────────────
    testing: bool = Field(False, description="TESTING=1 under pytest")

    # ───────────────────────── Filter ─────────────────────────
    wordlist_path:       Path | None = Field(None, description="Base word list, one term per line")
    placeholder_content: str = Field("No content", description="Used when a request has no content")
    mask_char:           str = Field("*", description="Mask character for censor-text")

    # ───────────────────────── Server ─────────────────────────
    frontend_url: str | None = None
    host:         str = "0.0.0.0"
    port:         int = 8080
    log_level:    str = "INFO"
    access_log:   bool = True

    @model_validator(mode="after")
    def _check_filter_options(self) -> "Settings":
        if len(self.mask_char) != 1:
            raise ValueError(f"MASK_CHAR must be a single character, got {self.mask_char!r}")
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")
        return self


@lru_cache
def get_settings() -> Settings:
    """
    Build Settings from os.environ (field names map to upper-case env-vars).
    """
    return Settings()
