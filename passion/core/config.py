import logging

from pydantic_settings import BaseSettings
from pydantic import ConfigDict
from typing import Optional

class Settings(BaseSettings):
    # Environment
    ENV: str = "development"  # development | test | production
    CONFIG_STRICT: bool = False
    LOG_LEVEL: str = "INFO"

    # HTTP surface
    CORS_ORIGINS: str = "http://localhost:3000"  # comma-separated

    # Analysis guardrails (API only; the analyzer itself accepts any string)
    MAX_TRANSCRIPT_CHARS: int = 200_000  # 0 = disabled

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()


def validate_config(strict: Optional[bool] = None, settings_obj: Optional[Settings] = None, logger: Optional[logging.Logger] = None) -> bool:
    """Validate configuration values.

    In strict mode raise RuntimeError; otherwise emit warnings only.
    """
    cfg = settings_obj or settings
    log = logger or logging.getLogger("passion")
    strict_mode = strict if strict is not None else getattr(cfg, "CONFIG_STRICT", False)

    problems = []
    env = (getattr(cfg, "ENV", "") or "").lower()
    if env not in {"development", "test", "production"}:
        problems.append(f"ENV must be development, test or production (got {env!r})")

    level = (getattr(cfg, "LOG_LEVEL", "") or "").upper()
    if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        problems.append(f"LOG_LEVEL is not a logging level (got {level!r})")

    max_chars = getattr(cfg, "MAX_TRANSCRIPT_CHARS", 0)
    if max_chars is None or max_chars < 0:
        problems.append("MAX_TRANSCRIPT_CHARS must be >= 0")

    if problems:
        message = f"Invalid configuration: {'; '.join(problems)}"
        if strict_mode:
            raise RuntimeError(message)
        log.warning(message)

    return True
