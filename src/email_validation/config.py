import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Working directories
    work_dir: Path = Path(os.getenv("WORK_DIR", "./temp"))
    log_dir: Path = Path(os.getenv("LOG_DIR", "./logs"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Extraction
    email_column: int = int(os.getenv("EMAIL_COLUMN", "0"))

    # Validation
    validation_max_workers: int = int(os.getenv("VALIDATION_MAX_WORKERS", "10"))
    validation_policy: str = os.getenv("VALIDATION_POLICY", "shallow").lower()
    domain_cache_ttl: float = float(os.getenv("DOMAIN_CACHE_TTL", "86400"))  # 24 hours

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8080"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.email_column < 0:
            raise ValueError(f"EMAIL_COLUMN must be >= 0, got {self.email_column}")

        if self.validation_max_workers < 1:
            raise ValueError(
                f"VALIDATION_MAX_WORKERS must be >= 1, got {self.validation_max_workers}"
            )

        if self.validation_policy not in ("shallow", "strict"):
            raise ValueError(
                f"VALIDATION_POLICY must be 'shallow' or 'strict', got {self.validation_policy}"
            )

        if self.domain_cache_ttl <= 0:
            raise ValueError("DOMAIN_CACHE_TTL must be a positive number of seconds")

        if self.log_level not in ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"LOG_LEVEL is not a valid level: {self.log_level}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
