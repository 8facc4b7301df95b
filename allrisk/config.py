"""
Service configuration.

Read once at import from the environment, after loading the project-level
.env file.
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# ── Paths ───────────────────────────────────────────────────────────────
PROJECT_ROOT = Path(__file__).resolve().parent.parent

# ── Load .env ───────────────────────────────────────────────────────────
load_dotenv(PROJECT_ROOT / ".env")


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_file: Optional[str] = None
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    host: str = "0.0.0.0"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            log_level=os.getenv("ALLRISK_LOG_LEVEL", "INFO"),
            log_file=os.getenv("ALLRISK_LOG_FILE") or None,
            cors_origins=_split_csv(os.getenv("ALLRISK_CORS_ORIGINS", "*")) or ["*"],
            host=os.getenv("ALLRISK_HOST", "0.0.0.0"),
            port=int(os.getenv("ALLRISK_PORT", "8000")),
        )


settings = Settings.from_env()
