"""Environment-driven settings.

Values are read from the process environment (a local `.env` file is loaded first):

    OFFERS_SNAPSHOT        default snapshot for the CLI (file path or http(s) URL)
    OFFERS_HTTP_TIMEOUT_S  timeout for HTTP snapshot fetches, seconds (default 20)
    OFFERS_LOG_LEVEL       console log level (default INFO)
    OFFERS_LOGS_PATH       directory for the DEBUG file log; unset disables it
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    snapshot: Optional[str] = None
    http_timeout_s: float = 20.0
    log_level: str = "INFO"
    logs_path: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "Settings":
        logs_path = os.getenv("OFFERS_LOGS_PATH")
        return cls(
            snapshot=os.getenv("OFFERS_SNAPSHOT") or None,
            http_timeout_s=float(os.getenv("OFFERS_HTTP_TIMEOUT_S", "20")),
            log_level=os.getenv("OFFERS_LOG_LEVEL", "INFO").upper(),
            logs_path=Path(logs_path) if logs_path else None,
        )
