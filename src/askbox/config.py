from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from textual.logging import TextualHandler


load_dotenv()

LOG_FORMAT = "[%(asctime)s] %(levelname)s - %(message)s"


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or not value.strip():
        return None
    return float(value)


class Settings:
    """Application settings loaded from environment variables.

    Command-line flags are applied on top of these in ``askbox.app``.
    """

    def __init__(self) -> None:
        self.api_url: Optional[str] = os.getenv("ASKBOX_API_URL") or None
        self.storage_path: str = os.getenv("ASKBOX_STORAGE_PATH", "~/.askbox/storage.json")
        self.history_key: str = os.getenv("ASKBOX_HISTORY_KEY", "history")
        self.history_limit: int = int(os.getenv("ASKBOX_HISTORY_LIMIT", "50"))
        self.request_timeout: Optional[float] = _optional_float(os.getenv("ASKBOX_REQUEST_TIMEOUT"))
        self.log_level: str = os.getenv("ASKBOX_LOG_LEVEL", "INFO")
        self.log_file: Optional[str] = os.getenv("ASKBOX_LOG_FILE") or None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def setup_logging(settings: Settings) -> None:
    # stdout belongs to the TUI, so records go to the textual console and an optional file
    handlers: list[logging.Handler] = [TextualHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(os.path.expanduser(settings.log_file), encoding="utf-8"))

    logging.basicConfig(
        level=settings.log_level.upper(),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
