import logging
import os
from dataclasses import dataclass, field
from typing import List


def _env_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class AppConfig:
    # Logging
    LOG_LEVEL: str = field(default_factory=lambda: os.getenv("NEWSSTAND_LOG_LEVEL", "INFO").upper())
    LOG_FORMAT: str = "%(asctime)s - %(levelname)s - %(message)s"

    # Catalog
    MAGAZINES: List[str] = field(default_factory=lambda: _env_list(
        "NEWSSTAND_MAGAZINES", "Tech Weekly,Cooking Today,Sports Monthly"))
    READERS: List[str] = field(default_factory=lambda: _env_list(
        "NEWSSTAND_READERS", "John,Alice,Bob"))
    LIBRARIES: List[str] = field(default_factory=lambda: _env_list(
        "NEWSSTAND_LIBRARIES", "City Library,University Library"))

    # Telegram Configuration
    TELEGRAM_BOT_TOKEN: str = field(default_factory=lambda: os.getenv("TELEGRAM_BOT_TOKEN", ""))
    TELEGRAM_CHAT_ID: str = field(default_factory=lambda: os.getenv("TELEGRAM_CHAT_ID", ""))
    TELEGRAM_ENABLED: bool = field(default_factory=lambda: _env_flag("TELEGRAM_ENABLED"))
    TELEGRAM_TIMEOUT: int = 10

    @property
    def telegram_configured(self) -> bool:
        return bool(self.TELEGRAM_BOT_TOKEN and self.TELEGRAM_CHAT_ID)

    def validate(self):
        if not isinstance(logging.getLevelName(self.LOG_LEVEL), int):
            raise ValueError(f"Unknown LOG_LEVEL: {self.LOG_LEVEL}")
        if not self.MAGAZINES:
            raise ValueError("At least one magazine is required")
        if not self.READERS and not self.LIBRARIES:
            raise ValueError("At least one reader or library is required")
        if self.TELEGRAM_ENABLED and not self.telegram_configured:
            raise ValueError("TELEGRAM_BOT_TOKEN and TELEGRAM_CHAT_ID are required when Telegram is enabled")


config = AppConfig()
