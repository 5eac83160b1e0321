# crypto_cli/config/settings.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass


DEFAULT_BASE_URL = "https://api.coinpaprika.com/v1"


def parse_bool(value: str | None, default: bool) -> bool:
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


def parse_float(value: str | None, default: float) -> float:
    if value is None or value.strip() == "":
        return default
    return float(value)


def parse_log_level(value: str | None, default: str) -> str:
    if value is None or value.strip() == "":
        return default
    name = value.strip().upper()
    # getLevelName only maps registered level names to ints
    if not isinstance(logging.getLevelName(name), int):
        raise ValueError(f"Unknown log level '{value.strip()}'")
    return name


@dataclass(frozen=True)
class Settings:
    COINPAPRIKA_BASE_URL: str
    COINPAPRIKA_TIMEOUT_SECONDS: float
    LOG_LEVEL: str
    SHOW_BANNER: bool

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            COINPAPRIKA_BASE_URL=os.getenv("COINPAPRIKA_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            COINPAPRIKA_TIMEOUT_SECONDS=parse_float(os.getenv("COINPAPRIKA_TIMEOUT_SECONDS"), 10.0),
            LOG_LEVEL=parse_log_level(os.getenv("CRYPTO_CLI_LOG_LEVEL"), "WARNING"),
            SHOW_BANNER=parse_bool(os.getenv("CRYPTO_CLI_BANNER"), True),
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Drop the memoised settings so the next call re-reads the environment."""
    global _settings
    _settings = None
