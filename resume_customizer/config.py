"""
Runtime settings read from the environment.
"""

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_MODEL = "gemini-1.5-flash"
DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_TIMEOUT = 120.0


@dataclass(frozen=True)
class Settings:
    """Configuration for one process."""
    api_key: Optional[str] = None  # fallback when the form leaves it blank
    model: str = DEFAULT_MODEL
    api_base: str = DEFAULT_API_BASE
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"

    @property
    def endpoint(self) -> str:
        return f"{self.api_base.rstrip('/')}/models/{self.model}:generateContent"


def _float_env(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


def load_settings() -> Settings:
    """Build settings from GEMINI_* and LOG_LEVEL environment variables."""
    return Settings(
        api_key=os.environ.get("GEMINI_API_KEY") or None,
        model=os.environ.get("GEMINI_MODEL") or DEFAULT_MODEL,
        api_base=os.environ.get("GEMINI_API_BASE") or DEFAULT_API_BASE,
        timeout=_float_env("GEMINI_TIMEOUT", DEFAULT_TIMEOUT),
        log_level=os.environ.get("LOG_LEVEL") or "INFO",
    )
