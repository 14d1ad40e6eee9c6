from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


DEFAULT_API_URL = "https://webexapis.com/v1"


@dataclass(frozen=True)
class Settings:
    webex_access_token: str
    webex_api_url: str

    request_timeout: int
    max_workers: int
    message_window_hours: int

    tz: str
    output_format: str
    debug_providers: bool

    @staticmethod
    def _strip_env(key: str, default: str | None = None) -> str | None:
        """Get env var and strip whitespace/newlines (common issue with CI secrets)."""
        val = os.getenv(key)
        if val is None:
            return default
        stripped = val.strip()
        return stripped if stripped else default

    @staticmethod
    def _int_env(key: str, default: int) -> int:
        raw = Settings._strip_env(key)
        if raw is None:
            return default
        try:
            return int(raw)
        except ValueError:
            return default

    @staticmethod
    def load() -> "Settings":
        webex_access_token = Settings._strip_env("WEBEX_ACCESS_TOKEN")
        if not webex_access_token:
            raise ValueError("WEBEX_ACCESS_TOKEN environment variable is required")

        webex_api_url = Settings._strip_env("WEBEX_API_URL") or DEFAULT_API_URL

        request_timeout = Settings._int_env("REQUEST_TIMEOUT", 30)
        max_workers = Settings._int_env("MAX_WORKERS", 8)
        message_window_hours = Settings._int_env("MESSAGE_WINDOW_HOURS", 1200)

        tz = Settings._strip_env("TZ") or "UTC"
        output_format = (Settings._strip_env("OUTPUT_FORMAT") or "json").lower()
        if output_format not in {"json", "text"}:
            output_format = "json"
        debug_providers = (Settings._strip_env("DEBUG_PROVIDERS") or "false").lower() in {"1", "true", "yes"}

        return Settings(
            webex_access_token=webex_access_token,
            webex_api_url=webex_api_url,
            request_timeout=request_timeout,
            max_workers=max_workers,
            message_window_hours=message_window_hours,
            tz=tz,
            output_format=output_format,
            debug_providers=debug_providers,
        )
