from __future__ import annotations

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return list(default)
    return [part.strip() for part in raw.split(",") if part.strip()]


@dataclass(frozen=True)
class Settings:
    # Persistence: base directory that holds .cui/preferences.json (None -> home directory)
    config_base_dir: str | None

    # Debug
    debug_log_requests: bool

    # HTTP
    cors_allow_origins: list[str]


def get_settings() -> Settings:
    config_base_dir = (os.getenv("CUI_CONFIG_BASE_DIR") or "").strip() or None

    debug_log_requests = _env_bool("DEBUG_LOG_REQUESTS", False)

    cors_allow_origins = _env_list("CORS_ALLOW_ORIGINS", ["*"])

    return Settings(
        config_base_dir=config_base_dir,
        debug_log_requests=debug_log_requests,
        cors_allow_origins=cors_allow_origins,
    )
