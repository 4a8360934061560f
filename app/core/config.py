from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_STATIC_DIR = "public"


def _get_int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    port: int
    log_level: str
    k8s_api_timeout_seconds: int
    static_dir: str


def load_settings() -> Settings:
    return Settings(
        port=_get_int_env("PORT", 3000),
        log_level=os.getenv("LOG_LEVEL", "info"),
        k8s_api_timeout_seconds=_get_int_env("K8S_API_TIMEOUT_SECONDS", 5),
        static_dir=os.getenv("STATIC_DIR", DEFAULT_STATIC_DIR),
    )
