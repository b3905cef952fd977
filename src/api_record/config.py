from __future__ import annotations

import os
from typing import Tuple

from dotenv import find_dotenv, load_dotenv

from .client import DEFAULT_BASE_URL, ClientConfig

DEFAULT_TIMEOUT_SECONDS = 10.0


def load_env_config(*, use_dotenv: bool = True) -> Tuple[str, float]:
    """Load API base URL and timeout from environment (optional .env)."""
    if use_dotenv:
        load_dotenv(find_dotenv(usecwd=True))
    base_url = os.getenv("API_RECORD_BASE_URL", "").strip() or DEFAULT_BASE_URL
    raw_timeout = os.getenv("API_RECORD_TIMEOUT_SECONDS", "").strip()
    if not raw_timeout:
        return base_url, DEFAULT_TIMEOUT_SECONDS
    try:
        timeout = float(raw_timeout)
    except ValueError as exc:
        raise ValueError(
            f"API_RECORD_TIMEOUT_SECONDS must be a number, got {raw_timeout!r}"
        ) from exc
    if timeout <= 0:
        raise ValueError("API_RECORD_TIMEOUT_SECONDS must be > 0")
    return base_url, timeout


def client_config_from_env(*, use_dotenv: bool = True) -> ClientConfig:
    """Create a ClientConfig from environment variables."""
    base_url, timeout = load_env_config(use_dotenv=use_dotenv)
    return ClientConfig(base_url=base_url, timeout_seconds=timeout)


__all__ = ["load_env_config", "client_config_from_env", "DEFAULT_TIMEOUT_SECONDS"]
