"""
Runtime configuration for the Basic-Auth demo
=============================================

Simple settings module that reads from environment variables (only here),
and exposes a stable `settings` object for the rest of the codebase.
The expected credential itself is loaded by `auth.config.load_credential()`.

Routing
-------
- BASIC_AUTH_PROTECTED_PATH : path guarded by the gate (default "/api/data");
                              a missing leading "/" is added, "/" itself is rejected

Serving
-------
- BASIC_AUTH_HOST      : bind address for `python main.py` (default "127.0.0.1")
- BASIC_AUTH_PORT      : bind port (default 8000)
- BASIC_AUTH_LOG_LEVEL : root log level when no handler is configured (default "INFO";
                         names that are not logging levels fall back to it)
"""

import logging
import os

DEFAULT_PROTECTED_PATH = "/api/data"


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))
    try:
        return int(raw)
    except ValueError:
        return default


def _get_log_level(name: str, default: str) -> str:
    raw = os.getenv(name, default).strip().upper()
    # getLevelName maps known names to ints and anything else to "Level <name>"
    if isinstance(logging.getLevelName(raw), int):
        return raw
    return default


def normalize_protected_path(path: str) -> str:
    """
    Return `path` with exactly one leading "/".

    Raises:
        ValueError: If the path is empty or "/", which is taken by the demo page.
    """
    path = "/" + path.strip().lstrip("/")
    if path == "/":
        raise ValueError("protected path must not be '/' (reserved for the demo page)")
    return path


class _Settings:
    # -------- Routing --------
    PROTECTED_PATH: str = normalize_protected_path(os.getenv("BASIC_AUTH_PROTECTED_PATH") or DEFAULT_PROTECTED_PATH)

    # -------- Serving --------
    HOST: str = os.getenv("BASIC_AUTH_HOST", "127.0.0.1")
    PORT: int = _get_int("BASIC_AUTH_PORT", 8000)

    LOG_LEVEL: str = _get_log_level("BASIC_AUTH_LOG_LEVEL", "INFO")


settings = _Settings()
