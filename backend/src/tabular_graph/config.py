"""Load settings from environment (.env and env vars)."""

from __future__ import annotations

import logging
import os
from pathlib import Path

# Load .env from backend root if present
_env_path = Path(__file__).resolve().parent.parent.parent / ".env"
if _env_path.exists():
    from dotenv import load_dotenv
    load_dotenv(_env_path)


def _str(key: str, default: str = "") -> str:
    return (os.environ.get(key) or "").strip() or default


def _bool(key: str, default: bool = False) -> bool:
    v = _str(key).lower()
    if not v:
        return default
    return v in ("1", "true", "yes", "on")


def _int(key: str, default: int) -> int:
    v = _str(key)
    try:
        return int(v) if v else default
    except ValueError:
        return default


def _log_level(key: str, default: str = "INFO") -> str:
    v = _str(key).upper()
    if v and isinstance(logging.getLevelName(v), int):
        return v
    return default


# Attribute rule parsing: reject pairs without "=" instead of using an empty value
STRICT_RULES = _bool("TABULAR_GRAPH_STRICT_RULES")

# HTTP request limits
MAX_ROWS = _int("TABULAR_GRAPH_MAX_ROWS", 100_000)

LOG_LEVEL = _log_level("TABULAR_GRAPH_LOG_LEVEL")
