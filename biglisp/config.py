from __future__ import annotations
import os

# Defaults
_DEFAULT_MAX_DEPTH = 1000
_DEFAULT_LOG_LEVEL = "WARNING"


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{var} must be positive, got {value}")
    return value


def get_max_depth() -> int:
    return int_from_env("BIGLISP_MAX_DEPTH", _DEFAULT_MAX_DEPTH)


def get_log_level() -> str:
    raw = os.environ.get("BIGLISP_LOG_LEVEL")
    return raw.strip().upper() if raw and raw.strip() else _DEFAULT_LOG_LEVEL
