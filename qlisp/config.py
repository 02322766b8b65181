from __future__ import annotations
import os
from pathlib import Path


# Resolve installation dir (qlisp package directory)
_QLISP_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_STDLIB_PATH = _QLISP_DIR / 'stdlib' / 'basic.lisp'
DEFAULT_MAX_CALL_DEPTH = 256
DEFAULT_LOG_LEVEL = 'WARNING'
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def path_from_env(var: str, default: Path) -> Path:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return Path(raw.strip())


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_stdlib_path() -> Path:
    return path_from_env('QLISP_STDLIB_PATH', _DEFAULT_STDLIB_PATH)


def get_max_call_depth() -> int:
    depth = int_from_env('QLISP_MAX_CALL_DEPTH', DEFAULT_MAX_CALL_DEPTH)
    if depth < 0:
        raise ValueError(f"QLISP_MAX_CALL_DEPTH must not be negative, got {depth}")
    return depth


def get_log_level() -> str:
    level = os.environ.get('QLISP_LOG_LEVEL', DEFAULT_LOG_LEVEL).strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"QLISP_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
    return level
