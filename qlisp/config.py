from __future__ import annotations
import os
from pathlib import Path


# Resolve installation dir (qlisp package directory)
_QLISP_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _QLISP_DIR / 'prelude'
DEFAULT_MAX_CALL_DEPTH = 256
DEFAULT_RECURSION_LIMIT = 20000


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def get_prelude_root() -> Path:
    raw = os.environ.get('QLISP_PRELUDE_PATH')
    p = Path(raw.strip()) if raw and raw.strip() else _DEFAULT_PRELUDE_DIR
    # treat as single directory; if a file path is set, return its parent
    return p if p.is_dir() else p.parent


def get_max_call_depth() -> int:
    return int_from_env('QLISP_MAX_CALL_DEPTH', DEFAULT_MAX_CALL_DEPTH)


def get_recursion_limit() -> int:
    return int_from_env('QLISP_RECURSION_LIMIT', DEFAULT_RECURSION_LIMIT)
