from __future__ import annotations
import os
from pathlib import Path


# Defaults
# longest accepted symbol name, inclusive
_DEFAULT_SYMBOL_MAXLEN = 30
_DEFAULT_RECURSION_LIMIT = 20000
_DEFAULT_STACK_MB = 256
_DEFAULT_HISTORY_FILE = Path.home() / '.sublisp_history'

_TRUTHY = {'1', 'true', 'yes', 'on'}


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}")
    if value <= 0:
        raise ValueError(f"{var} must be positive, got {value}")
    return value


def get_debug_default() -> bool:
    return flag_from_env('SUBLISP_DEBUG', False)


def get_symbol_maxlen() -> int:
    return int_from_env('SUBLISP_SYMBOL_MAXLEN', _DEFAULT_SYMBOL_MAXLEN)


def get_history_file() -> Path:
    raw = os.environ.get('SUBLISP_HISTORY_FILE')
    if not raw:
        return _DEFAULT_HISTORY_FILE
    return Path(raw).expanduser()


def get_recursion_limit() -> int:
    """Python frame limit raised at interpreter start; each Lisp call nests ~15 frames."""
    return int_from_env('SUBLISP_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT)


def get_stack_size() -> int:
    """Thread stack size in bytes for the command line interpreter."""
    return int_from_env('SUBLISP_STACK_MB', _DEFAULT_STACK_MB) * 1024 * 1024
