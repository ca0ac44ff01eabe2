from __future__ import annotations
import os
from pathlib import Path
from typing import Optional

_TRUTHY = {"1", "true", "yes", "on"}

DEFAULT_REPL_HOST = "127.0.0.1"
DEFAULT_REPL_PORT = 8765


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def get_prelude_path() -> Optional[Path]:
    raw = os.environ.get('SPRIG_PRELUDE')
    if not raw or not raw.strip():
        return None
    return Path(raw.strip())


def get_tail_calls_enabled() -> bool:
    return flag_from_env('SPRIG_TAIL_CALLS')


def get_log_level() -> str:
    return os.environ.get('SPRIG_LOG_LEVEL', 'WARNING').strip().upper() or 'WARNING'


def get_repl_address() -> tuple[str, int]:
    host = os.environ.get('SPRIG_REPL_HOST', DEFAULT_REPL_HOST)
    port = int(os.environ.get('SPRIG_REPL_PORT', DEFAULT_REPL_PORT))
    return host, port
