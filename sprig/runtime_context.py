from __future__ import annotations

from sprig.config import get_tail_calls_enabled

# NOTE: For now this is process-global. If threading is introduced,
# consider switching to contextvars or threading.local.
_tail_calls: bool = get_tail_calls_enabled()


def set_tail_calls(enabled: bool) -> None:
    global _tail_calls
    _tail_calls = enabled


def get_tail_calls() -> bool:
    return _tail_calls
