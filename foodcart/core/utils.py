"""
Utility helpers shared across services.
"""

from typing import Any


def is_text(value: Any, *, blank_ok: bool = False) -> bool:
    """
    True for a non-empty string that can be stored and hashed as UTF-8.
    Whitespace-only strings count as empty unless blank_ok is set.
    """
    if not isinstance(value, str) or not value:
        return False
    if not blank_ok and not value.strip():
        return False
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        # lone surrogates, e.g. a "\ud800" JSON escape
        return False
    return True
