from __future__ import annotations

from ..core.constants import CODE_LENGTH


def normalize_code(raw) -> str:
    """Canonical form of a code: trimmed and uppercased. Idempotent."""
    if raw is None:
        return ""
    return str(raw).strip().upper()


def is_valid_code(code: str) -> bool:
    return len(normalize_code(code)) == CODE_LENGTH
