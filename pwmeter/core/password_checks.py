from __future__ import annotations

import re

from pwmeter.core.password_tables import (
    COMMON_PASSWORDS,
    DIGITS,
    KEYBOARD_PATTERNS,
    LOWERCASE,
    MIN_LENGTH,
    SEQUENCE_WINDOWS,
    SYMBOLS,
    UPPERCASE,
)

_REPEAT_RE = re.compile(r"(.)\1{2,}")


# ---------------- Requirement checks ----------------

def has_min_length(password: str) -> bool:
    return len(password) >= MIN_LENGTH


def has_uppercase(password: str) -> bool:
    return any(ch in UPPERCASE for ch in password)


def has_lowercase(password: str) -> bool:
    return any(ch in LOWERCASE for ch in password)


def has_digit(password: str) -> bool:
    return any(ch in DIGITS for ch in password)


def has_symbol(password: str) -> bool:
    return any(ch in SYMBOLS for ch in password)


def is_common_password(password: str) -> bool:
    """Containment in either direction against the blocklist.

    "password123" hits because it contains "password"; "pass" hits because it
    is contained in "password". The empty string is treated as not common.
    """
    if not password:
        return False
    lowered = password.lower()
    return any(common in lowered or lowered in common for common in COMMON_PASSWORDS)


# ---------------- Pattern detectors ----------------

def has_repeated_characters(password: str) -> bool:
    """Any single character three or more times in a row."""
    return _REPEAT_RE.search(password) is not None


def has_sequential_characters(password: str) -> bool:
    lowered = password.lower()
    for window in SEQUENCE_WINDOWS:
        if window in lowered or window[::-1] in lowered:
            return True
    return False


def has_keyboard_pattern(password: str) -> bool:
    lowered = password.lower()
    return any(pattern in lowered for pattern in KEYBOARD_PATTERNS)
