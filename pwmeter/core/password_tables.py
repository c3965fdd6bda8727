"""Static lookup tables shared by the analyzer and the generator.

Everything here is built once at import time and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
import string


MIN_LENGTH = 8
LENGTH_BONUS_THRESHOLDS: tuple[int, ...] = (8, 12, 16)

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits
# Analyzer symbol class: all 32 ASCII punctuation characters.
SYMBOLS = string.punctuation
# Generator symbol set; every character here is also in SYMBOLS.
GENERATOR_SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?/~`"

CHARSET_SIZE_LOWERCASE = 26
CHARSET_SIZE_UPPERCASE = 26
CHARSET_SIZE_DIGITS = 10
CHARSET_SIZE_SYMBOLS = 32


@dataclass(frozen=True)
class CharacterClass:
    name: str
    generator_chars: str
    charset_size: int


# Fixed class order used for charset assembly and guaranteed-coverage picks.
CHARACTER_CLASSES: tuple[CharacterClass, ...] = (
    CharacterClass("lowercase", LOWERCASE, CHARSET_SIZE_LOWERCASE),
    CharacterClass("uppercase", UPPERCASE, CHARSET_SIZE_UPPERCASE),
    CharacterClass("digits", DIGITS, CHARSET_SIZE_DIGITS),
    CharacterClass("symbols", GENERATOR_SYMBOLS, CHARSET_SIZE_SYMBOLS),
)


COMMON_PASSWORDS: tuple[str, ...] = (
    "password",
    "123456",
    "password123",
    "admin",
    "qwerty",
    "letmein",
    "welcome",
    "monkey",
    "dragon",
    "pass",
    "master",
    "hello",
    "freedom",
    "whatever",
    "qazwsx",
    "trustno1",
    "jordan",
    "harley",
    "1234567890",
    "987654321",
    "superman",
    "batman",
    "michael",
    "jennifer",
    "shadow",
    "123abc",
    "abc123",
    "password1",
    "sunshine",
    "princess",
    "charlie",
    "rockyou",
    "12345678",
    "donald",
    "login",
    "master123",
)


def _three_windows(alphabet: str) -> tuple[str, ...]:
    return tuple(alphabet[i : i + 3] for i in range(len(alphabet) - 2))


# "012" .. "789" and "abc" .. "xyz"; reversed runs are checked by the detector.
SEQUENCE_WINDOWS: tuple[str, ...] = _three_windows(DIGITS) + _three_windows(LOWERCASE)

KEYBOARD_PATTERNS: tuple[str, ...] = ("qwerty", "asdfgh", "zxcvbn", "1234567890")


@dataclass(frozen=True)
class StrengthBand:
    min_score: int
    max_score: int
    label: str
    color: str
    description: str

    def contains(self, score: int) -> bool:
        return self.min_score <= score <= self.max_score


STRENGTH_BANDS: tuple[StrengthBand, ...] = (
    StrengthBand(0, 30, "Very Weak", "#ff4444", "Easily cracked in seconds"),
    StrengthBand(31, 50, "Weak", "#ff8800", "Could be cracked in minutes"),
    StrengthBand(51, 70, "Medium", "#ffaa00", "Moderate security, could take hours"),
    StrengthBand(71, 85, "Strong", "#88cc00", "Good security, could take days"),
    StrengthBand(86, 100, "Very Strong", "#44aa44", "Excellent security, could take years"),
)


PASSWORD_TIPS: tuple[str, ...] = (
    "Use at least 12-16 characters for optimal security",
    "Mix uppercase, lowercase, numbers, and symbols",
    "Avoid common words, names, or dictionary terms",
    "Don't use personal information like birthdays or names",
    "Consider using passphrases with random words",
    "Use a unique password for each account",
    "Consider using a password manager",
    "Avoid keyboard patterns like 'qwerty' or '123456'",
    "Don't reuse passwords across multiple sites",
    "Update passwords regularly, especially after breaches",
)
