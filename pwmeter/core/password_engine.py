#!/usr/bin/env python3
r"""
password_engine.py — class-covering random password generator (OS CSPRNG)

Every enabled character class contributes at least one character; the rest
are drawn from the combined charset and the whole sequence is shuffled.
"""
from __future__ import annotations

import os
import secrets
from typing import Sequence

from pwmeter.core.error_dialect import INVALID_LENGTH, NO_CHARACTER_CLASSES, InvalidConfig
from pwmeter.core.models import GeneratorConfig
from pwmeter.core.password_tables import CHARACTER_CLASSES


# ---------------- Random source ----------------

def secure_random_bytes(n: int) -> bytes:
    try:
        data = os.urandom(n)
    except OSError as exc:
        raise OSError(f"OS CSPRNG failure requesting {n} byte(s): {exc}") from exc
    if len(data) != n:
        raise OSError(f"OS CSPRNG returned unexpected byte count ({len(data)} != {n})")
    return data


def assert_csprng_ready() -> None:
    """Fail early when the OS random source is unusable."""
    secure_random_bytes(16)


def random_char(alphabet: str) -> str:
    if not alphabet:
        raise ValueError("alphabet is empty")
    # `secrets.choice` is unbiased for arbitrary alphabet lengths.
    return secrets.choice(alphabet)


def shuffle_chars(chars: Sequence[str]) -> list[str]:
    """Fisher-Yates shuffle returning a new list."""
    out = list(chars)
    for i in range(len(out) - 1, 0, -1):
        j = secrets.randbelow(i + 1)
        out[i], out[j] = out[j], out[i]
    return out


# ---------------- Password mode ----------------

def enabled_alphabets(config: GeneratorConfig) -> list[str]:
    return [
        char_class.generator_chars
        for char_class, enabled in zip(CHARACTER_CLASSES, config.enabled_flags())
        if enabled
    ]


def validate_config(config: GeneratorConfig) -> None:
    if not any(config.enabled_flags()):
        raise InvalidConfig("select at least one character type", NO_CHARACTER_CLASSES)
    if isinstance(config.length, bool) or not isinstance(config.length, int):
        raise InvalidConfig("length must be an integer", INVALID_LENGTH)
    if config.length < 1:
        raise InvalidConfig("length must be >= 1", INVALID_LENGTH)


def generate_password(config: GeneratorConfig) -> str:
    validate_config(config)
    alphabets = enabled_alphabets(config)
    charset = "".join(alphabets)

    chars = [random_char(alphabet) for alphabet in alphabets]
    # When length < number of enabled classes the guaranteed picks win.
    for _ in range(config.length - len(chars)):
        chars.append(random_char(charset))

    return "".join(shuffle_chars(chars))
