from __future__ import annotations

import math

from pwmeter.core.password_checks import has_digit, has_lowercase, has_symbol, has_uppercase
from pwmeter.core.password_tables import (
    CHARSET_SIZE_DIGITS,
    CHARSET_SIZE_LOWERCASE,
    CHARSET_SIZE_SYMBOLS,
    CHARSET_SIZE_UPPERCASE,
)


GUESSES_PER_SECOND = 1e9
CRACK_TIME_INSTANT = "instant"

SECONDS_PER_MINUTE = 60.0
SECONDS_PER_HOUR = 60.0 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24.0 * SECONDS_PER_HOUR
SECONDS_PER_YEAR = 365.0 * SECONDS_PER_DAY
# N centuries counts 100-year units; the centuries bucket starts at 1000 years.
SECONDS_PER_CENTURY = 100.0 * SECONDS_PER_YEAR
CENTURIES_THRESHOLD_SECONDS = 1000.0 * SECONDS_PER_YEAR
# Century counts from here on print as "1.23e+15 centuries".
SCIENTIFIC_CENTURIES_THRESHOLD = 1e15

# 2.0 ** 1024 overflows a double.
_MAX_FLOAT_EXPONENT = 1024.0

_TIME_BUCKETS: tuple[tuple[float, float, str], ...] = (
    (SECONDS_PER_MINUTE, 1.0, "seconds"),
    (SECONDS_PER_HOUR, SECONDS_PER_MINUTE, "minutes"),
    (SECONDS_PER_DAY, SECONDS_PER_HOUR, "hours"),
    (SECONDS_PER_YEAR, SECONDS_PER_DAY, "days"),
    (CENTURIES_THRESHOLD_SECONDS, SECONDS_PER_YEAR, "years"),
)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def charset_size(password: str) -> int:
    """Sum of the class sizes for every character class present in `password`."""
    size = 0
    if has_lowercase(password):
        size += CHARSET_SIZE_LOWERCASE
    if has_uppercase(password):
        size += CHARSET_SIZE_UPPERCASE
    if has_digit(password):
        size += CHARSET_SIZE_DIGITS
    if has_symbol(password):
        size += CHARSET_SIZE_SYMBOLS
    return size


def estimate_entropy_bits(password: str) -> float:
    size = charset_size(password)
    if not password or size == 0:
        return 0.0
    return float(len(password)) * math.log2(size)


def estimate_crack_seconds(entropy_bits: float) -> float:
    """Average brute-force time: half the keyspace at GUESSES_PER_SECOND.

    Returns `math.inf` when the keyspace does not fit in a float.
    """
    if entropy_bits <= 0:
        return 0.0
    if entropy_bits >= _MAX_FLOAT_EXPONENT:
        return math.inf
    total_combinations = 2.0 ** entropy_bits
    average_guesses = total_combinations / 2.0
    return average_guesses / GUESSES_PER_SECOND


def format_crack_time(entropy_bits: float) -> str:
    if entropy_bits <= 0:
        return CRACK_TIME_INSTANT
    seconds = estimate_crack_seconds(entropy_bits)
    if math.isinf(seconds):
        return _format_scientific_centuries(entropy_bits)
    if seconds < 1.0:
        return CRACK_TIME_INSTANT
    for upper_bound, unit_seconds, unit in _TIME_BUCKETS:
        if seconds < upper_bound:
            return f"{round_half_up(seconds / unit_seconds)} {unit}"
    centuries = seconds / SECONDS_PER_CENTURY
    if centuries >= SCIENTIFIC_CENTURIES_THRESHOLD:
        return _format_scientific_centuries(entropy_bits)
    return f"{round_half_up(centuries)} centuries"


def _format_scientific_centuries(entropy_bits: float) -> str:
    log10_centuries = (
        (entropy_bits - 1.0) * math.log10(2.0)
        - math.log10(GUESSES_PER_SECOND)
        - math.log10(SECONDS_PER_CENTURY)
    )
    exponent = int(math.floor(log10_centuries))
    mantissa = 10.0 ** (log10_centuries - exponent)
    if round(mantissa, 2) >= 10.0:
        mantissa /= 10.0
        exponent += 1
    return f"{mantissa:.2f}e+{exponent} centuries"
